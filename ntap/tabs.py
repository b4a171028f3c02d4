"""Tab and table selection state shared by the terminal views."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TabsState:
    """An ordered set of tab titles and the index of the active tab."""

    titles: list[str] = field(default_factory=list)
    index: int = 0

    def next(self) -> None:
        """Activate the following tab, wrapping round to the first."""
        if not self.titles:
            raise IndexError("no tabs to select")
        self.index = (self.index + 1) % len(self.titles)

    def previous(self) -> None:
        """Activate the preceding tab, wrapping round to the last."""
        if not self.titles:
            raise IndexError("no tabs to select")
        if self.index > 0:
            self.index -= 1
        else:
            self.index = len(self.titles) - 1


@dataclass
class TableState:
    """The selected row of a table, if any."""

    selected: int | None = None

    def select(self, index: int | None) -> None:
        """Select the row at ``index``, or clear the selection with ``None``."""
        self.selected = index