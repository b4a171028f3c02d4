"""State of the live packet capture view, and row navigation helpers shared by every view."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ntap.tabs import TableState, TabsState


def _previous_row(selected: Optional[int], row_count: int) -> int:
    """Row above ``selected``, wrapping from the first row to the last."""
    if selected is None:
        return 0
    if selected == 0:
        return max(row_count - 1, 0)
    return selected - 1


def _next_row(selected: Optional[int], row_count: int) -> int:
    """Row below ``selected``, wrapping from the last row to the first."""
    if selected is None or selected >= row_count - 1:
        return 0
    return selected + 1


@dataclass
class LiveApp:
    """Holds captured packets and the user's navigation state."""

    title: str
    enhanced_graphics: bool
    config: Any
    should_pause: bool = False
    should_quit: bool = False
    tabs: TabsState = field(default_factory=lambda: TabsState(["PacketCapture"]))
    table_state: TableState = field(default_factory=TableState)
    row_selecting: bool = False
    packets: list = field(default_factory=list)

    def _select_last(self) -> None:
        self.table_state.select(len(self.packets) - 1 if self.packets else None)

    def on_up(self) -> None:
        """Select the previous row, wrapping to the last."""
        self.row_selecting = True
        self.table_state.select(_previous_row(self.table_state.selected, len(self.packets)))

    def on_down(self) -> None:
        """Select the next row, wrapping to the first."""
        self.row_selecting = True
        self.table_state.select(_next_row(self.table_state.selected, len(self.packets)))

    def on_right(self) -> None:
        self.tabs.next()

    def on_left(self) -> None:
        self.tabs.previous()

    def on_tab(self) -> None:
        self.tabs.next()

    def on_shift_tab(self) -> None:
        self.tabs.previous()

    def on_key(self, c: str) -> None:
        """Handle a character key: ``q`` quits, space toggles pause, ``b`` jumps to the bottom."""
        if c == "q":
            self.should_quit = True
        elif c == " ":
            self.should_pause = not self.should_pause
        elif c == "b":
            self._select_last()
            self.row_selecting = False

    def on_tick(self, packets: list) -> None:
        """Replace the packet list; follow the newest one unless a row is being selected."""
        self.packets = list(packets)
        if not self.row_selecting:
            self._select_last()