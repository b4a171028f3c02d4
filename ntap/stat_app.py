"""State of the network statistics view."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from ntap.live_app import _next_row, _previous_row
from ntap.tabs import TableState, TabsState


@dataclass
class StatApp:
    """Statistics on a single tab, tracking hosts, processes and connections.

    ``netstat_data`` is the running aggregate; it must offer
    ``merge(data, interval)``, ``get_remote_hosts(limit)``,
    ``get_processes(limit)`` and ``get_connections(limit)``.
    """

    title: str
    enhanced_graphics: bool
    config: Any
    netstat_data: Any
    should_pause: bool = False
    should_quit: bool = False
    tabs: TabsState = field(default_factory=lambda: TabsState(["Network Statistics"]))
    table_state: TableState = field(default_factory=TableState)
    remote_hosts: list = field(default_factory=list)
    processes: list = field(default_factory=list)
    connections: list = field(default_factory=list)
    app_protocols: list = field(default_factory=list)

    def _row_count(self) -> int:
        tables = {1: self.remote_hosts, 2: self.connections}
        return len(tables.get(self.tabs.index, ()))

    def on_up(self) -> None:
        """Select the previous row of the active table; no-op on the overview tab."""
        if self.tabs.index == 0:
            return
        self.table_state.select(_previous_row(self.table_state.selected, self._row_count()))

    def on_down(self) -> None:
        """Select the next row of the active table; no-op on the overview tab."""
        if self.tabs.index == 0:
            return
        self.table_state.select(_next_row(self.table_state.selected, self._row_count()))

    def on_right(self) -> None:
        self.tabs.next()

    def on_left(self) -> None:
        self.tabs.previous()

    def on_tab(self) -> None:
        self.tabs.next()

    def on_shift_tab(self) -> None:
        self.tabs.previous()

    def on_key(self, c: str) -> None:
        """Handle a character key: ``q`` quits, space pauses, ``t`` toggles bandwidth display."""
        if c == "q":
            self.should_quit = True
        elif c == " ":
            self.should_pause = not self.should_pause
        elif c == "t":
            display = self.config.display
            display.show_bandwidth = not display.show_bandwidth

    def on_tick(self, netstat_data: Any) -> None:
        """Merge a fresh snapshot and refresh hosts, processes and connections."""
        interval = timedelta(milliseconds=self.config.display.tick_rate)
        self.netstat_data.merge(netstat_data, interval)
        self.remote_hosts = self.netstat_data.get_remote_hosts(None)
        self.processes = self.netstat_data.get_processes(None)
        self.connections = self.netstat_data.get_connections(None)