"""Row text and shared table rendering for the terminal views."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Sequence

from rich.console import Console, ConsoleOptions, RenderResult
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

HOST_HEADERS = ("IP Address", "↓ Bytes", "↑ Bytes", "Country", "ASN", "AS Name")
HOST_WIDTHS = (40, 11, 11, 8, 8, 24)
CONNECTION_HEADERS = (
    "Protocol",
    "Local Socket",
    "Remote Socket",
    "↓ Bytes",
    "↑ Bytes",
    "PID",
    "Process Name",
)
CONNECTION_WIDTHS = (8, 46, 46, 11, 11, 5, 20)
PROCESS_HEADERS = ("PID", "Process Name", "↓ Bytes", "↑ Bytes")
PROCESS_WIDTHS = (10, 20, 11, 11)
PACKET_HEADERS = (
    "No.",
    "Timestamp",
    "SRC Address",
    "DST Address",
    "Protocol",
    "Length",
    "SRC Port",
    "DST Port",
    "Interface",
)
PACKET_WIDTHS = (6, 16, 40, 40, 8, 8, 8, 8, 38)

HIGHLIGHT_SYMBOL = ">>"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _protocol_name(protocol: Any) -> str:
    if isinstance(protocol, Enum):
        return protocol.value if isinstance(protocol.value, str) else protocol.name
    return str(protocol)


def traffic_columns(traffic: Any, show_bandwidth: bool) -> tuple[str, str]:
    """Return the (ingress, egress) text: rates when ``show_bandwidth``, totals otherwise."""
    if show_bandwidth:
        return traffic.formatted_ingress_bytes_per_sec, traffic.formatted_egress_bytes_per_sec
    return traffic.formatted_received_bytes, traffic.formatted_sent_bytes


def host_row(host: Any, show_bandwidth: bool) -> list[str]:
    """Cells of a remote host row, in ``HOST_HEADERS`` order."""
    ingress, egress = traffic_columns(host.traffic, show_bandwidth)
    return [
        str(host.ip_addr),
        ingress,
        egress,
        _text(host.country_code),
        str(host.asn),
        _text(host.as_name),
    ]


def connection_row(conn: Any, show_bandwidth: bool) -> list[str]:
    """Cells of a connection row, in ``CONNECTION_HEADERS`` order."""
    ingress, egress = traffic_columns(conn.traffic, show_bandwidth)
    process = conn.process
    pid = "" if process is None else str(process.pid)
    name = "" if process is None else _text(process.name)
    return [
        _protocol_name(conn.protocol),
        f"{conn.local_ip_addr}:{conn.local_port}",
        f"{_text(conn.remote_ip_addr)}:{_text(conn.remote_port)}",
        ingress,
        egress,
        pid,
        name,
    ]


def process_row(proc: Any, show_bandwidth: bool) -> list[str]:
    """Cells of a process row, in ``PROCESS_HEADERS`` order."""
    ingress, egress = traffic_columns(proc.traffic, show_bandwidth)
    return [str(proc.pid), _text(proc.name), ingress, egress]


def packet_row(packet: Any) -> list[str]:
    """Cells of a captured packet row, in ``PACKET_HEADERS`` order."""
    return [
        str(packet.capture_no),
        packet.get_time(),
        packet.get_src_addr(),
        packet.get_dst_addr(),
        packet.get_protocol(),
        str(packet.packet_len),
        packet.get_src_port(),
        packet.get_dst_port(),
        _text(packet.if_name),
    ]


def capture_title(interfaces: Sequence[str]) -> str:
    """Title of the capture table for the chosen interfaces."""
    if not interfaces:
        return "Capturing from all available interfaces"
    return f"Capturing from {', '.join(interfaces)}"


def tabs_title(title: str, paused: bool) -> str:
    """Title of the tab bar, noting when the view is paused."""
    if paused:
        return f"{title} [Paused] press <SPACE> to resume"
    return title


@dataclass
class TablePanel:
    """A bordered table that shows as many rows as fit, keeping the selected row in view."""

    title: str
    headers: Sequence[str]
    widths: Sequence[int]
    rows: list[list[str]] = field(default_factory=list)
    selected: int | None = None

    def visible_rows(self, height: int | None) -> tuple[int, list[list[str]]]:
        """Return the offset of the first shown row and the rows that fit in ``height`` lines."""
        if height is None:
            return 0, list(self.rows)
        capacity = max(height - 3, 0)
        offset = 0
        if self.selected is not None and self.selected >= capacity:
            offset = self.selected - capacity + 1
        return offset, self.rows[offset : offset + capacity]

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        height = options.height
        offset, shown = self.visible_rows(height)
        marker = self.selected is not None
        table = Table(
            box=None,
            show_header=True,
            header_style="bold",
            padding=(0, 1, 0, 0),
            pad_edge=False,
            show_edge=False,
        )
        if marker:
            table.add_column("", width=len(HIGHLIGHT_SYMBOL), no_wrap=True)
        for header, width in zip(self.headers, self.widths):
            table.add_column(header, width=width, no_wrap=True, overflow="ellipsis")
        for position, cells in enumerate(shown, start=offset):
            chosen = position == self.selected
            prefix = [Text(HIGHLIGHT_SYMBOL if chosen else "")] if marker else []
            table.add_row(
                *prefix,
                *(Text(cell) for cell in cells),
                style="reverse" if chosen else None,
            )
        yield Panel(table, title=Text(self.title), title_align="left", height=height)


def tab_bar(tabs: Any, title: str, paused: bool) -> Panel:
    """Bordered bar of tab titles with the active one highlighted."""
    text = Text()
    for position, name in enumerate(tabs.titles):
        if position:
            text.append(" │ ")
        text.append(name, style="bright_blue" if position == tabs.index else "green")
    return Panel(
        text,
        title=Text(tabs_title(title, paused)),
        title_align="left",
        style="yellow" if paused else "none",
    )


def screen(header: Any, body: Any, footer: str) -> Layout:
    """Full-screen layout: a three-line header, the body, and a one-line footer."""
    root = Layout(name="root")
    root.split_column(
        Layout(header, name="tabs", size=3),
        Layout(body if body is not None else Text(""), name="body"),
        Layout(Text(footer, style="bright_black"), name="footer", size=1),
    )
    return root


def lines(rows: Iterable[Sequence[str]]) -> list[str]:
    """Join each row's cells with single spaces, for plain-text output."""
    return [" ".join(row) for row in rows]