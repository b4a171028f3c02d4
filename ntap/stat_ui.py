"""Screen layout of the network statistics view."""

from __future__ import annotations

from typing import Any

from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from ntap.rows import (
    CONNECTION_HEADERS,
    CONNECTION_WIDTHS,
    HOST_HEADERS,
    HOST_WIDTHS,
    PROCESS_HEADERS,
    PROCESS_WIDTHS,
    TablePanel,
    connection_row,
    host_row,
    process_row,
    screen,
    tab_bar,
)

FOOTER = "Press <Q> to quit, <SPACE> to pause, <T> to toggle bandwidth display"


def _summary(app: Any) -> Layout:
    traffic = app.netstat_data.traffic
    if app.config.display.show_bandwidth:
        ingress = (traffic.formatted_ingress_packets_per_sec(), traffic.formatted_ingress_bytes_per_sec())
        egress = (traffic.formatted_egress_packets_per_sec(), traffic.formatted_egress_bytes_per_sec())
    else:
        ingress = (str(traffic.packet_received), traffic.formatted_received_bytes())
        egress = (str(traffic.packet_sent), traffic.formatted_sent_bytes())

    def panel(title: str, values: tuple[str, str]) -> Panel:
        packets, size = values
        return Panel(Text(f"Packets: {packets}\nBytes: {size}"), title=title, title_align="left")

    summary = Layout(name="summary", size=4)
    summary.split_row(
        Layout(panel("↓ Total Ingress", ingress), name="ingress"),
        Layout(panel("↑ Total Egress", egress), name="egress"),
    )
    return summary


def _top_data(app: Any) -> Layout:
    display = app.config.display
    bandwidth = display.show_bandwidth
    hosts = TablePanel(
        "Top Remote Addresses",
        HOST_HEADERS[:3],
        HOST_WIDTHS[:3],
        [host_row(host, bandwidth)[:3] for host in app.remote_hosts[: display.top_remote_hosts]],
    )
    processes = TablePanel(
        "Top Processes",
        PROCESS_HEADERS,
        PROCESS_WIDTHS,
        [process_row(proc, bandwidth) for proc in app.processes[: display.top_remote_hosts]],
    )
    connections = TablePanel(
        "Top Connections",
        CONNECTION_HEADERS,
        CONNECTION_WIDTHS,
        [connection_row(conn, bandwidth) for conn in app.connections[: display.connection_count]],
    )
    upper = Layout(name="upper")
    upper.split_row(Layout(hosts, name="hosts"), Layout(processes, name="processes"))
    top = Layout(name="top")
    top.split_column(upper, Layout(connections, name="connections"))
    return top


def draw(app: Any) -> Layout:
    """Build the whole screen for the statistics view."""
    if app.tabs.index == 0:
        body: Any = Layout(name="overview")
        body.split_column(_summary(app), _top_data(app))
    else:
        body = Text("")
    return screen(tab_bar(app.tabs, app.title, app.should_pause), body, FOOTER)