"""Screen layout of the network monitor view."""

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
    TablePanel,
    connection_row,
    host_row,
    screen,
    tab_bar,
)

FOOTER = (
    "Press <Q> to quit, <TAB> to switch tabs, <SPACE> to pause, "
    "<T> to toggle bandwidth display, <Up>/<Down> to scroll"
)


def _summary_panel(title: str, packets: str, size: str) -> Panel:
    return Panel(Text(f"Packets: {packets}\nBytes: {size}"), title=title, title_align="left")


def _summary(app: Any) -> Layout:
    traffic = app.netstat_data.traffic
    if app.config.display.show_bandwidth:
        ingress = (
            traffic.formatted_ingress_packets_per_sec(),
            traffic.formatted_ingress_bytes_per_sec(),
        )
        egress = (
            traffic.formatted_egress_packets_per_sec(),
            traffic.formatted_egress_bytes_per_sec(),
        )
    else:
        ingress = (str(traffic.packet_received), traffic.formatted_received_bytes())
        egress = (str(traffic.packet_sent), traffic.formatted_sent_bytes())

    summary = Layout(name="summary", size=4)
    summary.split_row(
        Layout(_summary_panel("↓ Total Ingress", *ingress), name="ingress"),
        Layout(_summary_panel("↑ Total Egress", *egress), name="egress"),
    )
    return summary


def _top_data(app: Any) -> Layout:
    display = app.config.display
    bandwidth = display.show_bandwidth
    hosts = TablePanel(
        "Top Remote Addresses",
        HOST_HEADERS,
        HOST_WIDTHS,
        [host_row(host, bandwidth) for host in app.remote_hosts[: display.top_remote_hosts]],
    )
    connections = TablePanel(
        "Top Connections",
        CONNECTION_HEADERS,
        CONNECTION_WIDTHS,
        [connection_row(conn, bandwidth) for conn in app.connections[: display.connection_count]],
    )
    top = Layout(name="top")
    top.split_column(Layout(hosts, name="hosts"), Layout(connections, name="connections"))
    return top


def _overview(app: Any) -> Layout:
    overview = Layout(name="overview")
    overview.split_column(_summary(app), _top_data(app))
    return overview


def _remote_hosts_table(app: Any) -> TablePanel:
    bandwidth = app.config.display.show_bandwidth
    return TablePanel(
        "Remote Addresses",
        HOST_HEADERS,
        HOST_WIDTHS,
        [host_row(host, bandwidth) for host in app.remote_hosts],
        selected=app.table_state.selected,
    )


def _connections_table(app: Any) -> TablePanel:
    bandwidth = app.config.display.show_bandwidth
    return TablePanel(
        "Connections",
        CONNECTION_HEADERS,
        CONNECTION_WIDTHS,
        [connection_row(conn, bandwidth) for conn in app.connections],
        selected=app.table_state.selected,
    )


def draw(app: Any) -> Layout:
    """Build the whole screen for the monitor view."""
    index = app.tabs.index
    if index == 0:
        body: Any = _overview(app)
    elif index == 1:
        body = _remote_hosts_table(app)
    elif index == 2:
        body = _connections_table(app)
    else:
        body = Text("")
    return screen(tab_bar(app.tabs, app.title, app.should_pause), body, FOOTER)