import io
from enum import Enum
from ipaddress import ip_address
from types import SimpleNamespace

import pytest
from rich.console import Console

from ntap.rows import (
    CONNECTION_HEADERS,
    HOST_HEADERS,
    PACKET_HEADERS,
    PROCESS_HEADERS,
    TablePanel,
    capture_title,
    connection_row,
    host_row,
    lines,
    packet_row,
    process_row,
    screen,
    tab_bar,
    tabs_title,
    traffic_columns,
)
from ntap.tabs import TabsState


def make_traffic():
    return SimpleNamespace(
        formatted_received_bytes="1 KB",
        formatted_sent_bytes="2 KB",
        formatted_ingress_bytes_per_sec="3 KB/s",
        formatted_egress_bytes_per_sec="4 KB/s",
    )


def render(renderable, width=200, height=None):
    console = Console(width=width, height=height or 25, file=io.StringIO(), record=True)
    console.print(renderable)
    return console.export_text()


class Proto(Enum):
    TCP = "TCP"


class FakePacket:
    capture_no = 7
    packet_len = 60
    if_name = "eth0"

    def get_time(self):
        return "12:00:00"

    def get_src_addr(self):
        return "10.0.0.1"

    def get_dst_addr(self):
        return "10.0.0.2"

    def get_protocol(self):
        return "UDP"

    def get_src_port(self):
        return "53"

    def get_dst_port(self):
        return "5353"


@pytest.mark.parametrize(
    "show_bandwidth, expected",
    [(False, ("1 KB", "2 KB")), (True, ("3 KB/s", "4 KB/s"))],
)
def test_traffic_columns(show_bandwidth, expected):
    assert traffic_columns(make_traffic(), show_bandwidth) == expected


def test_host_row():
    host = SimpleNamespace(
        ip_addr=ip_address("192.0.2.1"),
        traffic=make_traffic(),
        country_code="JP",
        asn=64500,
        as_name="EXAMPLE-AS",
    )
    row = host_row(host, False)
    assert row == ["192.0.2.1", "1 KB", "2 KB", "JP", "64500", "EXAMPLE-AS"]
    assert len(row) == len(HOST_HEADERS)


def test_connection_row_with_process():
    conn = SimpleNamespace(
        protocol=Proto.TCP,
        local_ip_addr=ip_address("192.0.2.10"),
        local_port=443,
        remote_ip_addr=ip_address("198.51.100.5"),
        remote_port=50000,
        process=SimpleNamespace(pid=1234, name="browser"),
        traffic=make_traffic(),
    )
    row = connection_row(conn, True)
    assert row == [
        "TCP",
        "192.0.2.10:443",
        "198.51.100.5:50000",
        "3 KB/s",
        "4 KB/s",
        "1234",
        "browser",
    ]
    assert len(row) == len(CONNECTION_HEADERS)


def test_connection_row_without_remote_or_process():
    conn = SimpleNamespace(
        protocol="UDP",
        local_ip_addr=ip_address("192.0.2.10"),
        local_port=53,
        remote_ip_addr=None,
        remote_port=None,
        process=None,
        traffic=make_traffic(),
    )
    row = connection_row(conn, False)
    assert row[0] == "UDP"
    assert row[2] == ":"
    assert row[5:] == ["", ""]


def test_process_row():
    proc = SimpleNamespace(pid=42, name="daemon", traffic=make_traffic())
    row = process_row(proc, False)
    assert row == ["42", "daemon", "1 KB", "2 KB"]
    assert len(row) == len(PROCESS_HEADERS)


def test_packet_row():
    row = packet_row(FakePacket())
    assert row == ["7", "12:00:00", "10.0.0.1", "10.0.0.2", "UDP", "60", "53", "5353", "eth0"]
    assert len(row) == len(PACKET_HEADERS)


def test_capture_title():
    assert capture_title([]) == "Capturing from all available interfaces"
    assert capture_title(["eth0", "wlan0"]) == "Capturing from eth0, wlan0"


def test_tabs_title():
    assert tabs_title("ntap", False) == "ntap"
    assert tabs_title("ntap", True) == "ntap [Paused] press <SPACE> to resume"


def test_table_panel_keeps_selection_visible():
    rows = [[f"row-{n:02d}"] for n in range(20)]
    panel = TablePanel("T", ["Name"], [10], rows, selected=19)
    offset, shown = panel.visible_rows(8)
    assert len(shown) == 5
    assert shown[-1] == ["row-19"]
    assert offset == 15


def test_table_panel_without_height_shows_all():
    rows = [[f"row-{n:02d}"] for n in range(4)]
    offset, shown = TablePanel("T", ["Name"], [10], rows).visible_rows(None)
    assert offset == 0
    assert shown == rows


def test_table_panel_renders_marker_on_selected_row():
    rows = [["alpha"], ["beta"]]
    text = render(TablePanel("Things", ["Name"], [10], rows, selected=1))
    beta_line = next(line for line in text.splitlines() if "beta" in line)
    alpha_line = next(line for line in text.splitlines() if "alpha" in line)
    assert ">>" in beta_line
    assert ">>" not in alpha_line
    assert "Things" in text


def test_tab_bar_shows_titles_and_paused_title():
    tabs = TabsState(["One", "Two"])
    text = render(tab_bar(tabs, "ntap", True))
    assert "One" in text and "Two" in text
    assert "[Paused]" in text


def test_screen_places_footer_last():
    text = render(screen(tab_bar(TabsState(["A"]), "ntap", False), None, "bye"), height=10)
    non_empty = [line for line in text.splitlines() if line.strip()]
    assert non_empty[-1].strip() == "bye"


def test_lines():
    assert lines([["a", "b"], ["c"]]) == ["a b", "c"]