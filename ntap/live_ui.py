"""Screen layout of the live packet capture view."""

from __future__ import annotations

from typing import Any

from rich.layout import Layout
from rich.text import Text

from ntap import rows

FOOTER = (
    "Press <Q> to quit, <SPACE> to pause, <Up>/<Down> to scroll, "
    "<B> to scroll to the bottom"
)


def draw(app: Any) -> Layout:
    """Build the whole screen for the live capture view."""
    if app.tabs.index == 0:
        body = rows.TablePanel(
            title=rows.capture_title(app.config.network.interfaces),
            headers=rows.PACKET_HEADERS,
            widths=rows.PACKET_WIDTHS,
            rows=[rows.packet_row(packet) for packet in app.packets],
            selected=app.table_state.selected,
        )
    else:
        body = Text("")
    return rows.screen(rows.tab_bar(app.tabs, app.title, app.should_pause), body, FOOTER)