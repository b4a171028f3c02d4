"""Terminal event loop shared by the live, monitor and statistics views."""

from __future__ import annotations

import sys
import time
from datetime import timedelta
from typing import Any, Callable

from blessed import Terminal
from rich.console import Console
from rich.live import Live

_NAMED_KEYS = {
    "KEY_LEFT": "on_left",
    "KEY_UP": "on_up",
    "KEY_RIGHT": "on_right",
    "KEY_DOWN": "on_down",
    "KEY_TAB": "on_tab",
    "KEY_BTAB": "on_shift_tab",
}

_CHAR_KEYS = {
    "a": "on_left",
    "w": "on_up",
    "d": "on_right",
    "s": "on_down",
    "\t": "on_tab",
}


def _key_name(key: Any) -> str | None:
    if getattr(key, "is_sequence", False):
        return key.name
    text = str(key)
    if text.startswith("KEY_"):
        return text
    return None


def dispatch_key(app: Any, key: Any) -> bool:
    """Route one key press to the matching handler of ``app``.

    ``key`` is a keystroke as read from the terminal, or a plain string:
    a single character, or a key name such as ``"KEY_LEFT"``.
    Returns whether the key reached a handler.
    """
    name = _key_name(key)
    if name is not None:
        handler = _NAMED_KEYS.get(name)
        if handler is None:
            return False
        getattr(app, handler)()
        return True

    text = str(key)
    if len(text) != 1:
        return False
    handler = _CHAR_KEYS.get(text)
    if handler is not None:
        getattr(app, handler)()
    else:
        app.on_key(text)
    return True


def _event_loop(
    app: Any,
    fetch: Callable[[], Any],
    render: Callable[[Any], None],
    read_key: Callable[[float], Any],
    prune: Callable[[timedelta], None] | None,
    draw: Callable[[Any], Any],
    clock: Callable[[], float] = time.monotonic,
) -> None:
    tick_rate = app.config.display.tick_rate / 1000.0
    entry_ttl = (
        timedelta(milliseconds=app.config.network.entry_ttl) if prune is not None else None
    )
    last_tick = clock()
    last_clear = clock()
    while True:
        if entry_ttl is not None and clock() - last_clear >= entry_ttl.total_seconds():
            prune(entry_ttl)
            last_clear = clock()

        if clock() - last_tick >= tick_rate:
            if not app.should_pause:
                app.on_tick(fetch())
            last_tick = clock()

        render(draw(app))

        timeout = max(tick_rate - (clock() - last_tick), 0.0)
        key = read_key(timeout)
        if key:
            dispatch_key(app, key)

        if app.should_quit:
            return


def run(app: Any, fetch: Callable[[], Any], draw: Callable[[Any], Any], prune=None) -> None:
    """Run ``app`` full screen until the user quits.

    Every tick, unless paused, ``fetch()`` supplies fresh data to
    ``app.on_tick``. When ``prune`` is given it is called with the entry
    time-to-live each time that much time has passed. ``draw(app)`` builds
    the screen. Terminal errors during the loop are reported on stderr.
    """
    term = Terminal()
    console = Console()
    with term.cbreak(), Live(
        console=console, screen=True, auto_refresh=False, transient=True
    ) as live:

        def render(renderable: Any) -> None:
            live.update(renderable, refresh=True)

        def read_key(timeout: float) -> Any:
            return term.inkey(timeout=timeout)

        try:
            _event_loop(app, fetch, render, read_key, prune, draw)
        except OSError as err:
            error = err
        else:
            error = None
    if error is not None:
        print(repr(error), file=sys.stderr)