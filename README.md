# ntap

State, screen layout and key handling for three full-screen terminal
views of network traffic. The screens are built with `rich`; keys are
read with `blessed`.

## The views

- **Live capture**: `ntap.live_app.LiveApp`, drawn by `ntap.live_ui.draw`.
  A table of captured packets (number, timestamp, source and destination
  address, protocol, length, ports, interface). `on_tick(packets)`
  replaces the list and selects the newest packet unless the user has
  moved the selection with Up/Down; `b` jumps back to the newest packet.
- **Monitor**: `ntap.monitor_app.MonitorApp`, drawn by
  `ntap.monitor_ui.draw`. Three tabs: `Statistics` (total ingress and
  egress plus the top remote addresses and connections),
  `RemoteAddresses` and `Connections` (full, scrollable tables).
- **Statistics**: `ntap.stat_app.StatApp`, drawn by `ntap.stat_ui.draw`.
  One `Network Statistics` tab with totals, top remote addresses, top
  processes and top connections.

Each `draw(app)` returns a `rich.layout.Layout` for the whole screen.

## Keys

| Key                     | Action                                                |
|-------------------------|-------------------------------------------------------|
| `q`                     | quit                                                  |
| space                   | pause or resume updates                               |
| `t`                     | totals / bandwidth figures (monitor, statistics)      |
| `b`                     | select the newest packet (live capture)               |
| Up / `w`, Down / `s`    | move the row selection, wrapping round                |
| Left / `a`, Right / `d` | previous / next tab                                   |
| Tab, Shift+Tab          | next / previous tab                                   |

In the monitor and statistics views, Up and Down do nothing on the first
tab.

`ntap.terminal.dispatch_key(app, key)` routes one key press (a `blessed`
keystroke, a single character, or a name such as `"KEY_LEFT"`) to the
app's handler and returns whether a handler was reached.

`ntap.terminal.run(app, fetch, draw, prune=None)` runs a view full
screen until `q` is pressed. Every `config.display.tick_rate`
milliseconds, unless paused, it passes `fetch()` to `app.on_tick`; if
`prune` is given it is called with a `timedelta` of
`config.network.entry_ttl` milliseconds each time that long has passed.
Terminal errors during the loop are printed to stderr.

## What the apps expect

The apps take plain objects and only read the attributes they use:

- `config.display`: `tick_rate` (ms), `show_bandwidth`,
  `top_remote_hosts`, `connection_count`; `config.network`:
  `interfaces`, `entry_ttl` (ms).
- `MonitorApp` and `StatApp` take a `netstat_data` aggregate with
  `merge(data, interval)`, `get_remote_hosts(limit)`,
  `get_connections(limit)` (and `get_processes(limit)` for `StatApp`),
  and a `traffic` attribute for the summary panels.
- Rows are built by `ntap.rows`: `host_row`, `connection_row`,
  `process_row`, `packet_row` and `traffic_columns` describe the fields
  each record needs; `capture_title` and `tabs_title` build titles.

## Building blocks

`ntap.tabs.TabsState` cycles through tab titles with `next()` and
`previous()`; `ntap.tabs.TableState` holds the selected row.

`ntap.tree.node_label` formats a label for tree output:

```python
from ntap.tree import node_label

node_label("Interface", "eth0", None)   # "Interface: eth0"
node_label("MTU", "1500", " =")         # "MTU = 1500"
node_label("Addresses", None, None)     # "Addresses"
```

## What this package does not do

It does not capture packets, read sockets or processes, aggregate
traffic statistics, look up countries or AS numbers, or load a
configuration. It has no command to run: the caller supplies the app's
data, `fetch` and `prune`, and calls `ntap.terminal.run`.

## Requirements

Python 3.10 or later, with `rich` and `blessed`.