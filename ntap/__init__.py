"""State, screen layout and key handling for terminal views of network traffic."""

__version__ = "0.7.0"