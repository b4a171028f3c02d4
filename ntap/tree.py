"""Labels for nodes of printed trees."""

from __future__ import annotations


def node_label(label: str, value: str | None = None, delimiter: str | None = None) -> str:
    """Return ``label`` alone, or ``"<label><delimiter> <value>"`` when a value is given.

    The delimiter defaults to ``":"``.
    """
    if value is None:
        return label
    if delimiter is None:
        delimiter = ":"
    return f"{label}{delimiter} {value}"