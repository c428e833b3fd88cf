"""Shared utility functions."""
from __future__ import annotations


def parse_number(text: str) -> int | float:
    """Parse decimal text as an int when it has no fraction, else a float."""
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_assignments(pairs: list[str] | None) -> dict[str, int | float]:
    """Turn ``["DEX=3", "STR=-1"]`` into ``{"DEX": 3, "STR": -1}``.

    Raises ValueError on a malformed pair.
    """
    values: dict[str, int | float] = {}
    for pair in pairs or []:
        name, sep, raw = pair.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Expected NAME=VALUE, got {pair!r}")
        try:
            values[name] = parse_number(raw)
        except ValueError:
            raise ValueError(f"Value for {name!r} is not a number: {raw!r}") from None
    return values
