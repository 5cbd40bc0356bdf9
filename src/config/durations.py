# src/config/durations.py — v1
"""Parse human durations such as '2h', '30m' or '1h30m' into seconds."""

from __future__ import annotations

import re

_UNITS = {"d": 86_400, "h": 3_600, "m": 60, "s": 1, "ms": 0.001}
_PART = re.compile(r"(\d+(?:\.\d+)?)\s*(ms|d|h|m|s)", re.IGNORECASE)


def parse_duration(value: str | int | float) -> float:
    """Parse a duration into seconds.

    Plain numbers are seconds. Strings combine number+unit parts from
    d, h, m, s and ms, e.g. '1d', '90s', '1h30m'.

    Raises:
        ValueError: If the value is not a valid duration.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)

    text = value.strip()
    if re.fullmatch(r"\d+(?:\.\d+)?", text):
        return float(text)

    compact = re.sub(r"\s+", "", text)
    if not compact or _PART.sub("", compact):
        raise ValueError(
            f"Invalid duration format: {value!r}. Use e.g. '2h', '30m' or '1h30m'."
        )
    return sum(
        float(number) * _UNITS[unit.lower()]
        for number, unit in _PART.findall(compact)
    )
