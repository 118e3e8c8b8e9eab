"""Conversion between integer seconds and race clock strings."""

import re
from typing import Any

_INT_RE = re.compile(r"^\d+$")
_SECONDS_RE = re.compile(r"^\d+(?:\.\d+)?$")

# Positional weights from the right: seconds, minutes, hours
_UNIT_WEIGHTS = (1, 60, 3600)


def format_time(total_seconds: float) -> str:
    """Format seconds as M:SS, or H:MM:SS from one hour upwards.

    Negative values keep their sign (useful for signed gaps).
    """
    sign = "-" if total_seconds < 0 else ""
    total = int(abs(total_seconds))

    hours = total // 3600
    minutes = (total % 3600) // 60
    seconds = total % 60

    if hours > 0:
        return f"{sign}{hours}:{minutes:02d}:{seconds:02d}"
    return f"{sign}{minutes}:{seconds:02d}"


def parse_time(value: Any) -> int:
    """
    Parse a race clock value into whole seconds.

    Accepts "M:SS", "H:MM:SS", a bare integer string, or an int. Components
    are weighted positionally from the right, so "1:02:03" is 3723.
    Fractional seconds are truncated.

    Empty or unparseable input returns 0. Callers must treat 0 as
    "missing", not as a fast split.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if value >= 0 else 0
    if isinstance(value, float):
        return int(value) if value >= 0 else 0
    if not isinstance(value, str):
        return 0

    text = value.strip()
    if not text:
        return 0

    parts = [p.strip() for p in text.split(":")]
    if len(parts) > len(_UNIT_WEIGHTS):
        return 0

    *leading, last = parts
    if not _SECONDS_RE.match(last) or not all(_INT_RE.match(p) for p in leading):
        return 0

    components = [int(p) for p in leading] + [int(float(last))]
    return sum(
        component * weight
        for component, weight in zip(reversed(components), _UNIT_WEIGHTS)
    )
