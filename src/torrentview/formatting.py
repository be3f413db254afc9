"""
Formatting helpers for record values.
"""

import math

_DURATION_UNITS = (
    ("d", 86400),
    ("h", 3600),
    ("m", 60),
)


def format_duration(seconds: float) -> str:
    """Format seconds into a compact duration string such as "1d 2h 3m 4s".

    Leading zero units are omitted, seconds are shown only when non-zero or
    when nothing else is. Fractional seconds are truncated.
    """
    if math.isnan(seconds):
        return "NaN"
    if math.isinf(seconds):
        return "Infinity" if seconds > 0 else "-Infinity"

    sign = "-" if seconds < 0 else ""
    remainder = int(abs(seconds))

    parts = []
    for suffix, unit_seconds in _DURATION_UNITS:
        value, remainder = divmod(remainder, unit_seconds)
        if value or parts:
            parts.append(f"{value}{suffix}")

    if remainder or not parts:
        parts.append(f"{remainder}s")

    return sign + " ".join(parts)
