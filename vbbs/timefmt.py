"""Formatting of stored timestamps for display."""

from __future__ import annotations

import time

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_time(timestamp: int) -> str:
    """Render a 32-bit Unix timestamp as local 'DD Mon YYYY HH:MM:SS'."""
    tm = time.localtime(int(timestamp) & 0xFFFFFFFF)
    return (
        f"{tm.tm_mday:02d} {_MONTHS[tm.tm_mon - 1]:>3} {tm.tm_year:04d} "
        f"{tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d}"
    )