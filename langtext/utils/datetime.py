"""Time utilities."""

from __future__ import annotations

import time


def monotonic_time() -> float:
    """Clock used to rank cache entries; unaffected by wall-clock changes."""

    return time.monotonic()


__all__ = ["monotonic_time"]
