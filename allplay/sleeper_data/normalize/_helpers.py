"""Shared value coercion for loosely-typed Sleeper payloads."""

from __future__ import annotations

import math
from typing import Any


def coerce_points(value: Any) -> float:
    """Numeric points, or ``0.0`` for missing, non-numeric or non-finite values."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        points = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(points):
        return 0.0
    return points


def coerce_roster_id(value: Any) -> int | None:
    """Integer roster id, or ``None`` when the value cannot be one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None
