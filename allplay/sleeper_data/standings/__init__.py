"""All-play standings aggregation."""

from .accumulator import (
    SeasonAccumulator,
    compute_standings,
    compute_weekly_all_play,
    has_uneven_participation,
)

__all__ = [
    "SeasonAccumulator",
    "compute_standings",
    "compute_weekly_all_play",
    "has_uneven_participation",
]
