"""Normalization exports."""

from .identity import (
    IdentityLookup,
    build_identity_lookup,
    coerce_identity,
    derive_identity,
    fallback_team_name,
)
from .league import derive_week_state, fallback_week_state
from .players import find_roster_row, normalize_lineup, sum_starter_projections
from .scores import enrich_week_scores, normalize_week_scores

__all__ = [
    "IdentityLookup",
    "build_identity_lookup",
    "coerce_identity",
    "derive_identity",
    "fallback_team_name",
    "derive_week_state",
    "fallback_week_state",
    "find_roster_row",
    "normalize_lineup",
    "sum_starter_projections",
    "enrich_week_scores",
    "normalize_week_scores",
]
