"""Public package exports for the all-play standings data layer."""

from .config import DashboardConfig, load_config
from .league_dashboard import LeagueDashboard
from .schema import models as schema_models
from .standings import compute_standings

__all__ = [
    "DashboardConfig",
    "LeagueDashboard",
    "compute_standings",
    "load_config",
    "schema_models",
]
