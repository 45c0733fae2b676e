"""
Core package — parameter types, price table, shared utilities.
No business logic lives here.
"""

from .schema import TIER_PRICES, SEGMENTS, TIERS, CSV_FIELDS
from .config import TierCounts, ProjectionParameters, PARAMETER_PRESETS
from .utils import round_half_up, growth_factors, format_currency

__all__ = [
    "TIER_PRICES",
    "SEGMENTS",
    "TIERS",
    "CSV_FIELDS",
    "TierCounts",
    "ProjectionParameters",
    "PARAMETER_PRESETS",
    "round_half_up",
    "growth_factors",
    "format_currency",
]
