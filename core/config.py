"""
Projection parameters.
Frozen so a parameter snapshot can key a cache; nothing here is mutated in place.
Invalid values raise ValueError on construction, so the engine never sees them.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import asdict, dataclass, field, replace
from typing import Dict

from .schema import STORE_CHANNEL

MAX_PROJECTION_MONTHS = 60


def _require_finite(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class TierCounts:
    """Client count per pricing tier within one segment."""

    basic: int = 0
    pro: int = 0
    premium: int = 0

    def __post_init__(self):
        for tier, count in self.as_dict().items():
            if isinstance(count, bool) or not isinstance(count, numbers.Integral):
                raise ValueError(f"{tier} client count must be an integer, got {count!r}")
            if count < 0:
                raise ValueError(f"{tier} client count must be non-negative, got {count}")

    @property
    def total(self) -> int:
        return self.basic + self.pro + self.premium

    def as_dict(self) -> Dict[str, int]:
        return {"basic": self.basic, "pro": self.pro, "premium": self.premium}


@dataclass(frozen=True)
class ProjectionParameters:
    projection_months: int = 12  # values below 1 are clamped by the engine

    # annual growth, in percent
    ong_growth_rate: float = 15.0
    corporate_growth_rate: float = 20.0
    store_growth_rate: float = 10.0

    initial_ong_clients: TierCounts = field(default_factory=lambda: TierCounts(10, 5, 2))
    initial_corporate_clients: TierCounts = field(default_factory=lambda: TierCounts(15, 8, 3))
    initial_store_revenue: float = 5000.0

    fixed_monthly_cost: float = 15000.0
    variable_cost_percent: float = 25.0  # share of total revenue, in percent

    def __post_init__(self):
        if isinstance(self.projection_months, bool) or not isinstance(self.projection_months, numbers.Integral):
            raise ValueError(f"projection_months must be an integer, got {self.projection_months!r}")

        for name in ("ong_growth_rate", "corporate_growth_rate", "store_growth_rate"):
            rate = _require_finite(name, getattr(self, name))
            if rate <= -100.0:
                raise ValueError(f"{name} must be above -100%, got {rate}")

        for name in ("initial_store_revenue", "fixed_monthly_cost", "variable_cost_percent"):
            if _require_finite(name, getattr(self, name)) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

        for name in ("initial_ong_clients", "initial_corporate_clients"):
            if not isinstance(getattr(self, name), TierCounts):
                raise ValueError(f"{name} must be TierCounts, got {type(getattr(self, name)).__name__}")

    @property
    def variable_cost_fraction(self) -> float:
        return self.variable_cost_percent / 100.0

    def growth_rate(self, channel: str) -> float:
        return {
            "ong": self.ong_growth_rate,
            "corporate": self.corporate_growth_rate,
            STORE_CHANNEL: self.store_growth_rate,
        }[channel]

    def initial_clients(self, segment: str) -> TierCounts:
        return {
            "ong": self.initial_ong_clients,
            "corporate": self.initial_corporate_clients,
        }[segment]

    def with_changes(self, **changes) -> "ProjectionParameters":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return asdict(self)


# Named starting points for the dashboard and CLI.
PARAMETER_PRESETS: Dict[str, ProjectionParameters] = {
    "Base": ProjectionParameters(),
    "Conservador": ProjectionParameters(
        ong_growth_rate=5.0,
        corporate_growth_rate=8.0,
        store_growth_rate=3.0,
        fixed_monthly_cost=18000.0,
        variable_cost_percent=30.0,
    ),
    "Agressivo": ProjectionParameters(
        projection_months=24,
        ong_growth_rate=40.0,
        corporate_growth_rate=50.0,
        store_growth_rate=25.0,
        variable_cost_percent=22.0,
    ),
}
DEFAULT_PRESET = "Base"
