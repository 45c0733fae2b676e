"""
Input boundary for projection parameters.

Raw values from form widgets, query strings or files are coerced here, before they
reach the engine:
- Non-numeric, NaN/inf or out-of-range values fall back to a safe default
- Every fallback is reported in CoercionResult.defaults_applied
- Suspicious but usable values (e.g. very long periods) become warnings
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields
from typing import Any, List, Mapping, Optional

from core.config import MAX_PROJECTION_MONTHS, ProjectionParameters, TierCounts
from core.schema import TIERS

logger = logging.getLogger(__name__)

_TIER_FIELDS = ("initial_ong_clients", "initial_corporate_clients")
_GROWTH_FIELDS = ("ong_growth_rate", "corporate_growth_rate", "store_growth_rate")
_NON_NEGATIVE_FIELDS = ("initial_store_revenue", "fixed_monthly_cost", "variable_cost_percent")


@dataclass
class CoercionResult:
    """Coerced parameters plus a record of every default that had to be applied."""
    params: ProjectionParameters
    defaults_applied: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return len(self.defaults_applied) == 0

    def summary(self) -> str:
        lines = []
        if self.defaults_applied:
            lines.append(f"DEFAULTS APPLIED ({len(self.defaults_applied)}):")
            for d in self.defaults_applied:
                lines.append(f"  ✗ {d}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All inputs accepted.")
        return "\n".join(lines)


def parse_number(value: Any) -> Optional[float]:
    """Parse a finite float, or None if the value is not a usable number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_count(value: Any) -> Optional[int]:
    """Parse an integer count, truncating any fractional part."""
    number = parse_number(value)
    if number is None:
        return None
    return int(number)


def coerce_parameters(
    raw: Mapping[str, Any],
    *,
    base: Optional[ProjectionParameters] = None,
) -> CoercionResult:
    """
    Build ProjectionParameters from raw values.

    Keys missing from `raw` keep the value from `base` (standard defaults when None).
    Keys present but unusable fall back to 1 (period) or 0 (everything else) and
    are listed in `defaults_applied`. Unknown keys raise ValueError.
    """
    base = base if base is not None else ProjectionParameters()
    known = {f.name for f in fields(ProjectionParameters)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown parameter(s): {unknown}")

    applied: List[str] = []
    warnings: List[str] = []
    values = {}

    # --- Period ---
    if "projection_months" in raw:
        months = parse_count(raw["projection_months"])
        if months is None or months < 1:
            applied.append(
                f"projection_months={raw['projection_months']!r} is not a positive integer; using 1."
            )
            months = 1
        elif months > MAX_PROJECTION_MONTHS:
            warnings.append(
                f"projection_months={months} exceeds the suggested maximum of {MAX_PROJECTION_MONTHS}."
            )
        values["projection_months"] = months

    # --- Growth rates (negative allowed, but not at or below -100%) ---
    for name in _GROWTH_FIELDS:
        if name not in raw:
            continue
        rate = parse_number(raw[name])
        if rate is None or rate <= -100.0:
            applied.append(f"{name}={raw[name]!r} is not a usable growth rate; using 0.")
            rate = 0.0
        values[name] = rate

    # --- Money / percent ---
    for name in _NON_NEGATIVE_FIELDS:
        if name not in raw:
            continue
        number = parse_number(raw[name])
        if number is None or number < 0:
            applied.append(f"{name}={raw[name]!r} is not a non-negative number; using 0.")
            number = 0.0
        values[name] = number

    if "variable_cost_percent" in values and values["variable_cost_percent"] > 100.0:
        warnings.append(
            f"variable_cost_percent={values['variable_cost_percent']} exceeds 100%; "
            f"every month will run at a loss."
        )

    # --- Initial clients per tier ---
    for name in _TIER_FIELDS:
        if name not in raw:
            continue
        values[name] = _coerce_tiers(name, raw[name], getattr(base, name), applied)

    for message in applied:
        logger.warning("Default applied: %s", message)
    for message in warnings:
        logger.info("Parameter warning: %s", message)

    return CoercionResult(params=base.with_changes(**values), defaults_applied=applied, warnings=warnings)


def _coerce_tiers(name: str, raw_tiers: Any, base_tiers: TierCounts, applied: List[str]) -> TierCounts:
    if isinstance(raw_tiers, TierCounts):
        raw_tiers = raw_tiers.as_dict()
    if not isinstance(raw_tiers, Mapping):
        applied.append(f"{name}={raw_tiers!r} is not a tier mapping; using 0 for every tier.")
        return TierCounts()

    unknown = sorted(set(raw_tiers) - set(TIERS))
    if unknown:
        raise ValueError(f"Unknown tier(s) in {name}: {unknown}")

    counts = base_tiers.as_dict()
    for tier in TIERS:
        if tier not in raw_tiers:
            continue
        count = parse_count(raw_tiers[tier])
        if count is None or count < 0:
            applied.append(f"{name}.{tier}={raw_tiers[tier]!r} is not a non-negative integer; using 0.")
            count = 0
        counts[tier] = count
    return TierCounts(**counts)
