"""
Projection engine — parameters in, one MonthlyRecord per month out.

Each month is computed in closed form from its offset i (elapsed years = i / 12),
so no record depends on another:
  1. tier clients    = round(initial * (1 + rate/100) ** (i/12))
  2. segment revenue = sum(tier clients * tier price)
  3. store revenue   = initial_store * (1 + store_rate/100) ** (i/12)
  4. totals, variable/fixed cost, profit, margin

Currency rounding is half-up and applied to components before totals, so
total_revenue == ong + corporate + store and profit == total_revenue - total_cost
hold exactly for every record. The margin rounds half away from zero.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd

from core.config import ProjectionParameters, TierCounts
from core.schema import PROJECTION_COLUMNS, SEGMENTS, TIER_PRICES, TIERS
from core.utils import excel_round, growth_factors, month_label, round_half_up

from .records import MonthlyRecord

logger = logging.getLogger(__name__)


def project(params: ProjectionParameters) -> List[MonthlyRecord]:
    """
    Run the month-by-month projection.

    Pure: identical parameters give identical output. projection_months below 1
    is clamped to 1.
    """
    if not isinstance(params, ProjectionParameters):
        raise ValueError(f"Expected ProjectionParameters, got {type(params).__name__}")

    n_months = int(params.projection_months)
    if n_months < 1:
        logger.warning("projection_months=%s clamped to 1", params.projection_months)
        n_months = 1

    # --- Clients and plan revenue per segment ---
    tier_clients: Dict[str, Dict[str, np.ndarray]] = {}
    segment_revenue: Dict[str, np.ndarray] = {}
    for segment in SEGMENTS:
        factors = growth_factors(params.growth_rate(segment), n_months)
        initial = params.initial_clients(segment).as_dict()
        counts = {
            tier: round_half_up(initial[tier] * factors).astype(np.int64)
            for tier in TIERS
        }
        revenue_raw = sum(counts[tier] * TIER_PRICES[segment][tier] for tier in TIERS)
        tier_clients[segment] = counts
        segment_revenue[segment] = round_half_up(revenue_raw).astype(np.int64)

    # --- Store channel (a revenue amount, not a client count) ---
    store_raw = params.initial_store_revenue * growth_factors(params.store_growth_rate, n_months)
    store_revenue = round_half_up(store_raw).astype(np.int64)

    # --- Totals ---
    total_revenue = segment_revenue["ong"] + segment_revenue["corporate"] + store_revenue
    fixed_cost = int(round_half_up(params.fixed_monthly_cost))
    variable_cost = round_half_up(total_revenue * params.variable_cost_fraction).astype(np.int64)
    total_cost = fixed_cost + variable_cost
    profit = total_revenue - total_cost

    with np.errstate(divide="ignore", invalid="ignore"):
        margin_raw = np.where(total_revenue != 0, profit / total_revenue * 100.0, np.nan)
    margin = excel_round(margin_raw, 1)

    records = []
    for i in range(n_months):
        records.append(MonthlyRecord(
            month_index=i + 1,
            month_label=month_label(i + 1),
            ong_revenue=int(segment_revenue["ong"][i]),
            corporate_revenue=int(segment_revenue["corporate"][i]),
            store_revenue=int(store_revenue[i]),
            total_revenue=int(total_revenue[i]),
            fixed_cost=fixed_cost,
            variable_cost=int(variable_cost[i]),
            total_cost=int(total_cost[i]),
            profit=int(profit[i]),
            profit_margin=float(margin[i]) if np.isfinite(margin[i]) else None,
            ong_tier_clients=_tiers_at(tier_clients["ong"], i),
            corporate_tier_clients=_tiers_at(tier_clients["corporate"], i),
        ))

    logger.debug(
        "Projected %d months: revenue %s -> %s",
        n_months, records[0].total_revenue, records[-1].total_revenue,
    )
    return records


def _tiers_at(counts: Dict[str, np.ndarray], i: int) -> TierCounts:
    return TierCounts(**{tier: int(counts[tier][i]) for tier in TIERS})


def projection_frame(records: Sequence[MonthlyRecord], *, tier_detail: bool = False) -> pd.DataFrame:
    """
    Records as a DataFrame (one row per month, indexed 0..N-1).
    Undefined margins become NaN. tier_detail=True appends per-tier client columns.
    """
    rows = [r.to_row() for r in records]
    df = pd.DataFrame(rows)
    if df.empty:
        return pd.DataFrame(columns=list(PROJECTION_COLUMNS))
    df["profit_margin"] = pd.to_numeric(df["profit_margin"], errors="coerce")
    columns = list(PROJECTION_COLUMNS)
    if tier_detail:
        columns += [c for c in df.columns if c not in PROJECTION_COLUMNS]
    return df[columns]
