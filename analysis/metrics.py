"""
Headline figures derived from a projection.

Computes first/last month, revenue growth over the period, cumulative profit and
the break-even month. Used by the dashboard cards and the strategic report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from engine.records import MonthlyRecord


@dataclass(frozen=True)
class ProjectionSummary:
    first: MonthlyRecord
    last: MonthlyRecord
    months: int

    cumulative_profit: int
    # First month with strictly positive profit, None if never reached
    break_even: Optional[MonthlyRecord]

    # Percent change of total revenue, last vs first; None if first month has no revenue
    revenue_growth_pct: Optional[float]
    # Store share of last-month revenue, percent; None if last month has no revenue
    store_share_pct: Optional[float]

    @property
    def break_even_month(self) -> Optional[int]:
        return self.break_even.month_index if self.break_even is not None else None


def find_break_even(records: Sequence[MonthlyRecord]) -> Optional[MonthlyRecord]:
    return next((r for r in records if r.profit > 0), None)


def cumulative_profit(records: Sequence[MonthlyRecord]) -> int:
    return sum(r.profit for r in records)


def revenue_growth_pct(first: MonthlyRecord, last: MonthlyRecord) -> Optional[float]:
    if first.total_revenue == 0:
        return None
    return (last.total_revenue / first.total_revenue - 1.0) * 100.0


def summarize_projection(records: Sequence[MonthlyRecord]) -> ProjectionSummary:
    """
    Parameters
    ----------
    records : sequence of MonthlyRecord
        Output of engine.project(), in month order.

    Returns
    -------
    ProjectionSummary
    """
    if len(records) == 0:
        raise ValueError("No projected months to summarize.")

    first = records[0]
    last = records[-1]
    store_share = (
        last.store_revenue / last.total_revenue * 100.0
        if last.total_revenue != 0 else None
    )

    return ProjectionSummary(
        first=first,
        last=last,
        months=len(records),
        cumulative_profit=cumulative_profit(records),
        break_even=find_break_even(records),
        revenue_growth_pct=revenue_growth_pct(first, last),
        store_share_pct=store_share,
    )
