"""
Strategic analysis — the statements and flags shown under the projection.

Answers the three questions the dashboard closes with:
  Q1: "When do we break even?"          → first month with positive profit
  Q2: "How much do we grow?"            → total revenue growth over the period
  Q3: "What is the projected return?"   → cumulative profit
Flags call out projections that need the parameters adjusted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import pandas as pd

from core.utils import format_currency, format_percent
from engine.records import MonthlyRecord

from .metrics import ProjectionSummary, summarize_projection

NO_BREAK_EVEN_MESSAGE = "Ajuste os parâmetros para atingir lucratividade"


@dataclass
class StrategicReport:
    """Strategic analysis output for one projection."""
    months: int
    break_even_month: Optional[int]
    break_even_label: Optional[str]
    revenue_growth_pct: Optional[float]
    cumulative_profit: int
    final_margin: Optional[float]

    flags: List[str] = field(default_factory=list)

    @property
    def break_even_message(self) -> str:
        if self.break_even_label is None:
            return NO_BREAK_EVEN_MESSAGE
        return f"Ponto de equilíbrio atingido no {self.break_even_label}"

    @property
    def growth_message(self) -> str:
        return f"{format_percent(self.revenue_growth_pct)} de crescimento em {self.months} meses"

    @property
    def profit_message(self) -> str:
        return f"Lucro acumulado: {format_currency(self.cumulative_profit)}"

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Indicador": "Break-Even", "Valor": self.break_even_message},
            {"Indicador": "Crescimento Total", "Valor": self.growth_message},
            {"Indicador": "ROI Projetado", "Valor": self.profit_message},
            {"Indicador": "Margem Final", "Valor": format_percent(self.final_margin)},
        ]
        if self.flags:
            rows.append({"Indicador": "ALERTAS", "Valor": " | ".join(self.flags)})
        return pd.DataFrame(rows)


def generate_strategic_report(
    records: Sequence[MonthlyRecord],
    *,
    summary: Optional[ProjectionSummary] = None,
) -> StrategicReport:
    """
    Build the strategic report for a projection.

    Parameters
    ----------
    records : sequence of MonthlyRecord
        Output of engine.project().
    summary : ProjectionSummary, optional
        Precomputed summary of the same records; computed when omitted.
    """
    summary = summary if summary is not None else summarize_projection(records)

    flags = []
    if summary.break_even is None:
        flags.append(f"NO_BREAK_EVEN: no profitable month within {summary.months} months")
    if summary.cumulative_profit < 0:
        flags.append("NEGATIVE_CUMULATIVE_PROFIT: projected period ends with an accumulated loss")
    if summary.last.profit <= 0:
        flags.append("FINAL_MONTH_LOSS: last projected month is not profitable")
    n_undefined = sum(1 for r in records if r.profit_margin is None)
    if n_undefined > 0:
        flags.append(f"UNDEFINED_MARGIN: {n_undefined} month(s) without revenue")

    return StrategicReport(
        months=summary.months,
        break_even_month=summary.break_even_month,
        break_even_label=summary.break_even.month_label if summary.break_even is not None else None,
        revenue_growth_pct=summary.revenue_growth_pct,
        cumulative_profit=summary.cumulative_profit,
        final_margin=summary.last.profit_margin,
        flags=flags,
    )
