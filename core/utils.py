from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
import pandas as pd

from .schema import MONTH_LABEL_PREFIX, UNDEFINED_MARGIN_LABEL


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def round_half_up(x, decimals: int = 0):
    """Round half toward +inf, i.e. floor(x * 10^d + 0.5) / 10^d (vectorized)."""
    m = 10 ** decimals
    x = np.asarray(x, dtype=float)
    return np.floor(x * m + 0.5) / m


def excel_round(x, decimals: int = 2):
    """Round half away from zero (vectorized), as toFixed / Excel ROUND do."""
    m = 10 ** decimals
    x = np.asarray(x, dtype=float)
    return np.sign(x) * (np.floor(np.abs(x) * m + 0.5) / m)


def growth_factors(annual_rate_pct: float, n_months: int) -> np.ndarray:
    """
    Compound growth factor for month offsets 0..n_months-1.
    The exponent is elapsed years (offset / 12), not the month count.
    """
    years = np.arange(n_months, dtype=float) / 12.0
    return np.power(1.0 + annual_rate_pct / 100.0, years)


def month_label(month_index: int) -> str:
    return f"{MONTH_LABEL_PREFIX} {month_index}"


def format_currency(value: float) -> str:
    """pt-BR real: R$ 1.234,56"""
    sign = "-" if value < 0 else ""
    body = f"{abs(float(value)):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {body}"


def format_percent(value: Optional[float], decimals: int = 1) -> str:
    if value is None or not np.isfinite(value):
        return UNDEFINED_MARGIN_LABEL
    return f"{value:.{decimals}f}%"


def format_margin(value: Optional[float]) -> str:
    """Margin as exported: one decimal, no % sign."""
    if value is None:
        return UNDEFINED_MARGIN_LABEL
    return f"{value:.1f}"
