from __future__ import annotations

import pandas as pd

from core.schema import SEGMENT_LABELS, STORE_CHANNEL
from engine.records import MonthlyRecord

# Revenue sources in display order
REVENUE_SOURCES = {
    "ong": f"Planos {SEGMENT_LABELS['ong']}",
    "corporate": f"Planos {SEGMENT_LABELS['corporate']}",
    STORE_CHANNEL: SEGMENT_LABELS[STORE_CHANNEL],
}


def revenue_breakdown(record: MonthlyRecord) -> pd.DataFrame:
    """
    Revenue split of one month: columns source, label, revenue, share_pct.
    share_pct is NaN for every row when the month has no revenue.
    """
    rows = []
    for source, label in REVENUE_SOURCES.items():
        value = record.revenue_for(source)
        share = value / record.total_revenue * 100.0 if record.total_revenue else float("nan")
        rows.append({
            "source": source,
            "label": label,
            "revenue": value,
            "share_pct": share,
        })
    return pd.DataFrame(rows)
