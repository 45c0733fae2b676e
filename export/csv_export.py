"""
CSV export of a projection.

One header row plus one row per month, comma-delimited, newline-separated,
no quoting (every field is a number, a month label or N/A).
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Sequence, Union

import pandas as pd

from core.schema import CSV_FIELDS
from core.utils import format_margin
from engine.records import MonthlyRecord

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "impact-mais-projecao-financeira.csv"
DELIMITER = ","
LINE_TERMINATOR = "\n"

CSV_HEADERS: List[str] = [header for header, _ in CSV_FIELDS]


def export_frame(records: Sequence[MonthlyRecord]) -> pd.DataFrame:
    """Records as exported: CSV headers as columns, margin already formatted."""
    data = {}
    for header, attr in CSV_FIELDS:
        values = [getattr(r, attr) for r in records]
        if attr == "profit_margin":
            values = [format_margin(v) for v in values]
        data[header] = values
    return pd.DataFrame(data, columns=CSV_HEADERS)


def projection_to_csv(records: Sequence[MonthlyRecord]) -> str:
    """Serialize records to CSV text (no trailing newline)."""
    text = export_frame(records).to_csv(
        index=False,
        sep=DELIMITER,
        lineterminator=LINE_TERMINATOR,
        quoting=csv.QUOTE_NONE,
    )
    return text.rstrip(LINE_TERMINATOR)


def write_csv(records: Sequence[MonthlyRecord], path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(projection_to_csv(records), encoding="utf-8")
    logger.info("Wrote %d months to %s", len(records), path)
    return path
