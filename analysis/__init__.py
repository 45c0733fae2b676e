"""
Analysis outputs — headline metrics, revenue breakdown, strategic report.
"""

from .metrics import ProjectionSummary, summarize_projection
from .breakdown import revenue_breakdown
from .insights import StrategicReport, generate_strategic_report

__all__ = [
    "ProjectionSummary",
    "summarize_projection",
    "revenue_breakdown",
    "StrategicReport",
    "generate_strategic_report",
]
