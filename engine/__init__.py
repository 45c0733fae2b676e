"""
Projection engine — closed-form monthly revenue / cost / profit.
"""

from .projection import project, projection_frame
from .records import MonthlyRecord

__all__ = ["project", "projection_frame", "MonthlyRecord"]
