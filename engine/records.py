"""
MonthlyRecord — one projected month. Immutable once computed.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from core.config import TierCounts
from core.schema import STORE_CHANNEL


@dataclass(frozen=True)
class MonthlyRecord:
    """
    Revenue, cost and client figures for one month of the projection.

    Currency fields are whole reais. profit_margin is a percent with one decimal,
    or None when total_revenue is 0 (margin undefined).
    """

    month_index: int  # 1-based
    month_label: str

    ong_revenue: int
    corporate_revenue: int
    store_revenue: int
    total_revenue: int

    fixed_cost: int
    variable_cost: int
    total_cost: int

    profit: int
    profit_margin: Optional[float]

    ong_tier_clients: TierCounts
    corporate_tier_clients: TierCounts

    @property
    def ong_clients(self) -> int:
        return self.ong_tier_clients.total

    @property
    def corporate_clients(self) -> int:
        return self.corporate_tier_clients.total

    @property
    def total_clients(self) -> int:
        return self.ong_clients + self.corporate_clients

    def revenue_for(self, channel: str) -> int:
        return {
            "ong": self.ong_revenue,
            "corporate": self.corporate_revenue,
            STORE_CHANNEL: self.store_revenue,
        }[channel]

    def to_row(self) -> dict:
        """Flat dict with client totals; tier detail flattened as <segment>_<tier>_clients."""
        row = asdict(self)
        ong_tiers = row.pop("ong_tier_clients")
        corp_tiers = row.pop("corporate_tier_clients")
        row["ong_clients"] = self.ong_clients
        row["corporate_clients"] = self.corporate_clients
        row["total_clients"] = self.total_clients
        for tier, count in ong_tiers.items():
            row[f"ong_{tier}_clients"] = count
        for tier, count in corp_tiers.items():
            row[f"corporate_{tier}_clients"] = count
        return row
