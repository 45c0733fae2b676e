from __future__ import annotations

from typing import Dict, Tuple

# Client segments sold per tier, and the auxiliary store channel.
SEGMENTS: Tuple[str, ...] = ("ong", "corporate")
STORE_CHANNEL = "store"
TIERS: Tuple[str, ...] = ("basic", "pro", "premium")

# Unit price per client per month (R$). Not user-editable.
TIER_PRICES: Dict[str, Dict[str, float]] = {
    "ong": {"basic": 49.90, "pro": 69.90, "premium": 89.90},
    "corporate": {"basic": 149.90, "pro": 249.90, "premium": 399.90},
}

SEGMENT_LABELS: Dict[str, str] = {
    "ong": "ONGs",
    "corporate": "Empresas",
    STORE_CHANNEL: "Loja",
}

TIER_LABELS: Dict[str, str] = {
    "basic": "Básico",
    "pro": "Pro",
    "premium": "Premium",
}

MONTH_LABEL_PREFIX = "Mês"

# Column order of engine.projection.projection_frame().
PROJECTION_COLUMNS: Tuple[str, ...] = (
    "month_index",
    "month_label",
    "ong_revenue",
    "corporate_revenue",
    "store_revenue",
    "total_revenue",
    "fixed_cost",
    "variable_cost",
    "total_cost",
    "profit",
    "profit_margin",
    "ong_clients",
    "corporate_clients",
    "total_clients",
)

# Exported CSV: (header, record attribute), in file order.
CSV_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("Mês", "month_label"),
    ("Receita ONGs", "ong_revenue"),
    ("Receita Empresas", "corporate_revenue"),
    ("Receita Loja", "store_revenue"),
    ("Receita Total", "total_revenue"),
    ("Custos Fixos", "fixed_cost"),
    ("Custos Variáveis", "variable_cost"),
    ("Custos Totais", "total_cost"),
    ("Lucro", "profit"),
    ("Margem (%)", "profit_margin"),
)

UNDEFINED_MARGIN_LABEL = "N/A"
