"""
Impact Mais — Planejamento Financeiro Estratégico
==================================================

Single-page projection dashboard:
  1. Sidebar:  projection parameters (optionally starting from a preset)
  2. Cards:    headline revenue / profit / clients / store figures
  3. Charts:   revenue by source, revenue split, revenue vs profit, clients
  4. Table:    month-by-month projection + CSV download
  5. Strategic analysis: break-even, growth, cumulative profit

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import (
    DEFAULT_PRESET,
    MAX_PROJECTION_MONTHS,
    PARAMETER_PRESETS,
    ProjectionParameters,
)
from core.logging_config import setup_logging
from core.schema import SEGMENT_LABELS, TIER_LABELS, TIER_PRICES, TIERS
from core.utils import format_currency, format_percent

from data_prep.validators import coerce_parameters

from engine.projection import project, projection_frame
from engine.records import MonthlyRecord

from analysis.breakdown import revenue_breakdown
from analysis.insights import generate_strategic_report
from analysis.metrics import summarize_projection

from export.csv_export import EXPORT_FILENAME, projection_to_csv

from app.charts import (
    clients_bar_chart,
    revenue_area_chart,
    revenue_pie_chart,
    revenue_profit_chart,
)


# ---------------------------------------------------------------------------
# Cached projection — keyed on the frozen parameter snapshot
# ---------------------------------------------------------------------------
@st.cache_data(show_spinner=False)
def _run_projection(params: ProjectionParameters) -> List[MonthlyRecord]:
    return project(params)


# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------
def _tier_inputs(segment: str, base: ProjectionParameters, preset: str) -> dict:
    initial = base.initial_clients(segment).as_dict()
    st.markdown(f"**Planos {SEGMENT_LABELS[segment]}**")
    values = {}
    for tier in TIERS:
        price = format_currency(TIER_PRICES[segment][tier])
        values[tier] = st.number_input(
            f"{TIER_LABELS[tier]} ({price})",
            min_value=0, value=int(initial[tier]), step=1,
            key=f"{preset}_{segment}_{tier}",
        )
    return values


def _parameter_sidebar() -> dict:
    """Render the parameter inputs and return their raw values."""
    presets = list(PARAMETER_PRESETS)
    preset = st.selectbox("Cenário inicial", options=presets, index=presets.index(DEFAULT_PRESET))
    base = PARAMETER_PRESETS[preset]

    st.header("Parâmetros de Projeção")
    raw = {
        "projection_months": st.number_input(
            "Período de Projeção (meses)", min_value=1, max_value=MAX_PROJECTION_MONTHS,
            value=int(base.projection_months), step=1, key=f"{preset}_months",
        ),
        "ong_growth_rate": st.number_input(
            "Crescimento ONGs (% ao ano)", value=float(base.ong_growth_rate), step=0.1,
            key=f"{preset}_ong_growth",
        ),
        "corporate_growth_rate": st.number_input(
            "Crescimento Empresas (% ao ano)", value=float(base.corporate_growth_rate), step=0.1,
            key=f"{preset}_corporate_growth",
        ),
        "store_growth_rate": st.number_input(
            "Crescimento Loja (% ao ano)", value=float(base.store_growth_rate), step=0.1,
            key=f"{preset}_store_growth",
        ),
        "fixed_monthly_cost": st.number_input(
            "Custos Fixos Mensais (R$)", value=float(base.fixed_monthly_cost), step=100.0,
            key=f"{preset}_fixed_cost",
        ),
        "variable_cost_percent": st.number_input(
            "Custos Variáveis (% receita)", value=float(base.variable_cost_percent), step=0.1,
            key=f"{preset}_variable_cost",
        ),
    }

    st.subheader("Clientes Iniciais")
    raw["initial_ong_clients"] = _tier_inputs("ong", base, preset)
    raw["initial_corporate_clients"] = _tier_inputs("corporate", base, preset)
    raw["initial_store_revenue"] = st.number_input(
        "Receita Inicial da Loja (R$/mês)", value=float(base.initial_store_revenue), step=100.0,
        key=f"{preset}_store_revenue",
    )
    return raw


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------
def _display_table(frame: pd.DataFrame) -> pd.DataFrame:
    """Projection frame with currency formatting and Portuguese headers."""
    table = pd.DataFrame({
        "Mês": frame["month_label"],
        "Receita ONGs": frame["ong_revenue"].map(format_currency),
        "Receita Empresas": frame["corporate_revenue"].map(format_currency),
        "Receita Loja": frame["store_revenue"].map(format_currency),
        "Receita Total": frame["total_revenue"].map(format_currency),
        "Custos": frame["total_cost"].map(format_currency),
        "Lucro": frame["profit"].map(format_currency),
        "Margem %": frame["profit_margin"].map(lambda v: format_percent(None if pd.isna(v) else v)),
    })
    return table


def _display_cards(summary) -> None:
    last = summary.last
    k1, k2, k3, k4 = st.columns(4)
    k1.metric(
        "Receita Total", format_currency(last.total_revenue),
        delta=f"{format_percent(summary.revenue_growth_pct)} vs início",
    )
    k2.metric("Lucro Líquido", format_currency(last.profit), delta=f"Margem: {format_percent(last.profit_margin)}")
    k3.metric(
        "Total Clientes", f"{last.total_clients}",
        delta=f"ONGs: {last.ong_clients} | Empresas: {last.corporate_clients}", delta_color="off",
    )
    k4.metric(
        "Receita Loja", format_currency(last.store_revenue),
        delta=f"{format_percent(summary.store_share_pct)} da receita total", delta_color="off",
    )


# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
setup_logging()
st.set_page_config(page_title="Impact Mais", layout="wide")
st.title("Impact Mais")
st.caption("Planejamento Financeiro Estratégico")

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR — Parameters
# ═══════════════════════════════════════════════════════════════════════════
with st.sidebar:
    raw_inputs = _parameter_sidebar()

coerced = coerce_parameters(raw_inputs)
if not coerced.is_clean:
    st.warning("Alguns valores foram substituídos por padrões:\n" + coerced.summary())
for w in coerced.warnings:
    st.info(w)

records = _run_projection(coerced.params)
frame = projection_frame(records)
summary = summarize_projection(records)
report = generate_strategic_report(records, summary=summary)

# ═══════════════════════════════════════════════════════════════════════════
# HEADLINE CARDS + EXPORT
# ═══════════════════════════════════════════════════════════════════════════
_display_cards(summary)

st.download_button(
    "Exportar Dados",
    data=projection_to_csv(records).encode("utf-8"),
    file_name=EXPORT_FILENAME,
    mime="text/csv",
)

# ═══════════════════════════════════════════════════════════════════════════
# CHARTS
# ═══════════════════════════════════════════════════════════════════════════
left, right = st.columns(2)
with left:
    st.plotly_chart(revenue_area_chart(frame), use_container_width=True)
    st.plotly_chart(revenue_profit_chart(frame), use_container_width=True)
with right:
    st.plotly_chart(revenue_pie_chart(revenue_breakdown(summary.last)), use_container_width=True)
    st.plotly_chart(clients_bar_chart(frame), use_container_width=True)

# ═══════════════════════════════════════════════════════════════════════════
# DETAILED TABLE
# ═══════════════════════════════════════════════════════════════════════════
st.subheader("Projeção Detalhada por Mês")
st.dataframe(_display_table(frame), use_container_width=True, hide_index=True)

# ═══════════════════════════════════════════════════════════════════════════
# STRATEGIC ANALYSIS
# ═══════════════════════════════════════════════════════════════════════════
st.subheader("Análise Estratégica")
a1, a2, a3 = st.columns(3)
with a1:
    st.markdown("**Break-Even**")
    st.write(report.break_even_message)
with a2:
    st.markdown("**Crescimento Total**")
    st.write(report.growth_message)
with a3:
    st.markdown("**ROI Projetado**")
    st.write(report.profit_message)

for flag in report.flags:
    st.warning(flag)

st.caption("Impact Mais - Planejamento Financeiro Profissional | Desenvolvido para análise estratégica de negócios")
