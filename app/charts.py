"""
Plotly figures for the dashboard. Each builder takes the projection frame
(engine.projection_frame) or a breakdown frame and returns a go.Figure.
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from core.schema import SEGMENT_LABELS, SEGMENTS, STORE_CHANNEL
from core.utils import require_columns

COLORS = {
    "ong": "#10b981",
    "corporate": "#059669",
    STORE_CHANNEL: "#047857",
}

CHART_HEIGHT = 300


def revenue_area_chart(frame: pd.DataFrame) -> go.Figure:
    """Stacked monthly revenue by source."""
    require_columns(frame, ["month_label", "ong_revenue", "corporate_revenue", "store_revenue"])
    fig = go.Figure()
    for source in SEGMENTS + (STORE_CHANNEL,):
        fig.add_trace(go.Scatter(
            x=frame["month_label"], y=frame[f"{source}_revenue"],
            name=SEGMENT_LABELS[source], mode="lines", stackgroup="revenue",
            line=dict(color=COLORS[source]),
        ))
    fig.update_layout(
        title_text="Evolução da Receita",
        yaxis_title="Receita (R$)",
        hovermode="x unified",
        height=CHART_HEIGHT,
    )
    return fig


def revenue_pie_chart(breakdown: pd.DataFrame) -> go.Figure:
    """Revenue distribution of one month (revenue_breakdown output)."""
    require_columns(breakdown, ["source", "label", "revenue"])
    fig = go.Figure(go.Pie(
        labels=breakdown["label"],
        values=breakdown["revenue"],
        marker=dict(colors=[COLORS[s] for s in breakdown["source"]]),
        texttemplate="%{label}: %{percent:.1%}",
        sort=False,
    ))
    fig.update_layout(title_text="Distribuição de Receita (Último Mês)", height=CHART_HEIGHT)
    return fig


def revenue_profit_chart(frame: pd.DataFrame) -> go.Figure:
    require_columns(frame, ["month_label", "total_revenue", "profit"])
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=frame["month_label"], y=frame["total_revenue"], name="Receita Total",
        mode="lines+markers", line=dict(color=COLORS["ong"], width=2),
    ))
    fig.add_trace(go.Scatter(
        x=frame["month_label"], y=frame["profit"], name="Lucro Líquido",
        mode="lines+markers", line=dict(color=COLORS["corporate"], width=2),
    ))
    fig.add_hline(y=0, line_dash="dash", line_color="red")
    fig.update_layout(
        title_text="Receita vs Lucro",
        yaxis_title="R$",
        hovermode="x unified",
        height=CHART_HEIGHT,
    )
    return fig


def clients_bar_chart(frame: pd.DataFrame) -> go.Figure:
    require_columns(frame, ["month_label", "ong_clients", "corporate_clients"])
    fig = go.Figure()
    for segment in ("ong", "corporate"):
        fig.add_trace(go.Bar(
            x=frame["month_label"], y=frame[f"{segment}_clients"],
            name=SEGMENT_LABELS[segment], marker_color=COLORS[segment],
        ))
    fig.update_layout(
        barmode="group",
        title_text="Crescimento de Clientes",
        yaxis_title="Clientes",
        hovermode="x unified",
        height=CHART_HEIGHT,
    )
    return fig
