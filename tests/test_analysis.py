import math

import pytest

from analysis.breakdown import revenue_breakdown
from analysis.insights import NO_BREAK_EVEN_MESSAGE, generate_strategic_report
from analysis.metrics import find_break_even, summarize_projection
from engine.projection import project

from conftest import store_only_params


def test_summary_first_last(default_records):
    summary = summarize_projection(default_records)
    assert summary.months == 12
    assert summary.first is default_records[0]
    assert summary.last is default_records[-1]
    expected_growth = (default_records[-1].total_revenue / default_records[0].total_revenue - 1) * 100
    assert summary.revenue_growth_pct == pytest.approx(expected_growth)
    assert summary.revenue_growth_pct > 0


def test_summary_empty_raises():
    with pytest.raises(ValueError):
        summarize_projection([])


def test_cumulative_profit_and_immediate_break_even():
    records = project(store_only_params(projection_months=6))
    summary = summarize_projection(records)
    assert summary.cumulative_profit == 6 * 5000
    assert summary.break_even_month == 1
    assert summary.revenue_growth_pct == 0.0
    assert summary.store_share_pct == 100.0


def test_break_even_later_in_period():
    # revenue 10000 * 2^(i/12) vs fixed 12000: first positive at i=4
    records = project(store_only_params(store_growth_rate=100.0, fixed_monthly_cost=12000.0))
    assert records[3].profit < 0
    assert records[4].profit > 0
    assert find_break_even(records) is records[4]
    assert summarize_projection(records).break_even_month == 5


def test_no_break_even_with_defaults(default_records):
    summary = summarize_projection(default_records)
    assert summary.break_even is None
    assert summary.break_even_month is None
    assert summary.cumulative_profit == sum(r.profit for r in default_records)
    assert summary.cumulative_profit < 0


def test_zero_revenue_summary(zero_revenue_params):
    summary = summarize_projection(project(zero_revenue_params))
    assert summary.revenue_growth_pct is None
    assert summary.store_share_pct is None
    assert summary.cumulative_profit == -15000


def test_revenue_breakdown(default_records):
    df = revenue_breakdown(default_records[0])
    assert list(df["source"]) == ["ong", "corporate", "store"]
    assert list(df["revenue"]) == [1028, 5447, 5000]
    assert df["share_pct"].sum() == pytest.approx(100.0)
    assert df.loc[0, "label"] == "Planos ONGs"


def test_revenue_breakdown_zero_revenue(zero_revenue_params):
    df = revenue_breakdown(project(zero_revenue_params)[0])
    assert df["revenue"].sum() == 0
    assert df["share_pct"].isna().all()


def test_report_flags_for_unprofitable_projection(default_records):
    report = generate_strategic_report(default_records)
    assert report.break_even_month is None
    assert report.break_even_message == NO_BREAK_EVEN_MESSAGE
    prefixes = {f.split(":")[0] for f in report.flags}
    assert {"NO_BREAK_EVEN", "NEGATIVE_CUMULATIVE_PROFIT", "FINAL_MONTH_LOSS"} <= prefixes
    assert "UNDEFINED_MARGIN" not in prefixes
    assert report.growth_message.endswith("de crescimento em 12 meses")


def test_report_for_profitable_projection():
    records = project(store_only_params(store_growth_rate=100.0, fixed_monthly_cost=12000.0))
    report = generate_strategic_report(records)
    assert report.break_even_message == "Ponto de equilíbrio atingido no Mês 5"
    assert report.flags == []
    assert report.profit_message.startswith("Lucro acumulado: R$ ")
    df = report.to_dataframe()
    assert list(df["Indicador"]) == ["Break-Even", "Crescimento Total", "ROI Projetado", "Margem Final"]


def test_report_undefined_margin(zero_revenue_params):
    report = generate_strategic_report(project(zero_revenue_params))
    assert report.final_margin is None
    assert any(f.startswith("UNDEFINED_MARGIN: 3 month(s)") for f in report.flags)
    assert "N/A" in report.growth_message
    df = report.to_dataframe()
    assert df.iloc[-1]["Indicador"] == "ALERTAS"


def test_report_reuses_precomputed_summary(default_records):
    summary = summarize_projection(default_records)
    report = generate_strategic_report(default_records, summary=summary)
    assert report.cumulative_profit == summary.cumulative_profit
    assert not math.isnan(report.revenue_growth_pct)
