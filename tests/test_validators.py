import pytest

from core.config import ProjectionParameters, TierCounts
from data_prep.validators import coerce_parameters, parse_count, parse_number


def test_empty_input_keeps_defaults():
    result = coerce_parameters({})
    assert result.params == ProjectionParameters()
    assert result.is_clean
    assert "All inputs accepted" in result.summary()


@pytest.mark.parametrize("raw", ["abc", "", None, "0", -5, float("nan")])
def test_invalid_period_falls_back_to_one(raw):
    result = coerce_parameters({"projection_months": raw})
    assert result.params.projection_months == 1
    assert len(result.defaults_applied) == 1
    assert "projection_months" in result.defaults_applied[0]


def test_fractional_period_is_truncated():
    result = coerce_parameters({"projection_months": "7.9"})
    assert result.params.projection_months == 7
    assert result.is_clean


def test_long_period_is_kept_with_warning():
    result = coerce_parameters({"projection_months": 72})
    assert result.params.projection_months == 72
    assert result.is_clean
    assert len(result.warnings) == 1


def test_growth_rates():
    result = coerce_parameters({
        "ong_growth_rate": "-20",
        "corporate_growth_rate": "",
        "store_growth_rate": -150,
    })
    assert result.params.ong_growth_rate == -20.0
    assert result.params.corporate_growth_rate == 0.0
    assert result.params.store_growth_rate == 0.0
    assert len(result.defaults_applied) == 2


def test_negative_costs_fall_back_to_zero():
    result = coerce_parameters({
        "fixed_monthly_cost": "-1",
        "initial_store_revenue": "lots",
        "variable_cost_percent": "12.5",
    })
    assert result.params.fixed_monthly_cost == 0.0
    assert result.params.initial_store_revenue == 0.0
    assert result.params.variable_cost_percent == 12.5
    assert len(result.defaults_applied) == 2
    assert "DEFAULTS APPLIED (2)" in result.summary()


def test_variable_cost_above_hundred_warns():
    result = coerce_parameters({"variable_cost_percent": 150})
    assert result.params.variable_cost_percent == 150.0
    assert result.is_clean
    assert result.warnings


def test_partial_tier_mapping_merges_with_base():
    result = coerce_parameters({"initial_ong_clients": {"basic": "x", "pro": "3"}})
    assert result.params.initial_ong_clients == TierCounts(basic=0, pro=3, premium=2)
    assert len(result.defaults_applied) == 1
    assert "initial_ong_clients.basic" in result.defaults_applied[0]


def test_tier_counts_instance_is_accepted():
    result = coerce_parameters({"initial_corporate_clients": TierCounts(1, 2, 3)})
    assert result.params.initial_corporate_clients == TierCounts(1, 2, 3)
    assert result.is_clean


def test_non_mapping_tiers_fall_back_to_zero():
    result = coerce_parameters({"initial_corporate_clients": "many"})
    assert result.params.initial_corporate_clients == TierCounts()
    assert not result.is_clean


def test_unknown_keys_rejected():
    with pytest.raises(ValueError, match="Unknown parameter"):
        coerce_parameters({"months": 12})
    with pytest.raises(ValueError, match="Unknown tier"):
        coerce_parameters({"initial_ong_clients": {"gold": 1}})


def test_base_parameters_are_respected():
    base = ProjectionParameters(projection_months=24, fixed_monthly_cost=1000.0)
    result = coerce_parameters({"projection_months": "6"}, base=base)
    assert result.params.projection_months == 6
    assert result.params.fixed_monthly_cost == 1000.0


def test_parse_helpers():
    assert parse_number(" 3.5 ") == 3.5
    assert parse_number(True) is None
    assert parse_number("inf") is None
    assert parse_number([1]) is None
    assert parse_count("4.99") == 4
    assert parse_count("-2.5") == -2
    assert parse_count("x") is None
