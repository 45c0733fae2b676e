import pytest

from core.config import PARAMETER_PRESETS, ProjectionParameters, TierCounts
from core.schema import STORE_CHANNEL


def test_presets_are_valid():
    for params in PARAMETER_PRESETS.values():
        assert isinstance(params, ProjectionParameters)


@pytest.mark.parametrize("counts", [(-10, 0, 0), (0, -1, 0), (1.5, 0, 0), (None, 0, 0)])
def test_tier_counts_rejects_negative_or_fractional(counts):
    with pytest.raises(ValueError):
        TierCounts(*counts)


@pytest.mark.parametrize("name", ["ong_growth_rate", "corporate_growth_rate", "store_growth_rate"])
@pytest.mark.parametrize("rate", [-100.0, -150.0])
def test_growth_at_or_below_minus_100_rejected(name, rate):
    with pytest.raises(ValueError):
        ProjectionParameters(**{name: rate})


@pytest.mark.parametrize("name", ["initial_store_revenue", "fixed_monthly_cost", "variable_cost_percent"])
def test_negative_money_rejected(name):
    with pytest.raises(ValueError):
        ProjectionParameters(**{name: -1.0})


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), "5000"])
def test_non_finite_or_non_numeric_rejected(value):
    with pytest.raises(ValueError):
        ProjectionParameters(fixed_monthly_cost=value)


def test_tier_fields_must_be_tier_counts():
    with pytest.raises(ValueError):
        ProjectionParameters(initial_ong_clients={"basic": 1, "pro": 0, "premium": 0})


def test_with_changes_validates(default_params):
    with pytest.raises(ValueError):
        default_params.with_changes(store_growth_rate=-200.0)
    with pytest.raises(ValueError):
        default_params.with_changes(initial_corporate_clients=TierCounts(-1, 0, 0))


def test_short_period_left_to_engine():
    # clamped to 1 month by the engine, not rejected here
    assert ProjectionParameters(projection_months=0).projection_months == 0
    with pytest.raises(ValueError):
        ProjectionParameters(projection_months=2.5)


def test_growth_rate_lookup_by_channel(default_params):
    assert default_params.growth_rate(STORE_CHANNEL) == default_params.store_growth_rate
    assert default_params.growth_rate("ong") == default_params.ong_growth_rate
    with pytest.raises(KeyError):
        default_params.growth_rate("franchise")
