import os
import sys

import pytest

# Ensure project root is on sys.path before imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from core.config import ProjectionParameters, TierCounts  # noqa: E402
from engine.projection import project  # noqa: E402


def store_only_params(**overrides) -> ProjectionParameters:
    """No plan clients; revenue comes only from the store channel."""
    values = dict(
        projection_months=12,
        ong_growth_rate=0.0,
        corporate_growth_rate=0.0,
        store_growth_rate=0.0,
        initial_ong_clients=TierCounts(),
        initial_corporate_clients=TierCounts(),
        initial_store_revenue=10000.0,
        fixed_monthly_cost=5000.0,
        variable_cost_percent=0.0,
    )
    values.update(overrides)
    return ProjectionParameters(**values)


@pytest.fixture
def default_params():
    return ProjectionParameters()


@pytest.fixture
def default_records(default_params):
    return project(default_params)


@pytest.fixture
def zero_revenue_params():
    return store_only_params(initial_store_revenue=0.0, projection_months=3)
