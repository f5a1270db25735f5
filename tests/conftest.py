"""Shared fixtures: estimators and tables are expensive, build them once."""
import pytest

from cct_models import (
    Ohno2014CascadeEstimator,
    Ohno2014Estimator,
    PlanckianTable,
    RobertsonEstimator,
)


@pytest.fixture(scope="session")
def default_table():
    """The 1% Planckian table, 1000 K to 20186 K, CIE 1931 observer."""
    return PlanckianTable()


@pytest.fixture(scope="session")
def ohno():
    return Ohno2014Estimator()


@pytest.fixture(scope="session")
def cascade():
    return Ohno2014CascadeEstimator()


@pytest.fixture(scope="session")
def robertson():
    return RobertsonEstimator()
