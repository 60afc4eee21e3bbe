"""
Regression tests for profile invariants.

These hold for every valid input, so each is checked over a spread of
households rather than one example.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from fiprofile.adapters.clock import FrozenClock
from fiprofile.adapters.memory_store import InMemoryBlobStore
from fiprofile.components.profile import build_input, calculate_financial_profile
from fiprofile.components.profile_store import ProfileStore, decode_profile, encode_profile
from fiprofile.components.validation import validate_financial_input
from fiprofile.core.entities import Stage

NOW = datetime(2025, 10, 5, 12, 0, tzinfo=UTC)

HOUSEHOLDS = [
    # gross, net, annual expenses, net worth, debt, age
    (100000, 75000, 50000, 200000, 25000, 30),
    (30000, 24000, 30000, -50000, 60000, 35),
    (200000, 150000, 60000, 50000, 0, 28),
    (90000, 70000, 30000, 900000, 0, 45),
    (300000, 225000, 120000, 3100000, 0, 55),
    (60000, 48000, 0, 10000, None, 22),
    (50000, 40000, 79000, 5000, 1000, 67),
]


def make_data(gross, net, expenses, net_worth, debt, age) -> dict:
    return {
        "income": {"gross": gross, "net": net},
        "expenses": {"annual": expenses, "monthly": expenses / 12},
        "investments": {"annual": 0, "monthly": 0},
        "netWorth": net_worth,
        "debt": debt,
        "age": age,
    }


def calculate(data: dict):
    return calculate_financial_profile(build_input(data), NOW)


@pytest.mark.parametrize("household", HOUSEHOLDS)
def test_households_are_valid(household) -> None:
    assert validate_financial_input(make_data(*household)).is_valid


@pytest.mark.parametrize("household", HOUSEHOLDS)
def test_fi_number_is_multiple_of_expenses(household) -> None:
    data = make_data(*household)

    metrics = calculate(data).profile.metrics

    assert metrics.fi_number == pytest.approx(25 * data["expenses"]["annual"])


@pytest.mark.parametrize("household", HOUSEHOLDS)
def test_metrics_are_never_negative(household) -> None:
    metrics = calculate(make_data(*household)).profile.metrics

    assert metrics.savings_rate >= 0
    assert metrics.fi_number >= 0
    assert metrics.progress_to_fi >= 0
    assert metrics.years_to_fi >= 0


@pytest.mark.parametrize("household", HOUSEHOLDS)
def test_years_to_fi_boundaries(household) -> None:
    data = make_data(*household)
    metrics = calculate(data).profile.metrics
    savings = data["income"]["net"] - data["expenses"]["annual"]

    if data["netWorth"] >= metrics.fi_number:
        assert metrics.years_to_fi == 0
    elif savings <= 0:
        assert metrics.years_to_fi == 999
    else:
        assert 0 < metrics.years_to_fi < 999


@pytest.mark.parametrize("household", HOUSEHOLDS)
def test_calculation_is_deterministic(household) -> None:
    data = make_data(*household)

    assert calculate(data) == calculate(data)


@pytest.mark.parametrize("household", HOUSEHOLDS)
def test_stored_profile_round_trips(household) -> None:
    profile = calculate(make_data(*household)).profile

    restored = decode_profile(encode_profile(profile, 1), key="k", schema_version=1)

    assert restored == profile


def test_survival_debt_outranks_legacy() -> None:
    profile = calculate(make_data(100000, 75000, 50000, 5000000, 50000, 60)).profile

    assert profile.metrics.progress_to_fi >= 1
    assert profile.stage == Stage.SURVIVAL


@pytest.mark.parametrize(("days", "stale"), [(0, False), (30, False), (31, True)])
def test_staleness_threshold(days, stale) -> None:
    clock = FrozenClock(NOW)
    store = ProfileStore(InMemoryBlobStore(), clock)
    store.save(calculate(make_data(*HOUSEHOLDS[0])).profile)

    clock.advance(timedelta(days=days))

    assert store.is_stale() is stale
