"""
Classify component unit tests.

Covers each branch of both decision trees plus the priority between
branches that can match at the same time.
"""

from __future__ import annotations

import pytest

from fiprofile.components.classify import (
    determine_category,
    determine_stage,
    months_of_expenses,
)
from fiprofile.components.metrics import compute_metrics
from fiprofile.core.entities import Category, FinancialProfileInput, Stage


def make_input(**overrides: object) -> FinancialProfileInput:
    data: dict[str, object] = {
        "income": {"gross": 100000, "net": 75000},
        "expenses": {"annual": 50000, "monthly": 4167},
        "investments": {"annual": 15000, "monthly": 1250},
        "netWorth": 200000,
        "debt": 25000,
        "age": 30,
    }
    data.update(overrides)
    return FinancialProfileInput.model_validate(data)


def stage_of(inp: FinancialProfileInput) -> Stage:
    return determine_stage(inp, compute_metrics(inp))


def category_of(inp: FinancialProfileInput) -> Category:
    return determine_category(inp, compute_metrics(inp))


class TestMonthsOfExpenses:
    def test_net_worth_over_monthly_expenses(self) -> None:
        assert months_of_expenses(make_input()) == pytest.approx(200000 / 4167)

    def test_zero_monthly_expenses(self) -> None:
        assert months_of_expenses(make_input(expenses={"annual": 0, "monthly": 0})) == 0


class TestDetermineStage:
    def test_survival_for_high_debt_and_negative_net_worth(self) -> None:
        assert stage_of(make_input(debt=150000, netWorth=-50000)) == Stage.SURVIVAL

    def test_survival_for_under_one_month_of_cover(self) -> None:
        assert stage_of(make_input(debt=0, netWorth=4000)) == Stage.SURVIVAL

    def test_survival_when_monthly_expenses_zero(self) -> None:
        inp = make_input(expenses={"annual": 0, "monthly": 0})

        assert stage_of(inp) == Stage.SURVIVAL

    def test_debt_at_half_income_is_not_survival(self) -> None:
        assert stage_of(make_input(debt=37500)) == Stage.GROWTH

    def test_stability_for_basic_emergency_fund(self) -> None:
        inp = make_input(netWorth=25000, debt=10000)

        assert months_of_expenses(inp) == pytest.approx(6.0, abs=0.01)
        assert stage_of(inp) == Stage.STABILITY

    def test_exactly_six_months_is_stability(self) -> None:
        inp = make_input(expenses={"annual": 48000, "monthly": 4000}, netWorth=24000, debt=0)

        assert stage_of(inp) == Stage.STABILITY

    def test_growth_for_building_wealth(self) -> None:
        assert stage_of(make_input(netWorth=100000)) == Stage.GROWTH

    def test_growth_for_base_profile(self) -> None:
        assert stage_of(make_input()) == Stage.GROWTH

    def test_freedom_for_high_progress(self) -> None:
        assert stage_of(make_input(netWorth=1000000)) == Stage.FREEDOM

    def test_legacy_for_very_high_net_worth(self) -> None:
        assert stage_of(make_input(netWorth=5000000)) == Stage.LEGACY

    def test_legacy_at_exactly_fi(self) -> None:
        assert stage_of(make_input(netWorth=1250000)) == Stage.LEGACY

    def test_survival_debt_outranks_legacy(self) -> None:
        inp = make_input(netWorth=5000000, debt=50000)

        assert compute_metrics(inp).progress_to_fi >= 1.0
        assert stage_of(inp) == Stage.SURVIVAL

    def test_missing_debt_treated_as_zero(self) -> None:
        assert stage_of(make_input(debt=None)) == Stage.GROWTH


class TestDetermineCategory:
    def test_henry_for_high_income_low_net_worth(self) -> None:
        inp = make_input(income={"gross": 200000, "net": 150000}, netWorth=50000)

        assert category_of(inp) == Category.HENRY

    def test_lean_fire_for_high_savings_low_expenses(self) -> None:
        inp = make_input(
            income={"gross": 90000, "net": 70000},
            expenses={"annual": 30000, "monthly": 2500},
            netWorth=200000,
        )

        assert category_of(inp) == Category.LEAN_FIRE

    def test_fire_for_high_savings_mid_expenses(self) -> None:
        inp = make_input(
            income={"gross": 99000, "net": 99000},
            expenses={"annual": 45000, "monthly": 3750},
            netWorth=0,
        )

        assert category_of(inp) == Category.FIRE

    def test_lean_fire_for_achieved_fi_low_expenses(self) -> None:
        inp = make_input(expenses={"annual": 35000, "monthly": 2917}, netWorth=900000)

        assert category_of(inp) == Category.LEAN_FIRE

    def test_fat_fire_for_achieved_fi_high_expenses(self) -> None:
        inp = make_input(
            income={"gross": 300000, "net": 225000},
            expenses={"annual": 120000, "monthly": 10000},
            netWorth=3100000,
        )

        assert category_of(inp) == Category.FAT_FIRE

    def test_fire_for_achieved_fi_mid_expenses(self) -> None:
        assert category_of(make_input(netWorth=1300000)) == Category.FIRE

    def test_henry_requires_progress_below_threshold(self) -> None:
        inp = make_input(income={"gross": 200000, "net": 150000}, netWorth=1000000)

        assert category_of(inp) == Category.FIRE

    def test_coast_fire_for_young_with_quarter_progress(self) -> None:
        assert category_of(make_input(netWorth=400000)) == Category.COAST_FIRE

    def test_coast_fire_outranks_barista(self) -> None:
        assert category_of(make_input(netWorth=700000)) == Category.COAST_FIRE

    def test_barista_fire_for_partial_fi(self) -> None:
        assert category_of(make_input(age=45, netWorth=700000)) == Category.BARISTA_FIRE

    def test_standard_for_older_with_low_progress(self) -> None:
        assert category_of(make_input(age=45, netWorth=400000)) == Category.STANDARD

    def test_standard_for_typical_planning(self) -> None:
        inp = make_input(expenses={"annual": 60000, "monthly": 5000})

        assert category_of(inp) == Category.STANDARD

    def test_geo_fire_never_assigned(self) -> None:
        samples = [
            make_input(netWorth=nw, age=age)
            for nw in (0, 400000, 700000, 1300000, 5000000)
            for age in (25, 45)
        ]

        assert all(category_of(inp) != Category.GEO_FIRE for inp in samples)
