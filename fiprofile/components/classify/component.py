"""
Classify component - stage and category decision trees.

Both trees are ordered guard chains: the first matching branch wins and
branch order encodes priority. Debt-driven Survival, for instance, must
preempt a Legacy result even when FI progress is past 100%.
"""

from __future__ import annotations

from fiprofile.core.entities import (
    Category,
    FinancialMetrics,
    FinancialProfileInput,
    Stage,
)
from fiprofile.rules.models import CategoryRules, FinancialRules


def months_of_expenses(inp: FinancialProfileInput) -> float:
    """
    Liquidity proxy: net worth divided by monthly expenses.

    Measured against total net worth rather than a segregated emergency fund.
    """
    if inp.expenses.monthly > 0:
        return inp.net_worth / inp.expenses.monthly
    return 0.0


def determine_stage(
    inp: FinancialProfileInput,
    metrics: FinancialMetrics,
    *,
    rules: FinancialRules | None = None,
) -> Stage:
    """Map input and metrics to a life stage."""
    thresholds = (rules or FinancialRules()).stages
    debt = inp.debt or 0.0
    months = months_of_expenses(inp)
    progress = metrics.progress_to_fi

    # Heavy debt or under a month of cover
    if (
        debt > inp.income.net * thresholds.survival_debt_to_income
        or months < thresholds.survival_max_months
    ):
        return Stage.SURVIVAL

    if progress >= thresholds.legacy_min_progress:
        return Stage.LEGACY

    if progress >= thresholds.freedom_min_progress:
        return Stage.FREEDOM

    # Strictly more than the emergency-fund band
    if months > thresholds.stability_max_months:
        return Stage.GROWTH

    return Stage.STABILITY


def _expense_tier(annual_expenses: float, thresholds: CategoryRules) -> Category:
    if annual_expenses >= thresholds.fat_fire_expenses:
        return Category.FAT_FIRE
    if annual_expenses <= thresholds.lean_fire_expenses:
        return Category.LEAN_FIRE
    return Category.FIRE


def determine_category(
    inp: FinancialProfileInput,
    metrics: FinancialMetrics,
    *,
    rules: FinancialRules | None = None,
) -> Category:
    """Map input and metrics to a savings strategy label."""
    thresholds = (rules or FinancialRules()).categories
    progress = metrics.progress_to_fi
    savings_rate = metrics.savings_rate

    # Already financially independent
    if progress >= thresholds.fi_achieved_progress:
        return _expense_tier(inp.expenses.annual, thresholds)

    if (
        inp.income.gross >= thresholds.high_income_threshold
        and savings_rate >= thresholds.high_savings_rate
        and progress < thresholds.henry_max_progress
    ):
        return Category.HENRY

    # Aggressive savers get a FIRE variant before reaching FI
    if savings_rate >= thresholds.high_savings_rate:
        return _expense_tier(inp.expenses.annual, thresholds)

    if inp.age < thresholds.coast_max_age and progress >= thresholds.coast_min_progress:
        return Category.COAST_FIRE

    if thresholds.barista_min_progress <= progress < thresholds.fi_achieved_progress:
        return Category.BARISTA_FIRE

    return Category.STANDARD
