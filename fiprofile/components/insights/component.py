"""
Insights component - advisory copy for a computed profile.

Template-driven and deterministic. List order is display order.
"""

from __future__ import annotations

import math

from fiprofile.core.entities import FinancialProfile, Stage
from fiprofile.rules.models import FinancialRules

STAGE_INSIGHTS: dict[Stage, str] = {
    Stage.SURVIVAL: "Focus on debt reduction and building an emergency fund.",
    Stage.STABILITY: "Great job building your emergency fund! Time to start investing.",
    Stage.GROWTH: "You're in the wealth-building phase. Stay consistent with investments.",
    Stage.FREEDOM: "You're close to financial independence! Consider your post-FI plans.",
    Stage.LEGACY: "Congratulations on achieving FI! Consider tax-efficient giving strategies.",
}

# Freedom and Legacy have no stage-specific actions
STAGE_RECOMMENDATIONS: dict[Stage, tuple[str, ...]] = {
    Stage.SURVIVAL: (
        "Build a €1,000 starter emergency fund first",
        "List all debts and consider debt snowball/avalanche method",
    ),
    Stage.STABILITY: (
        "Start investing 10-15% of income in index funds",
        "Consider increasing income through skills development",
    ),
    Stage.GROWTH: (
        "Maximize tax-advantaged accounts (401k, IRA equivalents)",
        "Review and optimize expenses regularly",
    ),
}

GOOD_SAVINGS_RATE = 0.2
LOW_SAVINGS_RATE = 0.1
EARLY_START_AGE = 30
EARLY_START_SAVINGS_RATE = 0.3
NEAR_FI_YEARS = 10
ON_TRACK_YEARS = 20
LOW_GROSS_INCOME = 50000
HIGH_EXPENSE_RATIO = 0.8


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _percent(rate: float) -> int:
    return _round_half_up(rate * 100)


def generate_insights(
    profile: FinancialProfile,
    *,
    rules: FinancialRules | None = None,
) -> list[str]:
    """Observations about where the profile stands."""
    rules = rules or FinancialRules()
    metrics = profile.metrics
    insights = [STAGE_INSIGHTS[profile.stage]]

    rate = metrics.savings_rate
    if rate >= rules.categories.high_savings_rate:
        insights.append(f"Excellent savings rate of {_percent(rate)}%!")
    elif rate >= GOOD_SAVINGS_RATE:
        insights.append(
            f"Good savings rate of {_percent(rate)}%. Consider optimizing further."
        )
    else:
        insights.append(f"Your {_percent(rate)}% savings rate could be improved.")

    years = metrics.years_to_fi
    if years < NEAR_FI_YEARS:
        insights.append(
            f"You could reach FI in approximately {_round_half_up(years)} years!"
        )
    elif years < ON_TRACK_YEARS:
        insights.append(
            f"You're on track to reach FI in about {_round_half_up(years)} years."
        )

    if profile.age < EARLY_START_AGE and rate > EARLY_START_SAVINGS_RATE:
        insights.append("Starting early gives you a huge compound interest advantage!")

    return insights


def generate_recommendations(profile: FinancialProfile) -> list[str]:
    """Next actions suited to the profile's stage, savings, income and spending."""
    recommendations = list(STAGE_RECOMMENDATIONS.get(profile.stage, ()))
    income = profile.income
    expenses = profile.expenses

    rate = profile.metrics.savings_rate
    if rate < LOW_SAVINGS_RATE:
        recommendations.append("Track expenses for a month to identify savings opportunities")
    elif rate < GOOD_SAVINGS_RATE:
        recommendations.append("Aim to save at least 20% of your income")

    if income.gross < LOW_GROSS_INCOME:
        recommendations.append("Consider side hustles or skill development for income growth")

    monthly_income = income.net / 12
    if monthly_income > 0:
        expense_ratio = expenses.monthly / monthly_income
    else:
        expense_ratio = math.inf if expenses.monthly > 0 else 0.0

    if expense_ratio > HIGH_EXPENSE_RATIO:
        recommendations.append("Review major expense categories: housing, transportation, food")

    return recommendations
