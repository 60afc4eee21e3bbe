"""
Metrics component - derives savings rate, FI target, progress and horizon.

Pure and total: degenerate input (zero income, zero expenses, negative net
worth) yields clamped, non-negative metrics rather than an error.
"""

from __future__ import annotations

from fiprofile.core.entities import FinancialMetrics, FinancialProfileInput
from fiprofile.rules.models import FinancialRules

from ._projection import project_years_to_fi


def annual_savings(inp: FinancialProfileInput) -> float:
    """Net income left after annual expenses (negative when overspending)."""
    return inp.income.net - inp.expenses.annual


def compute_metrics(
    inp: FinancialProfileInput,
    *,
    rules: FinancialRules | None = None,
) -> FinancialMetrics:
    """
    Compute the core financial metrics.

    Args:
        inp: Validated profile input.
        rules: Optional rules; defaults to the built-in thresholds.

    Returns:
        FinancialMetrics with every field clamped to >= 0.
    """
    rules = rules or FinancialRules()
    savings = annual_savings(inp)

    savings_rate = savings / inp.income.net if inp.income.net > 0 else 0.0
    fi_number = inp.expenses.annual * rules.fi.multiplier
    progress_to_fi = inp.net_worth / fi_number if fi_number > 0 else 0.0
    years_to_fi = project_years_to_fi(
        inp.net_worth,
        savings,
        fi_number,
        projection=rules.projection,
    )

    return FinancialMetrics(
        savings_rate=max(0.0, savings_rate),
        fi_number=fi_number,
        progress_to_fi=max(0.0, progress_to_fi),
        years_to_fi=max(0.0, years_to_fi),
    )
