"""
Validation component - sanity checks on raw profile input.

Every rule is evaluated independently against the same input and all
violations are reported together, so a form can show the full list at once.
The validator never raises.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from fiprofile.core.entities import FinancialProfileInput
from fiprofile.rules.models import FinancialRules, ValidationRules

from .models import ValidationIssue, ValidationResult

# --- Input access helpers ---


def _as_mapping(data: FinancialProfileInput | Mapping[str, Any] | None) -> Mapping[str, Any]:
    if data is None:
        return {}
    if isinstance(data, FinancialProfileInput):
        return data.model_dump(by_alias=True)
    return data


def _lookup(data: Mapping[str, Any] | None, *names: str) -> Any:
    """First value found under any of ``names`` (camelCase or snake_case)."""
    if not isinstance(data, Mapping):
        return None
    for name in names:
        if name in data:
            return data[name]
    return None


def _number(value: Any) -> float | None:
    """Numeric value, or None when missing / not a real number."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if math.isnan(value):
        return None
    return float(value)


def _nested_number(data: Mapping[str, Any], section: str, key: str) -> float | None:
    return _number(_lookup(_lookup(data, section), key))


# --- Component Entry Point ---


def validate_financial_input(
    data: FinancialProfileInput | Mapping[str, Any] | None,
    *,
    rules: FinancialRules | None = None,
) -> ValidationResult:
    """
    Validate raw profile input.

    Args:
        data: Partial input as a mapping (camelCase or snake_case keys),
            or an already-built FinancialProfileInput.
        rules: Optional rules; defaults to the built-in thresholds.

    Returns:
        ValidationResult listing every violated rule.
    """
    limits: ValidationRules = (rules or FinancialRules()).validation
    raw = _as_mapping(data)
    issues: list[ValidationIssue] = []

    gross = _nested_number(raw, "income", "gross")
    net = _nested_number(raw, "income", "net")
    annual_expenses = _nested_number(raw, "expenses", "annual")
    annual_investments = _nested_number(raw, "investments", "annual")
    net_worth = _number(_lookup(raw, "netWorth", "net_worth"))
    age = _number(_lookup(raw, "age"))
    debt = _number(_lookup(raw, "debt"))

    # Required fields
    if gross is None or gross <= 0:
        issues.append(
            ValidationIssue(
                field="income.gross",
                code="gross_income_required",
                message="Gross income must be greater than 0",
            )
        )

    if net is None or net <= 0:
        issues.append(
            ValidationIssue(
                field="income.net",
                code="net_income_required",
                message="Net income must be greater than 0",
            )
        )

    if annual_expenses is None or annual_expenses < 0:
        issues.append(
            ValidationIssue(
                field="expenses.annual",
                code="annual_expenses_invalid",
                message="Annual expenses must be 0 or greater",
            )
        )

    if annual_investments is None or annual_investments < 0:
        issues.append(
            ValidationIssue(
                field="investments.annual",
                code="annual_investments_invalid",
                message="Annual investments must be 0 or greater",
            )
        )

    if net_worth is None:
        issues.append(
            ValidationIssue(
                field="netWorth",
                code="net_worth_required",
                message="Net worth is required",
            )
        )

    if age is None or age < limits.min_age or age > limits.max_age:
        issues.append(
            ValidationIssue(
                field="age",
                code="age_out_of_range",
                message=f"Age must be between {limits.min_age} and {limits.max_age}",
            )
        )

    # Logical checks
    if net is not None and gross is not None and net > gross:
        issues.append(
            ValidationIssue(
                field="income.net",
                code="net_exceeds_gross",
                message="Net income cannot be greater than gross income",
            )
        )

    if (
        annual_expenses is not None
        and net is not None
        and annual_expenses > net * limits.max_expense_to_net_income
    ):
        issues.append(
            ValidationIssue(
                field="expenses.annual",
                code="expenses_implausible",
                message="Annual expenses seem unusually high compared to income",
            )
        )

    if debt is not None and debt < 0:
        issues.append(
            ValidationIssue(
                field="debt",
                code="debt_negative",
                message="Debt cannot be negative",
            )
        )

    return ValidationResult(issues=issues)
