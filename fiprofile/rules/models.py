from pydantic import BaseModel, Field


class FiRules(BaseModel):
    multiplier: float = 25  # 4% rule
    safe_withdrawal_rate: float = 0.04


class ProjectionRules(BaseModel):
    annual_return: float = 0.07
    max_projection_months: int = 12000  # 1000 years
    never_years: float = 999


class StageRules(BaseModel):
    survival_max_months: float = 1
    survival_debt_to_income: float = 0.5
    stability_max_months: float = 6
    growth_max_progress: float = 0.75
    freedom_min_progress: float = 0.75
    legacy_min_progress: float = 1.0


class CategoryRules(BaseModel):
    high_income_threshold: float = 100000
    high_savings_rate: float = 0.5
    lean_fire_expenses: float = 40000
    fat_fire_expenses: float = 100000
    fi_achieved_progress: float = 1.0
    henry_max_progress: float = 0.75
    coast_max_age: int = 40
    coast_min_progress: float = 0.25
    barista_min_progress: float = 0.5


class ValidationRules(BaseModel):
    min_age: int = 18
    max_age: int = 100
    max_expense_to_net_income: float = 2.0


class StorageRules(BaseModel):
    key: str = "financial_profile_v1"
    schema_version: int = 1
    stale_after_days: int = 30


class FinancialRules(BaseModel):
    fi: FiRules = Field(default_factory=FiRules)
    projection: ProjectionRules = Field(default_factory=ProjectionRules)
    stages: StageRules = Field(default_factory=StageRules)
    categories: CategoryRules = Field(default_factory=CategoryRules)
    validation: ValidationRules = Field(default_factory=ValidationRules)
    storage: StorageRules = Field(default_factory=StorageRules)


def default_rules() -> FinancialRules:
    """Built-in thresholds, used when no rules file is supplied."""
    return FinancialRules()
