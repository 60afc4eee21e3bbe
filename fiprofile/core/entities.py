"""
Domain entities for fiprofile.

Python attributes are snake_case; the persisted JSON uses the camelCase
names of the wire format (field aliases). Construct with either spelling.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# --- Enums ---


class Stage(str, Enum):
    """Life stage on the way to financial independence."""

    SURVIVAL = "Survival"
    STABILITY = "Stability"
    GROWTH = "Growth"
    FREEDOM = "Freedom"
    LEGACY = "Legacy"


class Category(str, Enum):
    """Savings strategy label."""

    STANDARD = "Standard"
    HENRY = "HENRY"  # High Earner, Not Rich Yet
    COAST_FIRE = "CoastFIRE"
    BARISTA_FIRE = "BaristaFIRE"
    FIRE = "FIRE"
    LEAN_FIRE = "LeanFIRE"
    FAT_FIRE = "FatFIRE"
    GEO_FIRE = "GeoFIRE"  # accepted on load, never assigned by the classifier


# --- Input building blocks ---


class Income(BaseModel):
    model_config = ConfigDict(frozen=True)

    gross: float  # annual, before tax
    net: float  # annual, after tax


class Expenses(BaseModel):
    model_config = ConfigDict(frozen=True)

    annual: float
    monthly: float


class Investments(BaseModel):
    model_config = ConfigDict(frozen=True)

    annual: float
    monthly: float | None = None


class FinancialProfileInput(BaseModel):
    """Raw figures supplied by the user. Immutable for the life of a calculation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    income: Income
    expenses: Expenses
    investments: Investments
    net_worth: float = Field(alias="netWorth")
    age: int
    debt: float | None = None


# --- Derived ---


class FinancialMetrics(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    savings_rate: float = Field(alias="savingsRate")
    fi_number: float = Field(alias="fiNumber")
    progress_to_fi: float = Field(alias="progressToFI")
    years_to_fi: float = Field(alias="yearsToFI")


class FinancialProfile(BaseModel):
    """
    The persisted unit.

    Replaced wholesale by a new calculation; never edited in place.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    stage: Stage
    category: Category
    income: Income
    expenses: Expenses
    investments: Investments
    net_worth: float = Field(alias="netWorth")
    age: int
    debt: float | None = None
    metrics: FinancialMetrics
    last_updated: str = Field(alias="lastUpdated")  # ISO-8601 UTC

    def to_wire(self) -> dict[str, Any]:
        """camelCase JSON-ready dict; absent optionals are dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ProfileCalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    profile: FinancialProfile
    insights: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
