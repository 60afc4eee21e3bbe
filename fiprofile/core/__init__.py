# fiprofile - Core
# Entities, ports and errors shared by every component

from fiprofile.core.entities import (
    Category,
    Expenses,
    FinancialMetrics,
    FinancialProfile,
    FinancialProfileInput,
    Income,
    Investments,
    ProfileCalculationResult,
    Stage,
)
from fiprofile.core.errors import (
    IntegrityError,
    PersistenceError,
    ProfileError,
    ProfileValidationError,
)

__all__ = [
    "Category",
    "Expenses",
    "FinancialMetrics",
    "FinancialProfile",
    "FinancialProfileInput",
    "Income",
    "Investments",
    "IntegrityError",
    "PersistenceError",
    "ProfileCalculationResult",
    "ProfileError",
    "ProfileValidationError",
    "Stage",
]
