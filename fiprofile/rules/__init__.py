"""
Financial thresholds and tunables.

All classifier, projection, validation and storage constants live here so
the calculators, the insight copy and any front-end read the same values.
"""

from fiprofile.rules.loader import load_rules, load_rules_or_default
from fiprofile.rules.models import (
    CategoryRules,
    FinancialRules,
    FiRules,
    ProjectionRules,
    StageRules,
    StorageRules,
    ValidationRules,
    default_rules,
)

__all__ = [
    "CategoryRules",
    "FinancialRules",
    "FiRules",
    "ProjectionRules",
    "StageRules",
    "StorageRules",
    "ValidationRules",
    "default_rules",
    "load_rules",
    "load_rules_or_default",
]
