"""
Validation component - structural and logical sanity checks on profile input.
"""

from .component import validate_financial_input
from .models import ValidationIssue, ValidationResult

__all__ = [
    "ValidationIssue",
    "ValidationResult",
    "validate_financial_input",
]
