"""
Profile component - calculation entry point and profile lifecycle.
"""

from .component import (
    ProfileService,
    build_input,
    calculate_financial_profile,
)
from .models import StoredProfileStatus

__all__ = [
    "ProfileService",
    "StoredProfileStatus",
    "build_input",
    "calculate_financial_profile",
]
