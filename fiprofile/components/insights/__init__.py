"""
Insights component - insight and recommendation copy for a profile.
"""

from .component import (
    STAGE_INSIGHTS,
    STAGE_RECOMMENDATIONS,
    generate_insights,
    generate_recommendations,
)

__all__ = [
    "STAGE_INSIGHTS",
    "STAGE_RECOMMENDATIONS",
    "generate_insights",
    "generate_recommendations",
]
