"""
Classify component - financial stage and strategy category.
"""

from .component import determine_category, determine_stage, months_of_expenses

__all__ = [
    "determine_category",
    "determine_stage",
    "months_of_expenses",
]
