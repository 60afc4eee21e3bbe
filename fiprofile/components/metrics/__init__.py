"""
Metrics component - savings rate, FI number, progress to FI and years to FI.
"""

from ._projection import project_years_to_fi
from .component import annual_savings, compute_metrics

__all__ = [
    "annual_savings",
    "compute_metrics",
    "project_years_to_fi",
]
