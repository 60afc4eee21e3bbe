"""
Years-to-FI projection.

Assumes a constant annual return compounded monthly and a constant monthly
contribution equal to one twelfth of annual savings.

With no starting balance the future value of an annuity inverts in closed
form:

    FV = PMT * ((1 + r)^n - 1) / r   =>   n = ln(1 + FV * r / PMT) / ln(1 + r)

With a positive starting balance, FV = PV * (1 + r)^n + PMT * ((1 + r)^n - 1) / r
is stepped month by month until the target is met, bounded by
``max_projection_months`` so pathological inputs still terminate.
"""

from __future__ import annotations

import math

from fiprofile.rules.models import ProjectionRules


def project_years_to_fi(
    net_worth: float,
    annual_savings: float,
    fi_number: float,
    *,
    projection: ProjectionRules | None = None,
) -> float:
    """
    Estimate years until ``net_worth`` grows to ``fi_number``.

    Returns 0 when the target is already met and ``projection.never_years``
    (999 by default) when savings are not positive or the target cannot
    be reached.
    """
    projection = projection or ProjectionRules()

    if net_worth >= fi_number:
        return 0.0
    if annual_savings <= 0:
        return float(projection.never_years)

    monthly_return = projection.annual_return / 12
    monthly_savings = annual_savings / 12

    if net_worth <= 0:
        growth = 1 + (fi_number * monthly_return) / monthly_savings
        # A negative target (negative expenses) has no solution
        if growth <= 0:
            return float(projection.never_years)
        months = math.log(growth) / math.log(1 + monthly_return)
        return months / 12

    months = 0
    value = net_worth
    while value < fi_number and months < projection.max_projection_months:
        value = value * (1 + monthly_return) + monthly_savings
        months += 1

    return months / 12
