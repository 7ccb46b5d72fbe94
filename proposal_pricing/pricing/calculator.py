"""
Single-service pricing calculator.

    team roster -> hours and base cost -> complexity multiplier
    -> (+ extras) -> overhead -> margin -> final price

Pure: the same service and parameters always produce the same result.
"""

from __future__ import annotations

import logging

from proposal_pricing.exceptions import InvalidInputError
from proposal_pricing.models.schemas import PricingResult, ServiceDescription
from proposal_pricing.pricing.duration import MonthsEquivalent, months_equivalent
from proposal_pricing.pricing.parameters import PricingParameters
from proposal_pricing.pricing.team import TEAM_BUILDERS

logger = logging.getLogger(__name__)


def calculate(
    service: ServiceDescription,
    params: PricingParameters,
    to_months: MonthsEquivalent = months_equivalent,
) -> PricingResult:
    """Price one service with a fully resolved parameter set."""
    builder = TEAM_BUILDERS.get(service.category)
    if builder is None:
        raise InvalidInputError(f"No pricing rules for service category {service.category!r}")

    months = to_months(service.estimated_duration, service.duration_unit)
    plan = builder(service, params, months)

    # Event rosters carry engagement hours; everything else is hours per month
    duration = months if plan.scales_with_duration else 1
    total_hours = sum(m.hours_per_month for m in plan.members) * duration
    base_cost = sum(m.hourly_rate * m.hours_per_month * duration for m in plan.members)
    extras_total = sum(e.total for e in plan.extras)

    complexity_multiplier = params.complexity_multipliers.for_complexity(service.complexity)
    cost_after_complexity = base_cost * complexity_multiplier
    total_before_overhead = cost_after_complexity + extras_total

    overhead = total_before_overhead * params.overhead_percentage
    cost_with_overhead = total_before_overhead + overhead

    margin = cost_with_overhead * params.margin_percentage
    final_price = cost_with_overhead + margin

    logger.debug(
        f"{service.service_type.value}/{service.complexity.value}: "
        f"{len(plan.members)} members, {total_hours:g}h, base={base_cost:,.2f}, "
        f"final={final_price:,.2f}"
    )

    return PricingResult(
        team_members=plan.members,
        total_hours=total_hours,
        base_cost=base_cost,
        complexity_multiplier=complexity_multiplier,
        overhead=overhead,
        margin=margin,
        final_price=final_price,
        extras=plan.extras,
        extras_total=extras_total,
    )
