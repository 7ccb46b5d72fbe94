"""
Multi-service aggregation — prices every service of a proposal on its own
and sums the results into proposal-level totals.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from proposal_pricing.models.schemas import (
    MultiServicePricingResult,
    ServiceDescription,
    ServicePricingResult,
)
from proposal_pricing.pricing.calculator import calculate
from proposal_pricing.pricing.duration import MonthsEquivalent, months_equivalent
from proposal_pricing.pricing.parameters import PricingParameters, default_pricing_parameters

logger = logging.getLogger(__name__)


def calculate_service_pricing(
    service: ServiceDescription,
    params: Optional[PricingParameters] = None,
    to_months: MonthsEquivalent = months_equivalent,
) -> ServicePricingResult:
    """Price one service and tag the result with the service it belongs to."""
    pricing = calculate(service, params or default_pricing_parameters(), to_months)
    return ServicePricingResult(
        **pricing.model_dump(exclude={"total_hours_per_month"}),
        service_id=service.service_id,
        service_type=service.service_type,
    )


def aggregate(
    services: Iterable[ServiceDescription],
    params: Optional[PricingParameters] = None,
    to_months: MonthsEquivalent = months_equivalent,
) -> MultiServicePricingResult:
    """
    Price each service independently and sum the results.
    Team members are counted per service, not deduplicated across services.
    """
    pricing_params = params or default_pricing_parameters()
    results = [calculate_service_pricing(s, pricing_params, to_months) for s in services]

    aggregated = MultiServicePricingResult(
        services=results,
        total_base_cost=sum(r.base_cost for r in results),
        total_overhead=sum(r.overhead for r in results),
        total_margin=sum(r.margin for r in results),
        total_final_price=sum(r.final_price for r in results),
        total_hours=sum(r.total_hours for r in results),
        total_team_members=sum(len(r.team_members) for r in results),
    )
    logger.info(
        f"Priced {len(results)} service(s): total={aggregated.total_final_price:,.2f}, "
        f"hours={aggregated.total_hours:g}, team={aggregated.total_team_members}"
    )
    return aggregated


def update_services_with_pricing(
    services: Iterable[ServiceDescription],
    params: Optional[PricingParameters] = None,
) -> list[ServiceDescription]:
    """Return copies of the services with `service_value` set to their final price."""
    pricing_params = params or default_pricing_parameters()
    return [
        service.model_copy(update={"service_value": calculate(service, pricing_params).final_price})
        for service in services
    ]
