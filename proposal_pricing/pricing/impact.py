"""
Pricing impact simulation — how a candidate parameter set would move the
value of existing proposals before it is saved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from proposal_pricing.models.schemas import ImpactAnalysis, ProposalImpact, ServiceDescription
from proposal_pricing.pricing.aggregator import aggregate
from proposal_pricing.pricing.parameters import PricingParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProposalSnapshot:
    proposal_id: str
    services: list[ServiceDescription]
    client_name: str = ""


def _percent_change(current: float, difference: float) -> float:
    return difference / current * 100 if current > 0 else 0.0


def simulate_impact(
    proposals: Iterable[ProposalSnapshot],
    current: PricingParameters,
    simulated: PricingParameters,
) -> ImpactAnalysis:
    impacts: list[ProposalImpact] = []
    for proposal in proposals:
        current_value = aggregate(proposal.services, current).total_final_price
        simulated_value = aggregate(proposal.services, simulated).total_final_price
        difference = simulated_value - current_value
        impacts.append(ProposalImpact(
            proposal_id=proposal.proposal_id,
            client_name=proposal.client_name,
            current_value=current_value,
            simulated_value=simulated_value,
            difference=difference,
            percent_change=_percent_change(current_value, difference),
        ))

    total_current = sum(i.current_value for i in impacts)
    total_simulated = sum(i.simulated_value for i in impacts)
    total_difference = total_simulated - total_current

    logger.info(
        f"Simulated parameter change over {len(impacts)} proposal(s): "
        f"{total_current:,.2f} -> {total_simulated:,.2f}"
    )
    return ImpactAnalysis(
        total_current_value=total_current,
        total_simulated_value=total_simulated,
        difference=total_difference,
        percent_change=_percent_change(total_current, total_difference),
        proposal_impacts=impacts,
    )
