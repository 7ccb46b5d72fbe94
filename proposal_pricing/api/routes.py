"""
API routes — thin HTTP layer that delegates to the pricing engine.

Routes:
  GET    /health                              → API health check
  POST   /api/pricing/service                 → Price one service record
  POST   /api/pricing/proposal                → Price every service of a proposal
  POST   /api/pricing/completion              → Form completion estimate
  POST   /api/pricing/impact                  → Simulate a parameter change over proposals
  GET    /api/pricing/parameters/{user_id}    → Effective parameters for a user
  PUT    /api/pricing/parameters/{user_id}    → Save a user's customisations
  DELETE /api/pricing/parameters/{user_id}    → Reset a user to the defaults
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from proposal_pricing.models.records import service_from_record
from proposal_pricing.models.schemas import (
    ImpactAnalysis,
    MultiServicePricingResult,
    ServicePricingResult,
)
from proposal_pricing.persistence import ParameterRepository
from proposal_pricing.pricing import (
    PricingOverrides,
    PricingParameters,
    ProposalSnapshot,
    aggregate,
    apply_overrides,
    calculate_service_pricing,
    estimate_completion,
    format_pricing_summary,
    resolve,
    simulate_impact,
    validate_fractions,
)

logger = logging.getLogger(__name__)

# ── Routers ──────────────────────────────────────────────
health_router = APIRouter()
pricing_router = APIRouter()


def get_parameter_repository() -> ParameterRepository:
    return ParameterRepository()


# ── Request / response schemas ──────────────────────────
class ServicePricingResponse(BaseModel):
    pricing: ServicePricingResult
    display: dict[str, str]


class ProposalPricingRequest(BaseModel):
    services: list[dict[str, Any]] = []
    user_id: Optional[str] = None


class ProposalPricingResponse(BaseModel):
    pricing: MultiServicePricingResult
    display: dict[str, str]


class CompletionResponse(BaseModel):
    completion: int


class ProposalPayload(BaseModel):
    proposal_id: str
    client_name: str = ""
    services: list[dict[str, Any]] = []


class ImpactRequest(BaseModel):
    simulated: PricingOverrides
    proposals: list[ProposalPayload] = []
    user_id: Optional[str] = None


class ParametersResponse(BaseModel):
    user_id: str
    customised: bool
    parameters: PricingParameters


class ResetResponse(BaseModel):
    user_id: str
    reset: bool


# ── Health ───────────────────────────────────────────────

@health_router.get("/health")
async def health_check():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ── Pricing ──────────────────────────────────────────────

@pricing_router.post("/service", response_model=ServicePricingResponse)
def price_service(
    record: dict[str, Any],
    user_id: Optional[str] = None,
    repository: ParameterRepository = Depends(get_parameter_repository),
):
    service = service_from_record(record)
    pricing = calculate_service_pricing(service, repository.resolve_for(user_id))
    return ServicePricingResponse(pricing=pricing, display=format_pricing_summary(pricing))


@pricing_router.post("/proposal", response_model=ProposalPricingResponse)
def price_proposal(
    body: ProposalPricingRequest,
    repository: ParameterRepository = Depends(get_parameter_repository),
):
    services = [service_from_record(record) for record in body.services]
    pricing = aggregate(services, repository.resolve_for(body.user_id))
    return ProposalPricingResponse(pricing=pricing, display=format_pricing_summary(pricing))


@pricing_router.post("/completion", response_model=CompletionResponse)
def form_completion(form_data: dict[str, Any]):
    return CompletionResponse(completion=estimate_completion(form_data))


@pricing_router.post("/impact", response_model=ImpactAnalysis)
def pricing_impact(
    body: ImpactRequest,
    repository: ParameterRepository = Depends(get_parameter_repository),
):
    current = repository.resolve_for(body.user_id)
    # Simulated values are layered over the user's current parameters
    simulated = validate_fractions(apply_overrides(current, body.simulated))
    proposals = [
        ProposalSnapshot(
            proposal_id=p.proposal_id,
            client_name=p.client_name,
            services=[service_from_record(record) for record in p.services],
        )
        for p in body.proposals
    ]
    return simulate_impact(proposals, current, simulated)


# ── Parameters ───────────────────────────────────────────

@pricing_router.get("/parameters/{user_id}", response_model=ParametersResponse)
def get_parameters(user_id: str, repository: ParameterRepository = Depends(get_parameter_repository)):
    overrides = repository.get_overrides(user_id)
    return ParametersResponse(
        user_id=user_id,
        customised=overrides is not None,
        parameters=resolve(overrides),
    )


@pricing_router.put("/parameters/{user_id}", response_model=ParametersResponse)
def save_parameters(
    user_id: str,
    overrides: PricingOverrides,
    repository: ParameterRepository = Depends(get_parameter_repository),
):
    # Reject out-of-range values before anything is written
    parameters = validate_fractions(resolve(overrides))
    repository.save_overrides(user_id, overrides)
    logger.info(f"[{user_id}] Pricing parameters updated")
    return ParametersResponse(user_id=user_id, customised=True, parameters=parameters)


@pricing_router.delete("/parameters/{user_id}", response_model=ResetResponse)
def reset_parameters(user_id: str, repository: ParameterRepository = Depends(get_parameter_repository)):
    return ResetResponse(user_id=user_id, reset=repository.reset(user_id))
