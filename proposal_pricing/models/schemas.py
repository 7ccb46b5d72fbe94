"""
Data schemas for the pricing engine.

Inputs (ServiceDescription and its category payloads) and derived outputs
(TeamMember, PricingResult, MultiServicePricingResult, ImpactAnalysis).
All of them are frozen: a pricing call never mutates what it is given and
never hands back something the caller can mutate in place.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from .enums import (
    SERVICE_CATEGORIES,
    Complexity,
    CoverageDuration,
    DurationUnit,
    EventType,
    ProjectType,
    ServiceCategory,
    ServiceType,
)


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# ── Category payloads ────────────────────────────────────


class ConsultingDetails(FrozenModel):
    category: Literal["consulting"] = "consulting"
    locations: list[str] = []


class EventStaffing(FrozenModel):
    photographers: int = Field(default=0, ge=0)
    videographers: int = Field(default=0, ge=0)
    operators: int = Field(default=0, ge=0)
    sound_technicians: int = Field(default=0, ge=0)
    lighting_technicians: int = Field(default=0, ge=0)
    editors: int = Field(default=0, ge=0)

    def any_staffed(self) -> bool:
        return any(count > 0 for count in self.model_dump().values())


class EventExtras(FrozenModel):
    drone: bool = False
    slider: bool = False
    crane: bool = False
    aerial_crane: bool = False
    special_lighting: bool = False
    multicam_streaming: bool = False
    advanced_led_lighting: bool = False


class EventDetails(FrozenModel):
    category: Literal["events"] = "events"
    event_type: Optional[EventType] = None
    event_date: Optional[str] = None
    coverage_duration: Optional[CoverageDuration] = None
    event_days: Optional[int] = Field(default=None, ge=1)
    staffing: EventStaffing = Field(default_factory=EventStaffing)
    extras: EventExtras = Field(default_factory=EventExtras)
    includes_post_production: bool = False


class TechnologyDetails(FrozenModel):
    category: Literal["technology"] = "technology"
    project_type: Optional[ProjectType] = None
    number_of_pages: Optional[int] = Field(default=None, ge=0)
    number_of_modules: Optional[int] = Field(default=None, ge=0)
    has_payment_integration: bool = False
    has_crm_integration: bool = False
    has_erp_integration: bool = False
    has_maintenance_support: bool = False
    maintenance_months: Optional[int] = Field(default=None, ge=0)


class CreativeDetails(FrozenModel):
    category: Literal["creative"] = "creative"
    number_of_concepts: Optional[int] = Field(default=None, ge=0)
    number_of_revisions: Optional[int] = Field(default=None, ge=0)
    includes_brand_guidelines: bool = False
    deliverable_formats: list[str] = []


ServiceDetails = Annotated[
    Union[ConsultingDetails, EventDetails, TechnologyDetails, CreativeDetails],
    Field(discriminator="category"),
]


# ── Service description ──────────────────────────────────


class ServiceDescription(FrozenModel):
    """One unit of work inside a proposal."""
    service_id: str = ""
    service_type: ServiceType
    complexity: Complexity
    estimated_duration: float = Field(gt=0)
    duration_unit: DurationUnit = DurationUnit.MONTHS
    deliverables: list[str] = []
    details: ServiceDetails
    display_order: int = 0
    service_value: Optional[float] = None  # last computed final price

    @model_validator(mode="before")
    @classmethod
    def _fill_details_category(cls, data: Any) -> Any:
        """Derive the payload category from the service type when not given."""
        if not isinstance(data, dict):
            return data
        try:
            category = SERVICE_CATEGORIES[ServiceType(data.get("service_type"))]
        except ValueError:
            # Field validation reports the unknown service type
            return data

        details = data.get("details")
        if details is None:
            return {**data, "details": {"category": category.value}}
        if isinstance(details, dict) and "category" not in details:
            return {**data, "details": {**details, "category": category.value}}
        return data

    @model_validator(mode="after")
    def _check_category(self) -> "ServiceDescription":
        expected = SERVICE_CATEGORIES[self.service_type]
        if self.details.category != expected.value:
            raise ValueError(
                f"Service type '{self.service_type.value}' belongs to category "
                f"'{expected.value}', got '{self.details.category}' details"
            )
        return self

    @property
    def category(self) -> ServiceCategory:
        return SERVICE_CATEGORIES[self.service_type]


# ── Pricing outputs ──────────────────────────────────────


class TeamMember(FrozenModel):
    role: str
    hourly_rate: float
    hours_per_month: float
    dedication: float  # percentage, informational only


class ExtraItem(FrozenModel):
    name: str
    unit_price: float
    quantity: int = 1
    total: float


class PricingResult(FrozenModel):
    team_members: list[TeamMember] = []
    total_hours: float = 0.0
    base_cost: float = 0.0
    complexity_multiplier: float = 1.0
    overhead: float = 0.0
    margin: float = 0.0
    final_price: float = 0.0
    extras: list[ExtraItem] = []
    extras_total: float = 0.0

    @computed_field  # type: ignore[misc]
    @property
    def total_hours_per_month(self) -> float:
        return sum(m.hours_per_month for m in self.team_members)


class ServicePricingResult(PricingResult):
    service_id: str = ""
    service_type: ServiceType


class MultiServicePricingResult(FrozenModel):
    services: list[ServicePricingResult] = []
    total_base_cost: float = 0.0
    total_overhead: float = 0.0
    total_margin: float = 0.0
    total_final_price: float = 0.0
    total_hours: float = 0.0
    total_team_members: int = 0


# ── Impact simulation ────────────────────────────────────


class ProposalImpact(FrozenModel):
    proposal_id: str
    client_name: str = ""
    current_value: float
    simulated_value: float
    difference: float
    percent_change: float


class ImpactAnalysis(FrozenModel):
    total_current_value: float = 0.0
    total_simulated_value: float = 0.0
    difference: float = 0.0
    percent_change: float = 0.0
    proposal_impacts: list[ProposalImpact] = []
