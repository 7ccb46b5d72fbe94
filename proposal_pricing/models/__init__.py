"""Domain models — enums and pricing schemas."""

from .enums import (
    SERVICE_CATEGORIES,
    SERVICE_LABELS,
    Complexity,
    CoverageDuration,
    DurationUnit,
    EventType,
    ProjectType,
    ServiceCategory,
    ServiceType,
)
from .schemas import (
    ConsultingDetails,
    CreativeDetails,
    EventDetails,
    EventExtras,
    EventStaffing,
    ExtraItem,
    ImpactAnalysis,
    MultiServicePricingResult,
    PricingResult,
    ProposalImpact,
    ServiceDescription,
    ServicePricingResult,
    TeamMember,
    TechnologyDetails,
)

__all__ = [
    "SERVICE_CATEGORIES",
    "SERVICE_LABELS",
    "Complexity",
    "CoverageDuration",
    "DurationUnit",
    "EventType",
    "ProjectType",
    "ServiceCategory",
    "ServiceType",
    "ConsultingDetails",
    "CreativeDetails",
    "EventDetails",
    "EventExtras",
    "EventStaffing",
    "ExtraItem",
    "ImpactAnalysis",
    "MultiServicePricingResult",
    "PricingResult",
    "ProposalImpact",
    "ServiceDescription",
    "ServicePricingResult",
    "TeamMember",
    "TechnologyDetails",
]
