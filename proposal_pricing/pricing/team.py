"""
Team composition rules, one builder per service category.

Each builder returns the roster for a service (and, for events, the
equipment extras). Builders only decide who is on the team; the cost
formula lives in calculator.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, TypeVar

from proposal_pricing.exceptions import InvalidInputError
from proposal_pricing.models.enums import Complexity, CoverageDuration, ServiceCategory, ServiceType
from proposal_pricing.models.schemas import (
    ConsultingDetails,
    CreativeDetails,
    EventDetails,
    ExtraItem,
    ServiceDescription,
    TeamMember,
    TechnologyDetails,
)
from proposal_pricing.pricing.parameters import PricingParameters


STANDARD_MONTH_HOURS = 160
FULL_DAY_HOURS = 8
HALF_DAY_HOURS = 4
DEFAULT_EVENT_DAYS = 2
MIN_TEAM_FOR_LONG_PROJECTS = 3
LONG_PROJECT_MONTHS = 3


@dataclass(frozen=True)
class TeamPlan:
    members: list[TeamMember]
    extras: list[ExtraItem] = field(default_factory=list)
    # Event teams are priced per engagement, not per month of duration
    scales_with_duration: bool = True


TeamBuilder = Callable[[ServiceDescription, PricingParameters, float], TeamPlan]
Details = TypeVar("Details", ConsultingDetails, EventDetails, CreativeDetails, TechnologyDetails)


def _member(role: str, rate: float, hours: float, dedication: float) -> TeamMember:
    return TeamMember(role=role, hourly_rate=rate, hours_per_month=hours, dedication=dedication)


def _counted(singular: str, plural: str, count: int) -> str:
    return f"{plural if count > 1 else singular} ({count})"


def _details_of(service: ServiceDescription, kind: type[Details]) -> Details:
    if not isinstance(service.details, kind):
        raise InvalidInputError(
            f"Service type '{service.service_type.value}' cannot be priced with "
            f"'{service.details.category}' details"
        )
    return service.details


# ── Consulting ───────────────────────────────────────────


def consulting_team(service: ServiceDescription, params: PricingParameters, months: float) -> TeamPlan:
    rates = params.hourly_rates
    details = _details_of(service, ConsultingDetails)
    high = service.complexity == Complexity.HIGH
    members: list[TeamMember] = []

    members.append(_member("Senior Manager", rates.senior_manager, 80 if high else 40, 50 if high else 25))

    for _ in range(2 if high else 1):
        members.append(_member("Consultant", rates.consultant, STANDARD_MONTH_HOURS * 0.75, 75))

    members.append(_member("Analyst", rates.analyst, STANDARD_MONTH_HOURS, 100))

    for index, location in enumerate(details.locations):
        label = location or f"Location {index + 1}"
        members.append(
            _member(f"Local Coordinator ({label})", rates.coordinator, STANDARD_MONTH_HOURS * 0.5, 50)
        )

    if service.service_type == ServiceType.TRAINING or "training" in service.deliverables:
        members.append(_member("Trainer", rates.trainer, 40, 25))

    # Projects longer than three months need at least three profiles
    if months > LONG_PROJECT_MONTHS and len(members) < MIN_TEAM_FOR_LONG_PROJECTS:
        members.append(_member("Additional Consultant", rates.consultant, STANDARD_MONTH_HOURS * 0.5, 50))

    return TeamPlan(members=members)


# ── Events ───────────────────────────────────────────────


def _event_hours(details: EventDetails) -> float:
    if details.coverage_duration == CoverageDuration.HALF_DAY:
        return HALF_DAY_HOURS
    if details.coverage_duration == CoverageDuration.MULTI_DAY:
        return FULL_DAY_HOURS * (details.event_days or DEFAULT_EVENT_DAYS)
    return FULL_DAY_HOURS


def event_team(service: ServiceDescription, params: PricingParameters, months: float) -> TeamPlan:
    rates = params.hourly_rates
    details = _details_of(service, EventDetails)
    hours = _event_hours(details)
    staffing = details.staffing
    members: list[TeamMember] = []

    staffed_roles = [
        ("Photographer", "Photographers", staffing.photographers, rates.photographer),
        ("Videographer", "Videographers", staffing.videographers, rates.videographer),
        ("Operator", "Operators", staffing.operators, rates.videographer * 0.8),
        ("Sound Technician", "Sound Technicians", staffing.sound_technicians, rates.sound_technician),
        ("Lighting Technician", "Lighting Technicians", staffing.lighting_technicians, rates.lighting_technician),
    ]
    for singular, plural, count, rate in staffed_roles:
        if count > 0:
            members.append(_member(_counted(singular, plural, count), rate, hours * count, 100))

    # Post-production: editing takes twice the coverage time per editor
    if details.includes_post_production or staffing.editors > 0:
        editors = staffing.editors or 1
        members.append(
            _member(_counted("Video Editor", "Video Editors", editors), rates.video_editor, hours * 2 * editors, 100)
        )

    prices = params.extras_pricing
    flags = details.extras
    available_extras = [
        (flags.drone, "Drone (aerial coverage)", prices.drone),
        (flags.multicam_streaming, "Multi-camera streaming", prices.multicam_streaming),
        (flags.advanced_led_lighting, "Advanced LED lighting", prices.advanced_led_lighting),
        (flags.slider, "Camera slider", prices.slider),
        (flags.crane, "Camera crane", prices.crane),
        (flags.aerial_crane, "Aerial crane", prices.aerial_crane),
    ]
    extras = [
        ExtraItem(name=name, unit_price=price, quantity=1, total=price)
        for enabled, name, price in available_extras
        if enabled
    ]

    return TeamPlan(members=members, extras=extras, scales_with_duration=False)


# ── Creative ─────────────────────────────────────────────


def creative_team(service: ServiceDescription, params: PricingParameters, months: float) -> TeamPlan:
    rates = params.hourly_rates
    _details_of(service, CreativeDetails)
    not_low = service.complexity != Complexity.LOW
    high = service.complexity == Complexity.HIGH
    members: list[TeamMember] = []

    if service.service_type in (ServiceType.GRAPHIC_DESIGN, ServiceType.BRANDING):
        members.append(_member(
            "Senior Graphic Designer",
            rates.graphic_designer * 1.3,
            STANDARD_MONTH_HOURS if high else STANDARD_MONTH_HOURS * 0.75,
            100 if high else 75,
        ))
        if not_low:
            members.append(
                _member("Junior Graphic Designer", rates.graphic_designer * 0.7, STANDARD_MONTH_HOURS * 0.5, 50)
            )

    elif service.service_type == ServiceType.MARKETING_DIGITAL:
        members.append(_member("Digital Marketing Manager", rates.consultant, STANDARD_MONTH_HOURS * 0.5, 50))
        members.append(_member("Social Media Specialist", rates.analyst, STANDARD_MONTH_HOURS * 0.75, 75))
        if not_low:
            members.append(_member("Content Designer", rates.graphic_designer, STANDARD_MONTH_HOURS * 0.5, 50))

    elif service.service_type == ServiceType.VIDEO_EDITING:
        members.append(_member("Senior Video Editor", rates.video_editor * 1.2, STANDARD_MONTH_HOURS * 0.75, 75))
        if not_low:
            members.append(_member("Motion Designer", rates.video_editor, STANDARD_MONTH_HOURS * 0.5, 50))

    return TeamPlan(members=members)


# ── Technology ───────────────────────────────────────────


def technology_team(service: ServiceDescription, params: PricingParameters, months: float) -> TeamPlan:
    rates = params.hourly_rates
    details = _details_of(service, TechnologyDetails)
    high = service.complexity == Complexity.HIGH
    members: list[TeamMember] = []

    members.append(
        _member("Tech Lead / Project Manager", rates.senior_manager, 80 if high else 40, 50 if high else 25)
    )

    developer_count = {Complexity.HIGH: 3, Complexity.MEDIUM: 2, Complexity.LOW: 1}[service.complexity]
    for i in range(developer_count):
        if i == 0:
            members.append(
                _member("Senior Full-Stack Developer", rates.web_developer * 1.3, STANDARD_MONTH_HOURS, 100)
            )
        else:
            members.append(_member("Full-Stack Developer", rates.web_developer, STANDARD_MONTH_HOURS, 100))

    if service.service_type == ServiceType.WEB_DEVELOPMENT:
        members.append(_member("UI/UX Designer", rates.graphic_designer * 1.2, STANDARD_MONTH_HOURS * 0.5, 50))

    if service.complexity != Complexity.LOW:
        members.append(_member("QA / Tester", rates.analyst, STANDARD_MONTH_HOURS * 0.5, 50))

    if service.service_type == ServiceType.SYSTEMS_DEVELOPMENT:
        members.append(_member("DevOps Engineer", rates.web_developer * 1.1, STANDARD_MONTH_HOURS * 0.25, 25))

    if details.has_maintenance_support and details.maintenance_months:
        members.append(_member("Support & Maintenance", rates.web_developer * 0.5, 20, 12.5))

    return TeamPlan(members=members)


TEAM_BUILDERS: dict[ServiceCategory, TeamBuilder] = {
    ServiceCategory.CONSULTING: consulting_team,
    ServiceCategory.EVENTS: event_team,
    ServiceCategory.CREATIVE: creative_team,
    ServiceCategory.TECHNOLOGY: technology_team,
}
