"""Completion estimate for a service form — advisory only, never used in pricing."""

from __future__ import annotations

import math
from typing import Any, Mapping

from proposal_pricing.models.enums import SERVICE_CATEGORIES, ServiceCategory, ServiceType


def _category(form_data: Mapping[str, Any]) -> ServiceCategory | None:
    try:
        return SERVICE_CATEGORIES[ServiceType(form_data.get("service_type"))]
    except ValueError:
        return None


def estimate_completion(form_data: Mapping[str, Any]) -> int:
    """
    Percentage (0-100) of the relevant form fields that are filled in.

    Base fields: service type, estimated duration, complexity.
    Events add event type, coverage duration and staffing; technology adds
    project type and pages/modules; creative adds concepts and formats.
    """
    fields = 3
    filled = sum(
        1 for key in ("service_type", "estimated_duration", "complexity") if form_data.get(key)
    )

    category = _category(form_data)
    if category == ServiceCategory.EVENTS:
        fields += 3
        staffing = form_data.get("event_staffing") or {}
        filled += bool(form_data.get("event_type"))
        filled += bool(form_data.get("coverage_duration"))
        filled += any((count or 0) > 0 for count in staffing.values())
    elif category == ServiceCategory.TECHNOLOGY:
        fields += 2
        web = form_data.get("web_systems_data") or {}
        filled += bool(web.get("project_type"))
        filled += bool(web.get("number_of_pages") or web.get("number_of_modules"))
    elif category == ServiceCategory.CREATIVE:
        fields += 2
        design = form_data.get("design_data") or {}
        filled += bool(design.get("number_of_concepts"))
        filled += bool(design.get("deliverable_formats"))

    return math.floor(filled / fields * 100 + 0.5)
