"""
Service record adapter — turns a flat `proposal_services` row into a
ServiceDescription with the category payload the pricing engine expects.

Rows store every category's columns side by side (most of them null);
only the columns belonging to the row's own category are carried over.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from proposal_pricing.config import get_settings
from proposal_pricing.exceptions import InvalidInputError
from proposal_pricing.models.enums import SERVICE_CATEGORIES, ServiceCategory, ServiceType
from proposal_pricing.models.schemas import ServiceDescription

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_keys(value: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Staffing / extras JSON columns are written by the frontend in camelCase."""
    if not value:
        return {}
    return {
        _CAMEL_BOUNDARY.sub("_", key).lower(): v
        for key, v in value.items()
        if v is not None
    }


def _drop_nulls(values: dict[str, Any]) -> dict[str, Any]:
    return {key: v for key, v in values.items() if v is not None}


def _category_of(record: Mapping[str, Any]) -> Optional[ServiceCategory]:
    try:
        return SERVICE_CATEGORIES[ServiceType(record.get("service_type"))]
    except ValueError:
        return None


def _details_from_record(
    record: Mapping[str, Any],
    category: Optional[ServiceCategory],
    default_location: str,
) -> Optional[dict[str, Any]]:
    if category is None:
        return None

    if category == ServiceCategory.CONSULTING:
        locations = [loc for loc in (record.get("locations") or []) if loc is not None]
        return {
            "category": category.value,
            "locations": locations or [default_location],
        }

    if category == ServiceCategory.EVENTS:
        return _drop_nulls({
            "category": category.value,
            "event_type": record.get("event_type"),
            "event_date": record.get("event_date"),
            "coverage_duration": record.get("coverage_duration"),
            "event_days": record.get("event_days"),
            "staffing": _snake_keys(record.get("event_staffing")),
            "extras": _snake_keys(record.get("event_extras")),
            "includes_post_production": bool(record.get("post_production_hours")),
        })

    if category == ServiceCategory.TECHNOLOGY:
        return _drop_nulls({
            "category": category.value,
            "project_type": record.get("web_project_type"),
            "number_of_pages": record.get("number_of_pages"),
            "number_of_modules": record.get("number_of_modules"),
            "has_payment_integration": bool(record.get("has_payment_integration")),
            "has_crm_integration": bool(record.get("has_crm_integration")),
            "has_erp_integration": bool(record.get("has_erp_integration")),
            "has_maintenance_support": bool(record.get("has_maintenance")),
            "maintenance_months": record.get("maintenance_months"),
        })

    return _drop_nulls({
        "category": category.value,
        "number_of_concepts": record.get("number_of_concepts"),
        "number_of_revisions": record.get("number_of_revisions"),
        "includes_brand_guidelines": bool(record.get("includes_brand_guidelines")),
        "deliverable_formats": record.get("deliverable_formats") or [],
    })


def service_from_record(record: Mapping[str, Any]) -> ServiceDescription:
    """
    Build a ServiceDescription from a flat service row.
    Raises InvalidInputError if the row cannot describe a priceable service.
    """
    settings = get_settings()
    category = _category_of(record)

    payload = _drop_nulls({
        "service_id": str(record.get("id") or ""),
        "service_type": record.get("service_type"),
        "complexity": record.get("complexity"),
        "estimated_duration": record.get("estimated_duration"),
        "duration_unit": record.get("duration_unit"),
        "deliverables": record.get("deliverables") or [],
        "display_order": record.get("display_order"),
        "service_value": record.get("service_value"),
        "details": _details_from_record(record, category, settings.default_location),
    })

    try:
        return ServiceDescription(**payload)
    except ValidationError as e:
        logger.warning(f"Rejected service record {payload.get('service_id') or '<new>'}: {e.error_count()} error(s)")
        raise InvalidInputError(
            f"Invalid service record '{record.get('service_type')}'",
            details=e.errors(include_url=False, include_context=False),
        ) from e
