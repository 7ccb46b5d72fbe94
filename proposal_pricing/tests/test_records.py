"""
Tests: Service records and the ServiceDescription tagged union.

Run with:
    pytest proposal_pricing/tests/test_records.py -v
"""

import pytest
from pydantic import ValidationError

from proposal_pricing.exceptions import InvalidInputError
from proposal_pricing.models.enums import ServiceCategory
from proposal_pricing.models.records import service_from_record
from proposal_pricing.models.schemas import (
    ConsultingDetails,
    EventDetails,
    ServiceDescription,
    TechnologyDetails,
)


def _row(**columns):
    row = {
        "id": "row-1",
        "service_type": "pmo",
        "complexity": "medium",
        "estimated_duration": 3,
        "duration_unit": "months",
        "deliverables": None,
        "event_staffing": None,
        "event_extras": None,
        "web_project_type": None,
        "number_of_concepts": None,
        "display_order": 2,
        "service_value": 0,
    }
    row.update(columns)
    return row


class TestServiceDescription:
    def test_details_derived_from_service_type(self):
        service = ServiceDescription(service_type="strategy", complexity="low", estimated_duration=1)

        assert isinstance(service.details, ConsultingDetails)
        assert service.category == ServiceCategory.CONSULTING

    def test_category_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="belongs to category"):
            ServiceDescription(
                service_type="pmo",
                complexity="low",
                estimated_duration=1,
                details=EventDetails(),
            )

    def test_duration_must_be_positive(self):
        with pytest.raises(ValidationError):
            ServiceDescription(service_type="pmo", complexity="low", estimated_duration=0)

    def test_unknown_complexity_rejected(self):
        with pytest.raises(ValidationError):
            ServiceDescription(service_type="pmo", complexity="extreme", estimated_duration=1)

    def test_is_frozen(self):
        service = ServiceDescription(service_type="pmo", complexity="low", estimated_duration=1)
        with pytest.raises(ValidationError):
            service.complexity = "high"


class TestServiceFromRecord:
    def test_consulting_row_gets_default_location(self):
        service = service_from_record(_row())

        assert service.service_id == "row-1"
        assert service.details.locations == ["Luanda"]
        assert service.deliverables == []
        assert service.display_order == 2

    def test_consulting_row_keeps_locations(self):
        service = service_from_record(_row(locations=["Huambo", "Lobito"]))
        assert service.details.locations == ["Huambo", "Lobito"]

    def test_event_row_with_camel_case_json(self):
        service = service_from_record(_row(
            service_type="video_coverage",
            coverage_duration="multi_day",
            event_days=3,
            event_staffing={"videographers": 2, "soundTechnicians": 1, "editors": None},
            event_extras={"aerialCrane": True, "multicamStreaming": False},
            post_production_hours=10,
        ))

        details = service.details
        assert isinstance(details, EventDetails)
        assert details.staffing.videographers == 2
        assert details.staffing.sound_technicians == 1
        assert details.staffing.editors == 0
        assert details.extras.aerial_crane is True
        assert details.extras.multicam_streaming is False
        assert details.includes_post_production is True
        assert details.event_days == 3

    def test_technology_row(self):
        service = service_from_record(_row(
            service_type="web_development",
            web_project_type="ecommerce",
            number_of_pages=12,
            has_maintenance=True,
            maintenance_months=6,
            has_crm_integration=None,
        ))

        details = service.details
        assert isinstance(details, TechnologyDetails)
        assert details.project_type.value == "ecommerce"
        assert details.has_maintenance_support is True
        assert details.has_crm_integration is False
        assert details.maintenance_months == 6

    def test_creative_row(self):
        service = service_from_record(_row(
            service_type="branding",
            number_of_concepts=3,
            deliverable_formats=["pdf", "svg"],
        ))
        assert service.details.number_of_concepts == 3
        assert service.details.deliverable_formats == ["pdf", "svg"]

    def test_unknown_service_type(self):
        with pytest.raises(InvalidInputError) as exc_info:
            service_from_record(_row(service_type="catering"))

        assert exc_info.value.error_code == "ERR_INPUT_001"
        assert exc_info.value.details

    def test_unknown_complexity(self):
        with pytest.raises(InvalidInputError):
            service_from_record(_row(complexity="extreme"))

    def test_non_positive_duration(self):
        with pytest.raises(InvalidInputError):
            service_from_record(_row(estimated_duration=0))

    def test_missing_duration(self):
        with pytest.raises(InvalidInputError):
            service_from_record(_row(estimated_duration=None))
