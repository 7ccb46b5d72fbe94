"""
Tests: Multi-service aggregation.

Run with:
    pytest proposal_pricing/tests/test_aggregator.py -v
"""

import pytest

from proposal_pricing.pricing.aggregator import (
    aggregate,
    calculate_service_pricing,
    update_services_with_pricing,
)
from proposal_pricing.pricing.calculator import calculate


class TestAggregate:
    def test_empty_proposal_is_all_zero(self, default_params):
        result = aggregate([], default_params)

        assert result.services == []
        assert result.total_base_cost == 0
        assert result.total_overhead == 0
        assert result.total_margin == 0
        assert result.total_final_price == 0
        assert result.total_hours == 0
        assert result.total_team_members == 0

    def test_single_service_matches_direct_calculation(self, make_service, default_params):
        service = make_service(complexity="high", estimated_duration=4)
        direct = calculate(service, default_params)
        result = aggregate([service], default_params)

        assert result.total_base_cost == direct.base_cost
        assert result.total_overhead == direct.overhead
        assert result.total_margin == direct.margin
        assert result.total_final_price == direct.final_price
        assert result.total_hours == direct.total_hours
        assert result.total_team_members == len(direct.team_members)

    def test_sums_heterogeneous_services(self, make_service, default_params):
        services = [
            make_service(service_id="a"),
            make_service(service_id="b", service_type="web_development", complexity="low", estimated_duration=2),
            make_service(
                service_id="c",
                service_type="photography",
                details={"staffing": {"photographers": 1}, "extras": {"drone": True}},
            ),
        ]
        result = aggregate(services, default_params)
        individual = [calculate(s, default_params) for s in services]

        assert [s.service_id for s in result.services] == ["a", "b", "c"]
        assert result.total_final_price == pytest.approx(sum(r.final_price for r in individual))
        assert result.total_hours == pytest.approx(sum(r.total_hours for r in individual))
        assert result.total_team_members == sum(len(r.team_members) for r in individual)

    def test_each_service_keeps_its_own_complexity(self, make_service, default_params):
        result = aggregate(
            [make_service(service_id="low", complexity="low"), make_service(service_id="high", complexity="high")],
            default_params,
        )
        assert [s.complexity_multiplier for s in result.services] == [0.8, 1.25]

    def test_team_members_not_deduplicated(self, make_service, default_params):
        service = make_service()
        result = aggregate([service, service], default_params)

        assert result.total_team_members == 8

    def test_defaults_used_without_parameters(self, make_service):
        result = aggregate([make_service()])
        assert result.total_final_price == pytest.approx(215_625_000)


class TestServicePricing:
    def test_result_tagged_with_service(self, make_service, default_params):
        result = calculate_service_pricing(make_service(service_id="svc-42", service_type="audit"), default_params)

        assert result.service_id == "svc-42"
        assert result.service_type.value == "audit"
        assert result.total_hours_per_month == 400

    def test_update_services_sets_value(self, make_service, default_params):
        original = make_service()
        (updated,) = update_services_with_pricing([original], default_params)

        assert updated.service_value == pytest.approx(215_625_000)
        assert original.service_value is None
        assert updated.service_id == original.service_id
