"""
Tests: Display formatting of amounts and pricing summaries.

Run with:
    pytest proposal_pricing/tests/test_formatting.py -v
"""

import pytest

from proposal_pricing.exceptions import InvalidInputError
from proposal_pricing.pricing.aggregator import aggregate
from proposal_pricing.pricing.calculator import calculate
from proposal_pricing.pricing.formatting import (
    GROUP_SEPARATOR,
    format_currency,
    format_number,
    format_pricing_summary,
)

NBSP = "\u00a0"


class TestFormatNumber:
    def test_separator_is_no_break_space(self):
        assert GROUP_SEPARATOR == NBSP

    def test_four_digits_not_grouped(self):
        assert format_number(1234) == "1234"

    def test_five_digits_grouped(self):
        assert format_number(12345) == f"12{NBSP}345"

    def test_large_amount(self):
        assert format_number(258_750_000) == f"258{NBSP}750{NBSP}000"

    def test_rounds_half_up(self):
        assert format_number(2.5) == "3"
        assert format_number(2.4) == "2"
        assert format_number(999.5) == "1000"

    def test_negative_amount(self):
        assert format_number(-12345.5) == f"-12{NBSP}346"

    def test_zero(self):
        assert format_number(0) == "0"

    def test_non_finite_rejected(self):
        for value in (float("nan"), float("inf"), float("-inf")):
            with pytest.raises(InvalidInputError):
                format_number(value)


class TestFormatCurrency:
    def test_default_suffix(self):
        assert format_currency(75_000) == f"75{NBSP}000 Kz"

    def test_custom_suffix(self):
        assert format_currency(4500, suffix="AOA") == "4500 AOA"


class TestPricingSummary:
    def test_single_service_summary(self, make_service, default_params):
        summary = format_pricing_summary(calculate(make_service(), default_params))

        assert summary == {
            "final_price": f"215{NBSP}625{NBSP}000 Kz",
            "base_cost": f"150{NBSP}000{NBSP}000 Kz",
            "overhead": f"22{NBSP}500{NBSP}000 Kz",
            "margin": f"43{NBSP}125{NBSP}000 Kz",
            "total_hours": "2400",
            "team_members": "4",
            "complexity_multiplier": "x1",
        }

    def test_extras_shown_when_charged(self, make_service, default_params):
        service = make_service(service_type="streaming", details={"extras": {"multicam_streaming": True}})
        summary = format_pricing_summary(calculate(service, default_params))

        assert summary["extras_total"] == f"300{NBSP}000 Kz"

    def test_proposal_summary(self, make_service, default_params):
        result = aggregate([make_service(), make_service(service_id="svc-2")], default_params)
        summary = format_pricing_summary(result)

        assert summary["final_price"] == f"431{NBSP}250{NBSP}000 Kz"
        assert summary["total_hours"] == "4800"
        assert summary["team_members"] == "8"
        assert summary["services"] == "2"
