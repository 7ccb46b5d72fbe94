"""
Tests: Parameter resolver — defaults, partial overrides, fraction bounds.

Run with:
    pytest proposal_pricing/tests/test_parameters.py -v
"""

import pytest
from pydantic import ValidationError

from proposal_pricing.config import Settings
from proposal_pricing.exceptions import InvalidInputError, ParameterValidationError
from proposal_pricing.pricing.parameters import (
    OVERRIDE_FIELDS,
    PricingOverrides,
    apply_overrides,
    default_pricing_parameters,
    resolve,
    validate_fractions,
)


class TestDefaults:
    def test_default_rates(self):
        params = default_pricing_parameters()
        rates = params.hourly_rates

        assert rates.senior_manager == 100_000
        assert rates.consultant == 75_000
        assert rates.analyst == 45_000
        assert rates.coordinator == 60_000
        assert rates.trainer == 50_000
        assert rates.videographer == 85_000
        assert rates.web_developer == 80_000

    def test_default_multipliers_centre_on_medium(self):
        multipliers = default_pricing_parameters().complexity_multipliers

        assert multipliers.low < 1.0
        assert multipliers.medium == 1.0
        assert multipliers.high > 1.0
        assert (multipliers.low, multipliers.medium, multipliers.high) == (0.8, 1.0, 1.25)

    def test_default_fractions(self):
        params = default_pricing_parameters()
        assert params.overhead_percentage == 0.15
        assert params.margin_percentage == 0.25

    def test_factory_returns_equal_independent_values(self):
        assert default_pricing_parameters() == default_pricing_parameters()

    def test_parameters_are_immutable(self):
        params = default_pricing_parameters()
        with pytest.raises(ValidationError):
            params.overhead_percentage = 0.5

    def test_unknown_complexity_is_invalid_input(self):
        with pytest.raises(InvalidInputError):
            default_pricing_parameters().complexity_multipliers.for_complexity("extreme")


class TestResolve:
    def test_no_customisation_returns_defaults(self):
        assert resolve(None) == default_pricing_parameters()

    def test_empty_customisation_returns_defaults(self):
        assert resolve(PricingOverrides()) == default_pricing_parameters()

    def test_partial_override_keeps_other_defaults(self):
        params = resolve(PricingOverrides(rate_consultant=80_000, multiplier_high=2.0))
        defaults = default_pricing_parameters()

        assert params.hourly_rates.consultant == 80_000
        assert params.complexity_multipliers.high == 2.0
        assert params.hourly_rates.senior_manager == defaults.hourly_rates.senior_manager
        assert params.complexity_multipliers.medium == defaults.complexity_multipliers.medium
        # Creative rates and extras are never persisted by the settings form
        assert params.hourly_rates.photographer == defaults.hourly_rates.photographer
        assert params.extras_pricing == defaults.extras_pricing

    def test_each_override_field_is_applied(self):
        defaults = default_pricing_parameters()
        for field_name, (section, key) in OVERRIDE_FIELDS.items():
            merged = apply_overrides(defaults, PricingOverrides(**{field_name: 0.5}))
            value = getattr(merged, section) if key is None else getattr(getattr(merged, section), key)
            assert value == 0.5, field_name

    def test_mapping_covers_every_override_field(self):
        assert set(OVERRIDE_FIELDS) == set(PricingOverrides.model_fields)

    def test_persisted_row_with_extra_columns(self):
        row = {"_id": "abc", "user_id": "u-1", "rate_trainer": 55_000, "margin_percentage": 0.3}
        params = resolve(PricingOverrides.model_validate(row))

        assert params.hourly_rates.trainer == 55_000
        assert params.margin_percentage == 0.3

    def test_negative_rate_rejected(self):
        with pytest.raises(ValidationError):
            PricingOverrides(rate_analyst=-1)


class TestFractionBounds:
    def test_resolve_keeps_out_of_range_fractions(self):
        params = resolve(PricingOverrides(overhead_percentage=1.5, margin_percentage=3))

        assert params.overhead_percentage == 1.5
        assert params.margin_percentage == 3
        assert params.hourly_rates == default_pricing_parameters().hourly_rates

    def test_overhead_above_range_rejected(self):
        with pytest.raises(ParameterValidationError) as exc_info:
            validate_fractions(resolve(PricingOverrides(overhead_percentage=1.5)))

        assert exc_info.value.error_code == "ERR_PARAM_001"
        assert exc_info.value.details[0]["field"] == "overhead_percentage"

    def test_both_fractions_reported(self):
        with pytest.raises(ParameterValidationError) as exc_info:
            validate_fractions(resolve(PricingOverrides(overhead_percentage=2, margin_percentage=3)))

        fields = [v["field"] for v in exc_info.value.details]
        assert fields == ["overhead_percentage", "margin_percentage"]

    def test_defaults_are_in_range(self):
        defaults = default_pricing_parameters()
        assert validate_fractions(defaults) == defaults

    def test_bounds_are_inclusive(self):
        params = validate_fractions(resolve(PricingOverrides(overhead_percentage=1.0, margin_percentage=0.0)))
        assert params.overhead_percentage == 1.0
        assert params.margin_percentage == 0.0

    def test_bounds_are_configurable(self):
        settings = Settings(max_overhead_percentage=2.0)
        params = validate_fractions(resolve(PricingOverrides(overhead_percentage=1.5)), settings)
        assert params.overhead_percentage == 1.5

    def test_minimum_is_configurable(self):
        settings = Settings(min_fraction=0.05)
        with pytest.raises(ParameterValidationError):
            validate_fractions(resolve(PricingOverrides(margin_percentage=0.01)), settings)
