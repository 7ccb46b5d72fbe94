"""
Pricing engine — the single boundary callers interact with:

    from proposal_pricing.pricing import resolve, calculate, aggregate
"""

from .aggregator import aggregate, calculate_service_pricing, update_services_with_pricing
from .calculator import calculate
from .completion import estimate_completion
from .duration import calendar_months_equivalent, months_equivalent
from .formatting import format_currency, format_number, format_pricing_summary
from .impact import ProposalSnapshot, simulate_impact
from .parameters import (
    PricingOverrides,
    PricingParameters,
    apply_overrides,
    default_pricing_parameters,
    resolve,
    validate_fractions,
)

__all__ = [
    "aggregate",
    "calculate_service_pricing",
    "update_services_with_pricing",
    "calculate",
    "estimate_completion",
    "calendar_months_equivalent",
    "months_equivalent",
    "format_currency",
    "format_number",
    "format_pricing_summary",
    "ProposalSnapshot",
    "simulate_impact",
    "PricingOverrides",
    "PricingParameters",
    "apply_overrides",
    "default_pricing_parameters",
    "resolve",
    "validate_fractions",
]
