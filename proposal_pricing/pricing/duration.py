"""
Duration normalisation used by the cost formula.

Rates are monthly (hours per month x duration), but services also declare
durations in days or weeks. Quotes have always multiplied the raw number
regardless of its unit, so `months_equivalent` keeps that behaviour and is
the default. `calendar_months_equivalent` converts properly and can be
passed to the calculator instead.
"""

from __future__ import annotations

from typing import Callable

from proposal_pricing.models.enums import DurationUnit

MonthsEquivalent = Callable[[float, DurationUnit], float]

WORKING_DAYS_PER_MONTH = 22
WEEKS_PER_MONTH = 4.33


def months_equivalent(duration: float, unit: DurationUnit) -> float:
    """Identity: the declared unit is not applied."""
    return duration


def calendar_months_equivalent(duration: float, unit: DurationUnit) -> float:
    if unit == DurationUnit.DAYS:
        return duration / WORKING_DAYS_PER_MONTH
    if unit == DurationUnit.WEEKS:
        return duration / WEEKS_PER_MONTH
    return duration
