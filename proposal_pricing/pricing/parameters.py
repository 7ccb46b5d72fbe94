"""
Pricing parameters — default rate tables and the resolver that merges a
user's customisations over them.

A customisation record is flat and sparse: any field it leaves unset falls
back to the default, one field at a time (OVERRIDE_FIELDS is the full map).
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from proposal_pricing.config import Settings, get_settings
from proposal_pricing.exceptions import InvalidInputError, ParameterValidationError
from proposal_pricing.models.enums import Complexity

logger = logging.getLogger(__name__)


# ── Parameter models ─────────────────────────────────────


class HourlyRates(BaseModel):
    model_config = ConfigDict(frozen=True)

    senior_manager: float = Field(ge=0)
    consultant: float = Field(ge=0)
    analyst: float = Field(ge=0)
    coordinator: float = Field(ge=0)
    trainer: float = Field(ge=0)
    # Creative / technical roles
    videographer: float = Field(ge=0)
    photographer: float = Field(ge=0)
    video_editor: float = Field(ge=0)
    graphic_designer: float = Field(ge=0)
    web_developer: float = Field(ge=0)
    sound_technician: float = Field(ge=0)
    lighting_technician: float = Field(ge=0)


class ComplexityMultipliers(BaseModel):
    model_config = ConfigDict(frozen=True)

    low: float = Field(ge=0)
    medium: float = Field(ge=0)
    high: float = Field(ge=0)

    def for_complexity(self, complexity: Complexity | str) -> float:
        try:
            return getattr(self, Complexity(complexity).value)
        except ValueError as e:
            raise InvalidInputError(f"Unknown complexity tier: {complexity!r}") from e


class ExtrasPricing(BaseModel):
    """Fixed per-event prices for equipment extras."""
    model_config = ConfigDict(frozen=True)

    drone: float = Field(ge=0)
    multicam_streaming: float = Field(ge=0)
    advanced_led_lighting: float = Field(ge=0)
    slider: float = Field(ge=0)
    crane: float = Field(ge=0)
    aerial_crane: float = Field(ge=0)


class PricingParameters(BaseModel):
    """A complete, resolved parameter set consumed by the calculator."""
    model_config = ConfigDict(frozen=True)

    hourly_rates: HourlyRates
    complexity_multipliers: ComplexityMultipliers
    extras_pricing: ExtrasPricing
    overhead_percentage: float = Field(ge=0)
    margin_percentage: float = Field(ge=0)


class PricingOverrides(BaseModel):
    """User customisation record, as persisted. Every field is optional."""
    rate_senior_manager: Optional[float] = Field(default=None, ge=0)
    rate_consultant: Optional[float] = Field(default=None, ge=0)
    rate_analyst: Optional[float] = Field(default=None, ge=0)
    rate_coordinator: Optional[float] = Field(default=None, ge=0)
    rate_trainer: Optional[float] = Field(default=None, ge=0)
    rate_videographer: Optional[float] = Field(default=None, ge=0)
    rate_photographer: Optional[float] = Field(default=None, ge=0)
    rate_video_editor: Optional[float] = Field(default=None, ge=0)
    rate_graphic_designer: Optional[float] = Field(default=None, ge=0)
    rate_web_developer: Optional[float] = Field(default=None, ge=0)
    rate_sound_technician: Optional[float] = Field(default=None, ge=0)
    rate_lighting_technician: Optional[float] = Field(default=None, ge=0)
    multiplier_low: Optional[float] = Field(default=None, ge=0)
    multiplier_medium: Optional[float] = Field(default=None, ge=0)
    multiplier_high: Optional[float] = Field(default=None, ge=0)
    extra_drone: Optional[float] = Field(default=None, ge=0)
    extra_multicam_streaming: Optional[float] = Field(default=None, ge=0)
    extra_advanced_led_lighting: Optional[float] = Field(default=None, ge=0)
    extra_slider: Optional[float] = Field(default=None, ge=0)
    extra_crane: Optional[float] = Field(default=None, ge=0)
    extra_aerial_crane: Optional[float] = Field(default=None, ge=0)
    overhead_percentage: Optional[float] = Field(default=None, ge=0)
    margin_percentage: Optional[float] = Field(default=None, ge=0)


# override field -> (section of PricingParameters, key inside the section)
OVERRIDE_FIELDS: dict[str, tuple[str, Optional[str]]] = {
    "rate_senior_manager": ("hourly_rates", "senior_manager"),
    "rate_consultant": ("hourly_rates", "consultant"),
    "rate_analyst": ("hourly_rates", "analyst"),
    "rate_coordinator": ("hourly_rates", "coordinator"),
    "rate_trainer": ("hourly_rates", "trainer"),
    "rate_videographer": ("hourly_rates", "videographer"),
    "rate_photographer": ("hourly_rates", "photographer"),
    "rate_video_editor": ("hourly_rates", "video_editor"),
    "rate_graphic_designer": ("hourly_rates", "graphic_designer"),
    "rate_web_developer": ("hourly_rates", "web_developer"),
    "rate_sound_technician": ("hourly_rates", "sound_technician"),
    "rate_lighting_technician": ("hourly_rates", "lighting_technician"),
    "multiplier_low": ("complexity_multipliers", "low"),
    "multiplier_medium": ("complexity_multipliers", "medium"),
    "multiplier_high": ("complexity_multipliers", "high"),
    "extra_drone": ("extras_pricing", "drone"),
    "extra_multicam_streaming": ("extras_pricing", "multicam_streaming"),
    "extra_advanced_led_lighting": ("extras_pricing", "advanced_led_lighting"),
    "extra_slider": ("extras_pricing", "slider"),
    "extra_crane": ("extras_pricing", "crane"),
    "extra_aerial_crane": ("extras_pricing", "aerial_crane"),
    "overhead_percentage": ("overhead_percentage", None),
    "margin_percentage": ("margin_percentage", None),
}


# ── Defaults ─────────────────────────────────────────────


def default_pricing_parameters() -> PricingParameters:
    """The system default parameter set (rates in Kz per hour)."""
    return PricingParameters(
        hourly_rates=HourlyRates(
            senior_manager=100000,
            consultant=75000,
            analyst=45000,
            coordinator=60000,
            trainer=50000,
            videographer=85000,
            photographer=65000,
            video_editor=60000,
            graphic_designer=55000,
            web_developer=80000,
            sound_technician=50000,
            lighting_technician=50000,
        ),
        complexity_multipliers=ComplexityMultipliers(low=0.8, medium=1.0, high=1.25),
        extras_pricing=ExtrasPricing(
            drone=150000,
            multicam_streaming=300000,
            advanced_led_lighting=75000,
            slider=50000,
            crane=200000,
            aerial_crane=350000,
        ),
        overhead_percentage=0.15,
        margin_percentage=0.25,
    )


# ── Merge / resolve ──────────────────────────────────────


def apply_overrides(defaults: PricingParameters, overrides: PricingOverrides) -> PricingParameters:
    """Apply every set override field over `defaults`; unset fields keep the default."""
    merged = defaults.model_dump()
    for field_name, (section, key) in OVERRIDE_FIELDS.items():
        value = getattr(overrides, field_name)
        if value is None:
            continue
        if key is None:
            merged[section] = value
        else:
            merged[section][key] = value
    return PricingParameters(**merged)


def validate_fractions(params: PricingParameters, settings: Optional[Settings] = None) -> PricingParameters:
    """
    Check overhead and margin against the configured inclusive bounds.
    Returns the parameters unchanged; raises ParameterValidationError otherwise.
    """
    settings = settings or get_settings()
    violations: list[dict[str, float | str]] = []

    bounds = {
        "overhead_percentage": settings.max_overhead_percentage,
        "margin_percentage": settings.max_margin_percentage,
    }
    for name, upper in bounds.items():
        value = getattr(params, name)
        if not settings.min_fraction <= value <= upper:
            violations.append({
                "field": name,
                "value": value,
                "min": settings.min_fraction,
                "max": upper,
            })

    if violations:
        fields = ", ".join(str(v["field"]) for v in violations)
        raise ParameterValidationError(f"Pricing parameters out of range: {fields}", details=violations)
    return params


def resolve(custom: Optional[PricingOverrides] = None) -> PricingParameters:
    """
    Return the effective parameter set for an optional customisation record.
    Never fails: overhead and margin are merged as given, so callers that
    accept user input run validate_fractions on the result.
    """
    defaults = default_pricing_parameters()
    if custom is None:
        logger.debug("No custom pricing parameters, using defaults")
        return defaults

    overridden = sorted(custom.model_dump(exclude_none=True))
    logger.debug(f"Resolving pricing parameters with overrides: {overridden}")
    return apply_overrides(defaults, custom)
