"""
Display formatting for pricing figures (Angolan Portuguese conventions).

Amounts are shown as whole numbers, grouped by thousands with a no-break
space, followed by the currency suffix: 215 625 000 Kz. Grouping only
starts at five integer digits, so 4500 stays "4500".
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from proposal_pricing.config import get_settings
from proposal_pricing.exceptions import InvalidInputError
from proposal_pricing.models.schemas import MultiServicePricingResult, PricingResult

GROUP_SEPARATOR = "\u00a0"  # no-break space
MIN_GROUPING_DIGITS = 5


def format_number(value: float) -> str:
    if not math.isfinite(value):
        raise InvalidInputError(f"Cannot format non-finite amount: {value!r}")
    rounded = int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    digits = str(abs(rounded))
    if len(digits) >= MIN_GROUPING_DIGITS:
        digits = f"{abs(rounded):,}".replace(",", GROUP_SEPARATOR)
    return f"-{digits}" if rounded < 0 else digits


def format_currency(value: float, suffix: Optional[str] = None) -> str:
    suffix = suffix if suffix is not None else get_settings().currency_suffix
    return f"{format_number(value)} {suffix}"


def format_pricing_summary(result: Union[PricingResult, MultiServicePricingResult]) -> dict[str, str]:
    """Display strings for the headline figures of a pricing result."""
    if isinstance(result, MultiServicePricingResult):
        return {
            "final_price": format_currency(result.total_final_price),
            "base_cost": format_currency(result.total_base_cost),
            "overhead": format_currency(result.total_overhead),
            "margin": format_currency(result.total_margin),
            "total_hours": format_number(result.total_hours),
            "team_members": str(result.total_team_members),
            "services": str(len(result.services)),
        }

    summary = {
        "final_price": format_currency(result.final_price),
        "base_cost": format_currency(result.base_cost),
        "overhead": format_currency(result.overhead),
        "margin": format_currency(result.margin),
        "total_hours": format_number(result.total_hours),
        "team_members": str(len(result.team_members)),
        "complexity_multiplier": f"x{result.complexity_multiplier:g}",
    }
    if result.extras_total:
        summary["extras_total"] = format_currency(result.extras_total)
    return summary
