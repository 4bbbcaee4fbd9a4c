"""Quote Adjustment Service for Fair Repair.

Applies the regional labor multiplier to national-baseline catalog prices.

Rounding happens on the adjusted dollar amounts, never on the multiplier,
so total and labor figures derived from one lookup stay consistent.
"""

import math
from typing import Any, Dict, Optional, Union

import pydantic
import structlog

from fair_repair.config.errors import ErrorCode, ValidationError
from fair_repair.models.quote import AdjustedQuote, PriceRange, RepairPricing
from fair_repair.services.labor_rate_service import (
    get_labor_multiplier,
    resolve_labor_rate,
)

logger = structlog.get_logger()


def round_dollars(amount: float) -> float:
    """Round to whole dollars, halves rounding up."""
    return float(math.floor(amount + 0.5))


def adjust_price_range(price_range: PriceRange, multiplier: float) -> PriceRange:
    """Scale a price range by a multiplier.

    Args:
        price_range: Baseline price range.
        multiplier: Labor multiplier (> 0).

    Returns:
        New PriceRange with both bounds multiplied, then rounded.

    Raises:
        ValidationError: If the multiplier is not a positive finite number.
    """
    if not isinstance(multiplier, (int, float)) or not math.isfinite(multiplier) or multiplier <= 0:
        raise ValidationError(
            f"Multiplier must be a positive finite number, got {multiplier!r}",
            field="multiplier",
            code=ErrorCode.INVALID_MULTIPLIER,
        )

    return PriceRange(
        low=round_dollars(price_range.low * multiplier),
        high=round_dollars(price_range.high * multiplier),
    )


def build_adjusted_quote(
    pricing: Union[RepairPricing, Dict[str, Any]],
    zip_code: Optional[str],
) -> AdjustedQuote:
    """Build a location-adjusted quote for a repair.

    The ZIP is resolved once and that single resolution prices both the
    total and the labor range. Parts pass through unadjusted.

    Args:
        pricing: RepairPricing, or a dict with total/labor/parts ranges.
        zip_code: Customer ZIP code (malformed ZIPs price at national average).

    Returns:
        AdjustedQuote.

    Raises:
        ValidationError: If the pricing data is invalid.
    """
    if not isinstance(pricing, RepairPricing):
        try:
            pricing = RepairPricing.model_validate(pricing)
        except pydantic.ValidationError as e:
            raise ValidationError(
                "Invalid repair pricing",
                field="pricing",
                code=ErrorCode.INVALID_PRICE_RANGE,
                details={"errors": e.errors(include_url=False)},
            ) from e

    resolution = resolve_labor_rate(zip_code)
    multiplier = get_labor_multiplier(resolution)

    quote = AdjustedQuote(
        zip_code=resolution.zip_code,
        state=resolution.state,
        multiplier=multiplier,
        price=adjust_price_range(pricing.total, multiplier),
        labor=adjust_price_range(pricing.labor, multiplier) if pricing.labor else None,
        parts=pricing.parts,
        resolution=resolution,
    )

    logger.info(
        "quote_adjusted",
        zip_code=resolution.zip_code,
        state=resolution.state,
        rate_source=resolution.source.value,
        multiplier=round(multiplier, 4),
        price_low=quote.price.low,
        price_high=quote.price.high,
    )
    return quote
