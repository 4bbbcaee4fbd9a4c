"""Repair quote Pydantic models for Fair Repair.

Catalog pricing for a repair (total / labor / parts ranges) and the
location-adjusted quote produced from it.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, model_validator

from fair_repair.models.rate_resolution import RateResolution


class PriceRange(BaseModel):
    """Low/high dollar range for a repair component."""

    low: float = Field(..., ge=0, description="Low estimate ($)")
    high: float = Field(..., ge=0, description="High estimate ($)")

    class Config:
        frozen = True

    @model_validator(mode="after")
    def validate_order(self) -> "PriceRange":
        """Ensure low <= high."""
        if self.low > self.high:
            raise ValueError(
                f"Price range must be low <= high, got: low={self.low}, high={self.high}"
            )
        return self


class RepairPricing(BaseModel):
    """National-baseline catalog pricing for one repair."""

    total: PriceRange = Field(..., description="Total price range")
    labor: Optional[PriceRange] = Field(None, description="Labor-only price range")
    parts: Optional[PriceRange] = Field(None, description="Parts-only price range")


class AdjustedQuote(BaseModel):
    """Repair pricing scaled by the regional labor multiplier."""

    zip_code: Optional[str] = None
    state: Optional[str] = None
    multiplier: float = Field(..., gt=0, description="rate / national average, unrounded")
    price: PriceRange
    labor: Optional[PriceRange] = None
    parts: Optional[PriceRange] = None
    resolution: RateResolution

    def to_api_output(self, data_source: Optional[str] = None) -> Dict[str, Any]:
        """Convert to the camelCase quote response shape.

        Args:
            data_source: Optional rate table identifier, reported under laborRate.
        """
        return {
            "zipCode": self.zip_code,
            "state": self.state,
            "multiplier": self.multiplier,
            "price": {"low": self.price.low, "high": self.price.high},
            "labor": (
                {"low": self.labor.low, "high": self.labor.high} if self.labor else None
            ),
            "parts": (
                {"low": self.parts.low, "high": self.parts.high} if self.parts else None
            ),
            "laborRate": self.resolution.to_api_output(data_source=data_source),
        }
