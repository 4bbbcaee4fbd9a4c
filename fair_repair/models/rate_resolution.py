"""Labor rate Pydantic models for Fair Repair.

This module defines the immutable table records (ZIP ranges, coordinates,
metro cities) and the per-lookup RateResolution result.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class RateSource(str, Enum):
    """Which tier of the rate tables produced the final rate."""

    NATIONAL_AVERAGE = "national_average"
    STATE_AVERAGE = "state_average"
    METRO_AREA = "metro_area"


# =============================================================================
# TABLE RECORDS
# =============================================================================


class ZipRange(BaseModel):
    """Inclusive numeric ZIP interval attributed to one state."""

    low: int = Field(..., ge=0, le=99999, description="Lowest ZIP in range (inclusive)")
    high: int = Field(..., ge=0, le=99999, description="Highest ZIP in range (inclusive)")
    state: str = Field(..., min_length=2, max_length=2, description="State abbreviation")

    class Config:
        frozen = True

    @model_validator(mode="after")
    def validate_bounds(self) -> "ZipRange":
        """Ensure low <= high."""
        if self.low > self.high:
            raise ValueError(f"ZIP range low ({self.low}) exceeds high ({self.high})")
        return self

    def contains(self, zip_number: int) -> bool:
        return self.low <= zip_number <= self.high


class Coordinate(BaseModel):
    """Approximate latitude/longitude in degrees.

    Only meaningful for ranking candidate cities by proximity, never as
    an authoritative geocode.
    """

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    class Config:
        frozen = True


class CityRecord(BaseModel):
    """Major metro area with its premium hourly labor rate."""

    name: str = Field(..., min_length=1, description="Lowercase city name")
    coordinate: Coordinate
    metro_rate: float = Field(..., gt=0, description="Metro hourly labor rate ($/hr)")

    class Config:
        frozen = True


# =============================================================================
# RESOLUTION RESULT
# =============================================================================


class RateResolution(BaseModel):
    """Result of resolving a ZIP code to an hourly labor rate.

    Created fresh per lookup and owned by the caller.
    """

    zip_code: Optional[str] = Field(None, description="ZIP code as supplied (None if not a string)")
    state: Optional[str] = Field(None, description="Resolved state, None when unknown")
    rate: float = Field(..., gt=0, description="Final hourly labor rate ($/hr)")
    source: RateSource
    base_rate: float = Field(..., gt=0, description="State (or national) base rate ($/hr)")
    city_premium: float = Field(
        default=0.0, description="metro_rate - base_rate when metro applies; may be negative"
    )
    nearest_city_name: Optional[str] = None
    distance_to_city_miles: Optional[float] = Field(
        None, ge=0, description="Distance to nearest metro, rounded to 0.1 mi"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "zip_code": "10001",
                "state": "NY",
                "rate": 140.0,
                "source": "metro_area",
                "base_rate": 135.63,
                "city_premium": 4.37,
                "nearest_city_name": "new york",
                "distance_to_city_miles": 0.9,
            }
        }

    @property
    def source_label(self) -> str:
        """Human-readable source, e.g. 'new york metro area'."""
        if self.source == RateSource.METRO_AREA:
            return f"{self.nearest_city_name} metro area"
        if self.source == RateSource.STATE_AVERAGE:
            return f"{self.state} state average"
        return "National Average"

    def to_api_output(self, data_source: Optional[str] = None) -> Dict[str, Any]:
        """Convert to the camelCase shape returned to quote consumers.

        Args:
            data_source: Optional rate table identifier to include.

        Returns:
            Dictionary with rate, source, and breakdown.
        """
        output: Dict[str, Any] = {
            "zipCode": self.zip_code,
            "state": self.state,
            "rate": self.rate,
            "source": self.source_label,
            "sourceType": self.source.value,
            "breakdown": {
                "baseRate": self.base_rate,
                "cityPremium": self.city_premium,
                "nearestCity": self.nearest_city_name,
                "distanceToCity": self.distance_to_city_miles,
            },
        }
        if data_source:
            output["dataSource"] = data_source
        return output
