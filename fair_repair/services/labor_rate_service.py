"""
Regional Labor Rate Service for Fair Repair.

Resolves a ZIP code to the hourly shop labor rate used in repair quotes.

Architecture:
- ZIP -> state via the ordered range table (zip_state_service)
- State -> base rate via STATE_LABOR_RATES (absent state -> national average)
- ZIP -> approximate coordinate -> nearest metro (geo_service)
- Metro rate replaces the base rate when within METRO_RADIUS_MILES
- Multiplier = rate / NATIONAL_AVERAGE

Data: 2025 auto mechanic labor rates (Identifix 2025, NATA 2024 survey,
industry reports). Regional averages stand in for states without a
specific figure.

resolve_labor_rate is a total function: malformed ZIPs, unknown ZIPs and
unmapped states all degrade to the national average instead of raising.
All tables are module-level constants and are never mutated, so lookups
are safe to run concurrently.
"""

from typing import Dict, Optional, Tuple, Union

import structlog

from fair_repair.models.rate_resolution import (
    CityRecord,
    Coordinate,
    RateResolution,
    RateSource,
)
from fair_repair.services.geo_service import (
    estimate_coordinates,
    find_nearest_city,
    round_distance,
)
from fair_repair.services.zip_state_service import resolve_state

logger = structlog.get_logger(__name__)


# =============================================================================
# Constants and Rate Tables
# =============================================================================

# National average (baseline for the multiplier)
NATIONAL_AVERAGE = 144.06

# ZIP must be within this distance of a metro for the metro rate to apply
METRO_RADIUS_MILES = 15.0

ZIP_CODE_LENGTH = 5

# 2025 labor rates by state (dollars per hour)
STATE_LABOR_RATES: Dict[str, float] = {
    # States with specific 2025 rates
    "AZ": 138.78,
    "DE": 142.15,
    "FL": 142.74,
    "HI": 136.74,
    "MS": 151.67,
    "NE": 147.41,
    "OH": 136.07,
    "OK": 147.81,
    "OR": 151.00,
    "VT": 127.15,
    "WY": 151.18,

    # Midwest regional average
    "IL": 144.17, "IN": 144.17, "IA": 144.17, "KS": 144.17, "MI": 144.17,
    "MN": 144.17, "MO": 144.17, "ND": 144.17, "SD": 144.17, "WI": 144.17,

    # Northeast regional average
    "CT": 135.63, "ME": 135.63, "MA": 135.63, "NH": 135.63, "NJ": 135.63,
    "NY": 135.63, "PA": 135.63, "RI": 135.63,

    # Southeast regional average
    "AL": 146.47, "AR": 146.47, "GA": 146.47, "KY": 146.47, "LA": 146.47,
    "NC": 146.47, "SC": 146.47, "TN": 146.47, "VA": 146.47, "WV": 146.47,

    # Southwest regional average
    "NM": 144.57, "TX": 144.57,

    # West regional average
    "AK": 144.06, "CA": 144.06, "CO": 144.06, "ID": 144.06, "MT": 144.06,
    "NV": 144.06, "UT": 144.06, "WA": 144.06,

    # Near DC, Northeast rate
    "MD": 135.63,
    "DC": 135.63,
}


def _city(name: str, lat: float, lon: float, rate: float) -> CityRecord:
    return CityRecord(
        name=name,
        coordinate=Coordinate(latitude=lat, longitude=lon),
        metro_rate=rate,
    )


# Major metros, scanned in this order (first wins on distance ties)
CITY_LABOR_RATES: Tuple[CityRecord, ...] = (
    _city("new york", 40.7128, -74.0060, 140.00),
    _city("los angeles", 34.0522, -118.2437, 149.50),
    _city("chicago", 41.8781, -87.6298, 147.00),
    _city("houston", 29.7604, -95.3698, 147.00),
    _city("phoenix", 33.4484, -112.0740, 142.00),
    _city("philadelphia", 39.9526, -75.1652, 140.00),
    _city("san antonio", 29.4241, -98.4936, 147.00),
    _city("san diego", 32.7157, -117.1611, 149.50),
    _city("dallas", 32.7767, -96.7970, 147.00),
    _city("san jose", 37.3382, -121.8863, 150.00),
    _city("austin", 30.2672, -97.7431, 147.00),
    _city("jacksonville", 30.3322, -81.6557, 144.50),
    _city("fort worth", 32.7555, -97.3308, 147.00),
    _city("charlotte", 35.2271, -80.8431, 148.00),
    _city("san francisco", 37.7749, -122.4194, 152.50),
    _city("indianapolis", 39.7684, -86.1581, 147.00),
    _city("columbus", 39.9612, -82.9988, 140.00),
    _city("seattle", 47.6062, -122.3321, 147.00),
    _city("denver", 39.7392, -104.9903, 147.00),
    _city("washington dc", 38.9072, -77.0369, 140.00),
    _city("boston", 42.3601, -71.0589, 140.00),
    _city("nashville", 36.1627, -86.7816, 148.00),
    _city("oklahoma city", 35.4676, -97.5164, 148.00),
    _city("las vegas", 36.1699, -115.1398, 147.00),
    _city("portland", 45.5152, -122.6784, 151.00),
)


# =============================================================================
# Helper Functions
# =============================================================================


def get_state_base_rate(state: str) -> float:
    """
    Get the base hourly rate for a state.

    Args:
        state: State abbreviation (e.g., "MT")

    Returns:
        State rate, or NATIONAL_AVERAGE when the state has no entry
    """
    return STATE_LABOR_RATES.get(state.upper(), NATIONAL_AVERAGE)


def get_city(name: str) -> Optional[CityRecord]:
    """Get a metro record by (case-insensitive) name."""
    name = name.lower()
    for city in CITY_LABOR_RATES:
        if city.name == name:
            return city
    return None


def _national_average_resolution(zip_code: Optional[str]) -> RateResolution:
    return RateResolution(
        zip_code=zip_code if isinstance(zip_code, str) else None,
        state=None,
        rate=NATIONAL_AVERAGE,
        source=RateSource.NATIONAL_AVERAGE,
        base_rate=NATIONAL_AVERAGE,
        city_premium=0.0,
        nearest_city_name=None,
        distance_to_city_miles=None,
    )


# =============================================================================
# Main Service Functions
# =============================================================================


def resolve_labor_rate(zip_code: Optional[str]) -> RateResolution:
    """
    Resolve the hourly labor rate for a ZIP code.

    Decision order (first satisfied branch wins):
    1. Missing or not exactly 5 characters -> national average
    2. No state for the ZIP -> national average
    3. Base rate from the state table (absent state -> national average)
    4. Nearest metro by estimated coordinates
    5. Within METRO_RADIUS_MILES -> metro rate, premium = metro - base
    6. Otherwise -> state base rate, nearest metro kept for diagnostics

    Args:
        zip_code: 5-digit US zip code

    Returns:
        RateResolution; never raises
    """
    if not isinstance(zip_code, str) or len(zip_code) != ZIP_CODE_LENGTH:
        logger.debug("labor_rate_national_fallback", zip_code=zip_code, reason="malformed_zip")
        return _national_average_resolution(zip_code)

    state = resolve_state(zip_code)
    if state is None:
        logger.debug("labor_rate_national_fallback", zip_code=zip_code, reason="unknown_zip")
        return _national_average_resolution(zip_code)

    base_rate = get_state_base_rate(state)

    coordinate = estimate_coordinates(zip_code)
    nearest_city, min_distance = find_nearest_city(coordinate, CITY_LABOR_RATES)

    if nearest_city is not None and min_distance <= METRO_RADIUS_MILES:
        resolution = RateResolution(
            zip_code=zip_code,
            state=state,
            rate=nearest_city.metro_rate,
            source=RateSource.METRO_AREA,
            base_rate=base_rate,
            city_premium=nearest_city.metro_rate - base_rate,
            nearest_city_name=nearest_city.name,
            distance_to_city_miles=round_distance(min_distance),
        )
    else:
        resolution = RateResolution(
            zip_code=zip_code,
            state=state,
            rate=base_rate,
            source=RateSource.STATE_AVERAGE,
            base_rate=base_rate,
            city_premium=0.0,
            nearest_city_name=nearest_city.name if nearest_city else None,
            distance_to_city_miles=(
                round_distance(min_distance) if nearest_city else None
            ),
        )

    logger.debug(
        "labor_rate_resolved",
        zip_code=zip_code,
        state=state,
        source=resolution.source.value,
        rate=resolution.rate,
        nearest_city=resolution.nearest_city_name,
        distance_miles=resolution.distance_to_city_miles,
    )
    return resolution


def get_labor_multiplier(resolution_or_zip: Union[RateResolution, str, None]) -> float:
    """
    Labor rate multiplier relative to the national average.

    Pass the same RateResolution used elsewhere in a quote so every field is
    priced from one lookup. The multiplier is returned unrounded; round the
    adjusted dollar amounts instead.

    Args:
        resolution_or_zip: A RateResolution, or a ZIP code to resolve

    Returns:
        Multiplier (e.g., 1.05 = 5% above national average), always > 0
    """
    if isinstance(resolution_or_zip, RateResolution):
        resolution = resolution_or_zip
    else:
        resolution = resolve_labor_rate(resolution_or_zip)
    return resolution.rate / NATIONAL_AVERAGE


def get_all_cities() -> Tuple[str, ...]:
    """Get names of all metros with a premium rate, in table order."""
    return tuple(city.name for city in CITY_LABOR_RATES)
