"""
Geographic helpers for metro premium detection.

Provides:
- estimate_coordinates: coarse ZIP -> lat/lon proxy
- distance_miles: haversine great-circle distance
- find_nearest_city: minimum-distance scan over a city table

The coordinate estimate is intentionally rough. It interpolates linearly
inside four numeric ZIP bands and returns the continental center for
everything else. It is good enough to rank cities within one region and
nothing more; the 15 mile metro radius is tuned against this scale, so the
heuristic must not be swapped for real geocoding.
"""

import math
from typing import Iterable, Optional, Tuple

from fair_repair.models.rate_resolution import CityRecord, Coordinate
from fair_repair.services.zip_state_service import parse_zip_number


EARTH_RADIUS_MILES = 3959.0

# Geographic center of the continental US
CONTINENTAL_CENTER = Coordinate(latitude=39.8, longitude=-98.5)

# (low, high, base_lat, base_lon, lat_divisor, lon_divisor)
# lat = base_lat + (zip - low) / lat_divisor, same for lon.
COORDINATE_BANDS: Tuple[Tuple[int, int, float, float, float, float], ...] = (
    (10000, 14999, 40.7, -74.0, 50000.0, 100000.0),    # NY
    (90000, 96999, 34.0, -118.0, 70000.0, 100000.0),   # CA
    (60000, 69999, 41.8, -87.6, 100000.0, 100000.0),   # IL
    (77000, 79999, 29.7, -95.3, 30000.0, 50000.0),     # TX
)


def estimate_coordinates(zip_code: Optional[str]) -> Coordinate:
    """
    Estimate coordinates for a ZIP code.

    Never fails: unparseable ZIPs and ZIPs outside the known bands get the
    continental center. The whole string is parsed, so "100011" falls
    outside every band.

    Args:
        zip_code: 5-digit US zip code

    Returns:
        Approximate Coordinate
    """
    zip_number = parse_zip_number(zip_code, max_length=None)
    if zip_number is None:
        return CONTINENTAL_CENTER

    for low, high, base_lat, base_lon, lat_div, lon_div in COORDINATE_BANDS:
        if low <= zip_number <= high:
            offset = zip_number - low
            return Coordinate(
                latitude=base_lat + offset / lat_div,
                longitude=base_lon + offset / lon_div,
            )

    return CONTINENTAL_CENTER


def distance_miles(a: Coordinate, b: Coordinate) -> float:
    """
    Great-circle distance between two coordinates (haversine).

    Args:
        a: First coordinate
        b: Second coordinate

    Returns:
        Distance in miles (>= 0)
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    # Float error can push h a hair outside [0, 1]
    h = min(max(h, 0.0), 1.0)
    return 2 * EARTH_RADIUS_MILES * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def find_nearest_city(
    origin: Coordinate,
    cities: Iterable[CityRecord],
) -> Tuple[Optional[CityRecord], Optional[float]]:
    """
    Find the city closest to a coordinate.

    Ties keep the first city in iteration order.

    Args:
        origin: Coordinate to measure from
        cities: City table to scan

    Returns:
        (nearest city, distance in miles), or (None, None) for an empty table
    """
    nearest: Optional[CityRecord] = None
    min_distance = math.inf

    for city in cities:
        distance = distance_miles(origin, city.coordinate)
        if distance < min_distance:
            min_distance = distance
            nearest = city

    if nearest is None:
        return None, None
    return nearest, min_distance


def round_distance(miles: float) -> float:
    """Round to one decimal, halves rounding up."""
    return math.floor(miles * 10 + 0.5) / 10
