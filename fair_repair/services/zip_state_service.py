"""
ZIP-to-State Resolution Service for Fair Repair.

Maps a 5-digit US ZIP code to its state using an ordered table of inclusive
numeric ranges. The scan is linear and first match wins, so the table order
below is part of the behavior: ranges are listed ascending by low bound.

Notes:
- Virginia appears twice (20100-20199 and 22000-24699). The first band sits
  between the two DC ranges and is intentional, not a duplication bug.
- Texas also holds a second band (88500-88599) for El Paso area ZIPs.
- Unknown or malformed ZIPs resolve to None; callers treat that as
  "use the national average", never as an error.
"""

import re
from typing import Optional, Tuple

import structlog

from fair_repair.models.rate_resolution import ZipRange

logger = structlog.get_logger(__name__)


# =============================================================================
# ZIP Range Table
# =============================================================================

# Ordered ascending by low bound. Do not re-sort or merge entries.
ZIP_RANGES: Tuple[ZipRange, ...] = tuple(
    ZipRange(low=low, high=high, state=state)
    for low, high, state in (
        (1000, 2799, "MA"),
        (2800, 2999, "RI"),
        (3000, 3899, "NH"),
        (3900, 4999, "ME"),
        (5000, 5999, "VT"),
        (6000, 6999, "CT"),
        (7000, 8999, "NJ"),
        (10000, 14999, "NY"),
        (15000, 19699, "PA"),
        (19700, 19999, "DE"),
        (20000, 20099, "DC"),
        (20100, 20199, "VA"),
        (20200, 20599, "DC"),
        (20600, 21999, "MD"),
        (22000, 24699, "VA"),
        (24700, 26999, "WV"),
        (27000, 28999, "NC"),
        (29000, 29999, "SC"),
        (30000, 31999, "GA"),
        (32000, 34999, "FL"),
        (35000, 36999, "AL"),
        (37000, 38599, "TN"),
        (38600, 39799, "MS"),
        (39800, 39999, "GA"),
        (40000, 42799, "KY"),
        (43000, 45999, "OH"),
        (46000, 47999, "IN"),
        (48000, 49999, "MI"),
        (50000, 52999, "IA"),
        (53000, 54999, "WI"),
        (55000, 56799, "MN"),
        (57000, 57999, "SD"),
        (58000, 58999, "ND"),
        (59000, 59999, "MT"),
        (60000, 62999, "IL"),
        (63000, 65999, "MO"),
        (66000, 67999, "KS"),
        (68000, 69999, "NE"),
        (70000, 71599, "LA"),
        (71600, 72999, "AR"),
        (73000, 74999, "OK"),
        (75000, 79999, "TX"),
        (80000, 81999, "CO"),
        (82000, 83199, "WY"),
        (83200, 83999, "ID"),
        (84000, 84999, "UT"),
        (85000, 86999, "AZ"),
        (87000, 88499, "NM"),
        (88500, 88599, "TX"),
        (88900, 89999, "NV"),
        (90000, 96699, "CA"),
        (96700, 96999, "HI"),
        (97000, 97999, "OR"),
        (98000, 99499, "WA"),
        (99500, 99999, "AK"),
    )
)

# Leading ASCII digits only, mirroring a lenient integer parse ("12a45" -> 12)
_LEADING_DIGITS = re.compile(r"[0-9]+")


# =============================================================================
# Helper Functions
# =============================================================================


def parse_zip_number(zip_code: object, max_length: Optional[int] = 5) -> Optional[int]:
    """
    Parse the leading ASCII digits of a ZIP code.

    Args:
        zip_code: Candidate ZIP; anything that is not a str yields None
        max_length: Only the first max_length characters are considered;
            None parses the whole string

    Returns:
        Integer value of the leading digits, or None if there are none
    """
    if not isinstance(zip_code, str) or not zip_code:
        return None

    match = _LEADING_DIGITS.match(zip_code[:max_length])
    if not match:
        return None
    return int(match.group(0))


def resolve_state(zip_code: Optional[str]) -> Optional[str]:
    """
    Look up the state abbreviation for a ZIP code.

    Args:
        zip_code: 5-digit US zip code

    Returns:
        State abbreviation (e.g., "VA", "MT") or None if not found
    """
    zip_number = parse_zip_number(zip_code)
    if zip_number is None:
        return None

    for zip_range in ZIP_RANGES:
        if zip_range.contains(zip_number):
            return zip_range.state

    logger.debug("zip_state_not_found", zip_code=zip_code, zip_number=zip_number)
    return None


def get_ranges_for_state(state: str) -> Tuple[ZipRange, ...]:
    """Get every range attributed to a state, in table order."""
    state = state.upper()
    return tuple(r for r in ZIP_RANGES if r.state == state)
