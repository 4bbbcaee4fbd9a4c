"""Rate Lookup Logger for Fair Repair.

structlog configuration plus highly visible, formatted console output for
rate resolutions and adjusted quotes (used by the CLI).
"""

import json
import logging
import sys
from typing import Any, Dict, Optional

import structlog

from fair_repair.models.quote import AdjustedQuote
from fair_repair.models.rate_resolution import RateResolution, RateSource

logger = structlog.get_logger()

# Visual markers for different log types
BANNER_WIDTH = 80
RATE_BANNER_CHAR = "═"
QUOTE_BANNER_CHAR = "─"


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog for console (default) or JSON output.

    Log events go to stderr so stdout stays clean for CLI output.
    """
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
    )


def _create_banner(char: str, text: str, width: int = BANNER_WIDTH) -> str:
    """Create a centered banner with given character."""
    text_with_spaces = f" {text} "
    padding = (width - len(text_with_spaces)) // 2
    return char * padding + text_with_spaces + char * (width - padding - len(text_with_spaces))


def _format_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format dictionary as pretty JSON string."""
    try:
        return json.dumps(data, indent=indent, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(data)


def format_rate_resolution(resolution: RateResolution) -> str:
    """Render a resolution as a banner block."""
    distance = (
        f"{resolution.distance_to_city_miles} mi"
        if resolution.distance_to_city_miles is not None
        else "n/a"
    )
    marker = "★" if resolution.source == RateSource.METRO_AREA else "▶"
    lines = [
        RATE_BANNER_CHAR * BANNER_WIDTH,
        _create_banner(RATE_BANNER_CHAR, f"{marker} LABOR RATE: {resolution.zip_code or '(none)'}"),
        RATE_BANNER_CHAR * BANNER_WIDTH,
        f"║ State        : {resolution.state or 'unknown'}",
        f"║ Source       : {resolution.source_label}",
        f"║ Rate         : ${resolution.rate:,.2f}/hr",
        f"║ Base Rate    : ${resolution.base_rate:,.2f}/hr",
        f"║ City Premium : ${resolution.city_premium:+,.2f}/hr",
        f"║ Nearest City : {resolution.nearest_city_name or 'n/a'} ({distance})",
        RATE_BANNER_CHAR * BANNER_WIDTH,
    ]
    return "\n".join(lines)


def log_rate_resolution(resolution: RateResolution) -> None:
    """Print a resolution banner and emit a structured log event."""
    print(format_rate_resolution(resolution))

    logger.info(
        "rate_resolution_logged",
        zip_code=resolution.zip_code,
        source=resolution.source.value,
        rate=resolution.rate,
    )


def log_adjusted_quote(quote: AdjustedQuote, title: Optional[str] = None) -> None:
    """Print an adjusted quote summary."""
    print(QUOTE_BANNER_CHAR * BANNER_WIDTH)
    print(_create_banner(QUOTE_BANNER_CHAR, f"QUOTE{': ' + title if title else ''}"))
    print(QUOTE_BANNER_CHAR * BANNER_WIDTH)
    print(f"│ Multiplier : {quote.multiplier:.4f}")
    print(f"│ Price      : ${quote.price.low:,.0f} - ${quote.price.high:,.0f}")
    if quote.labor:
        print(f"│ Labor      : ${quote.labor.low:,.0f} - ${quote.labor.high:,.0f}")
    print(QUOTE_BANNER_CHAR * BANNER_WIDTH)

    logger.info(
        "adjusted_quote_logged",
        zip_code=quote.zip_code,
        multiplier=quote.multiplier,
    )


def dump_output(data: Dict[str, Any]) -> None:
    """Print an API output dictionary as JSON."""
    print(_format_json(data))
