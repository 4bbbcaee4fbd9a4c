"""Utility modules for Fair Repair."""

from fair_repair.utils.rate_logger import (
    configure_logging,
    format_rate_resolution,
    log_rate_resolution,
    log_adjusted_quote,
    dump_output,
)

__all__ = [
    "configure_logging",
    "format_rate_resolution",
    "log_rate_resolution",
    "log_adjusted_quote",
    "dump_output",
]
