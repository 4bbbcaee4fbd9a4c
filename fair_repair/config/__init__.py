"""Fair Repair configuration.

This package contains:
- settings: Environment variables and configuration
- errors: Custom exceptions and error codes
"""

from fair_repair.config.settings import settings
from fair_repair.config.errors import FairRepairError

__all__ = [
    "settings",
    "FairRepairError",
]
