"""Fair Repair configuration settings.

Loads configuration from environment variables with sensible defaults.
Rate tables, the metro radius and the national average are engine
constants and are deliberately not configurable here.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

from fair_repair.config.errors import ConfigurationError

# Load .env file for local overrides (log level, output format)
load_dotenv()

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    log_json: bool = field(default_factory=lambda: os.getenv("LOG_JSON", "false").lower() == "true")

    # Reported as dataSource in API output
    rate_table_version: str = field(default_factory=lambda: os.getenv("RATE_TABLE_VERSION", "2025"))

    def validate(self) -> None:
        """Validate settings.

        Raises:
            ConfigurationError: If LOG_LEVEL is not a standard level name.
        """
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got {self.log_level!r}",
                setting="LOG_LEVEL",
            )

    @property
    def data_source(self) -> str:
        """Identifier for the rate tables in use."""
        return f"fair_repair_rates_{self.rate_table_version}"


# Singleton settings instance
settings = Settings()
