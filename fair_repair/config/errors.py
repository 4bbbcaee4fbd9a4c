"""Fair Repair error handling.

Custom exceptions and error codes. The rate resolution path never raises;
these are used at the edges (quote adjustment input, settings).
"""

from typing import Optional, Dict, Any


# Error Codes
class ErrorCode:
    """Error code constants."""

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PRICE_RANGE = "INVALID_PRICE_RANGE"
    INVALID_MULTIPLIER = "INVALID_MULTIPLIER"

    # Configuration Errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class FairRepairError(Exception):
    """Base exception for Fair Repair errors.

    Provides structured error information for API responses.

    Attributes:
        code: Error code from ErrorCode constants
        message: Human-readable error message
        details: Additional error context
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API response.

        Returns:
            Dictionary with code, message, and details.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }

    def __repr__(self) -> str:
        return f"FairRepairError(code={self.code!r}, message={self.message!r})"


class ValidationError(FairRepairError):
    """Validation-specific error."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: str = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            details={**(details or {}), "field": field} if field else details
        )
        self.field = field


class ConfigurationError(FairRepairError):
    """Invalid environment configuration."""

    def __init__(self, message: str, setting: str, details: Optional[Dict] = None):
        super().__init__(
            code=ErrorCode.CONFIGURATION_ERROR,
            message=message,
            details={**(details or {}), "setting": setting}
        )
        self.setting = setting
