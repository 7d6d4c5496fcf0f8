"""
Custom Error Types for the Cooling Load Engine

Separates critical errors that must stop a calculation (bad lookup keys,
inconsistent inputs) from other calculation errors, which are logged as warnings.
"""

import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class HVACCalculationError(Exception):
    """Base exception for all cooling load calculation errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class CriticalError(HVACCalculationError):
    """
    Critical errors that should stop processing.

    Examples:
    - Unknown construction or orientation key
    - Geometry entered in more than one mode
    - Bypass factor outside 0-1
    """
    pass


class ConfigurationError(CriticalError):
    """Invalid configuration values read from the environment."""
    pass


class ValidationError(CriticalError):
    """
    Input validation errors.

    Examples:
    - Relative humidity outside (0, 100] where a value is required
    - Wet bulb above dry bulb
    - Atmospheric pressure not in kPa
    """
    pass


class UnknownLookupKeyError(ValidationError):
    """
    Raised when a table lookup receives a key the table does not define.

    Lookups never fall back to a plausible constant; an unrecognized
    orientation, construction or fixture key is an input error.
    """

    def __init__(self, table: str, key: Any, details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        details.setdefault('table', table)
        details.setdefault('key', key)
        super().__init__(f"Unknown key {key!r} for {table}", details)
        self.table = table
        self.key = key


def log_error_with_context(error: HVACCalculationError, context: Dict[str, Any]):
    """
    Log a calculation error with the request or room it came from.

    CriticalError subclasses are logged at ERROR; anything else derived from
    HVACCalculationError is logged at WARNING.
    """
    level = logging.ERROR if isinstance(error, CriticalError) else logging.WARNING
    logger.log(
        level,
        f"{type(error).__name__} {context}: {error.message}",
        extra={'error_type': type(error).__name__, 'details': error.details, 'context': context},
    )
