"""
Safe conversion helpers for the input boundary.

Form fields arrive as strings ("", "75", " 12.5 ") or numbers. Blank or
unparseable values become the default instead of propagating NaN into the
engine.
"""

import logging
import math
from typing import Any, Optional

logger = logging.getLogger(__name__)


def safe_float(value: Any, default: float = 0.0) -> float:
    """
    Safely convert value to float.

    Args:
        value: Value to convert
        default: Default if conversion fails

    Returns:
        Float value or default
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        result = float(value)
    except (ValueError, TypeError) as e:
        logger.debug(f"safe_float conversion failed for {value!r}: {type(e).__name__}")
        return default
    if math.isnan(result) or math.isinf(result):
        logger.debug(f"safe_float rejected non-finite value {value!r}")
        return default
    return result


def safe_optional_float(value: Any) -> Optional[float]:
    """Like safe_float, but blank or invalid input stays None."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    result = safe_float(value, default=math.nan)
    return None if math.isnan(result) else result


def safe_int(value: Any, default: int = 0) -> int:
    """Safely convert value to int, truncating floats and numeric strings."""
    return int(safe_float(value, float(default)))
