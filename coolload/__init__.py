"""
coolload - room cooling load calculation by the ETD method
"""

__version__ = "1.0.0"

from coolload.domain.calculations.pipeline import CoolingLoadResult, calculate_cooling_load
from coolload.domain.models import CoolingLoadInputs
from coolload.errors import HVACCalculationError, UnknownLookupKeyError, ValidationError

__all__ = [
    "__version__",
    "CoolingLoadInputs",
    "CoolingLoadResult",
    "calculate_cooling_load",
    "HVACCalculationError",
    "UnknownLookupKeyError",
    "ValidationError",
]
