import logging
import sys

from coolload.core.environment import (
    load_environment,
    get_env_bool,
    get_env_float,
    get_env_list,
)
from coolload.errors import ConfigurationError

load_environment()

DEBUG = get_env_bool("DEBUG", False)

# Design defaults applied at the input boundary when a form leaves them blank
DEFAULT_PRESSURE_KPA = get_env_float("DEFAULT_PRESSURE_KPA", 101.325)
DEFAULT_BYPASS_FACTOR = get_env_float("DEFAULT_BYPASS_FACTOR", 0.2)
DEFAULT_SAFETY_FACTOR_SENSIBLE = get_env_float("DEFAULT_SAFETY_FACTOR_SENSIBLE", 0.0)
DEFAULT_SAFETY_FACTOR_LATENT = get_env_float("DEFAULT_SAFETY_FACTOR_LATENT", 0.0)

BUILDING_DIVERSITY_FACTOR = get_env_float("BUILDING_DIVERSITY_FACTOR", 0.85)

ALLOWED_ORIGINS = get_env_list(
    "ALLOWED_ORIGINS",
    default=["http://localhost:3000", "http://localhost:5173"],
)


def validate_settings():
    """Fail fast on environment values the engine cannot work with."""
    if not 0.0 <= DEFAULT_BYPASS_FACTOR <= 1.0:
        raise ConfigurationError(
            "DEFAULT_BYPASS_FACTOR must be between 0 and 1",
            {'value': DEFAULT_BYPASS_FACTOR}
        )
    if not 50.0 <= DEFAULT_PRESSURE_KPA <= 120.0:
        raise ConfigurationError(
            "DEFAULT_PRESSURE_KPA must be an absolute pressure in kPa",
            {'value': DEFAULT_PRESSURE_KPA}
        )
    if not 0.0 < BUILDING_DIVERSITY_FACTOR <= 1.0:
        raise ConfigurationError(
            "BUILDING_DIVERSITY_FACTOR must be in (0, 1]",
            {'value': BUILDING_DIVERSITY_FACTOR}
        )


# Logging configuration
def setup_logging():
    """Configure application logging"""
    log_level = logging.DEBUG if DEBUG else logging.INFO

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )

    logger = logging.getLogger('coolload')
    logger.setLevel(log_level)

    # Suppress noisy third-party loggers
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)

    return logger
