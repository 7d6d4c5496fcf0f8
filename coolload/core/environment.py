"""Environment loading for coolload settings.

Settings are read from the process environment after merging .env files.

File priority (highest to lowest):
1. .env.local (machine-specific overrides, gitignored)
2. .env (shared design defaults)
3. Variables already set by the shell or hosting platform

COOLLOAD_ENV_DIR points the loader at a directory other than the current one.
"""

import os
import logging
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_FILES = (".env", ".env.local")

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


def load_environment(env_dir: Optional[Union[str, Path]] = None) -> List[str]:
    """Merge .env files into os.environ and return the names of the files loaded.

    Args:
        env_dir: Directory holding the .env files. Defaults to COOLLOAD_ENV_DIR,
            then the current directory.
    """
    env_dir = Path(env_dir or os.getenv("COOLLOAD_ENV_DIR") or Path.cwd())

    # Later files win
    loaded = []
    for name in ENV_FILES:
        path = env_dir / name
        if path.is_file():
            load_dotenv(path, override=True)
            loaded.append(name)

    if loaded:
        logger.info(f"Settings loaded from {env_dir}: {', '.join(loaded)}")
    else:
        logger.debug(f"No .env files in {env_dir}, using process environment")
    return loaded


def _get_raw(key: str) -> Optional[str]:
    value = os.getenv(key)
    if value is None or not value.strip():
        return None
    return value.strip()


def get_env_bool(key: str, default: bool = False) -> bool:
    """Read an on/off flag such as DEBUG; unrecognized values give the default."""
    value = _get_raw(key)
    if value is None:
        return default
    value = value.lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"Unrecognized boolean for {key}={value!r}, using default: {default}")
    return default


def get_env_float(key: str, default: float = 0.0) -> float:
    """Read a numeric design default such as DEFAULT_PRESSURE_KPA."""
    value = _get_raw(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid float value for {key}, using default: {default}")
        return default


def get_env_list(key: str, separator: str = ",", default: Optional[list] = None) -> list:
    """Read a separated list such as ALLOWED_ORIGINS, dropping empty items.

    Args:
        key: Environment variable name
        separator: List item separator
        default: Returned when the variable is unset or blank
    """
    value = _get_raw(key)
    if value is None:
        return list(default or [])
    return [item.strip() for item in value.split(separator) if item.strip()]
