"""Dashboard configuration management."""

import logging
import os
from functools import lru_cache
from pathlib import Path

from .schemas import DashboardConfig
from .utils import load_json

logger = logging.getLogger('cleansheet.config')

CONFIG_ENV_VAR = 'CLEANSHEET_CONFIG'
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'dashboard_config.json'


def get_config_path() -> Path:
    """Path of the active config file (CLEANSHEET_CONFIG overrides the default)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_PATH


@lru_cache(maxsize=1)
def get_config() -> DashboardConfig:
    """
    Load dashboard configuration from data/dashboard_config.json.

    Configuration is cached after first load. A missing file yields the
    built-in defaults; a file that exists but is malformed is an error.

    Returns:
        DashboardConfig object with validated settings

    Raises:
        ValueError: If the config file has invalid structure

    Example:
        from cleansheet.config import get_config
        config = get_config()
        print(f"API base: {config.api_base_url}")
    """
    config_path = get_config_path()
    if not config_path.exists():
        logger.debug(f'No config file at {config_path}, using defaults')
        return DashboardConfig()
    return load_json(config_path, schema=DashboardConfig)


def get_api_base_url() -> str:
    """Get the FPL API base URL from config."""
    return get_config().api_base_url


def get_entry_cache_path() -> Path:
    """Get the file used to remember the user's entry id."""
    return Path(get_config().entry_cache_path).expanduser()


def get_share_base_url() -> str:
    """Get the base URL used for shareable dashboard links."""
    return get_config().share_base_url


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file (or CLEANSHEET_CONFIG) changes during
    runtime and you need to reload it.
    """
    get_config.cache_clear()
