"""Configuration module for the Marvel API client."""

from .api_keys import get_api_key, set_api_key
from .settings import Settings
from .rate_limit_configs import (
    get_rate_limit_config,
    create_rate_limiter,
    RATE_LIMIT_CONFIGS,
    DEFAULT_RATE_LIMIT
)

__all__ = [
    "get_api_key",
    "set_api_key",
    "Settings",
    "get_rate_limit_config",
    "create_rate_limiter",
    "RATE_LIMIT_CONFIGS",
    "DEFAULT_RATE_LIMIT"
]
