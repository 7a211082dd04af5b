"""Client asynchrone typé pour l'API publique Marvel Comics."""

from .client import (
    MarvelClient,
    ResourceKind,
    RateLimitConfig,
    RateLimiter,
    RequestSigner,
    query_string,
    MarvelAPIError,
    MarvelTransportError,
    MarvelHTTPError,
    MarvelAuthError,
    MarvelRateLimitError,
    MarvelResponseParseError,
)
from .config import Settings
from .models import DataWrapper, DataContainer

__version__ = "1.0.0"

__all__ = [
    "MarvelClient",
    "ResourceKind",
    "RateLimitConfig",
    "RateLimiter",
    "RequestSigner",
    "query_string",
    "MarvelAPIError",
    "MarvelTransportError",
    "MarvelHTTPError",
    "MarvelAuthError",
    "MarvelRateLimitError",
    "MarvelResponseParseError",
    "Settings",
    "DataWrapper",
    "DataContainer",
]
