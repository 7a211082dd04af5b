"""Client module for the Marvel API."""

from .endpoints import ResourceKind, RELATIONS, endpoint_path
from .exceptions import (
    MarvelAPIError,
    MarvelTransportError,
    MarvelHTTPError,
    MarvelAuthError,
    MarvelRateLimitError,
    MarvelResponseParseError,
)
from .query import query_string
from .signer import RequestSigner
from .rate_limiter import RateLimiter, RateLimitConfig
from .base_client import BaseAPIClient
from .marvel_client import MarvelClient

__all__ = [
    "ResourceKind",
    "RELATIONS",
    "endpoint_path",
    "MarvelAPIError",
    "MarvelTransportError",
    "MarvelHTTPError",
    "MarvelAuthError",
    "MarvelRateLimitError",
    "MarvelResponseParseError",
    "query_string",
    "RequestSigner",
    "RateLimiter",
    "RateLimitConfig",
    "BaseAPIClient",
    "MarvelClient",
]
