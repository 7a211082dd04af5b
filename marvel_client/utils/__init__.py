"""Utils module for the Marvel API client."""

from .validators import validate_parameters, validate_limit, KNOWN_PARAMETERS

__all__ = [
    "validate_parameters",
    "validate_limit",
    "KNOWN_PARAMETERS",
]
