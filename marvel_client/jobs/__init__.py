"""Jobs module for the Marvel API client."""

from .fetch_marvel_data import fetch_resource

__all__ = [
    "fetch_resource",
]
