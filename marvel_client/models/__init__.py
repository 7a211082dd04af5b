"""Models module for Marvel API responses."""

from .entities import (
    Character,
    Comic,
    Creator,
    Event,
    Series,
    Story,
    ResourceList,
    ResourceSummary,
    Image,
    Url,
)
from .envelope import DataWrapper, DataContainer, ENTITY_TYPES, parse_envelope

__all__ = [
    "Character",
    "Comic",
    "Creator",
    "Event",
    "Series",
    "Story",
    "ResourceList",
    "ResourceSummary",
    "Image",
    "Url",
    "DataWrapper",
    "DataContainer",
    "ENTITY_TYPES",
    "parse_envelope",
]
