"""
Enveloppe uniforme des réponses Marvel : {code, status, data: {offset, limit, total, count, results}}.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from ..client.endpoints import ResourceKind
from ..client.exceptions import MarvelResponseParseError
from .entities import Character, Comic, Creator, Event, Series, Story

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Type d'entité associé à chaque ressource
ENTITY_TYPES: Dict[ResourceKind, Type] = {
    ResourceKind.CHARACTERS: Character,
    ResourceKind.COMICS: Comic,
    ResourceKind.CREATORS: Creator,
    ResourceKind.EVENTS: Event,
    ResourceKind.SERIES: Series,
    ResourceKind.STORIES: Story,
}


@dataclass
class DataContainer(Generic[T]):
    offset: int
    limit: int
    total: int
    count: int
    results: List[T] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], parse_item: Callable[[Dict[str, Any]], T]) -> "DataContainer[T]":
        return cls(
            offset=data.get("offset", 0),
            limit=data.get("limit", 0),
            total=data.get("total", 0),
            count=data.get("count", 0),
            results=[parse_item(item) for item in data.get("results", [])],
        )


@dataclass
class DataWrapper(Generic[T]):
    """Enveloppe d'une réponse Marvel, paramétrée par le type d'entité."""
    code: int
    status: str
    data: DataContainer[T]
    copyright: Optional[str] = None
    attribution_text: Optional[str] = None
    attribution_html: Optional[str] = None
    etag: Optional[str] = None

    @property
    def results(self) -> List[T]:
        return self.data.results

    @classmethod
    def from_dict(
        cls,
        payload: Dict[str, Any],
        parse_item: Callable[[Dict[str, Any]], T],
        endpoint: Optional[str] = None
    ) -> "DataWrapper[T]":
        """
        Construit l'enveloppe typée depuis le JSON de l'API.

        Args:
            payload: Corps JSON parsé
            parse_item: Fonction de conversion d'un élément de `results`
            endpoint: Endpoint d'origine (pour les messages d'erreur)

        Raises:
            MarvelResponseParseError: Si l'enveloppe ou un élément est invalide
        """
        data = payload.get("data")
        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            logger.error(f"Malformed envelope from {endpoint}: keys={list(payload)}")
            raise MarvelResponseParseError(
                f"Response from {endpoint} has no data.results list", endpoint=endpoint
            )

        try:
            container = DataContainer.from_dict(data, parse_item)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed entity in response from {endpoint}: {e!r}")
            raise MarvelResponseParseError(
                f"Malformed entity in response from {endpoint}: {e!r}", endpoint=endpoint
            ) from e

        return cls(
            code=payload.get("code", 0),
            status=payload.get("status", ""),
            data=container,
            copyright=payload.get("copyright"),
            attribution_text=payload.get("attributionText"),
            attribution_html=payload.get("attributionHTML"),
            etag=payload.get("etag"),
        )


def parse_envelope(
    payload: Dict[str, Any],
    kind: ResourceKind,
    endpoint: Optional[str] = None
) -> DataWrapper:
    """Parse une enveloppe dont les résultats sont des entités `kind`."""
    entity_type = ENTITY_TYPES[kind]
    return DataWrapper.from_dict(payload, entity_type.from_dict, endpoint=endpoint)
