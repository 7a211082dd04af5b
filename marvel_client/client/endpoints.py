"""
Table des endpoints Marvel : types de ressources et relations exposées.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional, Union


class ResourceKind(str, Enum):
    """Types de ressources Marvel (valeur = segment d'URL)."""
    CHARACTERS = "characters"
    COMICS = "comics"
    CREATORS = "creators"
    EVENTS = "events"
    SERIES = "series"
    STORIES = "stories"

    @classmethod
    def parse(cls, value: Union[str, "ResourceKind"]) -> "ResourceKind":
        """Accepte un ResourceKind ou son nom ('comics', 'COMICS', 'comic')."""
        if isinstance(value, cls):
            return value

        normalized = value.strip().lower()
        for kind in cls:
            if normalized in (kind.value, kind.name.lower(), _SINGULAR[kind]):
                return kind

        raise ValueError(f"Unknown resource kind: {value!r}")


_SINGULAR = {
    ResourceKind.CHARACTERS: "character",
    ResourceKind.COMICS: "comic",
    ResourceKind.CREATORS: "creator",
    ResourceKind.EVENTS: "event",
    ResourceKind.SERIES: "series",
    ResourceKind.STORIES: "story",
}


# Relations exposées par l'API pour chaque ressource (/{resource}/{id}/{related})
RELATIONS: Dict[ResourceKind, FrozenSet[ResourceKind]] = {
    ResourceKind.CHARACTERS: frozenset({
        ResourceKind.COMICS, ResourceKind.EVENTS, ResourceKind.SERIES, ResourceKind.STORIES,
    }),
    ResourceKind.COMICS: frozenset({
        ResourceKind.CHARACTERS, ResourceKind.CREATORS, ResourceKind.EVENTS, ResourceKind.STORIES,
    }),
    ResourceKind.CREATORS: frozenset({
        ResourceKind.COMICS, ResourceKind.EVENTS, ResourceKind.SERIES, ResourceKind.STORIES,
    }),
    ResourceKind.EVENTS: frozenset({
        ResourceKind.CHARACTERS, ResourceKind.COMICS, ResourceKind.CREATORS,
        ResourceKind.SERIES, ResourceKind.STORIES,
    }),
    ResourceKind.SERIES: frozenset({
        ResourceKind.CHARACTERS, ResourceKind.COMICS, ResourceKind.CREATORS,
        ResourceKind.EVENTS, ResourceKind.STORIES,
    }),
    ResourceKind.STORIES: frozenset({
        ResourceKind.CHARACTERS, ResourceKind.COMICS, ResourceKind.CREATORS,
        ResourceKind.EVENTS, ResourceKind.SERIES,
    }),
}


def is_supported(resource: ResourceKind, related: ResourceKind) -> bool:
    """True si l'API expose /{resource}/{id}/{related}."""
    return related in RELATIONS[resource]


def endpoint_path(
    resource: Union[str, ResourceKind],
    resource_id: Optional[int] = None,
    related: Optional[Union[str, ResourceKind]] = None
) -> str:
    """
    Construit le chemin relatif d'un endpoint.

    Args:
        resource: Ressource principale
        resource_id: Identifiant (obligatoire si related est fourni)
        related: Ressource liée (optionnel)

    Returns:
        Chemin relatif ('characters', 'characters/1009610', 'characters/1009610/comics')

    Raises:
        ValueError: Identifiant invalide ou relation non exposée par l'API
    """
    resource = ResourceKind.parse(resource)

    if resource_id is None:
        if related is not None:
            raise ValueError(f"A {resource.value} id is required to list related resources")
        return resource.value

    if isinstance(resource_id, bool) or not isinstance(resource_id, int) or resource_id <= 0:
        raise ValueError(f"Invalid {resource.value} id: {resource_id!r}")

    path = f"{resource.value}/{resource_id}"
    if related is None:
        return path

    related = ResourceKind.parse(related)
    if not is_supported(resource, related):
        raise ValueError(
            f"The API does not expose {related.value} for {resource.value}"
        )
    return f"{path}/{related.value}"
