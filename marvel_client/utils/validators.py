"""
Validateurs des paramètres de requête.
"""

import logging
from typing import Any, Dict, FrozenSet, Mapping, Union

from ..client.endpoints import ResourceKind

logger = logging.getLogger(__name__)

MAX_LIMIT = 100

_PAGING = frozenset({"orderBy", "limit", "offset", "modifiedSince"})

# Paramètres acceptés par l'API selon le type d'entité listé
KNOWN_PARAMETERS: Dict[ResourceKind, FrozenSet[str]] = {
    ResourceKind.CHARACTERS: _PAGING | {
        "name", "nameStartsWith", "comics", "series", "events", "stories",
    },
    ResourceKind.COMICS: _PAGING | {
        "format", "formatType", "noVariants", "dateDescriptor", "dateRange",
        "title", "titleStartsWith", "startYear", "issueNumber", "diamondCode",
        "digitalId", "upc", "isbn", "ean", "issn", "hasDigitalIssue",
        "creators", "characters", "series", "events", "stories",
        "sharedAppearances", "collaborators",
    },
    ResourceKind.CREATORS: _PAGING | {
        "firstName", "middleName", "lastName", "suffix", "nameStartsWith",
        "firstNameStartsWith", "middleNameStartsWith", "lastNameStartsWith",
        "comics", "series", "events", "stories",
    },
    ResourceKind.EVENTS: _PAGING | {
        "name", "nameStartsWith", "creators", "characters", "series",
        "comics", "stories",
    },
    ResourceKind.SERIES: _PAGING | {
        "title", "titleStartsWith", "startYear", "comics", "stories",
        "events", "creators", "characters", "seriesType", "contains",
    },
    ResourceKind.STORIES: _PAGING | {
        "comics", "series", "events", "creators", "characters",
    },
}


def validate_limit(limit: Any) -> bool:
    """Vérifie que `limit` est un entier entre 1 et 100."""
    if isinstance(limit, bool) or not isinstance(limit, int):
        logger.warning(f"Invalid limit type: {type(limit)}")
        return False
    if not 1 <= limit <= MAX_LIMIT:
        logger.warning(f"limit must be between 1 and {MAX_LIMIT}, got {limit}")
        return False
    return True


def validate_parameters(
    kind: Union[str, ResourceKind],
    params: Mapping[str, Any]
) -> bool:
    """
    Valide les paramètres d'une requête listant des entités `kind`.

    Les paramètres inconnus sont signalés mais jamais retirés : l'API reste
    juge en dernier ressort.

    Args:
        kind: Type d'entité listé
        params: Paramètres de requête

    Returns:
        True si tous les paramètres sont connus et valides
    """
    kind = ResourceKind.parse(kind)
    known = KNOWN_PARAMETERS[kind]
    valid = True

    unknown = [key for key in params if key not in known]
    if unknown:
        logger.warning(f"Unknown parameters for {kind.value}: {', '.join(unknown)}")
        valid = False

    if params.get("limit") is not None and not validate_limit(params["limit"]):
        valid = False

    return valid
