"""
Job de récupération ponctuelle d'une ressource Marvel.

Exemples :
    python -m marvel_client.jobs.fetch_marvel_data characters --param nameStartsWith=spider
    python -m marvel_client.jobs.fetch_marvel_data characters --id 1009610 --related comics --json
"""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from ..client.exceptions import MarvelAPIError
from ..client.marvel_client import MarvelClient
from ..client.rate_limiter import RateLimitConfig
from ..config.settings import Settings
from ..config.rate_limit_configs import get_rate_limit_config, RATE_LIMIT_CONFIGS
from ..models.envelope import DataWrapper

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_params(raw_params: Optional[List[str]]) -> Dict[str, Any]:
    """
    Convertit des arguments 'key=value' en paramètres de requête.

    Les valeurs contenant des virgules deviennent des listes, les entiers
    sont convertis.
    """
    params: Dict[str, Any] = {}
    for raw in raw_params or []:
        if "=" not in raw:
            raise ValueError(f"Invalid parameter (expected key=value): {raw}")
        key, value = raw.split("=", 1)
        if "," in value:
            params[key] = [_coerce(item) for item in value.split(",")]
        else:
            params[key] = _coerce(value)
    return params


def _coerce(value: str) -> Any:
    return int(value) if value.isdigit() else value


def summarize(wrapper: DataWrapper) -> Dict[str, Any]:
    """Résumé lisible d'une réponse."""
    names = []
    for entity in wrapper.results:
        label = (
            getattr(entity, "name", None)
            or getattr(entity, "title", None)
            or getattr(entity, "full_name", None)
            or ""
        )
        names.append(f"{entity.id}: {label}")

    return {
        "code": wrapper.code,
        "status": wrapper.status,
        "offset": wrapper.data.offset,
        "count": wrapper.data.count,
        "total": wrapper.data.total,
        "results": names,
        "attribution": wrapper.attribution_text,
    }


async def fetch_resource(
    resource: str,
    resource_id: Optional[int] = None,
    related: Optional[str] = None,
    params: Optional[Dict[str, Any]] = None,
    rate_limit: Optional[RateLimitConfig] = None,
    settings: Optional[Settings] = None
) -> DataWrapper:
    """
    Exécute une requête avec un client construit depuis la configuration.

    Args:
        resource: Ressource principale
        resource_id: Identifiant (optionnel)
        related: Ressource liée (optionnel)
        params: Paramètres de requête
        rate_limit: Limite explicite (sinon celle des settings)
        settings: Configuration (défaut: environnement)

    Returns:
        DataWrapper de la réponse
    """
    settings = settings or Settings.from_env()
    client = MarvelClient.from_settings(settings)
    if rate_limit is not None:
        client.set_rate_limit(rate_limit)

    async with client:
        return await client.fetch(resource, resource_id, related, params)


def main(argv: Optional[List[str]] = None) -> int:
    """Point d'entrée CLI."""
    parser = argparse.ArgumentParser(
        description="Fetch a resource from the Marvel public API"
    )

    parser.add_argument(
        "resource",
        help="Resource kind (characters, comics, creators, events, series, stories)"
    )
    parser.add_argument(
        "--id",
        type=int,
        dest="resource_id",
        help="Resource id"
    )
    parser.add_argument(
        "--related",
        help="Related resource kind to list (requires --id)"
    )
    parser.add_argument(
        "--param",
        action="append",
        dest="params",
        help="Query parameter as key=value (repeatable, comma-separated lists)"
    )
    parser.add_argument(
        "--rate-limit",
        choices=sorted(RATE_LIMIT_CONFIGS),
        help="Rate limit preset"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the full parsed response as JSON"
    )

    args = parser.parse_args(argv)

    try:
        params = parse_params(args.params)
        wrapper = asyncio.run(fetch_resource(
            resource=args.resource,
            resource_id=args.resource_id,
            related=args.related,
            params=params,
            rate_limit=get_rate_limit_config(args.rate_limit),
        ))
    except (MarvelAPIError, ValueError) as e:
        logger.error(f"Fetch failed: {e}")
        return 1

    if args.json:
        print(json.dumps(asdict(wrapper), indent=2, default=str))
    else:
        print(json.dumps(summarize(wrapper), indent=2, default=str))

    return 0


if __name__ == "__main__":
    sys.exit(main())
