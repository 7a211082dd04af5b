"""
Client de l'API publique Marvel.

Toutes les routes (/{ressource}, /{ressource}/{id}, /{ressource}/{id}/{liée})
passent par un dispatcher unique piloté par la table RELATIONS.
"""

import logging
from typing import Any, Mapping, Optional, Union

import aiohttp

from ..config.settings import Settings
from ..models.envelope import DataWrapper, parse_envelope
from ..utils.validators import validate_parameters
from .base_client import BaseAPIClient
from .endpoints import ResourceKind, endpoint_path
from .rate_limiter import RateLimitConfig, RateLimiter
from .signer import RequestSigner

logger = logging.getLogger(__name__)

ResourceLike = Union[str, ResourceKind]


class MarvelClient(BaseAPIClient):
    """
    Client typé de l'API Marvel.

    Usage:
        async with MarvelClient("public", "private") as client:
            wrapper = await client.list("characters", {"nameStartsWith": "spider"})
            comics = await client.related("characters", 1009610, "comics")
    """

    BASE_URL = "https://gateway.marvel.com:443/v1/public"

    def __init__(
        self,
        public_key: str,
        private_key: Optional[str] = None,
        rate_limit: Optional[RateLimitConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
        settings: Optional[Settings] = None
    ):
        """
        Initialise le client.

        Args:
            public_key: Clé publique Marvel
            private_key: Clé privée Marvel (optionnelle, active le mode signé)
            rate_limit: Limite de requêtes (None = pas de limite)
            session: Session aiohttp existante (optionnelle)
            settings: Configuration (timeout...)

        Raises:
            ValueError: Si la clé publique est absente
        """
        super().__init__(
            signer=RequestSigner(public_key, private_key),
            rate_limiter=RateLimiter(config=rate_limit, name="marvel"),
            session=session,
            settings=settings,
            base_url=self.BASE_URL,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        session: Optional[aiohttp.ClientSession] = None
    ) -> "MarvelClient":
        """Crée un client depuis un objet Settings."""
        from ..config.rate_limit_configs import rate_limit_from_settings

        return cls(
            public_key=settings.public_key,
            private_key=settings.private_key,
            rate_limit=rate_limit_from_settings(settings),
            session=session,
            settings=settings,
        )

    @classmethod
    def from_env(cls, session: Optional[aiohttp.ClientSession] = None) -> "MarvelClient":
        """Crée un client depuis les variables d'environnement (.env inclus)."""
        return cls.from_settings(Settings.from_env(), session=session)

    def set_rate_limit(self, config: Optional[RateLimitConfig]) -> None:
        """Remplace la limite de requêtes (None la désactive)."""
        self.rate_limiter.set_config(config)

    async def fetch(
        self,
        resource: ResourceLike,
        resource_id: Optional[int] = None,
        related: Optional[ResourceLike] = None,
        params: Optional[Mapping[str, Any]] = None
    ) -> DataWrapper:
        """
        Dispatcher unique vers tous les endpoints.

        Le type des entités retournées est celui de la ressource liée si
        elle est fournie, sinon celui de la ressource principale.

        Args:
            resource: Ressource principale ('characters', ResourceKind.COMICS...)
            resource_id: Identifiant de la ressource (optionnel)
            related: Ressource liée à lister (nécessite resource_id)
            params: Paramètres de requête (ignorés pour un accès par id)

        Returns:
            DataWrapper des entités typées

        Raises:
            ValueError: Endpoint non exposé par l'API
            MarvelAPIError: Erreur transport, HTTP ou de parsing
        """
        resource = ResourceKind.parse(resource)
        related = ResourceKind.parse(related) if related is not None else None
        endpoint = endpoint_path(resource, resource_id, related)
        entity_kind = related or resource

        if resource_id is not None and related is None:
            if params:
                logger.warning(f"Parameters ignored for {endpoint}")
            payload = await self.request(endpoint)
        else:
            params = dict(params or {})
            validate_parameters(entity_kind, params)
            payload = await self.request_with_params(endpoint, params)

        wrapper = parse_envelope(payload, entity_kind, endpoint=endpoint)
        logger.info(
            f"Fetched {wrapper.data.count}/{wrapper.data.total} {entity_kind.value} from {endpoint}"
        )
        return wrapper

    async def list(
        self,
        resource: ResourceLike,
        params: Optional[Mapping[str, Any]] = None
    ) -> DataWrapper:
        """Liste les entités d'une ressource (ex: GET /characters)."""
        return await self.fetch(resource, params=params)

    async def get(self, resource: ResourceLike, resource_id: int) -> DataWrapper:
        """Récupère une entité par identifiant (ex: GET /characters/1009610)."""
        return await self.fetch(resource, resource_id)

    async def related(
        self,
        resource: ResourceLike,
        resource_id: int,
        related: ResourceLike,
        params: Optional[Mapping[str, Any]] = None
    ) -> DataWrapper:
        """Liste les entités liées (ex: GET /characters/1009610/comics)."""
        return await self.fetch(resource, resource_id, related, params)
