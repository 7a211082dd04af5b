"""
Transport HTTP authentifié et rate-limité pour l'API Marvel.
"""

import asyncio
import json
import logging
from typing import Dict, Optional, Any, Mapping

import aiohttp

from ..config.settings import Settings
from .exceptions import (
    MarvelTransportError,
    MarvelResponseParseError,
    http_error_for_status,
)
from .query import query_string
from .rate_limiter import RateLimiter
from .signer import RequestSigner

logger = logging.getLogger(__name__)


class BaseAPIClient:
    """
    Client HTTP de base pour l'API Marvel.

    Cette classe gère :
    - L'authentification (fragment apikey / ts / hash recalculé à chaque appel)
    - Le rate limiting (un limiter par instance, partagé par tous les appels)
    - Le cycle de vie de la session aiohttp
    - La conversion des erreurs transport / HTTP / JSON en exceptions typées

    Aucun retry n'est effectué : chaque erreur est remontée à l'appelant.
    """

    def __init__(
        self,
        signer: RequestSigner,
        rate_limiter: Optional[RateLimiter] = None,
        session: Optional[aiohttp.ClientSession] = None,
        settings: Optional[Settings] = None,
        base_url: Optional[str] = None
    ):
        """
        Initialise le client.

        Args:
            signer: Signataire portant les clés Marvel
            rate_limiter: Instance de RateLimiter (si None, pas de limite)
            session: Session aiohttp fournie par l'appelant (non fermée par le client)
            settings: Configuration globale
            base_url: Endpoint de base (défaut: settings.base_url)
        """
        self.settings = settings or Settings()
        self.signer = signer
        self.rate_limiter = rate_limiter or RateLimiter(name="marvel")
        self.base_url = (base_url or self.settings.base_url).rstrip("/")
        self.session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None

        logger.info(
            f"Initialized Marvel client ({'signed' if signer.signed else 'public'} mode)"
        )

    async def __aenter__(self):
        """Context manager entry."""
        self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        await self.close()

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            self.session = aiohttp.ClientSession()
            self._owns_session = True
        return self.session

    async def close(self) -> None:
        """Ferme la session si elle a été créée par le client."""
        if self.session and self._owns_session:
            await self.session.close()
            self.session = None

    def build_url(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Construit l'URL complète d'une requête, fragment d'authentification inclus.

        Sans paramètres, seul le fragment d'authentification est ajouté. Avec
        paramètres, l'authentification est placée après les paramètres de
        l'appelant et l'emporte en cas de collision.

        Args:
            endpoint: Chemin relatif (ex: 'characters/1009610')
            params: Paramètres de requête (optionnel)

        Returns:
            URL complète
        """
        auth = self.signer.auth_params()
        if params is None:
            query = query_string(auth)
        else:
            query = query_string({**params, **auth})
        return f"{self.base_url}/{endpoint.lstrip('/')}?{query}"

    async def request(self, endpoint: str) -> Dict[str, Any]:
        """
        GET sans paramètres (seule l'authentification est ajoutée).

        Args:
            endpoint: Chemin relatif

        Returns:
            Corps JSON parsé (enveloppe)
        """
        return await self._get(endpoint, None)

    async def request_with_params(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        GET avec paramètres fusionnés au fragment d'authentification.

        Args:
            endpoint: Chemin relatif
            params: Paramètres de requête

        Returns:
            Corps JSON parsé (enveloppe)
        """
        return await self._get(endpoint, dict(params or {}))

    async def _get(self, endpoint: str, params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Effectue la requête GET avec gestion d'erreurs.

        Raises:
            MarvelTransportError: Pour erreurs réseau / timeout
            MarvelHTTPError: Pour statuts hors 2xx
            MarvelResponseParseError: Pour corps non JSON ou non UTF-8
        """
        # Rate limiting avant la signature : le timestamp reflète l'envoi réel
        await self.rate_limiter.acquire()

        session = self._ensure_session()
        url = self.build_url(endpoint, params)
        timeout_obj = aiohttp.ClientTimeout(total=self.settings.request_timeout)

        logger.debug(f"GET {endpoint}")

        try:
            async with session.get(url, timeout=timeout_obj) as response:
                if not 200 <= response.status < 300:
                    body = await response.text(errors="replace")
                    logger.error(f"HTTP {response.status} error for {endpoint}: {body[:200]}")
                    raise http_error_for_status(response.status, body, endpoint)

                raw = await response.read()

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Transport error for {endpoint}: {e!r}")
            raise MarvelTransportError(
                f"Request to {endpoint} failed: {e!r}", endpoint=endpoint
            ) from e

        # UnicodeDecodeError est une ValueError : corps non UTF-8 compris
        try:
            text = raw.decode("utf-8")
            payload = json.loads(text)
        except ValueError as e:
            text = raw.decode("utf-8", errors="replace")
            logger.error(f"Non-JSON response from {endpoint}: {text[:200]}")
            raise MarvelResponseParseError(
                f"Invalid JSON from {endpoint}: {e}", endpoint=endpoint, body=text
            ) from e

        if not isinstance(payload, dict):
            raise MarvelResponseParseError(
                f"Expected a JSON object from {endpoint}, got {type(payload).__name__}",
                endpoint=endpoint,
                body=text
            )

        return payload
