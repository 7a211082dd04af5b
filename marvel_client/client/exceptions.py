"""
Exceptions levées par le client Marvel.
"""

from typing import Optional


class MarvelAPIError(Exception):
    """Erreur générique du client Marvel."""


class MarvelTransportError(MarvelAPIError):
    """Échec réseau (DNS, connexion refusée, timeout). La cause est dans __cause__."""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        super().__init__(message)
        self.endpoint = endpoint


class MarvelHTTPError(MarvelAPIError):
    """Réponse HTTP hors 2xx."""

    def __init__(self, status: int, body: str, endpoint: Optional[str] = None):
        super().__init__(f"HTTP {status} for {endpoint}: {body[:200]}")
        self.status = status
        self.body = body
        self.endpoint = endpoint


class MarvelAuthError(MarvelHTTPError):
    """Échec d'authentification (401 : clé ou hash invalide, 403 : accès refusé)."""


class MarvelRateLimitError(MarvelHTTPError):
    """Quota dépassé côté serveur (429)."""


class MarvelResponseParseError(MarvelAPIError):
    """Corps de réponse non JSON ou enveloppe invalide."""

    def __init__(self, message: str, endpoint: Optional[str] = None, body: Optional[str] = None):
        super().__init__(message)
        self.endpoint = endpoint
        self.body = body


def http_error_for_status(status: int, body: str, endpoint: Optional[str] = None) -> MarvelHTTPError:
    """Construit l'exception HTTP adaptée au code de statut."""
    if status in (401, 403):
        return MarvelAuthError(status, body, endpoint)
    if status == 429:
        return MarvelRateLimitError(status, body, endpoint)
    return MarvelHTTPError(status, body, endpoint)
