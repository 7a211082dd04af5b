"""
Configuration générale du client Marvel.
"""

import os
from typing import Optional
from dataclasses import dataclass
from dotenv import load_dotenv
from pathlib import Path

from .api_keys import get_api_key, API_KEYS

# Charger .env depuis la racine du projet
project_root = Path(__file__).parent.parent.parent
load_dotenv(dotenv_path=project_root / ".env")


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass
class Settings:
    """Configuration globale du client."""

    # Clés Marvel (la clé privée active le mode signé)
    public_key: str = ""
    private_key: Optional[str] = None

    # Endpoint de base (fixe côté API)
    base_url: str = "https://gateway.marvel.com:443/v1/public"

    # Rate limiting (None = pas de limite)
    max_requests: Optional[int] = None
    per_milliseconds: Optional[int] = None

    # Timeout HTTP en secondes
    request_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Crée une instance Settings depuis les variables d'environnement."""
        return cls(
            public_key=get_api_key(API_KEYS.PUBLIC, ""),
            private_key=get_api_key(API_KEYS.PRIVATE),
            max_requests=_optional_int("MARVEL_MAX_REQUESTS"),
            per_milliseconds=_optional_int("MARVEL_PER_MILLISECONDS"),
            request_timeout=float(os.getenv("MARVEL_REQUEST_TIMEOUT", "30")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    @property
    def rate_limited(self) -> bool:
        """True si une limite de requêtes est configurée (fenêtre par défaut : 1000 ms)."""
        return self.max_requests is not None
