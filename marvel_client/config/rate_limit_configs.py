"""
Préréglages de rate limit pour l'API Marvel.

Ces configurations peuvent être personnalisées selon le quota réel du compte.
"""

import logging
from typing import Optional

from marvel_client.client.rate_limiter import RateLimitConfig, RateLimiter
from marvel_client.config.settings import Settings

logger = logging.getLogger(__name__)

# Par défaut : aucune limite (passthrough)
DEFAULT_RATE_LIMIT: Optional[RateLimitConfig] = None

RATE_LIMIT_CONFIGS = {
    # Quota journalier du compte développeur gratuit
    "marvel_free": RateLimitConfig(
        max_requests=3000,
        per_milliseconds=86_400_000
    ),

    # Lissage des rafales (scripts de collecte)
    "marvel_burst": RateLimitConfig(
        max_requests=10,
        per_milliseconds=1000
    ),

    # Très conservateur, pour les jobs de fond
    "marvel_slow": RateLimitConfig(
        max_requests=1,
        per_milliseconds=1000
    ),
}


def get_rate_limit_config(name: Optional[str]) -> Optional[RateLimitConfig]:
    """
    Retourne le préréglage de rate limit correspondant.

    Args:
        name: Nom du préréglage (ex: 'marvel_burst')

    Returns:
        RateLimitConfig, ou DEFAULT_RATE_LIMIT si le nom est inconnu
    """
    if not name:
        return DEFAULT_RATE_LIMIT

    name_lower = name.lower()
    if name_lower in RATE_LIMIT_CONFIGS:
        return RATE_LIMIT_CONFIGS[name_lower]

    logger.warning(f"No rate limit config found for '{name}', using default")
    return DEFAULT_RATE_LIMIT


def rate_limit_from_settings(settings: Settings) -> Optional[RateLimitConfig]:
    """Construit la config depuis MARVEL_MAX_REQUESTS / MARVEL_PER_MILLISECONDS."""
    if not settings.rate_limited:
        if settings.per_milliseconds is not None:
            logger.warning(
                "MARVEL_PER_MILLISECONDS is set without MARVEL_MAX_REQUESTS, rate limiting disabled"
            )
        return DEFAULT_RATE_LIMIT

    if settings.per_milliseconds is None:
        return RateLimitConfig(max_requests=settings.max_requests)
    return RateLimitConfig(
        max_requests=settings.max_requests,
        per_milliseconds=settings.per_milliseconds
    )


def create_rate_limiter(name: Optional[str] = None) -> RateLimiter:
    """
    Crée un RateLimiter configuré avec un préréglage.

    Args:
        name: Nom du préréglage (None = pas de limite)

    Returns:
        RateLimiter configuré
    """
    return RateLimiter(config=get_rate_limit_config(name), name=name or "marvel")
