"""
Rate limiter côté client pour l'API Marvel.
Utilise un sliding window : au plus `max_requests` requêtes par fenêtre de
`per_milliseconds`. Les requêtes excédentaires attendent leur tour (FIFO).
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional
from collections import deque
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitConfig:
    """
    Configuration du rate limiting.

    Même sémantique que les options `maxRequests` / `perMilliseconds`
    d'axios-rate-limit.
    """
    max_requests: int
    per_milliseconds: int = 1000

    def __post_init__(self):
        """Valide la configuration."""
        if self.max_requests is None or self.max_requests <= 0:
            raise ValueError("max_requests must be positive")
        if self.per_milliseconds is None or self.per_milliseconds <= 0:
            raise ValueError("per_milliseconds must be positive")

    @classmethod
    def from_max_rps(cls, max_rps: int) -> "RateLimitConfig":
        """Crée une config à partir d'un nombre de requêtes par seconde."""
        return cls(max_requests=max_rps, per_milliseconds=1000)

    @property
    def window_seconds(self) -> float:
        return self.per_milliseconds / 1000.0

    @property
    def max_rps(self) -> float:
        return self.max_requests / self.window_seconds


class RateLimiter:
    """
    Rate limiter utilisant un sliding window algorithm.

    L'état (timestamps des requêtes admises) appartient à l'instance : chaque
    client possède son propre limiter, partagé par tous ses appels concurrents.

    Algorithme : Sliding Window
    - Maintient un deque des timestamps des requêtes admises
    - Nettoie automatiquement les timestamps sortis de la fenêtre
    - Le lock est conservé pendant l'attente, les appelants sont donc
      libérés dans leur ordre d'arrivée
    """

    def __init__(
        self,
        config: Optional[RateLimitConfig] = None,
        name: Optional[str] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialise le rate limiter.

        Args:
            config: Configuration des limites (si None, aucune limite)
            name: Nom du limiter (pour les logs)
            clock: Horloge en secondes (injectable pour les tests)
        """
        self.config = config
        self.name = name or "default"
        self._clock = clock

        self.request_times: deque = deque()
        self.total_requests = 0

        # Lock asyncio (FIFO sur les waiters)
        self._lock = asyncio.Lock()

        if config:
            logger.info(
                f"Initialized RateLimiter '{self.name}': "
                f"{config.max_requests} requests / {config.per_milliseconds} ms"
            )
        else:
            logger.info(f"Initialized RateLimiter '{self.name}' (no limit)")

    async def acquire(self) -> None:
        """
        Attend si nécessaire pour respecter la limite, puis enregistre la requête.

        Ne rejette jamais une requête : elle est simplement retardée jusqu'à
        ce que la fenêtre le permette.
        """
        if not self.config:
            self.total_requests += 1
            return

        async with self._lock:
            while not self.can_proceed():
                wait_time = self._calculate_wait_time()
                logger.debug(
                    f"Rate limit reached for '{self.name}', waiting {wait_time:.3f}s"
                )
                await asyncio.sleep(wait_time)

            self.request_times.append(self._clock())
            self.total_requests += 1

    def can_proceed(self) -> bool:
        """
        Vérifie si une nouvelle requête peut être admise immédiatement.

        Returns:
            True si on peut procéder, False sinon
        """
        if not self.config:
            return True

        self._clean_old_requests()
        return len(self.request_times) < self.config.max_requests

    def _calculate_wait_time(self) -> float:
        """
        Calcule le temps d'attente avant que la plus ancienne requête sorte de la fenêtre.

        Returns:
            Temps d'attente en secondes
        """
        if not self.config or not self.request_times:
            return 0.0

        oldest = self.request_times[0]
        return max(0.0, oldest + self.config.window_seconds - self._clock())

    def _clean_old_requests(self, now: Optional[float] = None) -> None:
        """Supprime les timestamps sortis de la fenêtre."""
        if not self.config:
            self.request_times.clear()
            return

        now = self._clock() if now is None else now
        window = self.config.window_seconds
        while self.request_times and self.request_times[0] + window <= now:
            self.request_times.popleft()

    def set_config(self, config: Optional[RateLimitConfig]) -> None:
        """
        Remplace la configuration (None désactive la limite).

        Les requêtes déjà admises restent comptées dans la fenêtre courante.
        """
        self.config = config
        logger.info(f"Updated RateLimiter '{self.name}' config: {config}")

    def get_max_rps(self) -> Optional[float]:
        """Retourne le débit maximal en requêtes par seconde (None si illimité)."""
        if not self.config:
            return None
        return self.config.max_rps

    def get_stats(self) -> Dict[str, Optional[int]]:
        """
        Retourne les statistiques d'utilisation.

        Returns:
            Dict avec le nombre de requêtes dans la fenêtre et le total admis
        """
        self._clean_old_requests()
        return {
            "requests_in_window": len(self.request_times),
            "max_requests": self.config.max_requests if self.config else None,
            "per_milliseconds": self.config.per_milliseconds if self.config else None,
            "total_requests": self.total_requests,
        }

    def reset(self) -> None:
        """Réinitialise les compteurs."""
        self.request_times.clear()
        self.total_requests = 0
        logger.info(f"Reset rate limiter '{self.name}'")
