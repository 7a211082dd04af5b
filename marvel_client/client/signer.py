"""
Authentification des requêtes Marvel.

Deux modes :
- public : seul `apikey` est ajouté
- signé (clé privée fournie) : `apikey`, `ts` et `hash = md5(ts + privée + publique)`
"""

import hashlib
import time
from typing import Callable, Dict, Optional


class RequestSigner:
    """
    Produit le fragment d'authentification de chaque requête.

    Les clés sont figées à la construction. Le fragment est recalculé à
    chaque appel : le hash dépend du timestamp et n'est valable qu'une fois.
    """

    __slots__ = ("_public_key", "_private_key", "_clock")

    def __init__(
        self,
        public_key: str,
        private_key: Optional[str] = None,
        clock: Callable[[], float] = time.time
    ):
        """
        Args:
            public_key: Clé publique Marvel (obligatoire)
            private_key: Clé privée Marvel (optionnelle, active le mode signé)
            clock: Horloge Unix en secondes (injectable pour les tests)

        Raises:
            ValueError: Si la clé publique est absente
        """
        if not public_key:
            raise ValueError("Marvel public key is required")

        self._public_key = public_key
        self._private_key = private_key or None
        self._clock = clock

    @property
    def public_key(self) -> str:
        return self._public_key

    @property
    def signed(self) -> bool:
        """True si les requêtes sont signées (clé privée présente)."""
        return self._private_key is not None

    def timestamp(self) -> str:
        """Timestamp Unix courant en millisecondes, sous forme décimale."""
        return str(int(self._clock() * 1000))

    def compute_hash(self, ts: str) -> str:
        """Calcule md5(ts + clé privée + clé publique)."""
        if not self.signed:
            raise ValueError("Cannot compute hash without a private key")
        payload = f"{ts}{self._private_key}{self._public_key}"
        return hashlib.md5(payload.encode("utf-8")).hexdigest()

    def auth_params(self) -> Dict[str, str]:
        """
        Retourne les paramètres d'authentification pour une requête.

        Returns:
            {'apikey'} en mode public, {'apikey', 'ts', 'hash'} en mode signé
        """
        params = {"apikey": self._public_key}

        if self.signed:
            ts = self.timestamp()
            params["ts"] = ts
            params["hash"] = self.compute_hash(ts)

        return params

    def __repr__(self) -> str:
        mode = "signed" if self.signed else "public"
        return f"RequestSigner(public_key={self._public_key!r}, mode={mode})"
