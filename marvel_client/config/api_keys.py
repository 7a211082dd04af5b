"""
Gestion des clés API Marvel (publique et privée).
"""

import os
from typing import Optional
from dotenv import load_dotenv
from pathlib import Path

# Charger .env depuis la racine du projet (même chemin que settings.py)
project_root = Path(__file__).parent.parent.parent
load_dotenv(dotenv_path=project_root / ".env")


def get_api_key(key_name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Récupère une clé Marvel depuis l'environnement.

    Args:
        key_name: Nom de la clé ('PUBLIC' ou 'PRIVATE', cf. API_KEYS)
        default: Valeur par défaut si la clé n'est pas trouvée

    Returns:
        La clé ou None si non trouvée
    """
    env_key = f"MARVEL_{key_name}_KEY"
    value = os.getenv(env_key)
    # Une variable vide équivaut à une clé absente
    return value if value else default


def set_api_key(key_name: str, api_key: str) -> None:
    """
    Définit une clé Marvel dans les variables d'environnement (session uniquement).

    Args:
        key_name: Nom de la clé ('PUBLIC' ou 'PRIVATE')
        api_key: La clé
    """
    env_key = f"MARVEL_{key_name}_KEY"
    os.environ[env_key] = api_key


# Constantes pour les noms de clés
class API_KEYS:
    """Constantes pour les noms de clés Marvel."""
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"  # Requise pour les appels signés (ts + hash)
