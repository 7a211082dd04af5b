"""
Sérialisation des paramètres de requête en query string.
"""

from typing import Any, Mapping


def _format_value(value: Any) -> str:
    """Formate une valeur scalaire comme attendu par l'API Marvel."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def query_string(params: Mapping[str, Any]) -> str:
    """
    Construit la query string `key1=val1&key2=val2,val3`.

    L'ordre des clés suit l'ordre d'insertion du mapping. Les listes sont
    jointes par des virgules. Aucun percent-encoding n'est appliqué : les
    valeurs sont supposées sûres pour une URL.

    Args:
        params: Paramètres (scalaires ou listes de scalaires)

    Returns:
        Query string sans le '?' initial
    """
    pairs = []
    for key, value in params.items():
        # Une valeur None équivaut à un paramètre absent
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = ",".join(_format_value(item) for item in value)
        else:
            value = _format_value(value)
        pairs.append(f"{key}={value}")
    return "&".join(pairs)
