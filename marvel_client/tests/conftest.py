"""
Fixtures partagées pour les tests.
"""

import json
import pytest
from unittest.mock import AsyncMock, MagicMock
from typing import Any, Dict, Optional

from marvel_client.client.signer import RequestSigner
from marvel_client.config.settings import Settings

FIXED_TIME = 1700000000.123


class FakeClock:
    """Horloge manipulable pour les tests."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    """Horloge figée à 0, avancée manuellement."""
    return FakeClock()


@pytest.fixture
def wall_clock():
    """Horloge murale figée (secondes epoch), avancée manuellement."""
    return FakeClock(1700000000.0)


@pytest.fixture
def fixed_time():
    """Instant renvoyé par l'horloge de signed_signer."""
    return FIXED_TIME


@pytest.fixture
def public_signer():
    """Signataire en mode public."""
    return RequestSigner("abc")


@pytest.fixture
def signed_signer():
    """Signataire en mode signé avec horloge figée."""
    return RequestSigner("pub", "priv", clock=lambda: FIXED_TIME)


@pytest.fixture
def test_settings():
    """Settings de test (sans lecture de l'environnement)."""
    return Settings(public_key="abc", request_timeout=5.0)


@pytest.fixture
def make_response():
    """Fabrique de réponses aiohttp mockées (async context manager)."""
    def _make_response(
        status: int = 200,
        body: Any = None,
        text: Optional[str] = None,
        raw: Optional[bytes] = None
    ):
        response = MagicMock()
        response.status = status
        if raw is None:
            if text is None:
                text = json.dumps(body if body is not None else {})
            raw = text.encode("utf-8")
        response.read = AsyncMock(return_value=raw)
        response.text = AsyncMock(return_value=raw.decode("utf-8", errors="replace"))
        response.__aenter__ = AsyncMock(return_value=response)
        response.__aexit__ = AsyncMock(return_value=False)
        return response

    return _make_response


@pytest.fixture
def make_session():
    """Fabrique de sessions aiohttp mockées dont `get` renvoie `response`."""
    def _make_session(response=None, side_effect=None):
        session = MagicMock()
        session.get = MagicMock(return_value=response, side_effect=side_effect)
        session.close = AsyncMock()
        return session

    return _make_session


@pytest.fixture
def envelope():
    """Fabrique d'enveloppes Marvel autour d'une liste de résultats."""
    def _envelope(results, offset: int = 0, total: Optional[int] = None) -> Dict[str, Any]:
        return {
            "code": 200,
            "status": "Ok",
            "copyright": "© 2024 MARVEL",
            "attributionText": "Data provided by Marvel. © 2024 MARVEL",
            "attributionHTML": "<a href=\"http://marvel.com\">Data provided by Marvel. © 2024 MARVEL</a>",
            "etag": "f0fbae65eb2f8f28bdeea0a29be8749a4e67acb3",
            "data": {
                "offset": offset,
                "limit": 20,
                "total": total if total is not None else len(results),
                "count": len(results),
                "results": results,
            },
        }

    return _envelope


@pytest.fixture
def sample_character() -> Dict[str, Any]:
    """Personnage tel que renvoyé par l'API."""
    return {
        "id": 1009610,
        "name": "Spider-Man",
        "description": "Bitten by a radioactive spider...",
        "modified": "2020-07-21T10:30:10-0400",
        "thumbnail": {
            "path": "http://i.annihil.us/u/prod/marvel/i/mg/3/50/526548a343e4b",
            "extension": "jpg"
        },
        "resourceURI": "http://gateway.marvel.com/v1/public/characters/1009610",
        "comics": {
            "available": 4000,
            "collectionURI": "http://gateway.marvel.com/v1/public/characters/1009610/comics",
            "items": [
                {
                    "resourceURI": "http://gateway.marvel.com/v1/public/comics/62304",
                    "name": "Amazing Spider-Man (1999) #558"
                }
            ],
            "returned": 1
        },
        "series": {"available": 0, "collectionURI": "", "items": [], "returned": 0},
        "stories": {
            "available": 1,
            "collectionURI": "http://gateway.marvel.com/v1/public/characters/1009610/stories",
            "items": [
                {
                    "resourceURI": "http://gateway.marvel.com/v1/public/stories/483",
                    "name": "Interior #483",
                    "type": "interiorStory"
                }
            ],
            "returned": 1
        },
        "events": {"available": 0, "collectionURI": "", "items": [], "returned": 0},
        "urls": [
            {"type": "detail", "url": "http://marvel.com/characters/54/spider-man"}
        ]
    }


@pytest.fixture
def sample_comic() -> Dict[str, Any]:
    """Comic tel que renvoyé par l'API."""
    return {
        "id": 62304,
        "digitalId": 0,
        "title": "Amazing Spider-Man (1999) #558",
        "issueNumber": 558,
        "variantDescription": "",
        "description": None,
        "modified": "-0001-11-30T00:00:00-0500",
        "isbn": "",
        "upc": "",
        "format": "Comic",
        "pageCount": 32,
        "textObjects": [],
        "series": {
            "resourceURI": "http://gateway.marvel.com/v1/public/series/454",
            "name": "Amazing Spider-Man (1999 - 2013)"
        },
        "dates": [
            {"type": "onsaleDate", "date": "2008-05-28T00:00:00-0400"}
        ],
        "prices": [
            {"type": "printPrice", "price": 2.99}
        ],
        "thumbnail": {"path": "http://i.annihil.us/u/prod/marvel/i/mg/c/a0/4bc6414f5a2b0", "extension": "jpg"},
        "images": [],
        "creators": {"available": 1, "returned": 1, "collectionURI": "", "items": [
            {"resourceURI": "http://gateway.marvel.com/v1/public/creators/24", "name": "Marc Guggenheim", "role": "writer"}
        ]},
    }
