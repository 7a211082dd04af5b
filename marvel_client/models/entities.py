"""
Entités Marvel (personnages, comics, créateurs, événements, séries, histoires).

Chaque entité conserve le JSON brut dans `raw` pour les champs non mappés.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Any

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse une date Marvel ('2014-04-29T14:18:17-0400').

    L'API renvoie parfois des dates invalides ('-0001-11-30T00:00:00-0500') :
    elles sont converties en None.
    """
    if not value:
        return None
    try:
        return date_parser.isoparse(value)
    except (ValueError, OverflowError):
        logger.debug(f"Unparseable date from API: {value!r}")
        return None


@dataclass
class Url:
    type: str
    url: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Url":
        return cls(type=data.get("type", ""), url=data.get("url", ""))


@dataclass
class Image:
    path: str
    extension: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Image":
        return cls(path=data.get("path", ""), extension=data.get("extension", ""))

    def url(self, variant: Optional[str] = None) -> str:
        """URL de l'image, avec variante optionnelle ('portrait_xlarge', 'detail'...)."""
        if variant:
            return f"{self.path}/{variant}.{self.extension}"
        return f"{self.path}.{self.extension}"


@dataclass
class ResourceSummary:
    resource_uri: str
    name: str
    type: Optional[str] = None
    role: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResourceSummary":
        return cls(
            resource_uri=data.get("resourceURI", ""),
            name=data.get("name", ""),
            type=data.get("type"),
            role=data.get("role"),
        )


@dataclass
class ResourceList:
    """Liste (tronquée) de ressources liées incluse dans une entité."""
    available: int = 0
    returned: int = 0
    collection_uri: Optional[str] = None
    items: List[ResourceSummary] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ResourceList":
        if not data:
            return cls()
        return cls(
            available=data.get("available", 0),
            returned=data.get("returned", 0),
            collection_uri=data.get("collectionURI"),
            items=[ResourceSummary.from_dict(item) for item in data.get("items", [])],
        )


@dataclass
class TextObject:
    type: str
    language: str
    text: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextObject":
        return cls(
            type=data.get("type", ""),
            language=data.get("language", ""),
            text=data.get("text", ""),
        )


@dataclass
class ComicDate:
    type: str
    date: Optional[datetime]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComicDate":
        return cls(type=data.get("type", ""), date=parse_date(data.get("date")))


@dataclass
class ComicPrice:
    type: str
    price: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComicPrice":
        return cls(type=data.get("type", ""), price=float(data.get("price", 0.0)))


def _summary(data: Optional[Dict[str, Any]]) -> Optional[ResourceSummary]:
    return ResourceSummary.from_dict(data) if data else None


def _image(data: Optional[Dict[str, Any]]) -> Optional[Image]:
    return Image.from_dict(data) if data else None


def _urls(data: Dict[str, Any]) -> List[Url]:
    return [Url.from_dict(item) for item in data.get("urls", [])]


@dataclass
class Character:
    id: int
    name: str
    description: str = ""
    modified: Optional[datetime] = None
    resource_uri: Optional[str] = None
    urls: List[Url] = field(default_factory=list)
    thumbnail: Optional[Image] = None
    comics: ResourceList = field(default_factory=ResourceList)
    stories: ResourceList = field(default_factory=ResourceList)
    events: ResourceList = field(default_factory=ResourceList)
    series: ResourceList = field(default_factory=ResourceList)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Character":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            description=data.get("description") or "",
            modified=parse_date(data.get("modified")),
            resource_uri=data.get("resourceURI"),
            urls=_urls(data),
            thumbnail=_image(data.get("thumbnail")),
            comics=ResourceList.from_dict(data.get("comics")),
            stories=ResourceList.from_dict(data.get("stories")),
            events=ResourceList.from_dict(data.get("events")),
            series=ResourceList.from_dict(data.get("series")),
            raw=data,
        )


@dataclass
class Comic:
    id: int
    title: str
    digital_id: int = 0
    issue_number: float = 0
    variant_description: str = ""
    description: Optional[str] = None
    modified: Optional[datetime] = None
    isbn: str = ""
    upc: str = ""
    diamond_code: str = ""
    ean: str = ""
    issn: str = ""
    format: str = ""
    page_count: int = 0
    text_objects: List[TextObject] = field(default_factory=list)
    resource_uri: Optional[str] = None
    urls: List[Url] = field(default_factory=list)
    series: Optional[ResourceSummary] = None
    variants: List[ResourceSummary] = field(default_factory=list)
    collections: List[ResourceSummary] = field(default_factory=list)
    collected_issues: List[ResourceSummary] = field(default_factory=list)
    dates: List[ComicDate] = field(default_factory=list)
    prices: List[ComicPrice] = field(default_factory=list)
    thumbnail: Optional[Image] = None
    images: List[Image] = field(default_factory=list)
    creators: ResourceList = field(default_factory=ResourceList)
    characters: ResourceList = field(default_factory=ResourceList)
    stories: ResourceList = field(default_factory=ResourceList)
    events: ResourceList = field(default_factory=ResourceList)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Comic":
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            digital_id=data.get("digitalId", 0),
            issue_number=data.get("issueNumber", 0),
            variant_description=data.get("variantDescription") or "",
            description=data.get("description"),
            modified=parse_date(data.get("modified")),
            isbn=data.get("isbn") or "",
            upc=data.get("upc") or "",
            diamond_code=data.get("diamondCode") or "",
            ean=data.get("ean") or "",
            issn=data.get("issn") or "",
            format=data.get("format") or "",
            page_count=data.get("pageCount", 0),
            text_objects=[TextObject.from_dict(t) for t in data.get("textObjects", [])],
            resource_uri=data.get("resourceURI"),
            urls=_urls(data),
            series=_summary(data.get("series")),
            variants=[ResourceSummary.from_dict(v) for v in data.get("variants", [])],
            collections=[ResourceSummary.from_dict(c) for c in data.get("collections", [])],
            collected_issues=[
                ResourceSummary.from_dict(c) for c in data.get("collectedIssues", [])
            ],
            dates=[ComicDate.from_dict(d) for d in data.get("dates", [])],
            prices=[ComicPrice.from_dict(p) for p in data.get("prices", [])],
            thumbnail=_image(data.get("thumbnail")),
            images=[Image.from_dict(i) for i in data.get("images", [])],
            creators=ResourceList.from_dict(data.get("creators")),
            characters=ResourceList.from_dict(data.get("characters")),
            stories=ResourceList.from_dict(data.get("stories")),
            events=ResourceList.from_dict(data.get("events")),
            raw=data,
        )


@dataclass
class Creator:
    id: int
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    suffix: str = ""
    full_name: str = ""
    modified: Optional[datetime] = None
    resource_uri: Optional[str] = None
    urls: List[Url] = field(default_factory=list)
    thumbnail: Optional[Image] = None
    series: ResourceList = field(default_factory=ResourceList)
    stories: ResourceList = field(default_factory=ResourceList)
    comics: ResourceList = field(default_factory=ResourceList)
    events: ResourceList = field(default_factory=ResourceList)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Creator":
        return cls(
            id=data["id"],
            first_name=data.get("firstName") or "",
            middle_name=data.get("middleName") or "",
            last_name=data.get("lastName") or "",
            suffix=data.get("suffix") or "",
            full_name=data.get("fullName") or "",
            modified=parse_date(data.get("modified")),
            resource_uri=data.get("resourceURI"),
            urls=_urls(data),
            thumbnail=_image(data.get("thumbnail")),
            series=ResourceList.from_dict(data.get("series")),
            stories=ResourceList.from_dict(data.get("stories")),
            comics=ResourceList.from_dict(data.get("comics")),
            events=ResourceList.from_dict(data.get("events")),
            raw=data,
        )


@dataclass
class Event:
    id: int
    title: str
    description: str = ""
    resource_uri: Optional[str] = None
    urls: List[Url] = field(default_factory=list)
    modified: Optional[datetime] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    thumbnail: Optional[Image] = None
    comics: ResourceList = field(default_factory=ResourceList)
    stories: ResourceList = field(default_factory=ResourceList)
    series: ResourceList = field(default_factory=ResourceList)
    characters: ResourceList = field(default_factory=ResourceList)
    creators: ResourceList = field(default_factory=ResourceList)
    next: Optional[ResourceSummary] = None
    previous: Optional[ResourceSummary] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Event":
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            description=data.get("description") or "",
            resource_uri=data.get("resourceURI"),
            urls=_urls(data),
            modified=parse_date(data.get("modified")),
            start=parse_date(data.get("start")),
            end=parse_date(data.get("end")),
            thumbnail=_image(data.get("thumbnail")),
            comics=ResourceList.from_dict(data.get("comics")),
            stories=ResourceList.from_dict(data.get("stories")),
            series=ResourceList.from_dict(data.get("series")),
            characters=ResourceList.from_dict(data.get("characters")),
            creators=ResourceList.from_dict(data.get("creators")),
            next=_summary(data.get("next")),
            previous=_summary(data.get("previous")),
            raw=data,
        )


@dataclass
class Series:
    id: int
    title: str
    description: Optional[str] = None
    resource_uri: Optional[str] = None
    urls: List[Url] = field(default_factory=list)
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    rating: str = ""
    modified: Optional[datetime] = None
    thumbnail: Optional[Image] = None
    comics: ResourceList = field(default_factory=ResourceList)
    stories: ResourceList = field(default_factory=ResourceList)
    events: ResourceList = field(default_factory=ResourceList)
    characters: ResourceList = field(default_factory=ResourceList)
    creators: ResourceList = field(default_factory=ResourceList)
    next: Optional[ResourceSummary] = None
    previous: Optional[ResourceSummary] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Series":
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            description=data.get("description"),
            resource_uri=data.get("resourceURI"),
            urls=_urls(data),
            start_year=data.get("startYear"),
            end_year=data.get("endYear"),
            rating=data.get("rating") or "",
            modified=parse_date(data.get("modified")),
            thumbnail=_image(data.get("thumbnail")),
            comics=ResourceList.from_dict(data.get("comics")),
            stories=ResourceList.from_dict(data.get("stories")),
            events=ResourceList.from_dict(data.get("events")),
            characters=ResourceList.from_dict(data.get("characters")),
            creators=ResourceList.from_dict(data.get("creators")),
            next=_summary(data.get("next")),
            previous=_summary(data.get("previous")),
            raw=data,
        )


@dataclass
class Story:
    id: int
    title: str
    description: str = ""
    resource_uri: Optional[str] = None
    type: str = ""
    modified: Optional[datetime] = None
    thumbnail: Optional[Image] = None
    comics: ResourceList = field(default_factory=ResourceList)
    series: ResourceList = field(default_factory=ResourceList)
    events: ResourceList = field(default_factory=ResourceList)
    characters: ResourceList = field(default_factory=ResourceList)
    creators: ResourceList = field(default_factory=ResourceList)
    original_issue: Optional[ResourceSummary] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Story":
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            description=data.get("description") or "",
            resource_uri=data.get("resourceURI"),
            type=data.get("type") or "",
            modified=parse_date(data.get("modified")),
            thumbnail=_image(data.get("thumbnail")),
            comics=ResourceList.from_dict(data.get("comics")),
            series=ResourceList.from_dict(data.get("series")),
            events=ResourceList.from_dict(data.get("events")),
            characters=ResourceList.from_dict(data.get("characters")),
            creators=ResourceList.from_dict(data.get("creators")),
            original_issue=_summary(data.get("originalIssue")),
            raw=data,
        )
