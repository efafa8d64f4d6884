"""Data types returned by the registry API."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

_FRACTION = re.compile(r"\.(\d+)")


def _parse_time(value: Any) -> datetime | None:
    """Parse an RFC 3339 timestamp; empty values give None."""
    if not value:
        return None
    text = str(value)
    if text[-1] in "Zz":
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + (m.group(1) + "000000")[:6], text, count=1)
    return datetime.fromisoformat(text)


def _str(data: dict, key: str) -> str:
    return data.get(key) or ""


def _int(data: dict, key: str) -> int:
    return int(data.get(key) or 0)


def _list(data: dict, key: str) -> list:
    return list(data.get(key) or [])


@dataclass
class PluginAuthor:
    """The author of a plugin."""

    name: str = ""
    email: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> PluginAuthor:
        data = data or {}
        return cls(name=_str(data, "name"), email=_str(data, "email"), url=_str(data, "url"))


@dataclass
class Artifact:
    """A platform-specific build artifact."""

    checksum: str = ""
    signature: str = ""
    download_url: str = ""
    size: int = 0

    @classmethod
    def from_dict(cls, data: dict | None) -> Artifact:
        data = data or {}
        return cls(
            checksum=_str(data, "checksum"),
            signature=_str(data, "signature"),
            download_url=_str(data, "download_url"),
            size=_int(data, "size"),
        )


@dataclass
class PluginVersion:
    """A specific version of a plugin."""

    id: str = ""
    plugin_id: str = ""
    version: str = ""
    description: str = ""
    changelog: str = ""
    min_ide_version: str = ""
    max_ide_version: str = ""
    capabilities: list[str] = field(default_factory=list)
    visible: bool = False
    artifacts: dict[str, Artifact] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict | None) -> PluginVersion:
        data = data or {}
        artifacts = data.get("artifacts") or {}
        return cls(
            id=_str(data, "id"),
            plugin_id=_str(data, "plugin_id"),
            version=_str(data, "version"),
            description=_str(data, "description"),
            changelog=_str(data, "changelog"),
            min_ide_version=_str(data, "min_ide_version"),
            max_ide_version=_str(data, "max_ide_version"),
            capabilities=_list(data, "capabilities"),
            visible=bool(data.get("visible")),
            artifacts={key: Artifact.from_dict(value) for key, value in artifacts.items()},
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
        )


@dataclass
class Plugin:
    """A plugin in the registry."""

    id: str = ""
    name: str = ""
    description: str = ""
    icon_url: str = ""
    category: str = ""
    tags: list[str] = field(default_factory=list)
    license: str = ""
    repository: str = ""
    url: str = ""
    readme: str = ""
    official: bool = False
    featured: bool = False
    download_count: int = 0
    average_rating: float = 0.0
    review_count: int = 0
    publisher_id: str = ""
    publisher_name: str = ""
    latest_version: str = ""
    version: PluginVersion | None = None
    author: PluginAuthor = field(default_factory=PluginAuthor)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict | None) -> Plugin:
        data = data or {}
        version = data.get("version")
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            description=_str(data, "description"),
            icon_url=_str(data, "icon_url"),
            category=_str(data, "category"),
            tags=_list(data, "tags"),
            license=_str(data, "license"),
            repository=_str(data, "repository"),
            url=_str(data, "url"),
            readme=_str(data, "readme"),
            official=bool(data.get("official")),
            featured=bool(data.get("featured")),
            download_count=_int(data, "download_count"),
            average_rating=float(data.get("average_rating") or 0.0),
            review_count=_int(data, "review_count"),
            publisher_id=_str(data, "publisher_id"),
            publisher_name=_str(data, "publisher_name"),
            latest_version=_str(data, "latest_version"),
            version=PluginVersion.from_dict(version) if version else None,
            author=PluginAuthor.from_dict(data.get("author")),
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
        )


@dataclass
class Review:
    """A user review of a plugin."""

    id: str = ""
    plugin_id: str = ""
    user_id: int = 0
    rating: int = 0
    title: str = ""
    body: str = ""
    response: str = ""
    response_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict | None) -> Review:
        data = data or {}
        return cls(
            id=_str(data, "id"),
            plugin_id=_str(data, "plugin_id"),
            user_id=_int(data, "user_id"),
            rating=_int(data, "rating"),
            title=_str(data, "title"),
            body=_str(data, "body"),
            response=_str(data, "response"),
            response_at=_parse_time(data.get("response_at")),
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
        )


@dataclass
class CreateReviewInput:
    """Request body for creating a review."""

    rating: int = 0
    title: str = ""
    body: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"rating": self.rating, "title": self.title, "body": self.body}


@dataclass
class Publisher:
    """A plugin publisher organisation."""

    id: str = ""
    name: str = ""
    slug: str = ""
    description: str = ""
    website: str = ""
    logo: str = ""
    verified: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict | None) -> Publisher:
        data = data or {}
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            slug=_str(data, "slug"),
            description=_str(data, "description"),
            website=_str(data, "website"),
            logo=_str(data, "logo"),
            verified=bool(data.get("verified")),
            created_at=_parse_time(data.get("created_at")),
            updated_at=_parse_time(data.get("updated_at")),
        )


@dataclass
class VersionDownloads:
    """Download count for one version."""

    version: str = ""
    count: int = 0

    @classmethod
    def from_dict(cls, data: dict | None) -> VersionDownloads:
        data = data or {}
        return cls(version=_str(data, "version"), count=_int(data, "count"))


@dataclass
class DownloadStats:
    """Aggregate download statistics for a plugin."""

    plugin_id: str = ""
    total_count: int = 0
    by_version: list[VersionDownloads] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict | None) -> DownloadStats:
        data = data or {}
        return cls(
            plugin_id=_str(data, "plugin_id"),
            total_count=_int(data, "total_count"),
            by_version=[VersionDownloads.from_dict(item) for item in _list(data, "by_version")],
        )


@dataclass
class DailyDownloads:
    """Download count for a single day."""

    date: str = ""
    count: int = 0

    @classmethod
    def from_dict(cls, data: dict | None) -> DailyDownloads:
        data = data or {}
        return cls(date=_str(data, "date"), count=_int(data, "count"))


@dataclass
class CategoryCount:
    """A category and the number of plugins in it."""

    category: str = ""
    count: int = 0

    @classmethod
    def from_dict(cls, data: dict | None) -> CategoryCount:
        data = data or {}
        return cls(category=_str(data, "category"), count=_int(data, "count"))