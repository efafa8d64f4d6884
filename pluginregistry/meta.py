"""Canonical plugin metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Author:
    """The primary author of a plugin."""

    name: str = ""
    email: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> Author:
        data = data or {}
        return cls(
            name=data.get("name") or "",
            email=data.get("email") or "",
            url=data.get("url") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "email": self.email, "url": self.url}


@dataclass
class Maintainer:
    """A plugin maintainer."""

    name: str = ""
    email: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> Maintainer:
        data = data or {}
        return cls(name=data.get("name") or "", email=data.get("email") or "")

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "email": self.email}


@dataclass
class PluginTheme:
    """How the plugin is displayed in the IDE."""

    primary_color: str = ""
    dark_mode: bool = False

    @classmethod
    def from_dict(cls, data: dict | None) -> PluginTheme:
        data = data or {}
        return cls(
            primary_color=data.get("primary_color") or "",
            dark_mode=bool(data.get("dark_mode")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"primary_color": self.primary_color, "dark_mode": self.dark_mode}


_STRING_FIELDS = (
    "id",
    "version",
    "name",
    "icon",
    "icon_url",
    "description",
    "repository",
    "website",
    "min_ide_version",
    "max_ide_version",
    "category",
    "license",
)


@dataclass
class PluginMeta:
    """Plugin metadata as declared by the plugin itself."""

    id: str = ""
    version: str = ""
    name: str = ""
    icon: str = ""
    icon_url: str = ""
    description: str = ""
    repository: str = ""
    website: str = ""
    min_ide_version: str = ""
    max_ide_version: str = ""
    category: str = ""
    license: str = ""
    author: Author | None = None
    maintainers: list[Maintainer] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    capabilities: list[str] = field(default_factory=list)
    theme: PluginTheme = field(default_factory=PluginTheme)

    @classmethod
    def from_dict(cls, data: dict | None) -> PluginMeta:
        data = data or {}
        author = data.get("author")
        return cls(
            **{name: data.get(name) or "" for name in _STRING_FIELDS},
            author=Author.from_dict(author) if author else None,
            maintainers=[Maintainer.from_dict(m) for m in data.get("maintainers") or []],
            tags=list(data.get("tags") or []),
            dependencies=list(data.get("dependencies") or []),
            capabilities=list(data.get("capabilities") or []),
            theme=PluginTheme.from_dict(data.get("theme")),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {name: getattr(self, name) for name in _STRING_FIELDS}
        if self.author is not None:
            result["author"] = self.author.to_dict()
        result["maintainers"] = [m.to_dict() for m in self.maintainers]
        result["tags"] = list(self.tags)
        result["dependencies"] = list(self.dependencies)
        result["capabilities"] = list(self.capabilities)
        result["theme"] = self.theme.to_dict()
        return result