"""List options, pagination and small response types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar
from urllib.parse import urlencode

T = TypeVar("T")


@dataclass
class ListOptions:
    """Pagination, sorting and filtering for list endpoints."""

    page: int = 0
    per_page: int = 0
    order_field: str = ""
    order_direction: str = ""
    search: str = ""
    category: str = ""
    featured: bool = False

    def build_query(self) -> str:
        """Return the query string, starting with ``?``, or an empty string."""
        params: dict[str, str] = {}
        if self.page > 0:
            params["page"] = str(self.page)
        if self.per_page > 0:
            params["per_page"] = str(self.per_page)
        if self.order_field:
            params["order_field"] = self.order_field
        if self.order_direction:
            params["order_direction"] = self.order_direction
        if self.search:
            params["search"] = self.search
        if self.category:
            params["category"] = self.category
        if self.featured:
            params["featured"] = "true"
        if not params:
            return ""
        return "?" + urlencode(sorted(params.items()))


def build_query(options: ListOptions | None) -> str:
    """Return the query string for ``options``; None gives an empty string."""
    return "" if options is None else options.build_query()


@dataclass
class Pagination:
    """Pagination metadata from a list response."""

    page: int = 0
    per_page: int = 0
    total: int = 0
    total_pages: int = 0

    @classmethod
    def from_dict(cls, data: dict | None) -> Pagination:
        data = data or {}
        return cls(
            page=int(data.get("page") or 0),
            per_page=int(data.get("per_page") or 0),
            total=int(data.get("total") or 0),
            total_pages=int(data.get("total_pages") or 0),
        )


@dataclass
class ListResult(Generic[T]):
    """A page of items with its pagination metadata."""

    items: list[T] = field(default_factory=list)
    pagination: Pagination | None = None


@dataclass
class HealthStatus:
    """API health check response."""

    status: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> HealthStatus:
        data = data or {}
        return cls(status=data.get("status") or "")