"""HTTP client for the plugin registry API."""

from __future__ import annotations

import contextlib
import hashlib
import json
import os
import tempfile
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from .errors import (
    APIError,
    ChecksumMismatchError,
    EmptyVersionError,
    NoPlatformArtifactError,
    RegistryError,
)
from .options import HealthStatus, ListOptions, ListResult, Pagination, build_query
from .platform import current_platform
from .types import (
    CategoryCount,
    CreateReviewInput,
    DailyDownloads,
    DownloadStats,
    Plugin,
    PluginVersion,
    Publisher,
    Review,
)
from .verify import verify_artifact_signature

DEFAULT_BASE_URL = "https://api.omniview.dev"
DEFAULT_TIMEOUT = 30.0

T = TypeVar("T")

_NO_BODY = object()


def _raise_for_status(response: httpx.Response) -> None:
    """Raise APIError for a 4xx or 5xx response."""
    if response.status_code < 400:
        return
    try:
        envelope = response.json()
    except ValueError:
        envelope = None
    message = envelope.get("message") if isinstance(envelope, dict) else None
    if isinstance(message, str) and message:
        raise APIError(response.status_code, message)
    raise APIError(response.status_code, response.text)


def _envelope(response: httpx.Response) -> dict[str, Any]:
    """Decode the API envelope and raise if it reports a failure."""
    try:
        envelope = response.json()
    except ValueError as exc:
        raise RegistryError(f"decoding response envelope: {exc}") from exc
    if not isinstance(envelope, dict):
        raise RegistryError("decoding response envelope: expected a JSON object")
    if not envelope.get("success"):
        raise APIError(response.status_code, envelope.get("message") or "")
    return envelope


def _as_object(data: Any) -> dict | None:
    if data is None or isinstance(data, dict):
        return data
    raise RegistryError("decoding response data: expected a JSON object")


def _as_list(data: Any) -> list:
    if data is None:
        return []
    if isinstance(data, list):
        return data
    raise RegistryError("decoding response data: expected a JSON array")


class Client:
    """Client for the plugin registry API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str = "",
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url
        self.token = token
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=timeout)

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # Transport helpers

    def _send(self, method: str, path: str, body: Any = _NO_BODY) -> httpx.Response:
        headers: dict[str, str] = {}
        content: bytes | None = None
        if body is not _NO_BODY:
            content = json.dumps(body, separators=(",", ":")).encode()
            headers["Content-Type"] = "application/json"
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        response = self._http.request(
            method,
            self.base_url + path,
            content=content,
            headers=headers,
            follow_redirects=True,
        )
        _raise_for_status(response)
        return response

    def _get(self, path: str) -> Any:
        return _envelope(self._send("GET", path)).get("data")

    def _post(self, path: str, body: Any, *, decode: bool = True) -> Any:
        response = self._send("POST", path, body)
        if not decode:
            return None
        return _envelope(response).get("data")

    def _get_list(self, path: str, factory: Callable[[dict], T]) -> ListResult[T]:
        envelope = _envelope(self._send("GET", path))
        items = [factory(item) for item in _as_list(envelope.get("data"))]
        pagination = envelope.get("pagination")
        return ListResult(
            items=items,
            pagination=Pagination.from_dict(pagination) if pagination is not None else None,
        )

    # Endpoints

    def health(self) -> HealthStatus:
        """Check the API health endpoint."""
        return HealthStatus.from_dict(_as_object(self._get("/v1/health")))

    def list_plugins(self, options: ListOptions | None = None) -> ListResult[Plugin]:
        """Return a page of plugins."""
        return self._get_list("/v1/plugins" + build_query(options), Plugin.from_dict)

    def get_plugin(self, plugin_id: str) -> Plugin:
        """Return a single plugin by ID."""
        return Plugin.from_dict(_as_object(self._get(f"/v1/plugins/{plugin_id}")))

    def list_categories(self) -> list[CategoryCount]:
        """Return all categories with their plugin counts."""
        return [CategoryCount.from_dict(item) for item in _as_list(self._get("/v1/categories"))]

    def get_publisher(self, slug: str) -> Publisher:
        """Return a publisher by slug."""
        return Publisher.from_dict(_as_object(self._get(f"/v1/publishers/{slug}")))

    def list_publisher_plugins(
        self, slug: str, options: ListOptions | None = None
    ) -> ListResult[Plugin]:
        """Return a page of plugins belonging to a publisher."""
        path = f"/v1/publishers/{slug}/plugins" + build_query(options)
        return self._get_list(path, Plugin.from_dict)

    def list_reviews(
        self, plugin_id: str, options: ListOptions | None = None
    ) -> ListResult[Review]:
        """Return a page of reviews for a plugin."""
        path = f"/v1/plugins/{plugin_id}/reviews" + build_query(options)
        return self._get_list(path, Review.from_dict)

    def create_review(self, plugin_id: str, review: CreateReviewInput | None) -> Review:
        """Create a review for a plugin; needs a token."""
        body = review.to_dict() if review is not None else None
        data = self._post(f"/v1/plugins/{plugin_id}/reviews", body)
        return Review.from_dict(_as_object(data))

    def list_versions(
        self, plugin_id: str, options: ListOptions | None = None
    ) -> ListResult[PluginVersion]:
        """Return a page of versions of a plugin."""
        path = f"/v1/plugins/{plugin_id}/versions" + build_query(options)
        return self._get_list(path, PluginVersion.from_dict)

    def get_version(self, plugin_id: str, version: str) -> PluginVersion:
        """Return one version of a plugin."""
        data = self._get(f"/v1/plugins/{plugin_id}/versions/{version}")
        return PluginVersion.from_dict(_as_object(data))

    def get_download_url(self, plugin_id: str, version: str, arch: str) -> str:
        """Return the redirect target for a plugin artifact download."""
        url = f"{self.base_url}/v1/plugins/{plugin_id}/download/{version}/{arch}"
        response = self._http.request("GET", url, follow_redirects=False)
        response.close()
        if response.status_code in (302, 307):
            return response.headers.get("Location", "")
        if response.status_code >= 400:
            raise APIError(response.status_code, "download not available")
        raise RegistryError(
            f"unexpected status {response.status_code} from download endpoint"
        )

    def record_download(self, plugin_id: str, version: str, arch: str) -> None:
        """Record a download event for analytics."""
        body = {"plugin_id": plugin_id, "version": version, "arch": arch}
        self._post(f"/v1/plugins/{plugin_id}/downloads", body, decode=False)

    def get_download_stats(self, plugin_id: str) -> DownloadStats:
        """Return aggregate download statistics for a plugin."""
        data = self._get(f"/v1/plugins/{plugin_id}/downloads")
        return DownloadStats.from_dict(_as_object(data))

    def get_daily_downloads(self, plugin_id: str, days: int) -> list[DailyDownloads]:
        """Return daily download counts for a plugin."""
        data = self._get(f"/v1/plugins/{plugin_id}/downloads/daily?days={int(days)}")
        return [DailyDownloads.from_dict(item) for item in _as_list(data)]

    def download_plugin(self, plugin_id: str, version: str) -> str:
        """Download and verify the artifact for this platform; return its temp path."""
        if not version:
            raise EmptyVersionError(f'plugin "{plugin_id}"')

        plugin_version = self.get_version(plugin_id, version)
        platform = current_platform()
        artifact = plugin_version.artifacts.get(platform)
        if artifact is None:
            raise NoPlatformArtifactError(platform)

        download_url = self.get_download_url(plugin_id, version, platform)

        fd, tmp_path = tempfile.mkstemp(
            prefix=f"omniview-plugin-{plugin_id}-{version}-", suffix=".tar.gz"
        )
        try:
            hasher = hashlib.sha256()
            with os.fdopen(fd, "wb") as out, self._http.stream(
                "GET", download_url, follow_redirects=True
            ) as response:
                if response.status_code != 200:
                    raise APIError(response.status_code, "download failed")
                for chunk in response.iter_bytes():
                    out.write(chunk)
                    hasher.update(chunk)
            checksum = hasher.hexdigest()
            if checksum != artifact.checksum:
                raise ChecksumMismatchError(f"expected {artifact.checksum}, got {checksum}")
            verify_artifact_signature(checksum, artifact.signature)
        except BaseException:
            with contextlib.suppress(OSError):
                os.remove(tmp_path)
            raise
        return tmp_path