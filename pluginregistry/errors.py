"""Exceptions raised by the registry client."""

from __future__ import annotations

from collections.abc import Iterator


class RegistryError(Exception):
    """Base class for every error raised by this package."""

    default_message = "registry error"

    def __init__(self, detail: str | None = None) -> None:
        message = self.default_message if not detail else f"{self.default_message}: {detail}"
        super().__init__(message)


class UnsignedArtifactError(RegistryError):
    """An artifact carries no signature."""

    default_message = "artifact is not signed"


class InvalidSignatureError(RegistryError):
    """An artifact signature failed verification."""

    default_message = "invalid artifact signature"


class NoPlatformArtifactError(RegistryError):
    """No artifact exists for the current platform."""

    default_message = "no artifact available for current platform"


class ChecksumMismatchError(RegistryError):
    """A downloaded file's checksum does not match the expected one."""

    default_message = "checksum mismatch"


class EmptyVersionError(RegistryError):
    """A version string is empty."""

    default_message = "version string is empty"


class APIError(RegistryError):
    """An error response returned by the registry API."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        Exception.__init__(self, status_code, message)

    def __str__(self) -> str:
        return f"registry API error {self.status_code}: {self.message}"


def _error_tree(err: BaseException) -> Iterator[BaseException]:
    """Yield ``err`` and every exception it wraps, depth first."""
    seen: set[int] = set()
    stack: list[BaseException] = [err]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        children: list[BaseException] = []
        if isinstance(current, BaseExceptionGroup):
            children.extend(current.exceptions)
        if current.__cause__ is not None:
            children.append(current.__cause__)
        elif current.__context__ is not None and not current.__suppress_context__:
            children.append(current.__context__)
        stack.extend(reversed(children))


def is_not_found(err: BaseException | None) -> bool:
    """Return True if the first API error found in ``err`` is a 404."""
    if err is None:
        return False
    for candidate in _error_tree(err):
        if isinstance(candidate, APIError):
            return candidate.status_code == 404
    return False