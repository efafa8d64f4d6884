import pytest

from pluginregistry.errors import (
    APIError,
    ChecksumMismatchError,
    EmptyVersionError,
    InvalidSignatureError,
    NoPlatformArtifactError,
    RegistryError,
    UnsignedArtifactError,
    is_not_found,
)


def test_api_error_str():
    err = APIError(404, "plugin not found")
    assert str(err) == "registry API error 404: plugin not found"
    assert err.status_code == 404
    assert err.message == "plugin not found"


def test_is_not_found_true():
    assert is_not_found(APIError(404, "not found")) is True


def test_is_not_found_false():
    assert is_not_found(APIError(500, "server error")) is False


def test_is_not_found_non_api_error():
    assert is_not_found(ValueError("something else")) is False


def test_is_not_found_none():
    assert is_not_found(None) is False


def test_is_not_found_wrapped_in_group():
    inner = APIError(404, "wrapped")
    wrapped = ExceptionGroup("context", [ValueError("context"), inner])
    assert is_not_found(wrapped) is True


def test_is_not_found_chained_cause():
    try:
        try:
            raise APIError(404, "wrapped")
        except APIError as exc:
            raise RuntimeError("getting version info") from exc
    except RuntimeError as outer:
        assert is_not_found(outer) is True


def test_is_not_found_uses_first_api_error():
    try:
        try:
            raise APIError(404, "inner")
        except APIError as exc:
            raise APIError(500, "outer") from exc
    except APIError as outer:
        assert is_not_found(outer) is False


@pytest.mark.parametrize(
    ("cls", "text"),
    [
        (UnsignedArtifactError, "artifact is not signed"),
        (InvalidSignatureError, "invalid artifact signature"),
        (NoPlatformArtifactError, "no artifact available for current platform"),
        (ChecksumMismatchError, "checksum mismatch"),
        (EmptyVersionError, "version string is empty"),
    ],
)
def test_sentinel_default_messages(cls, text):
    err = cls()
    assert str(err) == text
    assert isinstance(err, RegistryError)


def test_sentinel_with_detail():
    err = ChecksumMismatchError("expected abc123, got def456")
    assert str(err) == "checksum mismatch: expected abc123, got def456"


def test_api_error_is_registry_error():
    err = APIError(401, "authentication required")
    assert isinstance(err, RegistryError)
    assert err.status_code == 401
    assert err.message == "authentication required"
    assert is_not_found(err) is False
    assert str(err) == "registry API error 401: authentication required"