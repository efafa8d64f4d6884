"""Ed25519 verification of artifact signatures."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from .errors import InvalidSignatureError, UnsignedArtifactError

PUBLIC_KEY_SIZE = 32

DEFAULT_PUBLIC_KEY_HEX = "c84100654c6c0d42e8a86f16253a21b7f01b8e914d83ba07ce072f086a8add31"


@dataclass
class _KeyState:
    hex_key: str
    raw: bytes


_state = _KeyState(DEFAULT_PUBLIC_KEY_HEX, binascii.unhexlify(DEFAULT_PUBLIC_KEY_HEX))


def set_public_key(hex_key: str) -> None:
    """Replace the public key used for verification.

    Raises ValueError if ``hex_key`` is not hex or not 32 bytes long.
    """
    try:
        raw = binascii.unhexlify(hex_key)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"failed to decode public key hex: {exc}") from exc
    if len(raw) != PUBLIC_KEY_SIZE:
        raise ValueError(
            f"invalid public key length: got {len(raw)} bytes, want {PUBLIC_KEY_SIZE}"
        )
    _state.hex_key = hex_key
    _state.raw = raw


def public_key_hex() -> str:
    """Return the hex form of the public key currently in use."""
    return _state.hex_key


def verify_artifact_signature(checksum: str, signature_b64: str) -> None:
    """Check that ``checksum`` was signed by the configured key.

    Raises UnsignedArtifactError for an empty signature and
    InvalidSignatureError when the signature does not verify.
    """
    if not signature_b64:
        raise UnsignedArtifactError()
    try:
        signature = base64.b64decode(signature_b64, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidSignatureError(f"malformed base64: {exc}") from exc
    try:
        key = Ed25519PublicKey.from_public_bytes(_state.raw)
        key.verify(signature, checksum.encode())
    except (InvalidSignature, ValueError) as exc:
        raise InvalidSignatureError() from exc