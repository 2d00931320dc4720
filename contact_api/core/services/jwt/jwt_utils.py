import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any, Final

from contact_api.core.errors import ConfigurationError, MalformedTokenError

MAX_JWT_CHARS: Final = 8192
MAX_HEADER_BYTES: Final = 8 * 1024
MAX_PAYLOAD_BYTES: Final = 64 * 1024
MIN_KEY_BYTES: Final = 32  # HS256 needs at least 256 bits of key material
TOKEN_ALPHABET: Final = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_."
)


def decode_signing_key(secret: str | None) -> bytes:
    """Decode the configured base64 secret into HMAC key bytes.

    Raises:
        ConfigurationError: If the secret is missing, not base64, or too short.
    """
    if not secret:
        raise ConfigurationError("JWT signing secret not configured")
    try:
        key = base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ConfigurationError("JWT signing secret is not valid base64") from e
    if len(key) < MIN_KEY_BYTES:
        raise ConfigurationError(
            f"JWT signing secret decodes to {len(key) * 8} bits; "
            f"at least {MIN_KEY_BYTES * 8} bits are required for HS256"
        )
    return key


def _split_compact(token: str) -> list[str]:
    """Cheap shape checks before any base64 or JSON work."""
    if not token or len(token) > MAX_JWT_CHARS:
        raise MalformedTokenError("Invalid JWT size")
    if not set(token) <= TOKEN_ALPHABET:
        raise MalformedTokenError("Invalid JWT characters")
    segments = token.split(".")
    if len(segments) != 3 or not all(segments):
        raise MalformedTokenError("Invalid JWT format")
    return segments


def _decode_segment(segment: str, what: str, max_bytes: int) -> dict[str, Any]:
    try:
        raw = base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))
    except (binascii.Error, ValueError) as e:
        raise MalformedTokenError(f"Invalid base64url in {what}") from e
    if len(raw) > max_bytes:
        raise MalformedTokenError(f"{what} too large")
    try:
        obj = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedTokenError(f"Invalid JSON in {what}") from e
    if not isinstance(obj, dict):
        raise MalformedTokenError(f"{what} must be a JSON object")
    return obj


@dataclass(frozen=True)
class JwtPreview:
    header: dict[str, Any]
    claims: dict[str, Any]

    @property
    def alg(self) -> str | None:
        return self.header.get("alg")


def preview_jwt(token: str) -> JwtPreview:
    """Decode header and payload without verifying the signature."""
    header_seg, payload_seg, _ = _split_compact(token)
    return JwtPreview(
        header=_decode_segment(header_seg, "JWT header", MAX_HEADER_BYTES),
        claims=_decode_segment(payload_seg, "JWT payload", MAX_PAYLOAD_BYTES),
    )


def extract_roles(claims: dict[str, Any]) -> list[str]:
    """Extract role names from the ``roles`` claim.

    Accepts a list or a space-separated string; anything else yields no roles.
    """
    value = claims.get("roles")
    if isinstance(value, list):
        return [str(role) for role in value]
    if isinstance(value, str):
        return value.split()
    return []
