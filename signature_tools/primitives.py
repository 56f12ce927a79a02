"""
Hashing and encoding primitives shared by both signers.

Strings are UTF-8 encoded before hashing; every digest is returned as
standard base64 text.
"""

import base64
import hashlib
import hmac


def _to_bytes(value) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode('utf-8')


def sha256(data) -> bytes:
    """Return the raw SHA-256 digest of data."""
    return hashlib.sha256(_to_bytes(data)).digest()


def hmac_sha256(key, message) -> bytes:
    """Return the raw HMAC-SHA256 digest of message under key."""
    return hmac.new(_to_bytes(key), _to_bytes(message), hashlib.sha256).digest()


def base64_encode(data) -> str:
    """Standard base64 (with padding) as text."""
    return base64.b64encode(_to_bytes(data)).decode('ascii')


def base64_decode(value: str) -> bytes:
    return base64.b64decode(value, validate=True)


def base64url_encode(value: str) -> str:
    """
    Make a standard base64 string URL-safe.

    Padding is stripped, '+' becomes '-' and '/' becomes '_'. The input
    is already base64 text, not raw bytes.
    """
    return value.replace('=', '').replace('+', '-').replace('/', '_')


def base64url_decode(value: str) -> str:
    """Undo base64url_encode, restoring standard base64 text with padding."""
    restored = value.replace('-', '+').replace('_', '/')
    return restored + '=' * (-len(restored) % 4)
