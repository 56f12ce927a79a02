"""
Exceptions raised by the signature tools library.

The signers themselves only raise InvalidTimestampError; the others come
from the caller-side helpers (auth adapter, configuration checks).
"""


class SignatureToolsError(Exception):
    """Base exception for signature tools errors."""
    pass


class InputTooLargeError(SignatureToolsError):
    """Raised when a request body exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(f"Input size {size} exceeds limit {limit}")
        self.size = size
        self.limit = limit


class InvalidTimestampError(SignatureToolsError):
    """Raised when a POP date cannot be turned into a Unix timestamp."""

    def __init__(self, value: str, reason: str):
        super().__init__(f"Cannot parse date {value!r}: {reason}")
        self.value = value


class UnsignableBodyError(SignatureToolsError):
    """Raised when a request body cannot be hashed (streams, non UTF-8 bytes)."""
    pass


class ConfigurationError(SignatureToolsError):
    """Raised when partner id, secret or limits are invalid."""
    pass
