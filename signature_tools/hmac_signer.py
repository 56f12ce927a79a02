"""
Canonical HMAC request signature.

The signed plaintext is the newline-joined sequence
method, content type, date header, request URL and payload hash, followed
by one trailing newline. The payload hash is empty for GET requests and
for empty bodies.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .constants import (
    CANONICAL_SEPARATOR,
    GET_METHOD,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_DATE,
    PLACEHOLDER_HOST,
    PLACEHOLDER_PARTNER_ID,
)
from .exceptions import UnsignableBodyError
from .primitives import base64_encode, hmac_sha256, sha256

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanonicalSignRequest:
    """Request metadata to be signed. header_date is never reparsed."""
    method: str
    content_type: str
    header_date: str
    request_url: str
    request_body: str = ''
    partner_secret: str = ''

    @classmethod
    def from_prepared_request(cls, prepared, partner_secret: str) -> 'CanonicalSignRequest':
        """
        Build a sign request from a requests.PreparedRequest.

        Args:
            prepared: Prepared request (method, headers and body already set)
            partner_secret: HMAC key material

        Returns:
            CanonicalSignRequest for the prepared request

        Raises:
            UnsignableBodyError: If the body is a stream, or bytes that are
                not valid UTF-8
        """
        body = prepared.body
        if body is None:
            body = ''
        elif isinstance(body, bytes):
            try:
                body = body.decode('utf-8')
            except UnicodeDecodeError as e:
                raise UnsignableBodyError("request body is not valid UTF-8") from e
        elif not isinstance(body, str):
            raise UnsignableBodyError("streaming request bodies cannot be signed")

        return cls(
            method=prepared.method or '',
            content_type=prepared.headers.get(HEADER_CONTENT_TYPE, ''),
            header_date=prepared.headers.get(HEADER_DATE, ''),
            request_url=prepared.path_url,
            request_body=body,
            partner_secret=partner_secret,
        )

    @property
    def signs_body(self) -> bool:
        return self.method != GET_METHOD and bool(self.request_body)


@dataclass(frozen=True)
class CanonicalSignResult:
    hashed_payload: str
    request_data: str
    hmac_digest: str


class CanonicalRequestSigner:
    """
    Signs canonical request strings with HMAC-SHA256.

    The signer holds no state; a single instance may be shared between
    threads.
    """

    def hash_payload(self, request: CanonicalSignRequest) -> str:
        """Base64 SHA-256 of the body, or '' when the body is not signed."""
        if not request.signs_body:
            return ''
        return base64_encode(sha256(request.request_body))

    def canonical_string(self, request: CanonicalSignRequest, hashed_payload: str) -> str:
        fields = [
            request.method,
            request.content_type,
            request.header_date,
            request.request_url,
            hashed_payload,
        ]
        return CANONICAL_SEPARATOR.join(fields) + CANONICAL_SEPARATOR

    def sign(self, request: CanonicalSignRequest) -> CanonicalSignResult:
        """
        Sign a request.

        Never raises for string inputs; an empty secret or body still
        yields a well-defined digest.
        """
        hashed_payload = self.hash_payload(request)
        request_data = self.canonical_string(request, hashed_payload)
        hmac_digest = base64_encode(hmac_sha256(request.partner_secret, request_data))

        logger.debug(
            "Signed canonical request %s %s (body hashed: %s)",
            request.method, request.request_url, bool(hashed_payload)
        )
        return CanonicalSignResult(
            hashed_payload=hashed_payload,
            request_data=request_data,
            hmac_digest=hmac_digest,
        )


def sign_canonical_request(method: str, content_type: str, header_date: str,
                           request_url: str, request_body: str,
                           partner_secret: str) -> CanonicalSignResult:
    """Sign request metadata in one call."""
    request = CanonicalSignRequest(
        method=method,
        content_type=content_type,
        header_date=header_date,
        request_url=request_url,
        request_body=request_body,
        partner_secret=partner_secret,
    )
    return CanonicalRequestSigner().sign(request)


def render_curl(request: CanonicalSignRequest, result: CanonicalSignResult,
                partner_id: Optional[str] = None, host: Optional[str] = None) -> str:
    """
    Render a curl command carrying the signature headers.

    Placeholders are used for the host and partner id when they are not
    given. The body is omitted for GET requests.
    """
    partner_id = partner_id or PLACEHOLDER_PARTNER_ID
    host = host or PLACEHOLDER_HOST
    body = '' if request.method == GET_METHOD else request.request_body

    lines = [
        f"curl -X '{request.method}' '{host}{request.request_url}' \\",
        f"  -H '{HEADER_AUTHORIZATION}: {partner_id}:{result.hmac_digest}' \\",
        f"  -H '{HEADER_CONTENT_TYPE}: {request.content_type}' \\",
        f"  -H '{HEADER_DATE}: {request.header_date}' \\",
        f"  -d '{body}'",
    ]
    return "\n".join(lines)
