"""
Proof-of-possession (POP) signature.

The signature binds an access token to a timestamp:

    message   = str(timestamp) + access_token
    sig       = base64url(base64(HMAC-SHA256(client_secret, message)))
    signature = base64url(base64(json({"time_since_epoch": ts, "sig": sig})))
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional

from .constants import POP_FIELD_SIG, POP_FIELD_TIME
from .dates import default_header_date, parse_timestamp
from .primitives import (
    base64_decode,
    base64_encode,
    base64url_decode,
    base64url_encode,
    hmac_sha256,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PopSignRequest:
    access_token: str
    date_utc: str
    client_secret: str


@dataclass(frozen=True)
class PopPayload:
    time_since_epoch: int
    sig: str

    def fields(self):
        """Payload fields in serialization order."""
        return [
            (POP_FIELD_TIME, self.time_since_epoch),
            (POP_FIELD_SIG, self.sig),
        ]

    def to_json(self) -> str:
        """Compact JSON with time_since_epoch always before sig."""
        return json.dumps(dict(self.fields()), separators=(',', ':'))

    @classmethod
    def from_json(cls, data: str) -> 'PopPayload':
        decoded = json.loads(data)
        try:
            return cls(
                time_since_epoch=decoded[POP_FIELD_TIME],
                sig=decoded[POP_FIELD_SIG],
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Not a POP payload: {data!r}") from e

    @classmethod
    def from_signature(cls, pop_signature: str) -> 'PopPayload':
        """
        Recover the payload carried by a POP signature.

        Only reverses the encoding; the signature itself is not checked.

        Raises:
            ValueError: If pop_signature does not decode to a POP payload
        """
        raw = base64_decode(base64url_decode(pop_signature))
        return cls.from_json(raw.decode('utf-8'))


@dataclass(frozen=True)
class PopSignResult:
    message: str
    payload: PopPayload
    pop_signature: str


class ProofOfPossessionSigner:
    """Stateless POP signer."""

    def sign(self, request: PopSignRequest) -> PopSignResult:
        """
        Sign an access token at the instant given by request.date_utc.

        Raises:
            InvalidTimestampError: If date_utc cannot be parsed
        """
        timestamp = parse_timestamp(request.date_utc)
        message = f"{timestamp}{request.access_token}"

        signature = base64_encode(hmac_sha256(request.client_secret, message))
        payload = PopPayload(
            time_since_epoch=timestamp,
            sig=base64url_encode(signature),
        )
        pop_signature = base64url_encode(base64_encode(payload.to_json()))

        logger.debug("Signed POP token for timestamp %d", timestamp)
        return PopSignResult(
            message=message,
            payload=payload,
            pop_signature=pop_signature,
        )


def sign_proof_of_possession(access_token: str, date_utc: Optional[str],
                             client_secret: str) -> PopSignResult:
    """Sign an access token in one call. date_utc defaults to now."""
    request = PopSignRequest(
        access_token=access_token,
        date_utc=default_header_date() if date_utc is None else date_utc,
        client_secret=client_secret,
    )
    return ProofOfPossessionSigner().sign(request)
