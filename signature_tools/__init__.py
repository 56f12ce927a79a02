"""
Signature Tools

Computes the two request-authentication signatures used by partner API
clients: the canonical HMAC request signature and the proof-of-possession
(POP) signature binding an access token to a timestamp.

Example usage:
    from signature_tools import sign_canonical_request, sign_proof_of_possession

    result = sign_canonical_request(
        "POST", "application/json", "Wed, 01 Jan 2020 00:00:00 GMT",
        "/foo", '{"a":1}', "s3cr3t"
    )
    print(result.hmac_digest)

    pop = sign_proof_of_possession("tok123", "Thu, 01 Jan 1970 00:00:10 GMT", "k")
    print(pop.pop_signature)
"""

from .auth import HmacAuth
from .hmac_signer import (
    CanonicalRequestSigner,
    CanonicalSignRequest,
    CanonicalSignResult,
    render_curl,
    sign_canonical_request,
)
from .pop_signer import (
    PopPayload,
    PopSignRequest,
    PopSignResult,
    ProofOfPossessionSigner,
    sign_proof_of_possession,
)
from .exceptions import (
    SignatureToolsError,
    InputTooLargeError,
    InvalidTimestampError,
    UnsignableBodyError,
    ConfigurationError,
)
from .constants import (
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_DATE,
    DEFAULT_CONFIG,
    MAX_INPUT_SIZE,
)

__version__ = "1.0.0"
__all__ = [
    "HmacAuth",
    "CanonicalRequestSigner",
    "CanonicalSignRequest",
    "CanonicalSignResult",
    "render_curl",
    "sign_canonical_request",
    "PopPayload",
    "PopSignRequest",
    "PopSignResult",
    "ProofOfPossessionSigner",
    "sign_proof_of_possession",
    "SignatureToolsError",
    "InputTooLargeError",
    "InvalidTimestampError",
    "UnsignableBodyError",
    "ConfigurationError",
    "HEADER_AUTHORIZATION",
    "HEADER_CONTENT_TYPE",
    "HEADER_DATE",
    "DEFAULT_CONFIG",
    "MAX_INPUT_SIZE",
]
