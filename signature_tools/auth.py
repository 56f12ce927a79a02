"""
requests authentication adapter for canonical HMAC signatures.

Attach to a session or a single request and every outgoing request gets
an ``Authorization: <partner_id>:<hmac_digest>`` header:

    session = requests.Session()
    session.auth = HmacAuth("partner-1", "partner-secret")
"""

import logging

import requests
from requests.auth import AuthBase

from .constants import (
    DEFAULT_CONFIG,
    HEADER_AUTHORIZATION,
    HEADER_DATE,
)
from .dates import default_header_date
from .exceptions import ConfigurationError, InputTooLargeError
from .hmac_signer import CanonicalRequestSigner, CanonicalSignRequest

logger = logging.getLogger(__name__)


class HmacAuth(AuthBase):
    """
    Signs prepared requests with the partner secret.

    Only headers are modified; sending the request is left to requests.
    """

    def __init__(self, partner_id: str, partner_secret: str, **config):
        """
        Initialize the auth adapter.

        Args:
            partner_id: Partner identifier sent in the Authorization header
            partner_secret: HMAC secret key (must match server)
            **config: Configuration options (max_input_size)
        """
        self.partner_id = partner_id
        self.partner_secret = partner_secret

        self.config = {**DEFAULT_CONFIG, **config}
        self._validate_config()

        self.signer = CanonicalRequestSigner()

    def _validate_config(self):
        """Validate adapter configuration."""
        if not self.partner_id:
            raise ConfigurationError("partner_id cannot be empty")

        if not self.partner_secret:
            raise ConfigurationError("partner_secret cannot be empty")

        if self.config['max_input_size'] <= 0:
            raise ConfigurationError("max_input_size must be positive")

    def _check_input_size(self, data: str):
        """Check if the request body exceeds size limit."""
        size = len(data.encode('utf-8'))
        if size > self.config['max_input_size']:
            raise InputTooLargeError(size, self.config['max_input_size'])

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        if HEADER_DATE not in r.headers:
            r.headers[HEADER_DATE] = default_header_date()

        sign_request = CanonicalSignRequest.from_prepared_request(r, self.partner_secret)
        self._check_input_size(sign_request.request_body)

        result = self.signer.sign(sign_request)
        r.headers[HEADER_AUTHORIZATION] = f"{self.partner_id}:{result.hmac_digest}"

        logger.debug("Attached HMAC signature for partner %s to %s %s",
                     self.partner_id, r.method, r.path_url)
        return r

    def __eq__(self, other):
        return all([
            self.partner_id == getattr(other, 'partner_id', None),
            self.partner_secret == getattr(other, 'partner_secret', None),
        ])

    def __ne__(self, other):
        return not self == other
