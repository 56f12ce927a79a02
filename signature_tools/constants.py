"""
Constants for the signature tools library.
Header names and form defaults match the partner HMAC calculator.
"""

# HTTP Headers used by the canonical request signature
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_DATE = "Date"

# Canonical signing
GET_METHOD = "GET"
CANONICAL_SEPARATOR = "\n"

# POP payload field names, in serialization order
POP_FIELD_TIME = "time_since_epoch"
POP_FIELD_SIG = "sig"

# Placeholders used when rendering curl commands
PLACEHOLDER_HOST = "<HOST>"
PLACEHOLDER_PARTNER_ID = "<PARTNER_ID>"

MAX_INPUT_SIZE = 32 * 1024 * 1024  # 32MB

# Default configuration values (pre-filled calculator form)
DEFAULT_CONFIG = {
    'max_input_size': MAX_INPUT_SIZE,
    'method': 'POST',
    'content_type': 'application/json',
    'request_url': '/relative-path',
    'request_body': '{"foo":"bar","baz":"lol","kek":168}',
}
