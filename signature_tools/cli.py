"""
signature-tools — compute partner HMAC and POP signatures from the shell.

Examples:
  # Canonical HMAC signature of the default POST request
  signature-tools hmac --secret s3cr3t

  # GET request with an explicit date header
  signature-tools hmac --method GET --url /orders?id=7 \
      --date "Wed, 01 Jan 2020 00:00:00 GMT" --secret s3cr3t --partner-id acme

  # POP signature for an access token, signed now
  signature-tools pop --access-token tok123 --client-secret k
"""

import argparse
import logging
import sys
from typing import List, Optional

from .constants import DEFAULT_CONFIG, GET_METHOD
from .dates import default_header_date
from .exceptions import SignatureToolsError
from .hmac_signer import CanonicalRequestSigner, CanonicalSignRequest, render_curl
from .pop_signer import PopSignRequest, ProofOfPossessionSigner

logger = logging.getLogger(__name__)

METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signature-tools",
        description="Compute partner HMAC and proof-of-possession signatures.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")
    sub.required = True

    h = sub.add_parser("hmac", help="Canonical HMAC request signature")
    h.add_argument("--method", default=DEFAULT_CONFIG['method'], choices=METHODS)
    h.add_argument("--content-type", default=DEFAULT_CONFIG['content_type'])
    h.add_argument("--date", default=None, help="Date header (default: now, RFC 1123)")
    h.add_argument("--url", default=DEFAULT_CONFIG['request_url'], help="Relative request URL")
    h.add_argument("--body", default=DEFAULT_CONFIG['request_body'])
    h.add_argument("--secret", default="", help="Partner secret")
    h.add_argument("--partner-id", default=None, help="Partner id for the curl command")
    h.add_argument("--host", default=None, help="Host for the curl command")

    p = sub.add_parser("pop", help="Proof-of-possession signature")
    p.add_argument("--access-token", default="")
    p.add_argument("--client-secret", default="")
    p.add_argument("--date", default=None, help="Signing date (default: now)")

    return parser


def _run_hmac(args) -> int:
    if not args.secret:
        print("Please enter secret.", file=sys.stderr)
        return 1

    request = CanonicalSignRequest(
        method=args.method,
        content_type=args.content_type,
        header_date=args.date if args.date is not None else default_header_date(),
        request_url=args.url,
        request_body=args.body,
        partner_secret=args.secret,
    )
    result = CanonicalRequestSigner().sign(request)

    hashed = "N/A" if request.method == GET_METHOD else result.hashed_payload
    print(f"HMAC: {result.hmac_digest}")
    print()
    print(f"Hashed payload: {hashed}")
    print()
    print("Request data:")
    print(result.request_data, end="")
    print()
    print("CURL")
    print(render_curl(request, result, partner_id=args.partner_id, host=args.host))
    return 0


def _run_pop(args) -> int:
    errors = []
    if not args.client_secret:
        errors.append("Please enter Secret.")
    if not args.access_token:
        errors.append("Please enter Access Token.")
    if errors:
        for error in errors:
            print(error, file=sys.stderr)
        return 1

    request = PopSignRequest(
        access_token=args.access_token,
        date_utc=args.date if args.date is not None else default_header_date(),
        client_secret=args.client_secret,
    )
    result = ProofOfPossessionSigner().sign(request)

    print("Signature:")
    print(result.pop_signature)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "hmac":
            return _run_hmac(args)
        return _run_pop(args)
    except SignatureToolsError as e:
        logger.debug("Signing failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
