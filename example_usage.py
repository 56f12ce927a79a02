#!/usr/bin/env python3
"""
Basic usage examples for the signature tools library.

This script shows how to compute canonical HMAC request signatures and
proof-of-possession signatures, and how to attach the HMAC signature to
requests made with the requests library.
"""

import sys

import requests

from signature_tools import (
    HmacAuth,
    PopPayload,
    SignatureToolsError,
    render_curl,
    sign_proof_of_possession,
)
from signature_tools.hmac_signer import CanonicalRequestSigner, CanonicalSignRequest


def main():
    """Run basic usage examples."""

    partner_id = "partner1"
    partner_secret = "partner-demo-secret"
    header_date = "Wed, 01 Jan 2020 00:00:00 GMT"

    print("=== Signature Tools Basic Usage Examples ===\n")

    try:
        # Example 1: Canonical HMAC signature
        print("1. Signing a POST request...")
        request = CanonicalSignRequest(
            method="POST",
            content_type="application/json",
            header_date=header_date,
            request_url="/relative-path",
            request_body='{"foo":"bar","baz":"lol","kek":168}',
            partner_secret=partner_secret,
        )
        result = CanonicalRequestSigner().sign(request)
        print(f"   HMAC: {result.hmac_digest}")
        print(f"   Hashed payload: {result.hashed_payload}")
        print(f"   Request data: {result.request_data!r}")
        print()

        # Example 2: curl command for the signed request
        print("2. Equivalent curl command...")
        print(render_curl(request, result, partner_id=partner_id))
        print()

        # Example 3: Signing through requests (nothing is sent)
        print("3. Signing a prepared request...")
        prepared = requests.Request(
            "POST",
            "https://api.example.com/relative-path",
            json={"foo": "bar"},
            auth=HmacAuth(partner_id, partner_secret),
        ).prepare()
        print(f"   Date: {prepared.headers['Date']}")
        print(f"   Authorization: {prepared.headers['Authorization']}")
        print()

        # Example 4: Proof-of-possession signature
        print("4. Signing an access token...")
        pop = sign_proof_of_possession("tok123", "Thu, 01 Jan 1970 00:00:10 GMT", "k")
        print(f"   Message: {pop.message}")
        print(f"   Signature: {pop.pop_signature}")
        print(f"   Decoded payload: {PopPayload.from_signature(pop.pop_signature)}")
        print()

        # Example 5: Error handling
        print("5. Demonstrating error handling...")
        try:
            sign_proof_of_possession("tok123", "not-a-date", "k")
        except SignatureToolsError as e:
            print(f"   ✓ Rejected invalid date: {e}")
        print()

        print("=== All Examples Completed Successfully! ===")

    except SignatureToolsError as e:
        print(f"Signature Tools Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
