"""
Tests for the signature-tools command line.
"""

from unittest.mock import patch

import pytest

from signature_tools.cli import main

HEADER_DATE = "Mon, 01 Jan 2020 00:00:00 GMT"
BODY_HASH = "AVq9f1zFei3ZS3WQ8ErYCEJzkF7jPsXOvq5iJ2qX+GI="
POST_DIGEST = "z2xQ3aoudKPO5yLv0ZS9hCZ5I9sE/1G36M0w7/Q8zbc="
POP_SIGNATURE = (
    "eyJ0aW1lX3NpbmNlX2Vwb2NoIjoxMCwic2lnIjoiNV9SY1FLQWg1dGRmODQxOEFEa1dKQm1JWTctVV9HOVJsSlFwaTlESnJ2ayJ9"
)


class TestHmacCommand:

    def test_post(self, capsys):
        code = main([
            "hmac", "--method", "POST", "--content-type", "application/json",
            "--date", HEADER_DATE, "--url", "/foo", "--body", '{"a":1}',
            "--secret", "s3cr3t",
        ])

        out = capsys.readouterr().out
        assert code == 0
        assert f"HMAC: {POST_DIGEST}" in out
        assert f"Hashed payload: {BODY_HASH}" in out
        assert f"POST\napplication/json\n{HEADER_DATE}\n/foo\n{BODY_HASH}\n" in out
        assert "curl -X 'POST' '<HOST>/foo'" in out

    def test_get_shows_na(self, capsys):
        code = main([
            "hmac", "--method", "GET", "--date", HEADER_DATE, "--secret", "s3cr3t",
            "--partner-id", "acme",
        ])

        out = capsys.readouterr().out
        assert code == 0
        assert "Hashed payload: N/A" in out
        assert "Authorization: acme:" in out

    def test_missing_secret(self, capsys):
        code = main(["hmac"])

        assert code == 1
        assert "Please enter secret." in capsys.readouterr().err

    @patch('signature_tools.cli.default_header_date')
    def test_default_date(self, mock_date, capsys):
        mock_date.return_value = HEADER_DATE

        main(["hmac", "--secret", "s3cr3t"])

        assert f"Date: {HEADER_DATE}" in capsys.readouterr().out

    def test_invalid_method(self):
        with pytest.raises(SystemExit):
            main(["hmac", "--method", "BREW", "--secret", "s"])


class TestPopCommand:

    def test_pop(self, capsys):
        code = main([
            "pop", "--access-token", "tok123", "--client-secret", "k",
            "--date", "Thu, 01 Jan 1970 00:00:10 GMT",
        ])

        out = capsys.readouterr().out
        assert code == 0
        assert out.splitlines() == ["Signature:", POP_SIGNATURE]

    def test_missing_inputs(self, capsys):
        code = main(["pop"])

        err = capsys.readouterr().err
        assert code == 1
        assert "Please enter Secret." in err
        assert "Please enter Access Token." in err

    def test_invalid_date(self, capsys):
        code = main([
            "pop", "--access-token", "tok123", "--client-secret", "k",
            "--date", "not-a-date",
        ])

        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])
