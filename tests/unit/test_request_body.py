"""Tests for request bodies."""
import pytest
from dataclasses import FrozenInstanceError

from codeflush import RequestBody


class TestRequestBody:
    """Test suite for RequestBody."""

    def test_for_text(self):
        """Test text body encoding and content type."""
        body = RequestBody.for_text("héllo")

        assert body.content == "héllo".encode("utf-8")
        assert body.content_type == "text/plain; charset=utf-8"
        assert body.size == 6

    def test_for_text_charset(self):
        """Test text body with another charset."""
        body = RequestBody.for_text("héllo", charset="latin-1", content_type="text/csv")

        assert body.content == b"h\xe9llo"
        assert body.content_type == "text/csv; charset=latin-1"

    def test_for_bytes(self):
        """Test raw bytes body."""
        body = RequestBody.for_bytes(bytearray(b"\x00\x01"))

        assert body.content == b"\x00\x01"
        assert body.content_type == "application/octet-stream"

    def test_for_json(self):
        """Test JSON body."""
        body = RequestBody.for_json({"name": "codeflush", "tags": [1, 2]})

        assert body.content == b'{"name": "codeflush", "tags": [1, 2]}'
        assert body.content_type == "application/json; charset=utf-8"

    def test_for_form(self):
        """Test form body uses form encoding."""
        body = RequestBody.for_form({"user name": "jörg", "remember": None})

        assert body.content == b"user+name=j%C3%B6rg&remember"
        assert body.content_type == "application/x-www-form-urlencoded"

    def test_identity_equality(self):
        """Test equal content does not make bodies equal."""
        body1 = RequestBody.for_text("")
        body2 = RequestBody.for_text("")

        assert body1 != body2
        assert body1 == body1

    def test_immutable(self):
        """Test body fields cannot be reassigned."""
        body = RequestBody.for_text("x")

        with pytest.raises(FrozenInstanceError):
            body.content = b"y"
