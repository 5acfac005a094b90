"""Tests for responses and response parsers."""
import pytest

from codeflush import (
    BytesParser,
    DiscardingParser,
    JSONParser,
    Response,
    ResponseParseError,
    ResponseParser,
    TextParser,
)


class TestResponse:
    """Test suite for Response."""

    @pytest.mark.parametrize("status,expected", [
        (200, True),
        (204, True),
        (301, False),
        (404, False),
        (500, False),
    ])
    def test_is_success(self, status, expected):
        """Test 2xx detection."""
        assert Response(status_code=status).is_success is expected

    def test_header_case_insensitive(self):
        """Test header lookup ignores case."""
        response = Response(200, {"Content-Type": "application/json"})

        assert response.header("content-type") == "application/json"
        assert response.header("X-Missing") is None

    def test_immutable(self):
        """Test response fields cannot be reassigned."""
        response = Response(200)

        with pytest.raises(AttributeError):
            response.status_code = 500


class TestParsers:
    """Test suite for the response parsers."""

    def test_bytes_parser(self):
        """Test bytes are returned unchanged."""
        assert BytesParser().parse(b"\x00\xff", None) == b"\x00\xff"

    def test_discarding_parser(self):
        """Test the body is dropped."""
        assert DiscardingParser().parse(b"ignored", "utf-8") is None

    def test_text_parser_uses_encoding(self):
        """Test the announced encoding is used."""
        assert TextParser().parse(b"h\xe9llo", "latin-1") == "héllo"

    def test_text_parser_default_encoding(self):
        """Test the default encoding applies when none is announced."""
        assert TextParser().parse("héllo".encode("utf-8"), None) == "héllo"

    def test_json_parser(self):
        """Test JSON decoding."""
        assert JSONParser().parse(b'{"ok": true, "items": [1]}', "utf-8") == {"ok": True, "items": [1]}

    def test_json_parser_empty_body(self):
        """Test empty body parses to None."""
        assert JSONParser().parse(b"", None) is None

    def test_json_parser_invalid(self):
        """Test invalid JSON raises ResponseParseError with the content."""
        with pytest.raises(ResponseParseError) as exc_info:
            JSONParser().parse(b"<html>", None)

        assert exc_info.value.content == b"<html>"

    def test_parsers_satisfy_protocol(self):
        """Test all parsers implement ResponseParser."""
        for parser in (BytesParser(), DiscardingParser(), TextParser(), JSONParser()):
            assert isinstance(parser, ResponseParser)
