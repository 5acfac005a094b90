"""
Response parsers.

A parser turns the raw response body into the value stored in
Response.body. Transports call parse() with the body bytes and the
encoding announced by the server, if any.
"""
import json
from typing import Any, Optional, Protocol, TypeVar, runtime_checkable

from ..exceptions import ResponseParseError

T = TypeVar('T', covariant=True)


@runtime_checkable
class ResponseParser(Protocol[T]):
    """Protocol for response body parsers."""

    def parse(self, content: bytes, encoding: Optional[str]) -> T:
        """
        Parse a response body.

        Args:
            content: Raw body bytes
            encoding: Charset from the Content-Type header (None if absent)

        Returns:
            Parsed body
        """
        ...


class BytesParser:
    """Returns the body unchanged."""

    def parse(self, content: bytes, encoding: Optional[str]) -> bytes:
        return content


class DiscardingParser:
    """Ignores the body."""

    def parse(self, content: bytes, encoding: Optional[str]) -> None:
        return None


class TextParser:
    """Decodes the body as text."""

    def __init__(self, default_encoding: str = 'utf-8', errors: str = 'replace'):
        self.default_encoding = default_encoding
        self.errors = errors

    def parse(self, content: bytes, encoding: Optional[str]) -> str:
        return content.decode(encoding or self.default_encoding, self.errors)


class JSONParser:
    """Decodes the body as JSON."""

    def __init__(self, default_encoding: str = 'utf-8'):
        self.default_encoding = default_encoding

    def parse(self, content: bytes, encoding: Optional[str]) -> Any:
        if not content:
            return None
        try:
            return json.loads(content.decode(encoding or self.default_encoding))
        except (UnicodeDecodeError, ValueError) as e:
            raise ResponseParseError(f"Invalid JSON response: {e}", content=content) from e
