"""Responses and response body parsers."""
from .response import Response
from .parsers import ResponseParser, BytesParser, DiscardingParser, TextParser, JSONParser

__all__ = [
    'Response',
    'ResponseParser',
    'BytesParser',
    'DiscardingParser',
    'TextParser',
    'JSONParser',
]
