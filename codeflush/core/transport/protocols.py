"""
Transport protocols.

Defines the interface requests are executed through. Implementations own
the connection handling; request construction never depends on them.
"""
from typing import Dict, Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from ..request import Request
    from ..response import Response, ResponseParser

T = TypeVar('T')


@runtime_checkable
class HTTPClient(Protocol):
    """Protocol for synchronous transports."""

    def execute(self, request: 'Request', parser: 'ResponseParser[T]') -> 'Response[T]':
        """
        Send a request and parse the response.

        Args:
            request: Request to send
            parser: Parser applied to the response body

        Returns:
            Parsed response

        Raises:
            OSError: (or a library subclass) on network failure
        """
        ...


@runtime_checkable
class AsyncHTTPClient(Protocol):
    """Protocol for asynchronous transports."""

    async def execute(self, request: 'Request', parser: 'ResponseParser[T]') -> 'Response[T]':
        """Send a request and parse the response asynchronously."""
        ...


def prepare_headers(request: 'Request') -> Dict[str, str]:
    """Request headers plus Content-Type from the body when not set explicitly."""
    headers = dict(request.headers)
    body = request.body
    if body is not None and not any(key.lower() == 'content-type' for key in headers):
        headers['Content-Type'] = body.content_type
    return headers
