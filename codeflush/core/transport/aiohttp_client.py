"""
Asynchronous transport backed by aiohttp.

The request URL is already percent-encoded, so it is handed to aiohttp
as an encoded yarl.URL to keep the query string byte-for-byte.
"""
from typing import Optional

import aiohttp
from yarl import URL

from ..config import ClientConfig
from ..logging import get_logger
from ..request import Request
from ..response import Response, ResponseParser
from .protocols import prepare_headers
from .session_factory import SessionFactory


class AIOHTTPClient:
    """
    AsyncHTTPClient implementation using an aiohttp.ClientSession.

    Example:
        >>> async with AIOHTTPClient() as client:
        ...     response = await request.execute_async(client, TextParser())
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        """
        Initialize client.

        Args:
            config: Client configuration (uses defaults if not provided)
        """
        self._config = config or ClientConfig.default()
        self._session: Optional[aiohttp.ClientSession] = None
        self._logger = get_logger('codeflush.transport.aiohttp')

    async def _get_session(self) -> aiohttp.ClientSession:
        """Gets or creates the session."""
        if self._session is None or self._session.closed:
            self._session = await SessionFactory.create_async_session(self._config)
        return self._session

    async def execute(self, request: Request, parser: ResponseParser) -> Response:
        """Send the request and parse the response body."""
        session = await self._get_session()
        url = request.request_url
        method = request.method.value
        body = request.body

        self._logger.debug("Sending %s %s", method, url)
        async with session.request(
            method,
            URL(url, encoded=True),
            headers=prepare_headers(request),
            data=body.content if body is not None else None
        ) as response:
            content = await response.read()
            self._logger.debug("%s %s -> %d", method, url, response.status)
            return Response(
                status_code=response.status,
                headers=dict(response.headers),
                body=parser.parse(content, response.charset),
                request=request
            )

    async def close(self):
        """Closes the session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> 'AIOHTTPClient':
        await self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
