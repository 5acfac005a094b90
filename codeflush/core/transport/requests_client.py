"""Synchronous transport backed by requests."""
from typing import Optional

import requests

from ..config import ClientConfig
from ..logging import get_logger
from ..request import Request
from ..response import Response, ResponseParser
from .protocols import prepare_headers
from .session_factory import SessionFactory


class RequestsHTTPClient:
    """
    HTTPClient implementation using a requests.Session.

    Network failures propagate as requests.RequestException.

    Example:
        >>> with RequestsHTTPClient() as client:
        ...     response = endpoint.get().execute(client, JSONParser())
    """

    def __init__(self, config: Optional[ClientConfig] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize client.

        Args:
            config: Client configuration (uses defaults if not provided)
            session: Existing session to send with (created if not provided)
        """
        self._config = config or ClientConfig.default()
        self._session = session or SessionFactory.create_sync_session(self._config)
        self._logger = get_logger('codeflush.transport.requests')

    @property
    def session(self) -> requests.Session:
        return self._session

    def execute(self, request: Request, parser: ResponseParser) -> Response:
        """Send the request and parse the response body."""
        url = request.request_url
        method = request.method.value
        body = request.body

        self._logger.debug("Sending %s %s", method, url)
        response = self._session.request(
            method,
            url,
            headers=prepare_headers(request),
            data=body.content if body is not None else None
        )
        self._logger.debug("%s %s -> %d", method, url, response.status_code)

        return Response(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=parser.parse(response.content, response.encoding),
            request=request
        )

    def close(self):
        """Closes the underlying session."""
        self._session.close()

    def __enter__(self) -> 'RequestsHTTPClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
