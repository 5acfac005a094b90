"""
Immutable HTTP request.

A Request is produced by a builder and never changes afterwards. The
target URL is derived from the endpoint and the query parameters on first
access and cached for the lifetime of the request.
"""
import threading
from types import MappingProxyType
from typing import Mapping, Optional, TYPE_CHECKING
from urllib.parse import urlsplit, urlunsplit

from ..exceptions import ConfigurationError, require
from ..logging import get_logger
from ..method import RequestMethod
from .body import RequestBody
from .encoding import resolve_charset
from .query import merge_query

if TYPE_CHECKING:
    from ..endpoint import Endpoint
    from ..response import Response, ResponseParser
    from ..transport import HTTPClient, AsyncHTTPClient

logger = get_logger(__name__)


class Request:
    """
    Immutable, thread-safe HTTP request.

    Parameter and header mappings are private copies exposed as read-only
    views. The request URL is computed at most once; concurrent first
    access is serialized by a per-request lock.

    Example:
        >>> request = Endpoint.for_host(HTTPS, 'codeflush.dev').get().parameter('q', 'a b').build()
        >>> request.request_url
        'https://codeflush.dev?q=a+b'
    """

    def __init__(
        self,
        endpoint: 'Endpoint',
        method: RequestMethod,
        charset: str,
        url_parameters: Mapping[str, Optional[str]],
        headers: Mapping[str, str],
        body: Optional[RequestBody] = None
    ):
        """
        Initialize request.

        Args:
            endpoint: Provider of the base URL
            method: HTTP method
            charset: Charset used to percent-encode parameters
            url_parameters: Ordered query parameters; None values render as bare keys
            headers: Ordered request headers
            body: Optional request body

        Raises:
            ConfigurationError: If a required argument is None or the charset is unknown
        """
        self._endpoint = require(endpoint, "endpoint")
        self._method = require(method, "method")
        self._charset = resolve_charset(charset)
        self._url_parameters = dict(require(url_parameters, "url_parameters"))
        self._headers = dict(require(headers, "headers"))
        self._body = body
        self._lock = threading.Lock()
        self._request_url: Optional[str] = None

    @property
    def endpoint(self) -> 'Endpoint':
        return self._endpoint

    @property
    def method(self) -> RequestMethod:
        return self._method

    @property
    def charset(self) -> str:
        return self._charset

    @property
    def url_parameters(self) -> Mapping[str, Optional[str]]:
        """Read-only view of the query parameters."""
        return MappingProxyType(self._url_parameters)

    @property
    def headers(self) -> Mapping[str, str]:
        """Read-only view of the headers."""
        return MappingProxyType(self._headers)

    @property
    def body(self) -> Optional[RequestBody]:
        return self._body

    @property
    def request_url(self) -> str:
        """Target URL, computed on first access and cached."""
        if self._request_url is None:
            with self._lock:
                if self._request_url is None:
                    self._request_url = self._build_request_url()
        return self._request_url

    def get_request_url(self) -> str:
        """Return the target URL (same as request_url)."""
        return self.request_url

    def execute(self, client: 'HTTPClient', parser: 'ResponseParser') -> 'Response':
        """Send this request with the given transport."""
        return client.execute(self, parser)

    async def execute_async(self, client: 'AsyncHTTPClient', parser: 'ResponseParser') -> 'Response':
        """Send this request with an asynchronous transport."""
        return await client.execute(self, parser)

    def _build_request_url(self) -> str:
        url = self._endpoint.url

        if not self._url_parameters:
            return url

        try:
            parts = urlsplit(url)
            parts.port  # raises ValueError for an invalid port
        except ValueError as e:
            raise ConfigurationError(f"Malformed endpoint URL: {url!r}") from e

        if not parts.scheme or not parts.hostname:
            raise ConfigurationError(f"Cannot rebuild URL without scheme and host: {url!r}")

        # scheme, host, port and path only
        netloc = parts.netloc.rpartition('@')[2]
        query = merge_query(parts.query, self._url_parameters, self._charset)
        request_url = urlunsplit((parts.scheme, netloc, parts.path, query, ''))

        logger.debug("Computed request URL %s", request_url)
        return request_url

    def __repr__(self) -> str:
        return f"Request(method={self._method.value}, endpoint={self._endpoint.url!r})"
