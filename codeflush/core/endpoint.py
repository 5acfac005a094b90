"""
Endpoints: the base URL requests are built against.

Example:
    >>> api = Endpoint.for_host(HTTPS, 'codeflush.dev')
    >>> api.get().parameter('q', 'python').build().request_url
    'https://codeflush.dev?q=python'
"""
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from .config import ClientConfig
from .exceptions import ConfigurationError, require
from .method import RequestMethod
from .request import RequestBuilder, RequestBuilderWithBody

HTTP = 'http'
HTTPS = 'https'


class Endpoint:
    """Immutable base URL with shortcuts for creating request builders."""

    def __init__(self, url: str, config: Optional[ClientConfig] = None):
        """
        Initialize endpoint.

        Args:
            url: Absolute base URL, optionally with a query string
            config: Client configuration (uses defaults if not provided)

        Raises:
            ConfigurationError: If the URL has no scheme or host
        """
        require(url, "url")
        try:
            parts = urlsplit(url)
            parts.port  # raises ValueError for an invalid port
        except ValueError as e:
            raise ConfigurationError(f"Malformed endpoint URL: {url!r}") from e

        if not parts.scheme or not parts.hostname:
            raise ConfigurationError(f"Endpoint URL needs a scheme and a host: {url!r}")

        self._url = url
        self._config = config or ClientConfig.default()

    @classmethod
    def for_host(cls, scheme: str, host: str, port: Optional[int] = None,
                 path: str = '', config: Optional[ClientConfig] = None) -> 'Endpoint':
        """Create an endpoint from its parts."""
        require(scheme, "scheme")
        require(host, "host")
        if ':' in host and not host.startswith('['):
            host = f'[{host}]'
        netloc = host if port is None else f'{host}:{port}'
        if path and not path.startswith('/'):
            path = '/' + path
        return cls(urlunsplit((scheme, netloc, path, '', '')), config)

    @classmethod
    def for_url(cls, url: str, config: Optional[ClientConfig] = None) -> 'Endpoint':
        """Create an endpoint from an absolute URL."""
        return cls(url, config)

    @property
    def url(self) -> str:
        """Base URL as given."""
        return self._url

    def get_url(self) -> str:
        return self._url

    @property
    def config(self) -> ClientConfig:
        return self._config

    def resolve(self, path: str) -> 'Endpoint':
        """Return an endpoint for a sub-path, keeping the query string."""
        parts = urlsplit(self._url)
        joined = parts.path.rstrip('/') + '/' + path.lstrip('/')
        return Endpoint(
            urlunsplit((parts.scheme, parts.netloc, joined, parts.query, parts.fragment)),
            self._config
        )

    def request(self, method: RequestMethod) -> RequestBuilder:
        """Create a builder; body-capable when the method allows a body."""
        builder_cls = RequestBuilderWithBody if require(method, "method").allows_body else RequestBuilder
        return builder_cls(self, method, self._config.charset)

    def get(self) -> RequestBuilder:
        return self.request(RequestMethod.GET)

    def head(self) -> RequestBuilder:
        return self.request(RequestMethod.HEAD)

    def delete(self) -> RequestBuilder:
        return self.request(RequestMethod.DELETE)

    def options(self) -> RequestBuilder:
        return self.request(RequestMethod.OPTIONS)

    def trace(self) -> RequestBuilder:
        return self.request(RequestMethod.TRACE)

    def post(self) -> RequestBuilderWithBody:
        return self.request(RequestMethod.POST)

    def put(self) -> RequestBuilderWithBody:
        return self.request(RequestMethod.PUT)

    def patch(self) -> RequestBuilderWithBody:
        return self.request(RequestMethod.PATCH)

    def __eq__(self, other) -> bool:
        return isinstance(other, Endpoint) and other._url == self._url

    def __hash__(self) -> int:
        return hash(self._url)

    def __repr__(self) -> str:
        return f"Endpoint({self._url!r})"
