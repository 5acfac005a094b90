"""
Fluent request builders.

A builder accumulates configuration and turns it into an immutable
Request with build(), or into a reusable template with template().
"""
from typing import Mapping, Optional, TypeVar, TYPE_CHECKING

from ..exceptions import require
from ..logging import get_logger
from ..method import RequestMethod
from .body import RequestBody
from .encoding import platform_default_charset, resolve_charset
from .request import Request
from .state import RequestState

if TYPE_CHECKING:
    from ..endpoint import Endpoint
    from ..response import Response, ResponseParser
    from ..transport import HTTPClient
    from .template import RequestTemplate, RequestTemplateWithBody

logger = get_logger(__name__)

B = TypeVar('B', bound='RequestBuilder')


class RequestBuilder:
    """
    Mutable builder for requests without a body.

    Every configuration method returns the builder itself for chaining.

    Example:
        >>> request = (RequestBuilder.create(endpoint, RequestMethod.GET)
        ...            .parameter('page', '2')
        ...            .parameter('verbose')
        ...            .header('Accept', 'application/json')
        ...            .build())
    """

    def __init__(self, endpoint: 'Endpoint', method: RequestMethod,
                 charset: Optional[str] = None):
        """
        Initialize builder.

        Args:
            endpoint: Provider of the base URL
            method: HTTP method
            charset: Percent-encoding charset (platform default if omitted)
        """
        require(endpoint, "endpoint")
        require(method, "method")
        if charset is None:
            charset = platform_default_charset()
            logger.debug("No charset given for %s %s, using platform default %s",
                         method.value, endpoint.url, charset)
        self._state = RequestState(endpoint, method, resolve_charset(charset))

    @classmethod
    def create(cls, endpoint: 'Endpoint', method: RequestMethod,
               charset: Optional[str] = None) -> 'RequestBuilder':
        """Create a builder for the given endpoint and method."""
        return cls(endpoint, method, charset)

    @property
    def endpoint(self) -> 'Endpoint':
        return self._state.endpoint

    @property
    def method(self) -> RequestMethod:
        return self._state.method

    def charset(self: B, charset: str) -> B:
        """Set the percent-encoding charset."""
        self._state.charset = resolve_charset(charset)
        return self

    def parameters(self: B, parameters: Mapping[str, Optional[str]]) -> B:
        """Merge query parameters; incoming values replace existing ones."""
        for key, value in require(parameters, "parameters").items():
            self.parameter(key, value)
        return self

    def parameter(self: B, key: str, value: Optional[str] = None) -> B:
        """Set a query parameter; without a value it renders as a bare key."""
        self._state.parameters[require(key, "parameter key")] = value
        return self

    def headers(self: B, headers: Mapping[str, str]) -> B:
        """Merge headers; incoming values replace existing ones."""
        for key, value in require(headers, "headers").items():
            self.header(key, value)
        return self

    def header(self: B, key: str, value: str) -> B:
        """Set a header."""
        self._state.headers[require(key, "header name")] = require(value, "header value")
        return self

    def template(self) -> 'RequestTemplate':
        """Snapshot the current configuration as a reusable template."""
        from .template import RequestTemplate
        return RequestTemplate(self._state)

    def build(self) -> Request:
        """Build an immutable request from the current configuration."""
        state = self._state
        return Request(
            state.endpoint,
            state.method,
            state.charset,
            state.parameters,
            state.headers,
            state.body
        )

    def execute(self, client: 'HTTPClient', parser: 'ResponseParser') -> 'Response':
        """Build the request and send it with the given transport."""
        return self.build().execute(client, parser)


class RequestBuilderWithBody(RequestBuilder):
    """Builder for requests that may carry a body."""

    def body(self, body: Optional[RequestBody]) -> 'RequestBuilderWithBody':
        """Set the request body, replacing any previous one."""
        self._state.body = body
        return self

    def template(self) -> 'RequestTemplateWithBody':
        """Snapshot the current configuration, body included."""
        from .template import RequestTemplateWithBody
        return RequestTemplateWithBody(self._state)
