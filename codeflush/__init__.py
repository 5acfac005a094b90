"""
codeflush - HTTP client with immutable requests and reusable templates.

Usage:
    >>> from codeflush import Endpoint, HTTPS, RequestsHTTPClient, JSONParser
    >>>
    >>> api = Endpoint.for_host(HTTPS, "codeflush.dev")
    >>> search = api.get().header("Accept", "application/json").template()
    >>>
    >>> with RequestsHTTPClient() as client:
    ...     response = search.enrich().parameter("q", "python").execute(client, JSONParser())
"""
from .core import (
    ClientConfig,
    HTTPClientException,
    ConfigurationError,
    ResponseParseError,
    RequestMethod,
    Request,
    RequestBody,
    RequestBuilder,
    RequestBuilderWithBody,
    RequestTemplate,
    RequestTemplateWithBody,
    Endpoint,
    HTTP,
    HTTPS,
    Response,
    ResponseParser,
    BytesParser,
    DiscardingParser,
    TextParser,
    JSONParser,
    HTTPClient,
    AsyncHTTPClient,
    RequestsHTTPClient,
    AIOHTTPClient,
)
from .core.logging import setup_logging

__version__ = '1.0.0'

__all__ = [
    'Endpoint',
    'HTTP',
    'HTTPS',
    'RequestMethod',
    'Request',
    'RequestBody',
    'RequestBuilder',
    'RequestBuilderWithBody',
    'RequestTemplate',
    'RequestTemplateWithBody',
    'Response',
    'ResponseParser',
    'BytesParser',
    'DiscardingParser',
    'TextParser',
    'JSONParser',
    'HTTPClient',
    'AsyncHTTPClient',
    'RequestsHTTPClient',
    'AIOHTTPClient',
    'ClientConfig',
    'HTTPClientException',
    'ConfigurationError',
    'ResponseParseError',
    'setup_logging',
]
