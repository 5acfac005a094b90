"""Core building blocks: endpoints, requests, responses and transports."""
from .config import ClientConfig
from .exceptions import HTTPClientException, ConfigurationError, ResponseParseError
from .method import RequestMethod
from .request import (
    Request,
    RequestBody,
    RequestBuilder,
    RequestBuilderWithBody,
    RequestTemplate,
    RequestTemplateWithBody,
)
from .endpoint import Endpoint, HTTP, HTTPS
from .response import Response, ResponseParser, BytesParser, DiscardingParser, TextParser, JSONParser
from .transport import HTTPClient, AsyncHTTPClient, RequestsHTTPClient, AIOHTTPClient

__all__ = [
    'ClientConfig',
    'HTTPClientException',
    'ConfigurationError',
    'ResponseParseError',
    'RequestMethod',
    'Request',
    'RequestBody',
    'RequestBuilder',
    'RequestBuilderWithBody',
    'RequestTemplate',
    'RequestTemplateWithBody',
    'Endpoint',
    'HTTP',
    'HTTPS',
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
]
