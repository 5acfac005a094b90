"""Request construction: builders, templates and immutable requests."""
from .body import RequestBody
from .encoding import encode_parameter, resolve_charset, platform_default_charset
from .query import build_query_string, merge_query
from .request import Request
from .builder import RequestBuilder, RequestBuilderWithBody
from .template import RequestTemplate, RequestTemplateWithBody

__all__ = [
    'Request',
    'RequestBody',
    'RequestBuilder',
    'RequestBuilderWithBody',
    'RequestTemplate',
    'RequestTemplateWithBody',
    'encode_parameter',
    'resolve_charset',
    'platform_default_charset',
    'build_query_string',
    'merge_query',
]
