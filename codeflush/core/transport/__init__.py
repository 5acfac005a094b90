"""Transports that send requests."""
from .protocols import HTTPClient, AsyncHTTPClient, prepare_headers
from .session_factory import SessionFactory
from .requests_client import RequestsHTTPClient
from .aiohttp_client import AIOHTTPClient

__all__ = [
    'HTTPClient',
    'AsyncHTTPClient',
    'prepare_headers',
    'SessionFactory',
    'RequestsHTTPClient',
    'AIOHTTPClient',
]
