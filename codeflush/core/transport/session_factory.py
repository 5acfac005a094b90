"""Session factory using Factory Pattern."""
import requests
import aiohttp

from ..config import ClientConfig


class SessionFactory:
    """Factory for creating HTTP sessions."""

    @staticmethod
    def create_sync_session(config: ClientConfig) -> requests.Session:
        """Creates a synchronous HTTP session with the configured headers."""
        session = requests.Session()
        session.headers.update(config.get_session_headers())
        return session

    @staticmethod
    async def create_async_session(config: ClientConfig) -> aiohttp.ClientSession:
        """Creates an asynchronous HTTP session with the configured headers."""
        return aiohttp.ClientSession(
            headers=config.get_session_headers()
        )
