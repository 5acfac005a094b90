"""Tests for the requests and aiohttp transports."""
import pytest
import requests
from unittest.mock import Mock, AsyncMock, MagicMock, patch
from yarl import URL

from codeflush import (
    AIOHTTPClient,
    AsyncHTTPClient,
    ClientConfig,
    HTTPClient,
    JSONParser,
    RequestBody,
    RequestsHTTPClient,
    TextParser,
)
from codeflush.core.transport import SessionFactory, prepare_headers


@pytest.fixture
def mock_session():
    """Create mock requests session."""
    session = Mock()
    session.request.return_value = Mock(
        status_code=201,
        headers={"Content-Type": "application/json"},
        content=b'{"id": 7}',
        encoding="utf-8"
    )
    return session


class TestPrepareHeaders:
    """Test suite for prepare_headers."""

    def test_content_type_from_body(self, endpoint):
        """Test Content-Type is taken from the body."""
        request = endpoint.post().body(RequestBody.for_json({})).build()

        assert prepare_headers(request) == {"Content-Type": "application/json; charset=utf-8"}

    def test_explicit_content_type_kept(self, endpoint):
        """Test an explicit header wins regardless of case."""
        request = (endpoint.post()
                   .header("content-type", "application/vnd.api+json")
                   .body(RequestBody.for_json({}))
                   .build())

        assert prepare_headers(request) == {"content-type": "application/vnd.api+json"}

    def test_no_body(self, endpoint):
        """Test no Content-Type without a body."""
        request = endpoint.get().header("Accept", "text/plain").build()

        assert prepare_headers(request) == {"Accept": "text/plain"}


class TestSessionFactory:
    """Test suite for SessionFactory."""

    def test_sync_session_headers(self):
        """Test the session carries user agent and extra headers."""
        config = ClientConfig(user_agent="test-agent/1.0", extra_headers={"X-Team": "core"})
        session = SessionFactory.create_sync_session(config)

        try:
            assert session.headers["User-Agent"] == "test-agent/1.0"
            assert session.headers["X-Team"] == "core"
        finally:
            session.close()


class TestRequestsHTTPClient:
    """Test suite for RequestsHTTPClient."""

    def test_satisfies_protocol(self, mock_session):
        """Test the client implements HTTPClient."""
        assert isinstance(RequestsHTTPClient(session=mock_session), HTTPClient)

    def test_execute(self, endpoint, mock_session):
        """Test the request is sent as built and the body parsed."""
        client = RequestsHTTPClient(session=mock_session)
        request = (endpoint.post()
                   .parameter("draft")
                   .header("Accept", "application/json")
                   .body(RequestBody.for_json({"name": "x"}))
                   .build())

        response = request.execute(client, JSONParser())

        mock_session.request.assert_called_once_with(
            "POST",
            "https://codeflush.dev?draft",
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json; charset=utf-8",
            },
            data=b'{"name": "x"}'
        )
        assert response.status_code == 201
        assert response.body == {"id": 7}
        assert response.headers == {"Content-Type": "application/json"}
        assert response.request is request

    def test_execute_without_body(self, endpoint, mock_session):
        """Test bodyless requests send no data."""
        client = RequestsHTTPClient(session=mock_session)

        endpoint.get().execute(client, JSONParser())

        assert mock_session.request.call_args[1]["data"] is None

    def test_errors_propagate(self, endpoint, mock_session):
        """Test network errors reach the caller unchanged."""
        mock_session.request.side_effect = requests.ConnectionError("unreachable")
        client = RequestsHTTPClient(session=mock_session)

        with pytest.raises(requests.ConnectionError):
            endpoint.get().build().execute(client, TextParser())

    def test_context_manager_closes(self, mock_session):
        """Test the session is closed on exit."""
        with RequestsHTTPClient(session=mock_session) as client:
            assert client.session is mock_session

        mock_session.close.assert_called_once()


class TestAIOHTTPClient:
    """Test suite for AIOHTTPClient."""

    @pytest.fixture
    def mock_async_session(self):
        """Create mock aiohttp session returning a text response."""
        mock_response = MagicMock()
        mock_response.status = 200
        mock_response.headers = {"Content-Type": "text/plain; charset=utf-8"}
        mock_response.charset = "utf-8"
        mock_response.read = AsyncMock(return_value=b"hello")

        mock_request = MagicMock()
        mock_request.__aenter__ = AsyncMock(return_value=mock_response)
        mock_request.__aexit__ = AsyncMock(return_value=None)

        session = MagicMock()
        session.closed = False
        session.request = MagicMock(return_value=mock_request)
        session.close = AsyncMock()
        return session

    def test_satisfies_protocol(self):
        """Test the client implements AsyncHTTPClient."""
        assert isinstance(AIOHTTPClient(), AsyncHTTPClient)

    @pytest.mark.asyncio
    async def test_execute(self, endpoint, mock_async_session):
        """Test the encoded URL is passed through and the body parsed."""
        request = endpoint.get().parameter("q", "a b").parameter("flag").build()

        with patch.object(SessionFactory, 'create_async_session',
                          AsyncMock(return_value=mock_async_session)):
            async with AIOHTTPClient() as client:
                response = await request.execute_async(client, TextParser())

        args, kwargs = mock_async_session.request.call_args
        assert args[0] == "GET"
        assert args[1] == URL("https://codeflush.dev?q=a+b&flag", encoded=True)
        assert kwargs["data"] is None
        assert response.status_code == 200
        assert response.body == "hello"
        mock_async_session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_session_reused(self, endpoint, mock_async_session):
        """Test one session serves several requests."""
        factory = AsyncMock(return_value=mock_async_session)

        with patch.object(SessionFactory, 'create_async_session', factory):
            client = AIOHTTPClient()
            await endpoint.get().build().execute_async(client, TextParser())
            await endpoint.get().build().execute_async(client, TextParser())
            await client.close()

        factory.assert_awaited_once()
        assert mock_async_session.request.call_count == 2
