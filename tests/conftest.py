"""Pytest fixtures for codeflush tests."""
import pytest
from unittest.mock import PropertyMock, Mock

from codeflush import ClientConfig, Endpoint, HTTPS


@pytest.fixture
def endpoint():
    """Endpoint for codeflush.dev with a fixed UTF-8 charset."""
    return Endpoint.for_host(HTTPS, "codeflush.dev", config=ClientConfig.with_charset("utf-8"))


@pytest.fixture
def latin1_endpoint():
    """Endpoint for codeflush.dev encoding parameters as ISO-8859-1."""
    return Endpoint.for_host(HTTPS, "codeflush.dev", config=ClientConfig.with_charset("latin-1"))


@pytest.fixture
def fake_endpoint():
    """Returns a factory for endpoints with an arbitrary (possibly invalid) URL."""
    def make(url: str):
        fake = Mock()
        url_property = PropertyMock(return_value=url)
        type(fake).url = url_property
        fake.url_property = url_property
        return fake
    return make
