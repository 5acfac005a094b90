"""
Request templates.

A template is a frozen copy of a builder's configuration. enrich() hands
out a fresh builder every time, so derived builders never affect the
template or each other.
"""
from types import MappingProxyType
from typing import Mapping, Optional, TYPE_CHECKING

from ..logging import get_logger
from ..method import RequestMethod
from .body import RequestBody
from .builder import RequestBuilder, RequestBuilderWithBody
from .request import Request
from .state import RequestState

if TYPE_CHECKING:
    from ..endpoint import Endpoint

logger = get_logger(__name__)


class RequestTemplate:
    """Immutable snapshot of a RequestBuilder."""

    def __init__(self, state: RequestState):
        self._state = state.copy()

    @property
    def endpoint(self) -> 'Endpoint':
        return self._state.endpoint

    @property
    def method(self) -> RequestMethod:
        return self._state.method

    @property
    def charset(self) -> str:
        return self._state.charset

    @property
    def parameters(self) -> Mapping[str, Optional[str]]:
        return MappingProxyType(self._state.parameters)

    @property
    def headers(self) -> Mapping[str, str]:
        return MappingProxyType(self._state.headers)

    def enrich(self) -> RequestBuilder:
        """Create a new, independent builder pre-populated from this template."""
        return self._populate(RequestBuilder(self.endpoint, self.method, self.charset))

    def build(self) -> Request:
        """Build a request from the template without further changes."""
        return self.enrich().build()

    def _populate(self, builder):
        logger.debug("Deriving %s builder for %s from template",
                     self.method.value, self.endpoint.url)
        return builder.parameters(self._state.parameters).headers(self._state.headers)


class RequestTemplateWithBody(RequestTemplate):
    """Immutable snapshot of a RequestBuilderWithBody, body included."""

    @property
    def body(self) -> Optional[RequestBody]:
        return self._state.body

    def enrich(self) -> RequestBuilderWithBody:
        """Create a new, independent body-capable builder from this template."""
        builder = RequestBuilderWithBody(self.endpoint, self.method, self.charset)
        return self._populate(builder).body(self._state.body)
