"""Configuration shared by builders, templates and requests."""
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, TYPE_CHECKING

from ..method import RequestMethod
from .body import RequestBody

if TYPE_CHECKING:
    from ..endpoint import Endpoint


@dataclass
class RequestState:
    """
    Everything a builder accumulates before building a request.

    Builders mutate their own state; templates and requests only ever
    receive a copy().
    """
    endpoint: 'Endpoint'
    method: RequestMethod
    charset: str
    parameters: Dict[str, Optional[str]] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[RequestBody] = None

    def copy(self) -> 'RequestState':
        """Return a state with its own parameter and header dicts."""
        return replace(self, parameters=dict(self.parameters), headers=dict(self.headers))
