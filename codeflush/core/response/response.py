"""Response model returned by the transports."""
from dataclasses import dataclass, field
from typing import Dict, Generic, Optional, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from ..request import Request

T = TypeVar('T')


@dataclass(frozen=True)
class Response(Generic[T]):
    """
    Parsed HTTP response.

    Attributes:
        status_code: HTTP status code
        headers: Response headers as received
        body: Body produced by the response parser
        request: Request that produced this response
    """
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[T] = None
    request: Optional['Request'] = field(default=None, repr=False, compare=False)

    @property
    def is_success(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status_code < 300

    def header(self, name: str) -> Optional[str]:
        """Get a header value by name (case-insensitive)."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None
