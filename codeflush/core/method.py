"""HTTP request methods."""
from enum import Enum


class RequestMethod(Enum):
    """HTTP verbs understood by the request builders."""
    GET = 'GET'
    HEAD = 'HEAD'
    POST = 'POST'
    PUT = 'PUT'
    PATCH = 'PATCH'
    DELETE = 'DELETE'
    OPTIONS = 'OPTIONS'
    TRACE = 'TRACE'

    @property
    def allows_body(self) -> bool:
        """Whether requests with this method are built with a body-capable builder."""
        return self in (RequestMethod.POST, RequestMethod.PUT, RequestMethod.PATCH)

    @classmethod
    def parse(cls, name: str) -> 'RequestMethod':
        """Look up a method by name, case-insensitively."""
        return cls(name.upper())
