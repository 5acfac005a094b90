"""
Request body values.

A body is an opaque payload as far as request construction is concerned:
builders and templates only pass the reference along.
"""
import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .query import build_query_string


@dataclass(frozen=True, eq=False)
class RequestBody:
    """
    Encoded request payload.

    Bodies compare by identity, so two bodies with the same content are
    still distinct values.

    Example:
        >>> body = RequestBody.for_json({'name': 'codeflush'})
        >>> body.content_type
        'application/json; charset=utf-8'
    """
    content: bytes
    content_type: str

    @property
    def size(self) -> int:
        """Payload size in bytes."""
        return len(self.content)

    @classmethod
    def for_text(cls, text: str, charset: str = 'utf-8',
                 content_type: str = 'text/plain') -> 'RequestBody':
        """Create a text body encoded with the given charset."""
        return cls(text.encode(charset), f'{content_type}; charset={charset}')

    @classmethod
    def for_bytes(cls, data: bytes,
                  content_type: str = 'application/octet-stream') -> 'RequestBody':
        """Create a body from raw bytes."""
        return cls(bytes(data), content_type)

    @classmethod
    def for_json(cls, obj: Any) -> 'RequestBody':
        """Create a JSON body."""
        return cls.for_text(json.dumps(obj), content_type='application/json')

    @classmethod
    def for_form(cls, fields: Mapping[str, Optional[str]],
                 charset: str = 'utf-8') -> 'RequestBody':
        """Create an application/x-www-form-urlencoded body."""
        return cls(
            build_query_string(fields, charset).encode('ascii'),
            'application/x-www-form-urlencoded'
        )
