"""Query string construction and merging."""
from typing import Mapping, Optional

from .encoding import encode_parameter


def build_query_string(params: Mapping[str, Optional[str]], charset: str) -> str:
    """
    Encode parameters in insertion order, joined with '&'.

    A parameter whose value is None is rendered as a bare key.
    """
    fragments = []
    for key, value in params.items():
        fragment = encode_parameter(key, charset)
        if value is not None:
            fragment += '=' + encode_parameter(value, charset)
        fragments.append(fragment)
    return '&'.join(fragments)


def merge_query(existing_query: Optional[str],
                params: Mapping[str, Optional[str]],
                charset: str) -> str:
    """
    Append encoded parameters to an existing query string.

    Args:
        existing_query: Query already present on the base URL (may be None)
        params: Ordered parameters to append
        charset: Charset used for percent-encoding

    Returns:
        Merged query string; empty when there is nothing to append
    """
    existing_query = existing_query or ''
    if not params:
        return existing_query

    merged = build_query_string(params, charset)
    if existing_query:
        return existing_query + '&' + merged
    return merged
