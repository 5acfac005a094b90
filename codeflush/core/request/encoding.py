"""
Form-urlencoding of query parameters.

Encodes names and values the way HTML forms do: letters, digits and
``.-*_`` pass through, space becomes ``+`` and every other byte of the
charset representation is written as ``%XX``.
"""
import codecs
import locale
from urllib.parse import quote_plus

from ..exceptions import ConfigurationError, require


def resolve_charset(name: str) -> str:
    """
    Validate a charset name and return its canonical codec name.

    Args:
        name: Charset name such as 'UTF-8' or 'latin-1'

    Returns:
        Canonical Python codec name (e.g. 'utf-8', 'iso8859-1')

    Raises:
        ConfigurationError: If the charset is None, unknown or not a text encoding
    """
    require(name, "charset")
    try:
        info = codecs.lookup(name)
        # bytes-to-bytes and str-to-str codecs (hex, base64, rot13, ...) are not charsets
        ''.encode(info.name)
    except LookupError as e:
        raise ConfigurationError(f"Unsupported charset: {name}") from e
    return info.name


def platform_default_charset() -> str:
    """Return the platform's preferred charset."""
    return resolve_charset(locale.getpreferredencoding(False))


def encode_parameter(value: str, charset: str) -> str:
    """
    Percent-encode a query parameter name or value.

    Characters the charset cannot represent are replaced by '?'
    before escaping.

    Args:
        value: Text to encode
        charset: Charset whose byte representation is escaped

    Returns:
        Encoded text
    """
    encoded = quote_plus(value, safe='*', encoding=resolve_charset(charset), errors='replace')
    # quote_plus keeps '~' unreserved, form encoding does not
    return encoded.replace('~', '%7E')
