"""
Request URI assembly.

Parameter values are written into the query string verbatim, without
percent-encoding, which is the exact wire format the osu! api has always
received from this client. A value holding ``&``, ``=`` or ``#`` therefore
changes the meaning of the query, and a value holding whitespace is rejected
by :func:`validate_uri` before anything is sent.
"""
import re
from typing import Iterable, Mapping, Optional, Tuple

from yarl import URL

from osuapi.config import API_URL
from osuapi.errors import InvalidUriError

_KEY_PATTERN = re.compile(r"([?&]k=)[^&]*")
_FORBIDDEN_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")


def build_uri(endpoint: str,
              key: str,
              required: Iterable[Tuple[str, object]] = (),
              params: Optional[Mapping[str, str]] = None,
              api_url: str = API_URL) -> str:
    """
    Builds ``{api_url}/{endpoint}?k={key}``, followed by the required parameters
    in the given order and then the optional ones sorted by key.
    """
    uri = f"{api_url.rstrip('/')}/{endpoint}?k={key}"
    for name, value in required:
        uri += f"&{name}={value}"
    for name, value in sorted((params or {}).items()):
        uri += f"&{name}={value}"
    return uri


def redact_key(uri: str) -> str:
    """Hides the api key so the uri can be logged or put in an error message."""
    return _KEY_PATTERN.sub(r"\1***", uri)


def validate_uri(uri: str) -> URL:
    """Parses the assembled uri as-is, raising InvalidUriError if it can't be sent."""
    if _FORBIDDEN_CHARS.search(uri):
        raise InvalidUriError(redact_key(uri), "contains whitespace or control characters")
    try:
        url = URL(uri, encoded=True)
        # port is parsed lazily
        url.port
    except (ValueError, TypeError) as e:
        raise InvalidUriError(redact_key(uri), str(e)) from e

    if not url.is_absolute() or url.scheme not in ("http", "https") or not url.host:
        raise InvalidUriError(redact_key(uri), "not an absolute http(s) URI")
    return url
