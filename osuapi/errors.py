from typing import Any, Optional


class OsuApiError(Exception):
    """Base class for every failure raised by the osu! api client."""
    kind = "error"


class TransportError(OsuApiError):
    """The HTTP request could not be completed, or the server answered with a non 2xx status."""
    kind = "transport"

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class DecodeError(OsuApiError):
    """The response body is not valid JSON, or a field could not be coerced to its type."""
    kind = "decode"

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidEnumCodeError(OsuApiError):
    kind = "invalid_enum_code"

    def __init__(self, field: Optional[str], value: Any):
        super().__init__(f"Unknown code {value!r} for field '{field}'")
        self.field = field
        self.value = value


class InvalidUriError(OsuApiError):
    kind = "invalid_uri"

    def __init__(self, uri: str, reason: str = "not a valid URI"):
        super().__init__(f"Request URI is {reason}: {uri}")
        self.uri = uri
        self.reason = reason
