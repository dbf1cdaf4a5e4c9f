import logging
from typing import Optional

import requests

from osuapi.errors import TransportError
from osuapi.uri import redact_key, validate_uri

logger = logging.getLogger("osuapi")


class RequestsTransport:
    """Blocking transport on top of a ``requests.Session``."""

    def __init__(self, session: Optional[requests.Session] = None):
        self._owns_session = session is None
        self._session = session or requests.Session()

    def fetch(self, uri: str) -> bytes:
        validate_uri(uri)
        logger.debug(f"GET {redact_key(uri)}")
        try:
            response = self._session.get(uri)
        except requests.RequestException as e:
            raise TransportError(f"Request to {redact_key(uri)} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise TransportError(f"osu! api answered with status {response.status_code}",
                                 status=response.status_code)
        return response.content

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
