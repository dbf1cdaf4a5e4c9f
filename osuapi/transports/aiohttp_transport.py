import asyncio
import logging
from typing import Optional

import aiohttp

from osuapi.errors import TransportError
from osuapi.uri import redact_key, validate_uri

logger = logging.getLogger("osuapi")


class AiohttpTransport:
    """
    Asyncio transport on top of an ``aiohttp.ClientSession``.

    The session is created on first use (inside the running loop) and shared by
    every request in flight. Each request runs inside ``async with``, so cancelling
    the awaiting task gives the connection back to the session's pool.
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session
        self._owns_session = session is None

    async def get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def fetch(self, uri: str) -> bytes:
        # validate_uri returns an encoded URL, so aiohttp sends the query string untouched
        url = validate_uri(uri)
        session = await self.get_session()
        logger.debug(f"GET {redact_key(uri)}")
        try:
            async with session.get(url) as response:
                body = await response.read()
                status = response.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Request to {redact_key(uri)} failed: {e!r}") from e

        if not 200 <= status < 300:
            raise TransportError(f"osu! api answered with status {status}", status=status)
        return body

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self):
        await self.get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
