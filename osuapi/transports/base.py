from typing import Protocol


class Transport(Protocol):
    """Blocking HTTP backend: performs a GET and returns the full response body."""

    def fetch(self, uri: str) -> bytes:
        ...

    def close(self) -> None:
        ...


class AsyncTransport(Protocol):
    """Asyncio HTTP backend: the returned coroutine completes once the whole body is buffered."""

    async def fetch(self, uri: str) -> bytes:
        ...

    async def close(self) -> None:
        ...
