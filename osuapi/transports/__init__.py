from osuapi.transports.aiohttp_transport import AiohttpTransport
from osuapi.transports.base import AsyncTransport, Transport
from osuapi.transports.requests_transport import RequestsTransport

__all__ = ["AiohttpTransport", "AsyncTransport", "RequestsTransport", "Transport"]
