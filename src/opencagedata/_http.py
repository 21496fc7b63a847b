"""Internal HTTPS transport: one request, one fully-buffered response."""

from __future__ import annotations

import logging

import httpx

from opencagedata.models import RawHttpResult, RequestOptions

logger = logging.getLogger(__name__)


class HttpRequester:
    """
    Performs a single HTTPS exchange per call.

    Each call opens its own ``httpx.AsyncClient``, so concurrent calls
    never share a connection. The body is streamed and accumulated, and
    the result is returned only once the stream is exhausted. HTTP error
    statuses are returned like any other response; transport failures
    (DNS, connect, TLS, reset) propagate as ``httpx.TransportError``.

    No timeout is applied here: wrap the call in ``asyncio.wait_for``
    if one is needed.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    async def perform(self, options: RequestOptions) -> RawHttpResult:
        url = f"https://{options.host}:{options.port}{options.path}"
        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=None
            ) as client:
                async with client.stream(options.method, url) as response:
                    chunks: list[str] = []
                    async for chunk in response.aiter_text():
                        chunks.append(chunk)
                    return RawHttpResult(
                        http_version=response.http_version,
                        status_code=response.status_code,
                        headers=response.headers,
                        body="".join(chunks),
                    )
        except httpx.TransportError as exc:
            logger.warning("Problem with request to %s: %s", options.host, exc)
            raise
