"""
Call invoker: perform one outbound HTTPS call for an OutboundRequest.

Responsibility: the network primitive of the bridge. Sends exactly one request
(no retries), enforces the whole-call time budget and the response size cap, and
returns the raw status and body. HTTP error statuses are returned, not raised;
only transport-level failures raise TransportError.

The size cap counts body bytes after content-encoding is undone (what
aiter_bytes yields), not the compressed bytes read off the wire.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from app.core.errors import TransportError
from app.services.request_builder import OutboundRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InboundResponse:
    """Raw result of a completed outbound call."""

    status: int
    body: bytes


async def _read_capped(response: httpx.Response, cap: int) -> bytes:
    chunks: list[bytes] = []
    received = 0
    async for chunk in response.aiter_bytes():
        received += len(chunk)
        if received > cap:
            raise TransportError("response_too_large", f"response body exceeded {cap} bytes")
        chunks.append(chunk)
    return b"".join(chunks)


async def _stream(client: httpx.AsyncClient, request: OutboundRequest) -> InboundResponse:
    async with client.stream(
        request.method,
        request.url,
        headers=list(request.headers),
        content=request.body,
    ) as response:
        body = await _read_capped(response, request.response_size_cap)
        status = response.status_code
    return InboundResponse(status=status, body=body)


async def _send(request: OutboundRequest, client: Optional[httpx.AsyncClient]) -> InboundResponse:
    if client is not None:
        return await _stream(client, request)
    async with httpx.AsyncClient(timeout=request.time_budget) as own_client:
        return await _stream(own_client, request)


async def submit(request: OutboundRequest, client: Optional[httpx.AsyncClient] = None) -> InboundResponse:
    """
    Issue the request and wait for the full response.
    Pass client to reuse a connection pool or a mocked transport; otherwise a
    short-lived client is opened for this call only.
    Raises TransportError on timeout, connection/protocol failure or an oversized body.
    """
    logger.info("[invoker:submit] IN  %s %s body_len=%d", request.method, request.url, len(request.body))
    try:
        response = await asyncio.wait_for(_send(request, client), timeout=request.time_budget)
    except asyncio.TimeoutError as e:
        raise TransportError(
            "timeout", f"no response from {request.url} within {request.time_budget}s"
        ) from e
    except httpx.TimeoutException as e:
        raise TransportError("timeout", str(e) or type(e).__name__) from e
    except httpx.HTTPError as e:
        raise TransportError("transport", str(e) or type(e).__name__) from e
    logger.info("[invoker:submit] OUT status=%d body_len=%d", response.status, len(response.body))
    return response
