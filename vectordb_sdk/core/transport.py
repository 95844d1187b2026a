# vectordb_sdk/core/transport.py
# SPDX-License-Identifier: Apache-2.0
"""
Transport contract and the default httpx implementation.

The resource clients never perform socket I/O themselves. They hand a fully
rendered request (method, escaped path, escaped query string, JSON bytes) to a
`Transport` and get raw bytes back. Connection pooling, TLS, proxies and
retries are all the transport's business.

Contract
--------
- `send()` must NOT raise for non-2xx statuses: the service wraps errors in
  the same `{time, status, result}` envelope as successes, and the envelope
  decoder is the single place that interprets them.
- Failures to deliver the request at all surface as `TransportError`.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol, runtime_checkable

import httpx

from vectordb_sdk.core.config import ClientConfig
from vectordb_sdk.core.errors import BadRequest, TransportError

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP response handed back to the envelope decoder."""
    status_code: int
    content: bytes
    headers: Mapping[str, str] = field(default_factory=dict)


@runtime_checkable
class Transport(Protocol):
    """Anything that can deliver one request and return the raw response."""

    async def send(
        self,
        method: str,
        path: str,
        query: str = "",
        body: Optional[bytes] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """
        Deliver a request.

        Args:
            method: HTTP verb (GET, PUT, POST, DELETE, PATCH)
            path: Already-escaped path, starting with "/"
            query: Already-escaped query string without the leading "?"
            body: UTF-8 JSON bytes, or None for body-less requests
            headers: Per-request headers (Content-Type is supplied by the core)
        """
        ...


class HttpxTransport:
    """
    `Transport` on top of `httpx.AsyncClient`.

    Either pass a `ClientConfig` (the transport then owns its client and
    closes it in `aclose()`), or a caller-owned `httpx.AsyncClient` that the
    transport never closes. Both may be given: the config's base URL and
    headers are applied on top of the supplied client.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if config is None and client is None:
            raise BadRequest("HttpxTransport requires a ClientConfig or an httpx.AsyncClient")
        self._config = config
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(timeout=config.timeout_s)
        self._client = client
        self._base_url = config.base_url if config is not None else ""
        self._headers = config.default_headers() if config is not None else {}

    @classmethod
    def from_url(cls, base_url: str, *, api_key: Optional[str] = None, **kwargs) -> "HttpxTransport":
        return cls(ClientConfig(base_url=base_url, api_key=api_key, **kwargs))

    async def send(
        self,
        method: str,
        path: str,
        query: str = "",
        body: Optional[bytes] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        url = f"{self._base_url}{path}"
        if query:
            url = f"{url}?{query}"
        merged = dict(self._headers)
        if headers:
            merged.update(headers)

        t0 = time.monotonic()
        try:
            resp = await self._client.request(method, url, content=body, headers=merged)
        except httpx.TimeoutException as e:
            raise TransportError(
                f"request timed out: {method} {path}",
                code="TIMEOUT",
                details={"method": method, "path": path},
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"request failed: {method} {path}: {e}",
                details={"method": method, "path": path, "cause": type(e).__name__},
            ) from e

        LOG.debug(
            "%s %s -> %d (%.1f ms)",
            method,
            path,
            resp.status_code,
            (time.monotonic() - t0) * 1000.0,
        )
        return TransportResponse(
            status_code=resp.status_code,
            content=resp.content,
            headers=dict(resp.headers),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = ["Transport", "TransportResponse", "HttpxTransport"]
