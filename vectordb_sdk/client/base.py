# vectordb_sdk/client/base.py
# SPDX-License-Identifier: Apache-2.0
"""
Shared plumbing for the resource clients.

A resource method does four things and nothing else:

1. validate caller arguments (raising `BadRequest` before any I/O),
2. pick the HTTP verb, escaped path and query string,
3. hand the encoded body to the transport,
4. decode the envelope's `result` as the declared type.

`ResourceClient._call` owns steps 3-4 together with the cross-cutting
concerns: one metrics observation per call, DEBUG logging of method, path,
status and latency (never bodies), and error context attached to anything
that escapes.

Path segments and query values are percent-encoded, so caller-supplied
names containing `/`, `?`, `#`, spaces etc. can never change the route.
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Tuple, Type, TypeVar, Union
from urllib.parse import quote

from vectordb_sdk.core.error_context import attach_context
from vectordb_sdk.core.errors import BadRequest, VectorDBError
from vectordb_sdk.core.metrics import MetricsSink, NoopMetrics
from vectordb_sdk.core.transport import Transport
from vectordb_sdk.wire.codec import dumps
from vectordb_sdk.wire.envelope import decode_result
from vectordb_sdk.wire.primitives import (
    ExtendedPointId,
    ReadConsistency,
    ReadConsistencyType,
    WriteOrdering,
    check_point_id,
)

LOG = logging.getLogger(__name__)

T = TypeVar("T")

JSON_CONTENT_TYPE = {"Content-Type": "application/json"}

# =============================================================================
# Paths and query strings
# =============================================================================

def escape_segment(segment: Union[str, int]) -> str:
    """Percent-encode one path segment; `/` included."""
    return quote(str(segment), safe="")


def collection_path(name: str, *rest: str) -> str:
    """`/collections/{name}` followed by literal (already safe) segments."""
    path = f"/collections/{escape_segment(name)}"
    for seg in rest:
        path += f"/{seg}"
    return path


def render_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def build_query(params: Iterable[Tuple[str, Any]]) -> str:
    """
    Render `name=value` pairs joined by `&`, skipping pairs whose value is None.

    Returns "" when nothing is left, so no `?` is ever emitted for an
    all-absent parameter set.
    """
    parts = []
    for name, value in params:
        if value is None:
            continue
        parts.append(f"{quote(name, safe='')}={quote(render_param(value), safe='')}")
    return "&".join(parts)


# =============================================================================
# Argument validation
# =============================================================================

def require_name(value: Any, what: str = "collection name") -> str:
    if not isinstance(value, str) or not value:
        raise BadRequest(f"{what} must be a non-empty string", details={"field": what})
    return value


def require_type(value: Any, expected: Union[Type, Tuple[Type, ...]], what: str) -> None:
    if not isinstance(value, expected):
        names = (
            " | ".join(t.__name__ for t in expected)
            if isinstance(expected, tuple)
            else expected.__name__
        )
        raise BadRequest(
            f"{what} must be {names}, got {type(value).__name__}",
            details={"field": what},
        )


def require_point_id(value: Any) -> ExtendedPointId:
    check_point_id("id", value)
    return value


def write_query(wait: Optional[bool], ordering: Optional[Union[WriteOrdering, str]]) -> str:
    if wait is not None and not isinstance(wait, bool):
        raise BadRequest("wait must be a bool", details={"field": "wait"})
    if ordering is not None:
        try:
            ordering = WriteOrdering(ordering)
        except ValueError:
            raise BadRequest(
                f"unknown ordering {ordering!r}",
                details={"field": "ordering", "allowed": [o.value for o in WriteOrdering]},
            ) from None
    return build_query((("wait", wait), ("ordering", ordering)))


def read_query(consistency: Optional[ReadConsistency]) -> str:
    if consistency is None:
        return ""
    if isinstance(consistency, bool):
        raise BadRequest("consistency must be an unsigned integer or a named level")
    if isinstance(consistency, int):
        if consistency < 0:
            raise BadRequest("consistency must be >= 0", details={"consistency": consistency})
        return build_query((("consistency", consistency),))
    try:
        level = ReadConsistencyType(consistency)
    except ValueError:
        raise BadRequest(
            f"unknown consistency {consistency!r}",
            details={"allowed": [c.value for c in ReadConsistencyType]},
        ) from None
    return build_query((("consistency", level),))


# =============================================================================
# Base client
# =============================================================================

class ResourceClient:
    """
    Base class for one resource family (collections, points, payload, ...).

    Subclasses set `_component` and implement one coroutine per remote
    operation on top of `_call`. Instances hold no per-call state and may be
    used concurrently.
    """

    _component: str = "resource"

    def __init__(self, transport: Transport, *, metrics: Optional[MetricsSink] = None):
        self._transport = transport
        self._metrics: MetricsSink = metrics or NoopMetrics()

    async def _call(
        self,
        op: str,
        method: str,
        path: str,
        decode: Callable[[Any, str], T],
        *,
        body: Any = None,
        query: str = "",
        collection: Optional[str] = None,
    ) -> T:
        t0 = time.monotonic()
        status: Optional[int] = None
        try:
            payload = dumps(body) if body is not None else None
            resp = await self._transport.send(
                method,
                path,
                query,
                payload,
                headers=JSON_CONTENT_TYPE if payload is not None else None,
            )
            status = resp.status_code
            result = decode_result(resp.content, decode, status_code=status)
        except Exception as e:
            code = getattr(e, "code", None) if isinstance(e, VectorDBError) else None
            code = code or type(e).__name__
            LOG.debug(
                "%s.%s %s %s -> %s failed: %s",
                self._component,
                op,
                method,
                path,
                status,
                code,
            )
            attach_context(
                e,
                self._component,
                operation=op,
                collection=collection,
                method=method,
                path=path,
                http_status=status,
            )
            self._record(op, t0, False, code=code, collection=collection)
            raise

        LOG.debug(
            "%s.%s %s %s -> %s (%.1f ms)",
            self._component,
            op,
            method,
            path,
            status,
            (time.monotonic() - t0) * 1000.0,
        )
        self._record(op, t0, True, collection=collection)
        return result

    def _record(
        self,
        op: str,
        t0: float,
        ok: bool,
        *,
        code: str = "OK",
        collection: Optional[str] = None,
    ) -> None:
        try:
            self._metrics.observe(
                component=self._component,
                op=op,
                ms=(time.monotonic() - t0) * 1000.0,
                ok=ok,
                code=code,
                extra={"collection": collection} if collection else None,
            )
        except Exception:  # noqa: BLE001
            LOG.debug("metrics sink failed for %s.%s", self._component, op, exc_info=True)


class CollectionScopedClient(ResourceClient):
    """Resource client bound to one collection (points, payload, vectors)."""

    def __init__(
        self,
        transport: Transport,
        collection: str,
        *,
        metrics: Optional[MetricsSink] = None,
    ):
        super().__init__(transport, metrics=metrics)
        self._collection = require_name(collection)

    @property
    def collection(self) -> str:
        return self._collection

    def _path(self, *rest: str) -> str:
        return collection_path(self._collection, *rest)

    async def _scoped(
        self,
        op: str,
        method: str,
        path: str,
        decode: Callable[[Any, str], T],
        *,
        body: Any = None,
        query: str = "",
    ) -> T:
        return await self._call(
            op, method, path, decode, body=body, query=query, collection=self._collection
        )


__all__ = [
    "JSON_CONTENT_TYPE",
    "escape_segment",
    "collection_path",
    "render_param",
    "build_query",
    "require_name",
    "require_type",
    "require_point_id",
    "write_query",
    "read_query",
    "ResourceClient",
    "CollectionScopedClient",
]
