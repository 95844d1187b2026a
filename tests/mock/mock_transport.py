# SPDX-License-Identifier: Apache-2.0
"""
Recording transport double for resource-client tests.

Every `send()` is captured as a `SentRequest`; responses are served from a
FIFO queue of canned envelopes. With an empty queue the transport answers
`{"time": 0.001, "status": "ok", "result": true}`.

    transport = MockTransport()
    transport.queue_result({"operation_id": 7, "status": "completed"})
    await PointsClient(transport, "demo").upsert(...)
    assert transport.last.path == "/collections/demo/points"
"""

from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, List, Mapping, Optional

from vectordb_sdk.core.transport import TransportResponse

_MISSING = object()


@dataclass
class SentRequest:
    method: str
    path: str
    query: str
    body: Optional[bytes]
    headers: Dict[str, str] = field(default_factory=dict)

    def json(self) -> Any:
        return None if self.body is None else json.loads(self.body.decode("utf-8"))

    @property
    def url(self) -> str:
        return f"{self.path}?{self.query}" if self.query else self.path


class MockTransport:
    def __init__(self) -> None:
        self.requests: List[SentRequest] = []
        self._responses: Deque[Any] = deque()

    # -- scripting ------------------------------------------------------------

    def queue_result(self, result: Any = _MISSING, *, time: float = 0.001, status_code: int = 200) -> None:
        doc: Dict[str, Any] = {"time": time, "status": "ok"}
        if result is not _MISSING:
            doc["result"] = result
        self.queue_raw(json.dumps(doc).encode("utf-8"), status_code=status_code)

    def queue_error(self, message: str, *, status_code: int = 404, time: float = 0.001) -> None:
        doc = {"time": time, "status": {"error": message}}
        self.queue_raw(json.dumps(doc).encode("utf-8"), status_code=status_code)

    def queue_raw(self, content: bytes, *, status_code: int = 200) -> None:
        self._responses.append(TransportResponse(status_code=status_code, content=content))

    def queue_exception(self, exc: BaseException) -> None:
        self._responses.append(exc)

    # -- inspection -----------------------------------------------------------

    @property
    def last(self) -> SentRequest:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    # -- Transport ------------------------------------------------------------

    async def send(
        self,
        method: str,
        path: str,
        query: str = "",
        body: Optional[bytes] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        self.requests.append(SentRequest(method, path, query, body, dict(headers or {})))
        if not self._responses:
            return TransportResponse(200, b'{"time":0.001,"status":"ok","result":true}')
        nxt = self._responses.popleft()
        if isinstance(nxt, BaseException):
            raise nxt
        return nxt


class RecordingMetrics:
    """MetricsSink that keeps every observation."""

    def __init__(self) -> None:
        self.observations: List[Dict[str, Any]] = []

    def observe(self, **kwargs: Any) -> None:
        self.observations.append(kwargs)


class ExplodingMetrics:
    """MetricsSink that always fails."""

    def observe(self, **kwargs: Any) -> None:
        raise RuntimeError("metrics backend down")
