# vectordb_sdk/core/metrics.py
# SPDX-License-Identifier: Apache-2.0
"""
Metrics sink contract for the resource clients.

Each resource call records exactly one observation (component, op, elapsed
milliseconds, success flag, error code). Extras must stay low-cardinality:
collection names are passed through, point ids and payload values never are.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class MetricsSink(Protocol):
    """Protocol for metrics collection implementations."""

    def observe(
        self,
        *,
        component: str,
        op: str,
        ms: float,
        ok: bool,
        code: str = "OK",
        extra: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Record operation timing and status."""
        ...


class NoopMetrics:
    """No-operation metrics sink, the default when none is supplied."""
    def observe(self, **_: Any) -> None: ...


__all__ = ["MetricsSink", "NoopMetrics"]
