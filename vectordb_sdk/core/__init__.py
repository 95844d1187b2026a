# vectordb_sdk/core/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""Cross-cutting pieces shared by the wire model and the resource clients."""

from vectordb_sdk.core.config import API_KEY_HEADER, ClientConfig
from vectordb_sdk.core.error_context import (
    attach_context,
    clear_context,
    get_context,
    has_context,
)
from vectordb_sdk.core.errors import (
    BadRequest,
    DecodeError,
    EncodeError,
    RemoteError,
    TransportError,
    VectorDBError,
)
from vectordb_sdk.core.metrics import MetricsSink, NoopMetrics
from vectordb_sdk.core.transport import HttpxTransport, Transport, TransportResponse

__all__ = [
    "API_KEY_HEADER",
    "ClientConfig",
    "attach_context",
    "clear_context",
    "get_context",
    "has_context",
    "BadRequest",
    "DecodeError",
    "EncodeError",
    "RemoteError",
    "TransportError",
    "VectorDBError",
    "MetricsSink",
    "NoopMetrics",
    "HttpxTransport",
    "Transport",
    "TransportResponse",
]
