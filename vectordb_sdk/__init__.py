# vectordb_sdk/__init__.py
# SPDX-License-Identifier: Apache-2.0

"""
Typed async client for a vector database REST API - public API

All wire models, union decoders, errors, transports and resource clients are
re-exported here for clean imports:

    from vectordb_sdk import VectorDBClient, CreateCollection, VectorParams, Distance
"""

from vectordb_sdk import wire as _wire
from vectordb_sdk.core import (
    # Errors
    VectorDBError,
    BadRequest,
    DecodeError,
    EncodeError,
    RemoteError,
    TransportError,
    # Error context
    attach_context,
    get_context,
    has_context,
    clear_context,
    # Config, metrics, transport
    API_KEY_HEADER,
    ClientConfig,
    MetricsSink,
    NoopMetrics,
    Transport,
    TransportResponse,
    HttpxTransport,
)
from vectordb_sdk.client import (
    ResourceClient,
    CollectionsClient,
    PointsClient,
    PayloadClient,
    VectorsClient,
    ClusterClient,
    VectorDBClient,
)
from vectordb_sdk.wire import *  # noqa: F401,F403

__all__ = [
    "VectorDBError",
    "BadRequest",
    "DecodeError",
    "EncodeError",
    "RemoteError",
    "TransportError",
    "attach_context",
    "get_context",
    "has_context",
    "clear_context",
    "API_KEY_HEADER",
    "ClientConfig",
    "MetricsSink",
    "NoopMetrics",
    "Transport",
    "TransportResponse",
    "HttpxTransport",
    "ResourceClient",
    "CollectionsClient",
    "PointsClient",
    "PayloadClient",
    "VectorsClient",
    "ClusterClient",
    "VectorDBClient",
] + list(_wire.__all__)

__version__ = "0.1.0"
