# vectordb_sdk/client/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""Resource clients: one coroutine per remote operation."""

from vectordb_sdk.client.base import ResourceClient, build_query, collection_path, escape_segment
from vectordb_sdk.client.cluster import ClusterClient
from vectordb_sdk.client.collections import CollectionsClient
from vectordb_sdk.client.payload import PayloadClient
from vectordb_sdk.client.points import PointsClient
from vectordb_sdk.client.vectordb import VectorDBClient
from vectordb_sdk.client.vectors import VectorsClient

__all__ = [
    "ResourceClient",
    "build_query",
    "collection_path",
    "escape_segment",
    "ClusterClient",
    "CollectionsClient",
    "PayloadClient",
    "PointsClient",
    "VectorDBClient",
    "VectorsClient",
]
