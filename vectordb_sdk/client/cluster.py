# vectordb_sdk/client/cluster.py
# SPDX-License-Identifier: Apache-2.0
"""Cluster status and per-collection shard layout."""

from __future__ import annotations

from vectordb_sdk.client.base import ResourceClient, collection_path, require_name
from vectordb_sdk.wire.cluster import (
    ClusterStatus,
    CollectionClusterInfo,
    decode_cluster_status,
)


class ClusterClient(ResourceClient):
    _component = "cluster"

    async def status(self) -> ClusterStatus:
        return await self._call("status", "GET", "/cluster", decode_cluster_status)

    async def collection_info(self, name: str) -> CollectionClusterInfo:
        require_name(name)
        return await self._call(
            "collection_info",
            "GET",
            collection_path(name, "cluster"),
            CollectionClusterInfo.from_wire,
            collection=name,
        )


__all__ = ["ClusterClient"]
