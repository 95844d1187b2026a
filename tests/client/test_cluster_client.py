# SPDX-License-Identifier: Apache-2.0
"""
Cluster resource.
"""

import pytest

from tests.mock.wire_samples import CLUSTER_DISABLED, CLUSTER_ENABLED, COLLECTION_CLUSTER_INFO
from vectordb_sdk import ClusterStatusDisabled, ClusterStatusEnabled, CollectionClusterInfo

pytestmark = pytest.mark.asyncio


async def test_cluster_status_disabled(client, transport):
    transport.queue_result(CLUSTER_DISABLED)

    status = await client.cluster.status()

    assert isinstance(status, ClusterStatusDisabled)
    assert (transport.last.method, transport.last.path) == ("GET", "/cluster")


async def test_cluster_status_enabled(client, transport):
    transport.queue_result(CLUSTER_ENABLED)

    status = await client.cluster.status()

    assert isinstance(status, ClusterStatusEnabled)
    assert status.peers["2"].uri == "http://node-2:6335/"


async def test_collection_cluster_info(client, transport):
    transport.queue_result(COLLECTION_CLUSTER_INFO)

    info = await client.cluster.collection_info("demo")

    assert isinstance(info, CollectionClusterInfo)
    assert info.local_shards[0].points_count == 120
    assert transport.last.path == "/collections/demo/cluster"
