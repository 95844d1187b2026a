# SPDX-License-Identifier: Apache-2.0
"""
Payload and vectors sub-clients of the points resource.
"""

import pytest

from tests.mock.wire_samples import UPDATE_COMPLETED
from vectordb_sdk import (
    BadRequest,
    DeletePayload,
    DeleteVectors,
    Filter,
    FilterSelector,
    HasIdCondition,
    PointIdsList,
    PointVectors,
    SetPayload,
    UpdateStatus,
    UpdateVectors,
)

pytestmark = pytest.mark.asyncio


async def test_sub_clients_share_collection(points):
    assert points.payload.collection == "demo"
    assert points.vectors.collection == "demo"


async def test_set_payload_merges_via_post(points, transport):
    transport.queue_result(UPDATE_COMPLETED)

    result = await points.payload.set(SetPayload(payload={"tier": "gold"}, points=[1, 2]), wait=True)

    assert result.status is UpdateStatus.COMPLETED
    sent = transport.last
    assert (sent.method, sent.path, sent.query) == ("POST", "/collections/demo/points/payload", "wait=true")
    assert sent.json() == {"payload": {"tier": "gold"}, "points": [1, 2]}


async def test_overwrite_payload_uses_put(points, transport):
    transport.queue_result(UPDATE_COMPLETED)

    await points.payload.overwrite(SetPayload(payload={"tier": "silver"}, filter=Filter(must=[HasIdCondition(has_id=[3])])))

    sent = transport.last
    assert (sent.method, sent.path, sent.query) == ("PUT", "/collections/demo/points/payload", "")
    assert sent.json() == {"payload": {"tier": "silver"}, "filter": {"must": [{"has_id": [3]}]}}


async def test_delete_payload_keys(points, transport):
    transport.queue_result(UPDATE_COMPLETED)

    await points.payload.delete(DeletePayload(keys=["tier", "legacy"], points=["a"]), ordering="weak")

    sent = transport.last
    assert (sent.method, sent.path, sent.query) == (
        "POST",
        "/collections/demo/points/payload/delete",
        "ordering=weak",
    )
    assert sent.json() == {"keys": ["tier", "legacy"], "points": ["a"]}


async def test_clear_payload_by_selector(points, transport):
    transport.queue_result(UPDATE_COMPLETED)
    transport.queue_result(UPDATE_COMPLETED)

    await points.payload.clear(PointIdsList(points=[1]))
    await points.payload.clear(FilterSelector(filter=Filter(must_not=[HasIdCondition(has_id=[1])])))

    first, second = transport.requests
    assert (first.method, first.path) == ("POST", "/collections/demo/points/payload/clear")
    assert first.json() == {"points": [1]}
    assert second.json() == {"filter": {"must_not": [{"has_id": [1]}]}}


async def test_payload_set_rejects_wrong_type(points, transport):
    with pytest.raises(BadRequest):
        await points.payload.set(DeletePayload(keys=["x"]))
    assert transport.requests == []


async def test_update_vectors(points, transport):
    transport.queue_result(UPDATE_COMPLETED)

    result = await points.vectors.update(
        UpdateVectors(points=[PointVectors(id=1, vector={"image": [0.1, 0.2]})]),
        wait=True,
        ordering="strong",
    )

    assert result.operation_id == 42
    sent = transport.last
    assert (sent.method, sent.path, sent.query) == (
        "PUT",
        "/collections/demo/points/vectors",
        "wait=true&ordering=strong",
    )
    assert sent.json() == {"points": [{"id": 1, "vector": {"image": [0.1, 0.2]}}]}


async def test_delete_vectors(points, transport):
    transport.queue_result(UPDATE_COMPLETED)

    await points.vectors.delete(DeleteVectors(vector=["image"], filter=Filter(must=[HasIdCondition(has_id=[7])])))

    sent = transport.last
    assert (sent.method, sent.path) == ("POST", "/collections/demo/points/vectors/delete")
    assert sent.json() == {"vector": ["image"], "filter": {"must": [{"has_id": [7]}]}}


async def test_sub_client_metrics_component(points, transport, metrics):
    transport.queue_result(UPDATE_COMPLETED)
    await points.vectors.delete(DeleteVectors(vector=["image"], points=[1]))
    assert metrics.observations[-1]["component"] == "vectors"
    assert metrics.observations[-1]["op"] == "delete"
