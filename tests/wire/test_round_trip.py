# SPDX-License-Identifier: Apache-2.0
"""
Encode/decode round trip across the wire model.

Asserts:
  • decode(loads(dumps(v))) == v for request and response models
  • the union variant chosen on decode is the one that was encoded
  • decoded service samples re-encode to something that decodes identically
"""

import pytest

from tests.mock.wire_samples import (
    CLUSTER_DISABLED,
    CLUSTER_ENABLED,
    COLLECTION_CLUSTER_INFO,
    COLLECTION_INFO,
    GROUPS,
    SCROLL_PAGE,
)
from vectordb_sdk import (
    CollectionClusterInfo,
    CollectionInfo,
    CollectionParamsDiff,
    CompressionRatio,
    CreateCollection,
    CreateFieldIndex,
    Distance,
    FieldCondition,
    Filter,
    FilterSelector,
    GroupsResult,
    HnswConfigDiff,
    InitFrom,
    MatchValue,
    NamedVector,
    OptimizersConfigDiff,
    PayloadSelectorExclude,
    PointIdsList,
    PointStruct,
    PointsList,
    ProductQuantization,
    ProductQuantizationConfig,
    Range,
    RecommendRequest,
    ScalarQuantization,
    ScalarQuantizationConfig,
    ScalarType,
    ScrollRequest,
    ScrollResult,
    SearchGroupsRequest,
    SearchParams,
    SearchRequest,
    TextIndexParams,
    TextIndexType,
    TokenizerType,
    UpdateCollection,
    VectorParams,
    WalConfigDiff,
    WithLookup,
    decode_cluster_status,
    decode_points_selector,
    dumps,
    loads,
)

CITY_FILTER = Filter(
    must=[FieldCondition(key="city", match=MatchValue(value="Berlin"))],
    must_not=[FieldCondition(key="price", range=Range(gt=100.0))],
)


def _round_trip(decode, value):
    return decode(loads(dumps(value)), "$")


# --------------------------------------------------------------------------- #
# Requests
# --------------------------------------------------------------------------- #


REQUESTS = [
    pytest.param(
        CreateCollection.from_wire,
        CreateCollection(
            vectors={
                "image": VectorParams(
                    size=512,
                    distance=Distance.DOT,
                    quantization_config=ScalarQuantization(
                        scalar=ScalarQuantizationConfig(type=ScalarType.INT8, quantile=0.99, always_ram=True)
                    ),
                ),
                "text": VectorParams(
                    size=768,
                    distance=Distance.COSINE,
                    hnsw_config=HnswConfigDiff(m=32, on_disk=True),
                    on_disk=True,
                ),
            },
            shard_number=2,
            wal_config=WalConfigDiff(wal_capacity_mb=64),
            init_from=InitFrom(collection="demo_v1"),
            quantization_config=ProductQuantization(
                product=ProductQuantizationConfig(compression=CompressionRatio.X16)
            ),
        ),
        id="CreateCollection-named-both-quantizations",
    ),
    pytest.param(
        CreateCollection.from_wire,
        CreateCollection(vectors=VectorParams(size=4, distance=Distance.EUCLID)),
        id="CreateCollection-single",
    ),
    pytest.param(
        UpdateCollection.from_wire,
        UpdateCollection(
            optimizers_config=OptimizersConfigDiff(indexing_threshold=20000, deleted_threshold=0.2),
            params=CollectionParamsDiff(replication_factor=2),
        ),
        id="UpdateCollection",
    ),
    pytest.param(
        CreateFieldIndex.from_wire,
        CreateFieldIndex(
            field_name="description",
            field_schema=TextIndexParams(
                type=TextIndexType.TEXT,
                tokenizer=TokenizerType.WORD,
                min_token_len=2,
                max_token_len=20,
                lowercase=True,
            ),
        ),
        id="CreateFieldIndex-text",
    ),
    pytest.param(
        PointsList.from_wire,
        PointsList(
            points=[
                PointStruct(id=1, vector=[0.05, 0.61, 0.76, 0.74], payload={"city": "Berlin", "tags": ["a"]}),
                PointStruct(id="9d5ed678-fe57-4bcc-b81f-3e0e2a0ec0f4", vector={"image": [0.1, 0.2]}),
            ]
        ),
        id="PointsList",
    ),
    pytest.param(decode_points_selector, PointIdsList(points=[1, "a1", 3]), id="PointIdsList"),
    pytest.param(decode_points_selector, FilterSelector(filter=CITY_FILTER), id="FilterSelector"),
    pytest.param(
        SearchRequest.from_wire,
        SearchRequest(
            vector=NamedVector(name="image", vector=[0.2, 0.1, 0.9]),
            limit=3,
            filter=CITY_FILTER,
            params=SearchParams(hnsw_ef=128, exact=False),
            with_payload=PayloadSelectorExclude(exclude=["secret"]),
            with_vector=["image"],
            score_threshold=0.5,
        ),
        id="SearchRequest-named",
    ),
    pytest.param(
        SearchGroupsRequest.from_wire,
        SearchGroupsRequest(
            vector=[0.2, 0.1, 0.9],
            group_by="document_id",
            group_size=2,
            limit=4,
            with_lookup=WithLookup(collection="documents", with_payload=["title"], with_vectors=False),
        ),
        id="SearchGroupsRequest-WithLookup",
    ),
    pytest.param(
        SearchGroupsRequest.from_wire,
        SearchGroupsRequest(vector=[0.2], group_by="document_id", group_size=1, limit=1, with_lookup="documents"),
        id="SearchGroupsRequest-lookup-name",
    ),
    pytest.param(
        RecommendRequest.from_wire,
        RecommendRequest(positive=[100, 231], negative=["718"], limit=10, using="image", offset=5),
        id="RecommendRequest",
    ),
    pytest.param(
        ScrollRequest.from_wire,
        ScrollRequest(offset="b7", limit=20, filter=CITY_FILTER, with_payload=True, with_vector=False),
        id="ScrollRequest",
    ),
]


@pytest.mark.parametrize("decode, value", REQUESTS)
def test_request_round_trip(decode, value):
    decoded = _round_trip(decode, value)
    assert decoded == value
    assert type(decoded) is type(value)


def test_payload_field_schema_variant_survives_round_trip():
    value = CreateFieldIndex(field_name="description", field_schema=TextIndexParams(type=TextIndexType.TEXT))
    assert isinstance(_round_trip(CreateFieldIndex.from_wire, value).field_schema, TextIndexParams)


# --------------------------------------------------------------------------- #
# Responses
# --------------------------------------------------------------------------- #


@pytest.mark.parametrize(
    "decode, sample",
    [
        pytest.param(ScrollResult.from_wire, SCROLL_PAGE, id="ScrollResult"),
        pytest.param(CollectionInfo.from_wire, COLLECTION_INFO, id="CollectionInfo"),
        pytest.param(GroupsResult.from_wire, GROUPS, id="GroupsResult"),
        pytest.param(decode_cluster_status, CLUSTER_DISABLED, id="ClusterStatusDisabled"),
        pytest.param(decode_cluster_status, CLUSTER_ENABLED, id="ClusterStatusEnabled"),
        pytest.param(CollectionClusterInfo.from_wire, COLLECTION_CLUSTER_INFO, id="CollectionClusterInfo"),
    ],
)
def test_response_round_trip(decode, sample):
    value = decode(sample, "$")
    assert _round_trip(decode, value) == value
