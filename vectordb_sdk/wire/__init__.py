# vectordb_sdk/wire/__init__.py
# SPDX-License-Identifier: Apache-2.0

"""
Wire Model - public API

Request/response types for the vector database REST API, their union
decoders and the response envelope. Everything here is a pure function of
the bytes: no I/O, no shared codec state.
"""

from vectordb_sdk.wire.codec import (
    JSON,
    WireModel,
    decode_union,
    dumps,
    encode_value,
    loads,
    wire_field,
)
from vectordb_sdk.wire.primitives import (
    # Identifiers
    ExtendedPointId,
    decode_point_id,
    decode_point_ids,
    # Vectors
    VectorStruct,
    BatchVectorStruct,
    NamedVector,
    NamedVectorStruct,
    decode_vector_struct,
    decode_batch_vector_struct,
    decode_named_vector_struct,
    # Payload and selectors
    Payload,
    PayloadSelector,
    PayloadSelectorInclude,
    PayloadSelectorExclude,
    WithPayloadInterface,
    WithVector,
    decode_payload,
    decode_payload_selector,
    decode_with_payload,
    decode_with_vector,
    # Consistency / ordering
    ReadConsistency,
    ReadConsistencyType,
    WriteOrdering,
    decode_read_consistency,
    decode_write_ordering,
    # Match values
    ValueVariants,
    AnyVariants,
    GroupId,
    decode_value_variants,
    decode_any_variants,
    decode_group_id,
)
from vectordb_sdk.wire.filters import (
    Match,
    MatchValue,
    MatchText,
    MatchAny,
    MatchExcept,
    decode_match,
    Range,
    GeoPoint,
    GeoBoundingBox,
    GeoRadius,
    ValuesCount,
    PayloadField,
    Condition,
    FieldCondition,
    IsEmptyCondition,
    IsNullCondition,
    HasIdCondition,
    Nested,
    NestedCondition,
    Filter,
    decode_condition,
    decode_filter,
)
from vectordb_sdk.wire.collections import (
    # Enums
    Distance,
    CollectionStatus,
    ScalarType,
    CompressionRatio,
    PayloadSchemaType,
    TextIndexType,
    TokenizerType,
    # Config blocks
    HnswConfigDiff,
    HnswConfig,
    WalConfigDiff,
    WalConfig,
    OptimizersConfigDiff,
    OptimizersConfig,
    # Quantization
    QuantizationConfig,
    ScalarQuantization,
    ScalarQuantizationConfig,
    ProductQuantization,
    ProductQuantizationConfig,
    decode_quantization_config,
    # Vectors config
    VectorParams,
    VectorsConfig,
    decode_vectors_config,
    # Requests
    InitFrom,
    CreateCollection,
    CollectionParamsDiff,
    UpdateCollection,
    TextIndexParams,
    PayloadFieldSchema,
    decode_payload_field_schema,
    CreateFieldIndex,
    # Info
    PayloadIndexInfo,
    OptimizersStatus,
    OptimizersStatusError,
    decode_optimizers_status,
    CollectionParams,
    CollectionConfig,
    CollectionInfo,
    CollectionDescription,
    CollectionsResponse,
    # Aliases
    AliasOperation,
    CreateAlias,
    CreateAliasOperation,
    DeleteAlias,
    DeleteAliasOperation,
    RenameAlias,
    RenameAliasOperation,
    decode_alias_operation,
    ChangeAliasesOperation,
    AliasDescription,
    CollectionsAliasesResponse,
)
from vectordb_sdk.wire.points import (
    UpdateStatus,
    UpdateResult,
    # Upsert
    PointStruct,
    Batch,
    PointsBatch,
    PointsList,
    PointInsertOperations,
    decode_point_insert_operations,
    # Selectors
    PointIdsList,
    FilterSelector,
    PointsSelector,
    decode_points_selector,
    # Retrieval
    PointRequest,
    Record,
    ScrollRequest,
    ScrollResult,
    CountRequest,
    CountResult,
    # Search / recommend
    SearchParams,
    QuantizationSearchParams,
    SearchRequest,
    SearchRequestBatch,
    ScoredPoint,
    decode_scored_points,
    LookupLocation,
    RecommendRequest,
    RecommendRequestBatch,
    # Groups
    WithLookup,
    WithLookupInterface,
    decode_with_lookup,
    SearchGroupsRequest,
    RecommendGroupsRequest,
    PointGroup,
    GroupsResult,
    # Payload / vectors
    SetPayload,
    DeletePayload,
    PointVectors,
    UpdateVectors,
    DeleteVectors,
)
from vectordb_sdk.wire.cluster import (
    StateRole,
    ConsensusThreadStatusValue,
    ReplicaState,
    PeerInfo,
    RaftInfo,
    ConsensusThreadStatus,
    MessageSendErrors,
    ClusterStatus,
    ClusterStatusDisabled,
    ClusterStatusEnabled,
    decode_cluster_status,
    LocalShardInfo,
    RemoteShardInfo,
    ShardTransferInfo,
    CollectionClusterInfo,
)
from vectordb_sdk.wire.envelope import (
    Envelope,
    EnvelopeStatus,
    StatusError,
    decode_envelope,
    decode_result,
    decode_status,
)

__all__ = [
    "JSON", "WireModel", "decode_union", "dumps", "encode_value", "loads", "wire_field",
    "ExtendedPointId", "decode_point_id", "decode_point_ids",
    "VectorStruct", "BatchVectorStruct", "NamedVector", "NamedVectorStruct",
    "decode_vector_struct", "decode_batch_vector_struct", "decode_named_vector_struct",
    "Payload", "PayloadSelector", "PayloadSelectorInclude", "PayloadSelectorExclude",
    "WithPayloadInterface", "WithVector", "decode_payload", "decode_payload_selector",
    "decode_with_payload", "decode_with_vector",
    "ReadConsistency", "ReadConsistencyType", "WriteOrdering", "decode_read_consistency",
    "decode_write_ordering",
    "ValueVariants", "AnyVariants", "GroupId",
    "decode_value_variants", "decode_any_variants", "decode_group_id",
    "Match", "MatchValue", "MatchText", "MatchAny", "MatchExcept", "decode_match",
    "Range", "GeoPoint", "GeoBoundingBox", "GeoRadius", "ValuesCount", "PayloadField",
    "Condition", "FieldCondition", "IsEmptyCondition", "IsNullCondition", "HasIdCondition",
    "Nested", "NestedCondition", "Filter", "decode_condition", "decode_filter",
    "Distance", "CollectionStatus", "ScalarType", "CompressionRatio", "PayloadSchemaType",
    "TextIndexType", "TokenizerType",
    "HnswConfigDiff", "HnswConfig", "WalConfigDiff", "WalConfig",
    "OptimizersConfigDiff", "OptimizersConfig",
    "QuantizationConfig", "ScalarQuantization", "ScalarQuantizationConfig",
    "ProductQuantization", "ProductQuantizationConfig", "decode_quantization_config",
    "VectorParams", "VectorsConfig", "decode_vectors_config",
    "InitFrom", "CreateCollection", "CollectionParamsDiff", "UpdateCollection",
    "TextIndexParams", "PayloadFieldSchema", "decode_payload_field_schema", "CreateFieldIndex",
    "PayloadIndexInfo", "OptimizersStatus", "OptimizersStatusError", "decode_optimizers_status",
    "CollectionParams", "CollectionConfig", "CollectionInfo",
    "CollectionDescription", "CollectionsResponse",
    "AliasOperation", "CreateAlias", "CreateAliasOperation", "DeleteAlias",
    "DeleteAliasOperation", "RenameAlias", "RenameAliasOperation", "decode_alias_operation",
    "ChangeAliasesOperation", "AliasDescription", "CollectionsAliasesResponse",
    "UpdateStatus", "UpdateResult",
    "PointStruct", "Batch", "PointsBatch", "PointsList",
    "PointInsertOperations", "decode_point_insert_operations",
    "PointIdsList", "FilterSelector", "PointsSelector", "decode_points_selector",
    "PointRequest", "Record", "ScrollRequest", "ScrollResult", "CountRequest", "CountResult",
    "SearchParams", "QuantizationSearchParams", "SearchRequest", "SearchRequestBatch",
    "ScoredPoint", "decode_scored_points", "LookupLocation", "RecommendRequest", "RecommendRequestBatch",
    "WithLookup", "WithLookupInterface", "decode_with_lookup",
    "SearchGroupsRequest", "RecommendGroupsRequest", "PointGroup", "GroupsResult",
    "SetPayload", "DeletePayload", "PointVectors", "UpdateVectors", "DeleteVectors",
    "StateRole", "ConsensusThreadStatusValue", "ReplicaState", "PeerInfo", "RaftInfo",
    "ConsensusThreadStatus", "MessageSendErrors",
    "ClusterStatus", "ClusterStatusDisabled", "ClusterStatusEnabled", "decode_cluster_status",
    "LocalShardInfo", "RemoteShardInfo", "ShardTransferInfo", "CollectionClusterInfo",
    "Envelope", "EnvelopeStatus", "StatusError",
    "decode_envelope", "decode_result", "decode_status",
]
