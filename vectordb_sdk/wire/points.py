# vectordb_sdk/wire/points.py
# SPDX-License-Identifier: Apache-2.0
"""
Point, search, recommend, payload and vector request/response models.

Unions owned here:

PointInsertOperations  {"batch": ...}, then {"points": [...]}
PointsSelector         {"points": [...]}, then {"filter": {...}}
WithLookupInterface    collection name, then WithLookup object
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Union

from vectordb_sdk.core.errors import BadRequest
from vectordb_sdk.wire.codec import (
    WireModel,
    check_non_negative_number,
    check_positive,
    check_unsigned,
    decode_bool,
    decode_enum,
    decode_float,
    decode_str,
    decode_uint,
    decode_union,
    list_of,
    wire_field,
)
from vectordb_sdk.wire.filters import Filter
from vectordb_sdk.wire.primitives import (
    BatchVectorStruct,
    ExtendedPointId,
    GroupId,
    NamedVectorStruct,
    Payload,
    VectorStruct,
    WithPayloadInterface,
    WithVector,
    check_point_id,
    check_point_ids,
    decode_batch_vector_struct,
    decode_group_id,
    decode_named_vector_struct,
    decode_payload,
    decode_point_id,
    decode_point_ids,
    decode_vector_struct,
    decode_with_payload,
    decode_with_vector,
)

_decode_filter = Filter.from_wire


class UpdateStatus(str, Enum):
    ACKNOWLEDGED = "acknowledged"
    COMPLETED = "completed"


# =============================================================================
# Upsert
# =============================================================================

@dataclass(frozen=True)
class PointStruct(WireModel):
    __wire_extra__ = "forbid"

    id: ExtendedPointId = wire_field(decode_point_id, check=check_point_id)
    vector: VectorStruct = wire_field(decode_vector_struct)
    payload: Optional[Payload] = wire_field(decode_payload, default=None)


def _decode_optional_payloads(raw: Any, path: str = "$") -> List[Optional[Payload]]:
    return list_of(lambda item, p: None if item is None else decode_payload(item, p))(raw, path)


@dataclass(frozen=True)
class Batch(WireModel):
    """Column-oriented upsert: `ids[i]` gets `vectors[i]` and `payloads[i]`."""
    __wire_extra__ = "forbid"

    ids: List[ExtendedPointId] = wire_field(decode_point_ids, check=check_point_ids)
    vectors: BatchVectorStruct = wire_field(decode_batch_vector_struct)
    payloads: Optional[List[Optional[Payload]]] = wire_field(_decode_optional_payloads, default=None)

    def __post_init__(self) -> None:
        super().__post_init__()
        n = len(self.ids)
        columns = self.vectors.values() if isinstance(self.vectors, dict) else [self.vectors]
        for column in columns:
            if len(column) != n:
                raise BadRequest(
                    "batch vectors must have one entry per id",
                    details={"ids": n, "vectors": len(column)},
                )
        if self.payloads is not None and len(self.payloads) != n:
            raise BadRequest(
                "batch payloads must have one entry per id",
                details={"ids": n, "payloads": len(self.payloads)},
            )


@dataclass(frozen=True)
class PointsBatch(WireModel):
    __wire_extra__ = "forbid"

    batch: Batch = wire_field(Batch.from_wire)


@dataclass(frozen=True)
class PointsList(WireModel):
    __wire_extra__ = "forbid"

    points: List[PointStruct] = wire_field(list_of(PointStruct.from_wire))


PointInsertOperations = Union[PointsBatch, PointsList]


def decode_point_insert_operations(raw: Any, path: str = "$") -> PointInsertOperations:
    return decode_union(
        "PointInsertOperations",
        raw,
        (("PointsBatch", PointsBatch.from_wire), ("PointsList", PointsList.from_wire)),
        path,
    )


# =============================================================================
# Selectors
# =============================================================================

@dataclass(frozen=True)
class PointIdsList(WireModel):
    __wire_extra__ = "forbid"

    points: List[ExtendedPointId] = wire_field(decode_point_ids, check=check_point_ids)


@dataclass(frozen=True)
class FilterSelector(WireModel):
    __wire_extra__ = "forbid"

    filter: Filter = wire_field(_decode_filter)


PointsSelector = Union[PointIdsList, FilterSelector]


def decode_points_selector(raw: Any, path: str = "$") -> PointsSelector:
    return decode_union(
        "PointsSelector",
        raw,
        (("PointIdsList", PointIdsList.from_wire), ("FilterSelector", FilterSelector.from_wire)),
        path,
    )


# =============================================================================
# Retrieval
# =============================================================================

@dataclass(frozen=True)
class PointRequest(WireModel):
    """Body of `POST /collections/{name}/points`."""
    __wire_extra__ = "forbid"

    ids: List[ExtendedPointId] = wire_field(decode_point_ids, check=check_point_ids)
    with_payload: Optional[WithPayloadInterface] = wire_field(decode_with_payload, default=None)
    with_vector: Optional[WithVector] = wire_field(decode_with_vector, default=None)


@dataclass(frozen=True)
class Record(WireModel):
    id: ExtendedPointId = wire_field(decode_point_id)
    payload: Optional[Payload] = wire_field(decode_payload, default=None)
    vector: Optional[VectorStruct] = wire_field(decode_vector_struct, default=None)


@dataclass(frozen=True)
class ScrollRequest(WireModel):
    __wire_extra__ = "forbid"

    offset: Optional[ExtendedPointId] = wire_field(decode_point_id, default=None, check=check_point_id)
    limit: Optional[int] = wire_field(decode_uint, default=None, check=check_positive)
    filter: Optional[Filter] = wire_field(_decode_filter, default=None)
    with_payload: Optional[WithPayloadInterface] = wire_field(decode_with_payload, default=None)
    with_vector: Optional[WithVector] = wire_field(decode_with_vector, default=None)


@dataclass(frozen=True)
class ScrollResult(WireModel):
    points: List[Record] = wire_field(list_of(Record.from_wire))
    next_page_offset: Optional[ExtendedPointId] = wire_field(decode_point_id, default=None)


@dataclass(frozen=True)
class CountRequest(WireModel):
    __wire_extra__ = "forbid"

    filter: Optional[Filter] = wire_field(_decode_filter, default=None)
    exact: Optional[bool] = wire_field(decode_bool, default=None)


@dataclass(frozen=True)
class CountResult(WireModel):
    count: int = wire_field(decode_uint)


# =============================================================================
# Search / recommend
# =============================================================================

@dataclass(frozen=True)
class QuantizationSearchParams(WireModel):
    __wire_extra__ = "forbid"

    ignore: Optional[bool] = wire_field(decode_bool, default=None)
    rescore: Optional[bool] = wire_field(decode_bool, default=None)
    oversampling: Optional[float] = wire_field(decode_float, default=None, check=check_non_negative_number)


@dataclass(frozen=True)
class SearchParams(WireModel):
    __wire_extra__ = "forbid"

    hnsw_ef: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    exact: Optional[bool] = wire_field(decode_bool, default=None)
    quantization: Optional[QuantizationSearchParams] = wire_field(QuantizationSearchParams.from_wire, default=None)


@dataclass(frozen=True)
class SearchRequest(WireModel):
    __wire_extra__ = "forbid"

    vector: NamedVectorStruct = wire_field(decode_named_vector_struct)
    limit: int = wire_field(decode_uint, check=check_unsigned)
    filter: Optional[Filter] = wire_field(_decode_filter, default=None)
    params: Optional[SearchParams] = wire_field(SearchParams.from_wire, default=None)
    offset: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    with_payload: Optional[WithPayloadInterface] = wire_field(decode_with_payload, default=None)
    with_vector: Optional[WithVector] = wire_field(decode_with_vector, default=None)
    score_threshold: Optional[float] = wire_field(decode_float, default=None)


@dataclass(frozen=True)
class SearchRequestBatch(WireModel):
    __wire_extra__ = "forbid"

    searches: List[SearchRequest] = wire_field(list_of(SearchRequest.from_wire))


@dataclass(frozen=True)
class ScoredPoint(WireModel):
    id: ExtendedPointId = wire_field(decode_point_id)
    version: int = wire_field(decode_uint)
    score: float = wire_field(decode_float)
    payload: Optional[Payload] = wire_field(decode_payload, default=None)
    vector: Optional[VectorStruct] = wire_field(decode_vector_struct, default=None)


decode_scored_points = list_of(ScoredPoint.from_wire, target="ScoredPoint[]")


@dataclass(frozen=True)
class LookupLocation(WireModel):
    """Take recommend examples from another collection (and optionally vector name)."""
    __wire_extra__ = "forbid"

    collection: str = wire_field(decode_str)
    vector: Optional[str] = wire_field(decode_str, default=None)


@dataclass(frozen=True)
class RecommendRequest(WireModel):
    __wire_extra__ = "forbid"

    positive: List[ExtendedPointId] = wire_field(decode_point_ids, check=check_point_ids)
    limit: int = wire_field(decode_uint, check=check_unsigned)
    negative: Optional[List[ExtendedPointId]] = wire_field(decode_point_ids, default=None, check=check_point_ids)
    filter: Optional[Filter] = wire_field(_decode_filter, default=None)
    params: Optional[SearchParams] = wire_field(SearchParams.from_wire, default=None)
    offset: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    with_payload: Optional[WithPayloadInterface] = wire_field(decode_with_payload, default=None)
    with_vector: Optional[WithVector] = wire_field(decode_with_vector, default=None)
    score_threshold: Optional[float] = wire_field(decode_float, default=None)
    using: Optional[str] = wire_field(decode_str, default=None)
    lookup_from: Optional[LookupLocation] = wire_field(LookupLocation.from_wire, default=None)


@dataclass(frozen=True)
class RecommendRequestBatch(WireModel):
    __wire_extra__ = "forbid"

    searches: List[RecommendRequest] = wire_field(list_of(RecommendRequest.from_wire))


# =============================================================================
# Groups
# =============================================================================

@dataclass(frozen=True)
class WithLookup(WireModel):
    __wire_extra__ = "forbid"

    collection: str = wire_field(decode_str)
    with_payload: Optional[WithPayloadInterface] = wire_field(decode_with_payload, default=None)
    with_vectors: Optional[WithVector] = wire_field(decode_with_vector, default=None)


WithLookupInterface = Union[str, WithLookup]


def decode_with_lookup(raw: Any, path: str = "$") -> WithLookupInterface:
    return decode_union(
        "WithLookupInterface",
        raw,
        (("collection", decode_str), ("WithLookup", WithLookup.from_wire)),
        path,
    )


@dataclass(frozen=True)
class SearchGroupsRequest(WireModel):
    __wire_extra__ = "forbid"

    vector: NamedVectorStruct = wire_field(decode_named_vector_struct)
    group_by: str = wire_field(decode_str)
    group_size: int = wire_field(decode_uint, check=check_positive)
    limit: int = wire_field(decode_uint, check=check_positive)
    filter: Optional[Filter] = wire_field(_decode_filter, default=None)
    params: Optional[SearchParams] = wire_field(SearchParams.from_wire, default=None)
    with_payload: Optional[WithPayloadInterface] = wire_field(decode_with_payload, default=None)
    with_vector: Optional[WithVector] = wire_field(decode_with_vector, default=None)
    score_threshold: Optional[float] = wire_field(decode_float, default=None)
    with_lookup: Optional[WithLookupInterface] = wire_field(decode_with_lookup, default=None)


@dataclass(frozen=True)
class RecommendGroupsRequest(WireModel):
    __wire_extra__ = "forbid"

    positive: List[ExtendedPointId] = wire_field(decode_point_ids, check=check_point_ids)
    group_by: str = wire_field(decode_str)
    group_size: int = wire_field(decode_uint, check=check_positive)
    limit: int = wire_field(decode_uint, check=check_positive)
    negative: Optional[List[ExtendedPointId]] = wire_field(decode_point_ids, default=None, check=check_point_ids)
    filter: Optional[Filter] = wire_field(_decode_filter, default=None)
    params: Optional[SearchParams] = wire_field(SearchParams.from_wire, default=None)
    with_payload: Optional[WithPayloadInterface] = wire_field(decode_with_payload, default=None)
    with_vector: Optional[WithVector] = wire_field(decode_with_vector, default=None)
    score_threshold: Optional[float] = wire_field(decode_float, default=None)
    using: Optional[str] = wire_field(decode_str, default=None)
    lookup_from: Optional[LookupLocation] = wire_field(LookupLocation.from_wire, default=None)
    with_lookup: Optional[WithLookupInterface] = wire_field(decode_with_lookup, default=None)


@dataclass(frozen=True)
class PointGroup(WireModel):
    id: GroupId = wire_field(decode_group_id)
    hits: List[ScoredPoint] = wire_field(decode_scored_points)
    lookup: Optional[Record] = wire_field(Record.from_wire, default=None)


@dataclass(frozen=True)
class GroupsResult(WireModel):
    groups: List[PointGroup] = wire_field(list_of(PointGroup.from_wire))


# =============================================================================
# Write results
# =============================================================================

@dataclass(frozen=True)
class UpdateResult(WireModel):
    status: UpdateStatus = wire_field(decode_enum(UpdateStatus))
    operation_id: Optional[int] = wire_field(decode_uint, default=None)


# =============================================================================
# Payload / vector mutation
# =============================================================================

@dataclass(frozen=True)
class SetPayload(WireModel):
    """Body of the payload set/overwrite calls; target by ids or by filter."""
    __wire_extra__ = "forbid"

    payload: Payload = wire_field(decode_payload)
    points: Optional[List[ExtendedPointId]] = wire_field(decode_point_ids, default=None, check=check_point_ids)
    filter: Optional[Filter] = wire_field(_decode_filter, default=None)


@dataclass(frozen=True)
class DeletePayload(WireModel):
    __wire_extra__ = "forbid"

    keys: List[str] = wire_field(list_of(decode_str))
    points: Optional[List[ExtendedPointId]] = wire_field(decode_point_ids, default=None, check=check_point_ids)
    filter: Optional[Filter] = wire_field(_decode_filter, default=None)


@dataclass(frozen=True)
class PointVectors(WireModel):
    __wire_extra__ = "forbid"

    id: ExtendedPointId = wire_field(decode_point_id, check=check_point_id)
    vector: VectorStruct = wire_field(decode_vector_struct)


@dataclass(frozen=True)
class UpdateVectors(WireModel):
    __wire_extra__ = "forbid"

    points: List[PointVectors] = wire_field(list_of(PointVectors.from_wire))


@dataclass(frozen=True)
class DeleteVectors(WireModel):
    """Drop the named vectors in `vector` from the selected points."""
    __wire_extra__ = "forbid"

    vector: List[str] = wire_field(list_of(decode_str))
    points: Optional[List[ExtendedPointId]] = wire_field(decode_point_ids, default=None, check=check_point_ids)
    filter: Optional[Filter] = wire_field(_decode_filter, default=None)


__all__ = [
    "UpdateStatus",
    "PointStruct",
    "Batch",
    "PointsBatch",
    "PointsList",
    "PointInsertOperations",
    "decode_point_insert_operations",
    "PointIdsList",
    "FilterSelector",
    "PointsSelector",
    "decode_points_selector",
    "PointRequest",
    "Record",
    "ScrollRequest",
    "ScrollResult",
    "CountRequest",
    "CountResult",
    "QuantizationSearchParams",
    "SearchParams",
    "SearchRequest",
    "SearchRequestBatch",
    "ScoredPoint",
    "decode_scored_points",
    "LookupLocation",
    "RecommendRequest",
    "RecommendRequestBatch",
    "WithLookup",
    "WithLookupInterface",
    "decode_with_lookup",
    "SearchGroupsRequest",
    "RecommendGroupsRequest",
    "PointGroup",
    "GroupsResult",
    "UpdateResult",
    "SetPayload",
    "DeletePayload",
    "PointVectors",
    "UpdateVectors",
    "DeleteVectors",
]
