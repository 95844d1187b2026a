# vectordb_sdk/wire/primitives.py
# SPDX-License-Identifier: Apache-2.0
"""
Identifiers, vectors, payloads and the small selector unions.

These unions have variants that are already distinct Python values, so they
are represented natively (an `ExtendedPointId` is just an `int` or a `str`).
What makes them unions is the decode side: each has one `decode_*` function
that tries its shapes in a fixed order.

Priority orders
---------------
ExtendedPointId       unsigned integer, then string
VectorStruct          flat array, then name -> array
BatchVectorStruct     array of arrays, then name -> array of arrays
NamedVectorStruct     flat array, then {"name", "vector"}
WithPayloadInterface  boolean, then field list, then include/exclude selector
WithVector            boolean, then vector-name list
ReadConsistency       unsigned integer, then named level
ValueVariants         boolean, then integer, then string
AnyVariants           string list, then integer list
GroupId               string, then unsigned integer, then integer
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Union

from vectordb_sdk.core.errors import BadRequest
from vectordb_sdk.wire.codec import (
    WireModel,
    decode_bool,
    decode_enum,
    decode_float,
    decode_int,
    decode_json_value,
    decode_str,
    decode_uint,
    decode_union,
    list_of,
    map_of,
    wire_field,
)

# =============================================================================
# Point identifiers
# =============================================================================

ExtendedPointId = Union[int, str]


def decode_point_id(raw: Any, path: str = "$") -> ExtendedPointId:
    return decode_union(
        "ExtendedPointId",
        raw,
        (("uint", decode_uint), ("str", decode_str)),
        path,
        reason="InvalidPointId",
    )


decode_point_ids = list_of(decode_point_id, target="ExtendedPointId[]")


def check_point_id(name: str, value: Any) -> None:
    """Reject ids the service can never store: bools, negatives, other types."""
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise BadRequest(
            f"{name} must be an unsigned integer or a string",
            details={"field": name, "type": type(value).__name__},
        )
    if isinstance(value, int) and value < 0:
        raise BadRequest(f"{name} must be >= 0", details={"field": name, "value": value})


def check_point_ids(name: str, values: Any) -> None:
    for i, v in enumerate(values):
        check_point_id(f"{name}[{i}]", v)


# =============================================================================
# Vectors
# =============================================================================

VectorStruct = Union[List[float], Dict[str, List[float]]]
BatchVectorStruct = Union[List[List[float]], Dict[str, List[List[float]]]]

decode_dense_vector = list_of(decode_float, target="Vector")


def decode_vector_struct(raw: Any, path: str = "$") -> VectorStruct:
    return decode_union(
        "VectorStruct",
        raw,
        (
            ("vector", decode_dense_vector),
            ("named", map_of(decode_dense_vector, target="NamedVectors")),
        ),
        path,
        reason="InvalidVector",
    )


def decode_batch_vector_struct(raw: Any, path: str = "$") -> BatchVectorStruct:
    vectors = list_of(decode_dense_vector, target="Vectors")
    return decode_union(
        "BatchVectorStruct",
        raw,
        (("vectors", vectors), ("named", map_of(vectors, target="NamedVectors"))),
        path,
        reason="InvalidVector",
    )


@dataclass(frozen=True)
class NamedVector(WireModel):
    """Query vector addressed to one named vector of a multi-vector collection."""
    __wire_extra__ = "forbid"

    name: str = wire_field(decode_str)
    vector: List[float] = wire_field(decode_dense_vector)


NamedVectorStruct = Union[List[float], NamedVector]


def decode_named_vector_struct(raw: Any, path: str = "$") -> NamedVectorStruct:
    return decode_union(
        "NamedVectorStruct",
        raw,
        (("vector", decode_dense_vector), ("named", NamedVector.from_wire)),
        path,
        reason="InvalidVector",
    )


# =============================================================================
# Payload
# =============================================================================

Payload = Dict[str, Any]

decode_payload = map_of(decode_json_value, target="Payload")


@dataclass(frozen=True)
class PayloadSelectorInclude(WireModel):
    __wire_extra__ = "forbid"

    include: List[str] = wire_field(list_of(decode_str))


@dataclass(frozen=True)
class PayloadSelectorExclude(WireModel):
    __wire_extra__ = "forbid"

    exclude: List[str] = wire_field(list_of(decode_str))


PayloadSelector = Union[PayloadSelectorInclude, PayloadSelectorExclude]


def decode_payload_selector(raw: Any, path: str = "$") -> PayloadSelector:
    return decode_union(
        "PayloadSelector",
        raw,
        (
            ("include", PayloadSelectorInclude.from_wire),
            ("exclude", PayloadSelectorExclude.from_wire),
        ),
        path,
    )


WithPayloadInterface = Union[bool, List[str], PayloadSelector]


def decode_with_payload(raw: Any, path: str = "$") -> WithPayloadInterface:
    return decode_union(
        "WithPayloadInterface",
        raw,
        (
            ("bool", decode_bool),
            ("fields", list_of(decode_str)),
            ("selector", decode_payload_selector),
        ),
        path,
    )


WithVector = Union[bool, List[str]]


def decode_with_vector(raw: Any, path: str = "$") -> WithVector:
    return decode_union(
        "WithVector",
        raw,
        (("bool", decode_bool), ("names", list_of(decode_str))),
        path,
    )


# =============================================================================
# Consistency / ordering
# =============================================================================

class ReadConsistencyType(str, Enum):
    MAJORITY = "majority"
    QUORUM = "quorum"
    ALL = "all"


class WriteOrdering(str, Enum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


ReadConsistency = Union[int, ReadConsistencyType]


def decode_read_consistency(raw: Any, path: str = "$") -> ReadConsistency:
    return decode_union(
        "ReadConsistency",
        raw,
        (("uint", decode_uint), ("level", decode_enum(ReadConsistencyType))),
        path,
    )


decode_write_ordering = decode_enum(WriteOrdering)


# =============================================================================
# Match values and group ids
# =============================================================================

ValueVariants = Union[bool, int, str]
AnyVariants = Union[List[str], List[int]]
GroupId = Union[str, int]


def decode_value_variants(raw: Any, path: str = "$") -> ValueVariants:
    return decode_union(
        "ValueVariants",
        raw,
        (("bool", decode_bool), ("int", decode_int), ("str", decode_str)),
        path,
    )


def decode_any_variants(raw: Any, path: str = "$") -> AnyVariants:
    return decode_union(
        "AnyVariants",
        raw,
        (("strings", list_of(decode_str)), ("integers", list_of(decode_int))),
        path,
    )


def decode_group_id(raw: Any, path: str = "$") -> GroupId:
    return decode_union(
        "GroupId",
        raw,
        (("str", decode_str), ("uint", decode_uint), ("int", decode_int)),
        path,
    )


__all__ = [
    "ExtendedPointId",
    "decode_point_id",
    "decode_point_ids",
    "check_point_id",
    "check_point_ids",
    "VectorStruct",
    "BatchVectorStruct",
    "decode_dense_vector",
    "decode_vector_struct",
    "decode_batch_vector_struct",
    "NamedVector",
    "NamedVectorStruct",
    "decode_named_vector_struct",
    "Payload",
    "decode_payload",
    "PayloadSelectorInclude",
    "PayloadSelectorExclude",
    "PayloadSelector",
    "decode_payload_selector",
    "WithPayloadInterface",
    "decode_with_payload",
    "WithVector",
    "decode_with_vector",
    "ReadConsistencyType",
    "WriteOrdering",
    "ReadConsistency",
    "decode_read_consistency",
    "decode_write_ordering",
    "ValueVariants",
    "AnyVariants",
    "GroupId",
    "decode_value_variants",
    "decode_any_variants",
    "decode_group_id",
]
