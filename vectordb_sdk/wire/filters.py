# vectordb_sdk/wire/filters.py
# SPDX-License-Identifier: Apache-2.0
"""
Filters, conditions and match expressions.

A `Filter` holds three optional condition lists (`should`, `must`,
`must_not`). A `Condition` is one of six shapes, one of which is a full
`Filter` again, so filters nest to any depth:

    Filter(must=[
        NestedCondition(nested=Nested(key="a", filter=Filter(must=[
            FieldCondition(key="b", match=MatchValue(value="x")),
        ]))),
    ])

Decoding a condition tries, in order: field, is-empty, is-null, has-id,
nested, filter. Every condition struct rejects unknown keys, so an object is
accepted by exactly the variant whose keys it carries, and `{}` lands on
`Filter`.

`Match` is keyed rather than tried: exactly one of `value`, `text`, `any`,
`except` must be present.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Union

from vectordb_sdk.core.errors import DecodeError
from vectordb_sdk.wire.codec import (
    WireModel,
    check_non_negative_number,
    check_unsigned,
    decode_float,
    decode_str,
    decode_uint,
    decode_union,
    list_of,
    mismatch,
    wire_field,
)
from vectordb_sdk.wire.primitives import (
    AnyVariants,
    ExtendedPointId,
    ValueVariants,
    check_point_ids,
    decode_any_variants,
    decode_point_ids,
    decode_value_variants,
)

# =============================================================================
# Match
# =============================================================================

@dataclass(frozen=True)
class MatchValue(WireModel):
    """Exact match on a keyword, integer or boolean payload value."""
    __wire_extra__ = "forbid"

    value: ValueVariants = wire_field(decode_value_variants)


@dataclass(frozen=True)
class MatchText(WireModel):
    """Full-text match; requires a text index on the field."""
    __wire_extra__ = "forbid"

    text: str = wire_field(decode_str)


@dataclass(frozen=True)
class MatchAny(WireModel):
    """Matches if the payload value equals any of the listed values."""
    __wire_extra__ = "forbid"

    any: AnyVariants = wire_field(decode_any_variants)


@dataclass(frozen=True)
class MatchExcept(WireModel):
    """Matches if the payload value equals none of the listed values."""
    __wire_extra__ = "forbid"

    except_: AnyVariants = wire_field(decode_any_variants, name="except")


Match = Union[MatchValue, MatchText, MatchAny, MatchExcept]

_MATCH_VARIANTS = (
    ("value", MatchValue),
    ("text", MatchText),
    ("any", MatchAny),
    ("except", MatchExcept),
)


def decode_match(raw: Any, path: str = "$") -> Match:
    if not isinstance(raw, dict):
        raise mismatch("Match", "object", raw, path, reason="InvalidMatch")
    present = [key for key, _ in _MATCH_VARIANTS if key in raw]
    if len(present) != 1:
        found = ", ".join(present) if present else "none"
        raise DecodeError(
            f"Match: exactly one of value, text, any, except must be present at {path} (found: {found})",
            target="Match",
            path=path,
            reason="InvalidMatch",
            candidates=[cls.__name__ for _, cls in _MATCH_VARIANTS],
            raw=raw,
        )
    variant = dict(_MATCH_VARIANTS)[present[0]]
    return variant.from_wire(raw, path)


# =============================================================================
# Field condition parts
# =============================================================================

@dataclass(frozen=True)
class Range(WireModel):
    __wire_extra__ = "forbid"

    lt: Optional[float] = wire_field(decode_float, default=None)
    gt: Optional[float] = wire_field(decode_float, default=None)
    gte: Optional[float] = wire_field(decode_float, default=None)
    lte: Optional[float] = wire_field(decode_float, default=None)


@dataclass(frozen=True)
class GeoPoint(WireModel):
    __wire_extra__ = "forbid"

    lon: float = wire_field(decode_float)
    lat: float = wire_field(decode_float)


@dataclass(frozen=True)
class GeoBoundingBox(WireModel):
    __wire_extra__ = "forbid"

    top_left: GeoPoint = wire_field(GeoPoint.from_wire)
    bottom_right: GeoPoint = wire_field(GeoPoint.from_wire)


@dataclass(frozen=True)
class GeoRadius(WireModel):
    """Circle around `center`; `radius` is in meters."""
    __wire_extra__ = "forbid"

    center: GeoPoint = wire_field(GeoPoint.from_wire)
    radius: float = wire_field(decode_float, check=check_non_negative_number)


@dataclass(frozen=True)
class ValuesCount(WireModel):
    """Bounds on the number of values stored under a payload key."""
    __wire_extra__ = "forbid"

    lt: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    gt: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    gte: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    lte: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)


@dataclass(frozen=True)
class PayloadField(WireModel):
    __wire_extra__ = "forbid"

    key: str = wire_field(decode_str)


# =============================================================================
# Conditions
# =============================================================================

@dataclass(frozen=True)
class FieldCondition(WireModel):
    """Condition on a single payload key."""
    __wire_extra__ = "forbid"

    key: str = wire_field(decode_str)
    match: Optional[Match] = wire_field(decode_match, default=None)
    range: Optional[Range] = wire_field(Range.from_wire, default=None)
    geo_bounding_box: Optional[GeoBoundingBox] = wire_field(GeoBoundingBox.from_wire, default=None)
    geo_radius: Optional[GeoRadius] = wire_field(GeoRadius.from_wire, default=None)
    values_count: Optional[ValuesCount] = wire_field(ValuesCount.from_wire, default=None)


@dataclass(frozen=True)
class IsEmptyCondition(WireModel):
    __wire_extra__ = "forbid"

    is_empty: PayloadField = wire_field(PayloadField.from_wire)


@dataclass(frozen=True)
class IsNullCondition(WireModel):
    __wire_extra__ = "forbid"

    is_null: PayloadField = wire_field(PayloadField.from_wire)


@dataclass(frozen=True)
class HasIdCondition(WireModel):
    __wire_extra__ = "forbid"

    has_id: List[ExtendedPointId] = wire_field(decode_point_ids, check=check_point_ids)


@dataclass(frozen=True)
class Nested(WireModel):
    """Applies `filter` to every element of the array stored under `key`."""
    __wire_extra__ = "forbid"

    key: str = wire_field(decode_str)
    filter: "Filter" = wire_field(lambda raw, path: Filter.from_wire(raw, path))


@dataclass(frozen=True)
class NestedCondition(WireModel):
    __wire_extra__ = "forbid"

    nested: Nested = wire_field(Nested.from_wire)


def _decode_conditions(raw: Any, path: str) -> List["Condition"]:
    return list_of(decode_condition, target="Condition[]")(raw, path)


@dataclass(frozen=True)
class Filter(WireModel):
    """
    Boolean combination of conditions.

    - should: at least one must hold
    - must: all must hold
    - must_not: none may hold
    """
    __wire_extra__ = "forbid"

    should: Optional[List["Condition"]] = wire_field(_decode_conditions, default=None)
    must: Optional[List["Condition"]] = wire_field(_decode_conditions, default=None)
    must_not: Optional[List["Condition"]] = wire_field(_decode_conditions, default=None)


Condition = Union[
    FieldCondition,
    IsEmptyCondition,
    IsNullCondition,
    HasIdCondition,
    NestedCondition,
    Filter,
]

_CONDITION_CANDIDATES = (
    ("FieldCondition", FieldCondition.from_wire),
    ("IsEmptyCondition", IsEmptyCondition.from_wire),
    ("IsNullCondition", IsNullCondition.from_wire),
    ("HasIdCondition", HasIdCondition.from_wire),
    ("NestedCondition", NestedCondition.from_wire),
    ("Filter", Filter.from_wire),
)


def decode_condition(raw: Any, path: str = "$") -> Condition:
    return decode_union("Condition", raw, _CONDITION_CANDIDATES, path)


def decode_filter(raw: Any, path: str = "$") -> Filter:
    return Filter.from_wire(raw, path)


__all__ = [
    "MatchValue",
    "MatchText",
    "MatchAny",
    "MatchExcept",
    "Match",
    "decode_match",
    "Range",
    "GeoPoint",
    "GeoBoundingBox",
    "GeoRadius",
    "ValuesCount",
    "PayloadField",
    "FieldCondition",
    "IsEmptyCondition",
    "IsNullCondition",
    "HasIdCondition",
    "Nested",
    "NestedCondition",
    "Filter",
    "Condition",
    "decode_condition",
    "decode_filter",
]
