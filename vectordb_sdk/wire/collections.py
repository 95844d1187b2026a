# vectordb_sdk/wire/collections.py
# SPDX-License-Identifier: Apache-2.0
"""
Collection configuration, info and alias models.

Configuration blocks come in two flavours:

- `*Diff` request shapes, every field optional; only what is set is sent.
- Full response shapes, as reported by `GET /collections/{name}`.

Unions owned here:

QuantizationConfig   {"scalar": ...}, then {"product": ...}
VectorsConfig        single VectorParams, then name -> VectorParams
PayloadFieldSchema   schema-type string, then text-index params
AliasOperation       create_alias, then delete_alias, then rename_alias
OptimizersStatus     literal "ok", then {"error": msg}
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from vectordb_sdk.core.errors import BadRequest
from vectordb_sdk.wire.codec import (
    WireModel,
    check_non_negative_number,
    check_positive,
    check_unsigned,
    decode_bool,
    decode_enum,
    decode_float,
    decode_literal,
    decode_str,
    decode_uint,
    decode_union,
    list_of,
    map_of,
    wire_field,
)

# =============================================================================
# Enums
# =============================================================================

class Distance(str, Enum):
    COSINE = "Cosine"
    EUCLID = "Euclid"
    DOT = "Dot"


class CollectionStatus(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class ScalarType(str, Enum):
    INT8 = "int8"


class CompressionRatio(str, Enum):
    X4 = "x4"
    X8 = "x8"
    X16 = "x16"
    X32 = "x32"
    X64 = "x64"


class PayloadSchemaType(str, Enum):
    KEYWORD = "keyword"
    INTEGER = "integer"
    FLOAT = "float"
    GEO = "geo"
    TEXT = "text"


class TextIndexType(str, Enum):
    TEXT = "text"


class TokenizerType(str, Enum):
    PREFIX = "prefix"
    WHITESPACE = "whitespace"
    WORD = "word"
    MULTILINGUAL = "multilingual"


# =============================================================================
# HNSW / WAL / optimizers
# =============================================================================

@dataclass(frozen=True)
class HnswConfigDiff(WireModel):
    m: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    ef_construct: Optional[int] = wire_field(decode_uint, default=None, check=check_positive)
    full_scan_threshold: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    max_indexing_threads: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    on_disk: Optional[bool] = wire_field(decode_bool, default=None)
    payload_m: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)


@dataclass(frozen=True)
class HnswConfig(WireModel):
    m: int = wire_field(decode_uint, check=check_unsigned)
    ef_construct: int = wire_field(decode_uint, check=check_unsigned)
    full_scan_threshold: int = wire_field(decode_uint, check=check_unsigned)
    max_indexing_threads: int = wire_field(decode_uint, default=0, check=check_unsigned)
    on_disk: Optional[bool] = wire_field(decode_bool, default=None)
    payload_m: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)


@dataclass(frozen=True)
class WalConfigDiff(WireModel):
    wal_capacity_mb: Optional[int] = wire_field(decode_uint, default=None, check=check_positive)
    wal_segments_ahead: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)


@dataclass(frozen=True)
class WalConfig(WireModel):
    wal_capacity_mb: int = wire_field(decode_uint, check=check_unsigned)
    wal_segments_ahead: int = wire_field(decode_uint, check=check_unsigned)


@dataclass(frozen=True)
class OptimizersConfigDiff(WireModel):
    deleted_threshold: Optional[float] = wire_field(decode_float, default=None, check=check_non_negative_number)
    vacuum_min_vector_number: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    default_segment_number: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    max_segment_size: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    memmap_threshold: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    indexing_threshold: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    flush_interval_sec: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    max_optimization_threads: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)


@dataclass(frozen=True)
class OptimizersConfig(WireModel):
    deleted_threshold: float = wire_field(decode_float)
    vacuum_min_vector_number: int = wire_field(decode_uint)
    default_segment_number: int = wire_field(decode_uint)
    flush_interval_sec: int = wire_field(decode_uint)
    max_optimization_threads: int = wire_field(decode_uint, default=0)
    max_segment_size: Optional[int] = wire_field(decode_uint, default=None)
    memmap_threshold: Optional[int] = wire_field(decode_uint, default=None)
    indexing_threshold: Optional[int] = wire_field(decode_uint, default=None)


# =============================================================================
# Quantization
# =============================================================================

@dataclass(frozen=True)
class ScalarQuantizationConfig(WireModel):
    type: ScalarType = wire_field(decode_enum(ScalarType))
    quantile: Optional[float] = wire_field(decode_float, default=None)
    always_ram: Optional[bool] = wire_field(decode_bool, default=None)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.quantile is not None and not 0.5 <= self.quantile <= 1.0:
            raise BadRequest("quantile must be within [0.5, 1.0]", details={"quantile": self.quantile})


@dataclass(frozen=True)
class ScalarQuantization(WireModel):
    scalar: ScalarQuantizationConfig = wire_field(ScalarQuantizationConfig.from_wire)


@dataclass(frozen=True)
class ProductQuantizationConfig(WireModel):
    compression: CompressionRatio = wire_field(decode_enum(CompressionRatio))
    always_ram: Optional[bool] = wire_field(decode_bool, default=None)


@dataclass(frozen=True)
class ProductQuantization(WireModel):
    product: ProductQuantizationConfig = wire_field(ProductQuantizationConfig.from_wire)


QuantizationConfig = Union[ScalarQuantization, ProductQuantization]


def decode_quantization_config(raw: Any, path: str = "$") -> QuantizationConfig:
    return decode_union(
        "QuantizationConfig",
        raw,
        (
            ("ScalarQuantization", ScalarQuantization.from_wire),
            ("ProductQuantization", ProductQuantization.from_wire),
        ),
        path,
    )


# =============================================================================
# Vector params
# =============================================================================

@dataclass(frozen=True)
class VectorParams(WireModel):
    size: int = wire_field(decode_uint, check=check_positive)
    distance: Distance = wire_field(decode_enum(Distance))
    hnsw_config: Optional[HnswConfigDiff] = wire_field(HnswConfigDiff.from_wire, default=None)
    quantization_config: Optional[QuantizationConfig] = wire_field(decode_quantization_config, default=None)
    on_disk: Optional[bool] = wire_field(decode_bool, default=None)


VectorsConfig = Union[VectorParams, Dict[str, VectorParams]]


def decode_vectors_config(raw: Any, path: str = "$") -> VectorsConfig:
    return decode_union(
        "VectorsConfig",
        raw,
        (
            ("VectorParams", VectorParams.from_wire),
            ("named", map_of(VectorParams.from_wire, target="NamedVectorParams")),
        ),
        path,
    )


# =============================================================================
# Create / update
# =============================================================================

@dataclass(frozen=True)
class InitFrom(WireModel):
    __wire_extra__ = "forbid"

    collection: str = wire_field(decode_str)


@dataclass(frozen=True)
class CreateCollection(WireModel):
    """Body of `PUT /collections/{name}`."""
    __wire_extra__ = "forbid"

    vectors: VectorsConfig = wire_field(decode_vectors_config)
    shard_number: Optional[int] = wire_field(decode_uint, default=None, check=check_positive)
    replication_factor: Optional[int] = wire_field(decode_uint, default=None, check=check_positive)
    write_consistency_factor: Optional[int] = wire_field(decode_uint, default=None, check=check_positive)
    on_disk_payload: Optional[bool] = wire_field(decode_bool, default=None)
    hnsw_config: Optional[HnswConfigDiff] = wire_field(HnswConfigDiff.from_wire, default=None)
    wal_config: Optional[WalConfigDiff] = wire_field(WalConfigDiff.from_wire, default=None)
    optimizers_config: Optional[OptimizersConfigDiff] = wire_field(OptimizersConfigDiff.from_wire, default=None)
    init_from: Optional[InitFrom] = wire_field(InitFrom.from_wire, default=None)
    quantization_config: Optional[QuantizationConfig] = wire_field(decode_quantization_config, default=None)


@dataclass(frozen=True)
class CollectionParamsDiff(WireModel):
    __wire_extra__ = "forbid"

    replication_factor: Optional[int] = wire_field(decode_uint, default=None, check=check_positive)
    write_consistency_factor: Optional[int] = wire_field(decode_uint, default=None, check=check_positive)


@dataclass(frozen=True)
class UpdateCollection(WireModel):
    """Body of `PATCH /collections/{name}`."""
    __wire_extra__ = "forbid"

    optimizers_config: Optional[OptimizersConfigDiff] = wire_field(OptimizersConfigDiff.from_wire, default=None)
    params: Optional[CollectionParamsDiff] = wire_field(CollectionParamsDiff.from_wire, default=None)


# =============================================================================
# Payload indexes
# =============================================================================

@dataclass(frozen=True)
class TextIndexParams(WireModel):
    type: TextIndexType = wire_field(decode_enum(TextIndexType))
    tokenizer: Optional[TokenizerType] = wire_field(decode_enum(TokenizerType), default=None)
    min_token_len: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    max_token_len: Optional[int] = wire_field(decode_uint, default=None, check=check_unsigned)
    lowercase: Optional[bool] = wire_field(decode_bool, default=None)


PayloadFieldSchema = Union[PayloadSchemaType, TextIndexParams]


def decode_payload_field_schema(raw: Any, path: str = "$") -> PayloadFieldSchema:
    return decode_union(
        "PayloadFieldSchema",
        raw,
        (
            ("PayloadSchemaType", decode_enum(PayloadSchemaType)),
            ("TextIndexParams", TextIndexParams.from_wire),
        ),
        path,
    )


@dataclass(frozen=True)
class CreateFieldIndex(WireModel):
    """Body of `PUT /collections/{name}/index`."""
    __wire_extra__ = "forbid"

    field_name: str = wire_field(decode_str)
    field_schema: Optional[PayloadFieldSchema] = wire_field(decode_payload_field_schema, default=None)


@dataclass(frozen=True)
class PayloadIndexInfo(WireModel):
    data_type: PayloadSchemaType = wire_field(decode_enum(PayloadSchemaType))
    params: Optional[TextIndexParams] = wire_field(TextIndexParams.from_wire, default=None)
    points: Optional[int] = wire_field(decode_uint, default=None)


# =============================================================================
# Collection info
# =============================================================================

@dataclass(frozen=True)
class OptimizersStatusError(WireModel):
    error: str = wire_field(decode_str)


OptimizersStatus = Union[str, OptimizersStatusError]

OPTIMIZERS_OK = "ok"


def decode_optimizers_status(raw: Any, path: str = "$") -> OptimizersStatus:
    return decode_union(
        "OptimizersStatus",
        raw,
        (
            ("ok", decode_literal(OPTIMIZERS_OK, target="OptimizersStatus")),
            ("error", OptimizersStatusError.from_wire),
        ),
        path,
    )


@dataclass(frozen=True)
class CollectionParams(WireModel):
    vectors: VectorsConfig = wire_field(decode_vectors_config)
    shard_number: Optional[int] = wire_field(decode_uint, default=None)
    replication_factor: Optional[int] = wire_field(decode_uint, default=None)
    write_consistency_factor: Optional[int] = wire_field(decode_uint, default=None)
    on_disk_payload: Optional[bool] = wire_field(decode_bool, default=None)


@dataclass(frozen=True)
class CollectionConfig(WireModel):
    params: CollectionParams = wire_field(CollectionParams.from_wire)
    hnsw_config: HnswConfig = wire_field(HnswConfig.from_wire)
    optimizer_config: OptimizersConfig = wire_field(OptimizersConfig.from_wire)
    wal_config: WalConfig = wire_field(WalConfig.from_wire)
    quantization_config: Optional[QuantizationConfig] = wire_field(decode_quantization_config, default=None)


@dataclass(frozen=True)
class CollectionInfo(WireModel):
    """Result of `GET /collections/{name}`."""
    status: CollectionStatus = wire_field(decode_enum(CollectionStatus))
    optimizer_status: OptimizersStatus = wire_field(decode_optimizers_status)
    segments_count: int = wire_field(decode_uint)
    config: CollectionConfig = wire_field(CollectionConfig.from_wire)
    vectors_count: Optional[int] = wire_field(decode_uint, default=None)
    indexed_vectors_count: Optional[int] = wire_field(decode_uint, default=None)
    points_count: Optional[int] = wire_field(decode_uint, default=None)
    payload_schema: Dict[str, PayloadIndexInfo] = wire_field(
        map_of(PayloadIndexInfo.from_wire), default_factory=dict
    )


@dataclass(frozen=True)
class CollectionDescription(WireModel):
    name: str = wire_field(decode_str)


@dataclass(frozen=True)
class CollectionsResponse(WireModel):
    """Result of `GET /collections`."""
    collections: List[CollectionDescription] = wire_field(list_of(CollectionDescription.from_wire))

    def names(self) -> List[str]:
        return [c.name for c in self.collections]


# =============================================================================
# Aliases
# =============================================================================

@dataclass(frozen=True)
class CreateAlias(WireModel):
    __wire_extra__ = "forbid"

    collection_name: str = wire_field(decode_str)
    alias_name: str = wire_field(decode_str)


@dataclass(frozen=True)
class CreateAliasOperation(WireModel):
    __wire_extra__ = "forbid"

    create_alias: CreateAlias = wire_field(CreateAlias.from_wire)


@dataclass(frozen=True)
class DeleteAlias(WireModel):
    __wire_extra__ = "forbid"

    alias_name: str = wire_field(decode_str)


@dataclass(frozen=True)
class DeleteAliasOperation(WireModel):
    __wire_extra__ = "forbid"

    delete_alias: DeleteAlias = wire_field(DeleteAlias.from_wire)


@dataclass(frozen=True)
class RenameAlias(WireModel):
    __wire_extra__ = "forbid"

    old_alias_name: str = wire_field(decode_str)
    new_alias_name: str = wire_field(decode_str)


@dataclass(frozen=True)
class RenameAliasOperation(WireModel):
    __wire_extra__ = "forbid"

    rename_alias: RenameAlias = wire_field(RenameAlias.from_wire)


AliasOperation = Union[CreateAliasOperation, DeleteAliasOperation, RenameAliasOperation]


def decode_alias_operation(raw: Any, path: str = "$") -> AliasOperation:
    return decode_union(
        "AliasOperation",
        raw,
        (
            ("CreateAliasOperation", CreateAliasOperation.from_wire),
            ("DeleteAliasOperation", DeleteAliasOperation.from_wire),
            ("RenameAliasOperation", RenameAliasOperation.from_wire),
        ),
        path,
    )


@dataclass(frozen=True)
class ChangeAliasesOperation(WireModel):
    """Body of `POST /collections/aliases`; actions apply atomically in order."""
    __wire_extra__ = "forbid"

    actions: List[AliasOperation] = wire_field(list_of(decode_alias_operation))


@dataclass(frozen=True)
class AliasDescription(WireModel):
    alias_name: str = wire_field(decode_str)
    collection_name: str = wire_field(decode_str)


@dataclass(frozen=True)
class CollectionsAliasesResponse(WireModel):
    """Result of `GET /collections/{name}/aliases`."""
    aliases: List[AliasDescription] = wire_field(list_of(AliasDescription.from_wire))


__all__ = [
    "Distance",
    "CollectionStatus",
    "ScalarType",
    "CompressionRatio",
    "PayloadSchemaType",
    "TextIndexType",
    "TokenizerType",
    "HnswConfigDiff",
    "HnswConfig",
    "WalConfigDiff",
    "WalConfig",
    "OptimizersConfigDiff",
    "OptimizersConfig",
    "ScalarQuantizationConfig",
    "ScalarQuantization",
    "ProductQuantizationConfig",
    "ProductQuantization",
    "QuantizationConfig",
    "decode_quantization_config",
    "VectorParams",
    "VectorsConfig",
    "decode_vectors_config",
    "InitFrom",
    "CreateCollection",
    "CollectionParamsDiff",
    "UpdateCollection",
    "TextIndexParams",
    "PayloadFieldSchema",
    "decode_payload_field_schema",
    "CreateFieldIndex",
    "PayloadIndexInfo",
    "OptimizersStatusError",
    "OptimizersStatus",
    "OPTIMIZERS_OK",
    "decode_optimizers_status",
    "CollectionParams",
    "CollectionConfig",
    "CollectionInfo",
    "CollectionDescription",
    "CollectionsResponse",
    "CreateAlias",
    "CreateAliasOperation",
    "DeleteAlias",
    "DeleteAliasOperation",
    "RenameAlias",
    "RenameAliasOperation",
    "AliasOperation",
    "decode_alias_operation",
    "ChangeAliasesOperation",
    "AliasDescription",
    "CollectionsAliasesResponse",
]
