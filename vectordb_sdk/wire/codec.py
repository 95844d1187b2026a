# vectordb_sdk/wire/codec.py
# SPDX-License-Identifier: Apache-2.0
"""
Codec primitives for the wire model.

Every wire type is decoded by a *decoder*: a plain function
`(raw, path) -> value` that either returns a Python value or raises
`DecodeError` naming the target type, the JSON path and the offending raw
value. Decoders compose (`list_of`, `map_of`) and struct types get one for
free through `WireModel.from_wire`.

Encoding goes the other way through `encode_value()`, which understands wire
structs, enums, lists, string-keyed dicts and finite JSON scalars. Anything
else is an `EncodeError`.

Tagged unions are decoded by `decode_union()`, which tries candidate decoders
in the order given and commits to the first one that succeeds. That order is
the contract: callers must list candidates from most to least specific.

The module is stateless. There are no shared encoder/decoder instances and no
process-wide settings.
"""

from __future__ import annotations

import json
import math
from dataclasses import MISSING, field, fields
from enum import Enum
from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    List,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
)

from vectordb_sdk.core.errors import BadRequest, DecodeError, EncodeError

JSON = Any
Decoder = Callable[[Any, str], Any]
Check = Callable[[str, Any], None]

T = TypeVar("T")
M = TypeVar("M", bound="WireModel")
E = TypeVar("E", bound=Enum)


# =============================================================================
# Helpers
# =============================================================================

def json_kind(raw: Any) -> str:
    """JSON type name of a decoded value, for error messages."""
    if raw is None:
        return "null"
    if isinstance(raw, bool):
        return "boolean"
    if isinstance(raw, int):
        return "integer"
    if isinstance(raw, float):
        return "number"
    if isinstance(raw, str):
        return "string"
    if isinstance(raw, list):
        return "array"
    if isinstance(raw, dict):
        return "object"
    return type(raw).__name__


def mismatch(target: str, expected: str, raw: Any, path: str, *, reason: str = "TypeMismatch") -> DecodeError:
    return DecodeError(
        f"{target}: expected {expected} at {path}, got {json_kind(raw)}",
        target=target,
        path=path,
        reason=reason,
        raw=raw,
    )


# =============================================================================
# Scalar decoders
# =============================================================================

def decode_str(raw: Any, path: str = "$") -> str:
    if not isinstance(raw, str):
        raise mismatch("str", "string", raw, path)
    return raw


def decode_bool(raw: Any, path: str = "$") -> bool:
    if not isinstance(raw, bool):
        raise mismatch("bool", "boolean", raw, path)
    return raw


def decode_int(raw: Any, path: str = "$") -> int:
    # bool is an int subclass in Python but never an integer on the wire
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise mismatch("int", "integer", raw, path)
    return raw


def decode_uint(raw: Any, path: str = "$") -> int:
    value = decode_int(raw, path)
    if value < 0:
        raise DecodeError(
            f"uint: expected non-negative integer at {path}, got {value}",
            target="uint",
            path=path,
            reason="NegativeValue",
            raw=raw,
        )
    return value


def decode_float(raw: Any, path: str = "$") -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise mismatch("float", "number", raw, path)
    try:
        value = float(raw)
    except OverflowError:
        value = math.inf
    if not math.isfinite(value):
        raise DecodeError(
            f"float: expected finite number at {path}, got {raw!r}",
            target="float",
            path=path,
            reason="NonFiniteNumber",
            raw=raw,
        )
    return value


def decode_json_value(raw: Any, path: str = "$") -> JSON:
    """Validate an arbitrary JSON value (payload content) and return it unchanged."""
    if raw is None or isinstance(raw, (bool, int, str)):
        return raw
    if isinstance(raw, float):
        if not math.isfinite(raw):
            raise mismatch("JsonValue", "finite number", raw, path)
        return raw
    if isinstance(raw, list):
        return [decode_json_value(v, f"{path}[{i}]") for i, v in enumerate(raw)]
    if isinstance(raw, dict):
        out: Dict[str, Any] = {}
        for k, v in raw.items():
            if not isinstance(k, str):
                raise mismatch("JsonValue", "string key", k, path)
            out[k] = decode_json_value(v, f"{path}.{k}")
        return out
    raise mismatch("JsonValue", "JSON value", raw, path)


# =============================================================================
# Combinators
# =============================================================================

def list_of(item: Decoder, *, target: str = "list") -> Decoder:
    def decode(raw: Any, path: str = "$") -> List[Any]:
        if not isinstance(raw, list):
            raise mismatch(target, "array", raw, path)
        return [item(v, f"{path}[{i}]") for i, v in enumerate(raw)]
    return decode


def map_of(value: Decoder, *, target: str = "map") -> Decoder:
    def decode(raw: Any, path: str = "$") -> Dict[str, Any]:
        if not isinstance(raw, dict):
            raise mismatch(target, "object", raw, path)
        return {k: value(v, f"{path}.{k}") for k, v in raw.items()}
    return decode


def decode_literal(value: str, *, target: str = "Literal") -> Decoder:
    """Accepts exactly the string `value`."""
    def decode(raw: Any, path: str = "$") -> str:
        if raw != value or not isinstance(raw, str):
            raise DecodeError(
                f"{target}: expected {value!r} at {path}, got {raw!r}",
                target=target,
                path=path,
                reason="UnknownVariant",
                raw=raw,
            )
        return value
    return decode


def decode_enum(enum_cls: Type[E]) -> Callable[[Any, str], E]:
    def decode(raw: Any, path: str = "$") -> E:
        if not isinstance(raw, str):
            raise mismatch(enum_cls.__name__, "string", raw, path)
        try:
            return enum_cls(raw)
        except ValueError:
            allowed = ", ".join(m.value for m in enum_cls)
            raise DecodeError(
                f"{enum_cls.__name__}: unknown variant {raw!r} at {path} (allowed: {allowed})",
                target=enum_cls.__name__,
                path=path,
                reason="UnknownVariant",
                raw=raw,
            ) from None
    return decode


def decode_union(
    name: str,
    raw: Any,
    candidates: Sequence[Tuple[str, Decoder]],
    path: str = "$",
    *,
    reason: Optional[str] = None,
) -> Any:
    """
    Decode a tagged union by trying `candidates` in priority order.

    The first decoder that does not raise `DecodeError` wins. When all of them
    fail, the raised error names the union, the candidates in the order they
    were tried and why each one was rejected.
    """
    failures: List[str] = []
    for label, decoder in candidates:
        try:
            return decoder(raw, path)
        except DecodeError as e:
            failures.append(f"{label}: {e.message}")
    labels = [label for label, _ in candidates]
    raise DecodeError(
        f"{name}: no variant matched at {path} (tried {', '.join(labels)})",
        target=name,
        path=path,
        reason=reason or f"Invalid{name}",
        candidates=labels,
        raw=raw,
        details={"failures": failures},
    )


# =============================================================================
# Construction-time checks
# =============================================================================

def check_unsigned(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadRequest(f"{name} must be an integer", details={"field": name})
    if value < 0:
        raise BadRequest(f"{name} must be >= 0", details={"field": name, "value": value})


def check_positive(name: str, value: Any) -> None:
    check_unsigned(name, value)
    if value == 0:
        raise BadRequest(f"{name} must be > 0", details={"field": name})


def check_non_negative_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise BadRequest(f"{name} must be a number", details={"field": name})
    if value < 0:
        raise BadRequest(f"{name} must be >= 0", details={"field": name, "value": value})


def each(check: Check) -> Check:
    def run(name: str, values: Any) -> None:
        for i, v in enumerate(values):
            check(f"{name}[{i}]", v)
    return run


# =============================================================================
# Struct support
# =============================================================================

def wire_field(
    decoder: Decoder,
    *,
    name: Optional[str] = None,
    default: Any = MISSING,
    default_factory: Any = MISSING,
    check: Optional[Check] = None,
) -> Any:
    """
    Declare a dataclass field together with its wire decoder.

    Args:
        decoder: `(raw, path) -> value` used by `WireModel.from_wire`
        name: JSON key when it differs from the attribute (e.g. `except`)
        default / default_factory: as for `dataclasses.field`
        check: `(field_name, value)` validator run at construction for
            non-None values; raises `BadRequest`
    """
    metadata = {"decoder": decoder, "wire_name": name, "check": check}
    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    if default is not MISSING:
        return field(default=default, metadata=metadata)
    return field(metadata=metadata)


class WireModel:
    """
    Mixin for frozen dataclasses that travel over the wire.

    Subclasses declare fields with `wire_field()`. Set `__wire_extra__` to
    "forbid" for request shapes where unknown keys must fail decoding (this is
    what keeps union disambiguation deterministic); response shapes keep the
    default "ignore" so new server-side fields do not break old clients.
    """

    __wire_extra__: ClassVar[str] = "ignore"

    def __post_init__(self) -> None:
        for f in fields(self):
            check = f.metadata.get("check")
            value = getattr(self, f.name)
            if check is not None and value is not None:
                check(f.name, value)

    @classmethod
    def wire_name(cls, attr: str) -> str:
        for f in fields(cls):
            if f.name == attr:
                return f.metadata.get("wire_name") or f.name
        raise KeyError(attr)

    def to_wire(self) -> Dict[str, JSON]:
        out: Dict[str, JSON] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            key = f.metadata.get("wire_name") or f.name
            out[key] = encode_value(value, f"{type(self).__name__}.{key}")
        return out

    @classmethod
    def from_wire(cls: Type[M], raw: Any, path: str = "$") -> M:
        name = cls.__name__
        if not isinstance(raw, dict):
            raise mismatch(name, "object", raw, path)

        specs = []
        for f in fields(cls):
            if not f.init:
                continue
            required = f.default is MISSING and f.default_factory is MISSING
            specs.append((f.name, f.metadata.get("wire_name") or f.name, f.metadata.get("decoder"), required))

        if cls.__wire_extra__ == "forbid":
            unknown = sorted(set(raw) - {wire for _, wire, _, _ in specs})
            if unknown:
                raise DecodeError(
                    f"{name}: unexpected field(s) {', '.join(unknown)} at {path}",
                    target=name,
                    path=path,
                    reason="UnknownField",
                    raw=raw,
                )

        kwargs: Dict[str, Any] = {}
        for attr, wire, decoder, required in specs:
            value = raw.get(wire)
            if value is None:
                if required:
                    raise DecodeError(
                        f"{name}: missing required field '{wire}' at {path}",
                        target=name,
                        path=path,
                        reason="MissingField",
                        raw=raw,
                    )
                continue
            kwargs[attr] = decoder(value, f"{path}.{wire}") if decoder else value

        try:
            return cls(**kwargs)
        except BadRequest as e:
            raise DecodeError(
                f"{name}: {e.message} at {path}",
                target=name,
                path=path,
                reason="InvalidValue",
                raw=raw,
            ) from e


def struct(cls: Type[M]) -> Decoder:
    """Decoder for a `WireModel` subclass, usable inside combinators."""
    return cls.from_wire


# =============================================================================
# Encoding
# =============================================================================

def encode_value(value: Any, path: str = "$") -> JSON:
    if isinstance(value, WireModel):
        return value.to_wire()
    if isinstance(value, Enum):
        return value.value
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodeError(f"non-finite number at {path}", path=path)
        return value
    if isinstance(value, (list, tuple)):
        return [encode_value(v, f"{path}[{i}]") for i, v in enumerate(value)]
    if isinstance(value, dict):
        out: Dict[str, Any] = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise EncodeError(f"non-string key {k!r} at {path}", path=path)
            out[k] = encode_value(v, f"{path}.{k}")
        return out
    raise EncodeError(
        f"cannot encode {type(value).__name__} at {path}",
        path=path,
        details={"type": type(value).__name__},
    )


def dumps(value: Any) -> bytes:
    """Compact UTF-8 JSON for a request body."""
    return json.dumps(
        encode_value(value),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")


def loads(content: bytes) -> JSON:
    """Parse a UTF-8 JSON document. Raises UnicodeDecodeError / ValueError."""
    return json.loads(content.decode("utf-8"))


__all__ = [
    "JSON",
    "Decoder",
    "json_kind",
    "mismatch",
    "decode_str",
    "decode_bool",
    "decode_int",
    "decode_uint",
    "decode_float",
    "decode_json_value",
    "list_of",
    "map_of",
    "decode_literal",
    "decode_enum",
    "decode_union",
    "check_unsigned",
    "check_positive",
    "check_non_negative_number",
    "each",
    "wire_field",
    "WireModel",
    "struct",
    "encode_value",
    "dumps",
    "loads",
]
