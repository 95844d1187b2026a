# vectordb_sdk/wire/envelope.py
# SPDX-License-Identifier: Apache-2.0
"""
Response envelope decoding.

Every response body, success or failure, has the same shape:

    {"time": <seconds>, "status": "ok" | {"error": "<message>"}, "result": <T>}

`status` is decoded first. An error status raises `RemoteError` with the
service message verbatim, and `result` is never looked at (it is usually
absent). Only an "ok" status leads to decoding `result` as the caller's type.

Failure classes
---------------
- body is not UTF-8 JSON                     -> TransportError
- HTTP error status and no envelope at all   -> TransportError
- envelope present but malformed             -> DecodeError
- status reports an error                    -> RemoteError
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from vectordb_sdk.core.errors import DecodeError, RemoteError, TransportError
from vectordb_sdk.wire.codec import (
    WireModel,
    decode_float,
    decode_literal,
    decode_str,
    decode_union,
    loads,
    mismatch,
    wire_field,
)

T = TypeVar("T")

STATUS_OK = "ok"


@dataclass(frozen=True)
class StatusError(WireModel):
    error: str = wire_field(decode_str)


EnvelopeStatus = Union[str, StatusError]


def decode_status(raw: Any, path: str = "$.status") -> EnvelopeStatus:
    return decode_union(
        "EnvelopeStatus",
        raw,
        (
            ("ok", decode_literal(STATUS_OK, target="EnvelopeStatus")),
            ("error", StatusError.from_wire),
        ),
        path,
    )


def _time_or_none(raw: Any) -> Optional[float]:
    try:
        return decode_float(raw)
    except DecodeError:
        return None


@dataclass(frozen=True)
class Envelope(Generic[T]):
    """A decoded successful response; `time` is server-side seconds."""
    result: T
    time: Optional[float] = None
    status: EnvelopeStatus = STATUS_OK


def decode_envelope(
    content: bytes,
    decode_result: Callable[[Any, str], T],
    *,
    status_code: Optional[int] = None,
) -> Envelope[T]:
    """
    Decode raw response bytes into an `Envelope`.

    Args:
        content: Raw body as returned by the transport
        decode_result: Decoder for the `result` member
        status_code: HTTP status, used for error classification only

    Raises:
        TransportError, DecodeError, RemoteError (see module docstring)
    """
    try:
        doc = loads(content)
    except (UnicodeDecodeError, ValueError) as e:
        raise TransportError(
            "response body is not valid JSON",
            status_code=status_code,
            details={"bytes": len(content)},
        ) from e

    if not isinstance(doc, dict) or "status" not in doc:
        if status_code is not None and status_code >= 400:
            raise TransportError(f"HTTP {status_code} without a response envelope", status_code=status_code)
        if not isinstance(doc, dict):
            raise mismatch("Envelope", "object", doc, "$")
        raise DecodeError(
            "Envelope: missing required field 'status' at $",
            target="Envelope",
            path="$",
            reason="MissingField",
            raw=doc,
        )

    status = decode_status(doc["status"], "$.status")
    if isinstance(status, StatusError):
        # the rejection wins over a malformed `time`
        raise RemoteError(status.error, status_code=status_code, time=_time_or_none(doc.get("time")))

    time_s = decode_float(doc["time"], "$.time") if doc.get("time") is not None else None

    if "result" not in doc:
        raise DecodeError(
            "Envelope: missing required field 'result' at $",
            target="Envelope",
            path="$",
            reason="MissingField",
            raw=doc,
        )
    return Envelope(result=decode_result(doc["result"], "$.result"), time=time_s, status=status)


def decode_result(
    content: bytes,
    decode: Callable[[Any, str], T],
    *,
    status_code: Optional[int] = None,
) -> T:
    """`decode_envelope(...).result`; the form the resource clients return."""
    return decode_envelope(content, decode, status_code=status_code).result


__all__ = [
    "STATUS_OK",
    "StatusError",
    "EnvelopeStatus",
    "decode_status",
    "Envelope",
    "decode_envelope",
    "decode_result",
]
