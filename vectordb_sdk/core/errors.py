# vectordb_sdk/core/errors.py
# SPDX-License-Identifier: Apache-2.0
"""
Normalized error taxonomy for the vector database REST client.

Callers branch on the error *type*:

- `RemoteError`: the service answered, and its envelope reported an error
  (e.g. "collection not found"). The message is verbatim.
- `DecodeError`: the service answered, but the response could not be
  understood as the declared wire type.
- `TransportError`: the request could not be sent, or the body that came
  back was not a JSON document at all.
- `EncodeError`: a value could not be rendered to its canonical wire shape.
- `BadRequest`: a caller-supplied argument was rejected before any
  request was built (negative counts, empty names, ...).

All errors carry a machine-readable `code` (UPPER_SNAKE_CASE) and a shallow,
JSON-serializable `details` mapping that is safe to log.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence, Tuple


class VectorDBError(Exception):
    """
    Base exception for all client errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (UPPER_SNAKE_CASE)
        details: Additional context (JSON-serializable, shallow)
    """

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = dict(details or {})

    def asdict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization and logging."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "details": {k: self.details[k] for k in sorted(self.details)},
        }


class BadRequest(VectorDBError):
    """Caller passed an argument the service would never accept."""
    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("code", "BAD_REQUEST")
        super().__init__(message, **kwargs)


class EncodeError(VectorDBError):
    """A value could not be serialized to its canonical wire shape."""
    def __init__(self, message: str, *, path: str = "$", **kwargs: Any):
        kwargs.setdefault("code", "ENCODE_ERROR")
        super().__init__(message, **kwargs)
        self.path = path


class DecodeError(VectorDBError):
    """
    Raw JSON did not match the expected wire shape.

    Attributes:
        target: Struct or union being decoded (e.g. "ExtendedPointId")
        path: JSON path of the offending value ("$.result.points[0].id")
        reason: Short classifier ("InvalidPointId", "MissingField", ...)
        candidates: For unions, the variant names tried in priority order
        raw: The offending raw value (best-effort, truncated in asdict)
    """

    def __init__(
        self,
        message: str,
        *,
        target: str,
        path: str = "$",
        reason: str = "TypeMismatch",
        candidates: Sequence[str] = (),
        raw: Any = None,
        **kwargs: Any,
    ):
        kwargs.setdefault("code", "DECODE_ERROR")
        details = dict(kwargs.pop("details", None) or {})
        details.setdefault("target", target)
        details.setdefault("path", path)
        details.setdefault("reason", reason)
        if candidates:
            details.setdefault("candidates", list(candidates))
        super().__init__(message, details=details, **kwargs)
        self.target = target
        self.path = path
        self.reason = reason
        self.candidates: Tuple[str, ...] = tuple(candidates)
        self.raw = raw

    def asdict(self) -> Dict[str, Any]:
        payload = super().asdict()
        payload["raw"] = _preview(self.raw)
        return payload


class RemoteError(VectorDBError):
    """
    The service envelope reported `status: {"error": ...}`.

    The message is surfaced verbatim so callers can match on it.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        time: Optional[float] = None,
        **kwargs: Any,
    ):
        kwargs.setdefault("code", "REMOTE_ERROR")
        details = dict(kwargs.pop("details", None) or {})
        if status_code is not None:
            details.setdefault("status_code", status_code)
        super().__init__(message, details=details, **kwargs)
        self.status_code = status_code
        self.time = time


class TransportError(VectorDBError):
    """The request could not be delivered or the response body was unusable."""
    def __init__(self, message: str, *, status_code: Optional[int] = None, **kwargs: Any):
        kwargs.setdefault("code", "TRANSPORT_ERROR")
        details = dict(kwargs.pop("details", None) or {})
        if status_code is not None:
            details.setdefault("status_code", status_code)
        super().__init__(message, details=details, **kwargs)
        self.status_code = status_code


def _preview(raw: Any, limit: int = 200) -> str:
    text = repr(raw)
    return text if len(text) <= limit else text[: limit - 3] + "..."


__all__ = [
    "VectorDBError",
    "BadRequest",
    "EncodeError",
    "DecodeError",
    "RemoteError",
    "TransportError",
]
