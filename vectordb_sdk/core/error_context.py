# vectordb_sdk/core/error_context.py
# SPDX-License-Identifier: Apache-2.0

"""
Error context utilities for the resource clients.

Errors raised by a resource call (remote, decode, transport) propagate to the
caller with their original type and message. Before they leave the client,
the call site enriches them with debugging metadata stored as exception
attributes:

- `__vectordb_context__` (canonical)
- `__<component>_context__` (per component, e.g. `__points_context__`)

Typical usage
-------------

    try:
        return await self._transport.send(...)
    except Exception as exc:
        attach_context(
            exc,
            component="points",
            operation="search",
            collection="demo",
        )
        raise

Later, in error handlers:

    except VectorDBError as exc:
        ctx = get_context(exc)
        logger.warning("call failed", extra={"operation": ctx.get("operation")})

Repeated calls merge into the existing mapping; the first `component` wins so
an outer layer never relabels the origin of the failure. Attachment itself
never raises.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

_CANONICAL_ATTR = "__vectordb_context__"


def _component_attr(component: str) -> str:
    return f"__{component}_context__"


def attach_context(
    exc: BaseException,
    component: str,
    **context: Any,
) -> None:
    """
    Attach debugging context to an exception without changing its type or message.

    Parameters
    ----------
    exc:
        The exception to enrich.

    component:
        Origin of the context ("collections", "points", "payload", ...).
        Used as a context key and to build the component-specific attribute.

    **context:
        Shallow, log-safe metadata such as `operation`, `collection`,
        `method`, `path`. Never pass request bodies or payload values.
    """
    try:
        merged: Dict[str, Any] = {}
        existing = getattr(exc, _CANONICAL_ATTR, None)
        if isinstance(existing, Mapping):
            merged.update(existing)

        merged.setdefault("component", component)
        for key, value in context.items():
            if value is not None:
                merged[key] = value

        setattr(exc, _CANONICAL_ATTR, merged)
        setattr(exc, _component_attr(component), merged)
    except Exception as attachment_error:  # noqa: BLE001
        # Exception types with __slots__ or read-only attributes end up here.
        logger.debug(
            "Failed to attach error context to %s: %s",
            type(exc).__name__,
            attachment_error,
            extra={"component": component},
        )


def get_context(
    exc: BaseException,
    *,
    component: Optional[str] = None,
) -> Mapping[str, Any]:
    """
    Retrieve attached context, or an empty mapping if none is present.

    With `component`, the component-specific attribute is consulted first.
    """
    if component:
        ctx = getattr(exc, _component_attr(component), None)
        if isinstance(ctx, Mapping):
            return ctx

    ctx = getattr(exc, _CANONICAL_ATTR, None)
    if isinstance(ctx, Mapping):
        return ctx
    return {}


def has_context(
    exc: BaseException,
    *,
    component: Optional[str] = None,
) -> bool:
    """True when the exception carries a non-empty context mapping."""
    return len(get_context(exc, component=component)) > 0


def clear_context(exc: BaseException) -> None:
    """
    Remove every `__*_context__` attribute attached by `attach_context`.

    Mostly useful in tests, or before serializing an exception elsewhere.
    """
    for attr in list(vars(exc)):
        if attr.startswith("__") and attr.endswith("_context__"):
            try:
                delattr(exc, attr)
            except AttributeError as clear_error:
                logger.debug(
                    "Failed to delete %s from %s: %s",
                    attr,
                    type(exc).__name__,
                    clear_error,
                )


__all__ = [
    "attach_context",
    "get_context",
    "has_context",
    "clear_context",
]
