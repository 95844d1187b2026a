# vectordb_sdk/client/payload.py
# SPDX-License-Identifier: Apache-2.0
"""Payload mutation for the points of one collection."""

from __future__ import annotations

from typing import Optional, Union

from vectordb_sdk.client.base import CollectionScopedClient, require_type, write_query
from vectordb_sdk.wire.points import (
    DeletePayload,
    FilterSelector,
    PointIdsList,
    SetPayload,
    UpdateResult,
)
from vectordb_sdk.wire.primitives import WriteOrdering


class PayloadClient(CollectionScopedClient):
    _component = "payload"

    async def set(
        self,
        request: SetPayload,
        *,
        wait: Optional[bool] = None,
        ordering: Optional[Union[WriteOrdering, str]] = None,
    ) -> UpdateResult:
        """Merge `request.payload` into the existing payload of the selected points."""
        require_type(request, SetPayload, "request")
        return await self._scoped(
            "set",
            "POST",
            self._path("points", "payload"),
            UpdateResult.from_wire,
            body=request,
            query=write_query(wait, ordering),
        )

    async def overwrite(
        self,
        request: SetPayload,
        *,
        wait: Optional[bool] = None,
        ordering: Optional[Union[WriteOrdering, str]] = None,
    ) -> UpdateResult:
        """Replace the whole payload of the selected points."""
        require_type(request, SetPayload, "request")
        return await self._scoped(
            "overwrite",
            "PUT",
            self._path("points", "payload"),
            UpdateResult.from_wire,
            body=request,
            query=write_query(wait, ordering),
        )

    async def delete(
        self,
        request: DeletePayload,
        *,
        wait: Optional[bool] = None,
        ordering: Optional[Union[WriteOrdering, str]] = None,
    ) -> UpdateResult:
        require_type(request, DeletePayload, "request")
        return await self._scoped(
            "delete",
            "POST",
            self._path("points", "payload", "delete"),
            UpdateResult.from_wire,
            body=request,
            query=write_query(wait, ordering),
        )

    async def clear(
        self,
        selector: Union[PointIdsList, FilterSelector],
        *,
        wait: Optional[bool] = None,
        ordering: Optional[Union[WriteOrdering, str]] = None,
    ) -> UpdateResult:
        require_type(selector, (PointIdsList, FilterSelector), "selector")
        return await self._scoped(
            "clear",
            "POST",
            self._path("points", "payload", "clear"),
            UpdateResult.from_wire,
            body=selector,
            query=write_query(wait, ordering),
        )


__all__ = ["PayloadClient"]
