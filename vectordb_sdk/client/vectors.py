# vectordb_sdk/client/vectors.py
# SPDX-License-Identifier: Apache-2.0
"""Named-vector updates for the points of one collection."""

from __future__ import annotations

from typing import Optional, Union

from vectordb_sdk.client.base import CollectionScopedClient, require_type, write_query
from vectordb_sdk.wire.points import DeleteVectors, UpdateResult, UpdateVectors
from vectordb_sdk.wire.primitives import WriteOrdering


class VectorsClient(CollectionScopedClient):
    _component = "vectors"

    async def update(
        self,
        request: UpdateVectors,
        *,
        wait: Optional[bool] = None,
        ordering: Optional[Union[WriteOrdering, str]] = None,
    ) -> UpdateResult:
        """Replace the given named vectors; other vectors of each point are kept."""
        require_type(request, UpdateVectors, "request")
        return await self._scoped(
            "update",
            "PUT",
            self._path("points", "vectors"),
            UpdateResult.from_wire,
            body=request,
            query=write_query(wait, ordering),
        )

    async def delete(
        self,
        request: DeleteVectors,
        *,
        wait: Optional[bool] = None,
        ordering: Optional[Union[WriteOrdering, str]] = None,
    ) -> UpdateResult:
        require_type(request, DeleteVectors, "request")
        return await self._scoped(
            "delete",
            "POST",
            self._path("points", "vectors", "delete"),
            UpdateResult.from_wire,
            body=request,
            query=write_query(wait, ordering),
        )


__all__ = ["VectorsClient"]
