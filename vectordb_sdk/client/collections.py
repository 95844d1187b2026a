# vectordb_sdk/client/collections.py
# SPDX-License-Identifier: Apache-2.0
"""
Collections resource: lifecycle, aliases and payload indexes.

    GET    /collections                        list
    PUT    /collections/{name}                 create
    GET    /collections/{name}                 info
    PATCH  /collections/{name}                 update
    DELETE /collections/{name}                 delete
    POST   /collections/aliases                update_aliases
    GET    /collections/{name}/aliases         list_aliases
    PUT    /collections/{name}/index           create_index
    DELETE /collections/{name}/index/{field}   delete_index
"""

from __future__ import annotations

from typing import Optional, Union

from vectordb_sdk.client.base import (
    ResourceClient,
    collection_path,
    escape_segment,
    require_name,
    require_type,
    write_query,
)
from vectordb_sdk.wire.codec import decode_bool
from vectordb_sdk.wire.collections import (
    ChangeAliasesOperation,
    CollectionInfo,
    CollectionsAliasesResponse,
    CollectionsResponse,
    CreateCollection,
    CreateFieldIndex,
    UpdateCollection,
)
from vectordb_sdk.wire.points import UpdateResult
from vectordb_sdk.wire.primitives import WriteOrdering


class CollectionsClient(ResourceClient):
    _component = "collections"

    async def list(self) -> CollectionsResponse:
        return await self._call("list", "GET", "/collections", CollectionsResponse.from_wire)

    async def create(self, name: str, params: CreateCollection) -> bool:
        require_name(name)
        require_type(params, CreateCollection, "params")
        return await self._call(
            "create", "PUT", collection_path(name), decode_bool, body=params, collection=name
        )

    async def info(self, name: str) -> CollectionInfo:
        require_name(name)
        return await self._call(
            "info", "GET", collection_path(name), CollectionInfo.from_wire, collection=name
        )

    async def update(self, name: str, params: UpdateCollection) -> bool:
        require_name(name)
        require_type(params, UpdateCollection, "params")
        return await self._call(
            "update", "PATCH", collection_path(name), decode_bool, body=params, collection=name
        )

    async def delete(self, name: str) -> bool:
        require_name(name)
        return await self._call(
            "delete", "DELETE", collection_path(name), decode_bool, collection=name
        )

    async def update_aliases(self, params: ChangeAliasesOperation) -> bool:
        """Apply alias create/delete/rename actions in one atomic request."""
        require_type(params, ChangeAliasesOperation, "params")
        return await self._call(
            "update_aliases", "POST", "/collections/aliases", decode_bool, body=params
        )

    async def list_aliases(self, name: str) -> CollectionsAliasesResponse:
        require_name(name)
        return await self._call(
            "list_aliases",
            "GET",
            collection_path(name, "aliases"),
            CollectionsAliasesResponse.from_wire,
            collection=name,
        )

    async def create_index(
        self,
        name: str,
        params: CreateFieldIndex,
        *,
        wait: Optional[bool] = None,
        ordering: Optional[Union[WriteOrdering, str]] = None,
    ) -> UpdateResult:
        require_name(name)
        require_type(params, CreateFieldIndex, "params")
        return await self._call(
            "create_index",
            "PUT",
            collection_path(name, "index"),
            UpdateResult.from_wire,
            body=params,
            query=write_query(wait, ordering),
            collection=name,
        )

    async def delete_index(
        self,
        name: str,
        field_name: str,
        *,
        wait: Optional[bool] = None,
        ordering: Optional[Union[WriteOrdering, str]] = None,
    ) -> UpdateResult:
        require_name(name)
        require_name(field_name, "field name")
        return await self._call(
            "delete_index",
            "DELETE",
            collection_path(name, "index", escape_segment(field_name)),
            UpdateResult.from_wire,
            query=write_query(wait, ordering),
            collection=name,
        )


__all__ = ["CollectionsClient"]
