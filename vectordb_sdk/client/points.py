# vectordb_sdk/client/points.py
# SPDX-License-Identifier: Apache-2.0
"""
Points resource, bound to one collection.

    GET  /collections/{c}/points/{id}            get
    POST /collections/{c}/points                 get_many
    PUT  /collections/{c}/points                 upsert
    POST /collections/{c}/points/delete          delete
    POST /collections/{c}/points/scroll          scroll
    POST /collections/{c}/points/search          search
    POST /collections/{c}/points/recommend       recommend
    POST /collections/{c}/points/count           count
    POST /collections/{c}/points/search/batch    search_batch
    POST /collections/{c}/points/search/groups   search_groups
    POST /collections/{c}/points/recommend/batch recommend_batch
    POST /collections/{c}/points/recommend/groups recommend_groups

Reads accept `consistency`; writes accept `wait` and `ordering`. Absent
parameters are left out of the query string entirely.
"""

from __future__ import annotations

from typing import List, Optional, Union

from vectordb_sdk.client.base import (
    CollectionScopedClient,
    escape_segment,
    read_query,
    require_point_id,
    require_type,
    write_query,
)
from vectordb_sdk.client.payload import PayloadClient
from vectordb_sdk.client.vectors import VectorsClient
from vectordb_sdk.core.metrics import MetricsSink
from vectordb_sdk.core.transport import Transport
from vectordb_sdk.wire.codec import list_of
from vectordb_sdk.wire.points import (
    CountRequest,
    CountResult,
    FilterSelector,
    GroupsResult,
    PointIdsList,
    PointRequest,
    PointsBatch,
    PointsList,
    RecommendGroupsRequest,
    RecommendRequest,
    RecommendRequestBatch,
    Record,
    ScoredPoint,
    ScrollRequest,
    ScrollResult,
    SearchGroupsRequest,
    SearchRequest,
    SearchRequestBatch,
    UpdateResult,
    decode_scored_points,
)
from vectordb_sdk.wire.primitives import ExtendedPointId, ReadConsistency, WriteOrdering

_decode_records = list_of(Record.from_wire, target="Record[]")
_decode_scored_batches = list_of(decode_scored_points, target="ScoredPoint[][]")


class PointsClient(CollectionScopedClient):
    """
    Point operations for a single collection.

    `payload` and `vectors` are sub-clients bound to the same collection,
    transport and metrics sink.
    """

    _component = "points"

    def __init__(
        self,
        transport: Transport,
        collection: str,
        *,
        metrics: Optional[MetricsSink] = None,
    ):
        super().__init__(transport, collection, metrics=metrics)
        self.payload = PayloadClient(transport, collection, metrics=metrics)
        self.vectors = VectorsClient(transport, collection, metrics=metrics)

    async def get(
        self,
        id: ExtendedPointId,
        *,
        consistency: Optional[ReadConsistency] = None,
    ) -> Record:
        require_point_id(id)
        return await self._scoped(
            "get",
            "GET",
            self._path("points", escape_segment(id)),
            Record.from_wire,
            query=read_query(consistency),
        )

    async def get_many(
        self,
        request: PointRequest,
        *,
        consistency: Optional[ReadConsistency] = None,
    ) -> List[Record]:
        require_type(request, PointRequest, "request")
        return await self._scoped(
            "get_many",
            "POST",
            self._path("points"),
            _decode_records,
            body=request,
            query=read_query(consistency),
        )

    async def upsert(
        self,
        operations: Union[PointsBatch, PointsList],
        *,
        wait: Optional[bool] = None,
        ordering: Optional[Union[WriteOrdering, str]] = None,
    ) -> UpdateResult:
        require_type(operations, (PointsBatch, PointsList), "operations")
        return await self._scoped(
            "upsert",
            "PUT",
            self._path("points"),
            UpdateResult.from_wire,
            body=operations,
            query=write_query(wait, ordering),
        )

    async def delete(
        self,
        selector: Union[PointIdsList, FilterSelector],
        *,
        wait: Optional[bool] = None,
        ordering: Optional[Union[WriteOrdering, str]] = None,
    ) -> UpdateResult:
        require_type(selector, (PointIdsList, FilterSelector), "selector")
        return await self._scoped(
            "delete",
            "POST",
            self._path("points", "delete"),
            UpdateResult.from_wire,
            body=selector,
            query=write_query(wait, ordering),
        )

    async def scroll(
        self,
        request: Optional[ScrollRequest] = None,
        *,
        consistency: Optional[ReadConsistency] = None,
    ) -> ScrollResult:
        """One page of points; feed `next_page_offset` back as `offset` to continue."""
        request = request if request is not None else ScrollRequest()
        require_type(request, ScrollRequest, "request")
        return await self._scoped(
            "scroll",
            "POST",
            self._path("points", "scroll"),
            ScrollResult.from_wire,
            body=request,
            query=read_query(consistency),
        )

    async def search(
        self,
        request: SearchRequest,
        *,
        consistency: Optional[ReadConsistency] = None,
    ) -> List[ScoredPoint]:
        require_type(request, SearchRequest, "request")
        return await self._scoped(
            "search",
            "POST",
            self._path("points", "search"),
            decode_scored_points,
            body=request,
            query=read_query(consistency),
        )

    async def recommend(
        self,
        request: RecommendRequest,
        *,
        consistency: Optional[ReadConsistency] = None,
    ) -> List[ScoredPoint]:
        require_type(request, RecommendRequest, "request")
        return await self._scoped(
            "recommend",
            "POST",
            self._path("points", "recommend"),
            decode_scored_points,
            body=request,
            query=read_query(consistency),
        )

    async def count(self, request: Optional[CountRequest] = None) -> CountResult:
        request = request if request is not None else CountRequest()
        require_type(request, CountRequest, "request")
        return await self._scoped(
            "count",
            "POST",
            self._path("points", "count"),
            CountResult.from_wire,
            body=request,
        )

    async def search_batch(
        self,
        request: SearchRequestBatch,
        *,
        consistency: Optional[ReadConsistency] = None,
    ) -> List[List[ScoredPoint]]:
        require_type(request, SearchRequestBatch, "request")
        return await self._scoped(
            "search_batch",
            "POST",
            self._path("points", "search", "batch"),
            _decode_scored_batches,
            body=request,
            query=read_query(consistency),
        )

    async def search_groups(
        self,
        request: SearchGroupsRequest,
        *,
        consistency: Optional[ReadConsistency] = None,
    ) -> GroupsResult:
        require_type(request, SearchGroupsRequest, "request")
        return await self._scoped(
            "search_groups",
            "POST",
            self._path("points", "search", "groups"),
            GroupsResult.from_wire,
            body=request,
            query=read_query(consistency),
        )

    async def recommend_batch(
        self,
        request: RecommendRequestBatch,
        *,
        consistency: Optional[ReadConsistency] = None,
    ) -> List[List[ScoredPoint]]:
        require_type(request, RecommendRequestBatch, "request")
        return await self._scoped(
            "recommend_batch",
            "POST",
            self._path("points", "recommend", "batch"),
            _decode_scored_batches,
            body=request,
            query=read_query(consistency),
        )

    async def recommend_groups(
        self,
        request: RecommendGroupsRequest,
        *,
        consistency: Optional[ReadConsistency] = None,
    ) -> GroupsResult:
        require_type(request, RecommendGroupsRequest, "request")
        return await self._scoped(
            "recommend_groups",
            "POST",
            self._path("points", "recommend", "groups"),
            GroupsResult.from_wire,
            body=request,
            query=read_query(consistency),
        )


__all__ = ["PointsClient"]
