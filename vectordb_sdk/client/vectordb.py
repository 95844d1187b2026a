# vectordb_sdk/client/vectordb.py
# SPDX-License-Identifier: Apache-2.0
"""
Top-level client façade.

    async with VectorDBClient.from_url("http://localhost:6333") as db:
        await db.collections.create("demo", CreateCollection(
            vectors=VectorParams(size=4, distance=Distance.COSINE),
        ))
        points = db.points("demo")
        await points.upsert(PointsList(points=[
            PointStruct(id=1, vector=[0.1, 0.2, 0.3, 0.4], payload={"city": "Berlin"}),
        ]), wait=True)
        hits = await points.search(SearchRequest(vector=[0.1, 0.2, 0.3, 0.4], limit=3))

Bring your own `Transport` to control pooling, retries or to test against a
double; otherwise an `HttpxTransport` is created from a `ClientConfig` and
closed together with the client.
"""

from __future__ import annotations

from typing import Any, Optional

from vectordb_sdk.client.cluster import ClusterClient
from vectordb_sdk.client.collections import CollectionsClient
from vectordb_sdk.client.points import PointsClient
from vectordb_sdk.core.config import ClientConfig
from vectordb_sdk.core.errors import BadRequest
from vectordb_sdk.core.metrics import MetricsSink, NoopMetrics
from vectordb_sdk.core.transport import HttpxTransport, Transport


class VectorDBClient:
    """Entry point bundling the resource clients over one transport."""

    def __init__(
        self,
        transport: Optional[Transport] = None,
        *,
        config: Optional[ClientConfig] = None,
        metrics: Optional[MetricsSink] = None,
    ):
        if transport is not None and config is not None:
            raise BadRequest("pass either a transport or a ClientConfig, not both")
        if transport is None:
            if config is None:
                raise BadRequest("VectorDBClient requires a transport or a ClientConfig")
            transport = HttpxTransport(config)
            self._owns_transport = True
        else:
            self._owns_transport = False
        self._transport = transport
        self._metrics: MetricsSink = metrics or NoopMetrics()
        self.collections = CollectionsClient(transport, metrics=self._metrics)
        self.cluster = ClusterClient(transport, metrics=self._metrics)

    @classmethod
    def from_url(
        cls,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        metrics: Optional[MetricsSink] = None,
        **config_kwargs: Any,
    ) -> "VectorDBClient":
        config = ClientConfig(base_url=base_url, api_key=api_key, **config_kwargs)
        return cls(config=config, metrics=metrics)

    @property
    def transport(self) -> Transport:
        return self._transport

    def points(self, collection: str) -> PointsClient:
        """Points client (with `.payload` and `.vectors`) bound to `collection`."""
        return PointsClient(self._transport, collection, metrics=self._metrics)

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> "VectorDBClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = ["VectorDBClient"]
