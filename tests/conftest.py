# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for the client test-suite.

- `transport`: recording `MockTransport` (see tests/mock/mock_transport.py)
- `metrics`:   `RecordingMetrics` sink
- `client`:    `VectorDBClient` wired to both
- `points`:    points client bound to the "demo" collection
"""

from __future__ import annotations

import pytest

from tests.mock.mock_transport import MockTransport, RecordingMetrics
from vectordb_sdk import VectorDBClient

DEMO_COLLECTION = "demo"


@pytest.fixture
def transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def metrics() -> RecordingMetrics:
    return RecordingMetrics()


@pytest.fixture
def client(transport: MockTransport, metrics: RecordingMetrics) -> VectorDBClient:
    return VectorDBClient(transport, metrics=metrics)


@pytest.fixture
def points(client: VectorDBClient):
    return client.points(DEMO_COLLECTION)


@pytest.fixture
def update_result_ok() -> dict:
    return {"operation_id": 42, "status": "completed"}
