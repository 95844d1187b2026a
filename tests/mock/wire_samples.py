# SPDX-License-Identifier: Apache-2.0
"""
Canned `result` documents shaped like real service responses.

Shared by the wire-model tests (decoded directly) and the resource-client
tests (served through `MockTransport`).
"""

COLLECTION_INFO = {
    "status": "green",
    "optimizer_status": "ok",
    "vectors_count": 10,
    "indexed_vectors_count": 0,
    "points_count": 10,
    "segments_count": 2,
    "config": {
        "params": {
            "vectors": {"size": 4, "distance": "Cosine"},
            "shard_number": 1,
            "replication_factor": 1,
            "write_consistency_factor": 1,
            "on_disk_payload": True,
        },
        "hnsw_config": {
            "m": 16,
            "ef_construct": 100,
            "full_scan_threshold": 10000,
            "max_indexing_threads": 0,
            "on_disk": False,
        },
        "optimizer_config": {
            "deleted_threshold": 0.2,
            "vacuum_min_vector_number": 1000,
            "default_segment_number": 0,
            "max_segment_size": None,
            "memmap_threshold": None,
            "indexing_threshold": 20000,
            "flush_interval_sec": 5,
            "max_optimization_threads": 1,
        },
        "wal_config": {"wal_capacity_mb": 32, "wal_segments_ahead": 0},
        "quantization_config": None,
    },
    "payload_schema": {
        "city": {"data_type": "keyword", "points": 10},
    },
    # newer servers add fields; responses must tolerate them
    "sharding_method": "auto",
}

COLLECTIONS_LIST = {
    "collections": [{"name": "demo"}, {"name": "archive"}],
}

ALIASES_LIST = {
    "aliases": [{"alias_name": "prod", "collection_name": "demo"}],
}

SCORED_POINTS = [
    {"id": 1, "version": 3, "score": 0.92, "payload": {"city": "Berlin"}, "vector": None},
    {"id": "6b1f7c1e-0f7a-4c57-9a1b-1c5e3a3e2f10", "version": 1, "score": 0.81},
]

RECORDS = [
    {"id": 1, "payload": {"city": "Berlin"}, "vector": [0.1, 0.2, 0.3, 0.4]},
    {"id": "a1", "payload": None, "vector": {"image": [0.5, 0.5]}},
]

SCROLL_PAGE = {
    "points": RECORDS,
    "next_page_offset": "b7",
}

GROUPS = {
    "groups": [
        {"id": "berlin", "hits": SCORED_POINTS[:1]},
        {"id": 7, "hits": []},
        {"id": -3, "hits": [], "lookup": {"id": 99, "payload": {"name": "minus three"}}},
    ],
}

UPDATE_COMPLETED = {"operation_id": 42, "status": "completed"}

CLUSTER_DISABLED = {"status": "disabled"}

CLUSTER_ENABLED = {
    "status": "enabled",
    "peer_id": 1,
    "peers": {
        "1": {"uri": "http://node-1:6335/"},
        "2": {"uri": "http://node-2:6335/"},
    },
    "raft_info": {
        "term": 2,
        "commit": 10,
        "pending_operations": 0,
        "leader": 1,
        "role": "Leader",
        "is_voter": True,
    },
    "consensus_thread_status": {
        "consensus_thread_status": "working",
        "last_update": "2023-06-01T12:00:00Z",
    },
    "message_send_failures": {},
}

COLLECTION_CLUSTER_INFO = {
    "peer_id": 1,
    "shard_count": 2,
    "local_shards": [{"shard_id": 0, "points_count": 120, "state": "Active"}],
    "remote_shards": [{"shard_id": 1, "peer_id": 2, "state": "Partial"}],
    "shard_transfers": [{"shard_id": 1, "from": 1, "to": 2, "sync": False}],
}
