# vectordb_sdk/wire/cluster.py
# SPDX-License-Identifier: Apache-2.0
"""
Cluster status and per-collection shard layout.

`ClusterStatus` is decoded as the disabled shape first (`status` is the
literal "disabled"), then as the full enabled report.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from vectordb_sdk.core.errors import DecodeError
from vectordb_sdk.wire.codec import (
    WireModel,
    decode_bool,
    decode_enum,
    decode_literal,
    decode_str,
    decode_uint,
    decode_union,
    list_of,
    map_of,
    wire_field,
)


class StateRole(str, Enum):
    FOLLOWER = "Follower"
    CANDIDATE = "Candidate"
    LEADER = "Leader"
    PRE_CANDIDATE = "PreCandidate"


class ConsensusThreadStatusValue(str, Enum):
    WORKING = "working"
    STOPPED = "stopped"
    STOPPED_WITH_ERR = "stopped_with_err"


class ReplicaState(str, Enum):
    ACTIVE = "Active"
    DEAD = "Dead"
    PARTIAL = "Partial"
    INITIALIZING = "Initializing"
    LISTENER = "Listener"


@dataclass(frozen=True)
class PeerInfo(WireModel):
    uri: str = wire_field(decode_str)


@dataclass(frozen=True)
class RaftInfo(WireModel):
    term: int = wire_field(decode_uint)
    commit: int = wire_field(decode_uint)
    pending_operations: int = wire_field(decode_uint)
    is_voter: bool = wire_field(decode_bool)
    leader: Optional[int] = wire_field(decode_uint, default=None)
    role: Optional[StateRole] = wire_field(decode_enum(StateRole), default=None)


@dataclass(frozen=True)
class ConsensusThreadStatus(WireModel):
    consensus_thread_status: ConsensusThreadStatusValue = wire_field(decode_enum(ConsensusThreadStatusValue))
    last_update: Optional[str] = wire_field(decode_str, default=None)
    err: Optional[str] = wire_field(decode_str, default=None)


@dataclass(frozen=True)
class MessageSendErrors(WireModel):
    count: int = wire_field(decode_uint)
    latest_error: Optional[str] = wire_field(decode_str, default=None)


@dataclass(frozen=True)
class ClusterStatusDisabled(WireModel):
    status: str = wire_field(decode_literal("disabled", target="ClusterStatus"), default="disabled")


@dataclass(frozen=True)
class ClusterStatusEnabled(WireModel):
    peer_id: int = wire_field(decode_uint)
    peers: Dict[str, PeerInfo] = wire_field(map_of(PeerInfo.from_wire))
    raft_info: RaftInfo = wire_field(RaftInfo.from_wire)
    consensus_thread_status: ConsensusThreadStatus = wire_field(ConsensusThreadStatus.from_wire)
    message_send_failures: Dict[str, MessageSendErrors] = wire_field(
        map_of(MessageSendErrors.from_wire), default_factory=dict
    )
    status: str = wire_field(decode_literal("enabled", target="ClusterStatus"), default="enabled")


ClusterStatus = Union[ClusterStatusDisabled, ClusterStatusEnabled]


def decode_cluster_status(raw: Any, path: str = "$") -> ClusterStatus:
    def disabled(value: Any, p: str) -> ClusterStatusDisabled:
        # The constructor defaults `status`; on the wire it is mandatory.
        if isinstance(value, dict) and "status" not in value:
            raise DecodeError(
                f"ClusterStatusDisabled: missing required field 'status' at {p}",
                target="ClusterStatusDisabled",
                path=p,
                reason="MissingField",
                raw=value,
            )
        return ClusterStatusDisabled.from_wire(value, p)

    return decode_union(
        "ClusterStatus",
        raw,
        (("ClusterStatusDisabled", disabled), ("ClusterStatusEnabled", ClusterStatusEnabled.from_wire)),
        path,
    )


@dataclass(frozen=True)
class LocalShardInfo(WireModel):
    shard_id: int = wire_field(decode_uint)
    points_count: int = wire_field(decode_uint)
    state: ReplicaState = wire_field(decode_enum(ReplicaState))


@dataclass(frozen=True)
class RemoteShardInfo(WireModel):
    shard_id: int = wire_field(decode_uint)
    peer_id: int = wire_field(decode_uint)
    state: ReplicaState = wire_field(decode_enum(ReplicaState))


@dataclass(frozen=True)
class ShardTransferInfo(WireModel):
    shard_id: int = wire_field(decode_uint)
    from_: int = wire_field(decode_uint, name="from")
    to: int = wire_field(decode_uint)
    sync: bool = wire_field(decode_bool)


@dataclass(frozen=True)
class CollectionClusterInfo(WireModel):
    """Result of `GET /collections/{name}/cluster`."""
    peer_id: int = wire_field(decode_uint)
    shard_count: int = wire_field(decode_uint)
    local_shards: List[LocalShardInfo] = wire_field(list_of(LocalShardInfo.from_wire), default_factory=list)
    remote_shards: List[RemoteShardInfo] = wire_field(list_of(RemoteShardInfo.from_wire), default_factory=list)
    shard_transfers: List[ShardTransferInfo] = wire_field(list_of(ShardTransferInfo.from_wire), default_factory=list)


__all__ = [
    "StateRole",
    "ConsensusThreadStatusValue",
    "ReplicaState",
    "PeerInfo",
    "RaftInfo",
    "ConsensusThreadStatus",
    "MessageSendErrors",
    "ClusterStatusDisabled",
    "ClusterStatusEnabled",
    "ClusterStatus",
    "decode_cluster_status",
    "LocalShardInfo",
    "RemoteShardInfo",
    "ShardTransferInfo",
    "CollectionClusterInfo",
]
