"""
Core types.

This file defines the shared data structures used across the plan command.

Important design choice
Planner output is mutable on purpose. The overlay pass writes user supplied
bandwidth and error limits into each Step after the planner returns, and
nothing else changes a Step after that.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List


class StorageType(str, Enum):
    """
    Storage media types a volume can report.

    Moves are only planned between volumes of the same type, so the
    destination type is also the type of the whole volume set.
    """

    disk = "DISK"
    ssd = "SSD"
    archive = "ARCHIVE"
    ram_disk = "RAM_DISK"
    provided = "PROVIDED"


@dataclass
class Volume:
    """
    A single data directory on a node.

    capacity, used and reserved are byte counts.
    failed, transient and skip volumes are never picked as move targets by a
    sane planner, but we still carry the flags so the snapshot is faithful.
    """

    uuid: str
    path: str
    storage_type: StorageType = StorageType.disk
    capacity: int = 0
    used: int = 0
    reserved: int = 0
    failed: bool = False
    transient: bool = False
    skip: bool = False


@dataclass
class DataNode:
    """
    A storage node in the cluster snapshot.

    A node can be addressed by uuid, ip_address or hostname.
    """

    uuid: str
    ip_address: str
    hostname: str
    port: int = 9867
    volumes: List[Volume] = field(default_factory=list)


@dataclass
class Step:
    """
    One directive to move bytes_to_move from source_volume to destination_volume.

    bandwidth
    MB per second cap for the copy. 0 means use the system default.

    max_disk_errors
    Errors tolerated between the two disks. 0 means use the system default.
    """

    source_volume: Volume
    destination_volume: Volume
    bytes_to_move: int
    ideal_storage: float = 0.0
    volume_set_id: str = ""
    bandwidth: int = 0
    max_disk_errors: int = 0
    tolerance_percent: int = 0

    def __post_init__(self) -> None:
        if self.bytes_to_move < 0:
            raise ValueError("bytes_to_move must not be negative")

    @property
    def destination_storage_type(self) -> StorageType:
        return self.destination_volume.storage_type


@dataclass
class NodePlan:
    """
    NodePlan is the structured output of the planner for one node.

    timestamp is set by the planner. A deterministic planner should set it
    from its inputs, otherwise two runs will not produce identical artifacts.
    """

    node_name: str
    node_uuid: str
    port: int
    timestamp: int = 0
    steps: List[Step] = field(default_factory=list)


@dataclass(frozen=True)
class ArtifactPaths:
    """Locations of the two files written for one node."""

    before: Path
    plan: Path

