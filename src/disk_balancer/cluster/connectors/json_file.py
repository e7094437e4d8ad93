"""
JSON file connector.

Reads a local json file that describes the cluster. The schema is the same
one the before artifact is written in, so a saved snapshot can be loaded
again to plan against it.

Schema example
{
  "nodes": [
    {
      "uuid": "3f1c...",
      "ip_address": "10.0.0.7",
      "hostname": "node-7",
      "port": 9867,
      "volumes": [
        {"uuid": "v1", "path": "/data/1", "storage_type": "DISK",
         "capacity": 1000, "used": 900}
      ]
    }
  ]
}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from disk_balancer.cluster.connectors.base import ClusterConnector
from disk_balancer.cluster.model import DiskBalancerCluster
from disk_balancer.core.types import DataNode, StorageType, Volume

logger = logging.getLogger(__name__)


def _volume_from_dict(obj: dict[str, Any]) -> Volume:
    """Convert a volume dict into a Volume."""
    return Volume(
        uuid=str(obj["uuid"]),
        path=str(obj.get("path", "")),
        storage_type=StorageType(str(obj.get("storage_type", "DISK")).upper()),
        capacity=int(obj.get("capacity", 0)),
        used=int(obj.get("used", 0)),
        reserved=int(obj.get("reserved", 0)),
        failed=bool(obj.get("failed", False)),
        transient=bool(obj.get("transient", False)),
        skip=bool(obj.get("skip", False)),
    )


def _node_from_dict(obj: dict[str, Any]) -> DataNode:
    """Convert a node dict into a DataNode."""
    node = DataNode(
        uuid=str(obj["uuid"]),
        ip_address=str(obj.get("ip_address", "")),
        hostname=str(obj.get("hostname", "")),
        port=int(obj.get("port", 9867)),
    )

    for raw in obj.get("volumes", []) or []:
        if not isinstance(raw, dict):
            continue
        node.volumes.append(_volume_from_dict(raw))

    return node


@dataclass(frozen=True)
class JsonFileConnector(ClusterConnector):
    """
    Load the cluster from a local json file.

    path points to a json file that matches the schema described in the module docstring.
    """

    path: Path

    def load(self) -> DiskBalancerCluster:
        data = json.loads(self.path.read_text(encoding="utf-8"))
        nodes = data.get("nodes", []) if isinstance(data, dict) else []

        cluster = DiskBalancerCluster()
        if isinstance(nodes, list):
            for obj in nodes:
                if isinstance(obj, dict):
                    cluster.add(_node_from_dict(obj))

        logger.debug("loaded %d nodes from %s", len(cluster), self.path)
        return cluster
