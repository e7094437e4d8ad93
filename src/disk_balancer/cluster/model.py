"""
Cluster model.

We keep a simple in memory model as the normalized view of the cluster.
Connectors load it, the plan command queries it.

The plan command only depends on the ClusterSnapshot protocol, so tests and
other front ends can hand it any object with the same four methods.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

from disk_balancer.core.errors import ConfigurationError
from disk_balancer.core.serialization import nodes_to_json
from disk_balancer.core.types import DataNode, NodePlan
from disk_balancer.planner.base import Planner

logger = logging.getLogger(__name__)


class ClusterSnapshot(Protocol):
    """
    Capabilities the plan command needs from a loaded cluster.

    find_node
    Returns the node matching a uuid, ip address or hostname, or None.

    mark_for_processing
    Makes node the only node the next compute_plan call plans for.

    compute_plan
    Returns one NodePlan per registered node.

    to_json
    Serialized snapshot of the whole cluster.
    """

    def find_node(self, identifier: str) -> Optional[DataNode]:
        """Look up a node."""

    def mark_for_processing(self, node: DataNode) -> None:
        """Replace the processing set with node."""

    def compute_plan(self, threshold: float) -> List[NodePlan]:
        """Plan every registered node."""

    def to_json(self) -> str:
        """Serialize the cluster."""


@dataclass
class DiskBalancerCluster:
    """
    Node registry keyed by node uuid.

    planner is optional so a cluster can be loaded and inspected without
    one. compute_plan fails without it.
    """

    planner: Optional[Planner] = None
    _nodes: Dict[str, DataNode] = field(default_factory=dict)
    _to_process: List[DataNode] = field(default_factory=list)

    def add(self, node: DataNode) -> None:
        """Add or replace a node."""
        self._nodes[node.uuid] = node

    def get(self, uuid: str) -> Optional[DataNode]:
        """Return the node with this uuid if present."""
        return self._nodes.get(uuid)

    def find_node(self, identifier: str) -> Optional[DataNode]:
        """
        Resolve an identifier.

        uuid wins over ip address, ip address wins over hostname.
        """
        node = self._nodes.get(identifier)
        if node is not None:
            return node

        for candidate in self._nodes.values():
            if candidate.ip_address == identifier:
                return candidate

        for candidate in self._nodes.values():
            if candidate.hostname == identifier:
                return candidate

        return None

    def mark_for_processing(self, node: DataNode) -> None:
        self._to_process = [node]

    def compute_plan(self, threshold: float) -> List[NodePlan]:
        if self.planner is None:
            raise ConfigurationError("cluster has no planner attached")

        plans: List[NodePlan] = []
        for node in self._to_process:
            logger.debug("planning node %s with threshold %s", node.uuid, threshold)
            plans.append(self.planner.plan(node, threshold))
        return plans

    def to_json(self) -> str:
        return nodes_to_json(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)
