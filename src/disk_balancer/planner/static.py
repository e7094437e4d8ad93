"""
Static planner.

This planner is used for tests and local simulations.
It replays steps that were computed elsewhere, keyed by node uuid.

Features
- Returns a fresh copy of the stored steps on every call, so the overlay pass
  never changes what the next run sees
- Returns an empty NodePlan for nodes it has no steps for, which is how a
  balanced node looks
- Records every call for assertions
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from disk_balancer.core.types import DataNode, NodePlan, Step
from disk_balancer.planner.base import Planner


@dataclass
class StaticPlanner(Planner):
    """
    Static planner.

    steps
    Mapping of node uuid to the steps to return for that node.

    timestamp
    Written into every NodePlan so output stays deterministic.

    calls
    (node uuid, threshold) for every plan call, in order.
    """

    steps: dict[str, list[Step]] = field(default_factory=dict)
    timestamp: int = 0
    calls: list[tuple[str, float]] = field(default_factory=list)

    def plan(self, node: DataNode, threshold: float) -> NodePlan:
        self.calls.append((node.uuid, threshold))
        return NodePlan(
            node_name=node.hostname,
            node_uuid=node.uuid,
            port=node.port,
            timestamp=self.timestamp,
            steps=copy.deepcopy(self.steps.get(node.uuid, [])),
        )
