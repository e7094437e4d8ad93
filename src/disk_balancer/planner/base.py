"""
Planner interface.

The balancing algorithm lives outside this package. Anything that can turn
one node and a threshold into a NodePlan can be plugged in.

A planner returns a NodePlan even when the node is already balanced; the plan
then simply has no steps.
"""

from __future__ import annotations

from typing import Protocol

from disk_balancer.core.types import DataNode, NodePlan


class Planner(Protocol):
    """
    Planner interface.

    plan must not mutate the node.
    """

    def plan(self, node: DataNode, threshold: float) -> NodePlan:
        """Compute the moves that bring node within threshold percent."""
