"""
Cluster connector interfaces.

Goal
Load the cluster from wherever it is described, so the plan command does not
care whether the source is a local file or something else.

We keep the interface narrow so it is easy to fake in tests.
"""

from __future__ import annotations

from typing import Protocol

from disk_balancer.cluster.model import DiskBalancerCluster


class ClusterConnector(Protocol):
    """
    Cluster connector interface.

    load returns a fully populated DiskBalancerCluster without a planner.
    """

    def load(self) -> DiskBalancerCluster:
        """Load the cluster description."""
