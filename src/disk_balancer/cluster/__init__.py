"""
Cluster package.

This makes the cluster folder an explicit package so both Python and mypy
resolve modules consistently.
"""

from disk_balancer.cluster.model import ClusterSnapshot, DiskBalancerCluster

__all__ = ["ClusterSnapshot", "DiskBalancerCluster"]
