"""
Parameter resolution for the plan command.

resolve_threshold
Turns the user supplied percentage into the threshold used for the whole run.

resolve_target_node
Turns the user supplied identifier into exactly one node of the cluster.
"""

from __future__ import annotations

import logging
from typing import Optional

from disk_balancer.cluster.model import ClusterSnapshot
from disk_balancer.config import is_valid_threshold
from disk_balancer.core.errors import InvalidCommandInput, NodeNotFound
from disk_balancer.core.types import DataNode

logger = logging.getLogger(__name__)


def resolve_threshold(raw: Optional[str], default: float) -> float:
    """
    Resolve the threshold percentage.

    Absent or out of range values fall back to default.
    Text that is not a number raises InvalidCommandInput instead of falling back.
    """
    if raw is None:
        return default

    try:
        value = float(str(raw).strip())
    except ValueError as exc:
        raise InvalidCommandInput(f"thresholdPercentage must be a number, got {raw!r}") from exc

    if not is_valid_threshold(value):
        logger.warning("threshold %s is outside (0, 100], using default %s", raw, default)
        return default

    return value


def resolve_target_node(cluster: ClusterSnapshot, identifier: Optional[str]) -> DataNode:
    """
    Resolve the node to plan for.

    A missing identifier is an input error and the cluster is not consulted.
    """
    if identifier is None or not identifier.strip():
        raise InvalidCommandInput("A node name is required to create a plan.")

    node = cluster.find_node(identifier.strip())
    if node is None:
        raise NodeNotFound(identifier)
    return node
