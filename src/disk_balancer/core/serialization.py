from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Iterable

from disk_balancer.core.types import DataNode, NodePlan


def _normalize(obj: Any) -> Any:
    if hasattr(obj, "value"):
        return obj.value
    if isinstance(obj, dict):
        return {str(k): _normalize(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_normalize(v) for v in obj]
    return obj


def to_json_safe_dict(obj: Any) -> dict[str, Any]:
    """
    Convert a dataclass object into a JSON safe dict.

    Enum members are replaced by their values.
    """
    raw = asdict(obj)
    normalized = _normalize(raw)
    if not isinstance(normalized, dict):
        raise TypeError("expected dict after normalization")
    return normalized


def dumps(payload: Any) -> str:
    """
    Stable JSON text.

    Sorted keys and a fixed indent make the output byte identical for equal
    inputs, which is what lets two plan runs be compared with a plain diff.
    """
    return json.dumps(payload, sort_keys=True, indent=2)


def plans_to_json(plans: Iterable[NodePlan]) -> str:
    """Serialize a list of NodePlans, one record per plan with nested steps."""
    return dumps([to_json_safe_dict(plan) for plan in plans])


def nodes_to_json(nodes: Iterable[DataNode]) -> str:
    """
    Cluster snapshot transport shape.

    Nodes are ordered by uuid so the snapshot does not depend on load order.
    """
    ordered = sorted(nodes, key=lambda n: n.uuid)
    return dumps({"nodes": [to_json_safe_dict(n) for n in ordered]})
