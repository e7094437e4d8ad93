from __future__ import annotations

from typing import Iterable, Optional

from disk_balancer.core.types import NodePlan


def apply_plan_params(
    plans: Iterable[NodePlan],
    bandwidth: Optional[int] = None,
    max_error: Optional[int] = None,
) -> None:
    """
    Write user supplied limits into every step of every plan.

    Only positive overrides are applied. Zero or None keeps the value the
    planner chose.
    """
    new_bandwidth = bandwidth or 0
    new_max_error = max_error or 0

    if new_bandwidth <= 0 and new_max_error <= 0:
        return

    for plan in plans:
        for step in plan.steps:
            if new_bandwidth > 0:
                step.bandwidth = new_bandwidth
            if new_max_error > 0:
                step.max_disk_errors = new_max_error
