from __future__ import annotations

from typing import Callable, Iterable

from disk_balancer.core.types import NodePlan
from disk_balancer.core.units import size_string

SEPARATOR = "=" * 80


def print_plan_summary(plans: Iterable[NodePlan], sink: Callable[[str], None] = print) -> None:
    """
    Print a quick summary of the plan, one line per step.

    Columns are source path, destination path, move size and destination
    storage type, tab separated.
    """
    sink("\nPlan :\n")
    sink(SEPARATOR)
    sink("Source Disk\t\t Dest.Disk\t\t Move Size\t Type\n ")
    for plan in plans:
        for step in plan.steps:
            sink(
                f"{step.source_volume.path}\t"
                f"{step.destination_volume.path}\t"
                f"{size_string(step.bytes_to_move)}\t"
                f"{step.destination_storage_type.value}"
            )
    sink(SEPARATOR)
