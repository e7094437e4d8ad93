"""
Plan persistence.

Two artifacts are written per run, both named after the node identifier:

before.<node>.json
  The cluster snapshot taken before planning.

plan.<node>.json
  The list of NodePlans after the overlay pass.

Writes go through an OutputSink. Each handle lives inside a with block and is
closed whether the write succeeds or not.

The pair is not written atomically. If the plan write fails, the before file
stays on disk and no plan file exists. Nothing is deleted or retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, ContextManager, List, Protocol

from disk_balancer.core.errors import PersistenceFailed
from disk_balancer.core.serialization import plans_to_json
from disk_balancer.core.types import ArtifactPaths, NodePlan

logger = logging.getLogger(__name__)


class OutputSink(Protocol):
    """
    Where artifacts are written.

    open_for_write returns a context manager yielding a binary handle. The
    handle must be closed when the context exits, on success or on error.
    """

    def open_for_write(self, path: Path) -> ContextManager[BinaryIO]:
        """Open path for writing, replacing any existing content."""


@dataclass(frozen=True)
class LocalFileSink(OutputSink):
    """Write artifacts to the local filesystem, creating parent directories."""

    def open_for_write(self, path: Path) -> ContextManager[BinaryIO]:
        path.parent.mkdir(parents=True, exist_ok=True)
        return path.open("wb")


def artifact_paths(
    output_dir: Path,
    node_identifier: str,
    before_template: str,
    plan_template: str,
) -> ArtifactPaths:
    """Derive both artifact paths for a node."""
    return ArtifactPaths(
        before=output_dir / before_template.format(node=node_identifier),
        plan=output_dir / plan_template.format(node=node_identifier),
    )


def write_artifact(sink: OutputSink, path: Path, text: str) -> None:
    """
    Write text as UTF-8 to path.

    Any OSError while opening, writing or closing becomes PersistenceFailed.
    """
    try:
        with sink.open_for_write(path) as handle:
            handle.write(text.encode("utf-8"))
    except OSError as exc:
        raise PersistenceFailed(f"failed to write {path}: {exc}") from exc

    logger.debug("wrote %s", path)


def write_artifacts(
    sink: OutputSink,
    paths: ArtifactPaths,
    cluster_json: str,
    plans: List[NodePlan],
) -> None:
    """Write the before snapshot, then the plan."""
    write_artifact(sink, paths.before, cluster_json)
    write_artifact(sink, paths.plan, plans_to_json(plans))
