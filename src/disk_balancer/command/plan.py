"""
Plan command.

This command coordinates:
threshold resolution, node resolution, planning, the parameter overlay,
persistence of the before and plan artifacts, and the optional verbose
summary.

Raw options
execute takes the options the way a CLI would hand them over: option name to
the string typed by the user, True for bare flags, None when absent.

Failure handling
Input errors and unknown nodes are raised before anything is written.
Planner exceptions propagate unchanged.
Persistence errors are raised as PersistenceFailed. The before artifact may
already exist at that point; it is left in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Mapping

from disk_balancer.cluster.model import ClusterSnapshot
from disk_balancer.command.overlay import apply_plan_params
from disk_balancer.command.persistence import (
    LocalFileSink,
    OutputSink,
    artifact_paths,
    write_artifacts,
)
from disk_balancer.command.report import print_plan_summary
from disk_balancer.command.resolve import resolve_target_node, resolve_threshold
from disk_balancer.command.state import PlanCommandState
from disk_balancer.config import DiskBalancerConfig
from disk_balancer.core.options import (
    flag,
    optional_non_negative_int,
    optional_str,
    require_str,
    verify_options,
)
from disk_balancer.core.types import ArtifactPaths, DataNode, NodePlan

logger = logging.getLogger(__name__)

PLAN = "plan"
OUTFILE = "out"
BANDWIDTH = "bandwidth"
THRESHOLD = "thresholdPercentage"
MAXERROR = "maxerror"
VERBOSE = "v"

VALID_OPTIONS = frozenset({PLAN, OUTFILE, BANDWIDTH, THRESHOLD, MAXERROR, VERBOSE})


@dataclass(frozen=True)
class PlanRequest:
    """
    Validated options.

    threshold_raw is kept as text because resolving it is its own step.
    """

    node_identifier: str
    output_dir: Path
    bandwidth: int | None
    max_error: int | None
    threshold_raw: str | None
    verbose: bool


@dataclass(frozen=True)
class PlanCommandResult:
    node: DataNode
    threshold: float
    plans: List[NodePlan]
    paths: ArtifactPaths

    @property
    def step_count(self) -> int:
        return sum(len(p.steps) for p in self.plans)


class PlanCommand:
    """
    Creates a disk balancer plan for one node.

    cluster
    Loaded cluster snapshot with a planner behind compute_plan.

    sink
    Where the before and plan artifacts go.

    config
    Default threshold, default output directory and file name templates.

    console
    Receives the progress line and the verbose summary.
    """

    def __init__(
        self,
        cluster: ClusterSnapshot,
        sink: OutputSink | None = None,
        config: DiskBalancerConfig | None = None,
        console: Callable[[str], None] = print,
    ) -> None:
        self._cluster = cluster
        self._sink = sink or LocalFileSink()
        self._config = config or DiskBalancerConfig()
        self._console = console
        self.state = PlanCommandState.created

    def _enter(self, state: PlanCommandState) -> None:
        logger.debug("plan command %s -> %s", self.state, state)
        self.state = state

    def parse_options(self, raw: Mapping[str, Any]) -> PlanRequest:
        """Check raw options and convert them. Does not touch the cluster."""
        verify_options(PLAN, raw, VALID_OPTIONS)

        node_identifier = require_str(raw, PLAN, "A node name is required to create a plan.")
        bandwidth = optional_non_negative_int(raw, BANDWIDTH)
        max_error = optional_non_negative_int(raw, MAXERROR)

        output = optional_str(raw, OUTFILE)
        output_dir = Path(output) if output else self._config.default_output_dir

        threshold_value = raw.get(THRESHOLD)
        threshold_raw = None if threshold_value is None else str(threshold_value)

        return PlanRequest(
            node_identifier=node_identifier,
            output_dir=output_dir,
            bandwidth=bandwidth,
            max_error=max_error,
            threshold_raw=threshold_raw,
            verbose=flag(raw, VERBOSE),
        )

    def execute(self, raw: Mapping[str, Any]) -> PlanCommandResult:
        """
        Run the command once.

        Steps
        1) validate options
        2) resolve threshold
        3) resolve node
        4) compute plan
        5) overlay bandwidth and max error
        6) write before and plan artifacts
        7) print summary when verbose
        """
        logger.debug("Processing Plan Command.")

        self._enter(PlanCommandState.validating_input)
        request = self.parse_options(raw)

        self._enter(PlanCommandState.resolving_threshold)
        threshold = resolve_threshold(request.threshold_raw, self._config.default_threshold_percent)

        self._enter(PlanCommandState.resolving_node)
        node = resolve_target_node(self._cluster, request.node_identifier)

        self._enter(PlanCommandState.computing_plan)
        self._cluster.mark_for_processing(node)
        plans = self._cluster.compute_plan(threshold)

        self._enter(PlanCommandState.overlaying_parameters)
        apply_plan_params(plans, bandwidth=request.bandwidth, max_error=request.max_error)

        self._enter(PlanCommandState.persisting_artifacts)
        paths = artifact_paths(
            request.output_dir,
            request.node_identifier,
            self._config.before_template,
            self._config.plan_template,
        )
        logger.info("Writing plan to : %s", request.output_dir)
        self._console(f"Writing plan to : {request.output_dir}")
        write_artifacts(self._sink, paths, self._cluster.to_json(), plans)

        if request.verbose:
            self._enter(PlanCommandState.reporting)
            print_plan_summary(plans, self._console)

        self._enter(PlanCommandState.done)
        return PlanCommandResult(node=node, threshold=threshold, plans=plans, paths=paths)
