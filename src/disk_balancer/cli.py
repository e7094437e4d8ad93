"""
Command line entry point.

Purpose
Build a disk balancer plan for one node and write it next to a snapshot of
the cluster it was computed from.

This is the composition layer of the system.
It loads configuration and the cluster, picks the planner, and hands raw
options to PlanCommand. PlanCommand itself stays free of argparse.

Examples
  disk-balancer-plan --uri cluster.json --plan node-7 --planner my_balancer:build
  disk-balancer-plan --uri file:///srv/cluster.json --plan 10.0.0.7 \
      --thresholdPercentage 5 --bandwidth 50 --out /out -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from disk_balancer.cluster.connectors import connector_for_uri
from disk_balancer.cluster.model import DiskBalancerCluster
from disk_balancer.command.plan import (
    BANDWIDTH,
    MAXERROR,
    OUTFILE,
    PLAN,
    THRESHOLD,
    VERBOSE,
    PlanCommand,
)
from disk_balancer.config import DiskBalancerConfig
from disk_balancer.core.errors import ConfigurationError, DiskBalancerError, InvalidCommandInput
from disk_balancer.logging_config import setup_logging
from disk_balancer.planner.loader import load_planner

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="disk-balancer-plan",
        description="This command creates a disk balancer plan for a given datanode.",
    )
    parser.add_argument("--uri", required=True, help="Cluster description, a file:// uri or a path.")
    parser.add_argument(f"--{PLAN}", dest="plan", help="Node uuid, ip address or hostname to plan for.")
    parser.add_argument(f"--{OUTFILE}", dest="out", help="Directory for the before and plan files.")
    parser.add_argument(
        f"--{BANDWIDTH}",
        dest="bandwidth",
        help="Maximum bandwidth in MB per second to be used while copying.",
    )
    parser.add_argument(
        f"--{THRESHOLD}",
        dest="threshold",
        help="Percentage skew that we tolerate before the disk balancer starts working.",
    )
    parser.add_argument(f"--{MAXERROR}", dest="maxerror", help="Max errors to tolerate between 2 disks.")
    parser.add_argument(
        f"-{VERBOSE}",
        "--verbose",
        dest="verbose",
        action="store_true",
        help="Print the plan to the console.",
    )
    parser.add_argument("--planner", help="Planner factory as module:callable.")
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    parser.add_argument("--log-file", help="Also write logs to this file.")
    return parser


def load_cluster(uri: str) -> DiskBalancerCluster:
    """Read the cluster description behind uri."""
    connector = connector_for_uri(uri)
    try:
        return connector.load()
    except (OSError, KeyError, TypeError, ValueError) as exc:
        raise InvalidCommandInput(f"cannot read cluster description {uri}: {exc}") from exc


def main(
    argv: Optional[Sequence[str]] = None,
    console: Callable[[str], None] = print,
) -> int:
    args = build_parser().parse_args(argv)

    level = logging.getLevelName(str(args.log_level).upper())
    if not isinstance(level, int):
        level = logging.INFO
    setup_logging("diskbalancer", level=level, log_file=args.log_file)

    raw = {
        PLAN: args.plan,
        OUTFILE: args.out,
        BANDWIDTH: args.bandwidth,
        THRESHOLD: args.threshold,
        MAXERROR: args.maxerror,
        VERBOSE: True if args.verbose else None,
    }

    try:
        config = DiskBalancerConfig.from_env()
        factory = args.planner or config.planner_factory
        if not factory:
            raise ConfigurationError("no planner configured, pass --planner or set DISKBALANCER_PLANNER")

        cluster = load_cluster(args.uri)
        cluster.planner = load_planner(factory)

        result = PlanCommand(cluster, config=config, console=console).execute(raw)
    except DiskBalancerError as exc:
        logger.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.info(
        "plan for %s has %d step(s), threshold %s",
        result.node.uuid,
        result.step_count,
        result.threshold,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
