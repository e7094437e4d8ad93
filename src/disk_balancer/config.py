"""
Configuration.

DiskBalancerConfig holds process wide defaults for the plan command.

Keys
dfs.disk.balancer.plan.threshold.percent
  Threshold used when the user gives none or gives one out of range.

dfs.disk.balancer.output.dir
  Directory that receives the before and plan files when no --out is given.

dfs.disk.balancer.planner.factory
  module:callable returning a Planner. Only the CLI composition layer uses it.

Environment variables map onto the same keys, see ENV_KEYS.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from disk_balancer.core.errors import ConfigurationError

THRESHOLD_KEY = "dfs.disk.balancer.plan.threshold.percent"
OUTPUT_DIR_KEY = "dfs.disk.balancer.output.dir"
PLANNER_FACTORY_KEY = "dfs.disk.balancer.planner.factory"

DEFAULT_THRESHOLD_PERCENT = 10.0
DEFAULT_OUTPUT_DIR = Path("diskbalancer")

BEFORE_TEMPLATE = "before.{node}.json"
PLAN_TEMPLATE = "plan.{node}.json"

ENV_KEYS = {
    "DISKBALANCER_PLAN_THRESHOLD_PERCENT": THRESHOLD_KEY,
    "DISKBALANCER_OUTPUT_DIR": OUTPUT_DIR_KEY,
    "DISKBALANCER_PLANNER": PLANNER_FACTORY_KEY,
}


def is_valid_threshold(value: float) -> bool:
    """True for a percentage in (0, 100]."""
    return not math.isnan(value) and 0.0 < value <= 100.0


@dataclass(frozen=True)
class DiskBalancerConfig:
    """
    Plan command configuration.

    default_threshold_percent
    Must itself be a valid threshold, checked at construction.

    before_template and plan_template
    Formatted with node=<identifier> to name the two artifacts.
    """

    default_threshold_percent: float = DEFAULT_THRESHOLD_PERCENT
    default_output_dir: Path = DEFAULT_OUTPUT_DIR
    before_template: str = BEFORE_TEMPLATE
    plan_template: str = PLAN_TEMPLATE
    planner_factory: Optional[str] = None

    def __post_init__(self) -> None:
        if not is_valid_threshold(self.default_threshold_percent):
            raise ConfigurationError(
                f"{THRESHOLD_KEY} must be in (0, 100], got {self.default_threshold_percent}"
            )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "DiskBalancerConfig":
        """
        Build a config from a mapping keyed by the well known names.

        Missing keys keep their defaults.
        """
        threshold = DEFAULT_THRESHOLD_PERCENT
        raw_threshold = values.get(THRESHOLD_KEY)
        if raw_threshold is not None:
            try:
                threshold = float(raw_threshold)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(
                    f"{THRESHOLD_KEY} must be a number, got {raw_threshold!r}"
                ) from exc

        output_dir = DEFAULT_OUTPUT_DIR
        raw_output = values.get(OUTPUT_DIR_KEY)
        if raw_output:
            output_dir = Path(str(raw_output))

        planner_factory = values.get(PLANNER_FACTORY_KEY) or None

        return cls(
            default_threshold_percent=threshold,
            default_output_dir=output_dir,
            planner_factory=str(planner_factory) if planner_factory else None,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DiskBalancerConfig":
        """Build a config from DISKBALANCER_* environment variables."""
        env = os.environ if environ is None else environ
        values = {key: env[name] for name, key in ENV_KEYS.items() if env.get(name)}
        return cls.from_mapping(values)
