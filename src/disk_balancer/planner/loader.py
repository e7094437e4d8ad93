"""
Planner loader.

The balancing algorithm ships separately. The CLI names it with a
module:callable string, for example

  my_balancer.greedy:build_planner

The callable takes no arguments and returns an object with a plan method.
"""

from __future__ import annotations

import importlib

from disk_balancer.core.errors import ConfigurationError
from disk_balancer.planner.base import Planner


def load_planner(factory: str) -> Planner:
    """Import and call a planner factory."""
    module_name, sep, attr = factory.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(f"planner factory must look like module:callable, got {factory!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"cannot import planner module {module_name}") from exc

    target = getattr(module, attr, None)
    if target is None or not callable(target):
        raise ConfigurationError(f"{factory} is not a callable")

    planner = target()
    if not callable(getattr(planner, "plan", None)):
        raise ConfigurationError(f"{factory} did not return a planner")
    return planner
