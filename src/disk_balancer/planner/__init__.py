"""
Planner package.

This makes the planner folder an explicit package so both Python and mypy
resolve modules consistently.
"""

from disk_balancer.planner.base import Planner
from disk_balancer.planner.loader import load_planner
from disk_balancer.planner.static import StaticPlanner

__all__ = ["Planner", "StaticPlanner", "load_planner"]
