"""
Command package.

This makes the command folder an explicit package so both Python and mypy
resolve modules consistently.
"""

from disk_balancer.command.plan import PlanCommand, PlanCommandResult, PlanRequest

__all__ = ["PlanCommand", "PlanCommandResult", "PlanRequest"]
