"""
Plan command states.

The command moves forward through these in order and never goes back.
A failure raises out of whichever state is current; that state is left on
the command so callers can tell how far it got.
"""

from __future__ import annotations

from enum import StrEnum


class PlanCommandState(StrEnum):
    created = "created"
    validating_input = "validating_input"
    resolving_threshold = "resolving_threshold"
    resolving_node = "resolving_node"
    computing_plan = "computing_plan"
    overlaying_parameters = "overlaying_parameters"
    persisting_artifacts = "persisting_artifacts"
    reporting = "reporting"
    done = "done"
