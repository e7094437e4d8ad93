"""
Error taxonomy.

We separate error types so callers can react correctly.
Example:
InvalidCommandInput is raised before any artifact is written.
NodeNotFound means the cluster was loaded but the target is not in it.
PersistenceFailed means the before file may exist without a plan file.

Planner failures are not wrapped. They reach the caller unchanged.
"""


class DiskBalancerError(Exception):
    """Base class for all disk balancer exceptions."""


class InvalidCommandInput(DiskBalancerError):
    """Raised when a required option is missing or a value cannot be parsed."""


class NodeNotFound(DiskBalancerError):
    """Raised when the node identifier matches no node in the cluster."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Unable to find the specified node. {identifier}")
        self.identifier = identifier


class PersistenceFailed(DiskBalancerError):
    """Raised when opening or writing the before or plan artifact fails."""


class ConfigurationError(DiskBalancerError):
    """Raised when configured defaults or collaborator factories are unusable."""
