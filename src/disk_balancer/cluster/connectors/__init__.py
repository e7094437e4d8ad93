"""
Cluster connectors.

connector_for_uri picks a connector from the shape of the uri. Only local
json descriptions are supported: file:///abs/path.json or a plain path.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import unquote, urlparse

from disk_balancer.cluster.connectors.base import ClusterConnector
from disk_balancer.cluster.connectors.json_file import JsonFileConnector
from disk_balancer.core.errors import InvalidCommandInput


def connector_for_uri(uri: str) -> ClusterConnector:
    """Return the connector able to read uri."""
    parsed = urlparse(uri)

    if parsed.scheme == "file":
        return JsonFileConnector(path=Path(unquote(parsed.path)))

    if parsed.scheme == "" or len(parsed.scheme) == 1:
        # single letter schemes are windows drive letters
        return JsonFileConnector(path=Path(uri))

    raise InvalidCommandInput(f"unsupported cluster uri scheme: {parsed.scheme}")


__all__ = ["ClusterConnector", "JsonFileConnector", "connector_for_uri"]
