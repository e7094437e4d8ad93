from __future__ import annotations

import io
import json
from contextlib import contextmanager
from pathlib import Path

import pytest

from disk_balancer.command.persistence import (
    LocalFileSink,
    artifact_paths,
    write_artifact,
    write_artifacts,
)
from disk_balancer.config import BEFORE_TEMPLATE, PLAN_TEMPLATE
from disk_balancer.core.errors import PersistenceFailed
from disk_balancer.core.types import NodePlan, Step, Volume


class TrackingHandle(io.BytesIO):
    """BytesIO that can be told to fail on write."""

    def __init__(self, fail: bool = False) -> None:
        super().__init__()
        self._fail = fail

    def write(self, data):  # type: ignore[no-untyped-def, override]
        if self._fail:
            raise OSError("disk full")
        return super().write(data)


class FakeSink:
    """
    In memory sink.

    fail_on
    Paths whose write raises OSError.

    The handle stays reachable after close so tests can check it was closed.
    """

    def __init__(self, fail_on: set[Path] | None = None) -> None:
        self.fail_on = fail_on or set()
        self.handles: dict[Path, TrackingHandle] = {}
        self.written: dict[Path, bytes] = {}

    @contextmanager
    def _open(self, path: Path):  # type: ignore[no-untyped-def]
        handle = TrackingHandle(fail=path in self.fail_on)
        self.handles[path] = handle
        try:
            yield handle
            self.written[path] = handle.getvalue()
        finally:
            handle.close()

    def open_for_write(self, path: Path):  # type: ignore[no-untyped-def]
        return self._open(path)


def _make_plans() -> list[NodePlan]:
    step = Step(
        source_volume=Volume(uuid="v1", path="/data/1"),
        destination_volume=Volume(uuid="v2", path="/data/2"),
        bytes_to_move=10,
    )
    return [NodePlan(node_name="node-7", node_uuid="uuid-7", port=9867, steps=[step])]


def test_artifact_paths_follow_templates():
    paths = artifact_paths(Path("/out"), "node-7", BEFORE_TEMPLATE, PLAN_TEMPLATE)
    assert paths.before == Path("/out/before.node-7.json")
    assert paths.plan == Path("/out/plan.node-7.json")


def test_write_artifacts_writes_pair_and_closes_handles():
    sink = FakeSink()
    paths = artifact_paths(Path("/out"), "node-7", BEFORE_TEMPLATE, PLAN_TEMPLATE)

    write_artifacts(sink, paths, '{"nodes": []}', _make_plans())

    assert sink.written[paths.before] == b'{"nodes": []}'
    plans = json.loads(sink.written[paths.plan].decode("utf-8"))
    assert plans[0]["node_uuid"] == "uuid-7"
    assert plans[0]["steps"][0]["bytes_to_move"] == 10
    assert all(h.closed for h in sink.handles.values())


def test_plan_write_failure_keeps_before_and_releases_handle():
    paths = artifact_paths(Path("/out"), "node-7", BEFORE_TEMPLATE, PLAN_TEMPLATE)
    sink = FakeSink(fail_on={paths.plan})

    with pytest.raises(PersistenceFailed) as info:
        write_artifacts(sink, paths, "{}", _make_plans())

    assert isinstance(info.value.__cause__, OSError)
    assert paths.before in sink.written
    assert paths.plan not in sink.written
    assert sink.handles[paths.plan].closed


def test_before_write_failure_skips_plan():
    paths = artifact_paths(Path("/out"), "node-7", BEFORE_TEMPLATE, PLAN_TEMPLATE)
    sink = FakeSink(fail_on={paths.before})

    with pytest.raises(PersistenceFailed):
        write_artifacts(sink, paths, "{}", _make_plans())

    assert sink.handles[paths.before].closed
    assert paths.plan not in sink.handles


def test_local_sink_pair_is_not_atomic(tmp_path: Path):
    paths = artifact_paths(tmp_path / "out", "node-7", BEFORE_TEMPLATE, PLAN_TEMPLATE)
    # a directory where the plan file should go makes the second open fail
    paths.plan.mkdir(parents=True)

    with pytest.raises(PersistenceFailed):
        write_artifacts(LocalFileSink(), paths, "{}", _make_plans())

    assert paths.before.read_text(encoding="utf-8") == "{}"
    assert paths.plan.is_dir()


def test_local_sink_creates_parent_and_overwrites(tmp_path: Path):
    target = tmp_path / "a" / "b" / "plan.json"

    write_artifact(LocalFileSink(), target, "first")
    write_artifact(LocalFileSink(), target, "second")

    assert target.read_text(encoding="utf-8") == "second"
