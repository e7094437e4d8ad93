import pytest

from disk_balancer.core.errors import ConfigurationError
from disk_balancer.planner.loader import load_planner
from disk_balancer.planner.static import StaticPlanner


def test_load_planner_calls_factory():
    planner = load_planner("disk_balancer.planner.static:StaticPlanner")
    assert isinstance(planner, StaticPlanner)


@pytest.mark.parametrize(
    "factory",
    [
        "no_colon_here",
        "disk_balancer.does_not_exist:build",
        "disk_balancer.planner.static:missing",
        "disk_balancer.config:DEFAULT_OUTPUT_DIR",
        "disk_balancer.config:DiskBalancerConfig",
    ],
)
def test_load_planner_rejects_bad_factories(factory):
    with pytest.raises(ConfigurationError):
        load_planner(factory)
