import logging
from pathlib import Path

import pytest

from disk_balancer.logging_config import reset_logging, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    reset_logging()
    root.setLevel(level)


def test_setup_logging_adds_file_handler(tmp_path: Path):
    log_file = tmp_path / "logs" / "plan.log"

    logger = setup_logging("diskbalancer", level=logging.DEBUG, log_file=str(log_file))
    logger.warning("hello from test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logger.name == "diskbalancer"
    assert "[DISKBALANCER] WARNING - hello from test" in log_file.read_text(encoding="utf-8")


def test_second_setup_replaces_level_and_handlers(tmp_path: Path):
    root = logging.getLogger()
    first_file = tmp_path / "first.log"
    second_file = tmp_path / "second.log"

    setup_logging("diskbalancer", level=logging.INFO, log_file=str(first_file))
    count_after_first = len(root.handlers)
    setup_logging("diskbalancer", level=logging.DEBUG, log_file=str(second_file))

    assert root.level == logging.DEBUG
    assert len(root.handlers) == count_after_first

    logging.getLogger("diskbalancer").debug("only in second")
    for handler in root.handlers:
        handler.flush()

    assert "only in second" in second_file.read_text(encoding="utf-8")
    assert "only in second" not in first_file.read_text(encoding="utf-8")
