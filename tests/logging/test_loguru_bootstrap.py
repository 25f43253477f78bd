import logging
from pathlib import Path

from envspaces.logging import InterceptHandler, get_logger, setup_logging


def test_setup_logging_console_and_file(tmp_path: Path, restore_logging):
    logfile = tmp_path / "app.log"
    setup_logging(level="INFO", console=True, file_path=logfile)
    logger = get_logger()
    logger.info("hello from loguru")

    std = logging.getLogger("std")
    std.info("hello from stdlib")

    # Removing the sinks closes the file handle and flushes it
    logger.remove()

    data = logfile.read_text(encoding="utf-8")
    assert "hello from loguru" in data
    assert "hello from stdlib" in data


def test_level_filters_records(tmp_path: Path, restore_logging):
    logfile = tmp_path / "app.log"
    setup_logging(level="warning", console=False, file_path=logfile)

    logging.getLogger("envspaces.spaces.box").info("quiet")
    logging.getLogger("envspaces.spaces.box").warning("loud")
    get_logger().remove()

    data = logfile.read_text(encoding="utf-8")
    assert "loud" in data
    assert "quiet" not in data


def test_serialized_file_sink(tmp_path: Path, restore_logging):
    import json

    logfile = tmp_path / "app.jsonl"
    setup_logging(level="INFO", console=False, file_path=logfile, serialize=True)
    get_logger().info("structured")
    get_logger().remove()

    records = [json.loads(line) for line in logfile.read_text(encoding="utf-8").splitlines()]
    assert records[-1]["record"]["message"] == "structured"


def test_bridge_resets_package_loggers(restore_logging):
    package_logger = logging.getLogger("envspaces.spaces.custom")
    package_logger.addHandler(logging.NullHandler())
    package_logger.propagate = False

    setup_logging(console=False)

    assert package_logger.handlers == []
    assert package_logger.propagate
    assert isinstance(logging.getLogger().handlers[0], InterceptHandler)


def test_import_has_no_side_effects():
    import importlib

    m = importlib.import_module("envspaces.logging.loguru_bootstrap")
    assert hasattr(m, "setup_logging")
