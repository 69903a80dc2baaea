"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from source_metrics.config import AnalysisConfig
from source_metrics.logging_config import ROOT_LOGGER, get_logger, level_for, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    logger = logging.getLogger(ROOT_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


@pytest.mark.parametrize(
    "verbosity,level",
    [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
)
def test_level_follows_config_verbosity(verbosity, level):
    logger = setup_logging(AnalysisConfig(verbosity=verbosity).verbosity)
    assert logger.level == level


def test_unknown_verbosity():
    with pytest.raises(ValueError, match="loud"):
        level_for("loud")


def test_repeated_setup_replaces_handlers():
    setup_logging("normal")
    logger = setup_logging("verbose")
    assert len([h for h in logger.handlers if isinstance(h, RichHandler)]) == 1
    assert logger.level == logging.DEBUG


def test_log_file(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging("verbose", log_file=str(log_file))
    get_logger("scanning.scanner").debug("scanning a.rb")
    for handler in logging.getLogger(ROOT_LOGGER).handlers:
        handler.flush()
    assert "source_metrics.scanning.scanner - DEBUG - scanning a.rb" in log_file.read_text()


def test_get_logger_namespace():
    assert get_logger().name == ROOT_LOGGER
    assert get_logger("metrics").name == "source_metrics.metrics"
    assert get_logger("source_metrics.api").name == "source_metrics.api"
