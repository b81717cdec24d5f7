import logging

import pytest

from shortlink_platform.logging_config import ROOT_LOGGER_NAME, configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_level():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved = logger.level
    yield
    logger.setLevel(saved)


def test_get_logger_namespaces():
    assert get_logger().name == "shortlink"
    assert get_logger("registry").name == "shortlink.registry"


def test_configure_logging_sets_level():
    log = configure_logging("DEBUG")
    assert log.level == logging.DEBUG
    log = configure_logging(logging.WARNING)
    assert log.level == logging.WARNING


def test_configure_logging_unknown_level_falls_back_to_info():
    assert configure_logging("LOUD").level == logging.INFO
