import logging
import sys

import pytest

from tickcount import logger


@pytest.fixture
def restore_levels():
    root_level = logging.getLogger().level
    pkg_level = logger.log.level
    yield
    logging.getLogger().setLevel(root_level)
    logger.log.setLevel(pkg_level)


def test_init_logging_sets_package_level(restore_levels) -> None:
    logger.init_logging("warning")
    assert logger.log.level == logging.WARNING

    logger.init_debug_logger()
    assert logger.log.level == logging.DEBUG


def test_tick_logger_routes_to_stdout() -> None:
    logger.setup_tick_logger()
    logger.setup_tick_logger()

    tick_log = logging.getLogger(logger.TICK_LOGGER)
    assert tick_log.propagate is False
    assert tick_log.level == logging.INFO
    assert len(tick_log.handlers) == 1
    handler = tick_log.handlers[0]
    assert handler.stream is sys.stdout
    assert handler.formatter._fmt == "%(message)s"


def test_tick_line_is_bare_message(capsys) -> None:
    logger.setup_tick_logger()
    logger.tick_log.info("* tick count after request handled: %d", 5)
    assert capsys.readouterr().out == "* tick count after request handled: 5\n"


def test_tick_line_does_not_need_init_logging(capfd) -> None:
    logger.setup_tick_logger()
    logger.tick_log.info("* tick count after request handled: %d", 7)
    out, err = capfd.readouterr()
    assert out == "* tick count after request handled: 7\n"
    assert err == ""
