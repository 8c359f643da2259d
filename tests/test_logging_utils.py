"""
Tests for the logging helpers.
"""

import logging

import pytest

from csview.utils.logging_utils import get_logger, set_log_level, setup_logger


@pytest.fixture
def csview_logger():
    """Leave the package logger with no handlers and no level after each test"""
    logger = logging.getLogger("csview")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_setup_logger_accepts_level_names(csview_logger):
    logger = setup_logger(level="debug")

    assert logger is csview_logger
    assert logger.level == logging.DEBUG
    assert [h.level for h in logger.handlers] == [logging.DEBUG]


def test_setup_logger_unknown_level_name_falls_back_to_info(csview_logger):
    assert setup_logger(level="chatty").level == logging.INFO


def test_setup_logger_replaces_handlers(csview_logger, tmp_path):
    log_file = tmp_path / "csview.log"
    setup_logger(level=logging.INFO, log_file=log_file)
    assert len(csview_logger.handlers) == 2

    setup_logger(level=logging.INFO, log_file=log_file, console_output=False)
    assert len(csview_logger.handlers) == 1

    logging.getLogger("csview.io.csv_reader").info("Read 3 rows from data.csv")
    csview_logger.handlers[0].flush()
    assert "INFO - Read 3 rows from data.csv" in log_file.read_text()


def test_get_logger():
    assert get_logger() is logging.getLogger("csview")
    assert get_logger("csview.render") is logging.getLogger("csview.render")


def test_set_log_level_updates_handlers(csview_logger):
    setup_logger(level=logging.WARNING)

    set_log_level(logging.DEBUG)

    assert csview_logger.level == logging.DEBUG
    assert all(h.level == logging.DEBUG for h in csview_logger.handlers)
