"""Tests for the logging setup helper."""

import logging

import pytest

from geokernel.logging_config import LOG_FORMAT, LOGGER_NAME, setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_setup_logging_configures_namespace(restore_logger):
    logger = setup_logging(logging.DEBUG)
    assert logger is restore_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logging_does_not_duplicate_handlers(restore_logger):
    setup_logging()
    setup_logging()
    assert len(restore_logger.handlers) == 1


def test_setup_logging_file(restore_logger, tmp_path):
    log_file = tmp_path / "kernel.log"
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    assert len(logger.handlers) == 2
    logging.getLogger("geokernel.composed").debug("hello from the kernel")
    for h in logger.handlers:
        h.flush()
    assert "hello from the kernel" in log_file.read_text(encoding="utf-8")
    for h in logger.handlers:
        h.close()


def test_setup_logging_closes_replaced_file_handler(restore_logger, tmp_path):
    logger = setup_logging(log_file=str(tmp_path / "first.log"))
    old = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(old) == 1
    setup_logging()
    assert old[0] not in restore_logger.handlers
    assert old[0].stream is None


def test_setup_logging_record_layout(restore_logger):
    logger = setup_logging(logging.WARNING)
    handler = logger.handlers[0]
    assert handler.formatter._fmt == LOG_FORMAT
    assert handler.level == logging.WARNING
