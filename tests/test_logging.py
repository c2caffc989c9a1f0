"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from jeopardy.config import default_settings
from jeopardy.main import setup_logging


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    saved_handlers = logger.handlers[:]
    saved_level = logger.level
    yield logger
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)


def test_file_and_console_handlers(tmp_path, root_logger):
    settings = default_settings()
    settings['logging'].update({'file': str(tmp_path / 'logs' / 'game.log'), 'level': 'debug'})

    setup_logging(settings)

    handler_types = [type(handler) for handler in root_logger.handlers]
    assert handler_types == [RotatingFileHandler, logging.StreamHandler]
    assert root_logger.level == logging.DEBUG
    assert root_logger.handlers[1].level == logging.WARNING
    assert (tmp_path / 'logs' / 'game.log').exists()


def test_unwritable_log_file_falls_back_to_console(tmp_path, root_logger, capsys):
    settings = default_settings()
    # A directory cannot be opened as a log file
    settings['logging']['file'] = str(tmp_path)

    setup_logging(settings)

    assert [type(handler) for handler in root_logger.handlers] == [logging.StreamHandler]
    assert 'Could not open log file' in capsys.readouterr().err
