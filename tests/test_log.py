"""Tests for logging setup."""
import logging

import pytest
from rich.logging import RichHandler

from rift_badges.log import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    def test_default_level_is_warning(self, root_logger):
        setup_logging()
        assert root_logger.level == logging.WARNING

    def test_verbose_enables_debug(self, root_logger):
        setup_logging(verbose=True)
        assert root_logger.level == logging.DEBUG

    def test_single_rich_handler(self, root_logger):
        root_logger.addHandler(logging.NullHandler())
        setup_logging()
        setup_logging()
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], RichHandler)
