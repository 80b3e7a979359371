"""
Tests for logging setup.
"""

import logging

import pytest
from rich.logging import RichHandler

from confseek.utils.logging import _parse_level, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger("confseek")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_rich_console_handler(self):
        logger = setup_logging(level="DEBUG")
        assert logger.name == "confseek"
        assert logger.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in logger.handlers)

    def test_plain_console_handler(self):
        logger = setup_logging(use_rich=False)
        stream_handlers = [
            h for h in logger.handlers if type(h) is logging.StreamHandler
        ]
        assert len(stream_handlers) == 1

    def test_repeated_setup_does_not_duplicate(self):
        setup_logging()
        logger = setup_logging()
        assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1

    def test_null_handler_kept(self):
        logger = setup_logging(console_enabled=False)
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_file_handler_writes_child_logger_records(self, tmp_path):
        log_file = tmp_path / "logs" / "confseek.log"
        logger = setup_logging(level="DEBUG", log_file=log_file, console_enabled=False)

        get_logger("confseek.resolver").warning("preferred path missing")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "[WARNING ] confseek.resolver: preferred path missing" in content


@pytest.mark.unit
class TestParseLevel:
    """Tests for _parse_level."""

    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_int_passthrough(self):
        assert _parse_level(15) == 15

    def test_unknown_defaults_to_warning(self):
        assert _parse_level("chatty") == logging.WARNING
