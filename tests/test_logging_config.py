"""Tests for logging setup."""

import logging

import pytest

from profile_optimizer.utils.logging_config import LOG_FILE, resolve_level, setup_logging


@pytest.fixture
def reset_logger():
    yield
    logger = logging.getLogger("profile_optimizer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestResolveLevel:
    def test_names_and_constants(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" WARNING ") == logging.WARNING
        assert resolve_level(logging.ERROR) == logging.ERROR

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            resolve_level("chatty")


class TestSetupLogging:
    def test_file_and_console_handlers(self, tmp_path, reset_logger):
        logger = setup_logging(str(tmp_path / "logs"), "debug")
        assert logger.level == logging.DEBUG
        file_handler, console_handler = logger.handlers
        assert console_handler.level == logging.WARNING

        logging.getLogger("profile_optimizer.analysis").debug("scored")
        file_handler.flush()
        assert "scored" in (tmp_path / "logs" / LOG_FILE).read_text(encoding="utf-8")

    def test_rerun_replaces_handlers(self, tmp_path, reset_logger):
        setup_logging(str(tmp_path))
        logger = setup_logging(str(tmp_path))
        assert len(logger.handlers) == 2
