"""
Tests for observability — logging level resolution and handler setup.
"""

import logging

import pytest

from railshadow.core.observability.logging_config import (
    LOG_LEVEL_ENV,
    resolve_level,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLevel:
    def test_default_warning(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert resolve_level() == "WARNING"

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
        assert resolve_level() == "INFO"

    def test_flags_beat_env(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
        assert resolve_level(debug=True) == "DEBUG"
        assert resolve_level(verbose=True) == "INFO"

    def test_debug_beats_quiet(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert resolve_level(debug=True, quiet=True) == "DEBUG"
        assert resolve_level(quiet=True) == "ERROR"


class TestSetupLogging:
    def test_single_console_handler(self, restore_root_logger):
        setup_logging("INFO")
        setup_logging("INFO")
        root = restore_root_logger
        assert len(root.handlers) == 1
        assert root.level == logging.INFO

    def test_unknown_level_falls_back(self, restore_root_logger):
        setup_logging("CHATTY")
        assert restore_root_logger.level == logging.WARNING

    def test_file_handler(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "railshadow.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")

        root = restore_root_logger
        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG

        logging.getLogger("railshadow.test").debug("extractor trace")
        for handler in root.handlers:
            handler.flush()
        assert "extractor trace" in log_file.read_text(encoding="utf-8")

    def test_file_handler_inherits_console_level(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "railshadow.log"
        setup_logging("ERROR", log_file=str(log_file))
        file_handler = [h for h in restore_root_logger.handlers if isinstance(h, logging.FileHandler)]
        assert file_handler[0].level == logging.ERROR
