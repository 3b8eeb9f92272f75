"""
Tests for logging_config

Verifies console/file handler setup, module level overrides and level
validation.
"""

import logging

import pytest

from logging_config import (
    ERROR_LOG_FILE, HISTORY_LOG_FILE, configure_module_logger, get_logger, log_exception, setup_logging
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("scheduling").setLevel(logging.NOTSET)
    logging.getLogger("offseason.draft_manager").setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for setup_logging"""

    def test_console_only(self):
        setup_logging(level="WARNING", enable_file=False)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.WARNING

    def test_file_handlers(self, tmp_path):
        setup_logging(level="INFO", log_dir=str(tmp_path), enable_console=False, enable_file=True)
        get_logger("league_history.test").error("boom")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "boom" in (tmp_path / HISTORY_LOG_FILE).read_text()
        assert "boom" in (tmp_path / ERROR_LOG_FILE).read_text()

    def test_default_module_levels(self):
        setup_logging(level="DEBUG", enable_file=False)
        assert logging.getLogger("scheduling").level == logging.WARNING

    def test_custom_module_levels(self):
        setup_logging(level="INFO", enable_file=False, module_levels={"offseason.draft_manager": "ERROR"})
        assert logging.getLogger("offseason.draft_manager").level == logging.ERROR

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging(level="LOUD", enable_file=False)


class TestConfigureModuleLogger:
    """Tests for configure_module_logger"""

    def test_sets_level(self):
        logger = configure_module_logger("scheduling", level="debug")
        assert logger is logging.getLogger("scheduling")
        assert logger.level == logging.DEBUG

    def test_no_level_keeps_existing(self):
        logging.getLogger("scheduling").setLevel(logging.ERROR)
        assert configure_module_logger("scheduling").level == logging.ERROR


class TestLogException:
    """Tests for log_exception"""

    def test_context_and_traceback(self, caplog):
        logger = get_logger("league_history.test")
        try:
            raise KeyError("team-99")
        except KeyError as e:
            with caplog.at_level(logging.WARNING, logger="league_history.test"):
                log_exception(logger, e, context={"year": 2025}, level="WARNING")

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert "[year=2025]" in record.getMessage()
        assert "KeyError" in record.getMessage()
        assert record.exc_info is not None
