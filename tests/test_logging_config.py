"""
Tests for logging setup.
"""

import logging
import logging.handlers

import pytest
from rich.logging import RichHandler

from windrive.config import Settings
from windrive.logging_config import get_app_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    yield
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers[:] = original_handlers
    root_logger.setLevel(original_level)


class TestSetupLogging:
    def test_creates_log_directory_and_handlers(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "windrive.log"
        settings = Settings(log_file_path=str(log_file), log_level="DEBUG")

        setup_logging(settings)

        root_logger = logging.getLogger()
        assert log_file.parent.is_dir()
        assert root_logger.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in root_logger.handlers)
        file_handlers = [
            h for h in root_logger.handlers
            if isinstance(h, logging.handlers.TimedRotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].backupCount == settings.log_retention_days

    def test_repeated_setup_does_not_duplicate_handlers(self, tmp_path, restore_root_logger):
        settings = Settings(log_file_path=str(tmp_path / "windrive.log"))

        setup_logging(settings)
        setup_logging(settings)

        assert len(logging.getLogger().handlers) == 2

    def test_messages_reach_log_file(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "windrive.log"
        setup_logging(Settings(log_file_path=str(log_file), log_level="INFO"))

        get_app_logger().info("Mounted \\\\server\\share as Z:")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "Mounted \\\\server\\share as Z:" in log_file.read_text(encoding="utf-8")


def test_app_logger_name():
    assert get_app_logger().name == "windrive"
