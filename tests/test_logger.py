"""
Tests for logging setup.

Created: 2026-10-17
"""

import logging
import pytest
from packpick.utils.logger import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler, (logging.FileHandler, logging.NullHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_logs_to_file(tmp_path, restore_root_logger):
    """Records go to the configured file."""
    log_file = tmp_path / "logs" / "packpick.log"

    setup_logging("INFO", log_file)
    logging.getLogger("packpick.test").info("picker started")
    for handler in restore_root_logger.handlers:
        handler.flush()

    content = log_file.read_text()
    assert "[INFO] packpick.test: picker started" in content


def test_no_file_installs_null_handler(restore_root_logger):
    """Without a file nothing is written to the terminal."""
    setup_logging("DEBUG")

    assert restore_root_logger.level == logging.DEBUG
    assert all(isinstance(h, logging.NullHandler) for h in restore_root_logger.handlers)
