from __future__ import annotations

import logging

import pytest

from fast_rules.utils import logging as logging_utils


@pytest.fixture
def restore_root_logger(monkeypatch):
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    monkeypatch.setattr(logging_utils, "_logging_configured", False)
    monkeypatch.setattr(logging_utils, "_log_file_path", None)
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def test_logging_uses_custom_file_name(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.delenv("LOG_FILE_NAME", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "info")

    logging_utils.setup_logging(log_file_name="rules.log", log_dir=tmp_path)

    path = logging_utils.get_log_file_path()
    assert path == tmp_path / "rules.log"
    assert path.exists()
    assert logging.getLogger().level == logging.INFO


def test_logging_without_file(monkeypatch, restore_root_logger):
    monkeypatch.delenv("LOG_FILE_NAME", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    logging_utils.setup_logging()

    assert logging_utils.get_log_file_path() is None
    assert logging.getLogger().level == logging.WARNING
