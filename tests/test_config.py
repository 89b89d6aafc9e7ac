"""Tests for configuration and logging setup."""
import logging

import pytest

from citebib.config import DEFAULT_DOCUMENT, DEFAULT_RPC_URL, Config
from citebib.utils.logging_setup import setup_logging


def test_defaults():
    config = Config()
    assert config.DOCUMENT_PATH == DEFAULT_DOCUMENT == "README.asc"
    assert config.RPC_URL == DEFAULT_RPC_URL == "http://localhost:23119/better-bibtex/json-rpc"
    assert config.LOG_LEVEL == "WARNING"
    assert config.LOG_DIR == ""


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CITEBIB_DOCUMENT", "paper.adoc")
    monkeypatch.setenv("CITEBIB_RPC_URL", "http://127.0.0.1:8080/rpc")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    config = Config()
    assert config.DOCUMENT_PATH == "paper.adoc"
    assert config.RPC_URL == "http://127.0.0.1:8080/rpc"
    assert config.LOG_LEVEL == "DEBUG"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)


def test_setup_logging_by_name(restore_root_logger):
    setup_logging("info")
    assert restore_root_logger.level == logging.INFO


def test_setup_logging_unknown_level_falls_back(restore_root_logger):
    setup_logging("chatty")
    assert restore_root_logger.level == logging.WARNING


def test_setup_logging_writes_file(restore_root_logger, tmp_path):
    log_dir = tmp_path / "logs"
    setup_logging(logging.INFO, str(log_dir))
    logging.getLogger("citebib.test").info("hello")

    log_files = list(log_dir.glob("citebib_*.log"))
    assert len(log_files) == 1
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert "INFO - hello" in log_files[0].read_text(encoding="utf-8")
