# src/techhub/tests/test_logging/test_builder_setup.py
import logging

from techhub.core.logging.builder import make_dict_config, setup_logging
from techhub.core.logging.filters import RequestIdFilter

from ..conftest import make_test_settings


def test_make_dict_config_file_handlers(tmp_path):
    settings = make_test_settings(LOG_FORMAT="json", LOG_TO_STDOUT=False, LOG_DIR=tmp_path)

    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "file", "error_file"}
    assert cfg["handlers"]["file"]["filename"].endswith("app.log")
    assert cfg["handlers"]["error_file"]["level"] == "ERROR"
    assert cfg["handlers"]["console"]["formatter"] == "json"
    assert cfg["formatters"]["json"]["env"] == "testing"


def test_make_dict_config_stdout_only(tmp_path):
    settings = make_test_settings(LOG_FORMAT="text", LOG_TO_STDOUT=True, LOG_DIR=tmp_path)

    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "error_console"}
    assert cfg["handlers"]["console"]["formatter"] == "standard"
    assert cfg["loggers"]["uvicorn.access"]["level"] == "WARNING"


def test_setup_logging_creates_log_dir(tmp_path, restore_logging):
    settings = make_test_settings(LOG_TO_STDOUT=False, LOG_DIR=tmp_path / "logs")
    assert not settings.LOG_DIR.exists()

    setup_logging(settings)

    assert settings.LOG_DIR.exists()
    root = logging.getLogger()
    assert root.handlers
    assert any(isinstance(f, RequestIdFilter) for f in root.filters)


def test_error_records_reach_error_file(tmp_path, restore_logging):
    settings = make_test_settings(LOG_FORMAT="json", LOG_TO_STDOUT=False, LOG_DIR=tmp_path)
    setup_logging(settings)

    log = logging.getLogger("techhub.test")
    log.info("just info")
    log.error("store exploded")
    for handler in logging.getLogger().handlers:
        handler.flush()

    errors = (tmp_path / "errors.log").read_text(encoding="utf-8")
    assert "store exploded" in errors
    assert "just info" not in errors
    assert "just info" in (tmp_path / "app.log").read_text(encoding="utf-8")
