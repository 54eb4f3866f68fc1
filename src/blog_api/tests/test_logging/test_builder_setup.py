# src/blog_api/tests/test_logging/test_builder_setup.py
import logging

from blog_api.core.logging.builder import make_dict_config, setup_logging
from blog_api.core.logging.filters import RequestIdFilter


# Minimal Settings-like object for testing
class DummySettings:
    LOG_FORMAT = "json"
    LOG_LEVEL = "INFO"
    LOG_TO_STDOUT = False
    LOG_DIR = None  # will be set in test
    LOG_MAX_BYTES = 1000
    LOG_BACKUP_COUNT = 1
    ENV = "development"
    ENABLE_SQL_LOGGING = False


def test_make_dict_config_contains_file_handlers(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path
    cfg = make_dict_config(settings)

    assert "console" in cfg["handlers"]
    # LOG_TO_STDOUT=False with a LOG_DIR: file handlers instead of error_console
    assert "file" in cfg["handlers"]
    assert "error_file" in cfg["handlers"]
    assert "error_console" not in cfg["handlers"]
    assert cfg["handlers"]["file"]["filename"] == str(tmp_path / "app.log")
    assert "json" in cfg["formatters"]


def test_make_dict_config_stdout_only():
    settings = DummySettings()
    settings.LOG_TO_STDOUT = True
    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "error_console"}
    assert cfg["loggers"][""]["handlers"] == ["console", "error_console"]


def test_make_dict_config_loggers():
    settings = DummySettings()
    settings.LOG_TO_STDOUT = True
    settings.LOG_LEVEL = "DEBUG"
    cfg = make_dict_config(settings)

    assert cfg["loggers"]["blog_api"]["level"] == "DEBUG"
    assert cfg["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"

    settings.ENABLE_SQL_LOGGING = True
    assert make_dict_config(settings)["loggers"]["sqlalchemy.engine"]["level"] == "DEBUG"


def test_json_formatter_uses_project_name():
    settings = DummySettings()
    settings.LOG_TO_STDOUT = True
    cfg = make_dict_config(settings)

    assert cfg["formatters"]["json"]["service"] == "blog-api"
    assert cfg["formatters"]["json"]["env"] == "development"


def test_setup_logging_creates_log_dir(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path / "logs"
    assert not settings.LOG_DIR.exists()

    setup_logging(settings)

    assert settings.LOG_DIR.exists()
    root = logging.getLogger()
    assert root.handlers
    assert any(isinstance(f, RequestIdFilter) for f in root.filters)
