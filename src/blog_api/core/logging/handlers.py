# src/blog_api/core/logging/handlers.py
"""
Handler configs for logging.dictConfig, built from `Settings`.

| Handler         | Destination        | Levels       | Active when                          |
| --------------- | ------------------ | ------------ | ------------------------------------ |
| `console`       | stderr             | >= LOG_LEVEL | always                               |
| `file`          | LOG_DIR/app.log    | >= LOG_LEVEL | LOG_TO_STDOUT=false and LOG_DIR set  |
| `error_file`    | LOG_DIR/errors.log | >= ERROR     | LOG_TO_STDOUT=false and LOG_DIR set  |
| `error_console` | stderr (JSON)      | >= ERROR     | otherwise                            |

Formatter ("json" / "standard") and filter ("request_id" / "redact") names refer to
entries declared by builder.make_dict_config().
"""

from pathlib import Path

from blog_api.config.settings import Settings

_FILTERS = ("request_id", "redact")


def _formatter_name(settings: Settings) -> str:
    return "json" if settings.LOG_FORMAT == "json" else "standard"


def _stream(formatter: str, level: str) -> dict:
    return {"class": "logging.StreamHandler", "formatter": formatter, "level": level, "filters": list(_FILTERS)}


def _rotating(settings: Settings, filename: str, formatter: str, level: str) -> dict:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": formatter,
        "level": level,
        "filename": str(Path(settings.LOG_DIR) / filename),
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": list(_FILTERS),
    }


def get_console_handler(settings: Settings) -> dict:
    return _stream(_formatter_name(settings), settings.LOG_LEVEL)


def get_file_handler(settings: Settings) -> dict:
    return _rotating(settings, "app.log", _formatter_name(settings), settings.LOG_LEVEL)


def get_error_file_handler(settings: Settings) -> dict:
    # always structured: this file feeds alerting
    return _rotating(settings, "errors.log", "json", "ERROR")


def get_error_console_handler(settings: Settings) -> dict:
    return _stream("json", "ERROR")
