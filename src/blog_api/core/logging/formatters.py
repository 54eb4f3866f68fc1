# src/blog_api/core/logging/formatters.py

"""
Custom logging formatters.

  - JsonFormatter: structured JSON logs for log collectors. Includes service, env,
    version and request_id, plus every `extra={...}` key passed at the call site.

  - ColorFormatter: compact ANSI-colored lines for local development consoles.

The builder (dictConfig) picks one of them per handler from `LOG_FORMAT`:

    formatters = {
        "standard": {"()": ColorFormatter, "format": "..."},
        "json": {"()": JsonFormatter, "env": settings.ENV, "service": "blog-api"},
    }

Formatters include whatever is passed in `extra`. Sensitive keys are masked by
`RedactFilter` before the record reaches them.
"""

import json
import logging
from typing import Any
from logging import LogRecord
from blog_api.utils.logging import get_project_version

PROJECT_VERSION = get_project_version()

# Attributes every LogRecord carries. Anything else on the record came from `extra`.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """
    Structured JSON formatter.

    Construction:
      - env: environment name (e.g. "development" | "production"); optional.
      - service: logical service name included in every line.
      - datefmt: passed to logging.Formatter (used by formatTime).

    Must never raise: non-serializable extras are converted with `str()`.
    """

    def __init__(self, *, env: str | None = None, service: str = "blog-api", datefmt: str | None = None):
        super().__init__(datefmt=datefmt)
        self.env = env
        self.service = service

    def format(self, record: LogRecord) -> str:
        log_record: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "pathname": record.pathname,
            "lineno": record.lineno,
            "request_id": getattr(record, "request_id", "-"),
            "service": self.service,
            "env": self.env,
            "version": PROJECT_VERSION,
        }

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)

        # extras: attributes added via `extra={...}`
        for k, v in record.__dict__.items():
            if k in _RESERVED_ATTRS or k in log_record or k.startswith("_"):
                continue
            try:
                json.dumps(v)
                log_record[k] = v
            except (TypeError, ValueError):
                log_record[k] = str(v)

        # ensure_ascii=False keeps unicode titles readable
        return json.dumps(log_record, ensure_ascii=False, default=str)


class ColorFormatter(logging.Formatter):
    """
    Development console formatter: the configured format string, with the level
    name colorized. Defaults to TIMESTAMP | LEVEL | LOGGER | REQUEST_ID | MESSAGE.
    """

    DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s"
    COLOR_CODES = {
        "DEBUG": "\033[36m",        # cyan
        "INFO": "\033[32m",         # green
        "WARNING": "\033[33m",      # yellow
        "ERROR": "\033[31m",        # red
        "CRITICAL": "\033[1;41m",   # bold on red background
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        super().__init__(fmt=fmt or self.DEFAULT_FORMAT, datefmt=datefmt)

    def format(self, record: LogRecord) -> str:
        # color a copy: other handlers (files, JSON) share the same record
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLOR_CODES.get(record.levelname)
        if color:
            colored.levelname = f"{color}{record.levelname:<8}{self.RESET}"
        if not hasattr(colored, "request_id"):
            colored.request_id = "-"
        return super().format(colored)
