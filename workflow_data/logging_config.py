"""Logging setup for processes embedding workflow_data.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
installed here, and only when asked to (the HTTP app does so on import).
"""

from __future__ import annotations

import json
import logging
import sys
import time
from datetime import datetime, timezone
from typing import Any, Optional

from .config import get_settings

_STANDARD_ATTRS = {
    "name", "msg", "args", "levelname", "levelno", "pathname", "filename", "module",
    "exc_info", "exc_text", "stack_info", "lineno", "funcName", "created", "msecs",
    "relativeCreated", "thread", "threadName", "processName", "process", "taskName",
}


def _utc_iso8601() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonFormatter(logging.Formatter):
    """One JSON object per line; `extra={...}` keys are merged in."""

    def format(self, record: logging.LogRecord) -> str:
        base: dict[str, Any] = {
            "timestamp": _utc_iso8601(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and key not in base:
                base[key] = value
        if record.exc_info:
            base["exception"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    converter = time.gmtime  # UTC

    def __init__(self) -> None:
        super().__init__("%(asctime)sZ | %(levelname)s | %(name)s | %(message)s")


def setup_logging(
    *,
    level: Optional[str] = None,
    json_logs: Optional[bool] = None,
    override_root_handlers: Optional[bool] = None,
) -> logging.Handler:
    """
    Install a stdout handler on the root logger.

    Env vars (see config.py):
      - WORKFLOW_DATA_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default INFO)
      - WORKFLOW_DATA_LOG_JSON: 1/0 (default 0)
      - WORKFLOW_DATA_LOG_OVERRIDE: 1/0 (default 0)
         If 1, replaces any pre-configured root handlers.
         If 0, only adds the handler if root has none.

    Returns the handler that was built, whether or not it was attached.
    """
    config = get_settings(reload=True).logging

    resolved_level = (level or config.level).upper()
    use_json = config.json_logs if json_logs is None else json_logs
    override = config.override_root_handlers if override_root_handlers is None else override_root_handlers

    root = logging.getLogger()
    root.setLevel(getattr(logging, resolved_level, logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter() if use_json else TextFormatter())

    if override:
        for existing in list(root.handlers):
            root.removeHandler(existing)
        root.addHandler(handler)
    elif not root.handlers:
        root.addHandler(handler)

    # charset-normalizer is chatty at DEBUG
    logging.getLogger("charset_normalizer").setLevel(logging.WARNING)
    return handler
