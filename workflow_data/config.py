"""Runtime settings read from the environment.

Only the logging setup and the HTTP layer consult these; the record
operations themselves take no configuration.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

ENV_PREFIX = "WORKFLOW_DATA_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO")
    json_logs: bool = Field(default=False)
    override_root_handlers: bool = Field(default=False)

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        text = str(value or "INFO").strip().upper()
        if text not in _LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(_LOG_LEVELS)}")
        return text


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    json_indent: int = Field(default=2, ge=0, le=8)
    max_upload_bytes: int = Field(default=10 * 1024 * 1024, ge=1)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        source = os.environ if env is None else env

        def pick(name: str) -> Optional[str]:
            value = source.get(ENV_PREFIX + name)
            if value is None or value.strip() == "":
                return None
            return value.strip()

        log: dict[str, object] = {}
        for env_name, field in (
            ("LOG_LEVEL", "level"),
            ("LOG_JSON", "json_logs"),
            ("LOG_OVERRIDE", "override_root_handlers"),
        ):
            value = pick(env_name)
            if value is not None:
                log[field] = value

        payload: dict[str, object] = {"logging": log}
        for env_name, field in (
            ("JSON_INDENT", "json_indent"),
            ("MAX_UPLOAD_BYTES", "max_upload_bytes"),
        ):
            value = pick(env_name)
            if value is not None:
                payload[field] = value

        return cls.model_validate(payload)


_SETTINGS_CACHE: Optional[Settings] = None
_SETTINGS_LOCK = threading.Lock()


def get_settings(*, reload: bool = False) -> Settings:
    """Return cached settings, optionally forcing reload from env."""
    global _SETTINGS_CACHE
    with _SETTINGS_LOCK:
        if reload or _SETTINGS_CACHE is None:
            _SETTINGS_CACHE = Settings.from_env()
        return _SETTINGS_CACHE


def clear_settings_cache() -> None:
    global _SETTINGS_CACHE
    with _SETTINGS_LOCK:
        _SETTINGS_CACHE = None


__all__ = [
    "ENV_PREFIX",
    "LoggingSettings",
    "Settings",
    "ValidationError",
    "clear_settings_cache",
    "get_settings",
]
