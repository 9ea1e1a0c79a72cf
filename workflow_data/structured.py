"""JSON (and plain HTML text) files."""

from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from .config import get_settings
from .rules import TEXT_ENCODING
from .storage import ByteStore, PathLike, annotate_failures, get_default_store


def _default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps_json(value: Any, *, indent: Optional[int] = None) -> str:
    if indent is None:
        indent = get_settings().json_indent
    return json.dumps(value, indent=indent, ensure_ascii=False, default=_default)


def loads_json(text: str) -> Any:
    return json.loads(text)


def read_json(path: PathLike, *, store: Optional[ByteStore] = None) -> Any:
    """
    Read and parse a JSON file.

    Raises:
        FileNotFoundError / OSError: the store could not read `path`.
        json.JSONDecodeError: the content is not valid JSON.
    """
    store = store or get_default_store()
    with annotate_failures("reading JSON", path):
        return loads_json(store.read_bytes(path).decode("utf-8-sig"))


def write_json(path: PathLike, value: Any, *, store: Optional[ByteStore] = None) -> None:
    """Write `value` pretty-printed (two-space indent unless configured otherwise)."""
    store = store or get_default_store()
    with annotate_failures("writing JSON", path):
        store.write_bytes(path, dumps_json(value).encode(TEXT_ENCODING))


def write_html(path: PathLike, html: str, *, store: Optional[ByteStore] = None) -> None:
    store = store or get_default_store()
    with annotate_failures("writing HTML", path):
        store.write_bytes(path, html.encode(TEXT_ENCODING))
