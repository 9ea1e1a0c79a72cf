"""
Byte-level file access.

The readers and writers never touch the filesystem directly; they go through a
ByteStore so callers (and tests) can substitute an in-memory store.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional, Protocol, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ByteStore(Protocol):
    def read_bytes(self, path: PathLike) -> bytes: ...

    def write_bytes(self, path: PathLike, data: bytes) -> None: ...


class LocalFileStore:
    def read_bytes(self, path: PathLike) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: PathLike, data: bytes) -> None:
        Path(path).write_bytes(data)


class MemoryStore:
    """Dict-backed store; unknown paths raise FileNotFoundError like the disk would."""

    def __init__(self, files: Optional[Dict[str, bytes]] = None) -> None:
        self.files: Dict[str, bytes] = dict(files or {})

    def read_bytes(self, path: PathLike) -> bytes:
        key = str(path)
        try:
            return self.files[key]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", key) from None

    def write_bytes(self, path: PathLike, data: bytes) -> None:
        self.files[str(path)] = bytes(data)


_DEFAULT_STORE = LocalFileStore()


def get_default_store() -> ByteStore:
    return _DEFAULT_STORE


@contextmanager
def annotate_failures(action: str, path: PathLike) -> Iterator[None]:
    """Log any failure inside the block, attach the path to it, and re-raise."""
    try:
        yield
    except Exception as exc:
        logger.error("Error %s file at %s: %s", action, path, exc)
        exc.add_note(f"while {action} {path}")
        raise
