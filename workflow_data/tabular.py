"""
CSV reading and writing.

Reading:
- bytes are decoded (UTF-8 first, charset-normalizer's best guess otherwise)
  and newlines normalized to LF
- first row is the header; names and values are trimmed
- values that spell out a whole number become int/float, the rest stay text
- any row whose width differs from the header aborts the whole parse

Writing:
- header from the first record's field names
- every value quoted, so embedded commas, quotes and newlines survive
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import Any, Dict, List, NamedTuple, Optional

from charset_normalizer import from_bytes

from .errors import ContractError, EmptyTableError, MalformedRowError
from .matching import is_collection
from .rules import DELIMITER, LINE_TERMINATOR, TEXT_ENCODING
from .storage import ByteStore, PathLike, annotate_failures, get_default_store
from .values import coerce_value

logger = logging.getLogger(__name__)


class DecodedText(NamedTuple):
    text: str
    encoding: str
    fallback: bool


def decode_bytes(raw: bytes) -> DecodedText:
    """
    Decode file bytes to LF-terminated text.

    Rules:
    - Valid UTF-8 (BOM or not) is taken as-is.
    - Otherwise use charset-normalizer's best guess.
    - If that guess fails to decode, fall back to UTF-8 with replacement
      characters and log a warning.
    """
    fallback = False
    try:
        decode_used = "utf-8-sig"
        text = raw.decode(decode_used)
    except UnicodeDecodeError:
        match = from_bytes(raw).best()
        decode_used = match.encoding if match is not None else TEXT_ENCODING
        try:
            text = raw.decode(decode_used)
        except (UnicodeDecodeError, LookupError):
            logger.warning(
                "Could not decode input as %s; replacing undecodable bytes", decode_used
            )
            decode_used = TEXT_ENCODING
            text = raw.decode(decode_used, errors="replace")
            fallback = True

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return DecodedText(text, decode_used, fallback)


def parse_csv(text: str) -> List[Dict[str, Any]]:
    """Parse CSV text into records. Empty text gives an empty list."""
    text = text.strip()
    if not text:
        return []

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=DELIMITER, skipinitialspace=True)
    headers = [name.strip() for name in next(reader)]

    records: List[Dict[str, Any]] = []
    for row in reader:
        if len(row) != len(headers):
            raise MalformedRowError(reader.line_num, len(row), len(headers))
        records.append(
            {header: coerce_value(value.strip()) for header, value in zip(headers, row)}
        )
    return records


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def render_csv(data: Sequence[Mapping[str, Any]]) -> str:
    if not is_collection(data):
        raise ContractError("render_csv: data must be a sequence of records.")
    if len(data) == 0:
        raise EmptyTableError("Invalid data: Expected a non-empty list of records.")
    if not all(isinstance(record, Mapping) for record in data):
        raise ContractError("render_csv: every row must be a mapping.")

    headers = list(data[0].keys())
    out = io.StringIO(newline="")

    header_writer = csv.writer(out, delimiter=DELIMITER, lineterminator=LINE_TERMINATOR)
    header_writer.writerow(headers)

    row_writer = csv.writer(
        out, delimiter=DELIMITER, lineterminator=LINE_TERMINATOR, quoting=csv.QUOTE_ALL
    )
    for record in data:
        row_writer.writerow([_cell(record.get(header)) for header in headers])

    return out.getvalue().rstrip(LINE_TERMINATOR)


def read_csv(path: PathLike, *, store: Optional[ByteStore] = None) -> List[Dict[str, Any]]:
    """
    Read a CSV file into records.

    Raises:
        FileNotFoundError / OSError: the store could not read `path`.
        MalformedRowError: a row's width differs from the header's.
    """
    store = store or get_default_store()
    with annotate_failures("reading CSV", path):
        decoded = decode_bytes(store.read_bytes(path))
        return parse_csv(decoded.text)


def write_csv(path: PathLike, data: Sequence[Mapping[str, Any]], *, store: Optional[ByteStore] = None) -> None:
    store = store or get_default_store()
    content = render_csv(data)
    with annotate_failures("writing CSV", path):
        store.write_bytes(path, content.encode(TEXT_ENCODING))
