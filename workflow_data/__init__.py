"""
Small in-memory helpers for lists of records (dicts): filter, update, erase,
pivot, sort, sum, merge, pluck; plus CSV and JSON file readers/writers.
"""

from .aggregate import pivot, sum_property
from .errors import (
    ContractError,
    DataError,
    EmptyTableError,
    MalformedRowError,
    NonNumericValueError,
    PivotCollisionError,
    WorkflowDataError,
)
from .matching import matches
from .models import DatasetSummary
from .ordering import sort
from .records import erase, filter_records, iterate, remove_props, transform, update
from .storage import ByteStore, LocalFileStore, MemoryStore
from .structured import dumps_json, loads_json, read_json, write_html, write_json
from .tabular import decode_bytes, parse_csv, read_csv, render_csv, write_csv
from .views import get_map, merge, pluck, pluck_unique, summary

filter = filter_records

__version__ = "0.1.0"

__all__ = [
    "ByteStore",
    "ContractError",
    "DataError",
    "DatasetSummary",
    "EmptyTableError",
    "LocalFileStore",
    "MalformedRowError",
    "MemoryStore",
    "NonNumericValueError",
    "PivotCollisionError",
    "WorkflowDataError",
    "decode_bytes",
    "dumps_json",
    "erase",
    "filter",
    "filter_records",
    "get_map",
    "iterate",
    "loads_json",
    "matches",
    "merge",
    "parse_csv",
    "pivot",
    "pluck",
    "pluck_unique",
    "read_csv",
    "read_json",
    "remove_props",
    "render_csv",
    "sort",
    "sum_property",
    "summary",
    "transform",
    "update",
    "write_csv",
    "write_html",
    "write_json",
]
