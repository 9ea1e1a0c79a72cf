"""
Error taxonomy.

Contract errors are raised before any record is looked at. Data errors abort
the whole call; no operation returns a partial result. I/O errors are the
standard OSError family, re-raised with the file path attached as a note.
"""

from __future__ import annotations

from typing import Any


class WorkflowDataError(Exception):
    """Base class for every error raised by workflow_data itself."""


class ContractError(WorkflowDataError, TypeError):
    """An argument has the wrong shape or type."""


class DataError(WorkflowDataError, ValueError):
    """The content being processed is malformed."""


class MalformedRowError(DataError):
    def __init__(self, line_number: int, found: int, expected: int) -> None:
        self.line_number = line_number
        self.found = found
        self.expected = expected
        super().__init__(
            f"Row {line_number} has {found} columns; expected {expected}."
        )


class NonNumericValueError(DataError, TypeError):
    """A pivot value is not a number."""

    def __init__(self, index: int, key: str, value: Any) -> None:
        self.index = index
        self.key = key
        self.value = value
        super().__init__(
            f'pivot: value for key "{key}" in item at index {index} '
            f"should be a number, got {type(value).__name__}."
        )


class PivotCollisionError(DataError):
    def __init__(self, index: int, key: str) -> None:
        self.index = index
        self.key = key
        super().__init__(
            f'pivot: column value in item at index {index} collides with row key "{key}".'
        )


class EmptyTableError(DataError):
    """There is no tabular representation for zero records."""
