"""
Record matching and the argument checks shared by the record operations.

Equality here is strict: values only match when they are equal *and* of the
same kind, so 30 never matches "30" and True never matches 1.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableSequence, Sequence
from typing import Any

from .errors import ContractError
from .rules import MEMBERSHIP_TYPES


def same_value(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b
    if isinstance(a, str) != isinstance(b, str):
        return False
    return a == b


def matches(record: Mapping[str, Any], criteria: Mapping[str, Any]) -> bool:
    """True if every criterion holds for `record` (vacuously true for no criteria)."""
    for key, expected in criteria.items():
        actual = record.get(key)
        if isinstance(expected, MEMBERSHIP_TYPES):
            if not any(same_value(actual, candidate) for candidate in expected):
                return False
        elif not same_value(actual, expected):
            return False
    return True


def is_collection(data: Any) -> bool:
    return isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray))


def validate_collection(data: Any, op: str, *, mutable: bool = False) -> None:
    if mutable:
        if not isinstance(data, MutableSequence):
            raise ContractError(f"{op}: data must be a list.")
    elif not is_collection(data):
        raise ContractError(f"{op}: data must be a sequence of records.")


def validate_criteria(criteria: Any, op: str, name: str = "filter") -> None:
    if criteria is None or not isinstance(criteria, Mapping):
        raise ContractError(f"{op}: {name} parameter must be a non-null mapping.")
