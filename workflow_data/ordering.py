"""Stable multi-key sorting of records."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from functools import cmp_to_key
from typing import Any, List, Union

from .errors import ContractError
from .matching import validate_collection
from .rules import SORT_ASC, SORT_ORDERS
from .values import is_number


def _kind(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "text"
    # datetime before date: datetime is a date subclass but they don't compare
    if isinstance(value, datetime):
        return "datetime"
    if isinstance(value, date):
        return "date"
    return "other"


def _cmp(a: Any, b: Any) -> int:
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1

    kind = _kind(a)
    if kind == "other" or kind != _kind(b):
        a, b = str(a), str(b)
    # naive and aware datetimes can't be ordered against each other
    elif kind == "datetime" and (a.tzinfo is None) != (b.tzinfo is None):
        a, b = a.isoformat(), b.isoformat()
    return (a > b) - (a < b)


def _normalize_keys(keys: Any) -> List[str]:
    if isinstance(keys, str):
        return [keys]
    if isinstance(keys, (list, tuple)) and keys and all(isinstance(k, str) for k in keys):
        return list(keys)
    raise ContractError("sort: keys must be a string or a non-empty list of strings.")


def sort(
    data: Sequence[Mapping[str, Any]],
    keys: Union[str, Sequence[str]],
    order: str = SORT_ASC,
) -> List[Any]:
    """
    Return a new list of `data` sorted by `keys` in priority order.

    Values of the same kind compare natively (numbers numerically, text
    lexicographically, dates chronologically); mixed kinds compare by their
    text form. Missing values sort first ascending and last descending.
    Records tied on every key keep their input order. `data` is not modified.
    """
    validate_collection(data, "sort")
    key_list = _normalize_keys(keys)
    if order not in SORT_ORDERS:
        raise ContractError(f"sort: order must be one of {', '.join(SORT_ORDERS)}.")
    sign = 1 if order == SORT_ASC else -1

    def compare(left: Mapping[str, Any], right: Mapping[str, Any]) -> int:
        for key in key_list:
            result = _cmp(left.get(key), right.get(key))
            if result:
                return sign * result
        return 0

    return sorted(data, key=cmp_to_key(compare))
