"""
Filter, update and erase records by criteria.

filter_records returns a new list; update, erase and the helpers below mutate
the caller's list (and its records) in place and return None. None of these
take a lock: callers must not run two mutating calls on one list concurrently.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, MutableSequence, Sequence
from typing import Any, Dict, List, Optional

from .errors import ContractError
from .matching import matches, validate_collection, validate_criteria

Record = Dict[str, Any]


def filter_records(data: Sequence[Mapping[str, Any]], criteria: Mapping[str, Any]) -> List[Any]:
    validate_collection(data, "filter")
    validate_criteria(criteria, "filter")
    return [record for record in data if matches(record, criteria)]


def update(
    data: MutableSequence[Record],
    criteria: Mapping[str, Any],
    updates: Mapping[str, Any],
) -> None:
    validate_collection(data, "update", mutable=True)
    validate_criteria(criteria, "update")
    validate_criteria(updates, "update", "updates")
    for record in data:
        if matches(record, criteria):
            record.update(updates)


def erase(data: MutableSequence[Record], criteria: Mapping[str, Any]) -> None:
    validate_collection(data, "erase", mutable=True)
    validate_criteria(criteria, "erase")
    # walk backwards so deletions never shift an unvisited index
    for i in range(len(data) - 1, -1, -1):
        if matches(data[i], criteria):
            del data[i]


def remove_props(data: MutableSequence[Record], props: Iterable[str]) -> None:
    validate_collection(data, "remove_props", mutable=True)
    if isinstance(props, str):
        props = [props]
    for prop in props:
        for record in data:
            record.pop(prop, None)


def transform(
    data: MutableSequence[Record],
    criteria: Optional[Mapping[str, Any]],
    fn: Callable[[Record], Optional[Mapping[str, Any]]],
) -> None:
    """
    Apply `fn` to each record matching `criteria` (every record if None).

    Whatever mapping `fn` returns is merged into the record; `fn` may also
    mutate the record directly and return None.
    """
    validate_collection(data, "transform", mutable=True)
    if criteria is not None:
        validate_criteria(criteria, "transform")
    if not callable(fn):
        raise ContractError("transform: fn must be callable.")
    for record in data:
        if criteria is None or matches(record, criteria):
            changes = fn(record)
            if changes is not None:
                record.update(changes)


def iterate(
    data: Sequence[Record],
    predicate: Callable[[Record], Any],
    callback: Callable[[int, Record], Any],
) -> None:
    """Call ``callback(i, record)`` for every record the predicate accepts."""
    validate_collection(data, "iterate")
    for i, record in enumerate(data):
        if predicate(record):
            callback(i, record)
