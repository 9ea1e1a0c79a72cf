"""
Derived views over a record collection: projections, lookups and merges.

All of these build new containers; the input records are never modified.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Dict, List

from .matching import same_value, validate_collection
from .models import DatasetSummary


def pluck(data: Sequence[Mapping[str, Any]], key: str) -> List[Any]:
    validate_collection(data, "pluck")
    return [record.get(key) for record in data]


def pluck_unique(data: Sequence[Mapping[str, Any]], key: str) -> List[Any]:
    """Distinct values of `key`, in first-seen order."""
    unique: List[Any] = []
    for value in pluck(data, key):
        if not any(same_value(value, seen) for seen in unique):
            unique.append(value)
    return unique


def merge(
    left: Sequence[Mapping[str, Any]],
    right: Sequence[Mapping[str, Any]],
    key: str,
) -> List[Dict[str, Any]]:
    """
    Outer-merge two collections on `key`.

    Records from `right` overlay the `left` record with the same key value
    (right wins on shared fields). Unmatched records from either side are
    kept. Output order is first appearance of each key value, left then right.
    """
    validate_collection(left, "merge")
    validate_collection(right, "merge")
    merged: Dict[Any, Dict[str, Any]] = {}
    for record in left:
        merged[record.get(key)] = dict(record)
    for record in right:
        current = merged.get(record.get(key), {})
        merged[record.get(key)] = {**current, **record}
    return list(merged.values())


def get_map(data: Sequence[Mapping[str, Any]], key: str, value: str) -> Dict[Any, Any]:
    validate_collection(data, "get_map")
    return {record.get(key): record.get(value) for record in data}


def summary(data: Sequence[Mapping[str, Any]]) -> DatasetSummary:
    validate_collection(data, "summary")
    properties: Dict[str, None] = {}
    for record in data:
        properties.update(dict.fromkeys(record))
    return DatasetSummary(
        documents=len(data),
        properties=list(properties),
        example=dict(data[0]) if data else None,
    )
