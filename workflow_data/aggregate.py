"""
Aggregation: pivot tables and column sums.

pivot() is a one-pass group-by-sum over two dynamic axes. Rows appear in the
order their row value is first seen; each row only carries the columns that
were actually observed for it.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Union

from .errors import ContractError, NonNumericValueError, PivotCollisionError
from .matching import validate_collection
from .values import Number, add_numbers, is_number, parse_number


def pivot(
    data: Sequence[Mapping[str, Any]],
    row_key: str,
    col_key: str,
    value_key: str,
) -> List[Dict[Any, Any]]:
    """
    Pivot `data` into one record per distinct `row_key` value.

    Every distinct `col_key` value seen for a row becomes a field of that row,
    holding the sum of `value_key` over the matching records. A missing row or
    column field groups under None.

    Raises:
        ContractError: `data` is not a sequence, a key is not a string, or an
            item is not a mapping.
        NonNumericValueError: an item's `value_key` is not a number. Nothing
            is returned in that case, whatever the item's position.
        PivotCollisionError: a column value equals `row_key`.
    """
    validate_collection(data, "pivot")
    if not all(isinstance(key, str) for key in (row_key, col_key, value_key)):
        raise ContractError("pivot: row_key, col_key, and value_key must be strings.")

    # keyed by (is_bool, value) so True and 1 stay separate rows
    rows: Dict[Any, Dict[Any, Any]] = {}

    for idx, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise ContractError(f"pivot: item at index {idx} is not a valid record.")

        row_val = item.get(row_key)
        col_val = item.get(col_key)
        value = item.get(value_key)
        if not is_number(value):
            raise NonNumericValueError(idx, value_key, value)
        if col_val == row_key:
            raise PivotCollisionError(idx, row_key)

        group = (isinstance(row_val, bool), row_val)
        row = rows.get(group)
        if row is None:
            row = rows[group] = {row_key: row_val}
        row[col_val] = add_numbers(row.get(col_val, 0), value)

    return list(rows.values())


def sum_property(data: Sequence[Mapping[str, Any]], key: str) -> Union[Number, int]:
    """
    Sum `key` across records.

    Numbers count as-is and numeric text counts as its number; anything else
    (missing, None, booleans, other text) counts as zero.
    """
    validate_collection(data, "sum_property")
    total: Union[Number, int] = 0
    for record in data:
        value = record.get(key)
        if isinstance(value, str):
            value = parse_number(value)
        if is_number(value):
            total = add_numbers(total, value)
    return total
