"""Scalar helpers: what counts as a number, and reading numbers out of text."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Optional, Union

Number = Union[int, float, Decimal]

# optional sign, digits with optional fraction (or a bare fraction), optional exponent
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def parse_number(text: str) -> Optional[Number]:
    """Return the number `text` spells out in full, or None."""
    candidate = text.strip()
    if not _NUMBER_RE.fullmatch(candidate):
        return None
    if "." in candidate or "e" in candidate or "E" in candidate:
        number = float(candidate)
        # "1e400" overflows to inf; keep it as text
        return number if math.isfinite(number) else None
    return int(candidate)


def add_numbers(a: Number, b: Number) -> Number:
    """Add two numbers; a Decimal meeting a float is converted to float."""
    if isinstance(a, Decimal) and isinstance(b, float):
        a = float(a)
    elif isinstance(b, Decimal) and isinstance(a, float):
        b = float(b)
    return a + b


def coerce_value(text: str) -> Union[str, Number]:
    number = parse_number(text)
    return text if number is None else number
