"""
Fixed format rules for the tabular and structured file formats.

These are not configurable; anything environment-dependent lives in config.py.
"""

DELIMITER = ","
LINE_TERMINATOR = "\n"
TEXT_ENCODING = "utf-8"  # files are written without a BOM

SORT_ASC = "asc"
SORT_DESC = "desc"
SORT_ORDERS = (SORT_ASC, SORT_DESC)

# Criterion values of these types mean "any of", not "equal to".
MEMBERSHIP_TYPES = (list, tuple, set, frozenset)
