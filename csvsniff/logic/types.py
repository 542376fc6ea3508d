import math
from typing import List
from csvsniff.models import ColumnType, TypeProfile

def parse_number(value: str) -> float:
    """
    Numeric reading of a field. Blank fields read as zero so that missing
    values do not turn a numeric column into a string one.
    Raises ValueError for anything else that is not a plain decimal number.
    """
    s = value.strip()
    if not s:
        return 0.0
    if "_" in s:
        # float() accepts digit grouping underscores, CSV numbers do not
        raise ValueError(f"Not a number: {value!r}")
    return float(s)

def get_accumulated_type(value: str, current: ColumnType) -> ColumnType:
    """
    Weakens the current column type by one value. Types only ever move
    INTEGER -> FLOAT -> STRING. With current=INTEGER this is the type of the value.
    """
    if current == ColumnType.STRING:
        return ColumnType.STRING
    try:
        number = parse_number(value)
    except ValueError:
        return ColumnType.STRING
    if not math.isfinite(number):
        return ColumnType.STRING
    if current == ColumnType.FLOAT or number % 1 != 0:
        return ColumnType.FLOAT
    return ColumnType.INTEGER

def get_types(rows: List[List[str]]) -> TypeProfile:
    """
    Determines the column types over three slices of the table:
    - first: row 0 only
    - tail: all rows except the first
    - all: tail folded with row 0
    Rows with a different number of fields than row 0 are ignored, they might
    steer us into wrong conclusions.
    """
    if not rows:
        return TypeProfile()

    first_values = rows[0]
    first = [get_accumulated_type(v, ColumnType.INTEGER) for v in first_values]
    tail = [ColumnType.INTEGER] * len(first_values)

    for row in rows[1:]:
        if len(row) != len(first_values):
            continue
        tail = [get_accumulated_type(v, t) for v, t in zip(row, tail)]

    all_types = [get_accumulated_type(v, t) for v, t in zip(first_values, tail)]
    return TypeProfile(first=first, tail=tail, all=all_types)

def parse_integer(value: str) -> int:
    """
    Exact integer reading of a field typed INTEGER. Long digit strings keep
    every digit, values like "3.0" or "1e3" go through parse_number.
    """
    s = value.strip()
    if not s:
        return 0
    try:
        return int(s)
    except ValueError:
        return int(parse_number(s))
