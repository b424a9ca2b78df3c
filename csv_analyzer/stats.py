"""
stats.py

Column classification and descriptive statistics.

Everything here is a pure function of its input: the same values always
give the same ColumnStats and the input sequence is never modified.
"""

from collections import Counter
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from csv_analyzer.config import NULL_LABEL, NUMERIC_THRESHOLD, TOP_VALUES_LIMIT
from csv_analyzer.models import ColumnStats, NumericColumnStats, TextColumnStats
from csv_analyzer.numeric import parse_numeric
from csv_analyzer.table import Table


def is_null(value: Optional[str]) -> bool:
    """Absent cells and exact empty strings are null; whitespace is not."""
    return value is None or value == ""


def analyze_column(name: str, values: Sequence[Optional[str]]) -> ColumnStats:
    """
    Classify a column as numeric or text and summarize it.

    Args:
        name: Column name
        values: Raw cell values, one per row

    Returns:
        NumericColumnStats when strictly more than NUMERIC_THRESHOLD of the
        non-null values parse as numbers, TextColumnStats otherwise
    """
    non_null = [value for value in values if not is_null(value)]
    count = len(values)
    nulls = count - len(non_null)
    unique = len(set(non_null))

    numbers = []
    for value in non_null:
        parsed = parse_numeric(value)
        if parsed is not None:
            numbers.append(parsed)

    # len(non_null) == 0 falls through to text: 0 > 0 is False
    if len(numbers) <= len(non_null) * NUMERIC_THRESHOLD:
        return TextColumnStats(name=name, count=count, unique=unique, nulls=nulls)

    series = pd.Series(numbers, dtype="float64").sort_values(ignore_index=True)
    lowest = float(series.iloc[0])
    highest = float(series.iloc[-1])
    # each term is scaled before summing so large finite values cannot
    # overflow; rounding can still push the mean just past an extremum
    mean = min(max(float((series / len(series)).sum()), lowest), highest)

    return NumericColumnStats(
        name=name,
        count=count,
        unique=unique,
        nulls=nulls,
        mean=mean,
        min=lowest,
        max=highest,
        median=_median(series),
    )


def _median(ordered: pd.Series) -> float:
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return float(ordered.iloc[middle])
    lo = float(ordered.iloc[middle - 1])
    hi = float(ordered.iloc[middle])
    # lo + hi overflows for large values of the same sign, hi - lo for
    # large values of opposite signs
    if (lo < 0) == (hi < 0):
        return lo + (hi - lo) / 2
    return (lo + hi) / 2


def analyze_table(table: Table) -> List[ColumnStats]:
    """Analyze every column of a table, in column order."""
    return [analyze_column(name, table.column_values(name)) for name in table.columns]


def value_frequencies(
    table: Table, column: str, limit: int = TOP_VALUES_LIMIT
) -> List[Tuple[str, int]]:
    """
    Count raw values of a column in first-seen order.

    Null cells are counted under NULL_LABEL, which they share with cells that
    literally read "null". The result holds the first `limit` distinct
    values encountered, not the most frequent ones, and is not re-sorted.
    """
    counts: Counter = Counter()
    for value in table.column_values(column):
        counts[NULL_LABEL if is_null(value) else value] += 1
    return list(counts.items())[:limit]
