"""
gtestkit.core.validation
========================

Precondition checks shared by every engine.

Each `check_*` function either returns normally or raises exactly one
`GTestError` subclass. Composite checks run their parts in a fixed order and
stop at the first violation; nothing is aggregated.

Examples
--------
>>> from gtestkit.core.validation import check_significance
>>> check_significance(0.05)
>>> check_significance(1.0)
Traceback (most recent call last):
...
gtestkit.core.errors.OutOfRangeSignificanceError: alpha must be in (0, 1), got 1.0
"""

from __future__ import annotations
import math
from typing import List, Sequence

from gtestkit.core.errors import (
    DegenerateMarginalError,
    LengthMismatchError,
    NegativeCountError,
    NonPositiveExpectedError,
    OutOfRangeSignificanceError,
    TooFewCategoriesError,
)
from gtestkit.core.names import CountTable, CountVector, ExpectedVector


def check_significance(alpha: float) -> None:
    """Reject alpha unless 0 < alpha < 1."""
    if not (0.0 < alpha < 1.0):
        raise OutOfRangeSignificanceError(f"alpha must be in (0, 1), got {alpha}")


def check_min_categories(values: Sequence[object], minimum: int = 2) -> None:
    if len(values) < minimum:
        raise TooFewCategoriesError(
            f"at least {minimum} categories are required, got {len(values)}"
        )


def check_same_length(first: Sequence[object], second: Sequence[object]) -> None:
    if len(first) != len(second):
        raise LengthMismatchError(
            f"paired sequences must have the same length, got {len(first)} and {len(second)}"
        )


def check_non_negative(counts: CountVector) -> None:
    for i, count in enumerate(counts):
        # rejects NaN and infinity as well
        if not 0 <= count < math.inf:
            raise NegativeCountError(
                f"count at index {i} must be finite and non-negative, got {count}"
            )


def check_positive(expected: ExpectedVector) -> None:
    for i, value in enumerate(expected):
        if not 0 < value < math.inf:
            raise NonPositiveExpectedError(
                f"expected value at index {i} must be finite and strictly positive, got {value}"
            )


def check_goodness_of_fit(
    expected: ExpectedVector, observed: CountVector, min_categories: int = 2
) -> None:
    """
    Validate a one-sample (expected, observed) pair.

    Order: too few categories, length mismatch, non-positive expected value,
    negative observed count.
    """
    check_min_categories(expected, min_categories)
    check_same_length(expected, observed)
    check_positive(expected)
    check_non_negative(observed)


def check_rectangular(table: CountTable) -> None:
    """Require at least 2 rows, equal row lengths and at least 2 columns."""
    if len(table) < 2:
        raise TooFewCategoriesError(
            f"a contingency table needs at least 2 rows, got {len(table)}"
        )
    width = len(table[0])
    for i, row in enumerate(table):
        if len(row) != width:
            raise LengthMismatchError(
                f"row {i} has length {len(row)}, expected {width} (ragged table)"
            )
    if width < 2:
        raise TooFewCategoriesError(
            f"a contingency table needs at least 2 columns, got {width}"
        )


def check_marginals(row_sums: List[float], col_sums: List[float]) -> None:
    for i, total in enumerate(row_sums):
        if total == 0:
            raise DegenerateMarginalError(f"row {i} sums to zero")
    for j, total in enumerate(col_sums):
        if total == 0:
            raise DegenerateMarginalError(f"column {j} sums to zero")


def check_contingency_table(table: CountTable) -> None:
    """
    Validate an r x c table of counts.

    Order: too few rows, ragged rows, too few columns, negative count,
    zero row sum, zero column sum.
    """
    check_rectangular(table)
    for row in table:
        check_non_negative(row)
    check_marginals(
        [sum(row) for row in table],
        [sum(column) for column in zip(*table)],
    )
