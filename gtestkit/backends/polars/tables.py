"""
gtestkit.backends.polars.tables
===============================

Build count tables for the G-test from long-format **Polars** frames.

- `contingency_table`: cross-tabulate two categorical columns
- `paired_counts`: the two count vectors of a data sets comparison

This module contains no test semantics, only tabulation. Labels are sorted
and rows with a null in either key column are dropped.

Examples
--------
>>> import polars as pl
>>> from gtestkit.backends.polars.tables import contingency_table
>>> df = pl.DataFrame({"sex": ["f", "m", "f", "m", "f"],
...                    "answer": ["yes", "no", "no", "no", "yes"]})
>>> t = contingency_table(df, "sex", "answer")
>>> t.row_labels, t.column_labels, t.counts
(['f', 'm'], ['no', 'yes'], [[1, 2], [2, 0]])
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import polars as pl

from gtestkit.core.errors import LengthMismatchError, TooFewCategoriesError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelledTable:
    """Dense count table with the labels of its rows and columns."""

    row_labels: List[Any]
    column_labels: List[Any]
    counts: List[List[int]]


def contingency_table(
    df: pl.DataFrame,
    row: str,
    column: str,
    weight: Optional[str] = None,
) -> LabelledTable:
    """
    Cross-tabulate two categorical columns of ``df``.

    Args:
        df: Long-format frame, one row per observation (or per weighted cell)
        row: Column whose distinct values become table rows
        column: Column whose distinct values become table columns
        weight: Optional column of counts to sum instead of counting rows

    Returns:
        `LabelledTable` whose missing combinations are zero

    Raises:
        ValueError: If a summed weight is not a whole number
    """
    data = df.drop_nulls([row, column])
    count = pl.len() if weight is None else pl.col(weight).sum()
    cells = data.group_by([row, column]).agg(count.alias("count"))

    row_labels = sorted(data.get_column(row).unique().to_list())
    column_labels = sorted(data.get_column(column).unique().to_list())
    row_index = {label: i for i, label in enumerate(row_labels)}
    column_index = {label: j for j, label in enumerate(column_labels)}

    counts = [[0 for _ in column_labels] for _ in row_labels]
    for r, c, n in cells.select([row, column, "count"]).iter_rows():
        if not float(n).is_integer():
            raise ValueError(
                f"weights in {weight!r} must sum to whole counts, got {n} for ({r!r}, {c!r})"
            )
        counts[row_index[r]][column_index[c]] = int(n)

    logger.debug(
        "tabulated %d x %d table from %d rows", len(row_labels), len(column_labels), data.height
    )
    return LabelledTable(row_labels, column_labels, counts)


def paired_counts(
    df: pl.DataFrame,
    category: str,
    group: str,
    weight: Optional[str] = None,
) -> Tuple[List[Any], List[int], List[int]]:
    """
    Count vectors of exactly two groups over the same categories.

    Returns:
        Tuple of (category labels, counts of first group, counts of second
        group), groups in sorted order
    """
    table = contingency_table(df, group, category, weight)
    n_groups = len(table.row_labels)
    if n_groups < 2:
        raise TooFewCategoriesError(
            f"column {group!r} must hold 2 groups, got {n_groups}"
        )
    if n_groups > 2:
        raise LengthMismatchError(
            f"a data sets comparison pairs exactly 2 groups, column {group!r} holds {n_groups}"
        )
    first, second = table.counts
    return table.column_labels, first, second
