"""
gtestkit.stats.common.likelihood
================================

Log-likelihood-ratio (G statistic) kernel.

Provides the mathematical building blocks for every G-test mode:
the observed-vs-expected kernel, marginal sums, expected counts under
independence and the rescaling of expected proportions to an observed total.
These functions perform no validation and are shared by the scheme engines.

Mathematical Background
-----------------------
    G = 2 * sum_i( O_i * ln(O_i / E_i) )

A term with O_i = 0 contributes exactly 0, the limit of x ln x as x -> 0+.

For an r x c table the expected count of cell (i, j) under independence is
E_ij = R_i * C_j / N with row sums R, column sums C and grand total N.

Examples
--------
>>> from gtestkit.stats.common.likelihood import g_statistic, g_independence
>>> g_statistic([10, 0], [5.0, 5.0]) == 2 * 10 * math.log(2)
True
>>> f"{g_independence([[1, 0], [0, 1]]):.6f}"
'2.772589'
"""

from __future__ import annotations
import math
from typing import List, Tuple

from gtestkit.core.names import CountTable, CountVector, ExpectedVector

# Totals closer than this are treated as already on the same scale.
RESCALE_TOLERANCE = 1e-5


def log_ratio_term(observed: float, expected: float) -> float:
    """Return ``observed * ln(observed / expected)``, or 0 when observed is 0."""
    if observed == 0:
        return 0.0
    return observed * math.log(observed / expected)


def g_statistic(observed: CountVector, expected: ExpectedVector) -> float:
    """
    Compute the G statistic of observed counts against expected counts.

    Args:
        observed: Non-negative counts
        expected: Strictly positive expected counts, same length as observed

    Returns:
        2 * sum(observed_i * ln(observed_i / expected_i))

    Note:
        Expected values are used as supplied. Callers holding proportions
        should pass them through `rescale_expected` first.
    """
    return 2.0 * math.fsum(
        log_ratio_term(o, e) for o, e in zip(observed, expected)
    )


def rescale_expected(
    expected: ExpectedVector, observed: CountVector
) -> List[float]:
    """
    Scale expected values so that they sum to the observed total.

    Expected proportions (or counts on another scale) become expected counts.
    When both totals already agree the values are returned unchanged.

    Values are divided by their maximum before summing, so expected values
    close to the largest float do not overflow.

    >>> rescale_expected([1e308, 1e308], [3, 5])
    [4.0, 4.0]
    """
    scale = max(expected)
    shares = [e / scale for e in expected]
    sum_shares = math.fsum(shares)
    sum_observed = math.fsum(observed)
    # scale * sum_shares may be inf, which only means "rescale"
    if abs(scale * sum_shares - sum_observed) <= RESCALE_TOLERANCE:
        return [float(e) for e in expected]
    return [sum_observed * s / sum_shares for s in shares]


def marginal_sums(table: CountTable) -> Tuple[List[float], List[float], float]:
    """Return (row sums, column sums, grand total) of a rectangular table."""
    row_sums = [math.fsum(row) for row in table]
    col_sums = [math.fsum(column) for column in zip(*table)]
    return row_sums, col_sums, math.fsum(row_sums)


def expected_counts(table: CountTable) -> List[List[float]]:
    """
    Expected cell counts under independence of rows and columns.

    A table whose grand total is zero has all expected counts zero.
    """
    row_sums, col_sums, total = marginal_sums(table)
    if total == 0:
        return [[0.0 for _ in col_sums] for _ in row_sums]
    return [[r * c / total for c in col_sums] for r in row_sums]


def g_independence(table: CountTable) -> float:
    """
    Compute the G statistic of an r x c table against independence.

    Never raises on zero rows or columns: cells in such a row or column are
    zero themselves and contribute nothing. An all-zero table gives 0.
    """
    expected = expected_counts(table)
    return 2.0 * math.fsum(
        log_ratio_term(cell, e)
        for row, expected_row in zip(table, expected)
        for cell, e in zip(row, expected_row)
    )


def degrees_of_freedom_independence(n_rows: int, n_cols: int) -> int:
    """Degrees of freedom of an r x c independence test, (r - 1)(c - 1)."""
    return (n_rows - 1) * (n_cols - 1)
