"""
gtestkit.stats.schemes.contingency
==================================

G-test of independence for an r x c contingency table.

Mathematical Background
-----------------------
With row sums R_i, column sums C_j and grand total N, the expected count of
cell (i, j) under independence is E_ij = R_i * C_j / N and

    G = 2 * sum_ij( O_ij * ln(O_ij / E_ij) ),   df = (r - 1)(c - 1)

Zero cells are allowed; a row or column that sums to zero is rejected.

Examples
--------
>>> from gtestkit.stats.schemes.contingency import ContingencyTableTest
>>> table = [[40, 22, 43], [91, 21, 28], [60, 10, 22]]
>>> ct = ContingencyTableTest()
>>> f"{ct.statistic(table):.6f}"
'22.860524'
>>> ct.degrees_of_freedom(table)
4
>>> ct.test(table, 0.0002), ct.test(table, 0.0001)
(True, False)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from gtestkit.core.components import GTestEngine
from gtestkit.core.names import CountTable, HypothesisMode
from gtestkit.core.result import TestResult
from gtestkit.core.validation import check_contingency_table
from gtestkit.stats.common.likelihood import (
    degrees_of_freedom_independence,
    expected_counts,
    g_independence,
)


@dataclass(frozen=True)
class ContingencyTableTest(GTestEngine):
    """
    G-test of independence between the row and column classifications.

    Validation order: too few rows, ragged rows, too few columns, negative
    count, zero row sum, zero column sum.
    """

    mode = HypothesisMode.INDEPENDENCE

    def statistic(self, table: CountTable) -> float:
        check_contingency_table(table)
        return g_independence(table)

    def expected(self, table: CountTable) -> List[List[float]]:
        """Expected cell counts under independence."""
        check_contingency_table(table)
        return expected_counts(table)

    def degrees_of_freedom(self, table: CountTable) -> int:
        check_contingency_table(table)
        return degrees_of_freedom_independence(len(table), len(table[0]))

    def evaluate(self, table: CountTable) -> TestResult:
        check_contingency_table(table)
        return self._result(
            g_independence(table),
            degrees_of_freedom_independence(len(table), len(table[0])),
        )

    def p_value(self, table: CountTable) -> float:
        return self.evaluate(table).p_value

    def test(self, table: CountTable, alpha: float) -> bool:
        """True iff the independence hypothesis is rejected at ``alpha``."""
        return self._decide(self.evaluate(table), alpha)
