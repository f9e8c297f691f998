"""
gtestkit.stats.schemes.dataset_comparison
=========================================

Compare two samples binned over the same categories.

The two count vectors become the rows of a 2 x n table which is handed to the
independence test; there is no separate formula. A category where both
samples report zero, or a sample with no observations at all, is a zero
marginal and is rejected.

Examples
--------
>>> from gtestkit.stats.schemes.dataset_comparison import DataSetsComparisonTest
>>> cmp = DataSetsComparisonTest()
>>> f"{cmp.statistic([268, 199, 42], [807, 759, 184]):.4f}"
'7.3008'
>>> cmp.test([190, 149], [42, 49], 0.05)
False
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from gtestkit.core.components import GTestEngine
from gtestkit.core.names import CountVector, HypothesisMode
from gtestkit.core.result import TestResult
from gtestkit.core.validation import check_same_length
from gtestkit.stats.schemes.contingency import ContingencyTableTest


@dataclass(frozen=True)
class DataSetsComparisonTest(GTestEngine):
    """G-test that two count vectors come from the same distribution."""

    mode = HypothesisMode.DATASETS_COMPARISON

    table_test: ContingencyTableTest = field(default_factory=ContingencyTableTest)

    @staticmethod
    def as_table(observed1: CountVector, observed2: CountVector) -> List[List[float]]:
        """Stack the two samples as the rows of a 2 x n table."""
        check_same_length(observed1, observed2)
        return [list(observed1), list(observed2)]

    def statistic(self, observed1: CountVector, observed2: CountVector) -> float:
        return self.table_test.statistic(self.as_table(observed1, observed2))

    g_data_sets_comparison = statistic

    def degrees_of_freedom(
        self, observed1: CountVector, observed2: CountVector
    ) -> int:
        return self.table_test.degrees_of_freedom(self.as_table(observed1, observed2))

    def evaluate(self, observed1: CountVector, observed2: CountVector) -> TestResult:
        result = self.table_test.evaluate(self.as_table(observed1, observed2))
        return self._result(result.statistic, result.degrees_of_freedom)

    def p_value(self, observed1: CountVector, observed2: CountVector) -> float:
        return self.evaluate(observed1, observed2).p_value

    def test(
        self, observed1: CountVector, observed2: CountVector, alpha: float
    ) -> bool:
        return self._decide(self.evaluate(observed1, observed2), alpha)
