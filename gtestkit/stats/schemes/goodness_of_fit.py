"""
gtestkit.stats.schemes.goodness_of_fit
======================================

G-test goodness of fit: one observed count vector against an expected
distribution.

Two degrees-of-freedom policies are offered and the caller picks one:

- simple hypothesis, expectations fully specified: df = k - 1
- intrinsic hypothesis, one parameter of the expectations estimated from
  the observed data (e.g. Hardy-Weinberg proportions from allele
  frequencies): df = k - 2

Expected values may be proportions or counts on any scale; they are rescaled
to the observed total, so multiplying them all by a positive constant leaves
the statistic and p-value unchanged.

Examples
--------
>>> from gtestkit.stats.schemes.goodness_of_fit import GoodnessOfFitTest
>>> gof = GoodnessOfFitTest()
>>> f"{gof.statistic([3, 1], [423, 133]):.4f}"
'0.3487'
>>> gof.test([3, 1], [423, 133], 0.05)
False
>>> gof.test([0.54, 0.40, 0.05, 0.01], [70, 79, 3, 4], 0.05)
True
"""

from __future__ import annotations
from dataclasses import dataclass

from gtestkit.core.components import GTestEngine
from gtestkit.core.names import CountVector, ExpectedVector, HypothesisMode
from gtestkit.core.result import TestResult
from gtestkit.core.validation import check_goodness_of_fit, check_min_categories
from gtestkit.stats.common.likelihood import g_statistic, rescale_expected


def _mode(intrinsic: bool) -> HypothesisMode:
    return HypothesisMode.INTRINSIC if intrinsic else HypothesisMode.SIMPLE


@dataclass(frozen=True)
class GoodnessOfFitTest(GTestEngine):
    """
    One-sample G-test of observed counts against expected proportions.

    Validation order: too few categories, length mismatch, non-positive
    expected value, negative observed count.
    """

    mode = HypothesisMode.SIMPLE

    def statistic(self, expected: ExpectedVector, observed: CountVector) -> float:
        """G statistic of ``observed`` against ``expected`` rescaled to its total."""
        check_goodness_of_fit(expected, observed)
        return g_statistic(observed, rescale_expected(expected, observed))

    def degrees_of_freedom(
        self, expected: ExpectedVector, intrinsic: bool = False
    ) -> int:
        """k - 1, or k - 2 under the intrinsic hypothesis; always at least 1."""
        offset = _mode(intrinsic).degrees_of_freedom_offset
        check_min_categories(expected, offset + 1)
        return len(expected) - offset

    def evaluate(
        self,
        expected: ExpectedVector,
        observed: CountVector,
        intrinsic: bool = False,
    ) -> TestResult:
        degrees_of_freedom = self.degrees_of_freedom(expected, intrinsic)
        statistic = self.statistic(expected, observed)
        return self._result(statistic, degrees_of_freedom, _mode(intrinsic))

    def p_value(self, expected: ExpectedVector, observed: CountVector) -> float:
        """p-value under the simple hypothesis (df = k - 1)."""
        return self.evaluate(expected, observed).p_value

    def p_value_intrinsic(
        self, expected: ExpectedVector, observed: CountVector
    ) -> float:
        """p-value under the intrinsic hypothesis (df = k - 2)."""
        return self.evaluate(expected, observed, intrinsic=True).p_value

    def test(
        self, expected: ExpectedVector, observed: CountVector, alpha: float
    ) -> bool:
        """True iff the simple-hypothesis p-value is below ``alpha``."""
        return self._decide(self.evaluate(expected, observed), alpha)

    def test_intrinsic(
        self, expected: ExpectedVector, observed: CountVector, alpha: float
    ) -> bool:
        """True iff the intrinsic-hypothesis p-value is below ``alpha``."""
        return self._decide(self.evaluate(expected, observed, intrinsic=True), alpha)
