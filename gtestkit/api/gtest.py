"""
gtestkit.api.gtest
==================

G-test facade with analyst-oriented entry points.

`GTest` gathers every calling mode behind one object, configured by a
`GTestConfig` (default significance level, hypothesis mode for goodness of
fit). The module-level functions return a full `TestResult` for one-off use.

Examples
--------
>>> from gtestkit.api.gtest import GTest, GTestConfig, independence
>>> gtest = GTest(GTestConfig(alpha=0.05))
>>>
>>> # Goodness of fit: expected proportions first, observed counts second
>>> f"{gtest.g([3, 1], [423, 133]):.4f}"
'0.3487'
>>> gtest.reject([3, 1], [423, 133])
False
>>>
>>> # Independence of a contingency table
>>> result = independence([[40, 22, 43], [91, 21, 28], [60, 10, 22]])
>>> result.degrees_of_freedom, result.rejects(0.001)
(4, True)
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from gtestkit.core.names import CountTable, CountVector, ExpectedVector
from gtestkit.core.result import TestResult
from gtestkit.core.validation import check_significance
from gtestkit.stats.schemes.contingency import ContingencyTableTest
from gtestkit.stats.schemes.dataset_comparison import DataSetsComparisonTest
from gtestkit.stats.schemes.goodness_of_fit import GoodnessOfFitTest
from gtestkit.stats.schemes.root_log_likelihood import root_log_likelihood_ratio

logger = logging.getLogger(__name__)

_GOODNESS_OF_FIT = GoodnessOfFitTest()
_CONTINGENCY = ContingencyTableTest()
_DATASETS = DataSetsComparisonTest()


@dataclass
class GTestConfig:
    """
    Configuration for the `GTest` facade.

    Parameters
    ----------
    alpha : float, default=0.05
        Significance level used when a decision call omits ``alpha``
    intrinsic : bool, default=False
        Use the intrinsic-hypothesis degrees of freedom (k - 2) for every
        (expected, observed) pair given to `GTest.evaluate`, `GTest.g_test`
        and `GTest.reject`. The G statistic itself does not depend on it.

    Examples
    --------
    >>> GTestConfig(alpha=0.01).validate()
    >>> GTestConfig(alpha=1.5).validate()
    Traceback (most recent call last):
    ...
    gtestkit.core.errors.OutOfRangeSignificanceError: alpha must be in (0, 1), got 1.5
    """

    alpha: float = 0.05
    intrinsic: bool = False

    def validate(self) -> None:
        """Validate the configuration."""
        check_significance(self.alpha)


def _arity(data: Any) -> int:
    """Number of positional data arguments, which must be 1 (table) or 2 (pair)."""
    if len(data) not in (1, 2):
        raise TypeError(
            f"expected a table or an (expected, observed) pair, got {len(data)} arguments"
        )
    return len(data)


@dataclass
class GTest:
    """
    Single entry point for every G-test calling mode.

    Methods taking ``*data`` accept either one contingency table or an
    ``(expected, observed)`` pair, in that order.
    """

    config: GTestConfig = field(default_factory=GTestConfig)

    def __post_init__(self) -> None:
        self.config.validate()

    def _alpha(self, alpha: Optional[float]) -> float:
        return self.config.alpha if alpha is None else alpha

    def evaluate(self, *data: Any) -> TestResult:
        """Full result for a table, or for an (expected, observed) pair."""
        if _arity(data) == 1:
            result = _CONTINGENCY.evaluate(data[0])
        else:
            expected, observed = data
            result = _GOODNESS_OF_FIT.evaluate(
                expected, observed, intrinsic=self.config.intrinsic
            )
        logger.debug(
            "%s: G=%.6g df=%d p=%.6g",
            result.method,
            result.statistic,
            result.degrees_of_freedom,
            result.p_value,
        )
        return result

    def g(self, *data: Any) -> float:
        """G statistic of a table, or of an (expected, observed) pair."""
        if _arity(data) == 1:
            return _CONTINGENCY.statistic(data[0])
        expected, observed = data
        return _GOODNESS_OF_FIT.statistic(expected, observed)

    def g_test(self, *data: Any) -> float:
        """
        p-value of a table, or of an (expected, observed) pair.

        A pair uses df = k - 1, or k - 2 when ``config.intrinsic`` is set.
        """
        return self.evaluate(*data).p_value

    def g_test_intrinsic(self, expected: ExpectedVector, observed: CountVector) -> float:
        """p-value under the intrinsic hypothesis (df = k - 2)."""
        return _GOODNESS_OF_FIT.p_value_intrinsic(expected, observed)

    def reject(self, *data: Any, alpha: Optional[float] = None) -> bool:
        """
        Decision for a table, or for an (expected, observed) pair.

        Always agrees with ``g_test(*data) < alpha``.
        """
        alpha = self._alpha(alpha)
        if _arity(data) == 1:
            return _CONTINGENCY.test(data[0], alpha)
        expected, observed = data
        if self.config.intrinsic:
            return _GOODNESS_OF_FIT.test_intrinsic(expected, observed, alpha)
        return _GOODNESS_OF_FIT.test(expected, observed, alpha)

    def g_data_sets_comparison(
        self, observed1: CountVector, observed2: CountVector
    ) -> float:
        return _DATASETS.statistic(observed1, observed2)

    def g_test_data_sets_comparison(
        self, observed1: CountVector, observed2: CountVector
    ) -> float:
        return _DATASETS.p_value(observed1, observed2)

    def reject_data_sets(
        self,
        observed1: CountVector,
        observed2: CountVector,
        alpha: Optional[float] = None,
    ) -> bool:
        return _DATASETS.test(observed1, observed2, self._alpha(alpha))

    @staticmethod
    def root_log_likelihood_ratio(k11: int, k12: int, k21: int, k22: int) -> float:
        return root_log_likelihood_ratio(k11, k12, k21, k22)


def goodness_of_fit(
    expected: ExpectedVector, observed: CountVector, intrinsic: bool = False
) -> TestResult:
    """
    G-test of observed counts against expected proportions.

    Parameters
    ----------
    expected : sequence of float
        Strictly positive expected proportions or counts
    observed : sequence of int
        Non-negative observed counts, same length as ``expected``
    intrinsic : bool, default=False
        One parameter of ``expected`` was estimated from ``observed``

    Returns
    -------
    TestResult

    Examples
    --------
    >>> r = goodness_of_fit([0.54, 0.40, 0.05, 0.01], [70, 79, 3, 4])
    >>> r.degrees_of_freedom, r.rejects(0.05)
    (3, True)
    """
    return _GOODNESS_OF_FIT.evaluate(expected, observed, intrinsic=intrinsic)


def independence(table: CountTable) -> TestResult:
    """G-test of independence of the rows and columns of ``table``."""
    return _CONTINGENCY.evaluate(table)


def compare_datasets(observed1: CountVector, observed2: CountVector) -> TestResult:
    """
    G-test that two samples over the same categories share a distribution.

    Examples
    --------
    >>> r = compare_datasets([127, 99, 264], [116, 67, 161])
    >>> r.degrees_of_freedom, r.rejects(0.05)
    (2, True)
    """
    return _DATASETS.evaluate(observed1, observed2)
