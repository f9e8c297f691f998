"""
gtestkit: the G-test for categorical count data.

The G-test is the log-likelihood-ratio counterpart of Pearson's chi-squared
test. It answers four questions about frequency counts:

- do observed counts follow an expected distribution? (goodness of fit, with
  a simple or an intrinsic hypothesis)
- are the two classifications of a contingency table independent?
- do two sampled data sets come from the same distribution?
- how strong, and in which direction, is a 2 x 2 co-occurrence?
  (signed root log-likelihood ratio)

Every engine is a stateless pure function of its inputs. Invalid inputs are
rejected up front with a `GTestError` subclass naming the violated
precondition; statistics never depend on the significance level, which is
only consumed when a reject/accept decision is requested.

Example
-------
>>> import gtestkit
>>> assert hasattr(gtestkit, "core")
>>> assert hasattr(gtestkit, "stats")
>>> gtestkit.independence([[10, 15], [30, 40], [60, 90]]).degrees_of_freedom
2
"""

import logging

from gtestkit import core, stats
from gtestkit.api.gtest import (
    GTest,
    GTestConfig,
    compare_datasets,
    goodness_of_fit,
    independence,
)
from gtestkit.core.decision import decide, upper_tail_probability
from gtestkit.core.errors import (
    DegenerateMarginalError,
    GTestError,
    LengthMismatchError,
    NegativeCountError,
    NonPositiveExpectedError,
    OutOfRangeSignificanceError,
    TooFewCategoriesError,
)
from gtestkit.core.names import ErrorKind, HypothesisMode
from gtestkit.core.result import TestResult
from gtestkit.stats.schemes import (
    ContingencyTableTest,
    DataSetsComparisonTest,
    GoodnessOfFitTest,
    RootLogLikelihoodRatio,
    root_log_likelihood_ratio,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ContingencyTableTest",
    "DataSetsComparisonTest",
    "DegenerateMarginalError",
    "ErrorKind",
    "GTest",
    "GTestConfig",
    "GTestError",
    "GoodnessOfFitTest",
    "HypothesisMode",
    "LengthMismatchError",
    "NegativeCountError",
    "NonPositiveExpectedError",
    "OutOfRangeSignificanceError",
    "RootLogLikelihoodRatio",
    "TestResult",
    "TooFewCategoriesError",
    "compare_datasets",
    "decide",
    "goodness_of_fit",
    "independence",
    "root_log_likelihood_ratio",
    "upper_tail_probability",
]
