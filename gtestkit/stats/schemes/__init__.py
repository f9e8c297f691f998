"""
Calling modes of the G-test.

- `goodness_of_fit`: one sample against expected proportions (simple and
  intrinsic hypotheses)
- `contingency`: independence test of an r x c table
- `dataset_comparison`: two samples over the same categories
- `root_log_likelihood`: signed association score of a 2 x 2 table
"""

from gtestkit.stats.schemes.contingency import ContingencyTableTest
from gtestkit.stats.schemes.dataset_comparison import DataSetsComparisonTest
from gtestkit.stats.schemes.goodness_of_fit import GoodnessOfFitTest
from gtestkit.stats.schemes.root_log_likelihood import (
    RootLogLikelihoodRatio,
    root_log_likelihood_ratio,
)

__all__ = [
    "ContingencyTableTest",
    "DataSetsComparisonTest",
    "GoodnessOfFitTest",
    "RootLogLikelihoodRatio",
    "root_log_likelihood_ratio",
]
