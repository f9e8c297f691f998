"""
gtestkit.stats.schemes.root_log_likelihood
==========================================

Signed root log-likelihood ratio of a 2 x 2 co-occurrence table.

For counts

                 B      not B
    A          k11      k12
    not A      k21      k22

the unsigned statistic is the G statistic of independence of the table, and
the score is ``+sqrt(G)`` when A's co-occurrence rate k11 / (k11 + k12)
exceeds k21 / (k21 + k22), ``-sqrt(G)`` otherwise. The score measures the
strength and direction of an association; it is not a hypothesis test and
yields neither a p-value nor a decision.

Sparse tables are expected here (rare co-occurrences), so rows or columns
summing to zero are accepted: their cells are zero and contribute nothing.

Examples
--------
>>> from gtestkit.stats.schemes.root_log_likelihood import root_log_likelihood_ratio
>>> f"{root_log_likelihood_ratio(1, 0, 0, 1) ** 2:.6f}"
'2.772589'
>>> root_log_likelihood_ratio(0, 1, 1, 0) < 0
True
>>> root_log_likelihood_ratio(904, 21060, 1144, 283012) > 0
True
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from gtestkit.core.validation import check_non_negative
from gtestkit.stats.common.likelihood import g_independence


def log_likelihood_ratio(k11: int, k12: int, k21: int, k22: int) -> float:
    """Unsigned G statistic of the 2 x 2 table ``[[k11, k12], [k21, k22]]``."""
    check_non_negative((k11, k12, k21, k22))
    llr = g_independence([[k11, k12], [k21, k22]])
    # rounding can leave a statistic of zero slightly negative
    return max(llr, 0.0)


def root_log_likelihood_ratio(k11: int, k12: int, k21: int, k22: int) -> float:
    """
    Signed square root of the 2 x 2 log-likelihood ratio statistic.

    Args:
        k11: Count of A together with B
        k12: Count of A without B
        k21: Count of B without A
        k22: Count of neither

    Returns:
        ``sqrt(G)`` when k11 / (k11 + k12) > k21 / (k21 + k22), else ``-sqrt(G)``
    """
    root = math.sqrt(log_likelihood_ratio(k11, k12, k21, k22))
    # rates compared by cross multiplication so an empty row never divides by 0
    if k11 * (k21 + k22) > k21 * (k11 + k12):
        return root
    return -root


@dataclass(frozen=True)
class RootLogLikelihoodRatio:
    """Directional association score for 2 x 2 co-occurrence counts."""

    def score(self, k11: int, k12: int, k21: int, k22: int) -> float:
        return root_log_likelihood_ratio(k11, k12, k21, k22)

    def log_likelihood_ratio(self, k11: int, k12: int, k21: int, k22: int) -> float:
        return log_likelihood_ratio(k11, k12, k21, k22)
