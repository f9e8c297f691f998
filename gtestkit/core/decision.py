"""
gtestkit.core.decision
======================

Turn a statistic into a p-value and a reject/accept decision.

This is the only place where a significance level is consumed; computing a
statistic never depends on alpha. The chi-squared survival function comes from
`scipy.stats.chi2`.

Examples
--------
>>> from gtestkit.core.decision import upper_tail_probability, decide
>>> round(upper_tail_probability(3.841458820694124, 1), 6)
0.05
>>> decide(3.9, 1, 0.05), decide(3.8, 1, 0.05)
(True, False)
"""

from __future__ import annotations
import logging

from scipy.stats import chi2

from gtestkit.core.errors import TooFewCategoriesError
from gtestkit.core.validation import check_significance

logger = logging.getLogger(__name__)


def upper_tail_probability(statistic: float, degrees_of_freedom: int) -> float:
    """
    Probability that a chi-squared variable exceeds ``statistic``.

    Args:
        statistic: Non-negative test statistic
        degrees_of_freedom: Positive integer degrees of freedom

    Returns:
        p-value in [0, 1]
    """
    if degrees_of_freedom < 1:
        raise TooFewCategoriesError(
            f"degrees of freedom must be at least 1, got {degrees_of_freedom}"
        )
    return float(chi2.sf(statistic, degrees_of_freedom))


def reject_null(p_value: float, alpha: float) -> bool:
    """True iff ``p_value < alpha``, after checking 0 < alpha < 1."""
    check_significance(alpha)
    return p_value < alpha


def decide(statistic: float, degrees_of_freedom: int, alpha: float) -> bool:
    """
    Decide whether the null hypothesis is rejected.

    Args:
        statistic: G statistic
        degrees_of_freedom: Degrees of freedom of the reference distribution
        alpha: Significance level in (0, 1)

    Returns:
        True (reject) iff the upper-tail probability is below alpha
    """
    p_value = upper_tail_probability(statistic, degrees_of_freedom)
    rejected = reject_null(p_value, alpha)
    logger.debug(
        "G=%.6g df=%d p=%.6g alpha=%g reject=%s",
        statistic,
        degrees_of_freedom,
        p_value,
        alpha,
        rejected,
    )
    return rejected
