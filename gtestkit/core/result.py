"""
gtestkit.core.result
====================

Typed result of a G-test.

- `GTestPayload`: TypedDict contract used when tabulating results
- `TestResult`: immutable (statistic, degrees of freedom, p-value) record

Results are recomputed per call and never persisted.

Examples
--------
>>> from gtestkit.core.result import TestResult
>>> from gtestkit.core.names import HypothesisMode
>>> r = TestResult(statistic=3.84, degrees_of_freedom=1, p_value=0.05,
...                mode=HypothesisMode.SIMPLE)
>>> r.rejects(0.1), r.rejects(0.01)
(True, False)
>>> r.as_payload()["mode"]
'simple'
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TypedDict

from gtestkit.core.decision import reject_null
from gtestkit.core.names import HypothesisMode

METHOD_NAMES = {
    HypothesisMode.SIMPLE: "G-test goodness of fit",
    HypothesisMode.INTRINSIC: "G-test goodness of fit (intrinsic hypothesis)",
    HypothesisMode.INDEPENDENCE: "G-test of independence",
    HypothesisMode.DATASETS_COMPARISON: "G-test data sets comparison",
}


class GTestPayload(TypedDict):
    """Flat payload of a G-test result."""

    statistic: float
    df: int
    p_value: float
    mode: str
    method: str


@dataclass(frozen=True)
class TestResult:
    """
    Outcome of one G-test evaluation.

    Attributes:
        statistic: The G statistic (twice the log-likelihood ratio)
        degrees_of_freedom: Degrees of freedom of the chi-squared reference
        p_value: Upper-tail chi-squared probability of ``statistic``
        mode: Calling mode that produced the result
    """

    # not a pytest test class despite the name
    __test__ = False

    statistic: float
    degrees_of_freedom: int
    p_value: float
    mode: HypothesisMode

    @property
    def method(self) -> str:
        return METHOD_NAMES[self.mode]

    def rejects(self, alpha: float) -> bool:
        """True when the null hypothesis is rejected at significance ``alpha``."""
        return reject_null(self.p_value, alpha)

    def as_payload(self) -> GTestPayload:
        return {
            "statistic": float(self.statistic),
            "df": int(self.degrees_of_freedom),
            "p_value": float(self.p_value),
            "mode": self.mode.value,
            "method": self.method,
        }
