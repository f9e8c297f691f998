"""
gtestkit.core.components
========================

Base class for the G-test engines.

Engines are stateless frozen dataclasses: every operation is a pure function
of its arguments, so a single shared instance is safe to use from many
threads. The base class wires a (statistic, degrees of freedom) pair to the
decision layer in `gtestkit.core.decision`; subclasses own validation and the statistic itself.

Engine Types:
- `GoodnessOfFitTest`: one sample against expected proportions
- `ContingencyTableTest`: independence of rows and columns of an r x c table
- `DataSetsComparisonTest`: two samples over the same categories

Examples
--------
>>> from gtestkit.core.components import GTestEngine
>>> from gtestkit.core.names import HypothesisMode
>>>
>>> class ConstantTest(GTestEngine):
...     mode = HypothesisMode.SIMPLE
...     def evaluate(self, statistic):
...         return self._result(statistic, 1)
...
>>> ConstantTest().evaluate(0.0).p_value
1.0
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from gtestkit.core.decision import decide, upper_tail_probability
from gtestkit.core.names import HypothesisMode
from gtestkit.core.result import TestResult


@dataclass(frozen=True)
class GTestEngine(ABC):
    """
    Base class for every G-test calling mode.

    Subclasses implement `evaluate()` and derive `p_value()` / `test()` from
    it through `_result()` and `_decide()`.
    """

    mode: ClassVar[HypothesisMode]

    @abstractmethod
    def evaluate(self, *data: Any) -> TestResult:
        """Validate ``data`` and return the full test result."""

    def _result(
        self,
        statistic: float,
        degrees_of_freedom: int,
        mode: Optional[HypothesisMode] = None,
    ) -> TestResult:
        return TestResult(
            statistic=statistic,
            degrees_of_freedom=degrees_of_freedom,
            p_value=upper_tail_probability(statistic, degrees_of_freedom),
            mode=mode or self.mode,
        )

    @staticmethod
    def _decide(result: TestResult, alpha: float) -> bool:
        return decide(result.statistic, result.degrees_of_freedom, alpha)
