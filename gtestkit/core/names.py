"""
gtestkit.core.names
===================

Typed names shared across the package.

- `ErrorKind`: an Enum naming every precondition violation.
- `HypothesisMode`: an Enum labelling which G-test a result came from.
- `Count`, `ExpectedValue`, `Alpha`: NewType wrappers for clarity.
- Common `Literal` tags for result methods.

Examples
--------
>>> from gtestkit.core.names import ErrorKind, HypothesisMode
>>> ErrorKind.NEGATIVE_COUNT.value
'negative_count'
>>> HypothesisMode.INTRINSIC.degrees_of_freedom_offset
2
"""

from __future__ import annotations
from enum import Enum
from typing import Literal, NewType, Sequence, Union


class ErrorKind(str, Enum):
    """Kinds of precondition violation.

    - LENGTH_MISMATCH: paired sequences of unequal length, or ragged rows
    - TOO_FEW_CATEGORIES: fewer than 2 entries/rows/columns
    - NEGATIVE_COUNT: an observed count below zero
    - NON_POSITIVE_EXPECTED: an expected value at or below zero
    - DEGENERATE_MARGINAL: a row or column of a table summing to zero
    - OUT_OF_RANGE_SIGNIFICANCE: alpha outside the open interval (0, 1)
    """

    LENGTH_MISMATCH = "length_mismatch"
    TOO_FEW_CATEGORIES = "too_few_categories"
    NEGATIVE_COUNT = "negative_count"
    NON_POSITIVE_EXPECTED = "non_positive_expected"
    DEGENERATE_MARGINAL = "degenerate_marginal"
    OUT_OF_RANGE_SIGNIFICANCE = "out_of_range_significance"


class HypothesisMode(str, Enum):
    """Calling modes of the G-test.

    The mode is always chosen by the caller; engines never infer it.
    """

    SIMPLE = "simple"
    INTRINSIC = "intrinsic"
    INDEPENDENCE = "independence"
    DATASETS_COMPARISON = "datasets_comparison"

    @property
    def degrees_of_freedom_offset(self) -> int:
        """Categories minus degrees of freedom for the goodness-of-fit modes."""
        return 2 if self is HypothesisMode.INTRINSIC else 1


# Typed aliases for values (thin wrappers over numbers).
Count = NewType("Count", int)
ExpectedValue = NewType("ExpectedValue", float)
Alpha = NewType("Alpha", float)

Number = Union[int, float]
CountVector = Sequence[Number]
ExpectedVector = Sequence[Number]
CountTable = Sequence[Sequence[Number]]

# Method tags (extend as needed).
GoodnessOfFitTag = Literal["G-test goodness of fit"]
IntrinsicTag = Literal["G-test goodness of fit (intrinsic hypothesis)"]
IndependenceTag = Literal["G-test of independence"]
DataSetsComparisonTag = Literal["G-test data sets comparison"]
