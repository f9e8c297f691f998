"""
gtestkit.core.errors
====================

Exception taxonomy for rejected inputs.

Every class derives from `GTestError`, itself a `ValueError`, and carries the
matching `ErrorKind` in its `kind` attribute so callers can either catch a
specific class or dispatch on the kind.

Examples
--------
>>> from gtestkit.core.errors import NegativeCountError
>>> from gtestkit.core.names import ErrorKind
>>> err = NegativeCountError("count at index 1 must be finite and non-negative, got -2")
>>> err.kind is ErrorKind.NEGATIVE_COUNT
True
>>> isinstance(err, ValueError)
True
"""

from __future__ import annotations
from typing import Dict, Type

from gtestkit.core.names import ErrorKind


class GTestError(ValueError):
    """Base class for every precondition violation raised by gtestkit."""

    kind: ErrorKind


class LengthMismatchError(GTestError):
    """Paired sequences differ in length, or a table is ragged."""

    kind = ErrorKind.LENGTH_MISMATCH


class TooFewCategoriesError(GTestError):
    """Fewer entries, rows or columns than the test structurally needs."""

    kind = ErrorKind.TOO_FEW_CATEGORIES


class NegativeCountError(GTestError):
    kind = ErrorKind.NEGATIVE_COUNT


class NonPositiveExpectedError(GTestError):
    kind = ErrorKind.NON_POSITIVE_EXPECTED


class DegenerateMarginalError(GTestError):
    """A row or column of a contingency table sums to zero."""

    kind = ErrorKind.DEGENERATE_MARGINAL


class OutOfRangeSignificanceError(GTestError):
    kind = ErrorKind.OUT_OF_RANGE_SIGNIFICANCE


ERRORS_BY_KIND: Dict[ErrorKind, Type[GTestError]] = {
    cls.kind: cls
    for cls in (
        LengthMismatchError,
        TooFewCategoriesError,
        NegativeCountError,
        NonPositiveExpectedError,
        DegenerateMarginalError,
        OutOfRangeSignificanceError,
    )
}
