"""Tests for the shared precondition checks."""

import math

import pytest

from gtestkit.core.errors import (
    ERRORS_BY_KIND,
    DegenerateMarginalError,
    GTestError,
    LengthMismatchError,
    NegativeCountError,
    NonPositiveExpectedError,
    OutOfRangeSignificanceError,
    TooFewCategoriesError,
)
from gtestkit.core.names import ErrorKind
from gtestkit.core.validation import (
    check_contingency_table,
    check_goodness_of_fit,
    check_significance,
)


class TestErrorTaxonomy:
    def test_every_kind_has_a_class(self):
        assert set(ERRORS_BY_KIND) == set(ErrorKind)

    @pytest.mark.parametrize("kind, cls", list(ERRORS_BY_KIND.items()))
    def test_classes_carry_their_kind(self, kind, cls):
        err = cls("boom")
        assert err.kind is kind
        assert isinstance(err, GTestError)
        assert isinstance(err, ValueError)


class TestSignificance:
    @pytest.mark.parametrize("alpha", [1e-12, 0.05, 0.5, 0.8, 1 - 1e-12])
    def test_open_interval_accepted(self, alpha):
        check_significance(alpha)

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.5, 1.5, math.nan])
    def test_outside_rejected(self, alpha):
        with pytest.raises(OutOfRangeSignificanceError) as excinfo:
            check_significance(alpha)
        assert excinfo.value.kind is ErrorKind.OUT_OF_RANGE_SIGNIFICANCE


class TestGoodnessOfFitChecks:
    def test_valid_pair(self):
        check_goodness_of_fit([0.5, 0.5], [0, 10])

    def test_single_category(self):
        with pytest.raises(TooFewCategoriesError):
            check_goodness_of_fit([1.0], [3])

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            check_goodness_of_fit([1, 1, 2], [0, 1, 2, 3])

    @pytest.mark.parametrize("bad", [0.0, -1.0, math.nan, math.inf])
    def test_non_positive_expected(self, bad):
        with pytest.raises(NonPositiveExpectedError):
            check_goodness_of_fit([1.0, bad, 2.0], [1, 2, 3])

    def test_negative_observed(self):
        with pytest.raises(NegativeCountError):
            check_goodness_of_fit([1, 1, 2, 3], [0, 1, 2, -3])

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_observed(self, bad):
        with pytest.raises(NegativeCountError):
            check_goodness_of_fit([1, 1, 2], [1, bad, 2])

    def test_expected_checked_before_observed(self):
        # both a zero expected value and a negative count: one error, the first
        with pytest.raises(NonPositiveExpectedError):
            check_goodness_of_fit([1, 0, 2, 3], [0, 1, 2, -3])


class TestContingencyChecks:
    def test_valid_table_with_zero_cells(self):
        check_contingency_table([[40, 0, 4], [91, 1, 2], [60, 2, 0]])

    def test_ragged_rows(self):
        with pytest.raises(LengthMismatchError):
            check_contingency_table([[40, 22, 43], [91, 21, 28], [60, 10]])

    def test_single_row(self):
        with pytest.raises(TooFewCategoriesError):
            check_contingency_table([[40, 22, 43]])

    def test_single_column(self):
        with pytest.raises(TooFewCategoriesError):
            check_contingency_table([[40], [40], [30], [10]])

    def test_negative_count(self):
        with pytest.raises(NegativeCountError):
            check_contingency_table([[10, -2], [30, 40], [60, 90]])

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_non_finite_count(self, bad):
        with pytest.raises(NegativeCountError):
            check_contingency_table([[bad, 1], [2, 3]])

    def test_zero_row(self):
        with pytest.raises(DegenerateMarginalError):
            check_contingency_table([[0, 0, 0], [1, 2, 3]])

    def test_zero_column(self):
        with pytest.raises(DegenerateMarginalError):
            check_contingency_table([[10, 0, 12], [15, 0, 10]])

    def test_negative_reported_before_zero_marginal(self):
        # the row [-1, 1] sums to zero as well
        with pytest.raises(NegativeCountError):
            check_contingency_table([[-1, 1], [3, 4]])
