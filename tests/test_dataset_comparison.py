"""Tests for the two data sets comparison G-test."""

import pytest

from gtestkit.core.errors import (
    DegenerateMarginalError,
    LengthMismatchError,
    NegativeCountError,
    OutOfRangeSignificanceError,
    TooFewCategoriesError,
)
from gtestkit.core.names import HypothesisMode
from gtestkit.stats.schemes.contingency import ContingencyTableTest
from gtestkit.stats.schemes.dataset_comparison import DataSetsComparisonTest


@pytest.fixture
def cmp():
    return DataSetsComparisonTest()


class TestDataSetsComparison:
    @pytest.mark.parametrize(
        "observed1, observed2, g, g_tol, p, p_tol, rejected",
        [
            ([268, 199, 42], [807, 759, 184], 7.3008170, 1e-6, 0.0259805, 1e-6, True),
            ([127, 99, 264], [116, 67, 161], 6.227288, 1e-6, 0.04443, 1e-5, True),
            ([190, 149], [42, 49], 2.8187, 1e-4, 0.09317325, 1e-6, False),
        ],
    )
    def test_reference_values(
        self, cmp, observed1, observed2, g, g_tol, p, p_tol, rejected
    ):
        assert cmp.statistic(observed1, observed2) == pytest.approx(g, abs=g_tol)
        assert cmp.p_value(observed1, observed2) == pytest.approx(p, abs=p_tol)
        assert cmp.test(observed1, observed2, 0.05) is rejected

    def test_same_as_table_form(self, cmp):
        observed1, observed2 = [268, 199, 42], [807, 759, 184]
        table_test = ContingencyTableTest()
        assert cmp.statistic(observed1, observed2) == table_test.statistic(
            [observed1, observed2]
        )
        assert cmp.p_value(observed1, observed2) == table_test.p_value(
            [observed1, observed2]
        )

    def test_symmetric(self, cmp):
        a, b = [127, 99, 264], [116, 67, 161]
        assert cmp.statistic(a, b) == pytest.approx(cmp.statistic(b, a), rel=1e-12)

    def test_alias(self, cmp):
        assert cmp.g_data_sets_comparison([190, 149], [42, 49]) == cmp.statistic(
            [190, 149], [42, 49]
        )

    def test_evaluate(self, cmp):
        result = cmp.evaluate([10, 20, 30, 40], [40, 30, 20, 10])
        assert result.mode is HypothesisMode.DATASETS_COMPARISON
        assert result.degrees_of_freedom == 3
        assert cmp.degrees_of_freedom([10, 20, 30, 40], [40, 30, 20, 10]) == 3


class TestDataSetsComparisonErrors:
    def test_unmatched_lengths(self, cmp):
        with pytest.raises(LengthMismatchError):
            cmp.p_value([0, 1, 2, 3], [3, 4])

    def test_negative(self, cmp):
        with pytest.raises(NegativeCountError):
            cmp.p_value([0, 1, 2, -3], [3, 4, 5, 0])

    def test_shared_zero_category(self, cmp):
        with pytest.raises(DegenerateMarginalError):
            cmp.p_value([10, 0, 12, 10, 15], [15, 0, 10, 15, 5])

    def test_vanishing_sample(self, cmp):
        with pytest.raises(DegenerateMarginalError):
            cmp.p_value([10, 10, 12, 10, 15], [0, 0, 0, 0, 0])

    def test_single_category(self, cmp):
        with pytest.raises(TooFewCategoriesError):
            cmp.statistic([5], [7])

    def test_bad_alpha(self, cmp):
        with pytest.raises(OutOfRangeSignificanceError):
            cmp.test([0, 1, 2, 3], [0, 2, 2, 3], -0.5)
