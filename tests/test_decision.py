"""Tests for the p-value and decision layer."""

import logging
import math

import pytest

from gtestkit.core.decision import decide, reject_null, upper_tail_probability
from gtestkit.core.errors import OutOfRangeSignificanceError, TooFewCategoriesError
from gtestkit.stats.schemes.contingency import ContingencyTableTest
from gtestkit.stats.schemes.goodness_of_fit import GoodnessOfFitTest


class TestUpperTailProbability:
    def test_zero_statistic(self):
        assert upper_tail_probability(0.0, 3) == 1.0

    def test_two_degrees_of_freedom_closed_form(self):
        # chi-squared with 2 df has survival function exp(-x / 2)
        assert upper_tail_probability(5.0, 2) == pytest.approx(math.exp(-2.5), rel=1e-12)

    def test_monotone_in_statistic(self):
        values = [upper_tail_probability(x, 4) for x in (0.0, 1.0, 5.0, 20.0, 100.0)]
        assert values == sorted(values, reverse=True)

    def test_zero_degrees_of_freedom_rejected(self):
        with pytest.raises(TooFewCategoriesError):
            upper_tail_probability(1.0, 0)


class TestDecide:
    P_VALUE = math.exp(-2.5)

    @pytest.mark.parametrize("alpha", [P_VALUE + 1e-6, 0.1, 0.5, 0.99])
    def test_rejects_above_p_value(self, alpha):
        assert decide(5.0, 2, alpha) is True

    @pytest.mark.parametrize("alpha", [P_VALUE - 1e-6, 0.05, 0.01, 1e-9])
    def test_accepts_below_p_value(self, alpha):
        assert decide(5.0, 2, alpha) is False

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.1])
    def test_bad_alpha(self, alpha):
        with pytest.raises(OutOfRangeSignificanceError):
            decide(5.0, 2, alpha)

    def test_reject_null_threshold_is_strict(self):
        assert reject_null(0.05, 0.05) is False
        assert reject_null(0.049, 0.05) is True

    def test_logs_decision_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="gtestkit")
        decide(5.0, 2, 0.05)
        assert any("reject=False" in record.getMessage() for record in caplog.records)

    def test_engine_decisions_are_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="gtestkit.core.decision")
        assert ContingencyTableTest().test([[40, 22, 43], [91, 21, 28], [60, 10, 22]], 0.05)
        assert not GoodnessOfFitTest().test([3, 1], [423, 133], 0.05)
        messages = [r.getMessage() for r in caplog.records if r.name == "gtestkit.core.decision"]
        assert len(messages) == 2
        assert "df=4" in messages[0] and "reject=True" in messages[0]
        assert "df=1" in messages[1] and "reject=False" in messages[1]

    def test_alpha_checked_once_per_engine_decision(self, monkeypatch):
        import gtestkit.core.decision as decision

        calls = []
        original = decision.check_significance

        def recording_check(alpha):
            calls.append(alpha)
            original(alpha)

        monkeypatch.setattr(decision, "check_significance", recording_check)
        ContingencyTableTest().test([[1, 2], [3, 4]], 0.05)
        assert calls == [0.05]
