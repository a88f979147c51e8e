"""Tests for the coverage threshold gate."""

import pytest

from clovergen.report.metrics import CloverCounter
from clovergen.report.threshold import check_threshold, coverage_percent


class TestCoveragePercent:
    """Tests for coverage_percent."""

    def test_no_statements_is_full(self) -> None:
        assert coverage_percent(CloverCounter()) == 100.0

    def test_partial(self) -> None:
        assert coverage_percent(CloverCounter(statements=4, covered_statements=1)) == 25.0

    def test_methods_do_not_count(self) -> None:
        counter = CloverCounter(statements=2, covered_statements=2, methods=5)
        assert coverage_percent(counter) == 100.0


class TestCheckThreshold:
    """Tests for check_threshold."""

    @pytest.mark.parametrize(
        ("covered", "threshold", "passed"),
        [
            (9, 90.0, True),
            (8, 90.0, False),
            (0, 0.0, True),
            (10, 100.0, True),
        ],
    )
    def test_verdict(self, covered: int, threshold: float, passed: bool) -> None:
        counter = CloverCounter(statements=10, covered_statements=covered)

        result = check_threshold(counter, threshold)

        assert result.passed is passed
        assert result.threshold == threshold
        assert result.percent == pytest.approx(covered * 10.0)

    @pytest.mark.parametrize("threshold", [-1.0, 100.5])
    def test_out_of_range_rejected(self, threshold: float) -> None:
        with pytest.raises(ValueError):
            check_threshold(CloverCounter(), threshold)
