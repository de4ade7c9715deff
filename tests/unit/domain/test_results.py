"""Unit tests for mxunit.domain.results."""

from mxunit.domain import matchers as m
from mxunit.domain.results import ClosedTest, ExpectationResult, SuiteReport


def test_expectation_result_message_and_name():
    """Results expose the matcher name and format its message lazily."""
    result = ExpectationResult(index=2, matcher=m.TO_BE, success=False, args=(1, 2))
    assert result.matcher_name == "to_be"
    assert result.message == "1 not the same as 2"


def test_suite_report_aggregates_tests():
    """Suite counts sum over its tests."""
    ok = ExpectationResult(index=1, matcher=m.TO_BE, success=True, args=(1, 1))
    ko = ExpectationResult(index=2, matcher=m.TO_BE, success=False, args=(1, 2))
    report = SuiteReport(
        title="suite",
        tests=(
            ClosedTest.from_results("first", [ok]),
            ClosedTest.from_results("second", [ok, ko]),
        ),
        todos=("later",),
    )
    assert report.success_count == 2
    assert report.total_count == 3
    assert not report.passed


def test_empty_suite_report_passes():
    """A suite with no tests passes."""
    report = SuiteReport(title="empty", tests=(), todos=())
    assert report.passed
    assert report.total_count == 0
