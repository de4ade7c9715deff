"""Unit tests for the bundled demonstration suite."""

from mxunit.adapters.reporters import MemoryReporter
from mxunit.demo import DEMO_TITLE, run_demo


def test_demo_passes():
    """Every demo expectation is written to pass."""
    reporter = MemoryReporter()
    report = run_demo(reporter=reporter)

    assert report.title == DEMO_TITLE
    assert report.passed, [
        (t.title, f.matcher_name, f.index, f.message)
        for t in report.tests
        for f in t.failures
    ]
    assert report.success_count == report.total_count > 0
    assert report.todos == ("to_satisfy()", "async test bodies")
    assert reporter.last.title == DEMO_TITLE


def test_demo_covers_every_matcher():
    """The demo exercises all matchers at least once."""
    report = run_demo(reporter=MemoryReporter())
    used = {r.matcher_name for t in report.tests for r in t.results}
    assert len(used) == 23


def test_demo_each_table_is_one_test():
    """The argument table runs as a single three-expectation test."""
    report = run_demo(reporter=MemoryReporter())
    (table,) = [t for t in report.tests if t.title == "arguments table"]
    assert table.total_count == 3


def test_delayed_demo_clears_first():
    """With a delay the reporter is cleared and the suite still reports."""
    reporter = MemoryReporter()
    report = run_demo(reporter=reporter, delay=1)
    assert reporter.clear_count == 1
    assert report.passed
