"""Unit tests for TestSuite and the active-suite context."""

import logging
import threading

import pytest

from mxunit import expect, test
from mxunit.adapters.reporters import MemoryReporter
from mxunit.domain.errors import (
    NestedTestError,
    NoActiveTestError,
    SuiteAlreadyRunError,
)
from mxunit.service_layer.suite import TestSuite, active_suite, suite_scope

# pylint: disable=unnecessary-lambda


@pytest.fixture
def reporter():
    """A reporter that records what it renders."""
    return MemoryReporter()


def run(title, body, reporter):
    """Run one suite and return its report."""
    return TestSuite(title, body, reporter).run()


def test_suite_report_matches_rendered_suite(reporter):
    """The returned report is exactly what the reporter received."""

    def body():
        test("first", lambda: expect(1).to_be(1))
        test("second", lambda: (expect(True).to_be_truthy(), expect(2).to_be(3)))
        test.todo("third")

    report = run("maths", body, reporter)

    rendered = reporter.last
    assert rendered.title == report.title == "maths"
    assert rendered.tests == report.tests
    assert rendered.todos == report.todos == ("third",)

    first, second = report.tests
    assert (first.success_count, first.total_count) == (1, 1)
    assert (second.success_count, second.total_count) == (1, 2)
    (failure,) = second.failures
    assert (failure.matcher_name, failure.index) == ("to_be", 2)
    assert failure.message == "2 not the same as 3"
    assert (report.success_count, report.total_count) == (2, 3)


def test_tests_run_in_registration_order(reporter):
    """Tests run as soon as they are registered."""
    order = []

    def body():
        test("a", lambda: order.append("a"))
        order.append("between")
        test("b", lambda: order.append("b"))

    run("order", body, reporter)
    assert order == ["a", "between", "b"]
    assert [t.title for t in reporter.last.tests] == ["a", "b"]


def test_each_shares_one_test(reporter):
    """All rows run in a single test with one index sequence."""

    def body():
        test.each([(1, 1, 2), (1, 2, 3), (2, 1, 4)])(
            "adds", lambda a, b, total: expect(a + b).to_be(total)
        )

    (adds,) = run("each", body, reporter).tests
    assert [r.index for r in adds.results] == [1, 2, 3]
    assert (adds.success_count, adds.total_count) == (2, 3)
    assert adds.failures[0].message == "3 not the same as 4"


def test_each_accepts_any_iterable_of_rows(reporter):
    """Rows may be lists or generators; each is unpacked as arguments."""
    seen = []

    def body():
        test.each([x, x] for x in range(3))("pairs", lambda a, b: seen.append((a, b)))

    run("rows", body, reporter)
    assert seen == [(0, 0), (1, 1), (2, 2)]


def test_skip_and_todo_do_not_run(reporter):
    """Skipped tests vanish; todos are only listed."""
    ran = []

    def body():
        test.skip("skipped", lambda: ran.append("skipped"))
        test.todo("later")

    report = run("pending", body, reporter)
    assert not ran
    assert report.tests == ()
    assert report.todos == ("later",)


def test_empty_suite_is_rendered(reporter):
    """A suite without tests still reaches the reporter."""
    report = run("empty", lambda: None, reporter)
    assert report.passed
    assert reporter.last.tests == ()


def test_expect_outside_test_body_is_rejected(reporter, caplog):
    """expect() at suite level raises and nothing is rendered."""

    def body():
        expect(1).to_be(1)

    with pytest.raises(NoActiveTestError, match="outside of test in suite 'bad'"):
        run("bad", body, reporter)

    assert reporter.suites == []
    assert any(
        rec.levelno == logging.ERROR and "Exception running suite 'bad'" in rec.getMessage()
        for rec in caplog.records
    )


def test_expect_after_test_body_is_rejected(reporter):
    """A test stops accepting expect() once its body returns."""

    def body():
        test("done", lambda: None)
        expect(1).to_be(1)

    with pytest.raises(NoActiveTestError):
        run("late", body, reporter)


def test_error_in_test_body_propagates(reporter):
    """Errors raised by a test body escape the suite."""

    def explode():
        raise RuntimeError("boom")

    def body():
        test("explodes", explode)

    with pytest.raises(RuntimeError, match="boom"):
        run("errors", body, reporter)
    assert active_suite() is None


def test_suite_cannot_run_twice(reporter):
    """A suite runs once."""
    suite = TestSuite("once", lambda: None, reporter)
    suite.run()
    with pytest.raises(SuiteAlreadyRunError):
        suite.run()
    assert len(reporter.suites) == 1


def test_active_suite_is_scoped(reporter):
    """The active suite is set only while its body runs."""
    seen = []
    suite = TestSuite("scoped", lambda: seen.append(active_suite()), reporter)

    assert active_suite() is None
    suite.run()
    assert seen == [suite]
    assert active_suite() is None


def test_suite_scope_restores_outer_suite(reporter):
    """Nested scopes restore the enclosing suite on exit."""
    outer = TestSuite("outer", lambda: None, reporter)
    inner = TestSuite("inner", lambda: None, reporter)
    with suite_scope(outer):
        with suite_scope(inner):
            assert active_suite() is inner
        assert active_suite() is outer
    assert active_suite() is None


def test_active_suite_is_per_thread(reporter):
    """Other threads start without an active suite."""
    seen = []

    def body():
        worker = threading.Thread(target=lambda: seen.append(active_suite()))
        worker.start()
        worker.join()

    run("threads", body, reporter)
    assert seen == [None]


def test_current_test_only_while_body_runs(reporter):
    """current_test is only available while a test body runs."""
    states = []
    suite = TestSuite("state", lambda: None, reporter)

    with suite_scope(suite):
        suite.add_test("t", lambda: states.append(suite.current_test.title))
        suite.add_todo("todo")

    assert states == ["t"]
    assert suite.todos == ("todo",)
    with pytest.raises(NoActiveTestError):
        _ = suite.current_test


def test_test_inside_test_body_is_rejected(reporter, caplog):
    """Registering a test from a running test body fails fast."""
    seen = []

    def outer():
        expect(1).to_be(1)
        test("inner", lambda: seen.append("inner"))
        expect(3).to_be(3)

    def body():
        test("outer", outer)

    with pytest.raises(
        NestedTestError, match="Function <test> for 'inner' called inside test 'outer'"
    ):
        run("nested", body, reporter)

    assert not seen
    assert reporter.suites == []
    assert any(
        "Test 'inner' registered inside running test 'outer'" in rec.getMessage()
        for rec in caplog.records
    )


def test_rejected_nested_test_leaves_outer_test_open(reporter):
    """The running test is neither closed nor replaced by the rejected call."""
    suite = TestSuite("state", lambda: None, reporter)
    outcome = []

    def outer():
        try:
            suite.add_test("inner", lambda: None)
        except NestedTestError:
            outcome.append(suite.current_test.title)
            outcome.append(suite.current_test.is_closed)
        suite.expect(2).to_be(2)

    with suite_scope(suite):
        suite.add_test("outer", outer)

    assert outcome == ["outer", False]
    report = suite._close()  # pylint: disable=protected-access
    (closed,) = report.tests
    assert (closed.title, closed.total_count) == ("outer", 1)
