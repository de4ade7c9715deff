"""Unit tests for mxunit.domain.expectation."""

import logging

import pytest

from mxunit.domain.case import RunningTest
from mxunit.domain.expectation import Expectation, Outcome, capture_outcome


def whoops():
    """Raise a ValueError with a recognizable message."""
    raise ValueError("Whoops")


@pytest.fixture
def running():
    """A fresh running test to report into."""
    return RunningTest("under test")


def results_of(test: RunningTest):
    """Close *test* and return its results."""
    return test.finalize().results


# --- capture_outcome ---


def test_capture_plain_value():
    """Non-callables are kept as they are."""
    assert capture_outcome(42) == Outcome(42)


def test_capture_calls_functions_once():
    """Functions are called exactly once and their errors recorded."""
    calls = []

    def body():
        calls.append(1)
        raise KeyError("k")

    outcome = capture_outcome(body)
    assert calls == [1]
    assert outcome.raised
    assert isinstance(outcome.error, KeyError)
    assert outcome.value is body


def test_capture_does_not_call_classes():
    """Classes are values, not thunks."""
    outcome = capture_outcome(ValueError)
    assert outcome.value is ValueError
    assert not outcome.raised


def test_capture_lets_base_exceptions_through():
    """Only Exception subclasses are captured."""

    def interrupt():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        capture_outcome(interrupt)


# --- reporting ---


def test_matchers_report_one_result_each(running):
    """Each matcher call adds exactly one result."""
    Expectation.create(running, 5).to_be(5).to_be_greater_than(1)
    results = results_of(running)
    assert [r.matcher_name for r in results] == ["to_be", "to_be_greater_than"]
    assert all(r.success for r in results)


def test_indices_follow_expect_calls(running):
    """Indices count expect() calls; a negated twin shares its index."""
    first = Expectation.create(running, 1)
    first.to_be(1)
    first.not_.to_be(2)
    Expectation.create(running, 2).to_be(3)

    results = results_of(running)
    assert [r.index for r in results] == [1, 1, 2]
    assert [r.success for r in results] == [True, True, False]
    assert results[1].negated


def test_failed_expectation_does_not_raise(running):
    """Failures are recorded, never raised."""
    Expectation.create(running, 2).to_be(3)
    (failure,) = running.finalize().failures
    assert failure.message == "2 not the same as 3"
    assert failure.args == (2, 3)


@pytest.mark.parametrize(
    "value, matcher, args",
    [
        (1, "to_be", (1,)),
        (1, "to_be", (2,)),
        ({"a": 1}, "to_equal", ({"a": 1},)),
        ([1, 2], "to_contain", (3,)),
        (None, "to_be_defined", ()),
        ("abc", "to_match", ("b",)),
        ({"a": {"b": 1}}, "to_have_property", ("a.b", 1)),
        (whoops, "to_throw", ("Who",)),
        (lambda: None, "to_throw", ()),
    ],
)
def test_negation_complements_outcome(running, value, matcher, args):
    """For the same arguments, `not_` always yields the opposite outcome."""
    expectation = Expectation.create(running, value)
    getattr(expectation, matcher)(*args)
    getattr(expectation.not_, matcher)(*args)
    plain, negated = results_of(running)
    assert plain.success is not negated.success


def test_negated_failure_message(running):
    """A negated failure says the matcher was unexpectedly satisfied."""
    Expectation.create(running, 1).not_.to_be(1)
    (failure,) = running.finalize().failures
    assert failure.message == "1 unexpectedly satisfied to_be"


def test_double_negation(running):
    """`not_.not_` is the plain expectation again."""
    expectation = Expectation.create(running, 1)
    assert not expectation.not_.not_.negated
    assert expectation.not_.not_.index == expectation.index


def test_to_have_property_with_and_without_value(running):
    """Omitting the value only checks presence; passing None checks for None."""
    Expectation.create(running, {"a": None}).to_have_property("a")
    Expectation.create(running, {"a": 1}).to_have_property("a", None)
    first, second = results_of(running)
    assert first.success
    assert first.args == ({"a": None}, "a")
    assert not second.success


# --- to_throw ---


def test_to_throw_reports_the_captured_error(running):
    """to_throw evaluates the error raised when calling received."""
    Expectation.create(running, whoops).to_throw(ValueError).to_throw("oops")
    results = results_of(running)
    assert all(r.success for r in results)
    assert isinstance(results[0].args[0], ValueError)


def test_to_throw_on_plain_value_fails(running):
    """Non-callables never throw."""
    Expectation.create(running, 42).to_throw()
    (failure,) = running.finalize().failures
    assert failure.message == "No error was thrown"


def test_unchecked_error_is_logged_on_close(running, caplog):
    """An error captured but never checked with to_throw is logged, not raised."""
    caplog.set_level(logging.WARNING, logger="mxunit.domain.case")
    Expectation.create(running, whoops).to_be_defined()
    closed = running.finalize()
    assert closed.passed
    assert any(
        rec.levelname == "WARNING" and "never checked it with to_throw" in rec.getMessage()
        for rec in caplog.records
    )


def test_checked_error_is_not_logged(running, caplog):
    """Checking the error with to_throw silences the warning."""
    caplog.set_level(logging.WARNING, logger="mxunit.domain.case")
    Expectation.create(running, whoops).not_.to_throw("nope")
    running.finalize()
    assert not caplog.records


def test_repr(running):
    """The repr shows index, negation and received value."""
    expectation = Expectation.create(running, "x")
    assert repr(expectation) == "<Expectation [1] 'x'>"
    assert repr(expectation.not_) == "<Expectation [1] not_.'x'>"


def test_every_to_throw_result_has_a_message(running):
    """Messages can be read on passing results too, with or without a target."""

    def boom():
        raise ValueError("Whoops")

    expectation = Expectation.create(running, boom)
    expectation.to_throw().to_throw("oops").not_.to_throw("Bad")
    messages = [result.message for result in results_of(running)]
    assert messages == [
        "ValueError('Whoops') was thrown",
        "Thrown ValueError('Whoops') does not match 'oops'",
        "ValueError('Whoops') unexpectedly satisfied to_throw",
    ]


def test_missing_property_with_value_message(running):
    """A missing path is reported as missing even when a value is expected."""
    Expectation.create(running, {"a": 1}).to_have_property("b", 2)
    (failure,) = running.finalize().failures
    assert failure.message == "{'a': 1} does not have property 'b'"
