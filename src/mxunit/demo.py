"""Demonstration suite exercising every matcher.

Run it with ``mxunit demo``. Every expectation here is written to pass, so the
report doubles as a smoke test of the matchers.
"""

import math
import re
from datetime import date, datetime

from mxunit import UNDEFINED, describe, expect, test
from mxunit.domain.results import SuiteReport
from mxunit.interfaces.reporter import Reporter

DEMO_TITLE = "mxunit matchers"


def _identity_and_equality() -> None:
    obj = {"a": 1, "b": 2}
    obj_ref = obj
    expect(1 + 2).to_be(3)
    expect("hello").to_equal("hello")
    expect(obj).to_be(obj_ref)
    expect(obj).not_.to_be({"a": 1, "b": 2})  # same items, different object
    expect(0.2 + 0.1).not_.to_be(0.3)  # 0.30000000000000004
    expect(0.214).to_be_close_to(0.21)  # within 0.005
    expect(0.215).not_.to_be_close_to(0.21, 4)  # within 0.00005
    expect(0.215).to_be_close_to(0.21, 1)  # within 0.05
    expect(0.2 + 0.1).to_be_close_to(0.3)
    expect(obj).to_equal({"a": 1, "b": 2})
    expect(obj).not_.to_equal({"a": 1, "b": 2, "c": 3})
    expect(int("42")).to_equal(42)
    expect(int("42")).not_.to_equal("42")


def _defined() -> None:
    expect(UNDEFINED).not_.to_be_defined()
    expect(42).to_be_defined()
    expect(None).to_be_defined()


def _falsy() -> None:
    expect(False).to_be_falsy()
    expect(0).to_be_falsy()
    expect("").to_be_falsy()
    expect(None).to_be_falsy()
    expect([]).to_be_falsy()
    expect("False").not_.to_be_falsy()


def _truthy() -> None:
    expect(1).to_be_truthy()
    expect("a").to_be_truthy()
    expect(object()).to_be_truthy()
    expect("False").to_be_truthy()
    expect("").not_.to_be_truthy()


def _ordering() -> None:
    expect(1).to_be_greater_than(0)
    expect(1.0000001).to_be_greater_than(1)
    expect(1).to_be_greater_than_or_equal(1)
    expect(1).not_.to_be_greater_than(1)
    expect(1).to_be_less_than(2)
    expect(2).to_be_less_than_or_equal(2)
    expect(1.0000001).to_be_less_than(2)
    expect(1).not_.to_be_less_than(1)
    expect("a").not_.to_be_less_than(1)  # incomparable


def _types_and_special_values() -> None:
    expect(datetime.now()).to_be_instance_of(datetime)
    expect(None).to_be_null()
    expect(UNDEFINED).not_.to_be_null()
    expect(UNDEFINED).to_be_undefined()
    expect(None).not_.to_be_undefined()
    expect(math.nan).to_be_nan()
    expect(float("12")).not_.to_be_nan()


def _match() -> None:
    expect("football games").to_match(re.compile("gam"))
    expect("football games").not_.to_match(re.compile("^gam"))
    expect("football games").to_match("ball")


def _contain() -> None:
    arr1 = [1, 2, 3]
    arr2 = [{"a": 1, "b": 2}, {"c": 3, "d": 4}]
    expect(arr1).to_contain(2)
    expect(arr1).not_.to_contain(4)
    expect(arr2).to_contain_equal({"c": 3, "d": 4})
    expect(arr2).not_.to_contain_equal({"c": 3, "d": 5})


def _length_and_property() -> None:
    tmp = {"c": 3, "d": 4}
    expect([1, 2, 3, 4]).to_have_length(4)
    expect({"a": 1, "b": 2}).to_have_property("a")
    expect({"a": 1, "b": 2}).to_have_property("b", 2)
    expect({"a": 1, "b": 2}).not_.to_have_property("c")
    expect({"a": 1, "b": 2}).not_.to_have_property("a", 2)
    expect({"a": 1, "b": 2, "z": tmp}).to_have_property("z", tmp)
    expect({"a": 1, "b": 2, "z": tmp}).not_.to_have_property("z", {"c": 3, "d": 4})
    expect({"a": 1, "b": 2, "z": tmp}).to_have_property("z.c")
    expect({"a": 1, "b": 2, "z": tmp}).to_have_property("z.c", 3)
    expect({"a": 1, "b": 2, "z": tmp}).not_.to_have_property("z.c", 4)
    expect({"a": 1, "b": 2, "c": {"d": 4, "e": {"f": 6, "g": 7}}}).to_have_property(
        "c.e.g", 7
    )


def _throw() -> None:
    def whoops() -> None:
        raise ValueError("Whoops")

    expect(lambda: {}["missing"]).to_throw()
    expect(lambda: 0).not_.to_throw()
    expect(whoops).to_throw("oops")
    expect(whoops).not_.to_throw("Bad")
    expect(whoops).to_throw(ValueError)
    expect(whoops).to_throw(re.compile(r"^Who"))


def _match_array_object_date() -> None:
    expect([1, 2, 3]).to_match_array([1, 2])
    expect([1, 2]).not_.to_match_array([1, 2, 3])
    expect([1, [2, 3], 4]).to_match_array([1, [2]])
    expect({"a": 1, "b": 2}).to_match_object({"a": 1})
    expect({"a": 1}).not_.to_match_object({"a": 1, "b": 2})
    expect({"a": {"x": 1, "y": 2}, "b": [1, 2, 3]}).to_match_object(
        {"a": {"x": 1}, "b": [1, 2]}
    )
    expect(datetime(2024, 5, 17, 8, 30)).to_match_date(date(2024, 5, 17))
    expect(datetime(2024, 5, 17, 23, 59)).not_.to_match_date(datetime(2024, 5, 18))
    expect("2024-05-17").not_.to_match_date(date(2024, 5, 17))


def demo_suite() -> None:
    """Body of the demonstration suite."""
    test("to_be / to_be_close_to / to_equal", _identity_and_equality)
    test("to_be_defined", _defined)
    test("to_be_falsy", _falsy)
    test("to_be_truthy", _truthy)
    test("to_be_greater_than/..._or_equal / to_be_less_than/..._or_equal", _ordering)
    test(
        "to_be_instance_of / to_be_null / to_be_undefined / to_be_nan",
        _types_and_special_values,
    )
    test("to_match", _match)
    test("to_contain / to_contain_equal", _contain)
    test("to_have_length / to_have_property", _length_and_property)
    test("to_throw", _throw)
    test("to_match_array / to_match_object / to_match_date", _match_array_object_date)
    test.each([(1, 1, 2), (1, 2, 3), (2, 1, 3)])(
        "arguments table", lambda a, b, total: expect(a + b).to_be(total)
    )
    test.skip("skipped test", lambda: expect(1).to_be(2))
    test.todo("to_satisfy()")
    test.todo("async test bodies")


def run_demo(reporter: Reporter | None = None, delay: float = 0) -> SuiteReport:
    """Run the demonstration suite and return its report.

    Args:
        reporter: Reporter to render with; defaults to the configured one.
        delay: When positive, clear the output and run the suite after this
            many milliseconds on a timer thread, waiting for it to finish.

    Raises:
        RuntimeError: If the deferred suite did not produce a report.
    """
    if delay <= 0:
        return describe(DEMO_TITLE, demo_suite, reporter=reporter)

    deferred = describe.delayed(delay, DEMO_TITLE, demo_suite, reporter=reporter)
    deferred.join()
    if deferred.report is None:
        raise RuntimeError(f"Deferred suite {DEMO_TITLE!r} did not complete")
    return deferred.report
