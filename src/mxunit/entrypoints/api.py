"""The user-facing API: `describe`, `test` and `expect`.

Example:
    ```py
    from mxunit import describe, expect, test

    my_beverage = {"delicious": True, "sour": False}

    def beverage_suite():
        test("is delicious", lambda: expect(my_beverage["delicious"]).to_be_truthy())
        test("is not sour", lambda: expect(my_beverage["sour"]).to_be_falsy())

    describe("my beverage", beverage_suite)
    ```

`describe` runs its body immediately and synchronously; every `test` inside
it runs as soon as it is registered, and every `expect` reports into the test
whose body is running. Failed expectations never raise: they are collected and
rendered by the reporter once the suite finishes.
"""

import logging
import threading
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from mxunit import __version__
from mxunit.bootstrap import build_reporter
from mxunit.domain.errors import NoActiveSuiteError, NoActiveTestError
from mxunit.domain.expectation import Expectation
from mxunit.domain.results import SuiteReport
from mxunit.interfaces.reporter import Reporter
from mxunit.service_layer.suite import TestSuite, active_suite

logger = logging.getLogger(__name__)

_default_reporter: Reporter | None = None
_reporter_lock = threading.Lock()


# ============================================================================
#                               Reporter
# ============================================================================


def get_reporter() -> Reporter:
    """Return the default reporter, building it from configuration on first use."""
    global _default_reporter  # pylint: disable=global-statement
    with _reporter_lock:
        if _default_reporter is None:
            _default_reporter = build_reporter()
            logger.debug("Default reporter: %s", type(_default_reporter).__name__)
        return _default_reporter


def set_reporter(reporter: Reporter | None) -> Reporter | None:
    """Replace the default reporter.

    Args:
        reporter: The new default, or None to rebuild it from configuration
            on next use.

    Returns:
        The previous default reporter (None if it was never built).
    """
    global _default_reporter  # pylint: disable=global-statement
    with _reporter_lock:
        previous, _default_reporter = _default_reporter, reporter
    return previous


# ============================================================================
#                               describe
# ============================================================================


def describe(
    title: str, body: Callable[[], Any], *, reporter: Reporter | None = None
) -> SuiteReport:
    """Create and run a block grouping several related tests.

    Args:
        title: Title describing the suite of tests.
        body: Callable which registers the tests with `test`.
        reporter: Renders the suite; defaults to `get_reporter()`.

    Returns:
        SuiteReport: The finished suite, as handed to the reporter.
    """
    suite = TestSuite(title, body, reporter or get_reporter())
    return suite.run()


def _skip(title: str, body: Callable[..., Any]) -> None:  # pylint: disable=unused-argument
    """Do nothing, thus skip."""


def _clear(
    title: str, body: Callable[[], Any], *, reporter: Reporter | None = None
) -> SuiteReport:
    """Clear the reporter's previous output, then run the suite."""
    reporter = reporter or get_reporter()
    reporter.clear()
    return describe(title, body, reporter=reporter)


class DeferredSuite(threading.Timer):
    """A timer that clears the reporter and runs one suite when it fires.

    Join it to wait for the suite, or `cancel` it before it fires. Once fired
    the suite runs to completion and its report is kept in `report`.
    """

    def __init__(
        self,
        delay: float,
        title: str,
        body: Callable[[], Any],
        reporter: Reporter | None = None,
    ) -> None:
        super().__init__(abs(delay) / 1000, self._run_suite)
        self.daemon = True
        self.title = title
        self.report: SuiteReport | None = None
        self._body = body
        self._reporter = reporter

    def _run_suite(self) -> None:
        self.report = _clear(self.title, self._body, reporter=self._reporter)


def _delayed(
    delay: float,
    title: str,
    body: Callable[[], Any],
    *,
    reporter: Reporter | None = None,
) -> DeferredSuite:
    """Clear the reporter's output and run the suite after *delay* milliseconds.

    Args:
        delay: Delay in milliseconds; its sign is ignored.
        title: Title of the suite.
        body: Suite body.
        reporter: Renders the suite; defaults to `get_reporter()`.

    Returns:
        DeferredSuite: The started timer.
    """
    deferred = DeferredSuite(delay, title, body, reporter)
    deferred.start()
    logger.debug("Suite %r scheduled in %s ms", title, abs(delay))
    return deferred


def _delayed_skip(
    delay: float, title: str, body: Callable[..., Any]
) -> None:  # pylint: disable=unused-argument
    """Do nothing, thus skip."""


_clear.skip = _skip  # type: ignore[attr-defined]
_delayed.skip = _delayed_skip  # type: ignore[attr-defined]

describe.skip = _skip  # type: ignore[attr-defined]
describe.clear = _clear  # type: ignore[attr-defined]
describe.delayed = _delayed  # type: ignore[attr-defined]


# ============================================================================
#                               test
# ============================================================================


def _require_suite(function: str, title: str | None = None) -> TestSuite:
    if (suite := active_suite()) is None:
        logger.error("Function <%s> called outside of suite", function)
        raise NoActiveSuiteError(function, title)
    return suite


def test(title: str, body: Callable[..., Any]) -> None:
    """Register and immediately run a test in the active suite.

    Args:
        title: Title of the test.
        body: Callable containing one or more calls to `expect`.

    Raises:
        NoActiveSuiteError: If called outside of a `describe` body.
    """
    _require_suite("test", title).add_test(title, body)


test.__test__ = False  # type: ignore[attr-defined]  # not a pytest test


def _each(
    table: Iterable[Sequence[Any]],
) -> Callable[[str, Callable[..., Any]], None]:
    """Run a test body once per row of *table*.

    Example:
        ```py
        test.each([(1, 1, 2), (1, 2, 3)])(
            "adds", lambda a, b, total: expect(a + b).to_be(total)
        )
        ```

    All rows run inside a single test, sharing its results and index sequence.
    """
    rows = [tuple(row) for row in table]

    def run_each(title: str, body: Callable[..., Any]) -> None:
        _require_suite("test.each", title).add_test(title, body, rows)

    return run_each


def _todo(title: str) -> None:
    """Register a test that is still to be written."""
    _require_suite("test.todo", title).add_todo(title)


test.each = _each  # type: ignore[attr-defined]
test.skip = _skip  # type: ignore[attr-defined]
test.todo = _todo  # type: ignore[attr-defined]


# ============================================================================
#                               expect
# ============================================================================


def expect(value: Any) -> Expectation:
    """Start an assertion about *value*.

    A function passed as *value* is called right away; an error it raises is
    captured for `to_throw` instead of propagating.

    Raises:
        NoActiveSuiteError: If called outside of a `describe` body.
        NoActiveTestError: If called outside of a `test` body.
    """
    suite = _require_suite("expect")
    try:
        return suite.expect(value)
    except NoActiveTestError:
        logger.error("Function <expect> called outside of test in suite %r", suite.title)
        raise


def version() -> str:
    """Return the MXUNIT version string."""
    return __version__
