"""Suite orchestration and the active-suite context.

The suite that is currently executing lives in a context variable. A
`suite_scope` pushes a suite for the duration of its body and pops it
afterwards, so a `describe` nested in another body runs as an independent
suite and the outer one is restored when it finishes. Each thread (and each
deferred suite running on a timer thread) starts with no active suite.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from mxunit.domain.case import RunningTest
from mxunit.domain.errors import (
    NestedTestError,
    NoActiveTestError,
    SuiteAlreadyRunError,
)
from mxunit.domain.expectation import Expectation
from mxunit.domain.results import SuiteReport
from mxunit.interfaces.reporter import Reporter

logger = logging.getLogger(__name__)

_active_suite: ContextVar["TestSuite | None"] = ContextVar(
    "mxunit_active_suite", default=None
)


def active_suite() -> "TestSuite | None":
    """Return the suite whose body is executing in this context, if any."""
    return _active_suite.get()


@contextmanager
def suite_scope(suite: "TestSuite") -> Iterator["TestSuite"]:
    """Make *suite* the active suite until the block exits."""
    token = _active_suite.set(suite)
    try:
        yield suite
    finally:
        _active_suite.reset(token)


class TestSuite:
    """One `describe` block: runs its body once and reports the result.

    Tests are executed as soon as they are registered. Registering a new test
    closes the previous one, and running the suite to completion closes the
    last one before the report is handed to the reporter.

    Args:
        title: Title of the suite.
        body: Callable registering the tests through `test()`.
        reporter: Renders the finished suite.
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self, title: str, body: Callable[[], Any], reporter: Reporter
    ) -> None:
        self.title = title
        self._body = body
        self._reporter = reporter
        self._tests: list[RunningTest] = []
        self._todos: list[str] = []
        self._current: RunningTest | None = None
        self._running: RunningTest | None = None
        self._has_run = False

    # --- Execution ---

    def run(self) -> SuiteReport:
        """Execute the body, close the last test and render the report.

        Returns:
            SuiteReport: The result model handed to the reporter.

        Raises:
            SuiteAlreadyRunError: If the suite has already been run.
            Exception: Anything escaping the body, including usage errors.
                Nothing is reported in that case.
        """
        if self._has_run:
            raise SuiteAlreadyRunError(self.title)
        self._has_run = True

        logger.debug("Running suite %r", self.title)
        with suite_scope(self):
            try:
                self._body()
            except Exception:  # pylint: disable=broad-except
                logger.exception("Exception running suite %r", self.title)
                raise
        return self._close()

    def _close(self) -> SuiteReport:
        report = SuiteReport(
            title=self.title,
            tests=tuple(test.finalize() for test in self._tests),
            todos=self.todos,
        )
        logger.debug(
            "Finished suite %r: %d passed, %d total",
            self.title,
            report.success_count,
            report.total_count,
        )
        self._reporter.render(report.title, report.tests, report.todos)
        return report

    # --- Registration ---

    def add_test(
        self,
        title: str,
        body: Callable[..., Any],
        table: Iterable[Sequence[Any]] | None = None,
    ) -> None:
        """Close the current test, open a new one and run *body* in it.

        Args:
            title: Title of the new test.
            body: The test body.
            table: Optional rows of positional arguments. The body runs once
                per row; all rows share the new test and its index sequence.

        Raises:
            NestedTestError: If another test body is still running. Nothing
                is closed or opened in that case.
        """
        if self._running is not None:
            logger.error(
                "Test %r registered inside running test %r", title, self._running.title
            )
            raise NestedTestError(title, self._running.title)
        if self._current is not None:
            self._current.finalize()

        self._current = self._running = RunningTest(title)
        self._tests.append(self._current)
        logger.debug("Running test %r in suite %r", title, self.title)

        try:
            if table is None:
                body()
            else:
                for row in table:
                    body(*row)
        finally:
            self._running = None

    def add_todo(self, title: str) -> None:
        """Register a todo; it is listed in the report but never run."""
        self._todos.append(title)

    def expect(self, value: Any) -> Expectation:
        """Create an expectation reporting into the current test."""
        return Expectation.create(self.current_test, value)

    # --- Accessors ---

    @property
    def current_test(self) -> RunningTest:
        """The test whose body is executing.

        Raises:
            NoActiveTestError: If no test body is executing.
        """
        if self._running is None:
            raise NoActiveTestError(self.title)
        return self._running

    @property
    def todos(self) -> tuple[str, ...]:
        """Todo titles registered so far."""
        return tuple(self._todos)
