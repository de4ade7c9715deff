"""The open side of a test's lifecycle.

A `RunningTest` accepts expectation reports while its body executes. Closing
it with `RunningTest.finalize` produces an immutable `ClosedTest`; from then
on the closed value is authoritative and late reports are rejected.
"""

import logging

from .errors import ReportAfterCloseError
from .results import ClosedTest, ExpectationResult

logger = logging.getLogger(__name__)


class RunningTest:
    """Collects expectation results for one test body.

    Args:
        title: Title of the test as given to `test()`.

    Note:
        Not thread-safe. A test body runs synchronously on a single thread.
    """

    def __init__(self, title: str) -> None:
        self.title = title
        self._expectation_count = 0
        self._results: list[ExpectationResult] = []
        self._unchecked_errors: dict[int, Exception] = {}
        self._closed: ClosedTest | None = None

    # --- Reporting ---

    def next_index(self) -> int:
        """Allocate the index for a new `expect()` call (1-based)."""
        self._ensure_open(self._expectation_count + 1)
        self._expectation_count += 1
        return self._expectation_count

    def report(self, result: ExpectationResult) -> None:
        """Record the result of one matcher call.

        Raises:
            ReportAfterCloseError: If the test has already been finalized.
        """
        self._ensure_open(result.index)
        self._results.append(result)

    def note_captured_error(self, index: int, error: Exception) -> None:
        """Remember an error raised by a callable passed to `expect()`."""
        self._unchecked_errors[index] = error

    def mark_error_checked(self, index: int) -> None:
        """Forget the captured error of expectation *index* once asserted on."""
        self._unchecked_errors.pop(index, None)

    def _ensure_open(self, index: int) -> None:
        if self._closed is not None:
            logger.error(
                "Expectation [%d] reported after test %r was closed", index, self.title
            )
            raise ReportAfterCloseError(self.title, index)

    # --- Lifecycle ---

    @property
    def is_closed(self) -> bool:
        """Whether `finalize` has been called."""
        return self._closed is not None

    def finalize(self) -> ClosedTest:
        """Close the test and return its immutable result.

        Calling this again returns the same `ClosedTest`.

        Captured errors that were never checked with `to_throw` are logged as
        warnings; they do not fail the test.
        """
        if self._closed is None:
            for index, error in self._unchecked_errors.items():
                logger.warning(
                    "Test %r: expectation [%d] captured %r but never checked it with to_throw",
                    self.title,
                    index,
                    error,
                )
            self._closed = ClosedTest.from_results(self.title, self._results)
            logger.debug(
                "Closed test %r: %d passed, %d total",
                self.title,
                self._closed.success_count,
                self._closed.total_count,
            )
        return self._closed
