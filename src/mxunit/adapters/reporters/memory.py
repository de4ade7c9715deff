"""In-memory reporter.

Keeps every rendered suite in a list instead of printing it. Useful for hosts
that embed MXUNIT and inspect results programmatically, and for tests.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from mxunit.domain.results import ClosedTest
from mxunit.interfaces.reporter import Reporter


@dataclass(frozen=True, slots=True)
class RenderedSuite:
    """One call to `MemoryReporter.render`."""

    title: str
    tests: tuple[ClosedTest, ...]
    todos: tuple[str, ...]


class MemoryReporter(Reporter):
    """Reporter that records rendered suites in `suites`."""

    def __init__(self) -> None:
        self.suites: list[RenderedSuite] = []
        self.clear_count = 0

    def render(
        self, title: str, tests: Sequence[ClosedTest], todos: Sequence[str]
    ) -> None:
        self.suites.append(RenderedSuite(title, tuple(tests), tuple(todos)))

    def clear(self) -> None:
        self.suites.clear()
        self.clear_count += 1

    @property
    def last(self) -> RenderedSuite:
        """The most recently rendered suite.

        Raises:
            LookupError: If nothing has been rendered since the last clear.
        """
        if not self.suites:
            raise LookupError("No suite has been rendered")
        return self.suites[-1]
