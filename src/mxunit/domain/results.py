"""Immutable result model consumed by reporters."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .matchers import Matcher


@dataclass(frozen=True, slots=True)
class ExpectationResult:
    """Outcome of one matcher call.

    Attributes:
        index: 1-based position of the originating `expect()` call within its
            test. Shared by every matcher called on that expectation and its
            `not_` counterpart.
        matcher: The matcher that was evaluated.
        success: Final outcome, already adjusted for negation.
        args: ``(received, *matcher_args)`` as used for the failure message.
        negated: Whether the matcher was called through `not_`.
    """

    index: int
    matcher: Matcher
    success: bool
    args: tuple[Any, ...]
    negated: bool = False

    @property
    def matcher_name(self) -> str:
        """Name of the evaluated matcher (e.g. ``"to_be"``)."""
        return self.matcher.name

    @property
    def message(self) -> str:
        """Human-readable failure message for this result."""
        return self.matcher.describe_failure(self.args, self.negated)


@dataclass(frozen=True, slots=True)
class ClosedTest:
    """A finished test: its results split into successes and failures."""

    title: str
    results: tuple[ExpectationResult, ...]
    successes: tuple[ExpectationResult, ...]
    failures: tuple[ExpectationResult, ...]

    @classmethod
    def from_results(
        cls, title: str, results: Iterable[ExpectationResult]
    ) -> ClosedTest:
        """Partition *results* once into an immutable closed test."""
        ordered = tuple(results)
        return cls(
            title=title,
            results=ordered,
            successes=tuple(result for result in ordered if result.success),
            failures=tuple(result for result in ordered if not result.success),
        )

    @property
    def success_count(self) -> int:
        """Number of successful expectation results."""
        return len(self.successes)

    @property
    def failure_count(self) -> int:
        """Number of failed expectation results."""
        return len(self.failures)

    @property
    def total_count(self) -> int:
        """Number of expectation results."""
        return len(self.results)

    @property
    def passed(self) -> bool:
        """True when no expectation failed."""
        return not self.failures


@dataclass(frozen=True, slots=True)
class SuiteReport:
    """Everything a reporter receives for one suite."""

    title: str
    tests: tuple[ClosedTest, ...]
    todos: tuple[str, ...]

    @property
    def success_count(self) -> int:
        """Successful expectation results across all tests."""
        return sum(test.success_count for test in self.tests)

    @property
    def total_count(self) -> int:
        """Expectation results across all tests."""
        return sum(test.total_count for test in self.tests)

    @property
    def passed(self) -> bool:
        """True when every test passed."""
        return all(test.passed for test in self.tests)
