"""Expectations: one received value bound to one result slot of a test."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Self

from . import matchers as m
from .case import RunningTest
from .results import ExpectationResult

logger = logging.getLogger(__name__)

_OMITTED: Any = object()


@dataclass(frozen=True, slots=True)
class Outcome:
    """The received value and, for callables, the error raised by calling it."""

    value: Any
    error: Exception | None = None

    @property
    def raised(self) -> bool:
        """Whether calling the value raised an error."""
        return self.error is not None


def capture_outcome(value: Any) -> Outcome:
    """Call *value* once if it is a function-like callable and record the outcome.

    Classes are not called. Only `Exception` subclasses are captured;
    ``KeyboardInterrupt`` and ``SystemExit`` propagate.
    """
    if not callable(value) or isinstance(value, type):
        return Outcome(value)
    try:
        value()
    except Exception as exc:  # pylint: disable=broad-except
        logger.debug("Captured %r raised by %r", exc, value)
        return Outcome(value, exc)
    return Outcome(value)


class Expectation:
    """Matchers evaluated against a single received value.

    Every matcher reports exactly one `ExpectationResult` into the owning
    test under this expectation's index and returns the expectation, so
    matchers can be chained. `not_` gives the negated twin, which shares the
    index and the outcome.

    Use `Expectation.create` (through `expect()`) rather than the
    constructor; it allocates the index and captures the outcome.
    """

    __slots__ = ("_test", "_outcome", "_index", "_negated")

    def __init__(
        self, test: RunningTest, outcome: Outcome, index: int, negated: bool = False
    ) -> None:
        self._test = test
        self._outcome = outcome
        self._index = index
        self._negated = negated

    @classmethod
    def create(cls, test: RunningTest, value: Any) -> Self:
        """Allocate the next index in *test* and capture the outcome of *value*."""
        index = test.next_index()
        outcome = capture_outcome(value)
        if outcome.error is not None:
            test.note_captured_error(index, outcome.error)
        return cls(test, outcome, index)

    # --- Accessors ---

    @property
    def not_(self) -> Expectation:
        """The negated expectation; same index, complemented outcomes."""
        return Expectation(self._test, self._outcome, self._index, not self._negated)

    @property
    def index(self) -> int:
        """1-based index of this expectation within its test."""
        return self._index

    @property
    def negated(self) -> bool:
        """Whether matcher outcomes are complemented."""
        return self._negated

    @property
    def outcome(self) -> Outcome:
        """The captured received value and error."""
        return self._outcome

    # --- Matchers ---

    def to_be(self, expected: Any) -> Self:
        """Received is the same object, or the same primitive value."""
        return self._evaluate(m.TO_BE, self._received, expected)

    def to_be_close_to(self, expected: float, digits: int = 2) -> Self:
        """Received differs from *expected* by less than ``10**-digits / 2``."""
        return self._evaluate(m.TO_BE_CLOSE_TO, self._received, expected, digits)

    def to_be_defined(self) -> Self:
        """Received is anything but ``UNDEFINED``."""
        return self._evaluate(m.TO_BE_DEFINED, self._received)

    def to_be_falsy(self) -> Self:
        return self._evaluate(m.TO_BE_FALSY, self._received)

    def to_be_truthy(self) -> Self:
        return self._evaluate(m.TO_BE_TRUTHY, self._received)

    def to_be_greater_than(self, expected: Any) -> Self:
        return self._evaluate(m.TO_BE_GREATER_THAN, self._received, expected)

    def to_be_greater_than_or_equal(self, expected: Any) -> Self:
        return self._evaluate(m.TO_BE_GREATER_THAN_OR_EQUAL, self._received, expected)

    def to_be_less_than(self, expected: Any) -> Self:
        return self._evaluate(m.TO_BE_LESS_THAN, self._received, expected)

    def to_be_less_than_or_equal(self, expected: Any) -> Self:
        return self._evaluate(m.TO_BE_LESS_THAN_OR_EQUAL, self._received, expected)

    def to_be_instance_of(self, cls: type | tuple[type, ...]) -> Self:
        return self._evaluate(m.TO_BE_INSTANCE_OF, self._received, cls)

    def to_be_nan(self) -> Self:
        return self._evaluate(m.TO_BE_NAN, self._received)

    def to_be_null(self) -> Self:
        """Received is ``None``."""
        return self._evaluate(m.TO_BE_NULL, self._received)

    def to_be_undefined(self) -> Self:
        """Received is ``UNDEFINED``."""
        return self._evaluate(m.TO_BE_UNDEFINED, self._received)

    def to_contain(self, item: Any) -> Self:
        """Received is an array holding an element identical to *item*."""
        return self._evaluate(m.TO_CONTAIN, self._received, item)

    def to_contain_equal(self, item: Any) -> Self:
        """Received is an array holding an element one-level equal to *item*."""
        return self._evaluate(m.TO_CONTAIN_EQUAL, self._received, item)

    def to_equal(self, expected: Any) -> Self:
        """One-level structural equality; nested values compare by identity."""
        return self._evaluate(m.TO_EQUAL, self._received, expected)

    def to_have_length(self, length: int) -> Self:
        return self._evaluate(m.TO_HAVE_LENGTH, self._received, length)

    def to_have_property(self, path: str, value: Any = _OMITTED) -> Self:
        """A dotted *path* exists in received and, if given, holds *value*."""
        if value is _OMITTED:
            return self._evaluate(m.TO_HAVE_PROPERTY, self._received, path)
        return self._evaluate(m.TO_HAVE_PROPERTY, self._received, path, value)

    def to_match(self, pattern: str | re.Pattern[str]) -> Self:
        """Received is a string in which *pattern* can be found."""
        return self._evaluate(m.TO_MATCH, self._received, pattern)

    def to_match_array(self, expected: Any) -> Self:
        """Received matches *expected* at every index *expected* has."""
        return self._evaluate(m.TO_MATCH_ARRAY, self._received, expected)

    def to_match_date(self, expected: Any) -> Self:
        """Received falls on the same calendar day as *expected*."""
        return self._evaluate(m.TO_MATCH_DATE, self._received, expected)

    def to_match_object(self, expected: Any) -> Self:
        """Every key of *expected* matches in received; extra keys are ignored."""
        return self._evaluate(m.TO_MATCH_OBJECT, self._received, expected)

    def to_throw(self, expected: Any = _OMITTED) -> Self:
        """Calling received raised an error.

        Args:
            expected: Optional constraint on the error: a substring of its
                message, a compiled pattern searched in its message, an
                exception whose message must be equal, or an exception class.
        """
        self._test.mark_error_checked(self._index)
        if expected is _OMITTED:
            return self._evaluate(m.TO_THROW, self._outcome.error)
        return self._evaluate(m.TO_THROW, self._outcome.error, expected)

    # --- Plumbing ---

    @property
    def _received(self) -> Any:
        return self._outcome.value

    def _evaluate(self, matcher: m.Matcher, received: Any, *args: Any) -> Self:
        success = matcher.matches(received, *args) != self._negated
        self._test.report(
            ExpectationResult(
                index=self._index,
                matcher=matcher,
                success=success,
                args=(received, *args),
                negated=self._negated,
            )
        )
        return self

    def __repr__(self) -> str:
        prefix = "not_." if self._negated else ""
        return f"<Expectation [{self._index}] {prefix}{self._outcome.value!r}>"
