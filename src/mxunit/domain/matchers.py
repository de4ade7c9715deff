"""The fixed set of matchers.

Each `Matcher` bundles a predicate over ``(received, *args)`` with the
formatter that turns the same arguments into a failure message, so a matcher
name can never drift away from its message. `MATCHERS` indexes them by name.
"""

import math
import operator
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from .comparison import (
    array_subset_match,
    get_nested_value,
    identical,
    is_array,
    object_subset_match,
    shallow_struct_equal,
)
from .value_objects import UNDEFINED

type Predicate = Callable[..., bool]
type MessageFormatter = Callable[[Sequence[Any]], str]


@dataclass(frozen=True, slots=True)
class Matcher:
    """A named assertion predicate and its failure message.

    Attributes:
        name: Public name, identical to the `Expectation` method name.
        predicate: Callable taking the received value followed by the
            matcher arguments and returning the raw (non-negated) outcome.
        message: Formats the reported args ``(received, *args)`` into the
            message shown when the matcher fails.
    """

    name: str
    predicate: Predicate
    message: MessageFormatter

    def matches(self, received: Any, *args: Any) -> bool:
        """Evaluate the raw predicate."""
        return bool(self.predicate(received, *args))

    def describe_failure(self, args: Sequence[Any], negated: bool = False) -> str:
        """Return the failure message for the reported *args*."""
        if negated:
            return f"{args[0]!r} unexpectedly satisfied {self.name}"
        return self.message(args)


# --- predicates needing more than a lambda ---


def _close_to(received: Any, expected: Any, digits: int = 2) -> bool:
    try:
        return abs(received - expected) < 10 ** (-digits) / 2
    except TypeError:
        return False


def _ordering(compare: Callable[[Any, Any], Any]) -> Predicate:
    def predicate(received: Any, expected: Any) -> bool:
        try:
            return bool(compare(received, expected))
        except TypeError:
            return False

    return predicate


def _instance_of(received: Any, cls: Any) -> bool:
    try:
        return isinstance(received, cls)
    except TypeError:
        return False


def _has_length(received: Any, length: int) -> bool:
    try:
        return len(received) == length
    except TypeError:
        return False


def _has_property(received: Any, path: str, *value: Any) -> bool:
    lookup = get_nested_value(received, path)
    if not lookup.found or not value:
        return lookup.found
    return identical(lookup.value, value[0])


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    return pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)


def _matches_pattern(received: Any, pattern: str | re.Pattern[str]) -> bool:
    return isinstance(received, str) and _compile(pattern).search(received) is not None


def _calendar_day(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def _same_day(received: Any, expected: Any) -> bool:
    day = _calendar_day(received)
    return day is not None and day == _calendar_day(expected)


def _throws(error: BaseException | None, *expected: Any) -> bool:
    if error is None:
        return False
    if not expected:
        return True

    target, message = expected[0], str(error)
    if isinstance(target, str):
        return target in message
    if isinstance(target, re.Pattern):
        return target.search(message) is not None
    if isinstance(target, BaseException):
        return str(target) == message
    if isinstance(target, type) and issubclass(target, BaseException):
        return isinstance(error, target)
    return False


# --- messages needing more than a lambda ---


def _not_an_array(describe: MessageFormatter) -> MessageFormatter:
    def message(args: Sequence[Any]) -> str:
        if not is_array(args[0]):
            return "Matched value is not an array"
        return describe(args)

    return message


def _property_message(args: Sequence[Any]) -> str:
    if len(args) == 2 or not get_nested_value(args[0], args[1]).found:
        return f"{args[0]!r} does not have property {args[1]!r}"
    return f"{args[0]!r}[{args[1]!r}] does not equal {args[2]!r}"


def _date_message(args: Sequence[Any]) -> str:
    if _calendar_day(args[0]) is None:
        return "Received value is not a date"
    return f"{args[0]!r} is not the same day as {args[1]!r}"


def _throw_message(args: Sequence[Any]) -> str:
    if args[0] is None:
        return "No error was thrown"
    if len(args) < 2:
        return f"{args[0]!r} was thrown"
    return f"Thrown {args[0]!r} does not match {args[1]!r}"


def _pattern_text(pattern: Any) -> str:
    return f"/{pattern.pattern}/" if isinstance(pattern, re.Pattern) else repr(pattern)


# --- registry ---

TO_BE = Matcher(
    "to_be",
    identical,
    lambda args: f"{args[0]!r} not the same as {args[1]!r}",
)
TO_BE_CLOSE_TO = Matcher(
    "to_be_close_to",
    _close_to,
    lambda args: f"{args[0]!r} is not close to {args[1]!r}",
)
TO_BE_DEFINED = Matcher(
    "to_be_defined",
    lambda received: received is not UNDEFINED,
    lambda args: "Variable has not been defined",
)
TO_BE_FALSY = Matcher(
    "to_be_falsy",
    lambda received: not received,
    lambda args: f"{args[0]!r} is not falsy",
)
TO_BE_TRUTHY = Matcher(
    "to_be_truthy",
    bool,
    lambda args: f"{args[0]!r} is not truthy",
)
TO_BE_GREATER_THAN = Matcher(
    "to_be_greater_than",
    _ordering(operator.gt),
    lambda args: f"{args[0]!r} is not greater than {args[1]!r}",
)
TO_BE_GREATER_THAN_OR_EQUAL = Matcher(
    "to_be_greater_than_or_equal",
    _ordering(operator.ge),
    lambda args: f"{args[0]!r} is not greater than or equal to {args[1]!r}",
)
TO_BE_LESS_THAN = Matcher(
    "to_be_less_than",
    _ordering(operator.lt),
    lambda args: f"{args[0]!r} is not less than {args[1]!r}",
)
TO_BE_LESS_THAN_OR_EQUAL = Matcher(
    "to_be_less_than_or_equal",
    _ordering(operator.le),
    lambda args: f"{args[0]!r} is not less than or equal to {args[1]!r}",
)
TO_BE_INSTANCE_OF = Matcher(
    "to_be_instance_of",
    _instance_of,
    lambda args: f"{args[0]!r} is not an instance of {args[1]!r}",
)
TO_BE_NAN = Matcher(
    "to_be_nan",
    lambda received: isinstance(received, float) and math.isnan(received),
    lambda args: f"{args[0]!r} is not NaN",
)
TO_BE_NULL = Matcher(
    "to_be_null",
    lambda received: received is None,
    lambda args: f"{args[0]!r} is not None",
)
TO_BE_UNDEFINED = Matcher(
    "to_be_undefined",
    lambda received: received is UNDEFINED,
    lambda args: f"{args[0]!r} is not UNDEFINED",
)
TO_CONTAIN = Matcher(
    "to_contain",
    lambda received, item: is_array(received)
    and any(identical(element, item) for element in received),
    _not_an_array(lambda args: f"Array does not contain {args[1]!r}"),
)
TO_CONTAIN_EQUAL = Matcher(
    "to_contain_equal",
    lambda received, item: is_array(received)
    and any(shallow_struct_equal(element, item) for element in received),
    _not_an_array(lambda args: f"Array does not contain item equal to {args[1]!r}"),
)
TO_EQUAL = Matcher(
    "to_equal",
    shallow_struct_equal,
    lambda args: "Objects are not equal",
)
TO_HAVE_LENGTH = Matcher(
    "to_have_length",
    _has_length,
    lambda args: f"{args[0]!r} does not have a length of {args[1]!r}",
)
TO_HAVE_PROPERTY = Matcher(
    "to_have_property",
    _has_property,
    _property_message,
)
TO_MATCH = Matcher(
    "to_match",
    _matches_pattern,
    lambda args: f"{args[0]!r} does not match {_pattern_text(args[1])}",
)
TO_MATCH_ARRAY = Matcher(
    "to_match_array",
    array_subset_match,
    _not_an_array(lambda args: f"{args[0]!r} does not match {args[1]!r}"),
)
TO_MATCH_DATE = Matcher(
    "to_match_date",
    _same_day,
    _date_message,
)
TO_MATCH_OBJECT = Matcher(
    "to_match_object",
    object_subset_match,
    lambda args: "Objects do not match",
)
TO_THROW = Matcher(
    "to_throw",
    _throws,
    _throw_message,
)

MATCHERS: dict[str, Matcher] = {
    matcher.name: matcher
    for matcher in (
        TO_BE,
        TO_BE_CLOSE_TO,
        TO_BE_DEFINED,
        TO_BE_FALSY,
        TO_BE_TRUTHY,
        TO_BE_GREATER_THAN,
        TO_BE_GREATER_THAN_OR_EQUAL,
        TO_BE_LESS_THAN,
        TO_BE_LESS_THAN_OR_EQUAL,
        TO_BE_INSTANCE_OF,
        TO_BE_NAN,
        TO_BE_NULL,
        TO_BE_UNDEFINED,
        TO_CONTAIN,
        TO_CONTAIN_EQUAL,
        TO_EQUAL,
        TO_HAVE_LENGTH,
        TO_HAVE_PROPERTY,
        TO_MATCH,
        TO_MATCH_ARRAY,
        TO_MATCH_DATE,
        TO_MATCH_OBJECT,
        TO_THROW,
    )
}
