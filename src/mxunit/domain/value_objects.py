"""Value objects shared by the comparison and matcher modules.

This module defines the ``UNDEFINED`` sentinel and the `Lookup` result of a
nested property walk.

``UNDEFINED`` stands for "no value at all" and is distinct from ``None``,
which is a real value. It is what a missing key reads as during subset
matching, and what `to_be_defined`/`to_be_undefined` test against.
"""

from dataclasses import dataclass
from typing import Any


def _get_undefined() -> "_UndefinedType":
    # Factory used by pickle to retrieve the one true instance.
    return UNDEFINED


@dataclass(frozen=True)
class _UndefinedType:
    """Sentinel for the absence of a value."""

    def __bool__(self) -> bool:  # falsy like its JavaScript namesake
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_undefined, ())


# Singleton instance
UNDEFINED = _UndefinedType()


@dataclass(frozen=True, slots=True)
class Lookup:
    """Outcome of walking a dotted path into a value."""

    found: bool
    value: Any = UNDEFINED


NOT_FOUND = Lookup(found=False)
