"""Structural comparison predicates used by the matchers.

All functions here are pure. Values fall into two groups:

* *primitives* (``str``, ``bytes``, numbers, ``bool``, ``None``, ``UNDEFINED``)
  and *opaque* objects, which are compared with `identical`;
* *keyed containers*, which expose own keys: mappings (their keys), arrays
  (non-string sequences, keyed by index) and plain instances (dataclass fields
  or ``__dict__`` attributes).

Note:
    `shallow_struct_equal` is deliberately one level deep. Nested containers
    are compared by reference, so ``{"a": {"x": 1}}`` does not equal another
    ``{"a": {"x": 1}}`` unless both share the same inner dict.
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import fields, is_dataclass
from types import NoneType
from typing import Any, Literal

from .value_objects import NOT_FOUND, UNDEFINED, Lookup, _UndefinedType

type ContainerKind = Literal["mapping", "array", "object"]

_PRIMITIVES = (str, bytes, int, float, complex, bool, NoneType, _UndefinedType)
_REALS = (int, float)
_STRINGS = (str, bytes, bytearray)


def is_array(value: Any) -> bool:
    """Return True for non-string sequences (lists, tuples, ranges, ...)."""
    return isinstance(value, Sequence) and not isinstance(value, _STRINGS)


def identical(a: Any, b: Any) -> bool:
    """Value identity: same primitive value or same object.

    Unlike ``==``, ``NaN`` is identical to itself, ``0.0`` and ``-0.0`` are
    distinct, and ``True`` is not identical to ``1``. Equal ``int`` and
    ``float`` values are identical.
    """
    if isinstance(a, _PRIMITIVES) and isinstance(b, _PRIMITIVES):
        return _same_primitive(a, b)
    return a is b


def _same_primitive(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if isinstance(a, _REALS) and isinstance(b, _REALS):
        if _is_nan(a) and _is_nan(b):
            return True
        if a == 0 and b == 0:
            return math.copysign(1.0, a) == math.copysign(1.0, b)
        return a == b
    return type(a) is type(b) and a == b


def _is_nan(value: int | float) -> bool:
    return isinstance(value, float) and math.isnan(value)


def container_kind(value: Any) -> ContainerKind | None:
    """Classify *value* as a keyed container, or None when it is not one.

    Callables, classes, primitives and objects without inspectable attributes
    (sets, datetimes, slotted instances that are not dataclasses) are not
    keyed containers.
    """
    if isinstance(value, _PRIMITIVES):
        return None
    if isinstance(value, Mapping):
        return "mapping"
    if is_array(value):
        return "array"
    if callable(value):
        return None
    if is_dataclass(value) or isinstance(getattr(value, "__dict__", None), dict):
        return "object"
    return None


def own_items(value: Any) -> dict[Any, Any] | None:
    """Return the own key/value pairs of a keyed container, or None."""
    match container_kind(value):
        case "mapping":
            return dict(value)
        case "array":
            return dict(enumerate(value))
        case "object" if is_dataclass(value):
            return {field.name: getattr(value, field.name) for field in fields(value)}
        case "object":
            return dict(vars(value))
    return None


def shallow_struct_equal(a: Any, b: Any) -> bool:
    """One-level structural equality.

    Non-containers are compared with `identical`. Containers of the same kind
    are equal when they have exactly the same own keys and every pair of
    values is `identical`.
    """
    kind = container_kind(a)
    if kind != container_kind(b):
        return False
    if kind is None:
        return identical(a, b)

    items_a, items_b = own_items(a), own_items(b)
    if items_a is None or items_b is None:  # pragma: no cover
        return False
    if items_a.keys() != items_b.keys():
        return False
    return all(identical(value, items_b[key]) for key, value in items_a.items())


def array_subset_match(received: Any, expected: Any) -> bool:
    """Check that *received* matches *expected* at every index *expected* has.

    Nested arrays in *expected* recurse; other elements use
    `shallow_struct_equal`. Elements of *received* beyond the length of
    *expected* are ignored, while missing ones read as ``UNDEFINED``.
    """
    if not is_array(received) or not is_array(expected):
        return False

    for index, wanted in enumerate(expected):
        actual = received[index] if index < len(received) else UNDEFINED
        if is_array(wanted):
            if not array_subset_match(actual, wanted):
                return False
        elif not shallow_struct_equal(actual, wanted):
            return False
    return True


def object_subset_match(received: Any, expected: Any) -> bool:
    """Check that every own key of *expected* matches in *received*.

    Array values use `array_subset_match`, container values recurse and
    everything else uses `identical`. Extra keys in *received* are ignored.
    """
    wanted_items = own_items(expected)
    if wanted_items is None or container_kind(received) is None:
        return False

    for key, wanted in wanted_items.items():
        actual = _read_key(received, key)
        if is_array(wanted):
            matched = array_subset_match(actual, wanted)
        elif container_kind(wanted) is not None:
            matched = object_subset_match(actual, wanted)
        else:
            matched = identical(actual, wanted)
        if not matched:
            return False
    return True


def _read_key(container: Any, key: Any) -> Any:
    match container_kind(container):
        case "mapping":
            return container.get(key, UNDEFINED)
        case "array":
            if isinstance(key, int) and 0 <= key < len(container):
                return container[key]
        case "object" if isinstance(key, str):
            return getattr(container, key, UNDEFINED)
    return UNDEFINED


def get_nested_value(source: Any, path: str) -> Lookup:
    """Walk a dotted *path* (e.g. ``"config.servers.0.host"``) into *source*.

    Each segment is looked up as a mapping key (falling back to an integer key
    for decimal segments), an array index, or an instance attribute.

    Returns:
        Lookup: ``found=False`` as soon as a segment is missing or an
        intermediate value is not a keyed container.
    """
    value = source
    for segment in path.split("."):
        match container_kind(value):
            case "mapping":
                if segment in value:
                    value = value[segment]
                elif segment.isdecimal() and int(segment) in value:
                    value = value[int(segment)]
                else:
                    return NOT_FOUND
            case "array":
                if not segment.isdecimal() or int(segment) >= len(value):
                    return NOT_FOUND
                value = value[int(segment)]
            case "object":
                if not hasattr(value, segment):
                    return NOT_FOUND
                value = getattr(value, segment)
            case _:
                return NOT_FOUND
    return Lookup(found=True, value=value)
