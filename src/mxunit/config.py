"""Configuration utilities for MXUNIT.

This module centralizes the environment variables and defaults that select and
style the default reporter.

Environment:
    MXUNIT_REPORTER: Name of the default reporter (``rich`` or ``memory``).
    MXUNIT_STYLES: ``UNIT=STYLE`` pairs separated by commas or semicolons,
        e.g. ``"suite=bold magenta; failure=bold red"``. Styles use Rich
        style syntax, so they may themselves contain spaces.
"""

import os
import re

from rich.errors import StyleSyntaxError
from rich.style import Style

REPORTER_ENV_VAR = "MXUNIT_REPORTER"  # pragma: no mutate
STYLES_ENV_VAR = "MXUNIT_STYLES"  # pragma: no mutate

DEFAULT_REPORTER = "rich"

DEFAULT_STYLES: dict[str, str] = {
    "suite": "bold underline",
    "suite_results": "bold",
    "test": "grey62",
    "test_results": "default",
    "failure": "red",
    "success": "green",
    "todo": "dark_orange",
}


class UnknownReporterError(Exception):
    """Raised when a reporter name does not match any known reporter."""

    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(
            f"Unknown reporter {name!r} (expected one of: {', '.join(known)})"
        )
        self.name = name
        self.known = known


class InvalidStyleError(ValueError):
    """Raised when a style override is malformed."""


def get_reporter_name() -> str:
    """Get the name of the default reporter from the environment.

    Returns:
        The lower-cased value of `MXUNIT_REPORTER`, or ``"rich"`` when unset.
    """
    return (os.environ.get(REPORTER_ENV_VAR) or DEFAULT_REPORTER).strip().lower()


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Split one or several strings on commas/semicolons, dropping empty items."""
    values = [value] if isinstance(value, str) else list(value)
    items: list[str] = []
    for v in values:
        items.extend(s.strip() for s in re.split(r"[,;]+", v) if s.strip())
    return items


def parse_styles(value: str | list[str] | tuple[str, ...]) -> dict[str, str]:
    """Parse ``UNIT=STYLE`` overrides and merge them over `DEFAULT_STYLES`.

    Args:
        value: A single string holding one or more pairs, or a sequence of them.

    Returns:
        dict[str, str]: Mapping of every report unit to its Rich style.

    Raises:
        InvalidStyleError: If an item is not ``UNIT=STYLE``, names an unknown
            unit, or carries a style Rich cannot parse.
    """
    styles = dict(DEFAULT_STYLES)
    for item in _normalize_items(value):
        try:
            unit, style = item.split("=", 1)
        except ValueError as e:
            raise InvalidStyleError(f"Expected UNIT=STYLE, got {item!r}") from e
        unit = unit.strip().lower()
        if unit not in DEFAULT_STYLES:
            raise InvalidStyleError(
                f"Unknown report unit {unit!r} (expected one of: "
                f"{', '.join(DEFAULT_STYLES)})"
            )
        try:
            Style.parse(style.strip())
        except StyleSyntaxError as e:
            raise InvalidStyleError(f"Invalid style for {unit!r}: {style!r}") from e
        styles[unit] = style.strip()
    return styles


def get_styles() -> dict[str, str]:
    """Get the report styles, applying any `MXUNIT_STYLES` overrides."""
    return parse_styles(os.environ.get(STYLES_ENV_VAR, ""))
