"""Helpers for parsing logger-level CLI options.

Parses options of the form NAME=LEVEL, given repeatedly or as a single
comma/space-separated string, into a mapping of logger names to numeric
logging levels.
"""

import logging
import re

import click

DEFAULT_LOGGER_LEVELS = {"click_extra": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten the option value(s) into non-empty items split on commas/whitespace."""
    values = [value] if isinstance(value, str) else value
    return [s for v in values for s in re.split(r"[,\s]+", v) if s]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Overrides are merged over `DEFAULT_LOGGER_LEVELS`.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is not a
            standard level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    levels = dict(DEFAULT_LOGGER_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if level is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = level
    return levels
