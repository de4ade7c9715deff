"""Fixtures for end-to-end tests of the ``mxunit`` command."""

import logging
from logging.handlers import MemoryHandler
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

# pylint: disable=redefined-outer-name, unused-argument

E2E_ROOT = Path(__file__).parents[2].resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the `e2e` mark to unmarked items below `tests/e2e/`."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents and not item.get_closest_marker("e2e"):
            item.add_marker(pytest.mark.e2e)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo the logging configuration the CLI applies to the process.

    The command installs root handlers and per-logger levels (``-L``); both
    would otherwise leak into the tests that run afterwards.
    """
    root = logging.getLogger()
    level = root.level
    levels = {
        name: logger.level
        for name, logger in logging.root.manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
    }
    yield
    for handler in list(root.handlers):
        if isinstance(handler, (RichHandler, MemoryHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    for name, logger in logging.root.manager.loggerDict.items():
        if isinstance(logger, logging.Logger):
            logger.setLevel(levels.get(name, logging.NOTSET))


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield
