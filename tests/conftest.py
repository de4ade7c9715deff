"""Global pytest fixtures for MXUNIT."""

from collections.abc import Iterator

import pytest

from mxunit import set_reporter
from mxunit.adapters.reporters import MemoryReporter
from mxunit.config import REPORTER_ENV_VAR, STYLES_ENV_VAR


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's MXUNIT_* environment out of every test."""
    monkeypatch.delenv(REPORTER_ENV_VAR, raising=False)
    monkeypatch.delenv(STYLES_ENV_VAR, raising=False)


@pytest.fixture
def memory_reporter() -> Iterator[MemoryReporter]:
    """Install a `MemoryReporter` as the default reporter for one test.

    Example:
        ```py
        def test_something(memory_reporter):
            describe("suite", body)
            assert memory_reporter.last.title == "suite"
        ```
    """
    reporter = MemoryReporter()
    previous = set_reporter(reporter)
    try:
        yield reporter
    finally:
        set_reporter(previous)
