"""MXUNIT

A minimal unit-testing library: group tests with `describe`/`test`, make
assertions with `expect` and its matchers, and get a pass/fail report per
suite. Suites run synchronously in-process; there is no discovery and no
runner, the host simply calls `describe`.
"""

__version__ = "1.0.0"

# pylint: disable=wrong-import-position
from mxunit.domain.errors import (
    NestedTestError,
    NoActiveSuiteError,
    NoActiveTestError,
    ReportAfterCloseError,
    SuiteAlreadyRunError,
    UsageError,
)
from mxunit.domain.expectation import Expectation
from mxunit.domain.results import ClosedTest, ExpectationResult, SuiteReport
from mxunit.domain.value_objects import UNDEFINED
from mxunit.entrypoints.api import (
    describe,
    expect,
    get_reporter,
    set_reporter,
    test,
    version,
)

__all__ = [
    "__version__",
    "describe",
    "test",
    "expect",
    "version",
    "get_reporter",
    "set_reporter",
    "UNDEFINED",
    "Expectation",
    "ExpectationResult",
    "ClosedTest",
    "SuiteReport",
    "UsageError",
    "NoActiveSuiteError",
    "NoActiveTestError",
    "NestedTestError",
    "ReportAfterCloseError",
    "SuiteAlreadyRunError",
]
