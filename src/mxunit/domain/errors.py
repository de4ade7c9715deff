"""Domain-layer error definitions.

Only usage-contract violations are exceptions. Failed assertions are recorded
as results and never raised.
"""

# ============================================================================
#                           Usage-contract violations
# ============================================================================


class UsageError(Exception):
    """Base class for misuse of the describe/test/expect API."""


class NoActiveSuiteError(UsageError):
    """Raised when `test()` or `expect()` is called outside of any suite."""

    def __init__(self, function: str, title: str | None = None) -> None:
        if title is None:
            message = f"Function <{function}> called outside of suite"
        else:
            message = f"Function <{function}> for '{title}' called outside of suite"
        super().__init__(message)
        self.function = function
        self.title = title


class NoActiveTestError(UsageError):
    """Raised when `expect()` is called inside a suite but outside of a test."""

    def __init__(self, suite_title: str) -> None:
        super().__init__(
            f"Function <expect> called outside of test in suite '{suite_title}'"
        )
        self.suite_title = suite_title


class NestedTestError(UsageError):
    """Raised when `test()` is called while another test body is running."""

    def __init__(self, title: str, running_title: str) -> None:
        super().__init__(
            f"Function <test> for '{title}' called inside test '{running_title}'"
        )
        self.title = title
        self.running_title = running_title


# ============================================================================
#                           Lifecycle errors
# ============================================================================


class ReportAfterCloseError(UsageError):
    """Raised when an expectation reports into a test that is already closed."""

    def __init__(self, test_title: str, index: int) -> None:
        super().__init__(
            f"Expectation [{index}] reported after test '{test_title}' was closed"
        )
        self.test_title = test_title
        self.index = index


class SuiteAlreadyRunError(UsageError):
    """Raised when a suite is asked to run a second time."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Suite '{title}' has already been run")
        self.title = title
