"""Reporter interface: renders the result model of a finished suite."""

import abc
from collections.abc import Sequence

from mxunit.domain.results import ClosedTest


class Reporter(abc.ABC):
    """Abstract base class for suite report renderers."""

    @abc.abstractmethod
    def render(
        self, title: str, tests: Sequence[ClosedTest], todos: Sequence[str]
    ) -> None:
        """Render one finished suite.

        Args:
            title: Title of the suite.
            tests: Closed tests in the order they ran.
            todos: Titles registered with `test.todo`, in order.

        Note:
            Implementations must accept empty `tests` and `todos` and must not
            mutate anything they receive.
        """

    @abc.abstractmethod
    def clear(self) -> None:
        """Discard previously rendered output (used by `describe.clear`)."""
