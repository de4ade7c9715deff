"""Console reporter rendered with Rich.

Output for a suite looks like::

    my beverage
    is delicious
    ├── Tests: 1 passed, 1 total
    is not sour
    ├── Tests: 0 passed, 1 total
    └── to_be_falsy[1]: True is not falsy
    Tests: 1 passed, 2 total
    ToDo:
    └── tastes like grapefruit
"""

from collections.abc import Mapping, Sequence

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from mxunit.config import DEFAULT_STYLES
from mxunit.domain.results import ClosedTest
from mxunit.interfaces.reporter import Reporter


class RichReporter(Reporter):
    """Render suites to a Rich console.

    Args:
        console: Target console; defaults to a new stdout console.
        styles: Style overrides per report unit (see `mxunit.config.DEFAULT_STYLES`).
    """

    def __init__(
        self, console: Console | None = None, styles: Mapping[str, str] | None = None
    ) -> None:
        self.console = console or Console()
        self.styles = {**DEFAULT_STYLES, **(styles or {})}

    def render(
        self, title: str, tests: Sequence[ClosedTest], todos: Sequence[str]
    ) -> None:
        s = self.styles
        success = sum(test.success_count for test in tests)
        total = sum(test.total_count for test in tests)

        self.console.print()
        self.console.print(Text(title, style=s["suite"]))

        for test in tests:
            test_style = s["test"] if test.passed else f"{s['test']} {s['failure']}"
            tree = Tree(Text(test.title, style=test_style))
            tree.add(
                self._counts(test.success_count, test.total_count, s["test_results"])
            )
            for failure in test.failures:
                tree.add(
                    Text(
                        f"{failure.matcher_name}[{failure.index}]: {failure.message}",
                        style=s["failure"],
                    )
                )
            self.console.print(tree)

        self.console.print(self._counts(success, total, s["suite_results"]))

        if todos:
            todo_tree = Tree(Text("ToDo:", style=s["todo"]))
            for todo in todos:
                todo_tree.add(Text(todo, style=s["todo"]))
            self.console.print(todo_tree)

    def clear(self) -> None:
        self.console.clear()

    def _counts(self, success: int, total: int, base: str) -> Text:
        """``Tests: N passed, M total`` with N highlighted by outcome."""
        outcome = self.styles["success"] if success == total else self.styles["failure"]
        return Text.assemble(
            ("Tests: ", base),
            (f"{success} passed", f"{base} {outcome}"),
            (f", {total} total", base),
        )
