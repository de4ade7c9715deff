"""Build the default reporter from configuration."""

from collections.abc import Callable, Mapping

from mxunit import config
from mxunit.adapters.reporters import MemoryReporter, RichReporter
from mxunit.interfaces.reporter import Reporter

REPORTER_FACTORIES: dict[str, Callable[[Mapping[str, str]], Reporter]] = {
    "rich": lambda styles: RichReporter(styles=styles),
    "memory": lambda styles: MemoryReporter(),
}


def build_reporter(
    name: str | None = None, styles: Mapping[str, str] | None = None
) -> Reporter:
    """Build a reporter by name.

    Args:
        name: Reporter name; defaults to `config.get_reporter_name()`.
        styles: Report styles; defaults to `config.get_styles()`.

    Returns:
        Reporter: A new reporter instance.

    Raises:
        UnknownReporterError: If *name* does not match a known reporter.
        InvalidStyleError: If the configured style overrides are malformed.
    """
    name = (name or config.get_reporter_name()).lower()
    if (factory := REPORTER_FACTORIES.get(name)) is None:
        raise config.UnknownReporterError(name, sorted(REPORTER_FACTORIES))
    return factory(styles if styles is not None else config.get_styles())
