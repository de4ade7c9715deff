"""``mxunit demo``: run the bundled demonstration suite.

The report is rendered on stdout by the selected reporter; a one-line summary
goes to **stderr**. The exit status does not depend on the results: this is a
showcase, not a test runner.
"""

import logging

import click

from mxunit import config
from mxunit.bootstrap import build_reporter
from mxunit.bootstrap.bootstrap import REPORTER_FACTORIES
from mxunit.demo import run_demo

from .helpers import success, warn

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--delay",
    type=click.FloatRange(min=0),
    default=0,
    show_default=True,
    help="Clear the output and run the suite after this many milliseconds.",
)
@click.option(
    "--reporter",
    "reporter_name",
    type=click.Choice(sorted(REPORTER_FACTORIES), case_sensitive=False),
    envvar=config.REPORTER_ENV_VAR,
    default=config.DEFAULT_REPORTER,
    show_default=True,
    show_envvar=True,
    help="Reporter used to render the suite.",
)
def demo(delay: float, reporter_name: str) -> None:
    """Run the demonstration suite covering every matcher."""
    try:
        reporter = build_reporter(reporter_name)
    except config.InvalidStyleError as e:
        raise click.ClickException(str(e)) from e

    logger.info("Running demo suite with the %s reporter", reporter_name)
    report = run_demo(reporter=reporter, delay=delay)

    summary = (
        f"Demo finished: {report.success_count} of {report.total_count} "
        f"expectations passed, {len(report.todos)} todo."
    )
    if report.passed:
        success(summary)
    else:
        warn(summary)
