"""sysfetch CLI - Main entry point."""

import logging

import click
from rich.console import Console

from sysfetch import __version__
from sysfetch.config import FetchConfig
from sysfetch.probe.report import SystemProbe
from sysfetch.render.banner import render_report

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def _setup_logging(level: str) -> None:
    """Send diagnostics to stderr so they never mix with the banner."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(console)


@click.command()
@click.version_option(version=__version__, prog_name="sysfetch")
def cli():
    """Show OS, kernel, CPU, memory, network and user details.

    Takes no arguments. Facts that cannot be determined are shown as
    placeholders ("Unknown", "N/A" or 0) and the exit status is always 0.
    """
    # Logging is not set up yet, so config warnings go to the last-resort handler
    config = FetchConfig.from_env()
    _setup_logging(config.log_level)

    report = SystemProbe.collect(config=config)
    render_report(report, Console(no_color=config.no_color))


if __name__ == "__main__":
    cli()
