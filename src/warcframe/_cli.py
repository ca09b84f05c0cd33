"""Options shared by the command line tools."""

import logging

import click

LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]

log_level_option = click.option(
    "-L",
    "--log-level",
    "log_level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Log level",
    default="warning",
    show_default=True,
)


def setup_logging(log_level: str) -> None:
    """Send library log messages to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )
