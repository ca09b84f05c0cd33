#!/usr/bin/env python
"""warcvalid - check that every record of a warc can be framed"""

import sys

import click

from ._cli import log_level_option, setup_logging
from .warc import open_record_stream


def validate_archive(stream, name: str) -> bool:
    """Read every record of stream, reporting the first framing error."""
    for offset, _record, error in stream.read_records(limit=None):
        if error:
            print(f"warc errors at {name}:{offset if offset is not None else '-'}", file=sys.stderr)
            print(f"\t{type(error).__name__}: {error}", file=sys.stderr)
            return False
    return True


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@log_level_option
@click.argument(
    "warc_files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False)
)
def main(log_level: str, warc_files: tuple[str, ...]) -> None:
    """Validate WARC files."""
    setup_logging(log_level)

    correct = True
    for name in warc_files:
        with open_record_stream(name, gzip="auto") as stream:
            if not validate_archive(stream, name):
                correct = False

    sys.exit(0 if correct else 1)


def run() -> None:
    """Entry point for the command-line interface."""
    main()


if __name__ == "__main__":
    run()
