#!/usr/bin/env python
"""warccount - count the records of a given WARC-Type"""

import sys

import click

from ._cli import log_level_option, setup_logging
from .warc import WarcRecord, open_record_stream


def count_records(stream, warc_type: str, name: str = "-") -> tuple[int, bool]:
    """Count records whose WARC-Type equals warc_type.

    Returns the count and whether the stream was read without errors. On a
    framing error the records before it are still counted.
    """
    count = 0
    for _offset, record, error in stream.read_records(limit=None):
        if error:
            print(f"warc errors at {name}: {error}", file=sys.stderr)
            return count, False
        # header names are case insensitive
        if record.type == warc_type:
            count += 1
    return count, True


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-t",
    "--type",
    "warc_type",
    help="WARC-Type to count",
    default=WarcRecord.RESPONSE,
    show_default=True,
)
@log_level_option
@click.argument("warc_files", nargs=-1, type=click.Path(exists=True, dir_okay=False))
def main(warc_type: str, log_level: str, warc_files: tuple[str, ...]) -> None:
    """Count WARC records by type, reading standard input if no files are given."""
    setup_logging(log_level)

    total = 0
    correct = True
    if not warc_files:
        # stdin belongs to the caller; it is left open
        stream = open_record_stream(file_handle=sys.stdin.buffer, gzip="auto")
        total, correct = count_records(stream, warc_type)
    else:
        for name in warc_files:
            with open_record_stream(name, gzip="auto") as stream:
                count, ok = count_records(stream, warc_type, name)
            total += count
            correct = correct and ok

    print(f"# {warc_type} records: {total}")
    sys.exit(0 if correct else 1)


def run() -> None:
    """Entry point for the command-line interface."""
    main()


if __name__ == "__main__":
    run()
