#!/usr/bin/env python
"""warcdump - dump warcs in a slightly more humane format"""

import sys

import click

from ._cli import log_level_option, setup_logging
from .warc import open_record_stream


def dump_archive(stream, name: str) -> bool:
    """Dump archive records to stdout. Returns False if framing failed."""
    for offset, record, error in stream.read_records(limit=None):
        location = f"{name}:{offset if offset is not None else '-'}"
        if record:
            print(f"archive record at {location}")
            record.dump(content=True)
        else:
            print(f"warc errors at {location}")
            print("\t", error)
            return False
    return True


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@log_level_option
@click.argument("warc_files", nargs=-1, type=click.Path(exists=True, dir_okay=False))
def main(log_level: str, warc_files: tuple[str, ...]) -> None:
    """Dump WARC files in a human-readable format."""
    setup_logging(log_level)

    correct = True
    if len(warc_files) < 1:
        # stdin belongs to the caller; it is left open
        stream = open_record_stream(file_handle=sys.stdin.buffer, gzip="auto")
        correct = dump_archive(stream, name="-")
    else:
        for name in warc_files:
            with open_record_stream(name, gzip="auto") as stream:
                correct = dump_archive(stream, name) and correct

    sys.exit(0 if correct else 1)


def run() -> None:
    """Entry point for the command-line interface."""
    main()


if __name__ == "__main__":
    run()
