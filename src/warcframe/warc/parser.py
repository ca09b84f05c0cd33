"""Read one WARC record from a buffered byte stream.

Record grammar per WARC 1.1 Section 4:

    version CRLF *named-field CRLF block CRLF CRLF

https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/#file-and-record-model

A bare LF is accepted in place of CRLF in the version line and the header
block. The four bytes after the block must be exactly CR LF CR LF.
"""

import re
import sys
import zlib

from warcframe.warc.casekey import CaseKey
from warcframe.warc.errors import (
    INVALID_CONTENT_LENGTH,
    INVALID_HEADER,
    MISSING_CONTENT_LENGTH,
    MISSING_TRAILER,
    UNKNOWN_VERSION,
    EndOfStream,
    MalformedRecord,
    WarcIOError,
)
from warcframe.warc.record import WarcRecord

VERSION_PREFIX = "WARC/1."
RECORD_TRAILER = b"\r\n\r\n"

# ASCII only: other Unicode whitespace in values is data.
WHITESPACE = " \t\r\n"

CONTENT_LENGTH_KEY = CaseKey(WarcRecord.CONTENT_LENGTH)  # pylint: disable-msg=E1101
length_rx = re.compile(r"\+?[0-9]+", flags=re.ASCII)

# Failures a byte source may raise; GzipFile adds EOFError and zlib.error to OSError.
SOURCE_ERRORS = (OSError, EOFError, zlib.error)

CHUNK_SIZE = 8192  # the size to read in, make this bigger things go faster.


def parse_record(stream):
    """Parse the next WARC record from stream.

    The stream must be a buffered binary file-like object offering
    readline() and read(n). On success the stream is left just past the
    record's trailing CRLF CRLF. After an error its position is undefined
    and it should not be read from again.

    Args:
        stream: Buffered binary file-like object

    Returns:
        WarcRecord: The parsed record

    Raises:
        EndOfStream: The stream held no more bytes at the record boundary
        MalformedRecord: The bytes do not follow the record grammar
        WarcIOError: The stream failed or ended inside the record
    """
    line = _readline(stream)
    if not line:
        raise EndOfStream()

    version = _decode(line).rstrip(WHITESPACE)
    if not version.startswith(VERSION_PREFIX):
        raise MalformedRecord(UNKNOWN_VERSION)

    header = _parse_header(stream)

    content_length = header.get(CONTENT_LENGTH_KEY)
    if content_length is None:
        raise MalformedRecord(MISSING_CONTENT_LENGTH)
    if not length_rx.fullmatch(content_length) or int(content_length) > sys.maxsize:
        raise MalformedRecord(INVALID_CONTENT_LENGTH)

    content = _read_exact(stream, int(content_length))

    if _read_exact(stream, len(RECORD_TRAILER)) != RECORD_TRAILER:
        raise MalformedRecord(MISSING_TRAILER)

    return WarcRecord(version, header, content)


def _parse_header(stream):
    """Read named fields up to and including the blank line ending the block."""
    header = {}
    while True:
        line = _readline(stream)
        if line in (b"\r\n", b"\n"):
            break

        # TODO: join continuation lines (leading whitespace) onto the previous value
        name, colon, value = _decode(line).rstrip(WHITESPACE).partition(":")
        if not colon:
            raise MalformedRecord(INVALID_HEADER)

        header[CaseKey(name.rstrip(WHITESPACE))] = value.strip(WHITESPACE)

    return header


def _readline(stream):
    try:
        return stream.readline()
    except SOURCE_ERRORS as exc:
        raise WarcIOError(exc) from exc


def _read_exact(stream, count):
    """Read exactly count bytes, or raise WarcIOError on a short read."""
    chunks = []
    remaining = count
    while remaining > 0:
        try:
            buf = stream.read(min(remaining, CHUNK_SIZE))
        except SOURCE_ERRORS as exc:
            raise WarcIOError(exc) from exc
        if not buf:
            short = EOFError(f"expected {count} bytes but only read {count - remaining}")
            raise WarcIOError(short) from short
        chunks.append(buf)
        remaining -= len(buf)
    return b"".join(chunks)


def _decode(line):
    try:
        return line.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise WarcIOError(exc) from exc
