"""Errors raised while framing WARC records.

A WarcError is one of three kinds:

- MalformedRecord: the bytes broke the record grammar. The message is one
  of the fixed strings below.
- WarcIOError: the byte source failed or ended in the middle of a record.
  The original exception is kept in ``cause``.
- EndOfStream: the source was exhausted exactly at a record boundary. Only
  the parser raises it; RecordStream turns it into the end of iteration.
"""

UNKNOWN_VERSION = "Unknown WARC version"
INVALID_HEADER = "Invalid header field"
MISSING_CONTENT_LENGTH = "Content-Length is missing"
INVALID_CONTENT_LENGTH = "Content-Length is not a number"
MISSING_TRAILER = "No double linefeed after record content"


class WarcError(Exception):
    """Base class for record framing errors."""


class MalformedRecord(WarcError):
    """The stream does not follow the WARC record grammar."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class WarcIOError(WarcError):
    """The underlying byte source failed, or a read came up short."""

    def __init__(self, cause):
        super().__init__(str(cause))
        self.cause = cause

    def __str__(self):
        return f"{type(self.cause).__name__}: {self.cause}"


class EndOfStream(WarcError):
    """No bytes were left at the start of a record."""
