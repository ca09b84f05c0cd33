"""Streaming WARC record reader.

WARC Format Specification References:
- WARC 1.1 Annotated (primary): https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/
"""

from .casekey import CaseKey
from .errors import EndOfStream, MalformedRecord, WarcError, WarcIOError
from .parser import parse_record
from .record import WarcRecord
from .stream import RecordStream, open_record_stream


__all__ = [
    "CaseKey",
    "EndOfStream",
    "MalformedRecord",
    "RecordStream",
    "WarcError",
    "WarcIOError",
    "WarcRecord",
    "open_record_stream",
    "parse_record",
]
