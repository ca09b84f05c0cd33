"""Iterate over the records of an uncompressed or gzipped WARC stream.

WARC Format Specification References:
- WARC 1.1 Annotated (primary): https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/
- Compression: See Annex D "Compression recommendations"
  https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/#annex-d-informative-compression-recommendations
"""

import gzip as gzip_module
import logging

from warcframe.warc.archive_detect import is_gzip_file, is_seekable
from warcframe.warc.errors import EndOfStream, WarcError
from warcframe.warc.parser import parse_record

logger = logging.getLogger(__name__)


def open_record_stream(filename=None, file_handle=None, gzip="auto"):
    """Open an archive and return a RecordStream for reading its records.

    Args:
        filename: Path to the archive file
        file_handle: Optional binary file-like object (takes precedence over filename)
        gzip: "auto" (detect by suffix or magic bytes), True (always
              decompress), or None/False (read as is)

    Returns:
        RecordStream: Stream of the archive's records

    Example:
        >>> with open_record_stream("archive.warc.gz") as stream:
        ...     for record in stream:
        ...         print(record.type)
    """
    if file_handle is None:
        file_handle = open(filename, mode="rb")

    if gzip == "auto":
        if filename and filename.endswith(".gz"):
            gzip = True
        elif is_seekable(file_handle):
            gzip = is_gzip_file(file_handle)
        else:
            # stdin and pipes cannot be rewound after sniffing
            gzip = False

    if gzip:
        # Each record may be its own gzip member (Annex D.2) or the whole
        # file one member; GzipFile reads both as one continuous stream.
        return RecordStream(gzip_module.GzipFile(fileobj=file_handle), raw_fh=file_handle)
    return RecordStream(file_handle)


class RecordStream:
    """An iterator over the WARC records of a buffered byte stream.

    Iterating yields WarcRecord objects in the order they appear. When a
    record cannot be framed, the WarcError is raised once and the stream is
    no longer healthy: every later next() ends the iteration, because the
    read position inside a broken record cannot be trusted. A stream that
    ends exactly at a record boundary simply stops.

    The stream owns its file handle and is not safe to share between
    threads.
    """

    def __init__(self, file_handle, raw_fh=None):
        self.fh = file_handle
        self.raw_fh = raw_fh
        self.healthy = True

    def __iter__(self):
        return self

    def __next__(self):
        if not self.healthy:
            raise StopIteration

        try:
            return parse_record(self.fh)
        except EndOfStream:
            logger.debug("end of stream at record boundary")
            raise StopIteration from None
        except WarcError as e:
            self.healthy = False
            logger.warning(f"stopped reading records: {e}")
            raise

    def read_records(self, limit=None):
        """Yield a tuple of (offset, record, error) for each record.

        Exactly one of record and error is set. After an error has been
        yielded no more tuples follow. Offset is the position of the
        record's first byte, or None if the stream cannot report it.

        Args:
            limit: Maximum number of tuples to yield (None for no limit)
        """
        nrecords = 0
        while limit is None or nrecords < limit:
            offset = self.tell()
            try:
                record = next(self)
            except StopIteration:
                break
            except WarcError as e:
                yield (offset, None, e)
                break
            nrecords += 1
            yield (offset, record, None)

    def tell(self):
        """Current position in the (decompressed) stream, or None."""
        try:
            return self.fh.tell()
        except (AttributeError, OSError):
            return None

    def close(self):
        """Close the underlying file handle."""
        self.fh.close()
        if self.raw_fh is not None:
            self.raw_fh.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
