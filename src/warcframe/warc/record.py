"""WARC records as handed out by the parser.

WARC Format Specification References:
- WARC 1.1 Annotated (primary): https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/
- File and record model: https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/#file-and-record-model
"""

import re
import sys

from warcframe.warc.casekey import CaseKey

strip = re.compile(rb"[^\w\t \|\\\/]")


def add_headers(**kwargs):
    """Decorator helper for defining header name constants on a record class.

    Sets one class attribute per keyword.

    Args:
        **kwargs: Header name to constant value mappings (e.g., TYPE="WARC-Type")

    Returns:
        Decorator function that adds header constants to a class
    """

    def _add_headers(cls):
        for k, v in kwargs.items():
            setattr(cls, k, v)
        return cls

    return _add_headers


# WARC Named Fields - See WARC 1.1 Section 5 "Named fields"
# https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/#named-fields
@add_headers(
    DATE="WARC-Date",
    TYPE="WARC-Type",
    ID="WARC-Record-ID",
    CONTENT_LENGTH="Content-Length",
    CONTENT_TYPE="Content-Type",
    URL="WARC-Target-URI",
)
class WarcRecord:
    """A single framed WARC record.

    A record has the version line it was read with, a mapping of header
    fields and the raw content block. Header names are CaseKey instances;
    values are str with surrounding whitespace removed. When a name occurs
    more than once, the last value read is kept.

    The parser builds records and keeps no reference to them afterwards.
    """

    # pylint: disable-msg=E1101

    # WARC Record Types - See WARC 1.1 Section 6 "WARC Record Types"
    # https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/#warc-record-types
    WARCINFO = "warcinfo"
    RESPONSE = "response"
    RESOURCE = "resource"
    REQUEST = "request"
    METADATA = "metadata"
    REVISIT = "revisit"
    CONVERSION = "conversion"
    CONTINUATION = "continuation"

    def __init__(self, version, header=None, content=b""):
        self.version = version
        self.header = header if header is not None else {}
        self.content = content

    def __eq__(self, other):
        if not isinstance(other, WarcRecord):
            return NotImplemented
        return (self.version, self.header, self.content) == (
            other.version,
            other.header,
            other.content,
        )

    def __repr__(self):
        return (
            f"WarcRecord(version={self.version!r}, type={self.type!r}, "
            f"content_length={self.content_length})"
        )

    def get_header(self, name, default=None):
        """Returns the value of the header called name, case insensitively.

        Args:
            name: Header name, as str or CaseKey

        Returns:
            str or default: Header value if present
        """
        return self.header.get(CaseKey(name), default)

    @property
    def type(self):
        return self.get_header(self.TYPE)

    @property
    def id(self):
        return self.get_header(self.ID)

    @property
    def date(self):
        return self.get_header(self.DATE)

    @property
    def url(self):
        return self.get_header(self.URL)

    @property
    def content_type(self):
        return self.get_header(self.CONTENT_TYPE)

    @property
    def content_length(self):
        """Number of content bytes, equal to the Content-Length header."""
        return len(self.content)

    def dump(self, content=True, out=None):
        """Print the record in a slightly more humane format.

        Args:
            content: Also print a preview of the first 1024 content bytes
            out: Text stream to print to (default: sys.stdout)
        """
        out = out if out is not None else sys.stdout
        print(f"Version: {self.version}", file=out)
        print("Headers:", file=out)
        for h, v in self.header.items():
            print(f"\t{h}:{v}", file=out)
        if content and self.content:
            print("Content Headers:", file=out)
            print(f"\t{self.CONTENT_TYPE} : {self.content_type}", file=out)
            print(f"\t{self.CONTENT_LENGTH} : {self.content_length}", file=out)
            print("Content:", file=out)
            ln = min(1024, len(self.content))
            abbr_strp_content = strip.sub(
                lambda x: (f"\\x{ord(x.group()):0X}").encode("ascii"),
                self.content[:ln],
            )
            print("\t" + abbr_strp_content.decode("ascii", errors="replace"), file=out)
            print("\t...", file=out)
            print(file=out)
        else:
            print("Content: none", file=out)
            print(file=out)
            print(file=out)
