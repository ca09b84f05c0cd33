"""Case-insensitive header names.

WARC field names are case-insensitive, but producers write them in mixed
case (``WARC-Type``, ``Content-Length``). A CaseKey folds ASCII letters to
lowercase once, when it is built, so lookups compare plain strings.

See WARC 1.1 Section 4:
https://iipc.github.io/warc-specifications/specifications/warc-format/warc-1.1-annotated/#file-and-record-model
"""

import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class CaseKey:
    """A header name folded to ASCII lowercase.

    Only ASCII letters are folded; any other character is kept as is.
    A CaseKey never compares equal to a plain str, so a header mapping
    keyed by CaseKey has to be queried with a CaseKey.

    Example:
        >>> CaseKey("WARC-Type") == CaseKey("warc-type")
        True
        >>> str(CaseKey("Content-Length"))
        'content-length'
    """

    __slots__ = ("_folded",)

    def __init__(self, name):
        if isinstance(name, CaseKey):
            name = name._folded
        object.__setattr__(self, "_folded", name.translate(_ASCII_LOWER))

    def __setattr__(self, key, value):
        raise AttributeError("CaseKey is immutable")

    def __delattr__(self, key):
        raise AttributeError("CaseKey is immutable")

    def __eq__(self, other):
        if not isinstance(other, CaseKey):
            return NotImplemented
        return self._folded == other._folded

    def __hash__(self):
        return hash(self._folded)

    def __str__(self):
        return self._folded

    def __repr__(self):
        return f"CaseKey({self._folded!r})"

    def to_string(self):
        """Return the folded name as a plain str."""
        return self._folded
