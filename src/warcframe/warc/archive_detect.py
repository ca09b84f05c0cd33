"""Archive compression detection.

Compressed input is unwrapped before it reaches the record parser; this
module only decides whether a handle needs unwrapping.
"""

GZIP_MAGIC = b"\x1f\x8b"


def is_gzip_file(file_handle):
    """Check if a file handle points to a gzip-compressed file.

    Detects gzip files by reading the magic number (0x1f 0x8b).
    The file position is restored after checking.

    Args:
        file_handle: Seekable binary file-like object to check

    Returns:
        bool: True if the file appears to be gzip-compressed
    """
    signature = file_handle.read(2)
    file_handle.seek(-len(signature), 1)
    return signature == GZIP_MAGIC


def is_seekable(file_handle):
    """Return True when file_handle can be rewound after sniffing."""
    seekable = getattr(file_handle, "seekable", None)
    return bool(seekable and seekable())
