"""warcframe - streaming WARC record reader and command line tools."""

__version__ = "1.0.0"
