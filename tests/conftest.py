"""Shared fixtures for building WARC bytes."""

import pytest

WARCINFO = (
    b"WARC/1.1\r\n"
    b"WARC-Type: warcinfo\r\n"
    b"Content-Length: 4\r\n"
    b"\r\n"
    b"test\r\n\r\n"
)

RESPONSE = (
    b"WARC/1.1\r\n"
    b"WARC-Type: response\r\n"
    b"Content-Length: 3\r\n"
    b"\r\n"
    b"abc\r\n\r\n"
)


def build_record(headers, content=b"", version=b"WARC/1.1", content_length=True):
    """Serialize a record the way a well-behaved WARC writer would."""
    lines = [version]
    for name, value in headers:
        lines.append(name + b": " + value)
    if content_length:
        lines.append(b"Content-Length: " + str(len(content)).encode("ascii"))
    return b"\r\n".join(lines) + b"\r\n\r\n" + content + b"\r\n\r\n"


@pytest.fixture
def warcinfo_bytes():
    return WARCINFO


@pytest.fixture
def response_bytes():
    return RESPONSE


@pytest.fixture
def make_record():
    return build_record


@pytest.fixture
def sample_archive():
    """A warcinfo, request and response record, as a crawler writes them."""
    return b"".join(
        [
            build_record(
                [
                    (b"WARC-Type", b"warcinfo"),
                    (b"WARC-Date", b"2006-09-19T17:20:14Z"),
                    (b"WARC-Record-ID", b"<urn:uuid:d7ae5c10-e6b3-4d27-967d-34780c58ba39>"),
                    (b"Content-Type", b"application/warc-fields"),
                ],
                b"software: warcframe test\r\nformat: WARC File Format 1.1\r\n",
            ),
            build_record(
                [
                    (b"WARC-Type", b"request"),
                    (b"WARC-Target-URI", b"http://example.com/page1"),
                    (b"Content-Type", b"application/http;msgtype=request"),
                ],
                b"GET /page1 HTTP/1.1\r\nHost: example.com\r\n\r\n",
            ),
            build_record(
                [
                    (b"WARC-Type", b"response"),
                    (b"WARC-Target-URI", b"http://example.com/page1"),
                    (b"Content-Type", b"application/http;msgtype=response"),
                ],
                b"HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n<html>Hello World</html>",
            ),
        ]
    )
