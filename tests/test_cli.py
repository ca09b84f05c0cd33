"""Tests for the command line tools."""

import gzip
import io
import subprocess
import sys

import pytest
from click.testing import CliRunner

from warcframe import warccount, warcdump, warcvalid


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def sample_warc_file(tmp_path, sample_archive):
    path = tmp_path / "test.warc"
    path.write_bytes(sample_archive)
    return path


@pytest.fixture
def broken_warc_file(tmp_path, sample_archive):
    path = tmp_path / "broken.warc"
    path.write_bytes(sample_archive + b"WARC/1.1\r\nWARC-Type: response\r\n\r\n")
    return path


@pytest.mark.parametrize(
    "module,text",
    [
        ("warcframe.warccount", "Count WARC records"),
        ("warcframe.warcvalid", "Validate WARC files"),
        ("warcframe.warcdump", "Dump WARC files"),
    ],
)
def test_help(module, text):
    result = subprocess.run(
        [sys.executable, "-m", module, "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert text in result.stdout


def test_warccount_stdin(runner, sample_archive):
    result = runner.invoke(warccount.main, [], input=sample_archive)
    assert result.exit_code == 0
    assert result.stdout == "# response records: 1\n"


def test_warccount_type_option(runner, sample_warc_file):
    result = runner.invoke(warccount.main, ["-t", "request", str(sample_warc_file)])
    assert result.exit_code == 0
    assert result.stdout == "# request records: 1\n"


def test_warccount_several_files(runner, tmp_path, sample_warc_file, sample_archive):
    compressed = tmp_path / "test.warc.gz"
    compressed.write_bytes(gzip.compress(sample_archive))
    result = runner.invoke(warccount.main, [str(sample_warc_file), str(compressed)])
    assert result.exit_code == 0
    assert result.stdout == "# response records: 2\n"


def test_warccount_reports_framing_error(runner, broken_warc_file):
    result = runner.invoke(warccount.main, [str(broken_warc_file)])
    assert result.exit_code == 1
    # records before the error are still counted
    assert result.stdout == "# response records: 1\n"
    assert f"warc errors at {broken_warc_file}: Content-Length is missing" in result.stderr


def test_warcvalid_ok(runner, sample_warc_file):
    result = runner.invoke(warcvalid.main, [str(sample_warc_file)])
    assert result.exit_code == 0
    assert result.stderr == ""


def test_warcvalid_reports_offset(runner, sample_warc_file, broken_warc_file, sample_archive):
    result = runner.invoke(warcvalid.main, [str(sample_warc_file), str(broken_warc_file)])
    assert result.exit_code == 1
    assert f"warc errors at {broken_warc_file}:{len(sample_archive)}" in result.stderr
    assert "MalformedRecord: Content-Length is missing" in result.stderr


def test_warcvalid_requires_files(runner):
    result = runner.invoke(warcvalid.main, [])
    assert result.exit_code == 2


def test_warcdump_file(runner, sample_warc_file):
    result = runner.invoke(warcdump.main, [str(sample_warc_file)])
    assert result.exit_code == 0
    assert f"archive record at {sample_warc_file}:0" in result.stdout
    assert "\twarc-target-uri:http://example.com/page1" in result.stdout
    assert result.stdout.count("archive record at") == 3


def test_warcdump_stdin_error(runner):
    result = runner.invoke(warcdump.main, [], input=b"HTTP/1.1 200 OK\r\n")
    assert result.exit_code == 1
    assert "warc errors at -:" in result.stdout
    assert "Unknown WARC version" in result.stdout


def test_log_level_option(runner, sample_warc_file):
    result = runner.invoke(warcvalid.main, ["-L", "debug", str(sample_warc_file)])
    assert result.exit_code == 0
    result = runner.invoke(warcvalid.main, ["-L", "loud", str(sample_warc_file)])
    assert result.exit_code == 2


@pytest.fixture
def truncated_gzip_file(tmp_path, warcinfo_bytes, response_bytes):
    path = tmp_path / "truncated.warc.gz"
    path.write_bytes(gzip.compress(warcinfo_bytes) + gzip.compress(response_bytes)[:-12])
    return path


def test_warccount_truncated_gzip(runner, truncated_gzip_file):
    result = runner.invoke(warccount.main, ["-t", "warcinfo", str(truncated_gzip_file)])
    assert result.exit_code == 1
    assert result.stdout == "# warcinfo records: 1\n"
    assert f"warc errors at {truncated_gzip_file}: EOFError" in result.stderr


def test_warcvalid_truncated_gzip(runner, truncated_gzip_file):
    result = runner.invoke(warcvalid.main, [str(truncated_gzip_file)])
    assert result.exit_code == 1
    assert f"warc errors at {truncated_gzip_file}:" in result.stderr
    assert "WarcIOError" in result.stderr


def test_stdin_is_left_open(monkeypatch, capsys, sample_archive):
    stdin = io.TextIOWrapper(io.BytesIO(sample_archive))
    monkeypatch.setattr(sys, "stdin", stdin)
    with pytest.raises(SystemExit) as excinfo:
        warccount.main([])
    assert excinfo.value.code == 0
    assert not stdin.buffer.closed
    assert capsys.readouterr().out == "# response records: 1\n"
