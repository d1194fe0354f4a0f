from __future__ import annotations

import io

import pytest
from term_markdown.constants import MAX_INPUT_SIZE
from term_markdown.exceptions import InputError, InputTooLargeError
from term_markdown.source import read_source


def test_read_source_decodes_utf8():
    stream = io.BytesIO("héllo `wörld`\n".encode("utf-8"))

    assert read_source(stream) == "héllo `wörld`\n"


def test_read_source_accepts_input_at_limit():
    assert read_source(io.BytesIO(b"abcd"), 4) == "abcd"


def test_read_source_rejects_oversized_input():
    with pytest.raises(InputTooLargeError) as excinfo:
        read_source(io.BytesIO(b"abcde"), 4)

    assert excinfo.value.limit == 4
    assert excinfo.value.size == 5
    assert "4 bytes" in str(excinfo.value)


def test_read_source_rejects_invalid_utf8():
    with pytest.raises(InputError, match="Invalid UTF-8 sequence in notes.md"):
        read_source(io.BytesIO(b"\xff\xfe"), 1024, "notes.md")


def test_read_source_reports_read_errors():
    class BrokenStream(io.RawIOBase):
        def read(self, size=-1):
            raise OSError("device not ready")

    with pytest.raises(InputError, match="Error reading <stdin>: device not ready"):
        read_source(BrokenStream(), 1024)


def test_read_source_default_limit():
    data = b"a" * MAX_INPUT_SIZE

    assert len(read_source(io.BytesIO(data))) == MAX_INPUT_SIZE
    with pytest.raises(InputTooLargeError):
        read_source(io.BytesIO(data + b"a"))
