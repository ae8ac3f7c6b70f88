import logging
from pathlib import Path

import pytest

from linecount.analyzers.loc import counter
from linecount.analyzers.loc.counter import count_files, count_text, parse_file
from linecount.analyzers.loc.models import FileRecord, LineCounts
from linecount.core.errors import FileReadError


# =============================================================================
# count_text
# =============================================================================

def test_count_text_mixed_line_counts_twice():
    counts = count_text("  \n% hi\nx=1; % set\n")
    assert counts == LineCounts(code=1, comments=2, blank=1, total=3)


def test_block_comment_spanning_lines():
    text = "/* one\ntwo\nthree\nfour */\nx = 1;\n"
    counts = count_text(text)
    assert counts.comments == 4
    assert counts.code == 1
    assert counts.total == 5


def test_count_text_empty():
    assert count_text("") == LineCounts(0, 0, 0, 0)


def test_count_text_without_trailing_newline():
    assert count_text("a = 1;\nb = 2;").total == 2


def test_count_text_crlf_line_endings():
    counts = count_text("a = 1;\r\n\r\n% c\r\n")
    assert counts == LineCounts(code=1, comments=1, blank=1, total=3)


def test_form_feed_does_not_end_a_line():
    assert count_text("a = 1;\n\f\nb = 2;\n") == LineCounts(
        code=2, comments=0, blank=1, total=3
    )
    assert count_text("x = 1;\x0c% note\n") == LineCounts(
        code=1, comments=1, blank=0, total=1
    )


def test_unicode_line_separator_stays_in_line(tmp_path: Path):
    source = tmp_path / "sep.m"
    source.write_text("s = 'a\u2028b'; % c\n", encoding="utf-8")

    record = parse_file(source)

    assert (record.code, record.comments, record.total) == (1, 1, 1)


def test_unclosed_block_runs_to_end_of_file():
    counts = count_text("x = 1;\n/* open\ny = 2;\nz = 3;\n")
    assert counts == LineCounts(code=1, comments=3, blank=0, total=4)


# =============================================================================
# parse_file
# =============================================================================

def test_parse_file(tmp_path: Path):
    source = tmp_path / "demo.m"
    source.write_text(
        "function demo()\n% help text\n\nx = 1; % inline\nend\n",
        encoding="utf-8",
    )

    record = parse_file(source)

    assert record == FileRecord(
        path=str(source), code=3, comments=2, blank=1, total=5
    )


def test_parse_file_missing_returns_zero_counts(tmp_path: Path, caplog):
    missing = tmp_path / "missing.m"

    with caplog.at_level(logging.WARNING):
        record = parse_file(missing)

    assert record == FileRecord.empty(str(missing))
    assert "not found" in caplog.text


def test_parse_file_unreadable_returns_zero_counts(
    tmp_path: Path, monkeypatch, caplog
):
    source = tmp_path / "locked.m"
    source.write_text("x = 1;\n", encoding="utf-8")

    def fail(path, **kwargs):
        raise FileReadError(f"Failed to read file {path}")

    monkeypatch.setattr(counter, "safe_read_text", fail)

    with caplog.at_level(logging.WARNING):
        record = parse_file(source)

    assert record.total == 0
    assert "Unable to open" in caplog.text


def test_parse_file_binary_reads_as_empty(tmp_path: Path):
    blob = tmp_path / "blob.m"
    blob.write_bytes(b"\x00\x01\x02x = 1;\n")
    assert parse_file(blob).total == 0


def test_records_are_immutable(tmp_path: Path):
    record = FileRecord.empty("a.m")
    with pytest.raises(AttributeError):
        record.code = 3


# =============================================================================
# count_files
# =============================================================================

def test_count_files_keeps_order_and_continues(tmp_path: Path):
    first = tmp_path / "first.m"
    first.write_text("a = 1;\n", encoding="utf-8")
    second = tmp_path / "second.cpp"
    second.write_text("// c\nint x; // y\n", encoding="utf-8")

    result = count_files([first, tmp_path / "gone.m", second])

    assert [f.path for f in result.files] == [
        str(first), str(tmp_path / "gone.m"), str(second)
    ]
    assert result.code == 2
    assert result.comments == 2
    assert result.total == 3
    assert result.total_files == 3
