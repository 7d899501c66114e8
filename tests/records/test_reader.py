"""Tests for the record reader."""

import io
import sys
import tempfile
from pathlib import Path

import pytest

from csvsplit.errors import InputError, MalformedRecordError
from csvsplit.records import ReadStats, iter_records, read_records


class TestReadRecords:
    """Test cases for read_records function."""

    def test_parses_quoted_fields(self) -> None:
        """Test that delimiters, quotes and newlines inside quotes are kept."""
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".csv", delete=False, encoding="utf-8", newline=""
        ) as f:
            f.write('id,note\n')
            f.write('1,"a, b"\n')
            f.write('2,"say ""hi"""\n')
            f.write('3,"two\nlines"\n')
            temp_path = f.name

        try:
            records = list(read_records(temp_path))
            assert records == [
                ["id", "note"],
                ["1", "a, b"],
                ["2", 'say "hi"'],
                ["3", "two\nlines"],
            ]
        finally:
            Path(temp_path).unlink()

    def test_handles_missing_trailing_newline(self) -> None:
        """Test that the last row is read without a trailing newline."""
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".csv", delete=False, encoding="utf-8", newline=""
        ) as f:
            f.write("a,b\n")
            f.write("c,d")
            temp_path = f.name

        try:
            assert list(read_records(temp_path)) == [["a", "b"], ["c", "d"]]
        finally:
            Path(temp_path).unlink()

    def test_handles_utf8_content(self) -> None:
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".csv", delete=False, encoding="utf-8", newline=""
        ) as f:
            f.write("Nœud_α,Nœud_β\n")
            temp_path = f.name

        try:
            assert list(read_records(temp_path)) == [["Nœud_α", "Nœud_β"]]
        finally:
            Path(temp_path).unlink()

    def test_is_generator(self) -> None:
        """Test that read_records returns a generator (lazy evaluation)."""
        result = read_records("does-not-matter.csv")
        assert hasattr(result, "__next__")
        assert hasattr(result, "__iter__")

    def test_missing_file_raises_input_error(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.csv"
        with pytest.raises(InputError, match="missing.csv"):
            list(read_records(str(missing)))

    def test_reads_stdin_when_no_path(self) -> None:
        stdin = io.StringIO("a,b\nc,d\n")
        assert list(read_records(None, stdin=stdin)) == [["a", "b"], ["c", "d"]]
        assert not stdin.closed


class TestIterRecords:
    """Test cases for iter_records function."""

    def test_skips_blank_lines(self) -> None:
        stats = ReadStats()
        records = list(iter_records(["a,b\n", "\n", "c,d\n"], stats))
        assert records == [["a", "b"], ["c", "d"]]
        assert stats.records_read == 2
        assert stats.empty_lines == 1

    def test_wrong_field_count_is_malformed(self) -> None:
        lines = ["a,b\n", "c,d\n", "e,f,g\n"]
        with pytest.raises(MalformedRecordError) as excinfo:
            list(iter_records(lines))
        assert excinfo.value.line_num == 3
        assert "wrong number of fields" in str(excinfo.value)

    def test_bad_quoting_is_malformed(self) -> None:
        lines = ["a,b\n", '"c"d,e\n']
        with pytest.raises(MalformedRecordError):
            list(iter_records(lines))

    def test_records_before_error_are_yielded(self) -> None:
        records = iter_records(["a,b\n", "c\n"])
        assert next(records) == ["a", "b"]
        with pytest.raises(MalformedRecordError):
            next(records)


class TestInputSources:
    """Test cases for opening file and stdin sources."""

    def test_reads_process_stdin_without_newline_translation(self, monkeypatch) -> None:
        """Test that a lone carriage return inside quotes survives stdin reading."""
        raw = io.BytesIO('a,"x\ry"\nNœud,z\n'.encode("utf-8"))
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(raw, encoding="latin-1"))

        assert list(read_records(None)) == [["a", "x\ry"], ["Nœud", "z"]]
        assert not raw.closed

    def test_directory_path_raises_input_error(self, tmp_path: Path) -> None:
        with pytest.raises(InputError, match="open"):
            list(read_records(str(tmp_path)))


class TestFieldHandling:
    """Test cases for field-level parsing rules."""

    def test_accepts_fields_larger_than_default_limit(self) -> None:
        big = "y" * 200_000
        lines = [f'a,{big}\n', f'b,"{big}"\n']
        assert list(iter_records(lines)) == [["a", big], ["b", big]]

    def test_bare_quote_in_unquoted_field_is_kept(self) -> None:
        """A quote inside an unquoted field is read literally, not rejected."""
        assert list(iter_records(['a,b"c\n'])) == [["a", 'b"c']]
