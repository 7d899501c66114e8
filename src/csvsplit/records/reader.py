"""Record source for files and standard input."""

import csv
import io
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import TextIO

from csvsplit.errors import InputError, MalformedRecordError
from csvsplit.records.types import ENCODING, ReadStats, Record

# Lift the default 128 KiB field limit; large fields are valid CSV.
try:
    csv.field_size_limit(sys.maxsize)
except OverflowError:
    csv.field_size_limit(2**31 - 1)


def iter_records(lines: Iterable[str], stats: ReadStats | None = None) -> Iterator[Record]:
    """
    Yield parsed records from text lines.

    Blank lines are skipped. The first record fixes the field count; any later
    record with a different width raises MalformedRecordError, as does a
    quoting error.
    """
    if stats is None:
        stats = ReadStats()

    reader = csv.reader(lines, strict=True)
    expected_fields: int | None = None

    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            raise MalformedRecordError(reader.line_num, str(exc)) from exc

        if not row:
            stats.empty_lines += 1
            continue

        if expected_fields is None:
            expected_fields = len(row)
        elif len(row) != expected_fields:
            raise MalformedRecordError(
                reader.line_num,
                f"wrong number of fields (expected {expected_fields}, got {len(row)})",
            )

        stats.records_read += 1
        yield row


@contextmanager
def open_input(input_path: str | None, stdin: TextIO | None = None) -> Iterator[TextIO]:
    """
    Open the named input file, or fall back to standard input.

    The process's standard input is re-read as UTF-8 without newline
    translation, like a named file. An explicit stdin stream is used as-is.
    Neither is closed here.
    """
    if input_path is None:
        if stdin is not None:
            yield stdin
            return

        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            yield sys.stdin
            return

        wrapper = io.TextIOWrapper(buffer, encoding=ENCODING, newline="")
        try:
            yield wrapper
        finally:
            # Detach so closing the wrapper never closes sys.stdin.
            wrapper.detach()
        return

    try:
        handle = open(input_path, encoding=ENCODING, newline="")
    except OSError as exc:
        raise InputError(f"open {input_path}: {exc.strerror or exc}") from exc

    with handle:
        yield handle


def read_records(
    input_path: str | None,
    stats: ReadStats | None = None,
    stdin: TextIO | None = None,
) -> Iterator[Record]:
    """Read and parse all records from a file or standard input."""
    with open_input(input_path, stdin) as handle:
        try:
            yield from iter_records(handle, stats)
        except UnicodeDecodeError as exc:
            raise InputError(f"read {input_path or '<stdin>'}: {exc}") from exc
        except OSError as exc:
            raise InputError(f"read {input_path or '<stdin>'}: {exc.strerror or exc}") from exc
