"""Serialize a chunk of records to a new CSV file."""

import csv
import os
from collections.abc import Iterable

from csvsplit.errors import OutputCollisionError, OutputPathError
from csvsplit.records.types import ENCODING, LINE_TERMINATOR, Record


def write_chunk(path: str, records: Iterable[Record]) -> int:
    """
    Write records to a newly created file at path.

    Refuses to overwrite an existing file. The existence check is a plain
    pre-check, not an atomic create. Returns the number of rows written.
    """
    if os.path.exists(path):
        raise OutputCollisionError(f"file exists: {path}")

    rows = 0
    try:
        with open(path, "w", encoding=ENCODING, newline="") as handle:
            writer = csv.writer(handle, lineterminator=LINE_TERMINATOR)
            for record in records:
                writer.writerow(record)
                rows += 1
    except OSError as exc:
        raise OutputPathError(f"create {path}: {exc.strerror or exc}") from exc

    return rows
