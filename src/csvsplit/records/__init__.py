"""Reading and writing CSV records."""

from csvsplit.records.reader import iter_records, open_input, read_records
from csvsplit.records.types import Chunk, ReadStats, Record
from csvsplit.records.writer import write_chunk

__all__ = [
    "Chunk",
    "ReadStats",
    "Record",
    "iter_records",
    "open_input",
    "read_records",
    "write_chunk",
]
