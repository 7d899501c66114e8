"""Shared record types."""

from dataclasses import dataclass
from typing import TypeAlias

Record: TypeAlias = list[str]
Chunk: TypeAlias = list[Record]

# Output files use bare newlines regardless of platform.
LINE_TERMINATOR = "\n"

ENCODING = "utf-8"


@dataclass
class ReadStats:
    """Counters collected while reading records."""

    records_read: int = 0
    empty_lines: int = 0
