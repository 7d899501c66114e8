"""Chunk accumulation with header carry-over."""

from csvsplit.records.types import Chunk, Record


class ChunkAccumulator:
    """
    Buffer records into chunks of a fixed size.

    After a full chunk is taken, the buffer restarts with its first
    `headers` rows so every later chunk begins with the same header lines.
    The first chunk has no carried rows: its headers are simply the first
    rows of the input.
    """

    def __init__(self, records_per_chunk: int, headers: int = 0):
        if records_per_chunk < 1:
            raise ValueError(f"records_per_chunk must be >= 1, got {records_per_chunk}")
        if not 0 <= headers < records_per_chunk:
            raise ValueError(
                f"headers must satisfy 0 <= headers < {records_per_chunk}, got {headers}"
            )
        self._size = records_per_chunk
        self._headers = headers
        self._chunk: Chunk = []

    def __len__(self) -> int:
        return len(self._chunk)

    def add(self, record: Record) -> Chunk | None:
        """Append a record; return the completed chunk once it is full."""
        self._chunk.append(record)
        if len(self._chunk) < self._size:
            return None

        full = self._chunk
        self._chunk = full[: self._headers]
        return full

    def drain(self) -> Chunk:
        """
        Return whatever is buffered at end of input.

        This may be only the carried header rows when the input ended exactly
        on a chunk boundary.
        """
        remaining = self._chunk
        self._chunk = remaining[: self._headers]
        return remaining
