import logging
import time
from dataclasses import dataclass, field
from typing import TextIO

from csvsplit.chunking import ChunkAccumulator, output_name
from csvsplit.records import Chunk, ReadStats, read_records, write_chunk
from csvsplit.splitter.config import SplitConfig

logger = logging.getLogger(__name__)


@dataclass
class SplitStats:
    """Statistics from a split run."""

    records_read: int = 0
    empty_lines: int = 0
    files_written: int = 0
    paths: list[str] = field(default_factory=list)


def split(
    config: SplitConfig,
    input_path: str | None = None,
    stdin: TextIO | None = None,
) -> SplitStats:
    """
    Split CSV input into numbered files of at most config.records rows.

    Single pass:
    1. Read records from input_path (or standard input)
    2. Write a file each time the chunk fills, carrying header rows over
    3. Write whatever remains at end of input; an empty input still yields one file

    Any error stops the run; files already written stay on disk.
    """
    start = time.perf_counter()
    source = input_path if input_path is not None else "<stdin>"
    logger.info(
        "Starting: input=%s, records=%d, headers=%d, output=%r",
        source,
        config.records,
        config.headers,
        config.output,
    )

    read_stats = ReadStats()
    stats = SplitStats()
    accumulator = ChunkAccumulator(config.records, config.headers)
    counter = 1

    def flush(chunk: Chunk) -> None:
        name = output_name(config.output, counter, config.extension)
        rows = write_chunk(name, chunk)
        stats.files_written += 1
        stats.paths.append(name)
        logger.debug("Wrote %s (%d rows)", name, rows)

    for record in read_records(input_path, read_stats, stdin):
        chunk = accumulator.add(record)
        if chunk is not None:
            flush(chunk)
            counter += 1

    # Header-only remainders are written; an empty one only when nothing was.
    remaining = accumulator.drain()
    if remaining or stats.files_written == 0:
        flush(remaining)

    stats.records_read = read_stats.records_read
    stats.empty_lines = read_stats.empty_lines

    if stats.empty_lines > 0:
        logger.debug("Skipped %d blank lines", stats.empty_lines)

    total_time = time.perf_counter() - start
    logger.info(
        "Done: %d records into %d files in %.2fs",
        stats.records_read,
        stats.files_written,
        total_time,
    )
    return stats

