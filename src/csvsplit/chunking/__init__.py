"""Chunk accumulation and output naming."""

from csvsplit.chunking.accumulator import ChunkAccumulator
from csvsplit.chunking.naming import DEFAULT_EXTENSION, check_output_dir, output_name

__all__ = ["DEFAULT_EXTENSION", "ChunkAccumulator", "check_output_dir", "output_name"]
