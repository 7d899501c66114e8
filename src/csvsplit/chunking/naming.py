"""Output file naming."""

import os

from csvsplit.errors import OutputPathError

DEFAULT_EXTENSION = ".csv"


def check_output_dir(output: str) -> None:
    """Fail if the directory part of the output target does not exist."""
    directory = os.path.dirname(output)
    if directory and not os.path.isdir(directory):
        raise OutputPathError(f"no such directory: {output}")


def output_name(output: str, counter: int, extension: str = DEFAULT_EXTENSION) -> str:
    """
    Build the file name for a chunk.

    The target, the counter and the extension are concatenated as-is:
    ("", 3) -> "3.csv", ("part-", 1) -> "part-1.csv", ("stuff/", 2) -> "stuff/2.csv".
    """
    check_output_dir(output)
    return f"{output}{counter}{extension}"
