"""Exception types raised while splitting."""


class CsvSplitError(Exception):
    """Base class for all fatal split errors."""


class InputError(CsvSplitError):
    """Input could not be opened or read."""


class MalformedRecordError(InputError):
    """A row could not be parsed as a CSV record."""

    def __init__(self, line_num: int, reason: str):
        super().__init__(f"line {line_num}: {reason}")
        self.line_num = line_num
        self.reason = reason


class OutputPathError(CsvSplitError):
    """The output target points into a directory that does not exist."""


class OutputCollisionError(CsvSplitError):
    """An output file with the derived name already exists."""
