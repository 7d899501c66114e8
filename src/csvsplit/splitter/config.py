"""Run configuration."""

from dataclasses import dataclass

from csvsplit.chunking.naming import DEFAULT_EXTENSION


@dataclass(frozen=True, slots=True)
class SplitConfig:
    """Settings for one split run, fixed once parsed."""

    records: int
    headers: int = 0
    output: str = ""
    extension: str = DEFAULT_EXTENSION

    def __post_init__(self) -> None:
        if self.records < 1:
            raise ValueError(f"records must be >= 1, got {self.records}")
        if self.headers < 0:
            raise ValueError(f"headers must be >= 0, got {self.headers}")
        if self.headers >= self.records:
            raise ValueError(
                f"headers must be < records, got headers={self.headers}, records={self.records}"
            )
