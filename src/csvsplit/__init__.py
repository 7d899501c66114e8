"""csvsplit - Split a CSV stream into numbered files of bounded size."""

from csvsplit.splitter import SplitConfig, SplitStats, split

__all__ = ["SplitConfig", "SplitStats", "split"]
