"""Split driver and its configuration."""

from csvsplit.splitter.config import SplitConfig
from csvsplit.splitter.split import SplitStats, split

__all__ = ["SplitConfig", "SplitStats", "split"]
