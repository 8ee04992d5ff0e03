"""
splititer: lazy partition of an iterable into two iterators.
"""
from splititer.core._version import __version__
from splititer.core.split import (
    Split,
    Splittable,
    SplittableIterator,
    SplitBufferOverflow,
    split,
    splittable,
)
from splititer.utils import LogLevel, set_log, partition

__all__ = [
    "Split",
    "Splittable",
    "SplittableIterator",
    "SplitBufferOverflow",
    "split",
    "splittable",
    "partition",
    "LogLevel",
    "set_log",
]
