"""
Core package of splititer.
"""
from splititer.core._version import __version__

from splititer.core.config import SplitIterConfiguration
from splititer.core.split import SharedSplitState, Split, split

__all__ = [
    "SplitIterConfiguration",
    "SharedSplitState",
    "Split",
    "split",
]
