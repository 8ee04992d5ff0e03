"""Helper classes and functions of splititer.
"""
from .logging import LogLevel, set_log
from .helpers import partition

try:
    import pytest
except ModuleNotFoundError:
    pass
else:
    pytest.register_assert_rewrite("splititer.utils.testing")

__all__ = [
    "LogLevel",
    "set_log",
    "partition",
]
