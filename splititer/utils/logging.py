"""Customized log handlers for splititer."""
import io
import logging
import sys
from enum import IntEnum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from splititer.utils.helpers import check_arg


root_logger = logging.getLogger()
logger = logging.getLogger(__name__)


DEFAULT_STREAM = object()

BRANCH_NAMES = ("left", "right")


class LogLevel(IntEnum):
    """splititer log level.

    FULL_DEBUG : Detailed debug log (one record per buffered element)
    DEBUG : Debug log
    INFO : Information log
    WARNING : Warning log
    ERROR : Error log
    CRITICAL : Critical log
    """

    FULL_DEBUG = logging.DEBUG - 1
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


VERBOSE_LEVEL = LogLevel.DEBUG


def branch_name(is_right: bool) -> str:
    """Name of the branch identified by `is_right`, as used in log records."""
    return BRANCH_NAMES[int(bool(is_right))]


class BranchFilter(logging.Filter):
    """Log record filter focusing verbose messages on one branch of a split.

    Records above VERBOSE_LEVEL, and records carrying no branch
    information, are always kept.

    Parameters
    ----------
    branch : str
        Name of the branch to focus on; "left" or "right"
    """

    def __init__(self, branch: str):
        check_arg(branch, "branch", str, lambda name: name in BRANCH_NAMES)
        super().__init__()
        self.__branch = branch

    @property
    def branch(self) -> str:
        """str : Name of the branch kept by the filter"""
        return self.__branch

    def filter(self, record: logging.LogRecord) -> int:
        """Is the specified record to be logged? Returns zero for no, nonzero for yes.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to test

        Returns
        -------
        int
            Non-zero if the record is to be logged.
        """
        branch = getattr(record, "branch", None)
        return int(
            record.levelno > VERBOSE_LEVEL or branch is None or branch == self.__branch
        )


class SplitIterHandler:
    """Marker base class of the handlers installed by `set_log`."""


class FileLogHandler(RotatingFileHandler, SplitIterHandler):
    """Special RotatingFileHandler for splititer log message.

    Parameters
    ----------
    filename : str or Path, optional
        Log filename; default "splititer_trace.log"
    backupCount : int, optional
        Number of backup log files; default 5
    encoding : str, optional
        File encoding to be enforced
    """

    def __init__(
        self,
        filename: Union[str, Path] = "splititer_trace.log",
        backupCount: int = 5,
        encoding: Optional[str] = None,
    ) -> None:
        RotatingFileHandler.__init__(
            self, filename, backupCount=backupCount, encoding=encoding, delay=True
        )


class StreamLogHandler(logging.StreamHandler, SplitIterHandler):
    """Special StreamHandler for splititer log message."""

    def __init__(self, stream: io.TextIOBase = DEFAULT_STREAM) -> None:
        if stream is DEFAULT_STREAM:
            stream = sys.stdout
        logging.StreamHandler.__init__(self, stream=stream)


def rollover_logfile() -> None:
    """Rollover logfile of splititer LogHandler."""
    for handler in root_logger.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.doRollover()


def set_log(
    filename: Union[str, Path, None] = "splititer_trace.log",
    stream: Optional[io.TextIOBase] = DEFAULT_STREAM,
    level: Optional[int] = None,
    branch: Optional[str] = None,
    format: str = "%(message)s",
    encoding: Optional[str] = None,
    backupCount: int = 5,
) -> None:
    """Set the splititer log behavior.

    If `backupCount` is nonzero, at most `backupCount` files will be kept, and if more
    would be created when rollover occurs, the oldest one is deleted.

    By default the log messages are written to a file (specified by its `filename`) and
    to a stream. Set either `filename` or `stream` to None to deactivate the
    corresponding log handler.

    Parameters
    ----------
    filename : str or Path or None, optional
        Log filename; default "splititer_trace.log"
    stream : io.TextIOBase or None, optional
        Log stream; default ``sys.stdout``
    level : int or LogLevel, optional
        Log level; default is the configured `log_level` (LogLevel.INFO if not set)
    branch : str or None, optional
        Branch ("left" or "right") on which to focus verbose log messages; default None
    format : str, optional
        Log record format; default "%(message)s" - for the available attributes (see https://docs.python.org/3/library/logging.html#logrecord-attributes)
    encoding : str, optional
        File encoding to be enforced
    backupCount : int, optional
        Number of backup log files; default 5
    """
    nonetype = type(None)
    check_arg(filename, "filename", (str, Path, nonetype))
    if stream is not DEFAULT_STREAM:
        check_arg(stream, "stream", (io.TextIOBase, nonetype))
    check_arg(level, "level", (int, LogLevel, nonetype))
    check_arg(branch, "branch", (str, nonetype), lambda name: name is None or name in BRANCH_NAMES)
    check_arg(format, "format", str)
    check_arg(encoding, "encoding", (str, nonetype))
    check_arg(backupCount, "backupCount", int, lambda v: v >= 0)

    if level is None:
        from splititer.core.config import get_configuration
        level = get_configuration().log_level

    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        if isinstance(handler, SplitIterHandler):
            handler.close()  # Be sure to close the file descriptor
            root_logger.removeHandler(handler)

    def add_handler(h):
        fmt = logging.Formatter(format)
        h.setFormatter(fmt)
        h.setLevel(level)
        if branch is not None:
            h.addFilter(BranchFilter(branch))
        root_logger.addHandler(h)

    handlers = list()
    if filename is not None:
        handlers.append(
            FileLogHandler(filename, backupCount=backupCount, encoding=encoding)
        )

    if stream is not None:
        handlers.append(StreamLogHandler(stream))

    for handler in handlers:
        add_handler(handler)

    if len(handlers) == 0:
        logger.warning("No splititer log handlers added.")
