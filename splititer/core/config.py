"""
Configuration of splititer.
"""
import os
import json
import logging
from json import JSONDecodeError
from pathlib import Path
from typing import Optional, Union

import jsonschema

from splititer.utils.logging import LogLevel

logger = logging.getLogger(__name__)


class SplitIterConfiguration:
    r"""Encapsulate splititer configuration parameters.

    By default, splititer configuration folder is stored in
    - `$HOME/.splititer.d` (Linux)
    - `%USERPROFILE%\.splititer.d` (MS Windows)

    This default configuration folder is overwritten by the environment
    variable ``SPLITITER_CONFIG_DIR``.

    Recognized parameters are:

    - buffer_size: default capacity of the buffer shared by split branches;
      `null` for an unbounded buffer.
    - log_level: name of the default :py:class:`~splititer.utils.logging.LogLevel`.
    """

    SPLITITER_CONFIG_DIR = ".splititer.d"
    CONFIG_FILE = "splititer_config.json"
    DEFAULTS = {
        "buffer_size": None,
        "log_level": LogLevel.INFO.name,
    }

    def __init__(self) -> None:
        """Constructor"""
        self._buffer_size: Optional[int] = self.DEFAULTS["buffer_size"]
        self._log_level = LogLevel[self.DEFAULTS["log_level"]]

        self.__load_configuration()

    def __load_configuration(self) -> None:
        """Read configuration from file, or keep the default."""
        fullpath = self.get_config_filename()

        if not os.path.isfile(fullpath):
            logger.debug(f"No configuration file `{fullpath!s}`; using defaults.")
            return

        try:
            parameters = self.validate_file(fullpath)
        except (OSError, JSONDecodeError, jsonschema.ValidationError) as error:
            logger.warning(
                f"Configuration file `{fullpath!s}` cannot be used ({error.__class__.__name__}); fall back to default."
            )
        else:
            buffer_size = parameters.get("buffer_size", self._buffer_size)
            # JSON schema accepts integral floats, such as 2.0
            self._buffer_size = None if buffer_size is None else int(buffer_size)
            self._log_level = LogLevel[parameters.get("log_level", self._log_level.name)]

    @staticmethod
    def get_config_dir() -> Path:
        try:
            return Path(os.environ["SPLITITER_CONFIG_DIR"])
        except KeyError:
            return Path.home().joinpath(SplitIterConfiguration.SPLITITER_CONFIG_DIR)

    @classmethod
    def get_config_filename(cls) -> Path:
        config_dir = cls.get_config_dir()
        return config_dir.joinpath(cls.CONFIG_FILE)

    @property
    def buffer_size(self) -> Optional[int]:
        """Optional[int] : Default buffer capacity of split branches; None if unbounded."""
        return self._buffer_size

    @property
    def log_level(self) -> LogLevel:
        """LogLevel : Default log level."""
        return self._log_level

    @staticmethod
    def config_schema() -> dict:
        """Static method returning the JSON validation schema of the class."""
        path = os.path.dirname(os.path.abspath(__file__))
        with open(os.path.join(path, "configuration_schema.json"), "r") as fp:
            config_schema = json.load(fp)
        return config_schema

    @classmethod
    def validate_file(cls, filename: Union[str, Path]) -> dict:
        """Validate the provided file against JSON schema for configuration file.

        Parameters
        ----------
        filename : str or Path
            Absolute path to the file to be tested.

        Returns
        -------
        dict
            The dictionary read in the validated file

        Raises
        ------
        `OSError` (and derived exceptions)
            If a problem occurs while opening the file.
        `jsonschema.exceptions.ValidationError`
            If the provided file does not conform to the JSON schema.
        """
        with open(filename, "r") as fp:
            params = json.load(fp)

        jsonschema.validate(params, cls.config_schema())

        return params


_configuration: Optional[SplitIterConfiguration] = None


def get_configuration() -> SplitIterConfiguration:
    """Get the current configuration, read on first call."""
    global _configuration
    if _configuration is None:
        _configuration = SplitIterConfiguration()
    return _configuration


def reset_configuration() -> None:
    """Discard the current configuration; it will be read again on next use."""
    global _configuration
    _configuration = None
