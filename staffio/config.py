import logging
import os
from typing import NamedTuple, Optional, Union

# Employee identifiers: EMP1001, EMP1002, ...
ID_PREFIX = "EMP"
ID_START = 1001
ID_WIDTH = 4

LOG_LEVEL_ENV = "STAFFIO_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class ConsoleDefaults(NamedTuple):
    """
    Values used by the console when a prompt gets no usable answer.
    """

    first_name: str = "David"
    last_name: str = "Lee"
    role: str = "Junior Analyst"
    salary: float = 40000.00


def log_level(level: Optional[Union[int, str]] = None) -> Union[int, str]:
    """
    Resolves the logging level: `level` when given, then the STAFFIO_LOG_LEVEL
    environment variable, then WARNING.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)

    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level `{level}`.")

    return level


def configure_logging(level: Optional[Union[int, str]] = None):
    """
    Sends the package logs to stderr. Only entry points call this, the library
    itself never installs handlers.
    """
    logging.basicConfig(level=log_level(level), format=LOG_FORMAT)
