# refer - https://loguru.readthedocs.io/en/stable/api/logger.html
import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from tika_pipeline.core.enums import LogLevel

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

logger.remove() # remove default stuff

# id of the stderr handler, replaced by set_log_level
_stderr_handler_id = logger.add(
    sys.stderr,
    format=LOG_FORMAT,
    level="INFO",
    colorize=True,
)


# Function to get logger with context
def get_logger(name: Optional[str] = None):
    if name:
        return logger.bind(name=name)
    return logger


def add_log_file(filepath: Union[str, Path], level: str = "INFO", **kwargs) -> int:
    """Also write log records to ``filepath``; returns the loguru handler id."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    kwargs.setdefault("format", FILE_FORMAT)
    return logger.add(filepath, level=level, **kwargs)


def set_log_level(level: Union[str, LogLevel]):
    """Re-create the stderr handler at ``level``, leaving file handlers alone."""
    global _stderr_handler_id
    if isinstance(level, LogLevel):
        level = level.value
    try:
        logger.remove(_stderr_handler_id)
    except ValueError:
        # already removed elsewhere
        pass
    _stderr_handler_id = logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper(), colorize=True)
