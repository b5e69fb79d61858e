"""
Logging setup for applications embedding splinekit.

The library itself only creates module loggers under the `splinekit`
namespace; nothing is printed until a host calls setup_logging().
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route `splinekit` log records to stdout and, optionally, a file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Threshold for the package logger and its handlers
        log_file: Path of a log file, truncated on open

    Returns:
        The `splinekit` logger
    """
    package_logger = logging.getLogger("splinekit")
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        handler.close()
        package_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.debug(f"Logging configured at {logging.getLevelName(level)}")
    return package_logger
