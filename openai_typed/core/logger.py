import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union
from .exceptions import LoggerError

LOGGER_NAME = "openai_typed"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def _get_log_level(level: Union[str, int]) -> int:
    """Convert string log level to logging constant"""
    if isinstance(level, int):
        return level
    level_name = str(level).upper()
    value = logging.getLevelName(level_name)
    if not isinstance(value, int):
        raise LoggerError(f"Invalid log level: {level_name}")
    return value

def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    console_output: bool = True,
    max_size: int = 1024 * 1024,
    backup_count: int = 3,
    log_format: str = LOG_FORMAT
) -> logging.Logger:
    """
    Configure the package logger.

    The library itself only emits records through module loggers; handlers
    are installed here, on demand, by applications and the bundled examples.
    Calling this again replaces the handlers installed by a previous call.

    Args:
        level: Log level name or constant
        log_file: Optional path of a rotating log file
        console_output: Whether to also log to stderr
        max_size: Size in bytes at which the log file is rotated
        backup_count: Number of rotated files to keep
        log_format: Format string for all handlers

    Returns:
        The configured ``openai_typed`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(_get_log_level(level))
    formatter = logging.Formatter(log_format)

    if log_file:
        path = Path(log_file)
        if not path.parent.exists():
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError:
                raise LoggerError(f"Cannot create log directory: {path.parent}")
        try:
            handler = RotatingFileHandler(
                str(path),
                maxBytes=max_size,
                backupCount=backup_count
            )
        except OSError as e:
            raise LoggerError(f"Failed to setup log file: {str(e)}")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if console_output:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
