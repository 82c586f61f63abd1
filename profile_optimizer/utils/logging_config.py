"""Logging for the CLI: full detail in a rotating file, warnings on stderr."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

LOGGER_NAME = "profile_optimizer"
LOG_FILE = "profile_optimizer.log"

FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Accept a logging constant or a name from config ("debug", "INFO")."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(log_dir: str = "logs", level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach file and console handlers to the package logger.

    Re-running replaces the handlers, so repeated CLI invocations in one
    process (tests) do not duplicate output. Report text goes to stdout and is
    never mixed with log records.
    """
    level = resolve_level(level)
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # 1MB per file, keep 3 backups
    file_handler = RotatingFileHandler(
        log_path / LOG_FILE,
        maxBytes=1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(max(level, logging.WARNING))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    return logger
