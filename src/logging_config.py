"""
Logging Configuration for the League History Simulator

Sets up stdlib logging for command-line runs:
- Colored console output at the requested level
- Optional rotating log files (full history log plus an error-only log)
- Per-package level overrides for the chattier subsystems

Usage Example:
    from logging_config import setup_logging, get_logger

    setup_logging(level="INFO", log_dir="logs", enable_file=True)

    logger = get_logger(__name__)
    logger.info("History run started")

Log Files Created (when enable_file=True):
- logs/league_history.log: Everything at DEBUG+
- logs/league_history_error.log: ERROR+ only

Each file rotates at 10MB with 5 backups.
"""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Dict, Optional


DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(message)s"
)

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

HISTORY_LOG_FILE = "league_history.log"
ERROR_LOG_FILE = "league_history_error.log"

# Bye planning retries and per-pick draft logs flood DEBUG output
DEFAULT_MODULE_LEVELS: Dict[str, str] = {
    "scheduling": "WARNING",
    "offseason.draft_manager": "INFO",
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().format(record)
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = False,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    format_style: str = "detailed",
    module_levels: Optional[Dict[str, str]] = None
) -> None:
    """
    Configure the root logger once at startup.

    Args:
        level: Console level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for rotating log files
        enable_console: Log to stderr
        enable_file: Write rotating log files to log_dir
        max_bytes: Size at which a log file rotates
        backup_count: Rotated files to keep
        format_style: "detailed" or "simple" file format
        module_levels: Per-logger overrides (defaults to DEFAULT_MODULE_LEVELS)

    Raises:
        ValueError: Unknown level name
    """
    console_level = _level(level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG if enable_file else console_level)

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

    if enable_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        file_format = DETAILED_FORMAT if format_style == "detailed" else SIMPLE_FORMAT

        for filename, file_level in ((HISTORY_LOG_FILE, logging.DEBUG), (ERROR_LOG_FILE, logging.ERROR)):
            handler = logging.handlers.RotatingFileHandler(
                filename=os.path.join(log_dir, filename),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            handler.setLevel(file_level)
            handler.setFormatter(logging.Formatter(file_format, datefmt=DATE_FORMAT))
            root_logger.addHandler(handler)

    overrides = DEFAULT_MODULE_LEVELS if module_levels is None else module_levels
    for module_name, module_level in overrides.items():
        configure_module_logger(module_name, level=module_level)

    root_logger.debug(
        f"Logging initialized - Level: {level}, "
        f"Console: {enable_console}, File: {enable_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (typically called with __name__)."""
    return logging.getLogger(name)


def configure_module_logger(
    module_name: str,
    level: Optional[str] = None,
    propagate: bool = True
) -> logging.Logger:
    """
    Set the level of one package or module logger.

    Example:
        >>> configure_module_logger("offseason", level="DEBUG")
    """
    logger = logging.getLogger(module_name)
    if level:
        logger.setLevel(_level(level))
    logger.propagate = propagate
    return logger


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "ERROR"
) -> None:
    """
    Log an exception with its traceback and a key=value context suffix.

    Example:
        >>> try:
        ...     simulator.simulate_history(state, years=20)
        ... except LeagueSimException as e:
        ...     log_exception(logger, e, context={"years": 20})
    """
    suffix = ""
    if context:
        suffix = " [" + ", ".join(f"{key}={value}" for key, value in context.items()) + "]"
    logger.log(
        _level(level),
        f"Exception occurred{suffix}: {type(exception).__name__}: {exception}",
        exc_info=exception,
    )
