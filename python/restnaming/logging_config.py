"""
Logging configuration for restnaming.

The naming functions only emit DEBUG records on loggers under "restnaming";
they never install handlers. A code generator that wants to see why a name
came out the way it did calls setup_logging() once at startup.

Console output goes to stderr so generators that write code to stdout are
unaffected. File output (optional) rotates daily:
<log_dir>/restnaming-YYYY-MM-DD.log
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(
    level: int = logging.INFO,
    console: bool = True,
    log_dir: Optional[Path] = None,
    backup_count: int = 7,
) -> logging.Logger:
    """
    Set up logging for restnaming.

    Safe to call more than once: handlers are only added if missing.

    Args:
        level: Logging level (default: INFO; DEBUG shows naming decisions)
        console: If True, log to stderr
        log_dir: If given, also log to a daily rotating file in this directory
        backup_count: Number of daily backup files to keep (default: 7 days)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("restnaming")
    logger.setLevel(level)

    has_file_handler = any(
        isinstance(h, logging.handlers.TimedRotatingFileHandler)
        for h in logger.handlers
    )
    has_console_handler = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    )

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_dir is not None and not has_file_handler:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"restnaming-{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info(f"Log file: {log_file}")

    if console and not has_console_handler:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger

