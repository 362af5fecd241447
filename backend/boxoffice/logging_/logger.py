import os
import sys
from datetime import datetime
from typing import Any

import pytz
from loguru import logger
from loguru._logger import Logger

from boxoffice.core.config import settings

# (file name, minimum level, retention); None keeps rotated files forever.
_DEBUG_SINKS = (
    ("trace.log", "TRACE", "3 days"),
    ("debug.log", "DEBUG", "7 days"),
)
_SINKS = (
    ("error.log", "ERROR", "30 days"),
    ("info.log", "INFO", None),
)


def dynamic_formatter(record: Any) -> str:
    base = "[{time:HH:mm:ss}] [{level}] {module}:{function}:{line} - {message}"

    extras = record.get("extra", {})
    if extras:
        pairs = ", ".join(f"{key}={value}" for key, value in extras.items())
        base += f" ({pairs})"
    base += "\n"

    if record["exception"]:
        base += "{exception}"

    return base


def dynamic_console_formatter(record: Any) -> str:
    base = "[<green>{time:HH:mm:ss}</green>] <level>[{level}]</level> {module}:{function}:<blue>{line}</blue> - {message}\n"

    if record["exception"]:
        base += "{exception}"

    return base


def setup_logger(name: str, log_dir: str | None = None) -> Logger:
    """
    Replace loguru's default handler with per-level file sinks and a console sink.

    Files go to ``<log_dir>/<date>/<name>/`` and rotate daily at midnight,
    compressed. Trace and debug files are only written when DEBUG is on.
    """
    today = datetime.now(pytz.timezone(settings.TIMEZONE)).strftime("%Y-%m-%d")
    log_path = os.path.join(log_dir or settings.LOG_DIR, today, name)
    os.makedirs(log_path, exist_ok=True)

    logger.remove()  # Remove default handler

    sinks = (_DEBUG_SINKS + _SINKS) if settings.DEBUG else _SINKS
    for file_name, level, retention in sinks:
        logger.add(
            os.path.join(log_path, file_name),
            format=dynamic_formatter,
            level=level,
            rotation="00:00",
            compression="zip",
            enqueue=True,
            backtrace=True,
            diagnose=True,
            retention=retention,
        )

    logger.add(
        sys.stderr,
        format=dynamic_console_formatter,
        level="DEBUG" if settings.DEBUG else "INFO",
        enqueue=True,
        backtrace=True,
        diagnose=True,
        colorize=True,
    )

    return logger  # type: ignore
