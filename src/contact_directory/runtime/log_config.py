import sys
from pathlib import Path

from loguru import logger

from src.contact_directory.runtime.settings import (
    ContactDirectorySettings,
    get_settings,
)

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(settings: ContactDirectorySettings | None = None) -> None:
    """Reset loguru and install the console sink, plus a file sink if configured."""
    settings = settings or get_settings()
    level = settings.log_level.upper()

    backtrace_on = settings.environment != "production"
    diagnose_on = settings.environment != "production"

    logger.remove()

    # Console: always colorized, human-readable
    logger.add(
        sys.stderr,
        level=level,
        format=LOG_FORMAT,
        colorize=True,
        serialize=False,
        backtrace=backtrace_on,
        diagnose=diagnose_on,
    )

    # File: JSON or plain
    if settings.log_file:
        path = Path(settings.log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        is_json_file = settings.log_format == "json"
        logger.add(
            str(path),
            level=level,
            format="{message}" if is_json_file else LOG_FORMAT,
            serialize=is_json_file,
            backtrace=backtrace_on,
            diagnose=diagnose_on,
        )

    logger.debug(
        "Logging configured (level={}, environment={})", level, settings.environment
    )
