import sys
import logging
from typing import Optional

from loguru import logger

from team_schedule.config.settings import settings, VALID_LOG_LEVELS


class InterceptHandler(logging.Handler):
    """Routes standard logging records (httpx, httpcore) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def resolve_log_level(level: Optional[str] = None) -> str:
    """Returns the requested level, falling back to the configured one."""
    if level and level.upper() in VALID_LOG_LEVELS:
        return level.upper()
    return settings.log_level.upper()


def setup_logging(level: Optional[str] = None) -> None:
    """Configures Loguru logger based on application settings."""
    log_level = resolve_log_level(level)
    logger.remove()  # Remove default handler

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    logger.debug(f"Logging initialized with level: {log_level}")

    # httpx logs every request at INFO through the standard library
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logger.debug("Standard logging intercepted.")
