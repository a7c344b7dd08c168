"""
Logging setup.

Configures loguru and routes standard library logging (used by
python-telegram-bot and httpx) into it.
"""

import logging
import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]: <14}</cyan> | <level>{message}</level>"
)

# Standard library loggers redirected to loguru
INTERCEPTED_LOGGERS = ("telegram", "httpx")


class InterceptHandler(logging.Handler):
    """Intercept standard logging and redirect to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding loguru level
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.bind(module=record.name).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(level: str = "INFO") -> None:
    """
    Configure loguru output and stdlib interception.

    Args:
        level: Minimum level to emit
    """
    logger.configure(extra={"module": "Bot"})
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)

    for name in INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
