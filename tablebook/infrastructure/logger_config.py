"""Centralized logging configuration."""

import logging
import sys

from loguru import logger as loguru_logger

from tablebook.infrastructure.config import settings

log_format = ' | '.join(
    (
        '<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>',
        '<lvl>{level:<8}</>',
        '<c>{name}:{function}:{line}</>',
        '{message}',
    )
)


class InterceptHandler(logging.Handler):
    """Handler to intercept standard logging and redirect to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        loguru_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


# Remove default handler to avoid duplicate output and use custom format
loguru_logger.remove()
loguru_logger.add(sys.stdout, format=log_format, level=settings.log_level)

if settings.log_dir is not None:
    loguru_logger.add(
        f'{settings.log_dir}/{{time:YYYY-MM-DD}}.log',
        format=log_format,
        level=settings.log_level,
        rotation='1 day',
        retention='30 days',
        compression='zip',
        enqueue=True,
    )

for logger_name in ('uvicorn', 'uvicorn.error', 'uvicorn.access', 'fastapi'):
    logging_logger = logging.getLogger(logger_name)
    logging_logger.handlers = [InterceptHandler()]
    logging_logger.propagate = False

logger = loguru_logger
