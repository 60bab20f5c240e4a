import logging
import sys

import structlog
from loguru import logger as loguru_logger

from .config import settings

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def get_logger(service_name: str, level: str = settings.log_level):
    """
    structlog logger rendering JSON events into loguru.
    Binds its own processors, global structlog config is left alone.
    """
    return structlog.wrap_logger(
        loguru_logger,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.ExceptionRenderer(),
            structlog.processors.JSONRenderer(),
        ],
    ).bind(service=service_name)


def setup_logger(service_name: str, level: str = settings.log_level):
    """
    Opt-in for applications: replaces loguru's sinks with a colored stdout sink
    and returns a logger for the given service.
    """
    loguru_logger.remove()
    loguru_logger.add(
        sys.stdout,
        level=level.upper(),
        colorize=True,
        enqueue=True,
        backtrace=True,
        diagnose=True,
        format=LOG_FORMAT,
    )
    return get_logger(service_name, level)


logger = get_logger("spl_token_metadata")
