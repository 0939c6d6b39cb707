"""Logging configuration for Rokugan Sim."""

import logging
import os
import sys
from typing import Dict, Optional, TextIO

PACKAGE_PREFIX = 'rokugan_sim.'

LOG_LEVEL_ENV = 'ROKUGAN_LOG_LEVEL'
LOG_FORMAT_ENV = 'ROKUGAN_LOG_FORMAT'

FORMATS: Dict[str, str] = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    "json": '{"time": "%(asctime)s", "logger": "%(name)s", "level": "%(levelname)s", "message": "%(message)s"}'
}


def setup_logging(level: str = "INFO", format_style: str = "simple",
                  stream: Optional[TextIO] = None) -> None:
    """
    Set up logging configuration for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: Format style - "simple", "detailed", or "json"
        stream: Where to write log lines, stdout when not given
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    log_format = FORMATS.get(format_style, FORMATS["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(stream or sys.stdout)
        ]
    )


def configure_from_environment() -> str:
    """
    Configure logging from ROKUGAN_LOG_LEVEL and ROKUGAN_LOG_FORMAT.

    Returns:
        The level name that was requested
    """
    level = os.getenv(LOG_LEVEL_ENV, 'INFO')
    setup_logging(level=level, format_style=os.getenv(LOG_FORMAT_ENV, 'simple'))
    return level


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def get_game_logger(module_name: str) -> logging.Logger:
    """
    Get a logger with a shortened name for game modules.

    Args:
        module_name: Full module name (e.g., 'rokugan_sim.engine.game_pipeline')

    Returns:
        Logger with shortened name (e.g., 'engine.game_pipeline')
    """
    if module_name.startswith(PACKAGE_PREFIX):
        module_name = module_name[len(PACKAGE_PREFIX):]
    return logging.getLogger(module_name)
