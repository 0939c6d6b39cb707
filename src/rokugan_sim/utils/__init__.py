"""Utility helpers for Rokugan simulation."""

from .logging_config import setup_logging, configure_from_environment, get_logger, get_game_logger

__all__ = ["setup_logging", "configure_from_environment", "get_logger", "get_game_logger"]
