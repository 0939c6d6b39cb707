"""Rokugan simulation package."""

__version__ = "0.1.0"

# Set up logging configuration on import
from .utils.logging_config import configure_from_environment

# Defaults to INFO, overridden by ROKUGAN_LOG_LEVEL / ROKUGAN_LOG_FORMAT
configure_from_environment()

from . import models
from . import engine
from . import abilities
from . import loaders
from . import utils

__all__ = ["models", "engine", "abilities", "loaders", "utils"]
