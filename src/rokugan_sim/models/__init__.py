"""Rokugan simulation data models."""

from . import cards
from . import game
from . import abilities

__all__ = ["cards", "game", "abilities"]
