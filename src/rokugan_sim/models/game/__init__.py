"""Game models for Rokugan simulation."""

from .player import Player
from .conflict import Conflict, ConflictType

__all__ = [
    "Player",
    "Conflict",
    "ConflictType",
]
