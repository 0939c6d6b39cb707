"""Card ability catalogue for Rokugan simulation."""

from . import cards

__all__ = ["cards"]
