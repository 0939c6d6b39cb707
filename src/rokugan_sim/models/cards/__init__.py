"""Card models for Rokugan simulation."""

from .draw_card import DrawCard, CardType, CardSide, Location

__all__ = [
    "DrawCard",
    "CardType",
    "CardSide",
    "Location",
]
