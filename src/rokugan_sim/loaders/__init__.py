"""Data loaders for Rokugan simulation."""

from .card_catalogue import CardCatalogue, CardData, CardDataError

__all__ = ["CardCatalogue", "CardData", "CardDataError"]
