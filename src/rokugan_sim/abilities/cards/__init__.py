"""Card ability implementations, registered by card id on import."""

from .fire_elemental_guard import FireElementalGuard

__all__ = ["FireElementalGuard"]
