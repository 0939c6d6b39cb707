"""Game actions that abilities apply to their chosen targets."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..cards.draw_card import DrawCard

if TYPE_CHECKING:
    from .base_ability import AbilityContext


class GameAction(ABC):
    """Base class for effects applied to a card target."""

    name = "game action"

    def can_affect(self, target: DrawCard, context: 'AbilityContext') -> bool:
        return True

    @abstractmethod
    def apply(self, target: DrawCard, context: 'AbilityContext') -> None:
        """Apply this action to a target."""
        pass

    def __str__(self) -> str:
        return self.name


class DiscardFromPlayAction(GameAction):
    """Put a card in play into its owner's discard pile."""

    name = "discard from play"

    def can_affect(self, target: DrawCard, context: 'AbilityContext') -> bool:
        return target.in_play

    def apply(self, target: DrawCard, context: 'AbilityContext') -> None:
        context.game.discard_from_play(target)


class BowAction(GameAction):
    """Bow a ready card in play."""

    name = "bow"

    def can_affect(self, target: DrawCard, context: 'AbilityContext') -> bool:
        return target.in_play and not target.bowed

    def apply(self, target: DrawCard, context: 'AbilityContext') -> None:
        context.game.bow_card(target)


def discard_from_play() -> DiscardFromPlayAction:
    return DiscardFromPlayAction()


def bow() -> BowAction:
    return BowAction()
