"""Registry mapping card ids to their ability implementations."""

from typing import Any, Callable, Dict, List, Type, TYPE_CHECKING

from .base_ability import CardAbility

if TYPE_CHECKING:
    from ..cards.draw_card import DrawCard

# Global registry of ability classes by card id
_CARD_ABILITY_REGISTRY: Dict[str, List[Type[CardAbility]]] = {}


def register_card_ability(card_id: str) -> Callable[[Type[CardAbility]], Type[CardAbility]]:
    """Decorator to register an ability class for a card id."""
    def decorator(ability_class: Type[CardAbility]) -> Type[CardAbility]:
        classes = _CARD_ABILITY_REGISTRY.setdefault(card_id, [])
        if ability_class not in classes:
            classes.append(ability_class)
        return ability_class
    return decorator


def create_abilities(card: 'DrawCard', game: Any) -> List[CardAbility]:
    """Instantiate every ability registered for the card's id."""
    return [ability_class(card, game) for ability_class in _CARD_ABILITY_REGISTRY.get(card.card_id, [])]


class CardAbilityRegistry:
    """Read access to the registered ability implementations."""

    @staticmethod
    def get_registered_abilities() -> Dict[str, List[Type[CardAbility]]]:
        return {card_id: list(classes) for card_id, classes in _CARD_ABILITY_REGISTRY.items()}

    @staticmethod
    def is_ability_implemented(card_id: str) -> bool:
        return card_id in _CARD_ABILITY_REGISTRY
