"""Card catalogue loaded from curated JSON card data."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..models.abilities.registry import CardAbilityRegistry
from ..models.cards.draw_card import CardSide, CardType, DrawCard
from ..models.game.player import Player
from ..utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class CardDataError(ValueError):
    """Raised when card data fails validation at load time."""
    pass


@dataclass(frozen=True)
class CardData:
    """Validated catalogue entry."""
    id: str
    name: str
    type: CardType
    side: CardSide
    traits: List[str] = field(default_factory=list)
    cost: Optional[int] = None


class CardCatalogue:
    """Card data indexed by id.

    The JSON is expected as ``{"cards": [{"id", "name", "type", ...}]}``.
    Every entry is checked before anything is indexed, so a catalogue either
    loads completely or raises ``CardDataError`` naming the bad entry.
    """

    def __init__(self, cards: Optional[List[CardData]] = None):
        self.cards_by_id: Dict[str, CardData] = {}
        for card in cards or []:
            self.cards_by_id[card.id] = card

    @classmethod
    def from_file(cls, cards_json_path: Union[str, Path]) -> 'CardCatalogue':
        with open(cards_json_path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise CardDataError(f"{cards_json_path} is not valid JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CardCatalogue':
        if not isinstance(data, dict) or not isinstance(data.get('cards'), list):
            raise CardDataError("Card data must be an object with a 'cards' list")

        cards = []
        seen = set()
        for index, entry in enumerate(data['cards']):
            card = cls._parse_card_data(entry, index)
            if card.id in seen:
                raise CardDataError(f"Card {index}: duplicate id '{card.id}'")
            seen.add(card.id)
            cards.append(card)

        catalogue = cls(cards)
        catalogue.check_ability_registry()
        return catalogue

    @staticmethod
    def _parse_card_data(entry: Any, index: int) -> CardData:
        if not isinstance(entry, dict):
            raise CardDataError(f"Card {index}: expected an object")

        card_id = entry.get('id')
        if not isinstance(card_id, str) or not card_id.strip():
            raise CardDataError(f"Card {index}: missing or empty 'id'")

        name = entry.get('name')
        if not isinstance(name, str) or not name.strip():
            raise CardDataError(f"Card '{card_id}': missing or empty 'name'")

        try:
            card_type = CardType(entry.get('type'))
        except ValueError:
            raise CardDataError(f"Card '{card_id}': unknown type {entry.get('type')!r}") from None

        try:
            side = CardSide(entry.get('side', CardSide.CONFLICT.value))
        except ValueError:
            raise CardDataError(f"Card '{card_id}': unknown side {entry.get('side')!r}") from None

        traits = entry.get('traits', [])
        if not isinstance(traits, list) or not all(isinstance(trait, str) for trait in traits):
            raise CardDataError(f"Card '{card_id}': 'traits' must be a list of strings")

        cost = entry.get('cost')
        if cost is not None and (isinstance(cost, bool) or not isinstance(cost, int) or cost < 0):
            raise CardDataError(f"Card '{card_id}': 'cost' must be a non-negative integer")

        return CardData(id=card_id, name=name, type=card_type, side=side,
                        traits=[trait.lower() for trait in traits], cost=cost)

    def check_ability_registry(self) -> List[str]:
        """Ability implementations whose card id is missing from the catalogue."""
        unknown = sorted(card_id for card_id in CardAbilityRegistry.get_registered_abilities()
                         if card_id not in self.cards_by_id)
        for card_id in unknown:
            logger.warning("Ability registered for '%s' but no such card is in the catalogue", card_id)
        return unknown

    def get(self, card_id: str) -> Optional[CardData]:
        return self.cards_by_id.get(card_id)

    def __len__(self) -> int:
        return len(self.cards_by_id)

    def __contains__(self, card_id: str) -> bool:
        return card_id in self.cards_by_id

    def create_card(self, card_id: str, owner: Optional[Player] = None) -> DrawCard:
        """Build a fresh card from its catalogue entry."""
        data = self.cards_by_id.get(card_id)
        if data is None:
            raise KeyError(f"Unknown card id '{card_id}'")
        return DrawCard(card_id=data.id, name=data.name, card_type=data.type, side=data.side,
                        traits=frozenset(data.traits), cost=data.cost, owner=owner, controller=owner)

    def build_deck(self, card_ids: List[str], owner: Player) -> List[DrawCard]:
        """Build cards for a deck list and place them in the owner's decks by side."""
        cards = [self.create_card(card_id, owner) for card_id in card_ids]
        for card in cards:
            if card.side == CardSide.DYNASTY:
                owner.dynasty_deck.append(card)
            else:
                owner.conflict_deck.append(card)
        return cards
