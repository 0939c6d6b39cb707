"""Card record and common enums for Rokugan cards."""

from uuid import uuid4
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..game.player import Player
    from ..abilities.base_ability import CardAbility, CardAction
    from ...engine.game import Game


class CardType(Enum):
    """Card types."""
    CHARACTER = "character"
    ATTACHMENT = "attachment"
    EVENT = "event"
    HOLDING = "holding"
    PROVINCE = "province"
    STRONGHOLD = "stronghold"
    ROLE = "role"


class CardSide(Enum):
    """Which deck a card belongs to."""
    CONFLICT = "conflict"
    DYNASTY = "dynasty"


class Location(Enum):
    """Places a card can be."""
    HAND = "hand"
    CONFLICT_DECK = "conflict deck"
    DYNASTY_DECK = "dynasty deck"
    PLAY_AREA = "play area"
    CONFLICT_DISCARD_PILE = "conflict discard pile"
    DYNASTY_DISCARD_PILE = "dynasty discard pile"
    REMOVED_FROM_GAME = "removed from game"


@dataclass(eq=False)
class DrawCard:
    """A single card in a game.

    Behaviour beyond the printed values comes from the abilities attached
    by ``setup_abilities``; the card itself only answers capability
    questions (type, traits, where it is).
    """

    # Catalogue identity
    card_id: str
    name: str
    card_type: CardType
    side: CardSide = CardSide.CONFLICT
    traits: FrozenSet[str] = frozenset()
    cost: Optional[int] = None

    # Runtime state
    uuid: str = field(default_factory=lambda: str(uuid4()))
    owner: Optional['Player'] = None
    controller: Optional['Player'] = None
    location: Optional[Location] = None
    bowed: bool = False
    facedown: bool = False
    selected: bool = False
    parent: Optional['DrawCard'] = None
    attachments: List['DrawCard'] = field(default_factory=list)
    abilities: List['CardAbility'] = field(default_factory=list)
    menu: List[Dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate card data after creation."""
        if not self.card_id:
            raise ValueError("Card id cannot be empty")
        if not self.name:
            raise ValueError("Card name cannot be empty")
        if self.cost is not None and self.cost < 0:
            raise ValueError(f"Card cost cannot be negative: {self.cost}")
        self.traits = frozenset(trait.lower() for trait in self.traits)
        self._abilities_set_up = False

    # Capabilities
    def has_trait(self, trait: str) -> bool:
        return trait.lower() in self.traits

    def is_character(self) -> bool:
        return self.card_type == CardType.CHARACTER

    def is_attachment(self) -> bool:
        return self.card_type == CardType.ATTACHMENT

    def is_event(self) -> bool:
        return self.card_type == CardType.EVENT

    @property
    def in_play(self) -> bool:
        return self.location == Location.PLAY_AREA

    @property
    def discard_location(self) -> Location:
        if self.side == CardSide.DYNASTY:
            return Location.DYNASTY_DISCARD_PILE
        return Location.CONFLICT_DISCARD_PILE

    # Ability lifecycle
    def setup_abilities(self, game: 'Game') -> None:
        """Attach this card's abilities from the ability registry. Runs once."""
        if self._abilities_set_up:
            return
        from ..abilities.registry import create_abilities
        self.abilities.extend(create_abilities(self, game))
        self._abilities_set_up = True
        self.update_abilities()

    def update_abilities(self) -> None:
        """Switch each ability on or off to match the card's current location."""
        for ability in self.abilities:
            if self.location in ability.activation_locations:
                ability.activate()
            else:
                ability.deactivate()

    def deactivate_abilities(self) -> None:
        for ability in self.abilities:
            ability.deactivate()

    def get_actions(self) -> List['CardAction']:
        return [action for ability in self.abilities for action in ability.actions]

    def on_click(self, player: 'Player') -> bool:
        """Use the first action the player may currently initiate."""
        for action in self.get_actions():
            if action.can_initiate(player):
                return action.initiate(player)
        return False

    # Menu
    def has_menu_item(self, method: str) -> bool:
        return any(item.get('method') == method for item in self.menu)

    def get_menu_handler(self, method: str) -> Optional[Callable[['Player', Any], Any]]:
        """Find the declared menu method on the card or one of its abilities."""
        if not self.has_menu_item(method):
            return None
        for target in (self, *self.abilities):
            handler = getattr(target, method, None)
            if callable(handler):
                return handler
        return None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"DrawCard(id='{self.card_id}', name='{self.name}', uuid='{self.uuid}')"
