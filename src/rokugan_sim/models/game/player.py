"""Player model for Rokugan simulation."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, TYPE_CHECKING

from ..cards.draw_card import DrawCard, Location

if TYPE_CHECKING:
    from ...engine.game import Game


@dataclass(eq=False)
class Player:
    """A seat at the table and the cards it owns.

    Players compare and hash by identity, so they can key per-player state
    without relying on display names.
    """
    name: str
    first_player: bool = False
    game: Optional['Game'] = None

    # Card zones
    hand: List[DrawCard] = field(default_factory=list)
    conflict_deck: List[DrawCard] = field(default_factory=list)
    dynasty_deck: List[DrawCard] = field(default_factory=list)
    cards_in_play: List[DrawCard] = field(default_factory=list)
    conflict_discard_pile: List[DrawCard] = field(default_factory=list)
    dynasty_discard_pile: List[DrawCard] = field(default_factory=list)
    removed_from_game: List[DrawCard] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Player name cannot be empty")

    def zone(self, location: Location) -> List[DrawCard]:
        """The list backing a location."""
        zones: Dict[Location, List[DrawCard]] = {
            Location.HAND: self.hand,
            Location.CONFLICT_DECK: self.conflict_deck,
            Location.DYNASTY_DECK: self.dynasty_deck,
            Location.PLAY_AREA: self.cards_in_play,
            Location.CONFLICT_DISCARD_PILE: self.conflict_discard_pile,
            Location.DYNASTY_DISCARD_PILE: self.dynasty_discard_pile,
            Location.REMOVED_FROM_GAME: self.removed_from_game,
        }
        return zones[location]

    @property
    def all_cards(self) -> List[DrawCard]:
        """Every card this player owns, wherever it is."""
        cards = []
        for location in Location:
            for card in self.zone(location):
                cards.append(card)
                cards.extend(attachment for attachment in card.attachments if attachment.owner is self)
        return cards

    def initialise(self) -> None:
        """Take ownership of the starting cards and set up their abilities."""
        for location in Location:
            for card in self.zone(location):
                card.owner = card.owner or self
                card.controller = self
                card.location = location
        if self.game is not None:
            for card in self.all_cards:
                card.setup_abilities(self.game)

    # Lookup
    def find_card_by_uuid(self, cards: Iterable[DrawCard], card_uuid: str) -> Optional[DrawCard]:
        for card in cards:
            if card.uuid == card_uuid:
                return card
        return None

    def find_card_in_play_by_uuid(self, card_uuid: str) -> Optional[DrawCard]:
        return self.find_card_by_uuid(self.get_cards_in_play(), card_uuid)

    def find_card_by_uuid_in_any_list(self, card_uuid: str) -> Optional[DrawCard]:
        for location in Location:
            card = self.find_card_by_uuid(self.zone(location), card_uuid)
            if card is not None:
                return card
        return self.find_card_in_play_by_uuid(card_uuid)

    def get_cards_in_play(self) -> List[DrawCard]:
        """Cards this player controls in play, attachments included."""
        cards = []
        for card in self.cards_in_play:
            cards.append(card)
            cards.extend(card.attachments)
        return cards

    # Movement
    def draw_cards(self, count: int) -> List[DrawCard]:
        """Draw from the conflict deck into hand."""
        drawn = []
        for _ in range(count):
            if not self.conflict_deck:
                break
            card = self.conflict_deck[0]
            self.move_card(card, Location.HAND)
            drawn.append(card)
        return drawn

    def play_card(self, card: Optional[DrawCard]) -> bool:
        """Play a non-attachment card from hand.

        Events go to the discard pile, everything else enters play.
        Attachments need a host and go through ``attach`` instead.
        """
        if card is None or card not in self.hand or card.is_attachment():
            return False

        if card.is_event():
            self.move_card(card, card.discard_location)
        else:
            self.move_card(card, Location.PLAY_AREA)
        return True

    def attach(self, attachment: DrawCard, host: DrawCard) -> bool:
        if not attachment.is_attachment() or not host.in_play:
            return False
        self.move_card(attachment, Location.PLAY_AREA, parent=host)
        return True

    def move_card(self, card: DrawCard, location: Location, parent: Optional[DrawCard] = None) -> None:
        """Move a card to one of this player's locations.

        Leaving play tears down the card's event registrations (and discards
        its attachments) before anyone is notified; entering play sets them
        up before the enters play notification.
        """
        from ...engine.event_system import EventName

        was_in_play = card.in_play
        self._detach_from_current_location(card)

        if was_in_play and location != Location.PLAY_AREA:
            for attachment in list(card.attachments):
                attachment.owner.move_card(attachment, attachment.discard_location)
            card.controller = card.owner
            card.bowed = False

        if location == Location.PLAY_AREA and parent is not None:
            card.parent = parent
            parent.attachments.append(card)
        else:
            self.zone(location).append(card)

        if location == Location.PLAY_AREA:
            card.controller = self
        card.location = location
        card.update_abilities()

        if self.game is None:
            return
        if was_in_play and not card.in_play:
            self.game.raise_event(EventName.CARD_LEFT_PLAY, card=card, player=self)
        elif card.in_play and not was_in_play:
            self.game.raise_event(EventName.CARD_ENTERS_PLAY, card=card, player=self)

    def remove_card_from_zone(self, card: DrawCard) -> bool:
        for location in Location:
            cards = self.zone(location)
            if card in cards:
                cards.remove(card)
                return True
        return False

    def _detach_from_current_location(self, card: DrawCard) -> None:
        if card.parent is not None:
            card.parent.attachments.remove(card)
            card.parent = None
            return

        holders = [holder for holder in (card.controller, card.owner, self) if holder is not None]
        for holder in holders:
            if holder.remove_card_from_zone(card):
                return

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Player(name='{self.name}')"
