"""Card abilities and the player actions they expose."""

from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, List, Optional, Tuple, TYPE_CHECKING

from .game_actions import GameAction
from ..cards.draw_card import CardType, DrawCard, Location
from ...engine.event_registrar import EventRegistrar
from ...engine.event_system import EventKey

if TYPE_CHECKING:
    from ..game.player import Player
    from ...engine.game import Game


@dataclass
class AbilityContext:
    """Who is using which ability of which card."""
    game: 'Game'
    source: DrawCard
    player: 'Player'
    ability: 'CardAbility'


@dataclass
class TargetSpec:
    """Which cards an action may target and what happens to the chosen one."""
    game_action: GameAction
    card_type: Optional[CardType] = None
    card_condition: Optional[Callable[[DrawCard, AbilityContext], bool]] = None

    def matches(self, card: DrawCard, context: AbilityContext) -> bool:
        if self.card_type is not None and card.card_type != self.card_type:
            return False
        if self.card_condition is not None and not self.card_condition(card, context):
            return False
        return self.game_action.can_affect(card, context)


class CardAction:
    """A player-initiated action offered by an ability.

    The action is only available to the card's controller while its
    ability is active, its condition holds, and (if it targets) at least
    one legal target exists. Targeted actions prompt the player to pick
    the target and apply the game action to it.
    """

    def __init__(self,
                 ability: 'CardAbility',
                 title: str,
                 condition: Optional[Callable[[AbilityContext], bool]] = None,
                 target: Optional[TargetSpec] = None,
                 handler: Optional[Callable[[AbilityContext], Any]] = None):
        if target is None and handler is None:
            raise ValueError(f"Action '{title}' needs a target or a handler")
        self.ability = ability
        self.title = title
        self.condition = condition
        self.target = target
        self.handler = handler

    def create_context(self, player: 'Player') -> AbilityContext:
        return AbilityContext(game=self.ability.game, source=self.ability.card,
                              player=player, ability=self.ability)

    def get_legal_targets(self, context: AbilityContext) -> List[DrawCard]:
        if self.target is None:
            return []
        return [card for card in context.game.get_cards_in_play() if self.target.matches(card, context)]

    def can_initiate(self, player: 'Player') -> bool:
        card = self.ability.card
        if not self.ability.active or player is not card.controller:
            return False

        context = self.create_context(player)
        if self.condition is not None and not self.condition(context):
            return False
        if self.target is not None and not self.get_legal_targets(context):
            return False
        return True

    def initiate(self, player: 'Player') -> bool:
        if not self.can_initiate(player):
            return False

        context = self.create_context(player)
        game = context.game
        if self.target is None:
            game.add_message('{0} uses {1}', player, context.source)
            self.handler(context)
            return True

        def on_select(choosing_player: 'Player', card: DrawCard) -> bool:
            game.add_message('{0} uses {1} to {2} {3}', choosing_player, context.source,
                             self.target.game_action, card)
            self.target.game_action.apply(card, context)
            return True

        game.prompt_for_select(player, {
            'active_prompt_title': self.title,
            'waiting_prompt_title': 'Waiting for opponent to use {0}'.format(context.source),
            'card_condition': lambda card: self.target.matches(card, context),
            'on_select': on_select,
        })
        return True

    def __str__(self) -> str:
        return self.title


class CardAbility:
    """Behaviour attached to a card when the game sets it up.

    Subclasses list the events they react to in ``events`` and implement a
    method per event named after the event's value. The ability is live
    while its card is in one of ``activation_locations``; the card's
    movement switches it on and off, and switching off discards whatever
    the ability had accumulated.
    """

    events: Tuple[EventKey, ...] = ()
    activation_locations: FrozenSet[Location] = frozenset({Location.PLAY_AREA})

    def __init__(self, card: DrawCard, game: 'Game'):
        self.card = card
        self.game = game
        self.actions: List[CardAction] = []
        self.event_registrar = EventRegistrar(game.dispatcher, self)
        self._active = False
        self.setup()

    def setup(self) -> None:
        """Declare actions and initial state."""
        pass

    def reset(self) -> None:
        """Forget any accumulated state."""
        pass

    @property
    def active(self) -> bool:
        return self._active

    def activate(self) -> None:
        if self._active:
            return
        self._active = True
        self.event_registrar.register(self.events)

    def deactivate(self) -> None:
        if not self._active:
            return
        self._active = False
        self.event_registrar.unregister_all()
        self.reset()

    def action(self, title: str,
               condition: Optional[Callable[[AbilityContext], bool]] = None,
               target: Optional[TargetSpec] = None,
               handler: Optional[Callable[[AbilityContext], Any]] = None) -> CardAction:
        card_action = CardAction(self, title, condition=condition, target=target, handler=handler)
        self.actions.append(card_action)
        return card_action

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(card='{self.card.name}')"
