"""Game driver: turns player commands into pipeline and event operations."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple
from uuid import uuid1

from .event_system import Event, EventDispatcher, EventKey, EventName
from .game_pipeline import GamePipeline
from .steps import ActionWindow, BaseStep, MenuPrompt, Phase, SelectCardPrompt, SimpleStep
from ..models.cards.draw_card import DrawCard, Location
from ..models.game.conflict import Conflict, ConflictType
from ..models.game.player import Player
from ..utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


@dataclass
class GameOptions:
    """Table settings for a game."""
    name: str = "Rokugan"
    allow_spectators: bool = False
    setup_phase_name: str = "setup"
    round_phases: Tuple[str, ...] = ("dynasty", "draw", "conflict", "fate", "regroup")
    starting_hand_size: int = 4

    def __post_init__(self) -> None:
        if self.starting_hand_size < 0:
            raise ValueError(f"Starting hand size cannot be negative: {self.starting_hand_size}")
        if not self.round_phases:
            raise ValueError("A round needs at least one phase")


class Game:
    """Owns the pipeline and the event dispatcher for one game.

    Every command looks up its player and card first and silently does
    nothing when either is missing. After handling a command the game
    continues the pipeline so that finished prompts give way to the next
    piece of work.
    """

    def __init__(self, owner: Any = None, options: Optional[GameOptions] = None):
        self.options = options or GameOptions()
        self.id = str(uuid1())
        self.name = self.options.name
        self.owner = owner
        self.players: Dict[str, Player] = {}
        self.dispatcher = EventDispatcher()
        self.pipeline = GamePipeline()
        self.messages: List[str] = []

        self.current_phase = ''
        self.current_conflict: Optional[Conflict] = None
        self.round_number = 0
        self.started = False
        self.play_started = False
        self.finished = False

    # Messages
    def add_message(self, message: str, *args: Any) -> None:
        text = message.format(*(str(arg) for arg in args))
        self.messages.append(text)
        logger.info(text)

    # Players
    def add_player(self, player: Player) -> None:
        if player.name in self.players:
            raise ValueError(f"Player '{player.name}' is already seated")
        player.game = self
        self.players[player.name] = player

    def get_players(self) -> List[Player]:
        return list(self.players.values())

    def get_player_by_name(self, player_name: str) -> Optional[Player]:
        return self.players.get(player_name)

    def get_players_in_first_player_order(self) -> List[Player]:
        return sorted(self.get_players(), key=lambda player: not player.first_player)

    def get_first_player(self) -> Optional[Player]:
        return next((player for player in self.get_players() if player.first_player), None)

    def get_other_player(self, player: Player) -> Optional[Player]:
        return next((other for other in self.get_players() if other is not player), None)

    # Cards
    def get_cards_in_play(self) -> List[DrawCard]:
        return [card for player in self.get_players() for card in player.get_cards_in_play()]

    def find_any_card_in_play_by_uuid(self, card_uuid: str) -> Optional[DrawCard]:
        for player in self.get_players():
            card = player.find_card_in_play_by_uuid(card_uuid)
            if card is not None:
                return card
        return None

    def find_any_card_in_any_list(self, card_uuid: str) -> Optional[DrawCard]:
        for player in self.get_players():
            card = player.find_card_by_uuid_in_any_list(card_uuid)
            if card is not None:
                return card
        return None

    # Events and steps
    def raise_event(self, name: EventKey, **parameters: Any) -> Event:
        return self.dispatcher.raise_event(name, **parameters)

    def queue_step(self, step: BaseStep) -> None:
        self.pipeline.queue_step(step)

    def queue_simple_step(self, handler: Callable[[], Any], description: str = "") -> None:
        self.queue_step(SimpleStep(self, handler, description))

    def continue_execution(self) -> bool:
        return self.pipeline.continue_execution()

    def prompt_with_menu(self, player: Player, context: Any, properties: Dict[str, Any]) -> None:
        self.queue_step(MenuPrompt(self, player, context, properties))

    def prompt_for_select(self, player: Player, properties: Dict[str, Any]) -> None:
        self.queue_step(SelectCardPrompt(self, player, properties))

    # Game structure
    def initialise(self) -> None:
        """Prepare the players and run the game until the first prompt."""
        for player in self.get_players():
            player.initialise()

        self.started = True
        self.raise_event(EventName.DECKS_PREPARED)
        self.pipeline.initialise([
            Phase(self, self.options.setup_phase_name, [
                SimpleStep(self, self._choose_first_player, "choose first player"),
                SimpleStep(self, self._draw_starting_hands, "draw starting hands"),
            ]),
            SimpleStep(self, self.begin_round, "begin round")
        ])
        self.play_started = True
        self.continue_execution()

    def begin_round(self) -> None:
        self.round_number += 1
        for phase_name in self.options.round_phases:
            self.queue_step(Phase(self, phase_name, [ActionWindow(self, f"{phase_name} action window")]))
        self.queue_step(SimpleStep(self, self.begin_round, "begin round"))

        self.raise_event(EventName.BEGIN_ROUND, round_number=self.round_number)

    def _choose_first_player(self) -> None:
        players = self.get_players()
        if players and self.get_first_player() is None:
            players[0].first_player = True

    def _draw_starting_hands(self) -> None:
        for player in self.get_players_in_first_player_order():
            player.draw_cards(self.options.starting_hand_size)

    def is_during_conflict(self) -> bool:
        return self.current_conflict is not None

    def start_conflict(self, attacking_player: Player,
                       conflict_type: ConflictType = ConflictType.MILITARY) -> Conflict:
        conflict = Conflict(attacking_player=attacking_player,
                            defending_player=self.get_other_player(attacking_player),
                            conflict_type=conflict_type)
        self.current_conflict = conflict
        self.add_message('{0} declares a {1} conflict', attacking_player, conflict_type.value)
        self.raise_event(EventName.CONFLICT_DECLARED, conflict=conflict)
        return conflict

    def finish_conflict(self, winner: Optional[Player] = None) -> None:
        conflict = self.current_conflict
        if conflict is None:
            return
        conflict.winner = winner
        self.raise_event(EventName.CONFLICT_FINISHED, conflict=conflict)
        self.current_conflict = None

    def end_game(self, winner: Optional[Player] = None) -> None:
        """Finish the game and tear down every card's registrations."""
        if self.finished:
            return
        self.finished = True
        self.raise_event(EventName.GAME_ENDED, winner=winner)
        for card in self._cards_in_any_zone():
            card.deactivate_abilities()
        if winner is not None:
            self.add_message('{0} has won the game', winner)

    def _cards_in_any_zone(self) -> List[DrawCard]:
        """Every card at the table, attachments included whoever owns them."""
        cards = []
        for player in self.get_players():
            for location in Location:
                for card in player.zone(location):
                    cards.append(card)
                    cards.extend(card.attachments)
        return cards

    # Card state changes
    def bow_card(self, card: DrawCard) -> None:
        if card.bowed:
            return
        card.bowed = True
        self.raise_event(EventName.CARD_BOWED, card=card)

    def ready_card(self, card: DrawCard) -> None:
        if not card.bowed:
            return
        card.bowed = False
        self.raise_event(EventName.CARD_READIED, card=card)

    def discard_from_play(self, card: DrawCard) -> None:
        if not card.in_play:
            return
        card.owner.move_card(card, card.discard_location)
        self.raise_event(EventName.CARD_DISCARDED, card=card)

    def take_control(self, player: Player, card: DrawCard) -> None:
        old_controller = card.controller
        if old_controller is player or not card.in_play or card.parent is not None:
            return

        old_controller.cards_in_play.remove(card)
        player.cards_in_play.append(card)
        card.controller = player
        self.raise_event(EventName.CONTROL_CHANGED, card=card, old_controller=old_controller,
                         new_controller=player)

    # Player commands
    def play_card(self, player_name: str, card_uuid: str) -> None:
        player = self.get_player_by_name(player_name)
        if player is None:
            return

        card = player.find_card_by_uuid(player.hand, card_uuid)
        if card is None:
            return

        if self.pipeline.handle_card_clicked(player, card):
            self.continue_execution()
            return

        if card.is_attachment():
            self._prompt_for_attachment_host(player, card, self.pipeline.get_active_step())
        elif player.play_card(card):
            self._card_played(player, card)

        self.continue_execution()

    def _prompt_for_attachment_host(self, player: Player, attachment: DrawCard,
                                    window: Optional[BaseStep]) -> None:
        def on_select(choosing_player: Player, host: DrawCard) -> bool:
            if attachment not in choosing_player.hand or not choosing_player.attach(attachment, host):
                return False
            self._card_played(choosing_player, attachment, window)
            return True

        self.prompt_for_select(player, {
            'active_prompt_title': 'Select a character to attach {0} to'.format(attachment),
            'waiting_prompt_title': 'Waiting for opponent to attach a card',
            'card_condition': lambda card: card.is_character() and card.in_play,
            'on_select': on_select,
        })

    def _card_played(self, player: Player, card: DrawCard, window: Optional[BaseStep] = None) -> None:
        self.add_message('{0} plays {1}', player, card)
        self.raise_event(EventName.CARD_PLAYED, player=player, card=card)
        self._action_taken(player, window)

    def _action_taken(self, player: Player, window: Optional[BaseStep] = None) -> None:
        # The window that was open when the action began, if a prompt has since taken over
        step = window or self.pipeline.get_active_step()
        if isinstance(step, ActionWindow):
            step.action_taken(player)

    def process_card_clicked(self, player: Player, card: Optional[DrawCard]) -> bool:
        if self.pipeline.handle_card_clicked(player, card):
            return True

        if card is not None and card.on_click(player):
            self._action_taken(player)
            return True

        return False

    def card_clicked(self, player_name: str, card_uuid: str) -> None:
        player = self.get_player_by_name(player_name)
        if player is None:
            return

        card = self.find_any_card_in_any_list(card_uuid)
        if card is None:
            return

        if card.location == Location.HAND and card in player.hand:
            self.play_card(player.name, card_uuid)
            return

        if not self.process_card_clicked(player, card):
            if not card.facedown and card.in_play and card.controller is player:
                if card.bowed:
                    self.ready_card(card)
                    self.add_message('{0} readies {1}', player, card)
                else:
                    self.bow_card(card)
                    self.add_message('{0} bows {1}', player, card)

        self.continue_execution()

    def call_card_menu_command(self, card: DrawCard, player: Player, menu_item: Dict[str, Any]) -> None:
        handler = card.get_menu_handler(menu_item.get('method', ''))
        if handler is None:
            logger.debug("%s has no menu command %s", card, menu_item.get('method'))
            return
        handler(player, menu_item.get('arg'))

    def menu_item_click(self, player_name: str, card_uuid: str, menu_item: Dict[str, Any]) -> None:
        player = self.get_player_by_name(player_name)
        if player is None:
            return

        if menu_item.get('command') == 'click':
            self.card_clicked(player_name, card_uuid)
            return

        card = self.find_any_card_in_any_list(card_uuid)
        if card is None or not card.in_play:
            return

        if card.controller is not player and not menu_item.get('any_player'):
            return

        self.call_card_menu_command(card, player, menu_item)
        self.continue_execution()

    def menu_button(self, player_name: str, arg: Any, method: str = '') -> bool:
        player = self.get_player_by_name(player_name)
        if player is None:
            return False

        handled = self.pipeline.handle_menu_command(player, arg, method)
        self.continue_execution()
        return handled

    def cancel_prompt(self, player_name: str) -> None:
        """Skip the step currently in progress."""
        player = self.get_player_by_name(player_name)
        if player is None:
            return

        self.add_message('{0} uses /cancel-prompt to skip the current step.', player)
        self.pipeline.cancel_step()
