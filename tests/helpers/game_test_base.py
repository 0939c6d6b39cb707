"""Base class for Game integration tests with proper setup and utilities."""

from typing import List

from rokugan_sim.engine.event_system import Event, EventKey
from rokugan_sim.engine.game import Game, GameOptions
from rokugan_sim.engine.steps import ActionWindow
from rokugan_sim.models.cards.draw_card import DrawCard, Location
from rokugan_sim.models.game.player import Player


class EventRecorder:
    """Subscribes to events and remembers what it saw."""

    def __init__(self, game: Game, *names: EventKey):
        self.events: List[Event] = []
        for name in names:
            game.dispatcher.subscribe(name, self, self.events.append)

    def names(self) -> List[str]:
        return [event.name for event in self.events]


class GameTestBase:
    """Base class for integration tests using Game with proper setup.
    
    This class provides:
    - A Game with two seated players, Alice (first player) and Bob
    - Hooks to place cards before the game is initialised
    - Helpers to pass through action windows and reach a phase
    """

    starting_hand_size = 0

    def setup_method(self):
        """Set up test game with players and run it to the first prompt."""
        self.game = Game(options=GameOptions(starting_hand_size=self.starting_hand_size))
        self.player1 = Player("Alice", first_player=True)
        self.player2 = Player("Bob")
        self.game.add_player(self.player1)
        self.game.add_player(self.player2)

        self.place_starting_cards()
        self.game.initialise()

    def place_starting_cards(self):
        """Override to put cards in zones before the game starts."""
        pass

    def put_into_play(self, player: Player, card: DrawCard) -> DrawCard:
        """Put a card into play for a player after the game has started."""
        card.owner = card.owner or player
        card.setup_abilities(self.game)
        player.move_card(card, Location.PLAY_AREA)
        return card

    def put_into_hand(self, player: Player, card: DrawCard) -> DrawCard:
        card.owner = card.owner or player
        card.setup_abilities(self.game)
        player.move_card(card, Location.HAND)
        return card

    def attach_to(self, player: Player, attachment: DrawCard, host: DrawCard) -> DrawCard:
        """Put an attachment into play on a host without going through the prompt."""
        attachment.owner = attachment.owner or player
        attachment.setup_abilities(self.game)
        assert player.attach(attachment, host)
        return attachment

    @property
    def active_step(self):
        return self.game.pipeline.get_active_step()

    def pass_action_window(self):
        """Pass with whichever player holds the open action window."""
        window = self.active_step
        assert isinstance(window, ActionWindow), f"Expected an action window, got {window!r}"
        assert self.game.menu_button(window.player.name, None, 'pass')

    def advance_to_phase(self, phase_name: str, max_attempts: int = 50):
        """Pass action windows until the named phase is under way."""
        attempts = 0
        while self.game.current_phase != phase_name and attempts < max_attempts:
            self.pass_action_window()
            attempts += 1

        if self.game.current_phase != phase_name:
            raise RuntimeError(f"Failed to reach {phase_name} phase after {max_attempts} attempts")
