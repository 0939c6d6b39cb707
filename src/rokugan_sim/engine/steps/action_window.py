"""Prompt giving players alternating opportunities to act."""

from typing import Any, TYPE_CHECKING

from .base_step import InputKind, PromptStep

if TYPE_CHECKING:
    from ..game import Game


class ActionWindow(PromptStep):
    """Players take turns to act or pass, starting with the first player.

    Passing hands the window to the next player; the window closes once
    every player has passed in a row. Taking an action resets the run of
    passes. Card clicks are not consumed here, so players act through the
    game's normal click handling while the window is open.
    """

    accepted_inputs = frozenset({InputKind.MENU_COMMAND})

    def __init__(self, game: 'Game', title: str):
        self.players = game.get_players_in_first_player_order()
        super().__init__(game, self.players[0] if self.players else None)
        self.title = title
        self.consecutive_passes = 0

    def continue_execution(self) -> bool:
        if not self.players:
            self.complete()
        return super().continue_execution()

    @property
    def buttons(self):
        return [{'text': 'Pass', 'method': 'pass'}]

    def on_menu_command(self, player: Any, arg: Any, method: str) -> bool:
        if player is not self.player or method != 'pass':
            return False

        self.consecutive_passes += 1
        if self.consecutive_passes >= len(self.players):
            self.complete()
        else:
            self._next_player()
        return True

    def action_taken(self, player: Any) -> None:
        """Record that the player holding the window acted instead of passing."""
        if player is not self.player or self.is_complete():
            return
        self.consecutive_passes = 0
        self._next_player()

    def _next_player(self) -> None:
        index = self.players.index(self.player)
        self.player = self.players[(index + 1) % len(self.players)]

    def __repr__(self) -> str:
        return f"ActionWindow({self.title!r}, status={self.status.value})"
