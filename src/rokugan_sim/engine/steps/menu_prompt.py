"""Prompt offering a player a menu of buttons."""

from typing import Any, Dict, List, TYPE_CHECKING

from .base_step import InputKind, PromptStep
from ...utils.logging_config import get_game_logger

if TYPE_CHECKING:
    from ..game import Game

logger = get_game_logger(__name__)


class MenuPrompt(PromptStep):
    """Waits for the prompted player to pick one of the declared buttons.

    Each button names a method on the context object. Choosing a button
    calls ``context.<method>(player, arg)``; the prompt completes when that
    call returns a truthy value, and stays open otherwise.

    Properties:
        active_prompt: dict with ``menu_title`` and ``buttons`` (each a dict
            with ``text``, ``method`` and optional ``arg``)
        waiting_prompt_title: shown to the other players
    """

    accepted_inputs = frozenset({InputKind.MENU_COMMAND})

    def __init__(self, game: 'Game', player: Any, context: Any, properties: Dict[str, Any]):
        super().__init__(game, player)
        self.context = context
        self.properties = properties

    @property
    def buttons(self) -> List[Dict[str, Any]]:
        return self.properties.get('active_prompt', {}).get('buttons', [])

    @property
    def menu_title(self) -> str:
        return self.properties.get('active_prompt', {}).get('menu_title', '')

    @property
    def waiting_prompt_title(self) -> str:
        return self.properties.get('waiting_prompt_title', 'Waiting for opponent')

    def has_method_button(self, method: str) -> bool:
        return any(button.get('method') == method for button in self.buttons)

    def on_menu_command(self, player: Any, arg: Any, method: str) -> bool:
        if player is not self.player:
            return False

        handler = getattr(self.context, method, None)
        if not callable(handler) or not self.has_method_button(method):
            logger.debug("Menu prompt ignored undeclared method %s", method)
            return False

        if handler(player, arg):
            self.complete()

        return True
