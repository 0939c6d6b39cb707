"""Prompt asking a player to choose one or more cards."""

from typing import Any, Callable, Dict, List, TYPE_CHECKING

from .base_step import InputKind, PromptStep

if TYPE_CHECKING:
    from ..game import Game


def _always(card: Any) -> bool:
    return True


def _accept(player: Any, selection: Any) -> bool:
    return True


def _ignore_cancel(player: Any) -> None:
    pass


class SelectCardPrompt(PromptStep):
    """Waits for the prompted player to click eligible cards.

    In single select mode the first eligible click is handed to
    ``on_select(player, card)``. In multi select mode clicks toggle cards in
    and out of the selection and the "done" button hands the list to
    ``on_select(player, cards)``. Either way the prompt completes when
    ``on_select`` returns a truthy value. The "cancel" button calls
    ``on_cancel(player)`` and completes the prompt.

    Properties:
        card_condition: predicate deciding which cards may be chosen
        on_select: callback receiving the choice
        on_cancel: callback for the cancel button
        multi_select: allow several cards
        number_of_cards: maximum selection size in multi select mode, 0 for no limit
        active_prompt_title / waiting_prompt_title: prompt texts
    """

    accepted_inputs = frozenset({InputKind.CARD_CLICKED, InputKind.MENU_COMMAND})

    def __init__(self, game: 'Game', player: Any, properties: Dict[str, Any]):
        super().__init__(game, player)
        self.properties = properties
        self.card_condition: Callable[[Any], bool] = properties.get('card_condition', _always)
        self.on_select: Callable[[Any, Any], bool] = properties.get('on_select', _accept)
        self.on_cancel: Callable[[Any], Any] = properties.get('on_cancel', _ignore_cancel)
        self.multi_select: bool = properties.get('multi_select', False)
        self.number_of_cards: int = properties.get('number_of_cards', 0)
        self.selected_cards: List[Any] = []

    @property
    def active_prompt_title(self) -> str:
        return self.properties.get('active_prompt_title', 'Select a card')

    @property
    def waiting_prompt_title(self) -> str:
        return self.properties.get('waiting_prompt_title', 'Waiting for opponent')

    @property
    def buttons(self) -> List[Dict[str, str]]:
        buttons = [{'text': 'Done', 'arg': 'done'}] if self.multi_select else []
        buttons.append({'text': 'Cancel', 'arg': 'cancel'})
        return buttons

    def on_card_clicked(self, player: Any, card: Any) -> bool:
        if player is not self.player or card is None:
            return False

        if not self.card_condition(card):
            return False

        if not self.multi_select:
            self.selected_cards = [card]
            if self.on_select(player, card):
                self.complete()
            return True

        if card in self.selected_cards:
            self.selected_cards.remove(card)
            card.selected = False
        elif not self.number_of_cards or len(self.selected_cards) < self.number_of_cards:
            self.selected_cards.append(card)
            card.selected = True

        return True

    def on_menu_command(self, player: Any, arg: Any, method: str) -> bool:
        if player is not self.player:
            return False

        if arg == 'cancel':
            self._clear_selection()
            self.on_cancel(player)
            self.complete()
            return True

        if arg == 'done' and self.multi_select:
            cards = list(self.selected_cards)
            if self.on_select(player, cards):
                self._clear_selection()
                self.complete()
            return True

        return False

    def _clear_selection(self) -> None:
        for card in self.selected_cards:
            card.selected = False
        self.selected_cards = []
