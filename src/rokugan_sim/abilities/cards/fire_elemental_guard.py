"""Fire Elemental Guard - Action: During a conflict, if you have played 3 or more spells this conflict, choose an attachment - discard that attachment."""

from typing import Dict

from ...engine.event_system import Event, EventName
from ...models.abilities import AbilityContext, CardAbility, TargetSpec, discard_from_play, register_card_ability
from ...models.cards.draw_card import CardType
from ...models.game.player import Player


@register_card_ability("fire-elemental-guard")
class FireElementalGuard(CardAbility):
    """Counts spells each player plays during the current conflict.

    The count is kept per player object and starts over when a conflict
    finishes or the card leaves play.
    """

    events = (EventName.CONFLICT_FINISHED, EventName.CARD_PLAYED)
    spells_required = 3

    def setup(self) -> None:
        self.spells_played_this_conflict: Dict[Player, int] = {}
        self.action(
            title='Discard an attachment',
            condition=self.has_played_enough_spells,
            target=TargetSpec(card_type=CardType.ATTACHMENT, game_action=discard_from_play())
        )

    def has_played_enough_spells(self, context: AbilityContext) -> bool:
        return self.spells_played_this_conflict.get(context.player, 0) >= self.spells_required

    def reset(self) -> None:
        self.spells_played_this_conflict.clear()

    def on_conflict_finished(self, event: Event) -> None:
        self.reset()

    def on_card_played(self, event: Event) -> None:
        if self.game.is_during_conflict() and event.card.has_trait('spell'):
            player = event.player
            self.spells_played_this_conflict[player] = self.spells_played_this_conflict.get(player, 0) + 1
