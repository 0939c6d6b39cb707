"""Ability framework for Rokugan simulation."""

from .base_ability import AbilityContext, CardAbility, CardAction, TargetSpec
from .game_actions import GameAction, DiscardFromPlayAction, BowAction, discard_from_play, bow
from .registry import register_card_ability, create_abilities, CardAbilityRegistry

__all__ = [
    "AbilityContext",
    "CardAbility",
    "CardAction",
    "TargetSpec",
    "GameAction",
    "DiscardFromPlayAction",
    "BowAction",
    "discard_from_play",
    "bow",
    "register_card_ability",
    "create_abilities",
    "CardAbilityRegistry",
]
