"""Test helper utilities for Rokugan simulation tests."""

from .card_helpers import (
    create_test_card,
    create_test_character,
    create_test_spell,
    create_test_event,
    create_test_attachment
)
from .game_test_base import GameTestBase, EventRecorder

__all__ = [
    'create_test_card',
    'create_test_character',
    'create_test_spell',
    'create_test_event',
    'create_test_attachment',
    'GameTestBase',
    'EventRecorder'
]
