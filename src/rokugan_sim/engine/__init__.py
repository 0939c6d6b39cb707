"""Engine package: step pipeline, events and the game driver."""

from .event_system import Event, EventDispatcher, EventName, DuplicateSubscriptionError
from .event_registrar import EventRegistrar
from .game_pipeline import GamePipeline, PipelineStateError
from .game import Game, GameOptions

__all__ = [
    'Event',
    'EventDispatcher',
    'EventName',
    'DuplicateSubscriptionError',
    'EventRegistrar',
    'GamePipeline',
    'PipelineStateError',
    'Game',
    'GameOptions',
]
