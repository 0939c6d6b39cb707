"""Named game phase."""

from typing import Iterable, TYPE_CHECKING

from .base_step import BaseStep
from .base_step_with_pipeline import BaseStepWithPipeline
from .simple_step import SimpleStep
from ..event_system import EventName

if TYPE_CHECKING:
    from ..game import Game


class Phase(BaseStepWithPipeline):
    """A composite step bracketed by phase start and end notifications."""

    def __init__(self, game: 'Game', name: str, steps: Iterable[BaseStep] = ()):
        super().__init__(game)
        self.name = name
        self.initialise(steps)

    def initialise(self, steps: Iterable[BaseStep]) -> None:
        start_step = SimpleStep(self.game, self.start_phase, f"start {self.name}")
        end_step = SimpleStep(self.game, self.end_phase, f"end {self.name}")
        self.pipeline.initialise([start_step, *steps, end_step])

    def start_phase(self) -> None:
        self.game.current_phase = self.name
        self.game.raise_event(EventName.PHASE_STARTED, phase=self.name)

    def end_phase(self) -> None:
        self.game.raise_event(EventName.PHASE_ENDED, phase=self.name)
        self.game.current_phase = ''

    def __repr__(self) -> str:
        return f"Phase({self.name!r}, status={self.status.value})"
