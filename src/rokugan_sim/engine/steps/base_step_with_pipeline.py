"""Composite step backed by its own pipeline."""

from typing import Any, Iterable, Optional, TYPE_CHECKING

from .base_step import BaseStep, InputKind, StepStatus
from .composite_step import CompositeStep

if TYPE_CHECKING:
    from ..game import Game


class BaseStepWithPipeline(CompositeStep):
    """A step whose children run in a nested pipeline.

    The step is complete once every child has completed, which is the
    moment its pipeline drains.
    """

    def __init__(self, game: 'Game', steps: Optional[Iterable[BaseStep]] = None):
        super().__init__(game)
        from ..game_pipeline import GamePipeline
        self.pipeline = GamePipeline()
        if steps is not None:
            self.pipeline.initialise(steps)

    def queue_step(self, step: BaseStep) -> None:
        self.pipeline.queue_step(step)

    def continue_execution(self) -> bool:
        if self.status == StepStatus.CANCELLED:
            return True

        self.status = StepStatus.RUNNING
        if self.pipeline.continue_execution():
            self.status = StepStatus.COMPLETED
            return True

        if self.pipeline.is_awaiting_input():
            self.status = StepStatus.WAITING_FOR_INPUT
        return False

    def is_complete(self) -> bool:
        return super().is_complete() or self.pipeline.is_empty()

    @property
    def awaiting_input(self) -> bool:
        return not self.is_complete() and self.pipeline.is_awaiting_input()

    def accepts(self, kind: InputKind) -> bool:
        step = self.pipeline.current_step
        return step is not None and step.accepts(kind)

    def on_card_clicked(self, player: Any, card: Any) -> bool:
        return self.pipeline.handle_card_clicked(player, card)

    def on_menu_command(self, player: Any, arg: Any, method: str) -> bool:
        return self.pipeline.handle_menu_command(player, arg, method)

    def cancel_step(self) -> None:
        self.pipeline.discard_active_step()

    def get_active_step(self) -> Optional[BaseStep]:
        return self.pipeline.get_active_step()
