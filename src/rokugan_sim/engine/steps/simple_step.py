"""Leaf step wrapping a single callable."""

from typing import Any, Callable, TYPE_CHECKING

from .base_step import BaseStep, StepStatus

if TYPE_CHECKING:
    from ..game import Game


class SimpleStep(BaseStep):
    """Runs its handler once and completes."""

    def __init__(self, game: 'Game', handler: Callable[[], Any], description: str = ""):
        super().__init__(game)
        self.handler = handler
        self.description = description or getattr(handler, '__name__', 'step')
        self.result: Any = None

    def continue_execution(self) -> bool:
        if self.is_complete():
            return True

        self.status = StepStatus.RUNNING
        self.result = self.handler()
        self.status = StepStatus.COMPLETED
        return True

    def __repr__(self) -> str:
        return f"SimpleStep({self.description!r}, status={self.status.value})"
