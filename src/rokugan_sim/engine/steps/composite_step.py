"""Interface for steps that own nested steps."""

from abc import abstractmethod
from typing import Optional

from .base_step import BaseStep


class CompositeStep(BaseStep):
    """A step whose work is an ordered sequence of child steps.

    Pipelines route newly queued steps, player input and cancellation
    through the active composite into its children.
    """

    @abstractmethod
    def queue_step(self, step: BaseStep) -> None:
        pass

    @abstractmethod
    def cancel_step(self) -> None:
        """Discard the innermost active child step."""
        pass

    @abstractmethod
    def get_active_step(self) -> Optional[BaseStep]:
        """The innermost step currently executing, or None when empty."""
        pass
