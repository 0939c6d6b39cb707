"""Step pipeline that sequences the game's remaining work."""

from typing import Any, Iterable, List, Optional

from .steps.base_step import BaseStep, InputKind, StepStatus
from .steps.composite_step import CompositeStep
from ..utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class PipelineStateError(RuntimeError):
    """Raised when the pipeline is driven in a way that would corrupt scheduling."""
    pass


class GamePipeline:
    """Ordered, interruptible program of steps.

    The front step is the active step. Steps queued while the active step
    runs are routed into it when it is composite, otherwise they are held
    aside and spliced in directly ahead of whatever follows, so urgent work
    runs before anything queued earlier at this or an outer level.
    """

    def __init__(self):
        self._steps: List[BaseStep] = []
        self._queued: List[BaseStep] = []
        self._initialised = False

    def initialise(self, steps: Iterable[BaseStep]) -> None:
        """Seed the pipeline. May only be called once.

        Steps queued before seeding stay ahead of the seeded steps.
        """
        if self._initialised:
            raise PipelineStateError("Pipeline has already been initialised")
        self._steps.extend(steps)
        self._initialised = True

    @property
    def current_step(self) -> Optional[BaseStep]:
        return self._steps[0] if self._steps else None

    def is_empty(self) -> bool:
        return not self._steps and not self._queued

    def __len__(self) -> int:
        return len(self._steps) + len(self._queued)

    def get_active_step(self) -> Optional[BaseStep]:
        """The innermost step currently executing."""
        step = self.current_step
        if isinstance(step, CompositeStep):
            return step.get_active_step() or step
        return step

    def is_awaiting_input(self) -> bool:
        step = self.get_active_step()
        return step is not None and step.awaiting_input

    def queue_step(self, step: BaseStep) -> None:
        current = self.current_step
        if current is None:
            self._steps.insert(0, step)
        elif isinstance(current, CompositeStep):
            current.queue_step(step)
        else:
            self._queued.append(step)

    def continue_execution(self) -> bool:
        """Run steps until one waits for input or none remain.

        Returns:
            True when the pipeline has drained, False when suspended.
        """
        self._splice_queued()
        while self._steps:
            step = self._steps[0]
            if step.status == StepStatus.PENDING:
                logger.debug("Starting %r", step)

            if step.is_complete() or step.continue_execution():
                self._finish(step)
            elif not self._queued:
                return False

            self._splice_queued()

        return True

    def cancel_step(self) -> None:
        """Abandon the innermost active step and carry on from there."""
        self.discard_active_step()
        self.continue_execution()

    def discard_active_step(self) -> None:
        if not self._steps:
            return

        step = self._steps[0]
        if isinstance(step, CompositeStep) and not step.is_complete():
            step.cancel_step()
            if not step.is_complete():
                return
        else:
            step.cancel()
            logger.debug("Cancelled %r", step)

        self._steps.pop(0)

    def handle_card_clicked(self, player: Any, card: Any) -> bool:
        step = self.current_step
        if step is None or not step.accepts(InputKind.CARD_CLICKED):
            return False
        return step.on_card_clicked(player, card)

    def handle_menu_command(self, player: Any, arg: Any, method: str) -> bool:
        step = self.current_step
        if step is None or not step.accepts(InputKind.MENU_COMMAND):
            return False
        return step.on_menu_command(player, arg, method)

    def _finish(self, step: BaseStep) -> None:
        if not step.is_complete():
            step.complete()
        logger.debug("Finished %r", step)
        # The step may already have been dropped by a cancel issued from inside it
        if self._steps and self._steps[0] is step:
            self._steps.pop(0)

    def _splice_queued(self) -> None:
        if self._queued:
            self._steps = self._queued + self._steps
            self._queued = []
