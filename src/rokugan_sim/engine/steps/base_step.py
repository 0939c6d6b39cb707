"""Base classes for schedulable game steps."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, FrozenSet, TYPE_CHECKING

if TYPE_CHECKING:
    from ..game import Game


class StepStatus(Enum):
    """Status of a step in execution."""
    PENDING = "pending"
    RUNNING = "running"
    WAITING_FOR_INPUT = "waiting_for_input"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class InputKind(Enum):
    """Kinds of external input a prompt step can consume."""
    CARD_CLICKED = "card_clicked"
    MENU_COMMAND = "menu_command"


class BaseStep(ABC):
    """A unit of schedulable work.

    ``continue_execution`` is called by the owning pipeline each time the
    step is the active step and returns whether the step is now complete.
    A complete step is removed by its pipeline and never resumed again.
    """

    accepted_inputs: FrozenSet[InputKind] = frozenset()

    def __init__(self, game: 'Game'):
        self.game = game
        self.status = StepStatus.PENDING

    @abstractmethod
    def continue_execution(self) -> bool:
        pass

    def is_complete(self) -> bool:
        return self.status in (StepStatus.COMPLETED, StepStatus.CANCELLED)

    @property
    def awaiting_input(self) -> bool:
        return self.status == StepStatus.WAITING_FOR_INPUT

    def accepts(self, kind: InputKind) -> bool:
        """Whether this step consumes the given kind of external input right now."""
        return kind in self.accepted_inputs and not self.is_complete()

    def complete(self) -> None:
        self.status = StepStatus.COMPLETED

    def cancel(self) -> None:
        """Finish the step without performing its remaining effect."""
        if not self.is_complete():
            self.status = StepStatus.CANCELLED

    def on_card_clicked(self, player: Any, card: Any) -> bool:
        return False

    def on_menu_command(self, player: Any, arg: Any, method: str) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status={self.status.value})"


class PromptStep(BaseStep):
    """A step that suspends the pipeline until a player supplies input.

    Subclasses declare which input kinds they consume through
    ``accepted_inputs`` and complete themselves from the matching handler.
    """

    def __init__(self, game: 'Game', player: Any):
        super().__init__(game)
        self.player = player

    def continue_execution(self) -> bool:
        if self.is_complete():
            return True

        if self.status == StepStatus.PENDING:
            self.activate()
        self.status = StepStatus.WAITING_FOR_INPUT
        return False

    def activate(self) -> None:
        """Called the first time the prompt becomes the active step."""
        pass
