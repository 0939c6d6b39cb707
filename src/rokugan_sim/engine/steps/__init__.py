"""Schedulable step types for the game pipeline."""

from .base_step import BaseStep, PromptStep, StepStatus, InputKind
from .composite_step import CompositeStep
from .simple_step import SimpleStep
from .base_step_with_pipeline import BaseStepWithPipeline
from .phase import Phase
from .menu_prompt import MenuPrompt
from .select_card_prompt import SelectCardPrompt
from .action_window import ActionWindow

__all__ = [
    'BaseStep',
    'PromptStep',
    'StepStatus',
    'InputKind',
    'CompositeStep',
    'SimpleStep',
    'BaseStepWithPipeline',
    'Phase',
    'MenuPrompt',
    'SelectCardPrompt',
    'ActionWindow',
]
