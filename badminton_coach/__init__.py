"""
Badminton training coach: periodized plans, weekly schedules and training load
"""
from .core.errors import (
    PeriodizationError, InvalidDurationError, InvalidWeekError, WorkoutNotFoundError, PlanStoreError
)
from .core.phase_catalog import get_phase_recommendations
from .core.plan_generator import generate_periodized_plan
from .core.weekly_planner import generate_weekly_plan
from .core.plan_adapter import adjust_plan_difficulty
from .utils.training_load import calculate_training_load, calculate_acwr, compute_load_history
from .utils.plan_persistence import PlanStore

__version__ = "1.0.0"

__all__ = [
    'generate_periodized_plan',
    'generate_weekly_plan',
    'calculate_training_load',
    'calculate_acwr',
    'compute_load_history',
    'adjust_plan_difficulty',
    'get_phase_recommendations',
    'PlanStore',

    # Errors
    'PeriodizationError',
    'InvalidDurationError',
    'InvalidWeekError',
    'WorkoutNotFoundError',
    'PlanStoreError',
]
