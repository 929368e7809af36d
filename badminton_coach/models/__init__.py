"""
Models package for the badminton training coach
"""
from .session import WorkoutSession, WorkoutType
from .metrics import TrainingLoad, AcwrStatus
from .training_plan import (
    TrainingPlan, ArchivedPlan, WeeklyPlan, PhasePlan, TrainingPhase, TrainingGoal, FitnessLevel
)

__all__ = [
    # Session
    'WorkoutSession',
    'WorkoutType',

    # Metrics
    'TrainingLoad',
    'AcwrStatus',

    # Training Plan
    'TrainingPlan',
    'ArchivedPlan',
    'WeeklyPlan',
    'PhasePlan',
    'TrainingPhase',
    'TrainingGoal',
    'FitnessLevel',
]
