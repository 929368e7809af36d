"""
Modèle de données pour le plan d'entraînement périodisé
"""
from pydantic import BaseModel, Field, model_validator
from datetime import date, datetime
from typing import Optional
from enum import Enum

from badminton_coach.core.errors import WorkoutNotFoundError
from .session import WorkoutSession


class TrainingGoal(str, Enum):
    """Objectif du plan"""
    TOURNAMENT = "tournament"
    FITNESS = "fitness"
    SKILL = "skill"
    COMPETITION = "competition"


class FitnessLevel(str, Enum):
    """Niveau du joueur"""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"

    @property
    def volume_multiplier(self) -> float:
        return _LEVEL_MULTIPLIERS[self]


_LEVEL_MULTIPLIERS = {
    FitnessLevel.BEGINNER: 0.7,
    FitnessLevel.INTERMEDIATE: 1.0,
    FitnessLevel.ADVANCED: 1.2,
    FitnessLevel.ELITE: 1.5,
}


class TrainingPhase(str, Enum):
    """Phases d'un plan d'entraînement"""
    BASE = "base"
    BUILD = "build"
    PEAK = "peak"
    TAPER = "taper"
    RECOVERY = "recovery"


class PhasePlan(BaseModel):
    """Bloc de semaines consécutives dans une même phase"""
    phase: TrainingPhase
    start_week: int = Field(..., ge=1)
    end_week: int = Field(..., ge=1)
    volume_range: tuple[float, float] = Field(..., description="Volume min/max (heures/semaine)")
    intensity_range: tuple[float, float] = Field(..., description="Intensité min/max (1-10)")
    focus: list[str] = Field(default_factory=list)
    objectives: list[str] = Field(default_factory=list)

    @model_validator(mode='after')
    def check_bounds(self):
        if self.start_week > self.end_week:
            raise ValueError(f"Phase {self.phase.value}: semaine de début {self.start_week} > fin {self.end_week}")
        for name, (low, high) in (('volume_range', self.volume_range), ('intensity_range', self.intensity_range)):
            if low > high:
                raise ValueError(f"Phase {self.phase.value}: {name} inversée ({low} > {high})")
        return self

    @property
    def length(self) -> int:
        """Nombre de semaines de la phase"""
        return self.end_week - self.start_week + 1

    def contains(self, week_number: int) -> bool:
        return self.start_week <= week_number <= self.end_week


class TrainingPlan(BaseModel):
    """Plan d'entraînement périodisé (racine d'agrégat)"""
    id: str = Field(..., description="ID unique du plan")
    name: str = Field(..., description="Nom du plan")
    goal: TrainingGoal
    duration: int = Field(..., ge=1, description="Durée en semaines")
    start_date: date = Field(..., description="Date de début du plan")
    current_week: int = Field(1, ge=1)
    phases: list[PhasePlan] = Field(default_factory=list)
    competition_date: Optional[date] = Field(None, description="Date de compétition visée")
    days_per_week: int = Field(..., ge=3, le=6)
    fitness_level: FitnessLevel
    base_weekly_volume: Optional[float] = Field(None, description="Volume hebdo de référence (minutes)")

    @model_validator(mode='after')
    def check_current_week(self):
        if self.current_week > self.duration:
            raise ValueError(f"Semaine courante {self.current_week} au-delà de la durée ({self.duration})")
        return self


class WeeklyPlan(BaseModel):
    """Une semaine réalisée du plan"""
    week_number: int = Field(..., ge=1)
    phase: TrainingPhase
    planned_volume: float = Field(..., description="Volume planifié (heures)")
    planned_intensity: float = Field(..., description="Intensité planifiée (1-10)")
    actual_volume: Optional[float] = Field(None, description="Volume réel (heures)")
    actual_intensity: Optional[float] = Field(None, description="Intensité réelle (RPE moyen)")
    workouts: list[WorkoutSession] = Field(default_factory=list)
    completed: bool = Field(False)
    notes: str = Field("")
    training_load: Optional[float] = Field(None)

    def get_workout(self, workout_id: str) -> Optional[WorkoutSession]:
        for workout in self.workouts:
            if workout.id == workout_id:
                return workout
        return None

    def record_workout_completion(self, workout_id: str, actual_duration: float, rpe: int) -> WorkoutSession:
        """
        Enregistre une séance effectuée et recalcule les métriques réelles de la semaine

        Args:
            workout_id: ID de la séance
            actual_duration: Durée réelle en minutes
            rpe: Effort perçu (1-10)

        Returns:
            La séance mise à jour
        """
        workout = self.get_workout(workout_id)
        if workout is None:
            raise WorkoutNotFoundError(workout_id, self.week_number)

        workout.mark_as_completed(actual_duration, rpe)

        done = [w for w in self.workouts if w.completed]
        if done:
            self.actual_volume = sum(w.actual_duration or 0 for w in done) / 60
            self.actual_intensity = sum(w.rpe or 0 for w in done) / len(done)
        self.completed = all(w.completed for w in self.workouts)
        return workout

    def get_completion_rate(self) -> float:
        """Taux de complétion de la semaine (0-1)"""
        if not self.workouts:
            return 0.0
        return sum(1 for w in self.workouts if w.completed) / len(self.workouts)


class ArchivedPlan(TrainingPlan):
    """Plan archivé dans l'historique"""
    completed_date: datetime = Field(..., description="Date d'archivage")
