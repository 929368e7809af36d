"""
Générateur de plan d'entraînement périodisé (8, 12 ou 16 semaines)
"""
import logging
import uuid
from datetime import date
from typing import Optional, Union

from badminton_coach.models import (
    TrainingPlan, PhasePlan, TrainingPhase, TrainingGoal, FitnessLevel
)
from badminton_coach.config.settings import (
    SUPPORTED_DURATIONS, BASE_VOLUME_RANGE, BASE_INTENSITY_RANGE, MINUTES_PER_TRAINING_DAY
)
from .errors import InvalidDurationError
from .phase_catalog import PHASE_DESCRIPTIONS

logger = logging.getLogger(__name__)


class PeriodizedPlanGenerator:
    """
    Génère un plan périodisé en phases base / build / peak / taper / recovery

    Répartition des phases selon la durée:
    - 8 semaines:  base 1-3, build 4-5, peak 6-7, taper 8
    - 12 semaines: base 1-4, build 5-8, peak 9-11, puis taper 12 (tournoi) ou recovery 12
    - 16 semaines: base 1-6, build 7-11, peak 12-14, taper 15, recovery 16
    """

    def __init__(
        self,
        goal: TrainingGoal,
        duration: int,
        days_per_week: int,
        fitness_level: FitnessLevel,
        competition_date: Optional[Union[str, date]] = None,
        start_date: Optional[date] = None,
        plan_id: Optional[str] = None
    ):
        if duration not in SUPPORTED_DURATIONS:
            raise InvalidDurationError(duration, SUPPORTED_DURATIONS)

        self.goal = TrainingGoal(goal)
        self.duration = duration
        self.days_per_week = days_per_week
        self.fitness_level = FitnessLevel(fitness_level)
        self.start_date = start_date or date.today()
        # Unique par plan: les semaines et la charge stockées sont indexées par cet id
        self.plan_id = plan_id or f"plan_{self.goal.value}_{uuid.uuid4().hex[:8]}"

        if isinstance(competition_date, str):
            competition_date = date.fromisoformat(competition_date)
        self.competition_date = competition_date

    def generate_plan(self) -> TrainingPlan:
        """Génère le plan complet (aucune persistance)"""
        phases = self._calculate_phases()

        plan = TrainingPlan(
            id=self.plan_id,
            name=f"{self.goal.value.capitalize()} - {self.duration} Week Plan",
            goal=self.goal,
            duration=self.duration,
            start_date=self.start_date,
            current_week=1,
            phases=phases,
            competition_date=self.competition_date,
            days_per_week=self.days_per_week,
            fitness_level=self.fitness_level,
            base_weekly_volume=self._get_base_volume()
        )

        logger.debug(
            "Plan %s: %s",
            plan.id,
            ", ".join(f"{p.phase.value}[{p.start_week}-{p.end_week}]" for p in phases)
        )
        return plan

    def _calculate_phases(self) -> list[PhasePlan]:
        """Calcule la répartition des phases"""
        if self.duration == 8:
            spans = [
                (TrainingPhase.BASE, 1, 3),
                (TrainingPhase.BUILD, 4, 5),
                (TrainingPhase.PEAK, 6, 7),
                (TrainingPhase.TAPER, 8, 8),
            ]
        elif self.duration == 12:
            # Tournoi: affûtage final, sinon récupération
            last = TrainingPhase.TAPER if self.goal == TrainingGoal.TOURNAMENT else TrainingPhase.RECOVERY
            spans = [
                (TrainingPhase.BASE, 1, 4),
                (TrainingPhase.BUILD, 5, 8),
                (TrainingPhase.PEAK, 9, 11),
                (last, 12, 12),
            ]
        else:
            spans = [
                (TrainingPhase.BASE, 1, 6),
                (TrainingPhase.BUILD, 7, 11),
                (TrainingPhase.PEAK, 12, 14),
                (TrainingPhase.TAPER, 15, 15),
                (TrainingPhase.RECOVERY, 16, 16),
            ]

        return [create_phase_plan(phase, start, end) for phase, start, end in spans]

    def _get_base_volume(self) -> float:
        """Volume hebdo de référence en minutes"""
        return self.days_per_week * MINUTES_PER_TRAINING_DAY * self.fitness_level.volume_multiplier


def create_phase_plan(phase: TrainingPhase, start_week: int, end_week: int) -> PhasePlan:
    """Construit un bloc de phase à partir du catalogue"""
    desc = PHASE_DESCRIPTIONS[phase]
    return PhasePlan(
        phase=phase,
        start_week=start_week,
        end_week=end_week,
        volume_range=(
            BASE_VOLUME_RANGE[0] * desc.volume_multiplier,
            BASE_VOLUME_RANGE[1] * desc.volume_multiplier
        ),
        intensity_range=(
            BASE_INTENSITY_RANGE[0] * desc.intensity_multiplier,
            BASE_INTENSITY_RANGE[1] * desc.intensity_multiplier
        ),
        focus=list(desc.focus),
        objectives=list(desc.objectives)
    )


# Fonction utilitaire
def generate_periodized_plan(
    goal: TrainingGoal,
    duration: int,
    days_per_week: int,
    fitness_level: FitnessLevel,
    competition_date: Optional[Union[str, date]] = None,
    start_date: Optional[date] = None,
    plan_id: Optional[str] = None
) -> TrainingPlan:
    """
    Fonction helper pour générer un plan périodisé

    Args:
        goal: Objectif (tournament, fitness, skill, competition)
        duration: Durée en semaines (8, 12 ou 16)
        days_per_week: Jours d'entraînement par semaine (3 à 6)
        fitness_level: Niveau du joueur
        competition_date: Date de compétition (ISO ou date), optionnelle
        start_date: Date de début (aujourd'hui par défaut)
        plan_id: ID du plan (généré aléatoirement par défaut)

    Returns:
        TrainingPlan avec current_week = 1

    Raises:
        InvalidDurationError: durée non supportée
    """
    generator = PeriodizedPlanGenerator(
        goal=goal,
        duration=duration,
        days_per_week=days_per_week,
        fitness_level=fitness_level,
        competition_date=competition_date,
        start_date=start_date,
        plan_id=plan_id
    )
    return generator.generate_plan()
