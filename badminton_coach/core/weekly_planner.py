"""
Génération de la semaine d'entraînement à partir du plan périodisé
"""
import logging

from badminton_coach.models import (
    TrainingPlan, WeeklyPlan, WorkoutSession, PhasePlan, TrainingPhase
)
from badminton_coach.config.settings import (
    DELOAD_EVERY_N_WEEKS, DELOAD_VOLUME_FACTOR, DELOAD_INTENSITY_FACTOR
)
from badminton_coach.utils.plan_helpers import get_phase_for_week
from badminton_coach.utils.training_load import calculate_training_load
from .errors import InvalidWeekError
from .phase_catalog import get_workout_template, get_drill_recommendations

logger = logging.getLogger(__name__)

DELOAD_NOTE = "Deload week - reduced volume for recovery"
DELOAD_PHASES = (TrainingPhase.BUILD, TrainingPhase.PEAK)


def is_deload_week(week_number: int, phase: TrainingPhase) -> bool:
    """
    Semaine de décharge: numéro de semaine absolu multiple de 4, en build ou peak.
    """
    return week_number % DELOAD_EVERY_N_WEEKS == 0 and phase in DELOAD_PHASES


def interpolate_targets(phase_plan: PhasePlan, week_number: int) -> tuple[float, float]:
    """
    Volume et intensité interpolés linéairement sur la durée de la phase

    Returns:
        (volume en heures, intensité 1-10), avant décharge
    """
    week_position = (week_number - phase_plan.start_week) / phase_plan.length
    vol_min, vol_max = phase_plan.volume_range
    int_min, int_max = phase_plan.intensity_range
    volume = vol_min + (vol_max - vol_min) * week_position
    intensity = int_min + (int_max - int_min) * week_position
    return volume, intensity


def schedule_capacity(phase: TrainingPhase, days_per_week: int) -> int:
    """
    Nombre de séances générées pour la semaine.

    Plafonné à la longueur du gabarit de la phase: les jours au-delà restent des jours de repos.
    """
    return min(days_per_week, len(get_workout_template(phase)))


def generate_weekly_plan(plan: TrainingPlan, week_number: int) -> WeeklyPlan:
    """
    Génère la semaine `week_number` du plan

    Args:
        plan: Plan périodisé
        week_number: Numéro de semaine (1 à plan.duration)

    Returns:
        WeeklyPlan non persisté (mêmes entrées => même résultat)

    Raises:
        InvalidWeekError: aucune phase ne couvre la semaine
    """
    phase_plan = get_phase_for_week(plan, week_number)
    if phase_plan is None:
        raise InvalidWeekError(week_number, plan.duration)

    volume, intensity = interpolate_targets(phase_plan, week_number)

    deload = is_deload_week(week_number, phase_plan.phase)
    if deload:
        volume *= DELOAD_VOLUME_FACTOR
        intensity *= DELOAD_INTENSITY_FACTOR

    workouts = _generate_workouts(plan, phase_plan, week_number, volume, intensity)

    return WeeklyPlan(
        week_number=week_number,
        phase=phase_plan.phase,
        planned_volume=volume,
        planned_intensity=intensity,
        workouts=workouts,
        completed=False,
        notes=DELOAD_NOTE if deload else "",
        training_load=calculate_training_load(volume, intensity)
    )


def _generate_workouts(
    plan: TrainingPlan,
    phase_plan: PhasePlan,
    week_number: int,
    volume: float,
    intensity: float
) -> list[WorkoutSession]:
    """Une séance par jour d'entraînement, selon le gabarit de la phase"""
    template = get_workout_template(phase_plan.phase)
    count = schedule_capacity(phase_plan.phase, plan.days_per_week)
    if count < plan.days_per_week:
        logger.debug(
            "Semaine %d (%s): %d séances pour %d jours, %d jour(s) de repos",
            week_number, phase_plan.phase.value, count, plan.days_per_week,
            plan.days_per_week - count
        )

    # Heures -> minutes, réparties sur les jours d'entraînement
    session_duration = volume / plan.days_per_week * 60
    focus = phase_plan.focus

    workouts = []
    for i in range(count):
        workout_type = template[i]
        workouts.append(WorkoutSession(
            id=f"W{week_number}_S{i + 1}",
            day=i + 1,
            type=workout_type,
            duration=session_duration,
            intensity=intensity,
            focus=focus[i % len(focus)] if focus else "",
            drills=get_drill_recommendations(workout_type),
            completed=False
        ))
    return workouts
