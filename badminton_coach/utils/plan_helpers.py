"""Fonctions utilitaires pour manipuler les plans d'entraînement."""

from datetime import date
from typing import Optional
from badminton_coach.models import TrainingPlan, PhasePlan, WeeklyPlan


def get_phase_for_week(plan: TrainingPlan, week_number: int) -> Optional[PhasePlan]:
    """
    Récupère le bloc de phase qui contient une semaine donnée.

    Returns:
        PhasePlan, ou None si aucune phase ne couvre la semaine
    """
    for phase in plan.phases:
        if phase.contains(week_number):
            return phase
    return None


def phases_cover_duration(plan: TrainingPlan) -> bool:
    """
    Vérifie que les phases sont contiguës, croissantes et couvrent exactement [1, durée].
    """
    expected_start = 1
    for phase in plan.phases:
        if phase.start_week != expected_start or phase.end_week < phase.start_week:
            return False
        expected_start = phase.end_week + 1
    return expected_start == plan.duration + 1


def get_current_week_number(plan: TrainingPlan, target_date: date) -> Optional[int]:
    """
    Retourne le numéro de semaine (1-indexed) pour une date donnée.

    Returns:
        Numéro de semaine, ou None si hors plan
    """
    days_since_start = (target_date - plan.start_date).days

    if days_since_start < 0 or days_since_start >= plan.duration * 7:
        return None

    return (days_since_start // 7) + 1


def calculate_completion_rate(weekly_plans: list[WeeklyPlan]) -> float:
    """
    Taux de séances effectuées sur l'ensemble des semaines déjà générées.

    Returns:
        Fraction 0-1 (0 si aucune séance)
    """
    total = sum(len(week.workouts) for week in weekly_plans)
    if total == 0:
        return 0.0
    completed = sum(
        sum(1 for w in week.workouts if w.completed)
        for week in weekly_plans
    )
    return completed / total


def get_week_summary(weekly_plan: WeeklyPlan) -> dict:
    """
    Retourne un résumé de la semaine (durée totale, nombre de séances, etc.).
    """
    return {
        'week_number': weekly_plan.week_number,
        'phase': weekly_plan.phase.value,
        'planned_volume': weekly_plan.planned_volume,
        'planned_intensity': weekly_plan.planned_intensity,
        'total_duration': sum(w.duration for w in weekly_plan.workouts),
        'num_sessions': len(weekly_plan.workouts),
        'completed_sessions': sum(1 for w in weekly_plan.workouts if w.completed),
        'is_deload': bool(weekly_plan.notes),
    }
