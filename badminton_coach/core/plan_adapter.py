"""
Ajustement adaptatif de la difficulté du plan selon l'assiduité
"""
import logging

from badminton_coach.models import TrainingPlan, PhasePlan
from badminton_coach.config.settings import (
    BASE_VOLUME_RANGE,
    COMPLETION_RATE_LOW, COMPLETION_RATE_HIGH,
    DIFFICULTY_DECREASE_FACTOR, DIFFICULTY_INCREASE_FACTOR,
    DIFFICULTY_MIN_SCALE, DIFFICULTY_MAX_SCALE
)
from .phase_catalog import PHASE_DESCRIPTIONS

logger = logging.getLogger(__name__)


def get_adjustment_factor(completion_rate: float) -> float:
    """
    Facteur d'ajustement du volume

    < 60% de séances effectuées: -10%, > 90%: +5%, sinon inchangé (bornes strictes).
    """
    if not 0.0 <= completion_rate <= 1.0:
        raise ValueError(f"Taux de complétion hors [0, 1]: {completion_rate}")

    if completion_rate < COMPLETION_RATE_LOW:
        return DIFFICULTY_DECREASE_FACTOR
    if completion_rate > COMPLETION_RATE_HIGH:
        return DIFFICULTY_INCREASE_FACTOR
    return 1.0


def adjust_plan_difficulty(plan: TrainingPlan, completion_rate: float) -> TrainingPlan:
    """
    Met à l'échelle les plages de volume de toutes les phases

    Les ajustements successifs se cumulent, dans la limite de
    DIFFICULTY_MIN_SCALE / DIFFICULTY_MAX_SCALE du volume de référence de la phase.
    Les semaines déjà générées ne sont pas modifiées.

    Args:
        plan: Plan à ajuster (modifié sur place)
        completion_rate: Fraction 0-1 des séances effectuées

    Returns:
        Le même plan
    """
    factor = get_adjustment_factor(completion_rate)
    if factor == 1.0:
        return plan

    for phase_plan in plan.phases:
        phase_plan.volume_range = _scaled_range(phase_plan, factor)

    logger.info(
        "Plan %s: volume ajusté x%.2f (complétion %.0f%%)",
        plan.id, factor, completion_rate * 100
    )
    return plan


def _scaled_range(phase_plan: PhasePlan, factor: float) -> tuple[float, float]:
    """Applique le facteur, borné autour du volume de référence du catalogue"""
    multiplier = PHASE_DESCRIPTIONS[phase_plan.phase].volume_multiplier
    scaled = []
    for current, reference in zip(phase_plan.volume_range, BASE_VOLUME_RANGE):
        baseline = reference * multiplier
        value = current * factor
        # Borne uniquement dans le sens de l'ajustement
        if factor < 1.0:
            value = min(current, max(baseline * DIFFICULTY_MIN_SCALE, value))
        else:
            value = max(current, min(baseline * DIFFICULTY_MAX_SCALE, value))
        scaled.append(value)
    return scaled[0], scaled[1]
