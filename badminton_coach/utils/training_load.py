"""Calcul de la charge d'entraînement hebdomadaire et de l'ACWR."""

import logging
from typing import Iterable, List, Optional

from badminton_coach.config.settings import (
    ACWR_WINDOW, ACWR_OPTIMAL_MIN, ACWR_OPTIMAL_MAX, ACWR_CAUTION_MAX
)
from badminton_coach.models import TrainingLoad, AcwrStatus, WeeklyPlan

logger = logging.getLogger(__name__)


def calculate_training_load(volume: float, intensity: float) -> float:
    """
    Charge d'une semaine = volume (heures) × intensité (1-10).

    Pas d'arrondi: la valeur brute est conservée.
    """
    return volume * intensity


def calculate_acwr(recent_loads: List[float]) -> float:
    """
    Calcule l'ACWR (Acute:Chronic Workload Ratio).

    ACWR = charge de la dernière semaine / moyenne des 4 dernières semaines (incluse)

    Args:
        recent_loads: Charges hebdomadaires, de la plus ancienne à la plus récente

    Returns:
        Ratio, ou 1.0 si moins de 4 semaines ou charge chronique nulle
    """
    if len(recent_loads) < ACWR_WINDOW:
        return 1.0

    acute_load = recent_loads[-1]
    chronic_load = sum(recent_loads[-ACWR_WINDOW:]) / ACWR_WINDOW

    return acute_load / chronic_load if chronic_load > 0 else 1.0


def compute_load_history(samples: Iterable[TrainingLoad]) -> List[TrainingLoad]:
    """
    Recalcule charge totale et ACWR sur tout l'historique.

    La fenêtre glissante porte sur les 4 derniers échantillons existants
    (par position, pas par numéro de semaine): une semaine sans séance
    effectuée n'a pas d'échantillon et resserre la fenêtre.

    Args:
        samples: Échantillons hebdomadaires (un par semaine)

    Returns:
        Nouvelle liste triée par numéro de semaine
    """
    history = sorted(
        (sample.model_copy() for sample in samples),
        key=lambda s: s.week_number
    )

    for i, sample in enumerate(history):
        sample.total_load = calculate_training_load(sample.volume, sample.intensity)
        if i >= ACWR_WINDOW - 1:
            window = [s.total_load for s in history[i - ACWR_WINDOW + 1:i + 1]]
            sample.acwr = calculate_acwr(window)
        else:
            sample.acwr = None

    return history


def build_load_sample(weekly_plan: WeeklyPlan) -> Optional[TrainingLoad]:
    """
    Échantillon de charge à partir du réalisé de la semaine.

    Returns:
        TrainingLoad, ou None si aucun volume/intensité réel positif
    """
    volume = weekly_plan.actual_volume
    intensity = weekly_plan.actual_intensity
    if not volume or not intensity:
        return None

    return TrainingLoad(
        week_number=weekly_plan.week_number,
        volume=volume,
        intensity=intensity,
        total_load=calculate_training_load(volume, intensity)
    )


def get_acwr_status(acwr: float) -> AcwrStatus:
    """
    Interprète l'ACWR

    < 0.8 sous-entraînement, 0.8-1.3 optimal, 1.3-1.5 vigilance, > 1.5 risque de blessure
    """
    if acwr < ACWR_OPTIMAL_MIN:
        return AcwrStatus.UNDERTRAINING
    elif acwr <= ACWR_OPTIMAL_MAX:
        return AcwrStatus.OPTIMAL
    elif acwr <= ACWR_CAUTION_MAX:
        return AcwrStatus.CAUTION
    else:
        return AcwrStatus.HIGH_RISK


def summarize_load_history(history: List[TrainingLoad]) -> dict:
    """
    Résumé de la dernière semaine chargée, pour affichage ou alerte.

    Returns:
        Dict avec week_number, total_load, acwr, status (vide si pas d'historique)
    """
    if not history:
        return {}

    current = history[-1]
    acwr = current.acwr if current.acwr is not None else 1.0
    status = get_acwr_status(acwr)
    if status == AcwrStatus.HIGH_RISK:
        logger.warning("Semaine %d: ACWR %.2f, risque de blessure élevé", current.week_number, acwr)

    return {
        'week_number': current.week_number,
        'total_load': round(current.total_load, 1),
        'acwr': round(acwr, 2),
        'status': status.value,
    }
