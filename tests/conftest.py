"""Fixtures pytest pour les tests du moteur de périodisation."""

from datetime import date

import pytest

from badminton_coach.core.plan_generator import generate_periodized_plan
from badminton_coach.models import TrainingLoad
from badminton_coach.utils.plan_persistence import PlanStore


START_DATE = date(2026, 1, 5)


@pytest.fixture
def fitness_plan():
    """Plan 12 semaines, objectif forme, 4 jours/semaine"""
    return generate_periodized_plan(
        'fitness', 12, 4, 'intermediate', start_date=START_DATE, plan_id="plan_fitness_2026-01-05"
    )


@pytest.fixture
def tournament_plan():
    """Plan 16 semaines, objectif tournoi, 5 jours/semaine"""
    return generate_periodized_plan(
        'tournament', 16, 5, 'advanced',
        competition_date='2026-04-26', start_date=START_DATE
    )


@pytest.fixture
def store(tmp_path):
    """Store JSON isolé dans un dossier temporaire"""
    return PlanStore(tmp_path / "data")


@pytest.fixture
def make_sample():
    """Fabrique d'échantillons de charge hebdomadaire"""
    def _make(week_number: int, volume: float, intensity: float) -> TrainingLoad:
        return TrainingLoad(
            week_number=week_number,
            volume=volume,
            intensity=intensity,
            total_load=volume * intensity
        )
    return _make
