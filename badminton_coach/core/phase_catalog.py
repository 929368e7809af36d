"""
Catalogue statique des phases, gabarits de séances et bibliothèque d'exercices
"""
from pydantic import BaseModel

from badminton_coach.models import TrainingPhase, WorkoutType


class PhaseDescription(BaseModel):
    """Descriptif d'une phase (objectifs, axes, multiplicateurs)"""
    objectives: list[str]
    focus: list[str]
    volume_multiplier: float
    intensity_multiplier: float


PHASE_DESCRIPTIONS = {
    TrainingPhase.BASE: PhaseDescription(
        objectives=['Build aerobic foundation', 'Develop general fitness', 'Master fundamental techniques'],
        focus=['Endurance', 'Basic techniques', 'Movement patterns', 'Consistency'],
        volume_multiplier=0.7,
        intensity_multiplier=0.6,
    ),
    TrainingPhase.BUILD: PhaseDescription(
        objectives=['Increase training intensity', 'Develop specific skills', 'Build strength and power'],
        focus=['Sport-specific drills', 'Speed work', 'Tactical training', 'Match simulation'],
        volume_multiplier=1.0,
        intensity_multiplier=0.8,
    ),
    TrainingPhase.PEAK: PhaseDescription(
        objectives=['Achieve peak performance', 'Fine-tune techniques', 'Maximize competition readiness'],
        focus=['High-intensity training', 'Match play', 'Competition simulation', 'Mental preparation'],
        volume_multiplier=0.9,
        intensity_multiplier=0.95,
    ),
    TrainingPhase.TAPER: PhaseDescription(
        objectives=['Reduce fatigue', 'Maintain fitness', 'Optimize recovery for competition'],
        focus=['Light technical work', 'Active recovery', 'Mental rehearsal', 'Strategy review'],
        volume_multiplier=0.5,
        intensity_multiplier=0.7,
    ),
    TrainingPhase.RECOVERY: PhaseDescription(
        objectives=['Full recovery', 'Prevent burnout', 'Prepare for next cycle'],
        focus=['Light activity', 'Cross-training', 'Injury prevention', 'Rest'],
        volume_multiplier=0.4,
        intensity_multiplier=0.5,
    ),
}

# Ordre des séances dans la semaine, par phase
PHASE_WORKOUT_TEMPLATES = {
    TrainingPhase.BASE: [
        WorkoutType.ENDURANCE, WorkoutType.TECHNIQUE, WorkoutType.ENDURANCE,
        WorkoutType.TECHNIQUE, WorkoutType.ENDURANCE,
    ],
    TrainingPhase.BUILD: [
        WorkoutType.TECHNIQUE, WorkoutType.SPEED, WorkoutType.MATCH,
        WorkoutType.STRENGTH, WorkoutType.ENDURANCE,
    ],
    TrainingPhase.PEAK: [
        WorkoutType.MATCH, WorkoutType.SPEED, WorkoutType.MATCH,
        WorkoutType.TECHNIQUE, WorkoutType.MATCH,
    ],
    TrainingPhase.TAPER: [
        WorkoutType.TECHNIQUE, WorkoutType.RECOVERY, WorkoutType.MATCH, WorkoutType.RECOVERY,
    ],
    TrainingPhase.RECOVERY: [
        WorkoutType.RECOVERY, WorkoutType.TECHNIQUE, WorkoutType.RECOVERY,
    ],
}

DRILL_LIBRARY = {
    WorkoutType.TECHNIQUE: ['Shadow badminton', 'Multi-shuttle drills', 'Footwork patterns', 'Clear technique'],
    WorkoutType.ENDURANCE: ['Continuous rallies', 'Court movement drills', 'Long rallies', 'Stamina building'],
    WorkoutType.SPEED: ['Fast-paced multi-shuttle', 'Reaction drills', 'Speed smashes', 'Quick net shots'],
    WorkoutType.STRENGTH: ['Jump smash practice', 'Resistance training', 'Power clears', 'Explosive movements'],
    WorkoutType.MATCH: ['Practice matches', 'Competition simulation', 'Tactical scenarios', 'Match analysis'],
    WorkoutType.RECOVERY: ['Light rallies', 'Stretching', 'Mobility work', 'Active recovery'],
}


def get_phase_recommendations(phase: TrainingPhase) -> PhaseDescription:
    """
    Retourne le descriptif d'une phase

    Args:
        phase: Phase demandée (enum ou valeur texte, ex: 'build')

    Returns:
        Copie du descriptif (le catalogue n'est jamais modifié par l'appelant)
    """
    return PHASE_DESCRIPTIONS[TrainingPhase(phase)].model_copy(deep=True)


def get_workout_template(phase: TrainingPhase) -> list[WorkoutType]:
    """Séquence de types de séances pour une phase"""
    return list(PHASE_WORKOUT_TEMPLATES[TrainingPhase(phase)])


def get_drill_recommendations(workout_type: WorkoutType) -> list[str]:
    """Exercices recommandés pour un type de séance"""
    return list(DRILL_LIBRARY.get(WorkoutType(workout_type), []))
