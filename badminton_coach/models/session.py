"""
Modèle de données pour une séance d'entraînement
"""
from pydantic import BaseModel, Field
from enum import Enum
from typing import Optional


class WorkoutType(str, Enum):
    """Types de séances de badminton"""
    TECHNIQUE = "technique"
    ENDURANCE = "endurance"
    SPEED = "speed"
    STRENGTH = "strength"
    MATCH = "match"
    RECOVERY = "recovery"


class WorkoutSession(BaseModel):
    """Une séance planifiée dans la semaine"""
    id: str = Field(..., description="ID unique de la séance")
    day: int = Field(..., ge=1, le=7, description="Jour de la semaine (1=lundi)")
    type: WorkoutType
    duration: float = Field(..., ge=0, description="Durée planifiée (minutes)")
    intensity: float = Field(..., ge=1, le=10, description="Intensité planifiée (1-10)")
    focus: str = Field(..., description="Axe de travail de la séance")
    drills: list[str] = Field(default_factory=list)

    # Données post-séance
    completed: bool = Field(False)
    actual_duration: Optional[float] = Field(None, ge=0, description="Durée réelle (minutes)")
    rpe: Optional[int] = Field(None, ge=1, le=10, description="RPE (1-10)")

    def mark_as_completed(self, actual_duration: float, rpe: int):
        """Marque la séance comme effectuée avec les données réelles"""
        if actual_duration < 0:
            raise ValueError(f"Durée réelle négative: {actual_duration}")
        if not 1 <= rpe <= 10:
            raise ValueError(f"RPE hors échelle (1-10): {rpe}")
        self.completed = True
        self.actual_duration = actual_duration
        self.rpe = rpe
