"""
Modèle de données pour la charge d'entraînement hebdomadaire
"""
from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class AcwrStatus(str, Enum):
    """Interprétation de l'ACWR"""
    UNDERTRAINING = "undertraining"
    OPTIMAL = "optimal"
    CAUTION = "caution"
    HIGH_RISK = "high_risk"


class TrainingLoad(BaseModel):
    """Charge d'une semaine (à partir des séances effectuées)"""
    week_number: int = Field(..., ge=1)
    volume: float = Field(..., ge=0, description="Volume réel (heures)")
    intensity: float = Field(..., ge=0, description="Intensité réelle (RPE moyen)")
    total_load: float = Field(..., ge=0, description="Volume x intensité")

    # ACWR - Acute:Chronic Workload Ratio
    acwr: Optional[float] = Field(None, description="Ratio charge aiguë/chronique")
