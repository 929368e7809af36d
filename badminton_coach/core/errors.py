"""
Exceptions du moteur de périodisation
"""


class PeriodizationError(ValueError):
    """Erreur de base du moteur de périodisation"""


class InvalidDurationError(PeriodizationError):
    """Durée de plan non supportée (seules 8, 12 et 16 semaines existent)"""

    def __init__(self, duration: int, supported: tuple = (8, 12, 16)):
        self.duration = duration
        self.supported = supported
        super().__init__(
            f"Durée de plan non supportée: {duration} semaines "
            f"(valeurs possibles: {', '.join(str(d) for d in supported)})"
        )


class InvalidWeekError(PeriodizationError):
    """Aucune phase du plan ne couvre la semaine demandée"""

    def __init__(self, week_number: int, duration: int = None):
        self.week_number = week_number
        self.duration = duration
        message = f"Semaine invalide: {week_number}"
        if duration is not None:
            message += f" (plan de {duration} semaines)"
        super().__init__(message)


class WorkoutNotFoundError(PeriodizationError):
    """Séance introuvable dans la semaine"""

    def __init__(self, workout_id: str, week_number: int):
        self.workout_id = workout_id
        self.week_number = week_number
        super().__init__(f"Séance {workout_id} introuvable en semaine {week_number}")


class PlanStoreError(Exception):
    """Document de persistance illisible ou incompatible"""
