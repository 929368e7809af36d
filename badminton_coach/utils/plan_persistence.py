"""Utilitaires pour sauvegarder et charger le plan d'entraînement, ses semaines et sa charge."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from badminton_coach.config.settings import DATA_DIR, STORE_SCHEMA_VERSION
from badminton_coach.core.errors import PlanStoreError, InvalidWeekError
from badminton_coach.core.weekly_planner import generate_weekly_plan
from badminton_coach.models import TrainingPlan, ArchivedPlan, WeeklyPlan, TrainingLoad
from badminton_coach.utils.plan_helpers import phases_cover_duration, calculate_completion_rate
from badminton_coach.utils.training_load import build_load_sample, compute_load_history

logger = logging.getLogger(__name__)

ACTIVE_PLAN_FILE = "active_training_plan.json"
PLAN_HISTORY_FILE = "training_plan_history.json"
WEEKLY_PLANS_PREFIX = "weekly_plans"
LOAD_DATA_PREFIX = "weekly_load_data"


def migrate_document(raw, payload_key: str) -> dict:
    """
    Met un document lu sur disque au format courant.

    Version 0: charge utile brute (objet ou liste), sans enveloppe.
    Version 1: {'schema_version': 1, <payload_key>: ...}

    Raises:
        PlanStoreError: version inconnue
    """
    if isinstance(raw, dict) and 'schema_version' in raw:
        version = raw['schema_version']
    else:
        version = 0

    if version == 0:
        raw = {'schema_version': 1, payload_key: raw}
        version = 1

    if version != STORE_SCHEMA_VERSION:
        raise PlanStoreError(f"Version de schéma non supportée: {version}")
    return raw


class PlanStore:
    """
    Stockage JSON du plan actif, de l'historique, des semaines et de la charge.

    Un fichier par collection, dans `data_dir`. Le moteur de périodisation
    n'y accède jamais directement: l'appelant injecte le store.
    """

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR

    # ------------------------------------------------------------------
    # Lecture / écriture bas niveau
    # ------------------------------------------------------------------

    def _path(self, name: str, plan_id: Optional[str] = None) -> Path:
        filename = f"{name}_{plan_id}.json" if plan_id else name
        return self.data_dir / filename

    def _read(self, path: Path, payload_key: str):
        if not path.exists():
            return None
        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise PlanStoreError(f"Fichier illisible {path}: {e}") from e
        return migrate_document(raw, payload_key)[payload_key]

    def _write(self, path: Path, payload_key: str, payload):
        # Créer le dossier si nécessaire
        path.parent.mkdir(parents=True, exist_ok=True)
        document = {'schema_version': STORE_SCHEMA_VERSION, payload_key: payload}
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=2, ensure_ascii=False)

    @staticmethod
    def _validate(model, data, path: Path):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise PlanStoreError(f"Données invalides dans {path}: {e}") from e

    # ------------------------------------------------------------------
    # Plan actif et historique
    # ------------------------------------------------------------------

    def save_active_plan(self, plan: TrainingPlan):
        """Sauvegarde le plan actif (remplace le précédent)"""
        self._write(self._path(ACTIVE_PLAN_FILE), 'plan', plan.model_dump(mode='json'))

    def get_active_plan(self) -> Optional[TrainingPlan]:
        """
        Charge le plan actif.

        Returns:
            TrainingPlan ou None si aucun plan n'est enregistré
        """
        path = self._path(ACTIVE_PLAN_FILE)
        data = self._read(path, 'plan')
        if data is None:
            return None
        plan = self._validate(TrainingPlan, data, path)
        if not phases_cover_duration(plan):
            logger.warning("Plan %s: les phases ne couvrent pas les %d semaines", plan.id, plan.duration)
        return plan

    def clear_active_plan(self):
        """Archive le plan actif dans l'historique puis le supprime"""
        plan = self.get_active_plan()
        if plan:
            history = self.get_plan_history()
            history.append(ArchivedPlan(**plan.model_dump(), completed_date=datetime.now()))
            self._write(
                self._path(PLAN_HISTORY_FILE), 'plans',
                [p.model_dump(mode='json') for p in history]
            )
            logger.info("Plan %s archivé", plan.id)
        self._path(ACTIVE_PLAN_FILE).unlink(missing_ok=True)

    def get_plan_history(self) -> list[ArchivedPlan]:
        path = self._path(PLAN_HISTORY_FILE)
        data = self._read(path, 'plans') or []
        return [self._validate(ArchivedPlan, item, path) for item in data]

    def update_plan_progress(self, week_number: int) -> Optional[TrainingPlan]:
        """
        Avance la semaine courante du plan actif.

        Raises:
            InvalidWeekError: semaine hors de [1, durée]
        """
        plan = self.get_active_plan()
        if plan is None:
            return None
        if not 1 <= week_number <= plan.duration:
            raise InvalidWeekError(week_number, plan.duration)
        plan.current_week = week_number
        self.save_active_plan(plan)
        return plan

    # ------------------------------------------------------------------
    # Semaines
    # ------------------------------------------------------------------

    def get_weekly_plans(self, plan_id: str) -> list[WeeklyPlan]:
        path = self._path(WEEKLY_PLANS_PREFIX, plan_id)
        data = self._read(path, 'weeks') or []
        return [self._validate(WeeklyPlan, item, path) for item in data]

    def get_weekly_plan(self, plan_id: str, week_number: int) -> Optional[WeeklyPlan]:
        for week in self.get_weekly_plans(plan_id):
            if week.week_number == week_number:
                return week
        return None

    def save_weekly_plan(self, plan_id: str, weekly_plan: WeeklyPlan):
        """Insère ou remplace la semaine (clé: numéro de semaine)"""
        weeks = [w for w in self.get_weekly_plans(plan_id) if w.week_number != weekly_plan.week_number]
        weeks.append(weekly_plan)
        weeks.sort(key=lambda w: w.week_number)
        self._write(
            self._path(WEEKLY_PLANS_PREFIX, plan_id), 'weeks',
            [w.model_dump(mode='json') for w in weeks]
        )

    def get_or_create_weekly_plan(self, plan: TrainingPlan, week_number: int) -> WeeklyPlan:
        """
        Charge la semaine enregistrée, ou la génère et l'enregistre à la première consultation.

        Une semaine déjà enregistrée n'est jamais régénérée.
        """
        weekly_plan = self.get_weekly_plan(plan.id, week_number)
        if weekly_plan:
            return weekly_plan

        weekly_plan = generate_weekly_plan(plan, week_number)
        self.save_weekly_plan(plan.id, weekly_plan)
        logger.debug("Plan %s: semaine %d générée", plan.id, week_number)
        return weekly_plan

    def complete_workout(
        self,
        plan_id: str,
        week_number: int,
        workout_id: str,
        actual_duration: float,
        rpe: int
    ) -> Optional[WeeklyPlan]:
        """
        Enregistre une séance effectuée puis met à jour la charge de la semaine.

        Returns:
            La semaine mise à jour, ou None si la semaine n'a jamais été générée

        Raises:
            WorkoutNotFoundError: séance absente de la semaine
        """
        weekly_plan = self.get_weekly_plan(plan_id, week_number)
        if weekly_plan is None:
            logger.warning("Plan %s: semaine %d absente, séance %s ignorée", plan_id, week_number, workout_id)
            return None

        weekly_plan.record_workout_completion(workout_id, actual_duration, rpe)
        self.save_weekly_plan(plan_id, weekly_plan)

        sample = build_load_sample(weekly_plan)
        if sample:
            self.save_training_load(plan_id, sample)
        return weekly_plan

    def calculate_completion_rate(self, plan_id: str) -> float:
        """Taux de séances effectuées sur les semaines enregistrées"""
        return calculate_completion_rate(self.get_weekly_plans(plan_id))

    # ------------------------------------------------------------------
    # Charge d'entraînement
    # ------------------------------------------------------------------

    def get_training_loads(self, plan_id: str) -> list[TrainingLoad]:
        path = self._path(LOAD_DATA_PREFIX, plan_id)
        data = self._read(path, 'loads') or []
        return [self._validate(TrainingLoad, item, path) for item in data]

    def save_training_load(self, plan_id: str, load: TrainingLoad) -> list[TrainingLoad]:
        """
        Insère ou remplace l'échantillon de la semaine et recalcule l'ACWR de tout l'historique.

        Returns:
            Historique trié par numéro de semaine
        """
        loads = [sample for sample in self.get_training_loads(plan_id) if sample.week_number != load.week_number]
        loads.append(load)
        history = compute_load_history(loads)
        self._write(
            self._path(LOAD_DATA_PREFIX, plan_id), 'loads',
            [sample.model_dump(mode='json') for sample in history]
        )
        return history
