"""
Configuration settings for the badminton training coach
"""
import logging
import os
from dotenv import load_dotenv
from pathlib import Path

# Load environment variables
load_dotenv()

# Données utilisateur (hors du dossier d'installation du package)
DEFAULT_DATA_DIR = Path.home() / ".badminton_coach"
DATA_DIR = Path(os.getenv('BADMINTON_COACH_DATA_DIR', str(DEFAULT_DATA_DIR)))

# Application Settings
APP_NAME = "Badminton Training Coach"
APP_VERSION = "1.0.0"

# Durées de plan supportées (semaines)
SUPPORTED_DURATIONS = (8, 12, 16)
MIN_DAYS_PER_WEEK = 3
MAX_DAYS_PER_WEEK = 6

# Bornes de base des plages de phase, avant multiplicateur de phase
BASE_VOLUME_RANGE = (8.0, 12.0)      # heures / semaine
BASE_INTENSITY_RANGE = (6.0, 10.0)   # échelle 1-10

# Volume de référence par séance (minutes), pondéré par le niveau
MINUTES_PER_TRAINING_DAY = 90

# Semaine de décharge : toutes les 4 semaines en build/peak
DELOAD_EVERY_N_WEEKS = 4
DELOAD_VOLUME_FACTOR = 0.6
DELOAD_INTENSITY_FACTOR = 0.7

# Ajustement adaptatif de la difficulté
COMPLETION_RATE_LOW = 0.6
COMPLETION_RATE_HIGH = 0.9
DIFFICULTY_DECREASE_FACTOR = 0.9
DIFFICULTY_INCREASE_FACTOR = 1.05
# Dérive cumulée autorisée autour du volume de référence du catalogue
DIFFICULTY_MIN_SCALE = 0.7
DIFFICULTY_MAX_SCALE = 1.3

# ACWR (Acute:Chronic Workload Ratio)
ACWR_WINDOW = 4
ACWR_OPTIMAL_MIN = 0.8
ACWR_OPTIMAL_MAX = 1.3
ACWR_CAUTION_MAX = 1.5

# Persistence
STORE_SCHEMA_VERSION = 1

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Configure le logger du package (le logger racine n'est pas modifié)"""
    logger = logging.getLogger("badminton_coach")
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
