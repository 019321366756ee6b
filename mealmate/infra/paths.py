from pathlib import Path
from mealmate.utilities.config import DATA_DIR as _DATA_DIR, SEED_DIR as _SEED_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_DATA_DIR).resolve()
SEED_DIR = Path(_SEED_DIR).resolve()
SEED_FILE = SEED_DIR / 'seed_data.json'

__all__ = ['DATA_DIR', 'SEED_DIR', 'SEED_FILE']
