"""Configuration management for MealMate."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Budget defaults (used when no settings record exists yet)
DEFAULT_BUDGET: Final[float] = float(os.getenv('DEFAULT_BUDGET', '40'))
DEFAULT_CURRENCY: Final[str] = os.getenv('DEFAULT_CURRENCY', '€')

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
SEED_DIR: Final[Path] = BASE_DIR / 'data'
DATA_DIR: Final[Path] = Path(os.getenv('MEALMATE_DATA_DIR', str(SEED_DIR / 'store')))
