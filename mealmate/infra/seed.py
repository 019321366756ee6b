"""First-run seeding of the store from the packaged sample data."""
import json
import logging
from pathlib import Path
from mealmate.infra.paths import SEED_FILE
from mealmate.infra.Storage_Service import StorageService

logger = logging.getLogger(__name__)


def load_seed_data(seed_file: Path = SEED_FILE) -> dict:
    with open(seed_file, 'r', encoding='utf-8') as f:
        return json.load(f)


def seed_if_needed(storage: StorageService, seed_file: Path = SEED_FILE) -> bool:
    """Populate recipes, pantry, plan and settings once. Returns True if seeding happened."""
    if storage.is_initialized():
        return False
    data = load_seed_data(seed_file)
    plan = data.get("plan", {})
    storage.set_recipes(data.get("recipes", []))
    storage.set_pantry(data.get("pantry", []))
    storage.set_plan(plan)
    settings = storage.get_settings()
    storage.set_settings({"budget": plan.get("budget", settings["budget"]), "currency": settings["currency"]})
    storage.set_initialized()
    logger.info(f"Seeded store with {len(data.get('recipes', []))} recipes")
    return True
