"""Shared FastAPI dependencies."""
from functools import lru_cache
from mealmate.infra.paths import DATA_DIR
from mealmate.infra.Storage_Service import JsonFileStore, StorageService


@lru_cache(maxsize=1)
def get_storage() -> StorageService:
    """Storage service backed by JSON files in DATA_DIR (overridden in tests)."""
    return StorageService(JsonFileStore(DATA_DIR))
