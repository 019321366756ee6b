"""Persistence port: named JSON records (recipes, pantry, plan, settings) in a key-value store.

The pipeline never touches storage; callers read snapshots through
StorageService, run the pure functions, and write results back.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from mealmate.utilities.config import DEFAULT_BUDGET, DEFAULT_CURRENCY
from mealmate.utilities.constants import STORAGE_PREFIX

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


class MemoryStore:
    """In-process store; used by tests and as a scratch backend."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return list(self._data)


class JsonFileStore:
    """One JSON file per key inside a data directory."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def set(self, key: str, value: str) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}_", suffix=".json")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                tmp.write(value)
            shutil.move(tmp_path, self._path(key))
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def remove(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()


class StorageService:
    RECIPES = f"{STORAGE_PREFIX}recipes"
    PLAN = f"{STORAGE_PREFIX}plan"
    PANTRY = f"{STORAGE_PREFIX}pantry"
    SETTINGS = f"{STORAGE_PREFIX}settings"
    INITIALIZED = f"{STORAGE_PREFIX}initialized"

    KEYS = (RECIPES, PLAN, PANTRY, SETTINGS, INITIALIZED)

    def __init__(self, store: KeyValueStore):
        self.store = store

    # --- Raw access -------------------------------------------------------
    def read(self, key: str) -> Any:
        '''Returns the parsed record, or None when missing or unreadable.'''
        try:
            raw = self.store.get(key)
            return json.loads(raw) if raw else None
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {key}: {e}")
            return None

    def write(self, key: str, value: Any) -> bool:
        try:
            self.store.set(key, json.dumps(value, ensure_ascii=False, indent=2))
            return True
        except OSError as e:
            logger.error(f"MealMate: write failed for {key}: {e}")
            return False

    def _read_as(self, key: str, kind: type, default: Any) -> Any:
        value = self.read(key)
        if not value:
            return default
        if not isinstance(value, kind):
            logger.warning(f"Ignoring {key}: expected {kind.__name__}, got {type(value).__name__}")
            return default
        return value

    def remove(self, key: str) -> None:
        try:
            self.store.remove(key)
        except OSError as e:
            logger.warning(f"Could not remove {key}: {e}")

    # --- Named resources --------------------------------------------------
    def is_initialized(self) -> bool:
        return self.read(self.INITIALIZED) is True

    def set_initialized(self) -> bool:
        return self.write(self.INITIALIZED, True)

    def get_recipes(self) -> list:
        return self._read_as(self.RECIPES, list, [])

    def set_recipes(self, recipes: list) -> bool:
        return self.write(self.RECIPES, recipes)

    def get_plan(self) -> dict:
        return self._read_as(self.PLAN, dict, {"weekOf": "", "budget": DEFAULT_BUDGET, "plan": {}})

    def set_plan(self, plan: dict) -> bool:
        return self.write(self.PLAN, plan)

    def get_pantry(self) -> list:
        return self._read_as(self.PANTRY, list, [])

    def set_pantry(self, items: list) -> bool:
        return self.write(self.PANTRY, items)

    def get_settings(self) -> dict:
        return self._read_as(self.SETTINGS, dict, {"budget": DEFAULT_BUDGET, "currency": DEFAULT_CURRENCY})

    def set_settings(self, settings: dict) -> bool:
        return self.write(self.SETTINGS, settings)

    def clear_all(self) -> None:
        for key in self.KEYS:
            self.remove(key)


__all__ = ['KeyValueStore', 'MemoryStore', 'JsonFileStore', 'StorageService']
