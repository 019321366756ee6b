"""Pantry repository helpers (storage persistence)."""
from mealmate.domain.Pantry import Pantry, PantryItem
from mealmate.infra.Storage_Service import StorageService


class PantryRepository:
    def __init__(self, storage: StorageService):
        self.storage = storage

    def load(self) -> Pantry:
        return Pantry.from_dict(self.storage.get_pantry())

    def save(self, pantry: Pantry) -> bool:
        return self.storage.set_pantry(pantry.to_dict())

    def add_item(self, name: str, qty: float, unit: str) -> PantryItem:
        pantry = self.load()
        item = pantry.add_item(name, qty, unit)
        self.save(pantry)
        return item

    def remove_item(self, item_id: str) -> PantryItem:
        pantry = self.load()
        item = pantry.remove_item(item_id)
        self.save(pantry)
        return item

    def update_quantity(self, item_id: str, qty: float) -> PantryItem:
        pantry = self.load()
        item = pantry.update_quantity(item_id, qty)
        self.save(pantry)
        return item
