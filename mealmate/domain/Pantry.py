"""Pantry aggregate: collection of owned PantryItem entries matched to recipes by name."""
import time
from typing import Callable, List, Optional
from mealmate.utilities.rounding import round2


def _time_based_id() -> str:
    return f"p{int(time.time() * 1000)}"


class PantryItem:
    def __init__(self, id: str = "", name: str = "", qty: float = 0, unit: str = ""):
        self.id = id
        self.name = name
        self.qty = qty
        self.unit = unit

    def __str__(self) -> str:
        return f"{self.name} - {self.qty} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a PantryItem from a stored record. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        try:
            qty = float(d.get("qty", 0) or 0)
        except (TypeError, ValueError):
            qty = 0.0
        return PantryItem(
            id=str(d.get("id", "") or ""),
            name=str(d.get("name", "") or ""),
            qty=qty,
            unit=str(d.get("unit", "") or ""),
        )

    def to_dict(self):
        return {"id": self.id, "name": self.name, "qty": self.qty, "unit": self.unit}


class Pantry:
    def __init__(self, items: Optional[List[PantryItem]] = None, id_factory: Callable[[], str] = _time_based_id):
        self.items: List[PantryItem] = items[:] if items else []
        self._id_factory = id_factory

    def add_item(self, name: str, qty: float, unit: str) -> PantryItem:
        '''
        Adds stock to the pantry. An entry with the same name (any casing) and the
        same unit is topped up; otherwise a new entry is created.
        '''
        name = (name or "").strip()
        if not name:
            raise ValueError("Please enter an ingredient name.")
        if not qty or qty <= 0:
            raise ValueError("Please enter a valid quantity.")

        for item in self.items:
            if item.name.lower() == name.lower() and item.unit == unit:
                item.qty = round2(item.qty + qty)
                return item
        item = PantryItem(self._id_factory(), name, qty, unit)
        self.items.append(item)
        return item

    def remove_item(self, item_id: str) -> PantryItem:
        item = self.get(item_id)
        self.items.remove(item)
        return item

    def update_quantity(self, item_id: str, new_quantity: float) -> PantryItem:
        '''
        Sets the quantity of a pantry entry.
        '''
        if new_quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {new_quantity}")
        item = self.get(item_id)
        item.qty = new_quantity
        return item

    def get(self, item_id: str) -> PantryItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise KeyError(f"Pantry item '{item_id}' not found.")

    def get_items(self):
        return self.items

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data) -> "Pantry":
        '''
        Builds a Pantry from a list of stored records.
        '''
        return Pantry([PantryItem.from_dict(entry) for entry in data or []])

    def to_dict(self):
        return [item.to_dict() for item in self.items]
