"""GroceryItem: one consolidated line of the shopping list (derived, never persisted)."""


class GroceryItem:
    def __init__(self, canonical_name: str, name: str, qty: float, unit: str,
                 category: str = "Other", checked: bool = False):
        self.canonical_name = canonical_name
        self.name = name
        self.qty = qty
        self.unit = unit
        self.category = category
        self.checked = checked

    @property
    def id(self) -> str:
        # The canonical key doubles as identity within one aggregation run
        return self.canonical_name

    def with_quantity(self, qty: float) -> "GroceryItem":
        return GroceryItem(self.canonical_name, self.name, qty, self.unit, self.category, self.checked)

    def __str__(self) -> str:
        return f"{self.name} - {self.qty} {self.unit} [{self.category}]"

    __repr__ = __str__

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "canonicalName": self.canonical_name,
            "qty": self.qty,
            "unit": self.unit,
            "category": self.category,
            "checked": self.checked,
        }
