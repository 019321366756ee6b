"""Ingredient value: display name, quantity and unit as listed in a recipe."""


class Ingredient:
    def __init__(self, name: str = "", qty: float = 0, unit: str = ""):
        self.name = name
        self.qty = qty
        self.unit = unit

    def with_quantity(self, qty: float) -> "Ingredient":
        '''Returns a copy of this ingredient carrying a different quantity.'''
        return Ingredient(self.name, qty, self.unit)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.qty, self.unit) == (other.name, other.qty, other.unit)

    def __str__(self) -> str:
        return f"{self.name} - {self.qty} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        try:
            qty = float(d.get("qty", 0) or 0)
        except (TypeError, ValueError):
            qty = 0.0
        return Ingredient(
            name=str(d.get("name", "") or ""),
            qty=qty,
            unit=str(d.get("unit", "") or ""),
        )

    def to_dict(self):
        return {"name": self.name, "qty": self.qty, "unit": self.unit}
