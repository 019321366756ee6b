"""Pantry deduction: subtract what the user already owns from the grocery list."""
from typing import Dict, List
from mealmate.domain.GroceryItem import GroceryItem
from mealmate.domain.Pantry import PantryItem
from mealmate.logic.ingredients.normalizer import normalise
from mealmate.logic.units.conversions import base_unit, to_base
from mealmate.utilities.rounding import round2

__all__ = ["deduct_pantry"]


def _pantry_totals(pantry_items: List[PantryItem]) -> Dict[str, Dict[str, float]]:
    totals: Dict[str, Dict] = {}
    for item in pantry_items:
        key = normalise(item.name)
        base_qty, b_unit = to_base(item.qty, item.unit)
        if key in totals:
            totals[key]['qty'] += base_qty
        else:
            totals[key] = {'qty': base_qty, 'unit': b_unit}
    return totals


def deduct_pantry(grocery_list: List[GroceryItem], pantry_items: List[PantryItem]) -> List[GroceryItem]:
    """Return a new grocery list with pantry stock deducted.

    Items without a pantry match, or whose units do not line up, pass through
    unchanged. Items left with qty 0 (fully covered) are dropped.
    """
    pantry = _pantry_totals(pantry_items)

    result: List[GroceryItem] = []
    for item in grocery_list:
        owned = pantry.get(item.canonical_name)
        if owned is not None and owned['unit'] in (base_unit(item.unit), item.unit):
            remaining = max(0.0, item.qty - owned['qty'])
            item = item.with_quantity(round2(remaining))
        if item.qty > 0:
            result.append(item)
    return result
