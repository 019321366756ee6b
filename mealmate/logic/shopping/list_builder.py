"""Grocery list builder.

Aggregates the ingredients of every planned meal into one unit-coherent list
and computes the estimated weekly cost of the plan.
Provides generate_grocery_list(plan, recipes) and compute_weekly_cost(plan, recipes).
"""
import logging
from typing import Dict, Iterator, List
from mealmate.domain.GroceryItem import GroceryItem
from mealmate.domain.Plan import WeeklyPlan
from mealmate.domain.Recipe import Recipe
from mealmate.logic.ingredients.normalizer import normalise
from mealmate.logic.ingredients.scaling import scale_ingredients
from mealmate.logic.shopping.categories import get_category
from mealmate.logic.units.conversions import to_base
from mealmate.utilities.rounding import round2

logger = logging.getLogger(__name__)


class _Total:
    __slots__ = ("qty", "unit", "display_name")

    def __init__(self, qty: float, unit: str, display_name: str):
        self.qty = qty
        self.unit = unit
        self.display_name = display_name


def _planned_recipes(plan: WeeklyPlan, recipes: List[Recipe]) -> Iterator[Recipe]:
    """Yield the recipe of every filled slot (day-then-meal order); unknown ids are skipped."""
    recipe_index: Dict[str, Recipe] = {r.id: r for r in recipes}
    for day, meal, slot in plan.iter_slots():
        if slot is None:
            continue
        recipe = recipe_index.get(slot.recipe_id)
        if recipe is None:
            logger.debug("Skipping %s %s: recipe %r not in catalog", day, meal, slot.recipe_id)
            continue
        yield recipe


def generate_grocery_list(plan: WeeklyPlan, recipes: List[Recipe]) -> List[GroceryItem]:
    """Compute the aggregated grocery list for a weekly plan.

    Args:
        plan: WeeklyPlan whose slots reference recipe ids.
        recipes: Recipe catalog.

    Returns:
        One GroceryItem per canonical ingredient name, in order of first
        encounter. Quantities are summed in base units and rounded to 2 decimals.
    """
    totals: Dict[str, _Total] = {}

    for recipe in _planned_recipes(plan, recipes):
        # Plan aggregates use each recipe's default servings
        scaled = scale_ingredients(recipe.ingredients, recipe.servings, recipe.servings)
        for ing in scaled:
            key = normalise(ing.name)
            base_qty, b_unit = to_base(ing.qty, ing.unit)
            total = totals.get(key)
            if total is not None:
                total.qty += base_qty
            else:
                totals[key] = _Total(base_qty, b_unit, ing.name)

    return [
        GroceryItem(
            canonical_name=key,
            name=total.display_name,
            qty=round2(total.qty),
            unit=total.unit,
            category=get_category(key),
            checked=False,
        )
        for key, total in totals.items()
    ]


def compute_weekly_cost(plan: WeeklyPlan, recipes: List[Recipe]) -> float:
    """Estimated cost of the plan: sum of cost-per-serving x servings over planned meals."""
    total = 0.0
    for recipe in _planned_recipes(plan, recipes):
        total += recipe.estimated_cost
    return round2(total)


__all__ = ['generate_grocery_list', 'compute_weekly_cost']
