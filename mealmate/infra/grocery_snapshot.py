"""Grocery list for the stored plan, shared by the API and the export CLI."""
from typing import List, NamedTuple
from mealmate.domain.GroceryItem import GroceryItem
from mealmate.domain.Plan import WeeklyPlan
from mealmate.domain.Recipe import Recipe
from mealmate.infra.Pantry_Repository import PantryRepository
from mealmate.infra.Plan_Repository import PlanRepository
from mealmate.infra.Recipe_Repository import RecipeRepository
from mealmate.infra.Storage_Service import StorageService
from mealmate.logic.shopping.list_builder import generate_grocery_list
from mealmate.logic.shopping.pantry_deduction import deduct_pantry


class GrocerySnapshot(NamedTuple):
    plan: WeeklyPlan
    recipes: List[Recipe]
    raw_list: List[GroceryItem]
    final_list: List[GroceryItem]


def load_grocery_snapshot(storage: StorageService, deduct: bool = True) -> GrocerySnapshot:
    plan = PlanRepository(storage).get_plan()
    recipes = RecipeRepository(storage).list()
    raw_list = generate_grocery_list(plan, recipes)
    final_list = deduct_pantry(raw_list, PantryRepository(storage).load().get_items()) if deduct else raw_list
    return GrocerySnapshot(plan, recipes, raw_list, final_list)
