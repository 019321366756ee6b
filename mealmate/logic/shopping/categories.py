"""Grocery-aisle categories: canonical ingredient name -> aisle, and display grouping."""
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, Final, List, Mapping, Any
from mealmate.domain.GroceryItem import GroceryItem

__all__ = ["CATEGORY_MAP", "CATEGORY_ORDER", "DEFAULT_CATEGORY", "get_category", "group_by_category"]

DEFAULT_CATEGORY: Final[str] = 'Other'

CATEGORY_MAP: Final[Mapping[str, str]] = MappingProxyType({
    # Produce
    'avocado': 'Produce', 'banana': 'Produce', 'broccoli': 'Produce',
    'carrot': 'Produce', 'cherry tomato': 'Produce', 'cucumber': 'Produce',
    'lemon': 'Produce', 'mushrooms': 'Produce', 'onion': 'Produce',
    'red onion': 'Produce', 'baby spinach': 'Produce',
    'sweet potato': 'Produce', 'tomato': 'Produce', 'bell pepper': 'Produce',
    'fresh basil': 'Produce', 'mixed berries': 'Produce',
    'shredded lettuce': 'Produce', 'black olives': 'Produce',

    # Meat
    'minced beef': 'Meat', 'chicken breast': 'Meat',

    # Fish
    'salmon fillet': 'Fish', 'tuna (canned)': 'Fish',

    # Dairy & Eggs
    'egg': 'Dairy & Eggs', 'butter': 'Dairy & Eggs', 'milk': 'Dairy & Eggs',
    'parmesan cheese': 'Dairy & Eggs', 'mozzarella': 'Dairy & Eggs',
    'feta cheese': 'Dairy & Eggs', 'cheddar cheese': 'Dairy & Eggs',
    'sour cream': 'Dairy & Eggs',

    # Dry Goods
    'spaghetti': 'Dry Goods', 'penne pasta': 'Dry Goods',
    'jasmine rice': 'Dry Goods', 'rolled oats': 'Dry Goods',
    'red lentils': 'Dry Goods', 'chickpeas (canned)': 'Dry Goods',
    'black beans (canned)': 'Dry Goods', 'sweetcorn (canned)': 'Dry Goods',
    'diced tomatoes (canned)': 'Dry Goods', 'tomato passata': 'Dry Goods',
    'coconut milk': 'Dry Goods', 'vegetable stock': 'Dry Goods',
    'chia seeds': 'Dry Goods',

    # Bakery
    'wholegrain bread': 'Bakery', 'corn tortillas': 'Bakery',

    # Condiments & Spices
    'olive oil': 'Condiments', 'sesame oil': 'Condiments',
    'vegetable oil': 'Condiments', 'soy sauce': 'Condiments',
    'salsa': 'Condiments', 'honey': 'Condiments', 'mayonnaise': 'Condiments',
    'chilli flakes': 'Spices', 'chilli powder': 'Spices',
    'cumin': 'Spices', 'curry powder': 'Spices',
    'dried oregano': 'Spices', 'italian herbs': 'Spices',
})

CATEGORY_ORDER: Final[tuple[str, ...]] = (
    'Produce', 'Meat', 'Fish', 'Dairy & Eggs', 'Dry Goods', 'Bakery',
    'Condiments', 'Spices', 'Other',
)


def get_category(canonical_name: str) -> str:
    return CATEGORY_MAP.get(canonical_name, DEFAULT_CATEGORY)


def group_by_category(grocery_list: List[GroceryItem]) -> List[Dict[str, Any]]:
    """Group a flat grocery list by category, in CATEGORY_ORDER.

    Returns [{ 'category': str, 'items': [GroceryItem, ...] }, ...]; empty
    categories are omitted and items keep their input order.
    """
    grouped: Dict[str, List[GroceryItem]] = defaultdict(list)
    for item in grocery_list:
        grouped[item.category].append(item)
    return [{'category': cat, 'items': grouped[cat]} for cat in CATEGORY_ORDER if grouped.get(cat)]
