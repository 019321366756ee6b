"""Recipe search (text query) and diet-tag filtering."""
from typing import Iterable, List, Optional
from mealmate.domain.Recipe import Recipe
from mealmate.utilities.constants import DIET_TAGS

ALL_TAGS = DIET_TAGS


def search_recipes(recipes: List[Recipe], query: Optional[str]) -> List[Recipe]:
    """Recipes whose name or any ingredient name contains the query (case-insensitive).

    An empty or whitespace-only query returns the input unchanged.
    """
    q = (query or '').lower().strip()
    if not q:
        return recipes
    return [
        r for r in recipes
        if q in r.name.lower() or any(q in ing.name.lower() for ing in r.ingredients)
    ]


def filter_by_tags(recipes: List[Recipe], active_tags: Optional[Iterable[str]]) -> List[Recipe]:
    """Recipes carrying every active tag (AND). No active tags means all recipes."""
    tags = set(active_tags or [])
    if not tags:
        return recipes
    return [r for r in recipes if tags.issubset(r.diet_tags)]


__all__ = ['ALL_TAGS', 'search_recipes', 'filter_by_tags']
