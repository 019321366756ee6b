"""Scales ingredient quantities proportionally to a desired serving count."""
from typing import List
from mealmate.domain.Ingredient import Ingredient
from mealmate.utilities.rounding import round2


def scale_ingredients(ingredients: List[Ingredient], base_servings: float, desired_servings: float) -> List[Ingredient]:
    """Scale a list of ingredients from base servings to desired servings.

    Quantities are multiplied by desired/base and rounded to 2 decimals; name and
    unit pass through. If either serving count is not positive the input list is
    returned as is.
    """
    if base_servings <= 0 or desired_servings <= 0:
        return ingredients
    factor = desired_servings / base_servings
    return [ing.with_quantity(round2(ing.qty * factor)) for ing in ingredients]


__all__ = ['scale_ingredients']
