from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from mealmate.api.deps import get_storage
from mealmate.infra.Recipe_Repository import RecipeRepository
from mealmate.infra.Storage_Service import StorageService
from mealmate.logic.ingredients.scaling import scale_ingredients
from mealmate.logic.recipes.search import ALL_TAGS, filter_by_tags, search_recipes

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
def list_recipes(q: str = Query(default=""),
                 tags: Optional[List[str]] = Query(default=None),
                 storage: StorageService = Depends(get_storage)):
    """Recipes matching the text query and carrying every requested diet tag."""
    unknown = [t for t in (tags or []) if t not in ALL_TAGS]
    if unknown:
        raise HTTPException(status_code=400, detail=f"Unknown diet tags: {', '.join(unknown)}")
    recipes = RecipeRepository(storage).list()
    matched = filter_by_tags(search_recipes(recipes, q), tags or [])
    return {"count": len(matched), "total": len(recipes), "recipes": [r.to_dict() for r in matched]}


@router.get("/tags")
def list_tags():
    return {"tags": list(ALL_TAGS)}


@router.get("/{recipe_id}")
def recipe_detail(recipe_id: str,
                  servings: Optional[int] = Query(default=None, ge=1),
                  storage: StorageService = Depends(get_storage)):
    """Recipe record; with ?servings=N the ingredients are scaled to N servings."""
    recipe = RecipeRepository(storage).get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    data = recipe.to_dict()
    if servings is not None:
        data["ingredients"] = [i.to_dict() for i in scale_ingredients(recipe.ingredients, recipe.servings, servings)]
        data["scaledServings"] = servings
    return data
