import logging
from typing import List, Optional
from mealmate.domain.Recipe import Recipe
from mealmate.infra.Storage_Service import StorageService

logger = logging.getLogger(__name__)


class RecipeRepository:
    def __init__(self, storage: StorageService):
        self.storage = storage

    def list(self) -> List[Recipe]:
        """Read the recipe catalog; malformed records are skipped with a warning."""
        recipes: List[Recipe] = []
        for entry in self.storage.get_recipes():
            try:
                recipes.append(Recipe.from_dict(entry))
            except (TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed recipe record {entry!r}: {e}")
        return recipes

    def get(self, recipe_id: str) -> Optional[Recipe]:
        for recipe in self.list():
            if recipe.id == recipe_id:
                return recipe
        return None

    def save_all(self, recipes: List[Recipe]) -> bool:
        return self.storage.set_recipes([r.to_dict() for r in recipes])
