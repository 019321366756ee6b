"""Recipe domain entity: identity, servings basis, cost, diet tags, ingredients, instructions."""
from typing import List, Optional, Dict, Any
from mealmate.domain.Ingredient import Ingredient


class Recipe:
    def __init__(self, id: str = "", name: str = "", category: str = "", description: str = "",
                 prep_time: int = 0, servings: int = 1, estimated_cost_per_serving: float = 0,
                 diet_tags: Optional[List[str]] = None, ingredients: Optional[List[Ingredient]] = None,
                 instructions: Optional[List[str]] = None):
        self.id = id
        self.name = name
        self.category = category
        self.description = description
        self.prep_time = prep_time
        self.servings = servings
        self.estimated_cost_per_serving = estimated_cost_per_serving
        # Avoid sharing caller lists
        self.diet_tags = diet_tags[:] if diet_tags else []
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []

    @property
    def estimated_cost(self) -> float:
        """Cost of cooking the recipe at its native serving count."""
        return self.estimated_cost_per_serving * self.servings

    def __str__(self) -> str:
        return (f"{self.name} ({self.id}) - {self.servings} servings - "
                f"Tags: {', '.join(self.diet_tags)} - Cost/serving: {self.estimated_cost_per_serving}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Recipe":
        '''Builds a Recipe from a stored record (camelCase keys, as persisted).'''
        d = dict(data)
        return Recipe(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            category=d.get("category", ""),
            description=d.get("description", ""),
            prep_time=int(d.get("prepTime", 0) or 0),
            servings=int(d.get("servings", 1) or 0),
            estimated_cost_per_serving=float(d.get("estimatedCostPerServing", 0) or 0),
            diet_tags=list(d.get("dietTags", []) or []),
            ingredients=[Ingredient.from_dict(ing) for ing in d.get("ingredients", []) or []],
            instructions=list(d.get("instructions", []) or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "description": self.description,
            "prepTime": self.prep_time,
            "servings": self.servings,
            "estimatedCostPerServing": self.estimated_cost_per_serving,
            "dietTags": self.diet_tags,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
        }
