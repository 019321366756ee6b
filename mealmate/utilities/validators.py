"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

_DAY_PATTERN = r'^(Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)$'
_MEAL_PATTERN = r'^(breakfast|lunch|dinner)$'


class PantryItemInput(BaseModel):
    """Schema for adding stock to the pantry."""
    name: str = Field(..., min_length=1, max_length=100)
    qty: float = Field(..., gt=0)
    unit: str = Field(..., min_length=1, max_length=20)

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError('Value cannot be blank')
        return v


class PantryQuantityInput(BaseModel):
    """Schema for setting a pantry item's quantity."""
    qty: float = Field(..., ge=0)


class SlotUpdateInput(BaseModel):
    """Schema for putting a recipe into a plan slot."""
    day: str = Field(..., pattern=_DAY_PATTERN)
    meal: str = Field(..., pattern=_MEAL_PATTERN)
    recipe_id: str = Field(..., min_length=1)


class SlotMoveInput(BaseModel):
    """Schema for moving a planned meal between slots."""
    from_day: str = Field(..., pattern=_DAY_PATTERN)
    from_meal: str = Field(..., pattern=_MEAL_PATTERN)
    to_day: str = Field(..., pattern=_DAY_PATTERN)
    to_meal: str = Field(..., pattern=_MEAL_PATTERN)


class BudgetInput(BaseModel):
    """Schema for the weekly budget."""
    budget: float = Field(..., ge=0)


class ImportDocumentInput(BaseModel):
    """Schema for restoring an exported document."""
    recipes: Optional[List[dict]] = None
    pantry: Optional[List[dict]] = None
    plan: Optional[dict] = None
    settings: Optional[dict] = None

    @field_validator('recipes')
    @classmethod
    def validate_recipes(cls, v):
        """Every recipe record needs an id."""
        if v is not None and any(not r.get('id') for r in v):
            raise ValueError('Every recipe must have an id')
        return v
