"""Core business logic layer (pure functions over in-memory data).

Subpackages:
- units: unit dimensions and conversion to base units
- ingredients: name normalisation and serving scaling
- recipes: text search and diet-tag filtering
- shopping: grocery list aggregation, pantry deduction, aisle categories
- reporting: weekly budget summary
"""
__all__ = ["units", "ingredients", "recipes", "shopping", "reporting"]
