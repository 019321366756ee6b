from typing import Final

DAYS: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MEAL_SLOTS: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner")

# Stored plan values that mean "no meal planned"
EMPTY_SLOT_MARKERS: Final[frozenset] = frozenset({"", "-", "empty"})

DIET_TAGS: Final[tuple[str, ...]] = (
    "vegetarian",
    "vegan",
    "high-protein",
    "dairy-free",
    "gluten-free",
)

PANTRY_UNITS: Final[tuple[str, ...]] = ("g", "kg", "ml", "L", "pcs", "slices", "tbsp", "tsp", "cup")

STORAGE_PREFIX: Final[str] = "mealmate_"
