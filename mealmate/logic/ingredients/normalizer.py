"""Maps ingredient name variants to a canonical lowercase key.

Aggregation and pantry matching treat two ingredients as the same item
exactly when their keys are equal ("Tomatoes" and "tomato" -> "tomato").
"""
from types import MappingProxyType
from typing import Final, Mapping

# variant -> canonical
SYNONYMS: Final[Mapping[str, str]] = MappingProxyType({
    'tomatoes': 'tomato',
    'cherry tomatoes': 'cherry tomato',
    'eggs': 'egg',
    'potatoes': 'potato',
    'onions': 'onion',
    'carrots': 'carrot',
    'lemons': 'lemon',
    'garlic': 'garlic cloves',
    'bananas': 'banana',
    'avocados': 'avocado',
})


def normalise(name: str) -> str:
    lower = (name or '').lower().strip()
    return SYNONYMS.get(lower, lower)


__all__ = ['SYNONYMS', 'normalise']
