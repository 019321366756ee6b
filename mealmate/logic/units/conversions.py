"""Unit conversion between units of the same physical dimension.

Dimensions: volume (ml base), mass (g base), count (pcs base).
Every unit maps to exactly one dimension and one linear multiplier to its base.
"""
from types import MappingProxyType
from typing import Final, Mapping, Optional, Tuple

__all__ = ["TO_BASE", "DIMENSION", "BASE_UNITS", "convert", "base_unit", "to_base"]

# unit -> base-unit multiplier
TO_BASE: Final[Mapping[str, float]] = MappingProxyType({
    # Volume (base: ml)
    'ml': 1,
    'l': 1000,
    'L': 1000,
    'tbsp': 15,
    'tsp': 5,
    'cup': 240,
    # Mass (base: g)
    'g': 1,
    'kg': 1000,
    # Count (base: pcs)
    'pcs': 1,
    'slices': 1,
})

DIMENSION: Final[Mapping[str, str]] = MappingProxyType({
    'ml': 'volume', 'l': 'volume', 'L': 'volume', 'tbsp': 'volume', 'tsp': 'volume', 'cup': 'volume',
    'g': 'mass', 'kg': 'mass',
    'pcs': 'count', 'slices': 'count',
})

BASE_UNITS: Final[Mapping[str, str]] = MappingProxyType({'volume': 'ml', 'mass': 'g', 'count': 'pcs'})


def convert(value: float, from_unit: str, to_unit: str) -> Optional[float]:
    """Convert a value from one unit to another.

    Returns None when the units are incompatible: either unit is unknown or the
    two belong to different dimensions. Callers must then leave the value alone.
    """
    if from_unit == to_unit:
        return value
    from_dim = DIMENSION.get(from_unit)
    to_dim = DIMENSION.get(to_unit)
    if from_dim is None or to_dim is None or from_dim != to_dim:
        return None
    return value * TO_BASE[from_unit] / TO_BASE[to_unit]


def base_unit(unit: str) -> str:
    """Base unit of the unit's dimension; unknown units count as pieces."""
    dim = DIMENSION.get(unit, 'count')
    return BASE_UNITS[dim]


def to_base(qty: float, unit: str) -> Tuple[float, str]:
    """Express (qty, unit) in the base unit of its dimension."""
    multiplier = TO_BASE.get(unit, 1)
    return qty * multiplier, base_unit(unit)
