"""Numeric helpers shared by scaling, aggregation, deduction and cost totals."""
import math


def round2(value: float) -> float:
    """Round to 2 decimals, halves going up (x * 100, round, / 100)."""
    return math.floor(value * 100 + 0.5) / 100


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
