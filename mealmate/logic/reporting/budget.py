"""Weekly budget reporting.

Compares the estimated cost of the planned meals with the weekly budget.
"""
from typing import Any, Dict, List, Optional
from mealmate.domain.Plan import WeeklyPlan
from mealmate.domain.Recipe import Recipe
from mealmate.logic.shopping.list_builder import compute_weekly_cost
from mealmate.utilities.rounding import round2, round_half_up


def compute_budget_summary(plan: WeeklyPlan, recipes: List[Recipe], budget: Optional[float] = None) -> Dict[str, Any]:
    """Budget status for the given week.

    Returns structure:
    {
      'cost': float, 'budget': float, 'remaining': float,
      'over_budget': bool, 'over_by': float, 'percent_used': int (0..100),
      'planned_meals': int, 'total_slots': int
    }
    """
    if budget is None:
        budget = plan.budget
    cost = compute_weekly_cost(plan, recipes)
    over = cost > budget
    return {
        'cost': cost,
        'budget': budget,
        'remaining': max(0.0, round2(budget - cost)),
        'over_budget': over,
        'over_by': round2(cost - budget) if over else 0.0,
        'percent_used': min(100, round_half_up(cost / (budget or 1) * 100)),
        'planned_meals': plan.planned_meal_count(),
        'total_slots': plan.total_slots(),
    }


__all__ = ["compute_budget_summary"]
