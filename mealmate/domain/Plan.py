"""Plan domain entity: weekly meal schedule (week label, budget, day -> slot -> recipe reference)."""
from typing import Dict, Iterator, Optional, Tuple, Any
from mealmate.utilities.constants import DAYS, MEAL_SLOTS, EMPTY_SLOT_MARKERS


class RecipeRef:
    """Reference from a plan slot to a recipe in the catalog."""

    def __init__(self, recipe_id: str):
        self.recipe_id = recipe_id

    def __eq__(self, other) -> bool:
        return isinstance(other, RecipeRef) and other.recipe_id == self.recipe_id

    def __hash__(self) -> int:
        return hash(self.recipe_id)

    def __repr__(self) -> str:
        return f"RecipeRef({self.recipe_id!r})"


# A slot either holds a recipe reference or nothing (None = no meal planned)
Slot = Optional[RecipeRef]


def parse_slot(value: Any) -> Slot:
    """Turn a stored slot value into a Slot; every empty marker maps to None."""
    if value is None:
        return None
    if isinstance(value, RecipeRef):
        return value
    recipe_id = str(value).strip()
    if recipe_id in EMPTY_SLOT_MARKERS:
        return None
    return RecipeRef(recipe_id)


class WeeklyPlan:
    def __init__(self, week_of: str = "", budget: float = 0, plan: Optional[Dict[str, Dict[str, Slot]]] = None):
        self.week_of = week_of
        self.budget = budget
        self.plan: Dict[str, Dict[str, Slot]] = plan if plan is not None else {}

    def slot(self, day: str, meal: str) -> Slot:
        return self.plan.get(day, {}).get(meal)

    def iter_slots(self) -> Iterator[Tuple[str, str, Slot]]:
        """Yield (day, meal, slot) in stored day-then-meal order."""
        for day, meals in self.plan.items():
            for meal, slot in meals.items():
                yield day, meal, slot

    def planned_refs(self):
        """Recipe references of every filled slot, in traversal order."""
        return [slot for _, _, slot in self.iter_slots() if slot is not None]

    def planned_meal_count(self) -> int:
        return len(self.planned_refs())

    @staticmethod
    def total_slots() -> int:
        return len(DAYS) * len(MEAL_SLOTS)

    def assign(self, day: str, meal: str, recipe_id: str):
        '''Puts a recipe into a slot, replacing whatever was there.'''
        _check_slot(day, meal)
        self.plan.setdefault(day, {})[meal] = RecipeRef(recipe_id)

    def clear(self, day: str, meal: str):
        _check_slot(day, meal)
        if day in self.plan:
            self.plan[day][meal] = None

    def move(self, from_day: str, from_meal: str, to_day: str, to_meal: str):
        '''Moves a planned meal to another slot; the source slot becomes empty.'''
        source = self.slot(from_day, from_meal)
        if source is None:
            raise ValueError(f"No meal planned for {from_day} {from_meal}")
        self.assign(to_day, to_meal, source.recipe_id)
        if (from_day, from_meal) != (to_day, to_meal):
            self.clear(from_day, from_meal)

    def reset(self):
        '''Empties every slot of the week.'''
        for meals in self.plan.values():
            for meal in meals:
                meals[meal] = None

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "WeeklyPlan":
        d = dict(data) if isinstance(data, dict) else {}
        raw_plan = d.get("plan") or {}
        plan = {
            day: {meal: parse_slot(value) for meal, value in (meals or {}).items()}
            for day, meals in raw_plan.items()
        }
        try:
            budget = float(d.get("budget", 0) or 0)
        except (TypeError, ValueError):
            budget = 0.0
        return WeeklyPlan(week_of=str(d.get("weekOf", "") or ""), budget=budget, plan=plan)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "weekOf": self.week_of,
            "budget": self.budget,
            "plan": {
                day: {meal: (slot.recipe_id if slot is not None else None) for meal, slot in meals.items()}
                for day, meals in self.plan.items()
            },
        }


def _check_slot(day: str, meal: str):
    if day not in DAYS:
        raise ValueError(f"Invalid day: {day}")
    if meal not in MEAL_SLOTS:
        raise ValueError(f"Invalid meal: {meal}")
