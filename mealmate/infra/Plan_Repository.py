from mealmate.domain.Plan import WeeklyPlan
from mealmate.infra.Storage_Service import StorageService
from mealmate.utilities.constants import DAYS, MEAL_SLOTS


class PlanRepository:
    def __init__(self, storage: StorageService):
        self.storage = storage

    def get_plan(self) -> WeeklyPlan:
        plan = WeeklyPlan.from_dict(self.storage.get_plan())
        # Every day shows all three slots, even when the stored record omits some
        for day in DAYS:
            meals = plan.plan.setdefault(day, {})
            for slot in MEAL_SLOTS:
                meals.setdefault(slot, None)
        return plan

    def save_plan(self, plan: WeeklyPlan) -> bool:
        return self.storage.set_plan(plan.to_dict())

    def assign(self, day: str, meal: str, recipe_id: str) -> WeeklyPlan:
        plan = self.get_plan()
        plan.assign(day, meal, recipe_id)
        self.save_plan(plan)
        return plan

    def clear(self, day: str, meal: str) -> WeeklyPlan:
        plan = self.get_plan()
        plan.clear(day, meal)
        self.save_plan(plan)
        return plan

    def move(self, from_day: str, from_meal: str, to_day: str, to_meal: str) -> WeeklyPlan:
        plan = self.get_plan()
        plan.move(from_day, from_meal, to_day, to_meal)
        self.save_plan(plan)
        return plan

    def reset_week(self) -> WeeklyPlan:
        """Empty every slot of the stored week."""
        plan = self.get_plan()
        plan.reset()
        self.save_plan(plan)
        return plan

    def set_budget(self, budget: float) -> WeeklyPlan:
        """Store the weekly budget in both the settings record and the plan."""
        if budget < 0:
            raise ValueError(f"Budget cannot be negative: {budget}")
        settings = dict(self.storage.get_settings())
        settings["budget"] = budget
        self.storage.set_settings(settings)
        plan = self.get_plan()
        plan.budget = budget
        self.save_plan(plan)
        return plan
