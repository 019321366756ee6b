from fastapi import (
    FastAPI,
    Query,
    HTTPException,
    Response,
    Depends
)
from typing import Any, Dict
import io
import logging

from mealmate.api.deps import get_storage
from mealmate.api.routes import pantry, recipes
from mealmate.domain.Plan import WeeklyPlan
from mealmate.infra.grocery_snapshot import load_grocery_snapshot
from mealmate.infra.pdf_utils import generate_pdf_for_grocery_list
from mealmate.infra.Plan_Repository import PlanRepository
from mealmate.infra.Recipe_Repository import RecipeRepository
from mealmate.infra.seed import seed_if_needed
from mealmate.infra.Storage_Service import StorageService
from mealmate.logic.reporting.budget import compute_budget_summary
from mealmate.logic.shopping.categories import group_by_category
from mealmate.logic.shopping.list_builder import compute_weekly_cost
from mealmate.utilities.config import DEBUG
from mealmate.utilities.export_import import DataExporter, DataImporter
from mealmate.utilities.validators import (
    SlotUpdateInput,
    SlotMoveInput,
    BudgetInput,
    ImportDocumentInput
)

# Logging
logger = logging.getLogger("mealmate_app")

# Initialize FastAPI app
app = FastAPI(title="MealMate Planner & Grocery API", debug=DEBUG)

# Include routers
app.include_router(recipes.router)
app.include_router(pantry.router)


@app.on_event("startup")
def _startup_seed_store():
    """Seed the store with sample data on first run."""
    try:
        if seed_if_needed(get_storage()):
            logger.info("Store seeded with sample recipes, pantry and plan")
    except OSError as e:
        logger.error("Failed to seed store: %s", e)

# -------------------- Helpers --------------------
def _plan_payload(plan: WeeklyPlan, storage: StorageService) -> Dict[str, Any]:
    recipes_list = RecipeRepository(storage).list()
    settings = storage.get_settings()
    return {
        **plan.to_dict(),
        "summary": compute_budget_summary(plan, recipes_list, settings.get("budget", plan.budget)),
        "currency": settings.get("currency"),
    }


# -------------------- Plan --------------------
@app.get('/api/plan')
def api_plan(storage: StorageService = Depends(get_storage)):
    return _plan_payload(PlanRepository(storage).get_plan(), storage)


@app.put('/api/plan/slot')
def api_assign_slot(payload: SlotUpdateInput, storage: StorageService = Depends(get_storage)):
    if RecipeRepository(storage).get(payload.recipe_id) is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    plan = PlanRepository(storage).assign(payload.day, payload.meal, payload.recipe_id)
    return _plan_payload(plan, storage)


@app.delete('/api/plan/slot/{day}/{meal}')
def api_clear_slot(day: str, meal: str, storage: StorageService = Depends(get_storage)):
    try:
        plan = PlanRepository(storage).clear(day, meal)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _plan_payload(plan, storage)


@app.post('/api/plan/move')
def api_move_slot(payload: SlotMoveInput, storage: StorageService = Depends(get_storage)):
    try:
        plan = PlanRepository(storage).move(payload.from_day, payload.from_meal, payload.to_day, payload.to_meal)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _plan_payload(plan, storage)


@app.post('/api/plan/reset')
def api_reset_plan(storage: StorageService = Depends(get_storage)):
    return _plan_payload(PlanRepository(storage).reset_week(), storage)


@app.put('/api/plan/budget')
def api_set_budget(payload: BudgetInput, storage: StorageService = Depends(get_storage)):
    plan = PlanRepository(storage).set_budget(payload.budget)
    return _plan_payload(plan, storage)


@app.get('/api/plan/cost')
def api_plan_cost(storage: StorageService = Depends(get_storage)):
    plan = PlanRepository(storage).get_plan()
    settings = storage.get_settings()
    summary = compute_budget_summary(plan, RecipeRepository(storage).list(), settings.get("budget", plan.budget))
    summary["currency"] = settings.get("currency")
    return summary

# -------------------- Grocery list --------------------
@app.get('/api/grocery-list')
@app.get('/api/grocery-list/')
def api_grocery_list(deduct: bool = Query(default=True),
                     grouped: bool = Query(default=True),
                     storage: StorageService = Depends(get_storage)):
    plan, recipes_list, raw_list, final_list = load_grocery_snapshot(storage, deduct)
    settings = storage.get_settings()
    budget = settings.get("budget", plan.budget)
    cost = compute_weekly_cost(plan, recipes_list)
    response = {
        'items': [i.to_dict() for i in final_list],
        'count': len(final_list),
        'raw_count': len(raw_list),
        'cost': cost,
        'budget': budget,
        'over_budget': cost > budget,
        'currency': settings.get("currency"),
    }
    if grouped:
        response['groups'] = [
            {'category': g['category'], 'items': [i.to_dict() for i in g['items']]}
            for g in group_by_category(final_list)
        ]
    return response


@app.get('/api/grocery-list/csv')
def api_grocery_list_csv(deduct: bool = Query(default=True), storage: StorageService = Depends(get_storage)):
    snapshot = load_grocery_snapshot(storage, deduct)
    buffer = io.StringIO()
    DataExporter(storage).write_grocery_csv(snapshot.final_list, buffer)
    filename = f"grocery_list_{snapshot.plan.week_of or 'week'}.csv"
    return Response(
        content=buffer.getvalue(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )


@app.get('/api/grocery-list/pdf')
def api_grocery_list_pdf(deduct: bool = Query(default=True), storage: StorageService = Depends(get_storage)):
    plan, recipes_list, _, final_list = load_grocery_snapshot(storage, deduct)
    settings = storage.get_settings()
    pdf_bytes = generate_pdf_for_grocery_list(
        group_by_category(final_list),
        compute_weekly_cost(plan, recipes_list),
        currency=settings.get("currency", ""),
        week_of=plan.week_of,
    )
    filename = f"grocery_list_{plan.week_of or 'week'}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )

# -------------------- Export / Import --------------------
@app.get('/api/export')
def api_export(storage: StorageService = Depends(get_storage)):
    return DataExporter(storage).export_document()


@app.post('/api/import')
def api_import(payload: ImportDocumentInput, storage: StorageService = Depends(get_storage)):
    written = DataImporter(storage).import_document(payload.model_dump())
    return {'imported': written}
