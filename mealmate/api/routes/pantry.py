from fastapi import APIRouter, Depends, HTTPException
from mealmate.api.deps import get_storage
from mealmate.infra.Pantry_Repository import PantryRepository
from mealmate.infra.Storage_Service import StorageService
from mealmate.utilities.constants import PANTRY_UNITS
from mealmate.utilities.validators import PantryItemInput, PantryQuantityInput

router = APIRouter(prefix="/api/pantry", tags=["pantry"])


@router.get("")
def list_pantry(storage: StorageService = Depends(get_storage)):
    items = PantryRepository(storage).load().to_dict()
    return {"count": len(items), "items": items, "units": list(PANTRY_UNITS)}


@router.post("")
def add_pantry_item(payload: PantryItemInput, storage: StorageService = Depends(get_storage)):
    try:
        item = PantryRepository(storage).add_item(payload.name, payload.qty, payload.unit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return item.to_dict()


@router.put("/{item_id}")
def update_pantry_item(item_id: str, payload: PantryQuantityInput, storage: StorageService = Depends(get_storage)):
    try:
        item = PantryRepository(storage).update_quantity(item_id, payload.qty)
    except KeyError:
        raise HTTPException(status_code=404, detail="Pantry item not found")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return item.to_dict()


@router.delete("/{item_id}")
def delete_pantry_item(item_id: str, storage: StorageService = Depends(get_storage)):
    try:
        item = PantryRepository(storage).remove_item(item_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Pantry item not found")
    return {"deleted": item.to_dict()}
