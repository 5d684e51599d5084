from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from dishbank.api.dependencies import get_planner
from dishbank.errors import DishValidationError
from dishbank.logic.planner import MealPlanner
from dishbank.utilities.constants import CATEGORIES

router = APIRouter()


@router.get("/api/dishes")
def list_dishes(category: Optional[str] = Query(default=None),
                q: str = Query(default=""),
                planner: MealPlanner = Depends(get_planner)):
    """Dish bank filtered by category (all when omitted) and title substring."""
    if category is not None and category not in CATEGORIES:
        raise HTTPException(status_code=400, detail=f"Unknown category: {category}")
    dishes = planner.filter_dishes(category, q)
    return {"count": len(dishes), "dishes": [d.to_dict() for d in dishes]}


@router.post("/api/dishes")
async def add_dish(data: dict = Body(...), planner: MealPlanner = Depends(get_planner)):
    """Save a new dish to the remote sheet, then reload the dish bank.

    `ingredients` may be a list or a comma-separated string.
    """
    try:
        saved = await planner.submit_dish(data.get("title"), data.get("ingredients"), data.get("category"))
    except DishValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not saved:
        raise HTTPException(status_code=502, detail="Could not save dish. Check DISHES_API_URL.")
    return {"status": "success", "count": len(planner.catalog)}


@router.post("/api/catalog/refresh")
async def refresh_catalog(planner: MealPlanner = Depends(get_planner)):
    loaded = await planner.load_catalog()
    return {"loaded": loaded, "count": len(planner.catalog), "error": planner.catalog.last_error}
