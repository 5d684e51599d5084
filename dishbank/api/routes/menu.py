from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import PlainTextResponse

from dishbank.api.dependencies import get_planner
from dishbank.infra.pdf_utils import generate_pdf_for_menu
from dishbank.logic.planner import MealPlanner
from dishbank.utilities.validators import MenuAddInput, QuantityChangeInput

router = APIRouter()


def menu_payload(planner: MealPlanner) -> dict:
    entries = [
        {
            "index": i,
            "title": e.dish.title,
            "category": e.dish.category,
            "quantity": e.quantity,
            "dish": e.dish.to_dict(),
        }
        for i, e in enumerate(planner.menu.get_entries())
    ]
    return {"count": len(entries), "entries": entries}


@router.get("/api/menu")
def get_menu(planner: MealPlanner = Depends(get_planner)):
    return menu_payload(planner)


@router.post("/api/menu")
def add_to_menu(payload: MenuAddInput, planner: MealPlanner = Depends(get_planner)):
    """Add a catalog dish, or bump its quantity if the title is already on the menu."""
    if planner.add_to_menu(payload.dish_id) is None:
        raise HTTPException(status_code=404, detail="Dish not found")
    return menu_payload(planner)


@router.delete("/api/menu")
def clear_menu(planner: MealPlanner = Depends(get_planner)):
    planner.clear_menu()
    return menu_payload(planner)


@router.post("/api/menu/{index}/quantity")
def change_quantity(index: int, payload: QuantityChangeInput, planner: MealPlanner = Depends(get_planner)):
    """+1 / -1 on one entry. Quantity never drops below 1; unknown index changes nothing."""
    changed = planner.change_quantity(index, payload.delta)
    return {"changed": changed, **menu_payload(planner)}


@router.delete("/api/menu/{index}")
def remove_from_menu(index: int, planner: MealPlanner = Depends(get_planner)):
    removed = planner.remove_from_menu(index)
    return {"removed": removed, **menu_payload(planner)}


@router.get("/api/grocery-list")
def grocery_list(planner: MealPlanner = Depends(get_planner)):
    items = planner.grocery_list()
    return {"count": len(items), "items": items, "text": "\n".join(items)}


@router.get("/api/grocery-list.txt", response_class=PlainTextResponse)
def grocery_list_text(planner: MealPlanner = Depends(get_planner)):
    return PlainTextResponse(planner.grocery_text())


@router.get("/api/menu/pdf")
def export_pdf(planner: MealPlanner = Depends(get_planner)):
    pdf_bytes = generate_pdf_for_menu(planner.menu.get_entries(), planner.grocery_list())
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": "attachment; filename=weekly_menu.pdf"
        }
    )
