from fastapi import (
    FastAPI,
    Request,
    Query,
    Form,
    Depends,
)
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from typing import Optional
import asyncio
import logging
from urllib.parse import urlencode

from dishbank.api.dependencies import get_alerts, get_planner
from dishbank.api.routes import dishes, menu
from dishbank.errors import DishValidationError
from dishbank.events.web_observers import AlertFeed
from dishbank.infra.Dish_Repository import DishRepository
from dishbank.logic.planner import MealPlanner
from dishbank.utilities.config import DISHES_API_URL, DISHES_API_TIMEOUT, TEMPLATES_DIR
from dishbank.utilities.constants import CATEGORIES, CATEGORY_LABELS

# Logging
logger = logging.getLogger("dishbank_app")

NOTICES = {
    "saved": "Dish saved.",
    "invalid": "Please enter a dish title and at least one ingredient.",
    "save_failed": "Could not save dish. Check DISHES_API_URL.",
    "cleared": "Weekly menu cleared.",
}

# Initialize FastAPI app
app = FastAPI(title="Dish Bank Weekly Menu")

# Every run starts from an empty weekly menu; state lives only on app.state
app.state.planner = MealPlanner(DishRepository(DISHES_API_URL, timeout=DISHES_API_TIMEOUT))
app.state.alerts = AlertFeed().attach(app.state.planner.event_bus)
app.state.catalog_task = None

# Include routers
app.include_router(dishes.router)
app.include_router(menu.router)

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _log_task_failure(task: asyncio.Task):
    if not task.cancelled() and task.exception() is not None:
        logger.error("Initial dish load crashed: %r", task.exception())


@app.on_event("startup")
async def _startup_load_catalog():
    """Fetch the dish bank in the background; the server does not wait for it."""
    task = asyncio.create_task(app.state.planner.load_catalog())
    task.add_done_callback(_log_task_failure)
    app.state.catalog_task = task
    logger.info("Initial dish load scheduled from %s", app.state.planner.repository.api_url)


def _back_home(notice: Optional[str] = None, q: str = "") -> RedirectResponse:
    params = {k: v for k, v in (("notice", notice), ("q", q)) if v}
    url = "/" + ("?" + urlencode(params) if params else "")
    return RedirectResponse(url=url, status_code=303)

# -------------------- UI PAGE --------------------
@app.get("/", response_class=HTMLResponse)
def main_page(request: Request, q: str = Query(default=""), notice: Optional[str] = Query(default=None),
              planner: MealPlanner = Depends(get_planner)):
    grouped = planner.grouped_dishes(q)
    groups = [
        {"category": cat, "label": CATEGORY_LABELS[cat], "dishes": grouped[cat]}
        for cat in CATEGORIES
    ]
    grocery_lines = planner.grocery_list()
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "groups": groups,
            "entries": list(enumerate(planner.menu.get_entries())),
            "grocery_lines": grocery_lines,
            "grocery_text": "\n".join(grocery_lines),
            "categories": [(cat, CATEGORY_LABELS[cat]) for cat in CATEGORIES],
            "query": q,
            "notice_message": NOTICES.get(notice),
            "load_error": planner.catalog.last_error,
        }
    )

# -------------------- Form handlers (redirect back to the page) --------------------
@app.post("/menu/add")
def form_add_to_menu(dish_id: str = Form(...), q: str = Form(""),
                     planner: MealPlanner = Depends(get_planner)):
    planner.add_to_menu(dish_id)
    return _back_home(q=q)


@app.post("/menu/{index}/increment")
def form_increment(index: int, planner: MealPlanner = Depends(get_planner)):
    planner.change_quantity(index, 1)
    return _back_home()


@app.post("/menu/{index}/decrement")
def form_decrement(index: int, planner: MealPlanner = Depends(get_planner)):
    planner.change_quantity(index, -1)
    return _back_home()


@app.post("/menu/{index}/remove")
def form_remove(index: int, planner: MealPlanner = Depends(get_planner)):
    planner.remove_from_menu(index)
    return _back_home()


@app.post("/menu/clear")
def form_clear(planner: MealPlanner = Depends(get_planner)):
    planner.clear_menu()
    return _back_home("cleared")


@app.post("/dishes/add")
async def form_add_dish(title: str = Form(""), ingredients: str = Form(""), category: str = Form("main"),
                        planner: MealPlanner = Depends(get_planner)):
    try:
        saved = await planner.submit_dish(title, ingredients, category)
    except DishValidationError:
        return _back_home("invalid")
    return _back_home("saved" if saved else "save_failed")

# -------------------- API: Alerts (polled by the page) --------------------
@app.get('/api/alerts')
def api_alerts(
    since: Optional[int] = Query(default=None, description="Return alerts with id greater than this value"),
    alerts: AlertFeed = Depends(get_alerts),
):
    """
    Return recent planner alerts (dish bank load failure, rejected or failed dish saves).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from response.
        3. Subsequent polls: /api/alerts?since=<next_cursor>
    """
    return alerts.get_events(since)
