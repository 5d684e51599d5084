"""Planner controller.

Owns one dish catalog and one weekly menu and exposes every user action as a
method. The web layer keeps a single MealPlanner on app.state; tests build
their own with a repository backed by httpx.MockTransport.
"""
import logging
from typing import Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from dishbank.domain.Catalog import Catalog
from dishbank.domain.Dish import Dish
from dishbank.domain.WeeklyMenu import MenuEntry, WeeklyMenu
from dishbank.errors import DishSourceError, DishValidationError
from dishbank.events.Event_Bus import (
    GLOBAL_EVENT_BUS, EventBus,
    CATALOG_LOADED, CATALOG_LOAD_FAILED, DISH_REJECTED, DISH_SAVED, DISH_SAVE_FAILED,
)
from dishbank.infra.Dish_Repository import DishRepository
from dishbank.utilities.validators import NewDishInput, split_ingredients

logger = logging.getLogger(__name__)


def _first_message(exc: ValidationError) -> str:
    for err in exc.errors():
        ctx = err.get('ctx') or {}
        if isinstance(ctx.get('error'), Exception):
            return str(ctx['error'])
        loc = '.'.join(str(p) for p in err.get('loc', ()))
        return f"{loc}: {err.get('msg', 'invalid value')}" if loc else err.get('msg', 'invalid value')
    return str(exc)


class MealPlanner:
    def __init__(self, repository: DishRepository, event_bus: Optional[EventBus] = None):
        self.repository = repository
        self._event_bus = event_bus or GLOBAL_EVENT_BUS
        self.catalog = Catalog()
        self.menu = WeeklyMenu().set_event_bus(self._event_bus)

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    # --- Catalog ----------------------------------------------------------
    async def load_catalog(self) -> bool:
        """Fetch the dish bank once; on failure keep the previous catalog and report False."""
        await self.catalog.load(self.repository)
        if self.catalog.last_error:
            self._event_bus.publish(CATALOG_LOAD_FAILED, {"error": self.catalog.last_error})
            return False
        self._event_bus.publish(CATALOG_LOADED, {"count": len(self.catalog)})
        return True

    def filter_dishes(self, category: Optional[str] = None, query: str = "") -> List[Dish]:
        return self.catalog.filter(category, query)

    def grouped_dishes(self, query: str = "") -> Dict[str, List[Dish]]:
        return self.catalog.grouped(query)

    # --- Weekly menu ------------------------------------------------------
    def add_to_menu(self, dish_id: str) -> Optional[MenuEntry]:
        dish = self.catalog.get(dish_id)
        if dish is None:
            logger.warning("Unknown dish id %r", dish_id)
            return None
        return self.menu.add_or_increment(dish)

    def change_quantity(self, index: int, delta: int) -> bool:
        return self.menu.set_quantity(index, delta)

    def remove_from_menu(self, index: int) -> bool:
        return self.menu.remove(index)

    def clear_menu(self):
        self.menu.clear()
        return self

    def grocery_list(self) -> List[str]:
        return self.menu.extract_grocery_list()

    def grocery_text(self) -> str:
        return self.menu.grocery_text()

    # --- New dishes -------------------------------------------------------
    async def submit_dish(self, title: Optional[str], ingredients: Union[str, Iterable[str], None],
                          category: Optional[str] = None) -> bool:
        """Validate and POST a new dish, then reload the catalog.

        Raises DishValidationError (no network call made) for an empty title or
        ingredient list. Returns False if the POST itself failed.
        """
        if isinstance(ingredients, str):
            ingredients = split_ingredients(ingredients)
        elif not isinstance(ingredients, (list, tuple)):
            ingredients = []
        try:
            new_dish = NewDishInput(title=title or "", ingredients=[str(i) for i in ingredients if i is not None],
                                    category=category)
        except ValidationError as e:
            message = _first_message(e)
            self._event_bus.publish(DISH_REJECTED, {"title": title or "", "message": message})
            raise DishValidationError(message) from e

        try:
            response_text = await self.repository.save_dish(new_dish.model_dump())
        except DishSourceError as e:
            logger.error("Error saving dish: %s", e)
            self._event_bus.publish(DISH_SAVE_FAILED, {"title": new_dish.title, "error": str(e)})
            return False

        self._event_bus.publish(DISH_SAVED, {"title": new_dish.title, "response": response_text})
        await self.load_catalog()
        return True


__all__ = ['MealPlanner']
