"""Dish catalog aggregate: the sorted, in-memory dish bank fetched from the remote API."""
import logging
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from dishbank.domain.Dish import Dish
from dishbank.errors import DishSourceError
from dishbank.logic.ordering import locale_key
from dishbank.utilities.constants import CATEGORIES

logger = logging.getLogger(__name__)


def _unique_id(base: str, taken: Set[str]) -> str:
    n = 2
    while f"{base}-{n}" in taken:
        n += 1
    return f"{base}-{n}"


def build_dishes(records: Iterable[Any]) -> List[Dish]:
    """Normalize raw API records into Dish objects sorted by title.

    Records without a usable title are skipped. When the source gives no id,
    the record's position in the response is used, so ids stay the same across
    reloads as long as the sheet rows keep their order.

    Ids are unique in the result. Ids supplied by the source are kept first
    come, first served; a repeated source id or a positional id that collides
    with one gets a "-2", "-3"... suffix.
    """
    parsed: List[Tuple[Dish, bool]] = []
    for position, record in enumerate(records):
        try:
            dish = Dish.from_dict(record, fallback_id=position)
        except ValueError as e:
            logger.warning("Skipping dish record %d: %s", position, e)
            continue
        parsed.append((dish, record.get("id") not in (None, "")))

    taken: Set[str] = set()
    keep = [False] * len(parsed)
    for i, (dish, from_source) in enumerate(parsed):
        if from_source and dish.id not in taken:
            taken.add(dish.id)
            keep[i] = True

    dishes: List[Dish] = []
    for i, (dish, _) in enumerate(parsed):
        if not keep[i]:
            if dish.id in taken:
                new_id = _unique_id(dish.id, taken)
                logger.warning("Dish id %r already used, %r gets id %r", dish.id, dish.title, new_id)
                dish = Dish(new_id, dish.title, dish.ingredients, dish.category)
            taken.add(dish.id)
        dishes.append(dish)
    dishes.sort(key=lambda d: locale_key(d.title))
    return dishes


class Catalog:
    def __init__(self, dishes: Optional[Iterable[Dish]] = None):
        self.dishes: List[Dish] = list(dishes) if dishes else []
        self.last_error: Optional[str] = None

    def replace(self, dishes: Iterable[Dish]):
        '''
        Replaces the whole dish bank (previous Dish objects are dropped).
        '''
        self.dishes = list(dishes)
        return self

    async def load(self, source) -> List[Dish]:
        '''
        Fetches records from source (anything with an async fetch_dishes()),
        normalizes and sorts them, and replaces the cache.

        Single attempt. On failure the error is logged, remembered in
        last_error, and the cache is left as it was.
        '''
        try:
            records = await source.fetch_dishes()
        except DishSourceError as e:
            logger.error("Error fetching dishes: %s", e)
            self.last_error = str(e)
            return list(self.dishes)
        self.replace(build_dishes(records))
        self.last_error = None
        logger.info("Loaded %d dishes", len(self.dishes))
        return list(self.dishes)

    def filter(self, category: Optional[str], query: str = "") -> List[Dish]:
        '''
        Dishes of exactly this category whose title contains query, ignoring case.
        A category of None keeps every category. Cache order is preserved.
        '''
        needle = (query or "").lower()
        return [
            d for d in self.dishes
            if (category is None or d.category == category) and needle in d.title.lower()
        ]

    def grouped(self, query: str = "") -> Dict[str, List[Dish]]:
        return {cat: self.filter(cat, query) for cat in CATEGORIES}

    def get(self, dish_id: str) -> Optional[Dish]:
        for dish in self.dishes:
            if dish.id == str(dish_id):
                return dish
        return None

    def __len__(self) -> int:
        return len(self.dishes)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(d) for d in self.dishes)
        return f"Dishes:\n\t{items_str}"

    __repr__ = __str__
