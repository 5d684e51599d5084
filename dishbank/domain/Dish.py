"""Dish domain entity: id, title, ingredients, category (immutable once fetched)."""
import logging
from typing import Any, Iterable, Optional, Tuple

from dishbank.utilities.constants import CATEGORIES, DEFAULT_CATEGORY

logger = logging.getLogger(__name__)


def normalize_category(value: Any) -> str:
    '''Map a raw category to one of CATEGORIES; anything else becomes the default.'''
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_CATEGORY
    cat = value.strip().lower()
    if cat not in CATEGORIES:
        logger.debug("Unknown dish category %r, using %r", value, DEFAULT_CATEGORY)
        return DEFAULT_CATEGORY
    return cat


def normalize_ingredients(value: Any) -> Tuple[str, ...]:
    '''Keep the non-blank string entries of a list; anything that is not a list yields ().'''
    if not isinstance(value, (list, tuple)):
        return ()
    cleaned = []
    for item in value:
        if not isinstance(item, str):
            continue
        text = item.strip()
        if text:
            cleaned.append(text)
    return tuple(cleaned)


class Dish:
    __slots__ = ("_id", "_title", "_ingredients", "_category")

    def __init__(self, id: str, title: str, ingredients: Optional[Iterable[str]] = None,
                 category: str = DEFAULT_CATEGORY):
        self._id = str(id)
        self._title = title
        self._ingredients = tuple(ingredients) if ingredients else ()
        self._category = category

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def ingredients(self) -> Tuple[str, ...]:
        return self._ingredients

    @property
    def category(self) -> str:
        return self._category

    def __eq__(self, other) -> bool:
        if not isinstance(other, Dish):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self._id, self._title, self._ingredients, self._category))

    def __str__(self) -> str:
        return f"{self.title} [{self.category}] - {', '.join(self.ingredients)}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data, fallback_id) -> "Dish":
        '''Builds a Dish from a raw API record.

        Missing or malformed ingredients become an empty tuple and a missing
        category becomes "main". The record's own "id" wins over fallback_id.
        Raises ValueError when the record has no usable title.
        '''
        if not isinstance(data, dict):
            raise ValueError(f"Dish record is not an object: {data!r}")
        title = data.get("title")
        if isinstance(title, (int, float)) and not isinstance(title, bool):
            title = str(title)
        if not isinstance(title, str) or not title.strip():
            raise ValueError(f"Dish record has no title: {data!r}")
        raw_id = data.get("id")
        dish_id = fallback_id if raw_id in (None, "") else raw_id
        return Dish(
            id=str(dish_id),
            title=title.strip(),
            ingredients=normalize_ingredients(data.get("ingredients")),
            category=normalize_category(data.get("category")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "ingredients": list(self.ingredients),
            "category": self.category,
        }
