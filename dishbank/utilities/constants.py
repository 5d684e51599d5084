from typing import Final

CATEGORIES: Final[tuple[str, ...]] = ("main", "side", "snacks")
DEFAULT_CATEGORY: Final[str] = "main"
CATEGORY_LABELS: Final[dict[str, str]] = {
    "main": "Main dishes",
    "side": "Sides",
    "snacks": "Snacks",
}
INGREDIENT_SEPARATOR: Final[str] = ","
MAX_ALERT_EVENTS: Final[int] = 300
