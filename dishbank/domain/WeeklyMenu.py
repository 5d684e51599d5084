"""Weekly menu aggregate: ordered (dish, quantity) entries, unique by dish title."""
from typing import List, Optional

from dishbank.domain.Dish import Dish
from dishbank.events.Event_Bus import GLOBAL_EVENT_BUS, MENU_CHANGED
from dishbank.logic.shopping.list_builder import build_grocery_list, grocery_text


class MenuEntry:
    def __init__(self, dish: Dish, quantity: int = 1):
        if quantity < 1:
            raise ValueError(f"Quantity must be at least 1: {quantity}")
        self.dish = dish
        self.quantity = quantity

    @property
    def title(self) -> str:
        return self.dish.title

    def __str__(self) -> str:
        return f"{self.dish.title} x{self.quantity}"

    __repr__ = __str__


class WeeklyMenu:
    def __init__(self):
        self.entries: List[MenuEntry] = []
        self._event_bus = GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _notify_changed(self):
        self._event_bus.publish(MENU_CHANGED, {
            "count": len(self.entries),
            "servings": sum(e.quantity for e in self.entries),
        })

    def _in_range(self, index: int) -> bool:
        return isinstance(index, int) and 0 <= index < len(self.entries)

    # --- Commands ---------------------------------------------------------
    def find(self, title: str) -> Optional[MenuEntry]:
        for entry in self.entries:
            if entry.dish.title == title:
                return entry
        return None

    def add_or_increment(self, dish: Dish) -> MenuEntry:
        '''
        Adds dish with quantity 1, or bumps the quantity of the entry that
        already has the same title. Titles are the identity key.
        '''
        entry = self.find(dish.title)
        if entry is None:
            entry = MenuEntry(dish)
            self.entries.append(entry)
        else:
            entry.quantity += 1
        self._notify_changed()
        return entry

    def set_quantity(self, index: int, delta: int) -> bool:
        '''
        Adjusts the quantity at index by delta. A change that would drop the
        quantity below 1, or an index out of range, is ignored.
        Returns True if the menu changed.
        '''
        if not self._in_range(index):
            return False
        entry = self.entries[index]
        new_quantity = entry.quantity + delta
        if new_quantity < 1 or delta == 0:
            return False
        entry.quantity = new_quantity
        self._notify_changed()
        return True

    def remove(self, index: int) -> bool:
        '''
        Deletes the entry at index; out-of-range (and negative) indexes are a no-op.
        '''
        if not self._in_range(index):
            return False
        del self.entries[index]
        self._notify_changed()
        return True

    def clear(self):
        if self.entries:
            self.entries = []
            self._notify_changed()
        return self

    # --- Derived views ----------------------------------------------------
    def extract_grocery_list(self) -> List[str]:
        return build_grocery_list(self.entries)

    def grocery_text(self) -> str:
        return grocery_text(self.extract_grocery_list())

    def get_entries(self) -> List[MenuEntry]:
        return self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(e) for e in self.entries)
        return f"Weekly menu:\n\t{items_str}"

    __repr__ = __str__
