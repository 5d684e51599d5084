"""Grocery list builder.

Provides build_grocery_list(entries) and grocery_text(lines): expands every
weekly-menu entry into `quantity` copies of its dish's ingredients, counts
them case-insensitively and formats one display line per ingredient.
"""
from collections import defaultdict
from typing import Dict, Iterable, List

from dishbank.logic.ordering import locale_sorted


def _normalize(name: str) -> str:
    return (name or '').strip().lower()


def _display(key: str, count: int) -> str:
    label = key[:1].upper() + key[1:]
    if count > 1:
        return f"{label} ({count})"
    return label


def build_grocery_list(entries: Iterable) -> List[str]:
    """Compute the deduplicated grocery list for a weekly menu.

    Args:
        entries: MenuEntry-like objects exposing `dish.ingredients` and `quantity`.

    Returns:
        Display strings such as "Onion (3)" or "Salt", in locale order.
        An empty menu gives [].
    """
    counts: Dict[str, int] = defaultdict(int)
    for entry in entries:
        for _ in range(entry.quantity):
            for ing in entry.dish.ingredients:
                k = _normalize(ing)
                if not k:
                    continue
                counts[k] += 1
    return locale_sorted(_display(k, n) for k, n in counts.items())


def grocery_text(lines: Iterable[str]) -> str:
    """Newline-joined grocery list, the text copied to the clipboard."""
    return "\n".join(lines)


__all__ = ['build_grocery_list', 'grocery_text']
