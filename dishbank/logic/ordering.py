"""Locale-aware ordering for dish titles and grocery lines.

Strings compare first without accents or case ("eclair" == "Éclair"),
then with accents, then lower case ahead of upper case. This matches the
default collation browsers apply in ``String.prototype.localeCompare``.
"""
import unicodedata
from typing import Iterable, List, Tuple


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize('NFKD', text)
    return ''.join(ch for ch in decomposed if not unicodedata.combining(ch))


def locale_key(text: str) -> Tuple[str, str, str]:
    text = text or ''
    folded = text.casefold()
    return (_strip_accents(folded), folded, text.swapcase())


def locale_sorted(items: Iterable[str]) -> List[str]:
    return sorted(items, key=locale_key)


__all__ = ['locale_key', 'locale_sorted']
