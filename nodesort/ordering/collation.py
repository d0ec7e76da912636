"""Locale-style string collation for remark and rule-field ordering."""

from __future__ import annotations

import unicodedata
from typing import Tuple


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(text: str) -> Tuple[str, str, str]:
    """Approximate a default locale comparison.

    Base letters decide first (case and accents ignored), then accents, then
    case with lowercase ahead of uppercase.
    """
    text = text or ""
    primary = _strip_accents(text).casefold()
    secondary = unicodedata.normalize("NFD", text).casefold()
    tertiary = text.swapcase()
    return primary, secondary, tertiary


def collate(a: str, b: str, mode: str = "locale") -> int:
    if mode == "codepoint":
        key_a, key_b = a, b
    else:
        key_a, key_b = collation_key(a), collation_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0
