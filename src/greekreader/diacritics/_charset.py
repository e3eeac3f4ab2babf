"""
Diacritic stripping for polytonic Greek.

Provides:
- strip_diacritics(): remove all Greek diacritics, lowercase
- search_key(): accent-insensitive key for dictionary matching
"""

from __future__ import annotations

import unicodedata

__all__ = ["strip_diacritics", "search_key"]

# Unicode combining marks produced by the beta-code diacriticals
_COMBINING_MARKS = {
    "\u0300",  # combining grave accent
    "\u0301",  # combining acute accent
    "\u0308",  # combining diaeresis
    "\u0313",  # combining comma above (smooth breathing)
    "\u0314",  # combining reversed comma above (rough breathing)
    "\u0342",  # combining Greek perispomeni (circumflex)
    "\u0345",  # combining Greek ypogegrammeni (iota subscript)
}


def strip_diacritics(text: str) -> str:
    """
    Remove all Greek diacritics and lowercase the text.

    Decomposes polytonic characters to base + combining marks, removes
    the combining marks, then recomposes. Non-Greek characters pass through.

    Args:
        text: Greek text (possibly with polytonic diacritics)

    Returns:
        Stripped, lowercased text with only base Greek letters
    """
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(c for c in decomposed if c not in _COMBINING_MARKS)
    return unicodedata.normalize("NFC", stripped)


def search_key(text: str) -> str:
    """
    Build an accent-insensitive lookup key.

    Strips diacritics, folds final sigma to medial sigma and trims
    surrounding whitespace, so that ``Λόγος`` and ``λογος`` share a key.

    Example:
        >>> search_key(" Λόγος ")
        'λογοσ'
    """
    return strip_diacritics(text.strip()).replace("ς", "σ")
