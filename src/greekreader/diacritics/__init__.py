"""
Diacritics utilities submodule.

Provides diacritic stripping for polytonic Greek, used to match converted
text against dictionary headwords.

Basic usage:
    >>> from greekreader.diacritics import strip_diacritics
    >>> strip_diacritics("ἄνθρωπος")
    'ανθρωπος'

    >>> from greekreader.diacritics import search_key
    >>> search_key("Λόγος")
    'λογοσ'
"""

from greekreader.diacritics._charset import search_key, strip_diacritics

__all__ = ["search_key", "strip_diacritics"]
