"""
greekreader: beta-code to polytonic Greek conversion for a reading app.

Converts ASCII beta code into Greek Unicode, and provides the dictionary
and reading-position components the reader builds on.

Basic usage:
    >>> from greekreader import convert
    >>> convert("mh=nin a)/eide qea/")
    'μῆνιν ἄειδε θεά\\n'

Per-component usage:
    >>> from greekreader.betacode import BetaCodeConverter, MappingTable
    >>> converter = BetaCodeConverter(MappingTable.default())
    >>> converter.convert_word("lo/gos")
    'λόγος'

    >>> from greekreader.dictionary import DictionaryStore
    >>> store = DictionaryStore({"λόγος": "word"}, converter=converter)
    >>> store.lookup("lo/gos").definition
    'word'
"""

from greekreader.betacode import (
    BetaCodeConverter,
    MappingTable,
    Passthrough,
    TransliterationResult,
    convert_betacode,
    normalize_final_sigma,
)
from greekreader.diacritics import search_key, strip_diacritics
from greekreader.dictionary import DictionaryEntry, DictionaryStore
from greekreader.errors import DictionaryError, GreekReaderError, MappingTableError
from greekreader.reading import Book, Position, PositionStore, ReadingPosition, Work

__version__ = "0.1.0"
__all__ = [
    "convert",
    "BetaCodeConverter",
    "MappingTable",
    "Passthrough",
    "TransliterationResult",
    "convert_betacode",
    "normalize_final_sigma",
    "search_key",
    "strip_diacritics",
    "DictionaryEntry",
    "DictionaryStore",
    "Book",
    "Position",
    "PositionStore",
    "ReadingPosition",
    "Work",
    "GreekReaderError",
    "MappingTableError",
    "DictionaryError",
]


def convert(text: str) -> str:
    """
    Convert beta-code text to polytonic Greek with the bundled table.

    Args:
        text: Beta-code text (newline-separated lines, space-separated words)

    Returns:
        Greek text, each line terminated by a newline
    """
    return convert_betacode(text)


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "BetaCodeConverterComponent":
        try:
            from greekreader.spacy import BetaCodeConverterComponent
            return BetaCodeConverterComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install greekreader[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
