"""
Headword dictionary for the reader.

Entries are loaded from a JSON object mapping headword to definition.
Lookups try the exact headword first and then an accent-insensitive key,
so that a user query typed without breathings or accents still finds its
entry. When the store is given a BetaCodeConverter, beta-code queries are
converted to Greek before matching.
"""

from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from greekreader.betacode import BetaCodeConverter
from greekreader.diacritics import search_key
from greekreader.errors import DictionaryError

__all__ = ["DictionaryEntry", "DictionaryStore"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DictionaryEntry:
    """A single dictionary entry."""
    headword: str
    definition: str


class DictionaryStore:
    """
    Read-only store of dictionary entries.

    Example:
        >>> store = DictionaryStore({"λόγος": "word, speech"})
        >>> store.lookup("λογος").definition
        'word, speech'
    """

    def __init__(
        self,
        entries: Mapping[str, str],
        converter: Optional[BetaCodeConverter] = None,
    ) -> None:
        """
        Initialize the store from headword/definition pairs.

        Args:
            entries: Mapping of headword to definition
            converter: Optional converter for beta-code queries
        """
        self._entries: Dict[str, str] = dict(entries)
        self._headwords: List[str] = list(self._entries)
        self.converter = converter

        # First headword wins when two differ only in diacritics
        self._index: Dict[str, str] = {}
        for headword in self._headwords:
            self._index.setdefault(search_key(headword), headword)

    @classmethod
    def load(
        cls,
        path: Union[str, Path],
        converter: Optional[BetaCodeConverter] = None,
    ) -> DictionaryStore:
        """
        Load a dictionary from a JSON file.

        Raises:
            DictionaryError: if the file is missing, unreadable, or not an
                object of string pairs.
        """
        path = Path(path)
        if not path.exists():
            raise DictionaryError(f"Dictionary file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise DictionaryError(f"Cannot read dictionary {path}: {e}") from e

        if not isinstance(data, dict):
            raise DictionaryError(
                f"Dictionary {path} must be a JSON object, got {type(data).__name__}"
            )
        for headword, definition in data.items():
            if not isinstance(definition, str):
                raise DictionaryError(
                    f"Invalid definition for {headword!r} in {path}: {definition!r}"
                )

        logger.debug("Loaded %d dictionary entries from %s", len(data), path)
        return cls(data, converter=converter)

    @property
    def entry_count(self) -> int:
        return len(self._headwords)

    def headwords(self) -> List[str]:
        """Return all headwords in load order."""
        return list(self._headwords)

    def is_in_dictionary(self, headword: str) -> bool:
        """Check for an exact headword match."""
        return headword in self._entries

    def __contains__(self, headword: object) -> bool:
        return headword in self._entries

    def __len__(self) -> int:
        return len(self._headwords)

    def lookup(self, key: str) -> Optional[DictionaryEntry]:
        """
        Find the entry for a query.

        Tries, in order: the exact headword, the accent-insensitive key,
        and, if a converter is set, the same two checks on the query
        converted from beta code.

        Args:
            key: Headword, unaccented Greek, or beta code

        Returns:
            The matching entry, or None
        """
        headword = self._match(key)
        if headword is None and self.converter is not None:
            headword = self._match(self.converter.convert_line(key.strip()))
        if headword is None:
            return None
        return DictionaryEntry(headword, self._entries[headword])

    def random_entry(self, rng: Optional[random.Random] = None) -> DictionaryEntry:
        """
        Return an entry chosen uniformly at random.

        Args:
            rng: Random generator to draw from. Defaults to the module's.

        Raises:
            DictionaryError: if the store is empty.
        """
        if not self._headwords:
            raise DictionaryError("Cannot pick a random entry from an empty dictionary")
        headword = (rng or random).choice(self._headwords)
        return DictionaryEntry(headword, self._entries[headword])

    def _match(self, key: str) -> Optional[str]:
        if key in self._entries:
            return key
        return self._index.get(search_key(key))

    def __repr__(self) -> str:
        return f"DictionaryStore(entries={len(self._headwords)})"
