"""
Beta-code mapping table.

The table maps ASCII beta-code tokens to Greek output units. Tokens are a
single base letter (``a``), a letter followed by diacriticals (``a)/``),
or the capital marker followed by diacriticals and a letter (``*)/a``).

A capital group closes on its letter, so every capital diacritical,
including the iota adscript, must come before the letter: ``*)|a`` → ᾈ.
Written after the letter (``*)a|``), the mark regroups with the bare
letter like any trailing diacritical and gives ᾳ.

The table is loaded once from a JSON object of string pairs and never
mutated afterwards, so a single instance can be shared by any number of
converters.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import IO, Iterator, Mapping, Optional, Union

from greekreader.errors import MappingTableError

__all__ = ["MappingTable", "DEFAULT_TABLE_PATH"]

logger = logging.getLogger(__name__)

DEFAULT_TABLE_PATH = Path(__file__).parent / "data" / "beta_code.json"


class MappingTable:
    """
    Immutable lookup from beta-code token to Greek text.

    Use :meth:`load` for a JSON resource, :meth:`from_mapping` for an
    in-memory dict, or :meth:`default` for the bundled table.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str]) -> None:
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> MappingTable:
        """
        Validate and wrap an in-memory mapping.

        Raises:
            MappingTableError: if the mapping is not a dict of non-empty
                string keys to string values.
        """
        if not isinstance(mapping, Mapping):
            raise MappingTableError(
                f"Mapping table must be a JSON object, got {type(mapping).__name__}"
            )
        for key, value in mapping.items():
            if not isinstance(key, str) or not key:
                raise MappingTableError(f"Invalid mapping table key: {key!r}")
            if not isinstance(value, str):
                raise MappingTableError(
                    f"Invalid mapping table value for {key!r}: {value!r}"
                )
        return cls(mapping)

    @classmethod
    def load(cls, source: Union[str, Path, IO[str]]) -> MappingTable:
        """
        Load a mapping table from a JSON file path or text stream.

        The whole resource is read and validated before the table is
        built; no partially loaded table is ever returned.

        Args:
            source: Path to a JSON file, or an open text stream

        Returns:
            The loaded table

        Raises:
            MappingTableError: if the resource is missing, unreadable or
                malformed.
        """
        if hasattr(source, "read"):
            name = getattr(source, "name", "<stream>")
            try:
                data = json.load(source)
            except (OSError, ValueError) as e:
                raise MappingTableError(f"Cannot read mapping table {name}: {e}") from e
        else:
            name = str(source)
            path = Path(source)
            if not path.exists():
                raise MappingTableError(f"Mapping table not found: {path}")
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                raise MappingTableError(f"Cannot read mapping table {path}: {e}") from e

        table = cls.from_mapping(data)
        logger.debug("Loaded %d beta-code tokens from %s", len(table), name)
        return table

    @classmethod
    def default(cls) -> MappingTable:
        """Return the bundled beta-code table (loaded once per process)."""
        return _default_table()

    def lookup(self, token: str) -> Optional[str]:
        """Return the Greek unit for ``token``, or None if unmapped."""
        return self._entries.get(token)

    def __contains__(self, token: object) -> bool:
        return token in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"MappingTable(tokens={len(self._entries)})"


@lru_cache(maxsize=1)
def _default_table() -> MappingTable:
    return MappingTable.load(DEFAULT_TABLE_PATH)
