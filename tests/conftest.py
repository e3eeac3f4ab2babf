"""Shared fixtures for greekreader tests."""

import json
from pathlib import Path

import pytest

from greekreader.betacode import BetaCodeConverter, MappingTable
from greekreader.dictionary import DictionaryStore
from greekreader.reading import PositionStore, Work

# Minimal table: one letter, one accented form, a bare capital marker
# and one capital
SMALL_MAPPING = {"a": "α", "a/": "ά", "*": "", "*a": "Α"}

SAMPLE_ENTRIES = {
    "λόγος": "word, speech, account",
    "ἄνθρωπος": "human being",
    "θεά": "goddess",
}

SAMPLE_WORK_TEXT = "mh=nin a)/eide qea/\nPhlhi+a/dew *)axilh=os\nou)lome/nhn\n\nan)/dra moi e)/nnepe"


@pytest.fixture
def converter() -> BetaCodeConverter:
    """Return a converter over the bundled table."""
    return BetaCodeConverter()


@pytest.fixture
def small_table() -> MappingTable:
    return MappingTable.from_mapping(SMALL_MAPPING)


@pytest.fixture
def small_converter(small_table) -> BetaCodeConverter:
    return BetaCodeConverter(small_table)


@pytest.fixture
def table_file(tmp_path) -> Path:
    """Write SMALL_MAPPING to a JSON file and return its path."""
    path = tmp_path / "table.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(SMALL_MAPPING, f, ensure_ascii=False)
    return path


@pytest.fixture
def dictionary(converter) -> DictionaryStore:
    return DictionaryStore(SAMPLE_ENTRIES, converter=converter)


@pytest.fixture
def dictionary_file(tmp_path) -> Path:
    path = tmp_path / "dictionary.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(SAMPLE_ENTRIES, f, ensure_ascii=False)
    return path


@pytest.fixture
def work() -> Work:
    """Two books: three lines, then one line."""
    return Work.from_text("homer.iliad", SAMPLE_WORK_TEXT, author="Homer", title="Iliad")


@pytest.fixture
def position_store(tmp_path) -> PositionStore:
    return PositionStore(tmp_path / "positions.json")
