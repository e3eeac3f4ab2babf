"""Tests for MappingTable loading and lookup."""

import io
import json

import pytest

from greekreader.betacode import DEFAULT_TABLE_PATH, MappingTable
from greekreader.errors import GreekReaderError, MappingTableError


# =============================================================================
# Loading
# =============================================================================


class TestLoad:
    def test_load_from_path(self, table_file):
        table = MappingTable.load(table_file)
        assert len(table) == 4
        assert table.lookup("a/") == "ά"

    def test_load_from_str_path(self, table_file):
        table = MappingTable.load(str(table_file))
        assert table.lookup("*a") == "Α"

    def test_load_from_stream(self):
        table = MappingTable.load(io.StringIO('{"b": "β"}'))
        assert table.lookup("b") == "β"

    def test_missing_file(self, tmp_path):
        with pytest.raises(MappingTableError, match="not found"):
            MappingTable.load(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"a": "α",', encoding="utf-8")
        with pytest.raises(MappingTableError, match="Cannot read"):
            MappingTable.load(path)

    def test_invalid_json_stream(self):
        with pytest.raises(MappingTableError):
            MappingTable.load(io.StringIO("not json"))

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps(["a", "α"]), encoding="utf-8")
        with pytest.raises(MappingTableError, match="JSON object"):
            MappingTable.load(path)

    def test_non_string_value(self):
        with pytest.raises(MappingTableError, match="value"):
            MappingTable.load(io.StringIO('{"a": "α", "b": 2}'))

    def test_empty_key(self):
        with pytest.raises(MappingTableError, match="key"):
            MappingTable.from_mapping({"": "α"})

    def test_error_is_greekreader_error(self, tmp_path):
        with pytest.raises(GreekReaderError):
            MappingTable.load(tmp_path / "missing.json")

    def test_cause_is_chained(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(MappingTableError) as excinfo:
            MappingTable.load(path)
        assert isinstance(excinfo.value.__cause__, ValueError)


# =============================================================================
# Lookup
# =============================================================================


class TestLookup:
    def test_lookup_hit(self, small_table):
        assert small_table.lookup("a") == "α"

    def test_lookup_miss(self, small_table):
        assert small_table.lookup("b") is None

    def test_lookup_empty_value(self, small_table):
        # A key mapped to "" is still a hit
        assert small_table.lookup("*") == ""
        assert "*" in small_table

    def test_contains(self, small_table):
        assert "a/" in small_table
        assert "a)" not in small_table

    def test_iter(self, small_table):
        assert set(small_table) == {"a", "a/", "*", "*a"}

    def test_source_mapping_is_copied(self):
        source = {"a": "α"}
        table = MappingTable.from_mapping(source)
        source["a"] = "x"
        source["b"] = "β"
        assert table.lookup("a") == "α"
        assert table.lookup("b") is None

    def test_repr(self, small_table):
        assert repr(small_table) == "MappingTable(tokens=4)"


# =============================================================================
# Bundled Table
# =============================================================================


class TestDefaultTable:
    def test_bundled_file_exists(self):
        assert DEFAULT_TABLE_PATH.exists()

    def test_default_is_cached(self):
        assert MappingTable.default() is MappingTable.default()

    def test_all_base_letters(self):
        table = MappingTable.default()
        letters = "abgdezhqiklmncoprstufxyw"
        greek = "αβγδεζηθικλμνξοπρστυφχψω"
        for latin, expected in zip(letters, greek):
            assert table.lookup(latin) == expected

    def test_all_capitals(self):
        table = MappingTable.default()
        letters = "abgdezhqiklmncoprstufxyw"
        greek = "ΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡΣΤΥΦΧΨΩ"
        for latin, expected in zip(letters, greek):
            assert table.lookup("*" + latin) == expected

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("a)", "ἀ"),
            ("a(", "ἁ"),
            ("a)/", "ἄ"),
            ("a(=", "ἇ"),
            ("e(\\", "ἓ"),
            ("o)/", "ὄ"),
            ("w(=|", "ᾧ"),
            ("h|", "ῃ"),
            ("a/", "ά"),
            ("w=", "ῶ"),
            ("i+", "ϊ"),
            ("u+/", "ΰ"),
            ("r(", "ῥ"),
            ("*)/a", "Ἄ"),
            ("*(u", "Ὑ"),
            ("*(r", "Ῥ"),
            ("*/w", "Ώ"),
        ],
    )
    def test_composites(self, token, expected):
        assert MappingTable.default().lookup(token) == expected

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("*)|a", "\u1f88"),
            ("*(=|a", "\u1f8f"),
            ("*)/|h", "\u1f9c"),
            ("*(|w", "\u1fa9"),
        ],
    )
    def test_capital_iota_adscript(self, token, expected):
        assert MappingTable.default().lookup(token) == expected

    def test_size(self):
        assert len(MappingTable.default()) == 257

    def test_no_smooth_breathing_capital_upsilon(self):
        # Greek has no capital upsilon with smooth breathing
        assert MappingTable.default().lookup("*)u") is None

    def test_diacriticals_are_not_keys(self):
        table = MappingTable.default()
        for mark in ")(/\\=|+*":
            assert mark not in table
