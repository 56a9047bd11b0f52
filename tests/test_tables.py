"""
Tests for the static conversion tables and character classification.
"""

import pytest

from kanaconv import tables
from kanaconv.exceptions import TableError
from kanaconv.tables import CharClass, classify


class TestTableSizes:
    """Test the number of entries in each table."""

    @pytest.mark.parametrize("name, size", [
        ("ASCII_H2Z", 85),
        ("ASCII_Z2H", 85),
        ("DIGIT_H2Z", 10),
        ("DIGIT_Z2H", 10),
        ("KANA_H2Z", 63),
        ("KANA_H2Z_VOICED", 26),
        ("KANA_Z2H", 89),
        ("HIRA_TO_KATA", 88),
        ("KATA_TO_HIRA", 88),
        ("HIRA_TO_HALF_KATA", 94),
        ("HALF_KATA_TO_HIRA", 63),
        ("HALF_KATA_VOICED_TO_HIRA", 26),
    ])
    def test_size(self, name, size):
        """Test the size of one table."""
        assert tables.table_sizes()[name] == size


class TestTableInvariants:
    """Test properties every table must satisfy."""

    @pytest.mark.parametrize("name", [
        "ASCII_H2Z", "ASCII_Z2H", "DIGIT_H2Z", "DIGIT_Z2H",
        "KANA_H2Z", "KANA_H2Z_VOICED", "KANA_Z2H",
        "HIRA_TO_KATA", "KATA_TO_HIRA", "HIRA_TO_HALF_KATA",
    ])
    def test_injective(self, name):
        """Test that no two sources share a target."""
        table = getattr(tables, name)
        assert len(set(table.values())) == len(table)

    def test_tables_are_read_only(self):
        """Test that the public tables cannot be modified."""
        with pytest.raises(TypeError):
            tables.ASCII_H2Z["A"] = "B"

    def test_ascii_and_digit_disjoint(self):
        """Test that the ascii table does not include digits."""
        assert not set(tables.ASCII_H2Z) & set(tables.DIGIT_H2Z)

    def test_inverse_tables(self):
        """Test that each z2h table inverts its h2z table."""
        for half, full in tables.ASCII_H2Z.items():
            assert tables.ASCII_Z2H[full] == half
        for half, full in tables.KANA_H2Z_VOICED.items():
            assert tables.KANA_Z2H[full] == half

    def test_hiragana_offset(self):
        """Test that hiragana and katakana differ by a constant offset."""
        for hira, kata in tables.HIRA_TO_KATA.items():
            assert ord(kata) - ord(hira) == tables.HIRA_KATA_OFFSET

    def test_sample_entries(self):
        """Test a few well known entries."""
        assert tables.ASCII_Z2H["Ａ"] == "A"
        assert tables.ASCII_H2Z[" "] == "　"
        assert tables.DIGIT_Z2H["０"] == "0"
        assert tables.KANA_Z2H["ガ"] == "ｶﾞ"
        assert tables.KANA_H2Z["ｱ"] == "ア"
        assert tables.HIRA_TO_KATA["ぃ"] == "ィ"
        assert tables.KATA_TO_HIRA["ン"] == "ん"
        assert tables.HIRA_TO_HALF_KATA["あ"] == "ｱ"


class TestMakeTable:
    """Test table construction checks."""

    def test_length_mismatch(self):
        """Test that parallel sequences must have the same length."""
        with pytest.raises(TableError, match="lengths differ"):
            tables._make_table("abc", "ab")

    def test_duplicate_target(self):
        """Test that two sources cannot share a target."""
        with pytest.raises(TableError, match="Duplicate"):
            tables._make_table("ab", "xx")

    def test_duplicate_source(self):
        """Test that a source cannot appear twice."""
        with pytest.raises(TableError, match="Duplicate"):
            tables._make_table("aa", "xy")


class TestClassify:
    """Test Unicode block classification."""

    @pytest.mark.parametrize("char, expected", [
        ("a", CharClass.ASCII),
        ("!", CharClass.ASCII),
        (" ", CharClass.ASCII),
        ("7", CharClass.DIGIT),
        ("Ａ", CharClass.FULL_ASCII),
        ("　", CharClass.FULL_ASCII),
        ("７", CharClass.FULL_DIGIT),
        ("あ", CharClass.HIRAGANA),
        ("ゞ", CharClass.HIRAGANA),
        ("ア", CharClass.KATAKANA),
        ("ー", CharClass.KATAKANA),
        ("ｱ", CharClass.HALF_KATAKANA),
        ("ﾞ", CharClass.HALF_KATAKANA),
        ("｡", CharClass.HALF_KATAKANA),
        ("漢", CharClass.OTHER),
        ("\n", CharClass.OTHER),
    ])
    def test_classify(self, char, expected):
        """Test the class of a single character."""
        assert classify(char) is expected

    def test_non_single_character(self):
        """Test that strings of other lengths are OTHER."""
        assert classify("") is CharClass.OTHER
        assert classify("ab") is CharClass.OTHER

    def test_table_sources_match_class(self):
        """Test that table keys come from the expected blocks."""
        assert all(classify(c) is CharClass.HIRAGANA for c in tables.HIRA_TO_KATA)
        assert all(classify(c) is CharClass.KATAKANA for c in tables.KATA_TO_HIRA)
        assert all(classify(c) is CharClass.FULL_DIGIT for c in tables.DIGIT_Z2H)
        assert all(classify(c) is CharClass.FULL_ASCII for c in tables.ASCII_Z2H)
