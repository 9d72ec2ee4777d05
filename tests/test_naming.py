"""
Tests for identifier normalization.

normalize_name() must:
    - Strip everything that is not an ASCII letter or digit
    - Capitalize the first surviving character only
    - Be total (empty and all-symbol input give "")
"""

import pytest
from formgen.naming import normalize_name, is_numeric_name


class TestNormalizeName:
    """Test normalize_name()."""

    @pytest.mark.parametrize("raw, expected", [
        ("Hello-World!", "HelloWorld"),
        ("Form_1040(2023)", "Form10402023"),
        ("123.45", "12345"),
        ("f1040", "F1040"),
        ("topmostSubform[0].Page1[0].f1_01[0]", "TopmostSubform0Page10f1010"),
    ])
    def test_strips_and_capitalizes(self, raw, expected):
        assert normalize_name(raw) == expected

    def test_empty_string(self):
        assert normalize_name("") == ""

    def test_all_symbols_gives_empty(self):
        assert normalize_name("[]._- ()") == ""

    def test_rest_of_name_unchanged(self):
        """Only the first character changes case."""
        assert normalize_name("spouseSSN") == "SpouseSSN"

    def test_non_ascii_letters_are_stripped(self):
        assert normalize_name("café") == "Caf"

    @pytest.mark.parametrize("raw", ["Hello-World!", "123.45", "a b c", "ÉtatCivil"])
    def test_idempotent(self, raw):
        once = normalize_name(raw)
        assert normalize_name(once) == once


class TestIsNumericName:
    """Test the line-number pattern."""

    @pytest.mark.parametrize("name", ["1", "123", "5a", "12ab"])
    def test_line_numbers(self, name):
        assert is_numeric_name(name)

    @pytest.mark.parametrize("name", ["", "A5", "5A", "5a1", "F1040", "Line5"])
    def test_not_line_numbers(self, name):
        assert not is_numeric_name(name)
