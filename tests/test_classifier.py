"""
Tests for the field classifier.

classify(field, index) decides:
    - Addressing mode (numbered line vs named field)
    - Canonical identifier and positional alias
    - Return type, optionality and default literal
"""

import pytest
from formgen.classifier import classify
from formgen.model import (
    AccessorKind,
    DefaultValue,
    FieldKind,
    FormField,
    ReturnType,
)


class TestNumericAddressed:
    """Fields labelled with a bare line number."""

    def test_numeric_required_text(self):
        result = classify(FormField(raw_name="123", required=True), 0)

        assert result.accessor_kind == AccessorKind.NUMERIC_ADDRESSED
        assert result.identifier == "l123"
        assert result.alias is None
        assert result.return_type == ReturnType.NUMBER
        assert result.optional is False
        assert result.default == DefaultValue.EMPTY_STRING

    def test_line_with_letter_suffix(self):
        result = classify(FormField(raw_name="2a", required=True), 5)
        assert result.identifier == "l2a"
        assert result.is_numeric

    def test_symbols_are_stripped_before_matching(self):
        result = classify(FormField(raw_name="Line.12", required=True), 0)
        # "LineN" is a name, not a number
        assert result.accessor_kind == AccessorKind.NAME_ADDRESSED

        result = classify(FormField(raw_name="[12]", required=True), 0)
        assert result.identifier == "l12"

    def test_numeric_optional(self):
        result = classify(FormField(raw_name="7"), 3)
        assert result.optional is True
        assert result.default == DefaultValue.UNDEFINED

    def test_numeric_checkbox_stays_boolean(self):
        """Addressing mode and boolean typing are decided independently."""
        result = classify(FormField(raw_name="7", required=True, kind=FieldKind.CHECKBOX), 3)
        assert result.identifier == "l7"
        assert result.return_type == ReturnType.BOOLEAN
        assert result.default == DefaultValue.FALSE


class TestNameAddressed:
    """Fields labelled with anything other than a line number."""

    def test_checkbox(self):
        field = FormField(raw_name="isMarried", required=True, kind=FieldKind.CHECKBOX)
        result = classify(field, 1)

        assert result.accessor_kind == AccessorKind.NAME_ADDRESSED
        assert result.identifier == "IsMarried"
        assert result.alias == "f1"
        assert result.return_type == ReturnType.BOOLEAN
        assert result.optional is False
        assert result.default == DefaultValue.FALSE

    def test_optional_text(self):
        result = classify(FormField(raw_name="optionalField", required=False), 2)

        assert result.identifier == "OptionalField"
        assert result.alias == "f2"
        assert result.return_type == ReturnType.STRING
        assert result.optional is True
        assert result.default == DefaultValue.UNDEFINED

    def test_optional_checkbox_defaults_to_undefined(self):
        result = classify(FormField(raw_name="c1", kind=FieldKind.CHECKBOX), 0)
        assert result.return_type == ReturnType.BOOLEAN
        assert result.default == DefaultValue.UNDEFINED

    @pytest.mark.parametrize("kind", [
        FieldKind.TEXT,
        FieldKind.RADIO_GROUP,
        FieldKind.DROPDOWN,
        FieldKind.OPTION_LIST,
        FieldKind.SIGNATURE,
        FieldKind.UNKNOWN,
    ])
    def test_non_checkbox_kinds_are_strings(self, kind):
        result = classify(FormField(raw_name="choice", required=True, kind=kind), 0)
        assert result.return_type == ReturnType.STRING
        assert result.default == DefaultValue.EMPTY_STRING

    def test_alias_follows_index(self):
        field = FormField(raw_name="name")
        assert classify(field, 0).alias == "f0"
        assert classify(field, 41).alias == "f41"

    def test_empty_name_propagates(self):
        """All-symbol labels give an empty identifier; nothing repairs it."""
        result = classify(FormField(raw_name="***"), 4)
        assert result.identifier == ""
        assert result.alias == "f4"


def test_classify_is_deterministic():
    field = FormField(raw_name="Spouse SSN", required=True)
    assert classify(field, 9) == classify(field, 9)
