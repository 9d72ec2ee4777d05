"""
Tests for formgen Core Model Objects

These tests verify:
    - Basic model creation and defaults
    - Immutability
    - Retrieval methods
"""

import dataclasses

import pytest
from formgen.model import FieldKind, FormDocument, FormField


class TestFormField:

    def test_defaults(self):
        field = FormField(raw_name="1")
        assert field.required is False
        assert field.kind == FieldKind.TEXT
        assert not field.is_checkbox

    def test_checkbox(self):
        assert FormField(raw_name="c", kind=FieldKind.CHECKBOX).is_checkbox

    def test_frozen(self):
        field = FormField(raw_name="1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            field.required = True


class TestFormDocument:

    def test_ordered_fields(self):
        fields = (FormField(raw_name="b"), FormField(raw_name="a"))
        doc = FormDocument(name="f", fields=fields)
        assert doc.get_ordered_fields() == fields

    def test_empty(self):
        assert FormDocument(name="f").fields == ()
