"""
Field Classifier — derives accessor naming and typing for one field.

Two addressing modes:
    - NUMERIC_ADDRESSED: the label is a printed line number ("12a").
      The accessor is "l" + name, since a bare number is not an identifier.
    - NAME_ADDRESSED: any other label. The accessor is the normalized name,
      and a positional alias "f<index>" is generated alongside it.

The addressing mode and the boolean/non-boolean decision are made
independently: a checkbox labelled "7" is numeric-addressed AND boolean.
"""

from formgen.model import (
    AccessorKind,
    ClassifiedField,
    DefaultValue,
    FieldKind,
    FormField,
    ReturnType,
)
from formgen.naming import normalize_name, is_numeric_name


# Kinds whose accessor returns a boolean. Everything else is a line value.
BOOLEAN_KINDS = frozenset({FieldKind.CHECKBOX})


def _return_type(kind: FieldKind, accessor_kind: AccessorKind) -> ReturnType:
    if kind in BOOLEAN_KINDS:
        return ReturnType.BOOLEAN
    if accessor_kind == AccessorKind.NUMERIC_ADDRESSED:
        return ReturnType.NUMBER
    return ReturnType.STRING


def _default_value(field: FormField) -> DefaultValue:
    if not field.required:
        return DefaultValue.UNDEFINED
    if field.kind in BOOLEAN_KINDS:
        return DefaultValue.FALSE
    return DefaultValue.EMPTY_STRING


def classify(field: FormField, index: int) -> ClassifiedField:
    """
    Classify a field at a given document position.

    Args:
        field: FormField as read from the document
        index: 0-based position of the field in the document

    Returns:
        ClassifiedField with canonical identifier, alias, type and default
    """
    name = normalize_name(field.raw_name)

    if is_numeric_name(name):
        accessor_kind = AccessorKind.NUMERIC_ADDRESSED
        identifier = f"l{name}"
        alias = None
    else:
        accessor_kind = AccessorKind.NAME_ADDRESSED
        identifier = name
        alias = f"f{index}"

    return ClassifiedField(
        name=name,
        identifier=identifier,
        accessor_kind=accessor_kind,
        return_type=_return_type(field.kind, accessor_kind),
        optional=not field.required,
        default=_default_value(field),
        alias=alias,
    )


__all__ = ["classify", "BOOLEAN_KINDS"]
