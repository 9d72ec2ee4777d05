"""
Core Form Model Objects

Defines the data structures that flow through the generator:
    - FieldKind (closed set of interactive field types)
    - FormField (one field as read from a document)
    - FormDocument (ordered container of fields)
    - ClassifiedField (derived naming and typing for one field)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about PDF parsing or TypeScript syntax
        - Are immutable
        - Represent structure, not behavior
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class FieldKind(Enum):
    """
    Interactive field types found in a fillable document.

    This is a closed set. Code that branches on field type must
    handle these members explicitly rather than inspect classes.
    """
    TEXT = "text"
    CHECKBOX = "checkbox"
    RADIO_GROUP = "radio_group"
    PUSH_BUTTON = "push_button"
    DROPDOWN = "dropdown"
    OPTION_LIST = "option_list"
    SIGNATURE = "signature"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class FormField:
    """
    One interactive field of a document, exactly as the reader found it.

    Properties:
        raw_name:
            Fully qualified field label
            Examples: "topmostSubform[0].Page1[0].f1_01[0]", "12a"

        required:
            Whether the document marks the field as required

        kind:
            FieldKind type tag

    The position of a field in its document is NOT stored here.
    It is the index of the field in FormDocument.fields.
    """

    raw_name: str
    required: bool = False
    kind: FieldKind = FieldKind.TEXT

    @property
    def is_checkbox(self) -> bool:
        return self.kind == FieldKind.CHECKBOX


@dataclass(frozen=True)
class FormDocument:
    """
    Root container for a document's fields.

    Properties:
        name:
            Form name (usually the file stem, e.g. "f1040")

        fields:
            FormFields in document order

    INVARIANT:
        Order is significant. The i-th field becomes the i-th accessor
        and the i-th registry entry of the generated unit.
    """

    name: str
    fields: Tuple[FormField, ...] = field(default_factory=tuple)

    def get_ordered_fields(self) -> Tuple[FormField, ...]:
        """Return the fields in document order."""
        return self.fields


class AccessorKind(Enum):
    """How generated code addresses a field."""
    NUMERIC_ADDRESSED = "numeric"  # Label is a printed line number ("12a")
    NAME_ADDRESSED = "named"       # Label is a meaningful name


class ReturnType(Enum):
    """Semantic return type of a generated accessor."""
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"


class DefaultValue(Enum):
    """Literal returned by a generated accessor stub."""
    UNDEFINED = "undefined"
    FALSE = "false"
    EMPTY_STRING = "empty_string"


@dataclass(frozen=True)
class ClassifiedField:
    """
    Naming and typing derived from one FormField and its index.

    Properties:
        name:
            Normalized field label (may be empty for all-symbol labels)

        identifier:
            Canonical accessor identifier, referenced by the registry
            Examples: "l12a" (numeric-addressed), "SpouseSsn" (name-addressed)

        alias:
            Positional identifier "f<index>" for name-addressed fields,
            None for numeric-addressed ones

        accessor_kind:
            AccessorKind

        return_type:
            ReturnType of the accessor

        optional:
            True when the accessor may return undefined

        default:
            DefaultValue the stub returns

    IMPORTANT:
        This is recomputed on demand and never mutated.
        It does NOT check identifiers for emptiness or collisions.
    """

    name: str
    identifier: str
    accessor_kind: AccessorKind
    return_type: ReturnType
    optional: bool
    default: DefaultValue
    alias: Optional[str] = None

    @property
    def is_numeric(self) -> bool:
        return self.accessor_kind == AccessorKind.NUMERIC_ADDRESSED
