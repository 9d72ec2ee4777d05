"""
PDF Reader for formgen (Raw Input → FormDocument).

Reads the AcroForm field tree of a fillable PDF with pypdf and flattens it
into an ordered tuple of FormFields.

Field tree notes:
    - /AcroForm /Fields lists the top-level fields in document order
    - A node whose /Kids carry their own /T is a non-terminal field; it only
      contributes its partial name ("topmostSubform[0]") to its descendants
    - Kids without /T are widget annotations of the same field
    - /FT (type) and /Ff (flags) are inheritable from ancestors
"""

import os
import warnings
from io import BytesIO
from typing import Iterator, List, Optional, Set, Tuple

from pypdf import PdfReader
from pypdf.errors import PdfReadError
from pypdf.generic import ArrayObject, DictionaryObject, IndirectObject, NumberObject

from formgen.model import FieldKind, FormDocument, FormField


# Field flag bits (/Ff), 1-based bit positions from the PDF reference
FLAG_REQUIRED = 1 << 1
FLAG_RADIO = 1 << 15
FLAG_PUSHBUTTON = 1 << 16
FLAG_COMBO = 1 << 17


class FormParseError(Exception):
    """Raised when a document's structure cannot be read."""
    pass


def field_kind(field_type: Optional[str], flags: int) -> FieldKind:
    """
    Map a /FT name and /Ff flags to a FieldKind.

    Maps:
        /Tx  → TEXT
        /Btn → CHECKBOX, RADIO_GROUP or PUSH_BUTTON (by flags)
        /Ch  → DROPDOWN (combo flag) or OPTION_LIST
        /Sig → SIGNATURE
    """
    if field_type == "/Tx":
        return FieldKind.TEXT
    if field_type == "/Btn":
        if flags & FLAG_PUSHBUTTON:
            return FieldKind.PUSH_BUTTON
        if flags & FLAG_RADIO:
            return FieldKind.RADIO_GROUP
        return FieldKind.CHECKBOX
    if field_type == "/Ch":
        if flags & FLAG_COMBO:
            return FieldKind.DROPDOWN
        return FieldKind.OPTION_LIST
    if field_type == "/Sig":
        return FieldKind.SIGNATURE
    return FieldKind.UNKNOWN


def _get(node, key, default=None):
    """Look up a dictionary entry, dereferencing indirect values."""
    if key in node:
        return node[key]
    return default


def _array(node, key) -> List:
    """Return an array entry, or an empty list when it is absent."""
    value = _get(node, key)
    if value is None:
        return []
    if not isinstance(value, ArrayObject):
        raise FormParseError(f"{key} must be an array, got {type(value).__name__}")
    return value


def _flags(node, inherited: int) -> int:
    value = _get(node, "/Ff")
    if value is None:
        return inherited
    if not isinstance(value, NumberObject):
        raise FormParseError(f"/Ff must be an integer, got {value!r}")
    return int(value)


def _partial_name(node) -> Optional[str]:
    partial = _get(node, "/T")
    if partial is None:
        return None
    if isinstance(partial, bytes):
        return partial.decode("latin-1")
    return str(partial)


def _resolve(item, seen: Set[Tuple[int, int]]):
    """Dereference a field tree entry, refusing to visit the same object twice."""
    if isinstance(item, IndirectObject):
        key = (item.idnum, item.generation)
        if key in seen:
            raise FormParseError(f"Cycle in field tree at object {item.idnum} {item.generation}")
        seen.add(key)
    obj = item.get_object()
    if not isinstance(obj, DictionaryObject):
        raise FormParseError(f"Field tree entry must be a dictionary, got {type(obj).__name__}")
    return obj


def _named_kids(node, seen: Set[Tuple[int, int]]) -> List:
    kids = [_resolve(kid, seen) for kid in _array(node, "/Kids")]
    return [kid for kid in kids if "/T" in kid]


def _walk_fields(
    nodes,
    parent_name: str,
    inherited_type: Optional[str],
    inherited_flags: int,
    seen: Set[Tuple[int, int]],
) -> Iterator[FormField]:
    for node in nodes:
        partial = _partial_name(node)
        field_type = _get(node, "/FT", inherited_type)
        if field_type is not None:
            field_type = str(field_type)
        flags = _flags(node, inherited_flags)

        if partial is None:
            qualified = parent_name
        else:
            qualified = f"{parent_name}.{partial}" if parent_name else partial

        kids = _named_kids(node, seen)
        if kids:
            yield from _walk_fields(kids, qualified, field_type, flags, seen)
            continue

        if not qualified:
            warnings.warn("Skipping form field without a name (/T)", UserWarning)
            continue

        yield FormField(
            raw_name=qualified,
            required=bool(flags & FLAG_REQUIRED),
            kind=field_kind(field_type, flags),
        )


def read_fields(reader: PdfReader) -> Tuple[FormField, ...]:
    """
    Extract the ordered terminal fields from an open PdfReader.

    Returns an empty tuple for documents without an AcroForm.
    """
    root = reader.trailer["/Root"]
    acroform = _get(root, "/AcroForm")
    if acroform is None:
        return tuple()
    if not isinstance(acroform, DictionaryObject):
        raise FormParseError("/AcroForm must be a dictionary")

    seen: Set[Tuple[int, int]] = set()
    top_level = [_resolve(f, seen) for f in _array(acroform, "/Fields")]
    return tuple(_walk_fields(top_level, "", None, 0, seen))


def load_document(data: bytes, name: str = "Form") -> FormDocument:
    """
    Parse PDF bytes into a FormDocument.

    Args:
        data: Raw PDF content
        name: Form name for the document

    Returns:
        FormDocument with fields in document order

    Raises:
        FormParseError: If the PDF structure is malformed
    """
    try:
        reader = PdfReader(BytesIO(data))
        fields = read_fields(reader)
    except PdfReadError as e:
        raise FormParseError(f"Failed to read PDF form '{name}': {e}") from e
    return FormDocument(name=name, fields=fields)


def load_file(filepath: str, name: Optional[str] = None) -> FormDocument:
    """
    Read a PDF file into a FormDocument.

    Args:
        filepath: Path to the PDF file
        name: Optional form name (defaults to the file stem)

    Returns:
        FormDocument

    Raises:
        FileNotFoundError: If the file doesn't exist
        FormParseError: If the PDF structure is malformed
    """
    try:
        with open(filepath, "rb") as f:
            data = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"PDF file not found: {filepath}")

    if name is None:
        name = os.path.splitext(os.path.basename(filepath))[0]

    return load_document(data, name=name)


__all__ = [
    "FormParseError",
    "field_kind",
    "read_fields",
    "load_document",
    "load_file",
]
