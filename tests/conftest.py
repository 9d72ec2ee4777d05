"""
Shared fixtures: fillable PDFs built in memory with pypdf.

A field spec is a dict:
    {"name": "f1_01[0]", "type": "/Tx", "flags": 2, "kids": [...]}
Every key is optional; "kids" nests child fields (or widgets, if the
child has no "name"). "extra" maps raw keys to pypdf objects, for
entries the other keys cannot express.
"""

from io import BytesIO

import pytest
from pypdf import PdfWriter
from pypdf.generic import (
    ArrayObject,
    DictionaryObject,
    NameObject,
    NumberObject,
    TextStringObject,
)


def _field_object(spec: dict) -> DictionaryObject:
    obj = DictionaryObject()
    if "name" in spec:
        obj[NameObject("/T")] = TextStringObject(spec["name"])
    if "type" in spec:
        obj[NameObject("/FT")] = NameObject(spec["type"])
    if "flags" in spec:
        obj[NameObject("/Ff")] = NumberObject(spec["flags"])
    if "kids" in spec:
        obj[NameObject("/Kids")] = ArrayObject(_field_object(k) for k in spec["kids"])
    for key, value in spec.get("extra", {}).items():
        obj[NameObject(key)] = value
    return obj


def build_form_pdf(field_specs=None, fields_object=None) -> bytes:
    """Return the bytes of a one-page PDF with the given AcroForm fields.

    With field_specs=None the PDF has no AcroForm at all. fields_object,
    when given, is used as the raw /Fields value instead.
    """
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    if fields_object is None and field_specs is not None:
        fields_object = ArrayObject(_field_object(s) for s in field_specs)
    if fields_object is not None:
        writer.root_object[NameObject("/AcroForm")] = DictionaryObject({
            NameObject("/Fields"): fields_object,
        })
    out = BytesIO()
    writer.write(out)
    return out.getvalue()


@pytest.fixture
def make_form_pdf():
    return build_form_pdf
