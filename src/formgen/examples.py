"""
Example form builder for demos and tests.

Builds a small state income tax form mixing the two addressing modes:
numbered lines ("1", "2a"), named fields, checkboxes and an optional field.
"""
from formgen.model import FieldKind, FormDocument, FormField


def build_example_form(name: str = "ak6251", line_count: int = 3) -> FormDocument:
    fields = [
        FormField(raw_name="Your first name and initial", required=True),
        FormField(raw_name="Your social security number", required=True),
        FormField(raw_name="Spouse's social security number"),
        FormField(raw_name="Filing status: married", required=True, kind=FieldKind.CHECKBOX),
    ]

    # Numbered lines 1, 2a, 2b, 3a, 3b, ...
    fields.append(FormField(raw_name="1", required=True))
    for i in range(2, line_count + 1):
        fields.append(FormField(raw_name=f"{i}a", required=True))
        fields.append(FormField(raw_name=f"{i}b"))

    fields.append(FormField(raw_name="Signature date"))

    return FormDocument(name=name, fields=tuple(fields))
