"""
Source Assembler — folds an ordered field list into a generated unit.

For each field (in document order):
    classify → render → collect (declarations, public name)

Then composes the unit: preamble, class header, accessors, registry,
factory function. Assembly is pure and atomic; there is no streaming mode.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from formgen.backends.typescript import generate_typescript
from formgen.classifier import classify
from formgen.declarations import FormUnit, RegistryEntry
from formgen.model import FormField
from formgen.naming import normalize_name
from formgen.renderer import render


DEFAULT_IMPORTS = [
    "import Form from '@core/irsForms/Form'",
    "import F1040 from '@core/irsForms/F1040'",
    "import { Field } from '@core/pdfFiller'",
    "import { displayNumber, sumFields } from '@core/irsForms/util'",
    "import { AccountType, FilingStatus, State } from '@core/data'",
    "import { ValidatedInformation } from 'ustaxes/forms/F1040Base'",
]


@dataclass
class GeneratorOptions:
    """
    Constants written into every generated unit.

    Properties:
        state:
            Jurisdiction placeholder assigned in the constructor.
            Always meant to be replaced by hand after generation.

        imports:
            Preamble lines, printed verbatim

        base_class:
            Class the generated form extends

        constructor_arg / constructor_type:
            The single constructor parameter (the federal return the
            state form is attached to)
    """

    state: str = "AK"
    imports: List[str] = field(default_factory=lambda: list(DEFAULT_IMPORTS))
    base_class: str = "Form"
    constructor_arg: str = "f1040"
    constructor_type: str = "F1040"


def build_unit(
    fields: Sequence[FormField],
    unit_name: str,
    options: Optional[GeneratorOptions] = None,
) -> FormUnit:
    """
    Build the structured unit for an ordered list of fields.

    Args:
        fields: FormFields in document order
        unit_name: Form name (normalized into the class name)
        options: GeneratorOptions (defaults if None)

    Returns:
        FormUnit with one accessor and one registry entry per field
    """
    if options is None:
        options = GeneratorOptions()

    accessors = []
    for index, form_field in enumerate(fields):
        classified = classify(form_field, index)
        accessors.append(render(classified, form_field, index))

    registry = [RegistryEntry(public_name=a.public_name) for a in accessors]

    return FormUnit(
        class_name=normalize_name(unit_name),
        form_name=unit_name,
        state=options.state,
        imports=list(options.imports),
        base_class=options.base_class,
        constructor_arg=options.constructor_arg,
        constructor_type=options.constructor_type,
        accessors=accessors,
        registry=registry,
    )


def assemble(
    fields: Sequence[FormField],
    unit_name: str,
    options: Optional[GeneratorOptions] = None,
) -> str:
    """
    Generate the complete TypeScript source for a form.

    Args:
        fields: FormFields in document order
        unit_name: Form name
        options: GeneratorOptions (defaults if None)

    Returns:
        Source text of the generated unit
    """
    return generate_typescript(build_unit(fields, unit_name, options))


__all__ = ["GeneratorOptions", "DEFAULT_IMPORTS", "build_unit", "assemble"]
