"""
Form Analyzer — diagnostics and inventory for a form's fields.

Reports what the generator would produce and where the output is likely
to need hand editing:
    - Addressing mode and kind counts
    - Fields whose label normalizes to an empty identifier
    - Identifiers shared by more than one field

IMPORTANT: This is read-only. Generation does not consult it, and
nothing found here changes the generated text.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from formgen.classifier import classify
from formgen.model import FormField


@dataclass
class FormReport:
    """Analysis report for an ordered field list."""

    form_name: str
    total_fields: int = 0
    numeric_fields: int = 0
    named_fields: int = 0
    checkbox_fields: int = 0
    optional_fields: int = 0
    kind_counts: Dict[str, int] = field(default_factory=dict)

    # Identifier problems
    empty_identifiers: List[int] = field(default_factory=list)
    colliding_identifiers: Dict[str, List[int]] = field(default_factory=dict)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    @property
    def is_clean(self) -> bool:
        return not self.empty_identifiers and not self.colliding_identifiers


def analyze_fields(fields: Sequence[FormField], form_name: str = "Form") -> FormReport:
    """
    Analyze the fields of one form.

    Returns a FormReport with counts and identifier warnings.
    """
    report = FormReport(form_name=form_name, total_fields=len(fields))

    kind_counts: Dict[str, int] = defaultdict(int)
    indices_by_identifier: Dict[str, List[int]] = defaultdict(list)

    for index, form_field in enumerate(fields):
        classified = classify(form_field, index)
        kind_counts[form_field.kind.value] += 1

        if classified.is_numeric:
            report.numeric_fields += 1
        else:
            report.named_fields += 1
        if form_field.is_checkbox:
            report.checkbox_fields += 1
        if classified.optional:
            report.optional_fields += 1

        if not classified.identifier:
            report.empty_identifiers.append(index)
        else:
            indices_by_identifier[classified.identifier].append(index)

    report.kind_counts = dict(kind_counts)
    report.colliding_identifiers = {
        ident: indices for ident, indices in indices_by_identifier.items() if len(indices) > 1
    }

    # =========================================================================
    # WARNING FLAGS
    # =========================================================================

    for index in report.empty_identifiers:
        report.add_warning(
            f"Field {index} ({fields[index].raw_name!r}) has no letters or digits; "
            f"its accessor name is empty"
        )

    for ident in sorted(report.colliding_identifiers):
        indices = report.colliding_identifiers[ident]
        report.add_warning(
            f"Identifier {ident!r} is shared by fields {', '.join(str(i) for i in indices)}"
        )

    return report
