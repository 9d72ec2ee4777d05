#!/usr/bin/env python3
"""
Demo: Generate a TypeScript form class from the example form.

Shows the analyzer report, the field manifest and the generated source.
"""

from formgen.analyzer import analyze_fields
from formgen.assembler import GeneratorOptions, build_unit
from formgen.backends import generate_typescript, save_typescript_file
from formgen.examples import build_example_form
from formgen.serialization import document_to_yaml


def main():
    doc = build_example_form(line_count=3)

    print("=" * 80)
    print("FORM GENERATOR DEMO")
    print("=" * 80)

    report = analyze_fields(doc.fields, form_name=doc.name)
    print(f"\nForm: {report.form_name}")
    print(f"   Fields: {report.total_fields}")
    print(f"   Numbered lines: {report.numeric_fields}")
    print(f"   Named fields: {report.named_fields}")
    print(f"   Checkboxes: {report.checkbox_fields}")
    for warning in report.warnings:
        print(f"   Warning: {warning}")

    print("\nFIELD MANIFEST:")
    print("-" * 80)
    print(document_to_yaml(doc))

    unit = build_unit(doc.get_ordered_fields(), doc.name, GeneratorOptions(state="AK"))
    print("GENERATED SOURCE:")
    print("-" * 80)
    print(generate_typescript(unit))

    filename = f"{unit.class_name}.ts"
    save_typescript_file(unit, filename)
    print(f"Saved to: {filename}")
    print("=" * 80)


if __name__ == "__main__":
    main()
