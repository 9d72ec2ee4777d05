"""
Command-line interface for formgen.

    formgen <form.pdf> [output.ts]

Prints the generated form class to stdout, or writes it to output.ts.
A .yaml/.yml/.json field manifest may be given in place of a PDF.
"""

import argparse
import os
import sys
from typing import List, Optional

import yaml

from formgen.analyzer import analyze_fields
from formgen.assembler import GeneratorOptions, build_unit
from formgen.backends.typescript import generate_typescript, save_typescript_file
from formgen.classifier import classify
from formgen.model import FormDocument
from formgen.pdf_reader import FormParseError, load_file
from formgen.serialization import (
    ManifestError,
    classified_to_dict,
    document_from_json,
    document_from_yaml,
    document_to_yaml,
    options_from_yaml,
)


MANIFEST_EXTENSIONS = {".yaml", ".yml", ".json"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="formgen",
        description="Generate form accessor stubs from the fields of a fillable PDF",
    )
    parser.add_argument(
        "form_file",
        nargs="?",
        metavar="<form-file>",
        help="Fillable PDF (or a .yaml/.json field manifest)",
    )
    parser.add_argument(
        "output",
        nargs="?",
        metavar="<output-file>",
        help="Write the generated source here instead of stdout",
    )
    parser.add_argument(
        "--name",
        metavar="<string>",
        help="Form name used for the class (default: file stem)",
    )
    parser.add_argument(
        "--state",
        metavar="<code>",
        help="Jurisdiction placeholder written into the constructor (default: AK)",
    )
    parser.add_argument(
        "--config",
        metavar="<path>",
        help="YAML file with generator options (state, imports, base_class, ...)",
    )
    parser.add_argument(
        "--dump-fields",
        action="store_true",
        help="Print the field manifest as YAML instead of generating code",
    )
    parser.add_argument(
        "--dump-accessors",
        action="store_true",
        help="Print each field's derived accessor name, alias and type as YAML",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Report empty or colliding accessor names on stderr",
    )
    return parser


def read_form(path: str, name: Optional[str] = None) -> FormDocument:
    """Load a PDF or a field manifest, depending on the file extension."""
    stem, ext = os.path.splitext(os.path.basename(path))
    if ext.lower() not in MANIFEST_EXTENSIONS:
        return load_file(path, name=name)

    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    if ext.lower() == ".json":
        doc = document_from_json(content, default_name=stem)
    else:
        doc = document_from_yaml(content, default_name=stem)
    if name is not None:
        doc = FormDocument(name=name, fields=doc.fields)
    return doc


def accessor_table(doc: FormDocument) -> List[dict]:
    """Derived naming and typing for every field, in document order."""
    rows = []
    for index, form_field in enumerate(doc.get_ordered_fields()):
        row = {"index": index, "label": form_field.raw_name}
        row.update(classified_to_dict(classify(form_field, index)))
        rows.append(row)
    return rows


def load_options(args: argparse.Namespace) -> GeneratorOptions:
    options = GeneratorOptions()
    if args.config:
        with open(args.config, "r", encoding="utf-8") as f:
            options = options_from_yaml(f.read())
    if args.state:
        options.state = args.state
    return options


def run(args: argparse.Namespace) -> int:
    doc = read_form(args.form_file, name=args.name)

    if args.check:
        report = analyze_fields(doc.get_ordered_fields(), form_name=doc.name)
        for warning in report.warnings:
            print(f"Warning: {warning}", file=sys.stderr)

    if args.dump_fields:
        print(document_to_yaml(doc), end="")
        return 0

    if args.dump_accessors:
        print(yaml.safe_dump(accessor_table(doc), sort_keys=False), end="")
        return 0

    unit = build_unit(doc.get_ordered_fields(), doc.name, load_options(args))
    if args.output:
        save_typescript_file(unit, args.output)
        print(f"Wrote {len(unit.accessors)} accessors to {args.output}", file=sys.stderr)
    else:
        print(generate_typescript(unit), end="")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the formgen CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.form_file is None:
        parser.print_usage()
        return 0

    try:
        return run(args)
    except (OSError, UnicodeDecodeError, FormParseError, ManifestError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
