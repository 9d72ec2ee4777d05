"""
Serialization helpers for formgen objects (FormField, FormDocument,
ClassifiedField, GeneratorOptions).

Field manifests let a form's fields be reviewed, edited and regenerated
without the PDF:

    form: f8453
    fields:
      - name: topmostSubform[0].Page1[0].f1_01[0]
        required: false
        kind: text
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from formgen.assembler import GeneratorOptions
from formgen.model import ClassifiedField, FieldKind, FormDocument, FormField


class ManifestError(Exception):
    """Raised when a field manifest or options file is malformed."""
    pass


def field_to_dict(f: FormField) -> Dict[str, Any]:
    return {"name": f.raw_name, "required": f.required, "kind": f.kind.value}


def field_from_dict(d: Dict[str, Any]) -> FormField:
    if not isinstance(d, dict) or "name" not in d:
        raise ManifestError(f"Field entry must be a mapping with a 'name': {d!r}")
    try:
        kind = FieldKind(d.get("kind", FieldKind.TEXT.value))
    except ValueError as e:
        raise ManifestError(f"Unknown field kind for {d['name']!r}: {d.get('kind')!r}") from e
    required = d.get("required", False)
    if not isinstance(required, bool):
        raise ManifestError(f"Field {d['name']!r}: 'required' must be true or false, got {required!r}")
    return FormField(raw_name=str(d["name"]), required=required, kind=kind)


def document_to_dict(doc: FormDocument) -> Dict[str, Any]:
    return {"form": doc.name, "fields": [field_to_dict(f) for f in doc.fields]}


def document_from_dict(d: Any, default_name: str = "Form") -> FormDocument:
    if not isinstance(d, dict):
        raise ManifestError("Manifest must be a mapping with 'form' and 'fields'")
    entries = d.get("fields") or []
    if not isinstance(entries, list):
        raise ManifestError("Manifest 'fields' must be a list")
    return FormDocument(
        name=str(d.get("form") or default_name),
        fields=tuple(field_from_dict(e) for e in entries),
    )


def document_to_json(doc: FormDocument) -> str:
    return json.dumps(document_to_dict(doc), indent=2)


def document_from_json(s: str, default_name: str = "Form") -> FormDocument:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON manifest: {e}") from e
    return document_from_dict(d, default_name=default_name)


def document_to_yaml(doc: FormDocument) -> str:
    return yaml.safe_dump(document_to_dict(doc), sort_keys=False)


def document_from_yaml(s: str, default_name: str = "Form") -> FormDocument:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML manifest: {e}") from e
    return document_from_dict(d, default_name=default_name)


def classified_to_dict(c: ClassifiedField) -> Dict[str, Any]:
    return {
        "name": c.name,
        "identifier": c.identifier,
        "alias": c.alias,
        "accessor_kind": c.accessor_kind.value,
        "return_type": c.return_type.value,
        "optional": c.optional,
        "default": c.default.value,
    }


def options_to_dict(o: GeneratorOptions) -> Dict[str, Any]:
    return {
        "state": o.state,
        "imports": list(o.imports),
        "base_class": o.base_class,
        "constructor_arg": o.constructor_arg,
        "constructor_type": o.constructor_type,
    }


def options_from_dict(d: Dict[str, Any] | None) -> GeneratorOptions:
    """Build GeneratorOptions, keeping defaults for keys that are absent."""
    options = GeneratorOptions()
    if not d:
        return options
    if not isinstance(d, dict):
        raise ManifestError("Options must be a mapping")

    unknown = set(d) - set(options_to_dict(options))
    if unknown:
        raise ManifestError(f"Unknown option keys: {sorted(unknown)}")

    if "imports" in d:
        imports: List[str] = d["imports"] or []
        if not isinstance(imports, list):
            raise ManifestError("Option 'imports' must be a list of lines")
        options.imports = [str(line) for line in imports]
    for key in ("state", "base_class", "constructor_arg", "constructor_type"):
        if key in d:
            setattr(options, key, str(d[key]))
    return options


def options_from_yaml(s: str) -> GeneratorOptions:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML options: {e}") from e
    return options_from_dict(d)
