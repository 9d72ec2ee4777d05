"""
TypeScript generator for form units.

Converts a FormUnit declaration tree into the source of a form class:

    export class F8453 extends Form {
      ...
      /**
       * Index 3: topmostSubform[0].Page1[0].f1_04[0]
       */
      TopmostSubform0Page10f1040 = (): string | undefined => {
        return undefined
      }

      f3 = (): string | undefined => this.TopmostSubform0Page10f1040()

      fields = (): Field[] => ([
        ['TopmostSubform0Page10f1040', this.TopmostSubform0Page10f1040]
      ])
    }

Identifiers are printed as given. Empty or colliding identifiers are
not repaired here.
"""

from typing import List

from formgen.declarations import (
    AccessorDeclaration,
    AliasDeclaration,
    Declaration,
    FormUnit,
    TypeRef,
)
from formgen.model import DefaultValue, ReturnType


INDENT = "  "

_TYPE_NAMES = {
    ReturnType.NUMBER: "number",
    ReturnType.BOOLEAN: "boolean",
    ReturnType.STRING: "string",
}

_DEFAULT_LITERALS = {
    DefaultValue.UNDEFINED: "undefined",
    DefaultValue.FALSE: "false",
    DefaultValue.EMPTY_STRING: "''",
}


def _escape_ts_string(s: str) -> str:
    """Quote a value as a single-quoted TypeScript string literal."""
    s = s.replace("\\", "\\\\")
    s = s.replace("'", "\\'")
    s = s.replace("\n", "\\n")
    return f"'{s}'"


def _escape_doc_text(s: str) -> str:
    """Keep a label from closing or breaking a /** */ comment."""
    s = s.replace("\r", " ").replace("\n", " ")
    return s.replace("*/", "*\\/")


def _type_to_ts(type_ref: TypeRef) -> str:
    name = _TYPE_NAMES[type_ref.base]
    if type_ref.optional:
        return f"{name} | undefined"
    return name


def _accessor_to_ts(decl: AccessorDeclaration) -> List[str]:
    return [
        f"{INDENT}/**",
        f"{INDENT} * Index {decl.index}: {_escape_doc_text(decl.label)}",
        f"{INDENT} */",
        f"{INDENT}{decl.identifier} = (): {_type_to_ts(decl.return_type)} => {{",
        f"{INDENT}{INDENT}return {_DEFAULT_LITERALS[decl.default]}",
        f"{INDENT}}}",
    ]


def _alias_to_ts(decl: AliasDeclaration) -> List[str]:
    return [
        f"{INDENT}{decl.alias} = (): {_type_to_ts(decl.return_type)} => this.{decl.target}()",
    ]


def declaration_to_ts(decl: Declaration) -> List[str]:
    """Render a single declaration as TypeScript source lines."""
    if isinstance(decl, AccessorDeclaration):
        return _accessor_to_ts(decl)
    if isinstance(decl, AliasDeclaration):
        return _alias_to_ts(decl)
    raise TypeError(f"Unsupported Declaration type: {type(decl)}")


def generate_typescript(unit: FormUnit) -> str:
    """
    Generate TypeScript source for a form unit.

    Args:
        unit: FormUnit built by formgen.assembler.build_unit

    Returns:
        String containing the complete generated module
    """
    lines = []
    arg = unit.constructor_arg

    # Preamble
    lines.extend(unit.imports)
    lines.append("")

    # =========================================================================
    # CLASS HEADER
    # =========================================================================

    lines.append(f"export class {unit.class_name} extends {unit.base_class} {{")
    lines.append(f"{INDENT}info: ValidatedInformation")
    lines.append(f"{INDENT}{arg}: {unit.constructor_type}")
    lines.append(f"{INDENT}formName: string")
    lines.append(f"{INDENT}state: State")
    lines.append("")
    lines.append(f"{INDENT}constructor({arg}: {unit.constructor_type}) {{")
    lines.append(f"{INDENT * 2}super()")
    lines.append(f"{INDENT * 2}this.info = {arg}.info")
    lines.append(f"{INDENT * 2}this.{arg} = {arg}")
    lines.append(f"{INDENT * 2}this.formName = {_escape_ts_string(unit.form_name)}")
    lines.append(f"{INDENT * 2}this.state = {_escape_ts_string(unit.state)} // <-- Fill here")
    lines.append(f"{INDENT}}}")
    lines.append("")

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    for rendered in unit.accessors:
        for decl in rendered.declarations:
            lines.extend(declaration_to_ts(decl))
            lines.append("")

    # =========================================================================
    # REGISTRY
    # =========================================================================

    entries = [
        f"{INDENT * 2}[{_escape_ts_string(entry.public_name)}, this.{entry.public_name}]"
        for entry in unit.registry
    ]
    lines.append(f"{INDENT}fields = (): Field[] => ([")
    if entries:
        lines.append(",\n".join(entries))
    lines.append(f"{INDENT}])")
    lines.append("}")
    lines.append("")

    # =========================================================================
    # FACTORY
    # =========================================================================

    lines.append(
        f"const {unit.factory_name} = ({arg}: {unit.constructor_type}): {unit.class_name} =>"
    )
    lines.append(f"{INDENT}new {unit.class_name}({arg})")
    lines.append("")
    lines.append(f"export default {unit.factory_name}")

    return "\n".join(lines) + "\n"


def save_typescript_file(unit: FormUnit, filename: str) -> None:
    """
    Generate TypeScript and save to file.

    Args:
        unit: FormUnit to print
        filename: Output file path (.ts extension recommended)
    """
    source = generate_typescript(unit)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(source)


__all__ = ["generate_typescript", "save_typescript_file", "declaration_to_ts"]
