"""
Declaration Tree for Generated Form Units

Generated source is represented as a small tree of declarations,
never as concatenated strings. Turning the tree into text is the job
of a backend (see formgen.backends).

This ensures:
    - Emitted invariants can be checked against structure, not text
    - Formatting stays isolated in one place
    - Other target languages can reuse the same tree

ARCHITECTURAL RULE:
    No target-language syntax in this module.
"""

from abc import ABC
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from formgen.model import DefaultValue, ReturnType


class Declaration(ABC):
    """
    Base class for all declarations in a generated unit.

    Structure only. Does not know how to print itself.
    """
    pass


@dataclass(frozen=True)
class TypeRef:
    """
    Declared return type of an accessor.

    Example:
        TypeRef(ReturnType.STRING, optional=True)
    prints in TypeScript as:
        string | undefined
    """

    base: ReturnType
    optional: bool = False


@dataclass(frozen=True)
class AccessorDeclaration(Declaration):
    """
    A zero-argument accessor returning a constant default.

    The accessor is a stub: it is not wired to the real field value.
    That wiring is left to whoever edits the generated file.

    Properties:
        identifier: Accessor name (canonical identifier)
        return_type: Declared TypeRef
        default: Literal the body returns
        index: Document position of the field (for the doc comment)
        label: Raw field label (for the doc comment)
    """

    identifier: str
    return_type: TypeRef
    default: DefaultValue
    index: int
    label: str


@dataclass(frozen=True)
class AliasDeclaration(Declaration):
    """
    A positional alias that forwards to a canonical accessor.

    Example:
        AliasDeclaration("f7", target="SpouseSsn", ...)
    means f7() always returns SpouseSsn(). It never duplicates logic.
    """

    alias: str
    target: str
    return_type: TypeRef


@dataclass(frozen=True)
class RegistryEntry:
    """One registry row: the public name paired with a self-reference."""

    public_name: str


@dataclass(frozen=True)
class RenderedAccessor:
    """
    Declarations produced for one field.

    Properties:
        accessor: The accessor declaration
        alias: Positional alias (name-addressed fields only)
        public_name: Identifier the registry must reference
    """

    accessor: AccessorDeclaration
    public_name: str
    alias: Optional[AliasDeclaration] = None

    @property
    def declarations(self) -> Tuple[Declaration, ...]:
        if self.alias is None:
            return (self.accessor,)
        return (self.accessor, self.alias)


@dataclass
class FormUnit:
    """
    Structured form of one generated unit.

    Everything a backend prints MUST be derivable from this object.

    Properties:
        class_name: Normalized unit identifier
        form_name: Unit name as given by the caller (e.g. "f1040")
        state: Jurisdiction placeholder written into the constructor
        imports: Preamble lines, printed verbatim
        base_class: Class the generated form extends
        constructor_arg: Constructor parameter name
        constructor_type: Constructor parameter type
        accessors: RenderedAccessors in field order
        registry: RegistryEntries in field order

    INVARIANTS:
        - len(accessors) == len(registry) == number of input fields
        - registry[i].public_name == accessors[i].public_name
    """

    class_name: str
    form_name: str
    state: str
    imports: List[str] = field(default_factory=list)
    base_class: str = "Form"
    constructor_arg: str = "f1040"
    constructor_type: str = "F1040"
    accessors: List[RenderedAccessor] = field(default_factory=list)
    registry: List[RegistryEntry] = field(default_factory=list)

    @property
    def factory_name(self) -> str:
        return f"make{self.class_name}"
