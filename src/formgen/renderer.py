"""
Accessor Renderer — turns one classified field into declarations.

Numeric-addressed fields get a single accessor:
    l12a(): number

Name-addressed fields get a named accessor plus a positional alias:
    SpouseSsn(): string
    f7(): string  → SpouseSsn()
"""

from formgen.declarations import (
    AccessorDeclaration,
    AliasDeclaration,
    RenderedAccessor,
    TypeRef,
)
from formgen.model import ClassifiedField, FormField


def render(classified: ClassifiedField, field: FormField, index: int) -> RenderedAccessor:
    """
    Build the declarations for one field.

    Args:
        classified: Output of classify(field, index)
        field: The original FormField (its raw label goes in the doc comment)
        index: 0-based document position

    Returns:
        RenderedAccessor whose public_name is the canonical identifier
    """
    type_ref = TypeRef(base=classified.return_type, optional=classified.optional)

    accessor = AccessorDeclaration(
        identifier=classified.identifier,
        return_type=type_ref,
        default=classified.default,
        index=index,
        label=field.raw_name,
    )

    alias = None
    if classified.alias is not None:
        alias = AliasDeclaration(
            alias=classified.alias,
            target=classified.identifier,
            return_type=type_ref,
        )

    return RenderedAccessor(
        accessor=accessor,
        public_name=classified.identifier,
        alias=alias,
    )


__all__ = ["render"]
