"""
formgen: Form Accessor Generator

Reads the interactive fields of a fillable PDF and derives accessor stubs
for a form class: one accessor per field plus a registry of all of them.

PIPELINE:
---------
    PDF bytes → FormDocument (ordered FormFields)
              → classify()  (identifier, return type, default)
              → render()    (declaration tree)
              → build_unit() / assemble()
              → backends.typescript (text)

The core (naming, classifier, renderer, assembler) performs no I/O.
Reading documents and writing files live at the edges.
"""

__version__ = "0.1.0"
