"""Backends for form unit output generation (TypeScript)."""

from .typescript import generate_typescript, save_typescript_file

__all__ = ["generate_typescript", "save_typescript_file"]
