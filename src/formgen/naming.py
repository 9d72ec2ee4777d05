"""
Identifier normalization for field labels.

Turns arbitrary labels ("topmostSubform[0].Page1[0].f1_01[0]", "Line 12a")
into identifier fragments. Pure character-class filtering, no locale rules.
"""

import re


_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")
_NUMERIC_NAME_RE = re.compile(r"^[0-9]+[a-z]*$")


def normalize_name(raw: str) -> str:
    """
    Strip everything except ASCII letters and digits, then capitalize.

    Only the first surviving character is upper-cased; the rest is kept.

    Examples:
        "Hello-World!" -> "HelloWorld"
        "123.45"       -> "12345"
        "f1040"        -> "F1040"
        "***"          -> ""
    """
    cleaned = _NON_ALNUM_RE.sub("", raw)
    return cleaned[:1].upper() + cleaned[1:]


def is_numeric_name(name: str) -> bool:
    """True if a normalized name looks like a printed line number ("5", "12a")."""
    return _NUMERIC_NAME_RE.match(name) is not None


__all__ = ["normalize_name", "is_numeric_name"]
