"""Unified validation API.

Single entry point combining structural (schema) and relational (rules)
validation. Validation is total: it never raises and always returns a
(possibly empty) list of ``Issue``.

Example:
    >>> from ephys_meta.validation import validate, validate_field
    >>> issues = validate(document)
    >>> [issue.path for issue in validate_field(document, "cameras")]
    ['cameras[0].meters_per_pixel']
"""

from typing import Any, List

from .models import Issue, Severity
from .paths import loc_to_pointer, normalize_path, top_level_field
from .rules import OPTOGENETICS_FIELDS, validate_rules
from .schema import DATE_OF_BIRTH_MESSAGE, validate_schema

__all__ = [
    "Issue",
    "Severity",
    "validate",
    "validate_field",
    "validate_schema",
    "validate_rules",
    "normalize_path",
    "loc_to_pointer",
    "top_level_field",
    "OPTOGENETICS_FIELDS",
    "DATE_OF_BIRTH_MESSAGE",
]


def validate(document: Any) -> List[Issue]:
    """Validate a document: schema issues followed by rules issues."""
    return validate_schema(document) + validate_rules(document)


def validate_field(document: Any, field_path: str) -> List[Issue]:
    """Validate a document and keep only issues at or below ``field_path``.

    Args:
        document: Candidate document
        field_path: Field locator (e.g., "subject", "cameras[0]")

    Returns:
        Issues whose path equals ``field_path`` or is nested under it
    """
    return [
        issue
        for issue in validate(document)
        if issue.path == field_path or issue.path.startswith(f"{field_path}.") or issue.path.startswith(f"{field_path}[")
    ]
