"""Structural validation against the session document schema.

Validates types, required fields, patterns, numeric ranges and enums using
the Pydantic models in ``ephys_meta.domain.session`` and converts every
error into an ``Issue``.

Path rules:
    - Locations are converted with ``normalize_path``.
    - Missing-field errors use the bare field name as path, so the locator
      names the missing field itself rather than its parent.

Message rules:
    - Non-empty pattern violations read
      "<field> cannot be empty or contain only whitespace".
    - Any violation at ``subject.date_of_birth`` reads a fixed ISO 8601
      message.
    - All other messages pass through unchanged.
"""

import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from ..domain.session import NON_EMPTY_PATTERN, SessionDocument
from .models import Issue
from .paths import loc_to_pointer, normalize_path

__all__ = ["validate_schema", "DATE_OF_BIRTH_MESSAGE", "ERROR_CODES"]

logger = logging.getLogger(__name__)

DATE_OF_BIRTH_MESSAGE = "Date of birth needs to comply with ISO 8601 format (YYYY-MM-DDTHH:MM:SS)"

ERROR_CODES: Dict[str, str] = {
    "missing": "required",
    "extra_forbidden": "additional",
    "string_pattern_mismatch": "pattern",
    "literal_error": "enum",
    "enum": "enum",
    "greater_than": "range",
    "greater_than_equal": "range",
    "less_than": "range",
    "less_than_equal": "range",
    "multiple_of": "range",
    "finite_number": "range",
    "too_short": "length",
    "too_long": "length",
}


def validate_schema(document: Any) -> List[Issue]:
    """Validate a document's structure.

    Args:
        document: Candidate document (any value; non-mappings yield a type issue)

    Returns:
        Issues, one per structural violation, in schema order
    """
    try:
        SessionDocument.model_validate(document)
    except ValidationError as e:
        issues = [_to_issue(error) for error in e.errors()]
        logger.debug(f"Schema validation found {len(issues)} issue(s)")
        return issues
    return []


def _to_issue(error: Dict[str, Any]) -> Issue:
    error_type = error.get("type", "")
    loc = tuple(error.get("loc", ()))
    code = ERROR_CODES.get(error_type, "type")

    locator = normalize_path(loc_to_pointer(loc))
    if code == "required" and loc:
        path = str(loc[-1])
    else:
        path = locator

    return Issue(path=path, code=code, severity="error", message=_message(error, code, locator))


def _message(error: Dict[str, Any], code: str, locator: str) -> str:
    ctx = error.get("ctx") or {}

    if error.get("type") == "string_pattern_mismatch" and ctx.get("pattern") == NON_EMPTY_PATTERN:
        return f"{locator} cannot be empty or contain only whitespace"

    if code != "required" and locator == "subject.date_of_birth":
        return DATE_OF_BIRTH_MESSAGE

    return error.get("msg") or "Validation error"
