"""Partial import of externally authored session documents.

A candidate document that validates cleanly is adopted wholesale (missing
top-level fields are filled from defaults). Otherwise the candidate is
reconciled into an all-defaults document, admitting a top-level field only
if no issue points into it, it is present in the candidate, and its
structural type matches the default's. Admission is whole-field: one bad
array entry excludes the entire array.

In both cases the subject's sex is forced to "U" unless it already holds a
valid value.

Used only for imports; in-app edits are validated before they are committed.

Example:
    >>> result = import_candidate(raw)
    >>> result.document["subject"]["sex"]
    'U'
    >>> [f.field for f in result.excluded_fields]
    ['cameras']
"""

import copy
import logging
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, Field

from .domain.defaults import EMPTY_DOCUMENT, SEX_VALUES, UNKNOWN_SEX, empty_document
from .validation import Issue, top_level_field, validate

__all__ = ["ExcludedField", "ImportResult", "reconcile", "import_candidate"]

logger = logging.getLogger(__name__)


class ExcludedField(BaseModel):
    """Top-level field left out of a partial import.

    Attributes:
        field: Top-level field name
        reason: Message of the first issue pointing into the field
    """

    model_config = {"frozen": True, "extra": "forbid"}

    field: str
    reason: str


class ImportResult(BaseModel):
    """Outcome of importing a candidate document.

    Attributes:
        document: Reconciled document, always structurally complete
        issues: Every issue found in the candidate
        imported_fields: Default fields taken from the candidate
        excluded_fields: Fields rejected because of issues
    """

    model_config = {"frozen": True, "extra": "forbid"}

    document: Dict[str, Any]
    issues: List[Issue] = Field(default_factory=list)
    imported_fields: List[str] = Field(default_factory=list)
    excluded_fields: List[ExcludedField] = Field(default_factory=list)

    @property
    def has_exclusions(self) -> bool:
        return bool(self.excluded_fields)


def _json_type(value: Any) -> str:
    """Structural type category of a value (JSON semantics)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _error_fields(issues: Sequence[Issue]) -> List[str]:
    fields: List[str] = []
    for issue in issues:
        field = top_level_field(issue.path)
        if field not in fields:
            fields.append(field)
    return fields


def _admissible(raw: Dict[str, Any], key: str, error_fields: Sequence[str]) -> bool:
    return key not in error_fields and key in raw and _json_type(raw[key]) == _json_type(EMPTY_DOCUMENT[key])


def _force_valid_sex(document: Dict[str, Any]) -> None:
    if not isinstance(document.get("subject"), dict):
        document["subject"] = empty_document()["subject"]

    subject = document["subject"]
    sex = subject.get("sex")
    if not (isinstance(sex, str) and sex in SEX_VALUES):
        logger.info(f"Subject sex {sex!r} is not a valid value; using {UNKNOWN_SEX!r}")
        subject["sex"] = UNKNOWN_SEX


def reconcile(raw: Any, issues: Sequence[Issue]) -> Dict[str, Any]:
    """Build a structurally complete document from a candidate and its issues.

    Never raises: non-mapping candidates are treated as empty.

    Args:
        raw: Parsed candidate document
        issues: Issues found by ``validate(raw)``

    Returns:
        Reconciled document containing every default top-level field
    """
    candidate = raw if isinstance(raw, dict) else {}

    if not issues:
        document = copy.deepcopy(candidate)
        for key, default in empty_document().items():
            if key not in document:
                document[key] = default
    else:
        error_fields = _error_fields(issues)
        document = empty_document()
        for key in document:
            if _admissible(candidate, key, error_fields):
                document[key] = copy.deepcopy(candidate[key])

    _force_valid_sex(document)
    return document


def import_candidate(raw: Any) -> ImportResult:
    """Validate and reconcile an externally authored candidate document.

    Args:
        raw: Parsed candidate document

    Returns:
        ImportResult with the reconciled document, all issues and an
        import summary
    """
    issues = validate(raw)
    document = reconcile(raw, issues)
    candidate = raw if isinstance(raw, dict) else {}

    if not issues:
        imported = [key for key in EMPTY_DOCUMENT if key in candidate]
        logger.info(f"Imported candidate document with {len(imported)} field(s) and no issues")
        return ImportResult(document=document, issues=[], imported_fields=imported)

    error_fields = _error_fields(issues)
    imported = [key for key in EMPTY_DOCUMENT if _admissible(candidate, key, error_fields)]
    excluded = [
        ExcludedField(
            field=field,
            reason=next(issue.message for issue in issues if top_level_field(issue.path) == field),
        )
        for field in error_fields
        if field in EMPTY_DOCUMENT
    ]

    for excluded_field in excluded:
        logger.warning(f"Excluded field '{excluded_field.field}' from import: {excluded_field.reason}")

    return ImportResult(document=document, issues=list(issues), imported_fields=imported, excluded_fields=excluded)
