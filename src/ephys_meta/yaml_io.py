"""YAML persistence for session documents.

Encoding is deterministic (sorted keys, block style, UTF-8, Unix line
endings) so the same document always produces byte-identical output.
Decoding keeps ISO 8601 strings as strings instead of resolving them to
datetime objects, since the schema expects text.

Export filenames follow the convention expected by the downstream NWB
converter: ``{mmddYYYY}_{subject_id lowercased}_metadata.yml``.

Example:
    >>> text = encode_document({"lab": "Frank Lab", "session_id": "s1"})
    >>> decode_document(text)["lab"]
    'Frank Lab'
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field
import yaml

from .exceptions import DocumentIOError
from .validation import Issue, validate

__all__ = [
    "ExportResult",
    "encode_document",
    "decode_document",
    "read_document",
    "write_document",
    "export_filename",
    "export_document",
]

logger = logging.getLogger(__name__)

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _DocumentLoader(yaml.SafeLoader):
    """Safe loader that leaves timestamps as plain strings."""


_DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class ExportResult(BaseModel):
    """Outcome of exporting a document.

    Attributes:
        path: Written file, or None if validation failed
        issues: Validation issues that blocked the export
    """

    model_config = {"frozen": True, "extra": "forbid"}

    path: Optional[Path] = None
    issues: List[Issue] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.path is not None


def encode_document(document: Dict[str, Any]) -> str:
    """Encode a document as deterministic YAML text."""
    return yaml.safe_dump(document or {}, sort_keys=True, allow_unicode=True, default_flow_style=False)


def decode_document(text: str) -> Any:
    """Decode YAML text into a candidate document.

    Raises:
        DocumentIOError: If the text is not valid YAML
    """
    try:
        return yaml.load(text, Loader=_DocumentLoader)
    except yaml.YAMLError as e:
        raise DocumentIOError(f"Invalid YAML: {e}") from e


def read_document(path: Union[Path, str]) -> Any:
    """Read and decode a YAML document file.

    Raises:
        DocumentIOError: If the file is missing, unreadable or not valid YAML
    """
    path = Path(path)

    if not path.exists():
        raise DocumentIOError(f"Document file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentIOError(f"Failed to read document {path}: {e}") from e

    logger.debug(f"Read {len(text)} characters from {path}")
    return decode_document(text)


def write_document(path: Union[Path, str], document: Dict[str, Any]) -> Path:
    """Encode a document and write it to ``path``, creating parent directories.

    Raises:
        DocumentIOError: If the file cannot be written
    """
    path = Path(path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(encode_document(document))
    except OSError as e:
        raise DocumentIOError(f"Failed to write document {path}: {e}") from e

    return path


def export_filename(document: Dict[str, Any], experiment_date: Optional[str] = None) -> str:
    """Deterministic export filename for a document.

    Args:
        document: Session document
        experiment_date: Experiment date as mmddYYYY; a placeholder is used if omitted

    Returns:
        ``{experiment_date}_{subject_id lowercased}_metadata.yml``
    """
    date = experiment_date or "{EXPERIMENT_DATE_in_format_mmddYYYY}"
    subject = document.get("subject") if isinstance(document, dict) else None
    subject_id = subject.get("subject_id") if isinstance(subject, dict) else None
    subject_id = subject_id.lower() if isinstance(subject_id, str) else ""
    return f"{date}_{subject_id}_metadata.yml"


def export_document(
    document: Dict[str, Any],
    directory: Union[Path, str],
    experiment_date: Optional[str] = None,
) -> ExportResult:
    """Validate a document and, if it is clean, write it as YAML.

    Args:
        document: Session document
        directory: Output directory
        experiment_date: Experiment date as mmddYYYY for the filename

    Returns:
        ExportResult with the written path, or the blocking issues
    """
    issues = validate(document)
    if issues:
        logger.warning(f"Export blocked by {len(issues)} validation issue(s)")
        return ExportResult(issues=issues)

    path = write_document(Path(directory) / export_filename(document, experiment_date), document)
    logger.info(f"Exported document to {path}")
    return ExportResult(path=path)
