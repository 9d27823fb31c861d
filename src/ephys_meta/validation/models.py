"""Validation issue model.

Issues are ephemeral: they are recomputed on every validation call and never
persisted. Structural (schema) and relational (rules) findings share this
single shape.
"""

from typing import Literal

from pydantic import BaseModel, Field

__all__ = ["Issue", "Severity"]

Severity = Literal["error", "warning"]


class Issue(BaseModel):
    """One normalized validation finding.

    Attributes:
        path: Field locator (e.g., "cameras[0].id", "subject.sex")
        code: Finding category ("required", "type", "pattern", "enum",
            "range", "length", "additional", "reference", "duplicate",
            "dependency")
        severity: "error" or "warning"
        message: Human-readable message
    """

    model_config = {"frozen": True, "extra": "forbid"}

    path: str = Field(..., description="Field locator of the offending value")
    code: str = Field(..., description="Finding category")
    severity: Severity = Field("error", description="Severity level")
    message: str = Field(..., description="Human-readable message")
