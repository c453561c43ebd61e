"""Validation issues and the aggregated report returned to callers."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ROOT_PATH = "$"


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


class ValidationIssue(BaseModel):
    """A single problem found in a decoded object."""

    model_config = ConfigDict(frozen=True)

    severity: Severity = Field(..., description="WARNING keeps processing; ERROR fails the object")
    path: str = Field(..., description="Field path rooted at '$', e.g. '$.display.event[0].type'")
    message: str = Field(..., description="Human readable description")
    rule: str = Field(..., description="Identifier of the rule that produced the issue")

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR


def join_path(base: str, name: str) -> str:
    return f"{base}.{name}"


def index_path(base: str, index: int) -> str:
    return f"{base}[{index}]"


def error(path: str, rule: str, message: str) -> ValidationIssue:
    return ValidationIssue(severity=Severity.ERROR, path=path, message=message, rule=rule)


def warning(path: str, rule: str, message: str) -> ValidationIssue:
    return ValidationIssue(severity=Severity.WARNING, path=path, message=message, rule=rule)


def has_errors(issues: list[ValidationIssue]) -> bool:
    return any(issue.is_error for issue in issues)


class ValidationReport:
    """Outcome of validating (and possibly normalizing) one object."""

    def __init__(self, message_type: str, issues: list[ValidationIssue] | None = None):
        self.message_type = message_type
        self.issues: list[ValidationIssue] = list(issues or [])
        self.normalized = False

    @property
    def is_valid(self) -> bool:
        return not has_errors(self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is Severity.WARNING]

    def add(self, issue: ValidationIssue) -> ValidationReport:
        """Add an issue and return self for chaining."""
        self.issues.append(issue)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        return {
            "message_type": self.message_type,
            "valid": self.is_valid,
            "normalized": self.normalized,
            "errors": [issue.model_dump(mode="json") for issue in self.errors],
            "warnings": [issue.model_dump(mode="json") for issue in self.warnings],
            "summary": {
                "error_count": len(self.errors),
                "warning_count": len(self.warnings),
            },
        }
