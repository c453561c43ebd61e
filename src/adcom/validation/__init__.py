"""Validation of decoded AdCOM objects."""

from .issues import (
    ROOT_PATH,
    Severity,
    ValidationIssue,
    ValidationReport,
    has_errors,
)
from .rules import CROSS_FIELD_RULES, CrossFieldRule
from .validator import Validator

__all__ = [
    "CROSS_FIELD_RULES",
    "ROOT_PATH",
    "CrossFieldRule",
    "Severity",
    "ValidationIssue",
    "ValidationReport",
    "Validator",
    "has_errors",
]
