"""Schema-driven validation and normalization of AdCOM objects."""

from __future__ import annotations

from typing import Any

from .errors import AdcomError, ConfigError, DecodeError
from .normalization import Normalizer
from .registry import EnumRegistry, FieldDescriptor, FieldKind, MessageDescriptor, SchemaDescriptor
from .schema import AdcomMessage
from .validation import Severity, ValidationIssue, ValidationReport, Validator
from .wiring import default_normalizer, default_validator

__version__ = "0.1.0"


def validate(instance: Any, message_type: str | type[AdcomMessage]) -> list[ValidationIssue]:
    """Validate ``instance`` with the process-wide validator."""
    return default_validator().validate(instance, message_type)


def normalize(instance: AdcomMessage, message_type: str | type[AdcomMessage]) -> None:
    """Fill declared defaults into ``instance`` in place."""
    default_normalizer().normalize(instance, message_type)


__all__ = [
    "AdcomError",
    "AdcomMessage",
    "ConfigError",
    "DecodeError",
    "EnumRegistry",
    "FieldDescriptor",
    "FieldKind",
    "MessageDescriptor",
    "Normalizer",
    "SchemaDescriptor",
    "Severity",
    "ValidationIssue",
    "ValidationReport",
    "Validator",
    "normalize",
    "validate",
]
