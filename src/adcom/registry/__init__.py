"""Enum registry and schema descriptor, built once at startup."""

from .descriptor import (
    INT32_MAX,
    INT32_MIN,
    FieldDescriptor,
    FieldKind,
    MessageDescriptor,
    SchemaDescriptor,
)
from .enum_registry import UNKNOWN_CODE, EnumRegistry, EnumType

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "UNKNOWN_CODE",
    "EnumRegistry",
    "EnumType",
    "FieldDescriptor",
    "FieldKind",
    "MessageDescriptor",
    "SchemaDescriptor",
]
