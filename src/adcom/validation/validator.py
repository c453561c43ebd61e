"""Validator: depth-first walk of a decoded object against the schema descriptor."""

from __future__ import annotations

import time
from typing import Any, Mapping

from ..config.runtime import RuntimeSettings, get_settings
from ..observability import log_issue, log_validation
from ..registry.descriptor import (
    INT32_MAX,
    INT32_MIN,
    FieldDescriptor,
    FieldKind,
    MessageDescriptor,
    SchemaDescriptor,
)
from ..registry.enum_registry import EnumRegistry
from ..schema.base import EXTENSION_FIELD, AdcomMessage
from .issues import (
    ROOT_PATH,
    Severity,
    ValidationIssue,
    error,
    index_path,
    join_path,
)
from .rules import CROSS_FIELD_RULES, CrossFieldRule
from .semantics import (
    RULE_ENUM_UNKNOWN_CODE,
    RULE_EXTENSION_RANGE,
    RULE_MAX_DEPTH,
    RULE_ONEOF_EXCLUSIVE,
    RULE_REQUIRED_FIELD,
    RULE_TYPE_MISMATCH,
    RULE_UNKNOWN_FIELD,
    RULE_VALUE_OUT_OF_SET,
)

_SCALAR_TYPES: dict[FieldKind, tuple[type, ...]] = {
    FieldKind.STRING: (str,),
    FieldKind.INT32: (int,),
    FieldKind.ENUM: (int,),
    FieldKind.FLOAT: (int, float),
}


def _matches_kind(kind: FieldKind, value: Any) -> bool:
    if kind is FieldKind.BOOL:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    return isinstance(value, _SCALAR_TYPES[kind])


class Validator:
    """Collect validation issues for decoded AdCOM objects.

    Holds only read-only collaborators, so one instance can serve any number
    of concurrent calls. ``validate`` never raises for data problems.
    """

    def __init__(
        self,
        schema: SchemaDescriptor,
        enums: EnumRegistry,
        rules: Mapping[str, tuple[CrossFieldRule, ...]] | None = None,
        settings: RuntimeSettings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._schema = schema
        self._enums = enums
        self._rules = CROSS_FIELD_RULES if rules is None else rules
        self._max_depth = settings.max_depth
        self._unknown_enum_severity = Severity(settings.unknown_enum_severity)
        self._unknown_field_severity = Severity(settings.unknown_field_severity)
        self._log_warnings = settings.log_warnings

    def validate(
        self,
        instance: Any,
        message_type: str | type[AdcomMessage],
    ) -> list[ValidationIssue]:
        """Return every issue found in ``instance``; empty when it is clean.

        Raises ConfigError only when ``message_type`` is not registered.
        """
        descriptor = self._schema.message(message_type)
        started = time.perf_counter()
        issues: list[ValidationIssue] = []
        self._walk(instance, descriptor, ROOT_PATH, 1, issues)

        warnings = [issue for issue in issues if issue.severity is Severity.WARNING]
        if self._log_warnings:
            for issue in warnings:
                log_issue(descriptor.name, issue.path, issue.rule, issue.message)
        log_validation(
            descriptor.name,
            errors=len(issues) - len(warnings),
            warnings=len(warnings),
            latency_ms=(time.perf_counter() - started) * 1000,
        )
        return issues

    # --- walk ---

    def _walk(
        self,
        instance: Any,
        descriptor: MessageDescriptor,
        path: str,
        depth: int,
        issues: list[ValidationIssue],
    ) -> None:
        if not isinstance(instance, descriptor.model):
            issues.append(
                error(
                    path,
                    RULE_TYPE_MISMATCH,
                    f"expected {descriptor.name} message, got {type(instance).__name__}",
                )
            )
            return
        if depth > self._max_depth:
            issues.append(
                error(path, RULE_MAX_DEPTH, f"nesting exceeds the maximum depth of {self._max_depth}")
            )
            return

        for field in descriptor.fields:
            value = getattr(instance, field.name, None)
            field_path = join_path(path, field.name)
            if value is None:
                if field.required:
                    issues.append(error(field_path, RULE_REQUIRED_FIELD, f"required field '{field.name}' is missing"))
                continue
            if not field.repeated:
                self._check_value(field, value, field_path, depth, issues)
                continue
            if not isinstance(value, (list, tuple)):
                issues.append(
                    error(
                        field_path,
                        RULE_TYPE_MISMATCH,
                        f"expected a list for repeated field '{field.name}', got {type(value).__name__}",
                    )
                )
                continue
            for index, item in enumerate(value):
                self._check_value(field, item, index_path(field_path, index), depth, issues)

        self._check_oneofs(instance, descriptor, path, issues)
        self._check_extensions(instance, descriptor, path, issues)
        self._check_unknown_fields(instance, path, issues)
        for rule in self._rules.get(descriptor.name, ()):
            issues.extend(rule(instance, path))

    def _check_value(
        self,
        field: FieldDescriptor,
        value: Any,
        path: str,
        depth: int,
        issues: list[ValidationIssue],
    ) -> None:
        if field.kind is FieldKind.MESSAGE:
            child = self._schema.message(field.message_type)
            self._walk(value, child, path, depth + 1, issues)
            return
        if not _matches_kind(field.kind, value):
            issues.append(
                error(path, RULE_TYPE_MISMATCH, f"expected {field.kind.value}, got {type(value).__name__}")
            )
            return
        if field.kind in (FieldKind.INT32, FieldKind.ENUM) and not INT32_MIN <= value <= INT32_MAX:
            issues.append(error(path, RULE_TYPE_MISMATCH, f"value {value} does not fit in int32"))
            return
        if field.kind is FieldKind.ENUM:
            if not self._enums.is_valid_code(field.enum_type, value):
                issues.append(
                    ValidationIssue(
                        severity=self._unknown_enum_severity,
                        path=path,
                        rule=RULE_ENUM_UNKNOWN_CODE,
                        message=f"code {value} is not a known {field.enum_type} value",
                    )
                )
            return
        if field.allowed is not None and value not in field.allowed:
            expected = ", ".join(str(v) for v in sorted(field.allowed))
            issues.append(
                ValidationIssue(
                    severity=Severity.WARNING,
                    path=path,
                    rule=RULE_VALUE_OUT_OF_SET,
                    message=f"value {value} is not one of {expected}",
                )
            )

    def _check_oneofs(
        self,
        instance: AdcomMessage,
        descriptor: MessageDescriptor,
        path: str,
        issues: list[ValidationIssue],
    ) -> None:
        for group, members in descriptor.oneofs.items():
            populated = [name for name in members if getattr(instance, name, None) is not None]
            if len(populated) > 1:
                issues.append(
                    error(
                        path,
                        RULE_ONEOF_EXCLUSIVE,
                        f"oneof '{group}' allows at most one member, found: {', '.join(populated)}",
                    )
                )

    def _check_extensions(
        self,
        instance: AdcomMessage,
        descriptor: MessageDescriptor,
        path: str,
        issues: list[ValidationIssue],
    ) -> None:
        ext = getattr(instance, EXTENSION_FIELD, None)
        if ext is None:
            return
        ext_path = join_path(path, EXTENSION_FIELD)
        if not isinstance(ext, Mapping):
            issues.append(
                error(ext_path, RULE_TYPE_MISMATCH, f"expected a mapping of extensions, got {type(ext).__name__}")
            )
            return
        if descriptor.extension_range is None:
            if ext:
                issues.append(
                    error(ext_path, RULE_EXTENSION_RANGE, f"{descriptor.name} does not accept vendor extensions")
                )
            return
        low, high = descriptor.extension_range
        for number in ext:
            if isinstance(number, bool) or not isinstance(number, int) or not descriptor.accepts_extension(number):
                issues.append(
                    error(
                        ext_path,
                        RULE_EXTENSION_RANGE,
                        f"extension field number {number!r} is outside {low}..{high}",
                    )
                )

    def _check_unknown_fields(
        self,
        instance: AdcomMessage,
        path: str,
        issues: list[ValidationIssue],
    ) -> None:
        for name in instance.model_extra or {}:
            issues.append(
                ValidationIssue(
                    severity=self._unknown_field_severity,
                    path=join_path(path, name),
                    rule=RULE_UNKNOWN_FIELD,
                    message=f"field '{name}' is not declared by the schema",
                )
            )
