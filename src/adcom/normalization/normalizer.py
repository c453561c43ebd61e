"""Normalizer: fill declared defaults into a validated object, in place."""

from __future__ import annotations

from typing import Any

from ..config.runtime import RuntimeSettings, get_settings
from ..observability import log_normalization
from ..registry.descriptor import FieldKind, MessageDescriptor, SchemaDescriptor
from ..schema.base import AdcomMessage


class Normalizer:
    """Apply declared defaults (e.g. ``unit`` = DIPS, ``boxing`` = true).

    Only fields that are unset and declare a default change; absent nested
    messages are never created, so the result is deterministic and a second
    run is a no-op. Intended to run after validation reported no ERROR.
    Messages nested deeper than ``max_depth`` are left as they are, matching
    the validator's limit.
    """

    def __init__(self, schema: SchemaDescriptor, settings: RuntimeSettings | None = None) -> None:
        settings = settings or get_settings()
        self._schema = schema
        self._max_depth = settings.max_depth

    def normalize(self, instance: AdcomMessage, message_type: str | type[AdcomMessage]) -> None:
        descriptor = self._schema.message(message_type)
        filled = self._apply(instance, descriptor, 1)
        log_normalization(descriptor.name, filled)

    def _apply(self, instance: Any, descriptor: MessageDescriptor, depth: int) -> int:
        # Ill-typed nodes are left untouched; validation has already reported them.
        if not isinstance(instance, descriptor.model) or depth > self._max_depth:
            return 0
        filled = 0
        for field in descriptor.fields:
            value = getattr(instance, field.name, None)
            if value is None:
                default = self._schema.default_of(field)
                if default is not None:
                    setattr(instance, field.name, default)
                    filled += 1
                continue
            if field.kind is not FieldKind.MESSAGE:
                continue
            child = self._schema.message(field.message_type)
            if field.repeated:
                if isinstance(value, (list, tuple)):
                    for item in value:
                        filled += self._apply(item, child, depth + 1)
            else:
                filled += self._apply(value, child, depth + 1)
        return filled
