"""ObjectService: decode, validate, normalize and re-encode AdCOM objects."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .. import codec
from ..normalization.normalizer import Normalizer
from ..registry.descriptor import SchemaDescriptor
from ..schema.base import AdcomMessage
from ..validation.issues import ValidationReport
from ..validation.validator import Validator


class ObjectService:
    """Orchestrates the per-object pipeline for callers and the CLI."""

    def __init__(
        self,
        schema: SchemaDescriptor,
        validator: Validator,
        normalizer: Normalizer,
        logger: logging.Logger | None = None,
    ) -> None:
        self._schema = schema
        self._validator = validator
        self._normalizer = normalizer
        self._logger = logger

    def decode(
        self,
        message_type: str | type[AdcomMessage],
        payload: str | bytes | Mapping[str, Any],
    ) -> AdcomMessage:
        descriptor = self._schema.message(message_type)
        return codec.decode(descriptor.model, payload)

    def validate(
        self,
        instance: AdcomMessage,
        message_type: str | type[AdcomMessage],
    ) -> ValidationReport:
        descriptor = self._schema.message(message_type)
        return ValidationReport(descriptor.name, self._validator.validate(instance, descriptor.model))

    def check(
        self,
        instance: AdcomMessage,
        message_type: str | type[AdcomMessage],
        force: bool = False,
    ) -> ValidationReport:
        """Validate, then normalize in place unless ERROR issues were found.

        ``force`` normalizes regardless of errors (best-effort processing).
        """
        report = self.validate(instance, message_type)
        descriptor = self._schema.message(message_type)
        if report.is_valid or force:
            self._normalizer.normalize(instance, descriptor.model)
            report.normalized = True
        elif self._logger:
            self._logger.info(
                "normalization_skipped",
                extra={"message_type": descriptor.name, "errors": len(report.errors)},
            )
        return report

    def process(
        self,
        message_type: str | type[AdcomMessage],
        payload: str | bytes | Mapping[str, Any],
        force: bool = False,
    ) -> tuple[AdcomMessage, ValidationReport]:
        instance = self.decode(message_type, payload)
        return instance, self.check(instance, message_type, force=force)

    def encode(self, instance: AdcomMessage, indent: int | None = None) -> str:
        return codec.encode(instance, indent=indent)
