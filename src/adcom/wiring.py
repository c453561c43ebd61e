"""Composition root: the single place where registry, descriptor and services
are constructed.

The enum registry and schema descriptor are process-wide and built on first
use; a malformed schema raises ConfigError here, at startup.
"""

from __future__ import annotations

from functools import lru_cache

from .config.runtime import RuntimeSettings, get_settings
from .enums import ALL_ENUMS, VENDOR_SPECIFIC_FROM
from .normalization.normalizer import Normalizer
from .observability import get_logger
from .registry.descriptor import SchemaDescriptor
from .registry.enum_registry import EnumRegistry
from .schema import ALL_MODELS
from .services.object_service import ObjectService
from .validation.validator import Validator


@lru_cache(maxsize=1)
def build_enum_registry() -> EnumRegistry:
    return EnumRegistry.from_enum_types(ALL_ENUMS, vendor_ranges=VENDOR_SPECIFIC_FROM)


@lru_cache(maxsize=1)
def build_schema_descriptor() -> SchemaDescriptor:
    return SchemaDescriptor.from_models(ALL_MODELS, build_enum_registry())


def build_validator(settings: RuntimeSettings | None = None) -> Validator:
    """Construct a Validator over the process-wide registry and descriptor."""
    return Validator(
        build_schema_descriptor(),
        build_enum_registry(),
        settings=settings or get_settings(),
    )


def build_normalizer(settings: RuntimeSettings | None = None) -> Normalizer:
    return Normalizer(build_schema_descriptor(), settings=settings or get_settings())


def build_object_service(settings: RuntimeSettings | None = None) -> ObjectService:
    return ObjectService(
        schema=build_schema_descriptor(),
        validator=build_validator(settings),
        normalizer=build_normalizer(settings),
        logger=get_logger(),
    )


@lru_cache(maxsize=1)
def default_validator() -> Validator:
    return build_validator()


@lru_cache(maxsize=1)
def default_normalizer() -> Normalizer:
    return build_normalizer()
