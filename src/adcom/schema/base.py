"""Base model and field declaration helpers for AdCOM message types.

Every model field is declared through one of the ``*_field`` helpers, which
record the schema facts (field number, kind, cardinality, enum or message
reference, oneof group, declared default) in the field's
``json_schema_extra``. The schema descriptor reflects over these at startup.

Declared defaults are never applied by the codec: an unset field stays
``None`` so presence is observable, and the normalizer fills defaults later.
Scalar fields are strict (no string-to-int or int-to-bool coercion); nested
messages and the ``ext`` bag are not, so JSON objects and string extension
keys still decode.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

ADCOM_KEY = "adcom"
EXTENSION_FIELD = "ext"
DEFAULT_EXTENSION_RANGE = (100, 9999)


class AdcomMessage(BaseModel):
    """Root of every AdCOM message model.

    Named fields the schema does not declare are kept (``extra="allow"``) so
    that re-encoding preserves data from newer schema revisions. Vendor
    extensions live in ``ext``, keyed by field number, and are never
    interpreted.
    """

    model_config = ConfigDict(extra="allow")

    adcom_name: ClassVar[str] = ""
    extension_range: ClassVar[tuple[int, int] | None] = DEFAULT_EXTENSION_RANGE

    ext: dict[int, Any] | None = Field(
        default=None,
        description="Opaque vendor-specific extensions keyed by field number",
    )


def _declare(
    number: int,
    kind: str,
    description: str,
    *,
    repeated: bool = False,
    enum: str | None = None,
    message: str | None = None,
    oneof: str | None = None,
    default: Any = None,
    required: bool = False,
    allowed: tuple[int, ...] | None = None,
) -> Any:
    meta: dict[str, Any] = {"number": number, "kind": kind, "repeated": repeated}
    if enum is not None:
        meta["enum"] = enum
    if message is not None:
        meta["message"] = message
    if oneof is not None:
        meta["oneof"] = oneof
    if default is not None:
        meta["default"] = default
    if required:
        meta["required"] = True
    if allowed is not None:
        meta["allowed"] = list(allowed)
    return Field(
        default=None,
        description=description,
        strict=True if kind != "message" else None,
        json_schema_extra={ADCOM_KEY: meta},
    )


def string_field(number: int, description: str = "", **kwargs: Any) -> Any:
    return _declare(number, "string", description, **kwargs)


def int_field(number: int, description: str = "", **kwargs: Any) -> Any:
    return _declare(number, "int32", description, **kwargs)


def bool_field(number: int, description: str = "", **kwargs: Any) -> Any:
    return _declare(number, "bool", description, **kwargs)


def float_field(number: int, description: str = "", **kwargs: Any) -> Any:
    return _declare(number, "float", description, **kwargs)


def enum_field(number: int, enum: str, description: str = "", **kwargs: Any) -> Any:
    """Integer field whose codes come from the named enum list."""
    return _declare(number, "enum", description, enum=enum, **kwargs)


def message_field(number: int, message: str, description: str = "", **kwargs: Any) -> Any:
    """Nested message field; ``message`` is the fully qualified message name."""
    return _declare(number, "message", description, message=message, **kwargs)
