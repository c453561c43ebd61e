"""JSON codec for AdCOM messages, delegated to pydantic.

Decoding never applies declared defaults: an attribute absent on the wire
stays ``None`` until the normalizer runs. Scalars are not coerced, so a
JSON ``true`` in an integer field or ``"no"`` in a bool field is a
``DecodeError`` rather than a silently converted value. Encoding omits unset
fields.
"""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from pydantic import ValidationError

from .errors import DecodeError
from .schema.base import AdcomMessage

M = TypeVar("M", bound=AdcomMessage)


def decode(model: type[M], payload: str | bytes | Mapping[str, Any]) -> M:
    """Decode JSON text/bytes or an already-parsed mapping into ``model``."""
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return model.model_validate_json(payload)
        if isinstance(payload, Mapping):
            return model.model_validate(dict(payload))
    except ValidationError as exc:
        raise DecodeError(f"cannot decode {model.adcom_name or model.__name__}: {exc}") from exc
    raise DecodeError(f"unsupported payload type {type(payload).__name__}")


def to_dict(instance: AdcomMessage) -> dict[str, Any]:
    """JSON-compatible dict of every populated field."""
    return instance.model_dump(mode="json", exclude_none=True)


def encode(instance: AdcomMessage, indent: int | None = None) -> str:
    return instance.model_dump_json(exclude_none=True, indent=indent)
