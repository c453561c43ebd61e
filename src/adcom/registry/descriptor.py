"""Schema descriptor: reflected view of the AdCOM message models.

Built once at startup from the models' field declarations and read-only
afterwards. Every malformed declaration is a ``ConfigError`` raised while
building, never at request time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from ..errors import ConfigError
from ..schema.base import ADCOM_KEY, EXTENSION_FIELD, AdcomMessage
from .enum_registry import EnumRegistry

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class FieldKind(str, Enum):
    """Declared value kind of a field."""

    STRING = "string"
    INT32 = "int32"
    BOOL = "bool"
    FLOAT = "float"
    ENUM = "enum"
    MESSAGE = "message"


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    number: int
    kind: FieldKind
    repeated: bool = False
    enum_type: str | None = None
    message_type: str | None = None
    oneof: str | None = None
    default: Any = None
    required: bool = False
    allowed: frozenset[int] | None = None


@dataclass(frozen=True)
class MessageDescriptor:
    name: str
    model: type[AdcomMessage]
    fields: tuple[FieldDescriptor, ...]
    oneofs: Mapping[str, tuple[str, ...]]
    extension_range: tuple[int, int] | None

    def field(self, name: str) -> FieldDescriptor:
        for field in self.fields:
            if field.name == name:
                return field
        raise ConfigError(f"message '{self.name}' has no field '{name}'")

    def accepts_extension(self, number: int) -> bool:
        if self.extension_range is None:
            return False
        low, high = self.extension_range
        return low <= number <= high


class SchemaDescriptor:
    """Message-type lookup for the validator and normalizer.

    Message types may be addressed by fully qualified name
    (``Placement.DisplayPlacement.EventSpec``), by any unique dotted suffix
    (``DisplayPlacement.EventSpec``, ``EventSpec``) or by model class.
    """

    def __init__(self, messages: Mapping[str, MessageDescriptor]) -> None:
        self._messages: Mapping[str, MessageDescriptor] = MappingProxyType(dict(messages))
        self._by_model = {d.model: d for d in self._messages.values()}
        self._aliases, self._ambiguous = _build_aliases(self._messages)

    @classmethod
    def from_models(
        cls,
        models: Iterable[type[AdcomMessage]],
        enums: EnumRegistry,
    ) -> SchemaDescriptor:
        messages: dict[str, MessageDescriptor] = {}
        for model in models:
            descriptor = _describe_model(model, enums)
            if descriptor.name in messages:
                raise ConfigError(f"message '{descriptor.name}' declared twice")
            messages[descriptor.name] = descriptor
        for descriptor in messages.values():
            for field in descriptor.fields:
                if field.kind is FieldKind.MESSAGE and field.message_type not in messages:
                    raise ConfigError(
                        f"{descriptor.name}.{field.name} references unknown message '{field.message_type}'"
                    )
        return cls(messages)

    # --- lookups ---

    def message(self, message_type: str | type[AdcomMessage]) -> MessageDescriptor:
        if isinstance(message_type, type):
            descriptor = self._by_model.get(message_type)
            if descriptor is None:
                raise ConfigError(f"model {message_type.__name__} is not a registered message type")
            return descriptor
        if message_type in self._ambiguous:
            raise ConfigError(
                f"message name '{message_type}' is ambiguous: {', '.join(self._ambiguous[message_type])}"
            )
        full_name = self._aliases.get(message_type)
        if full_name is None:
            raise ConfigError(f"message type '{message_type}' is not registered")
        return self._messages[full_name]

    def fields_of(self, message_type: str | type[AdcomMessage]) -> tuple[FieldDescriptor, ...]:
        return self.message(message_type).fields

    def oneof_groups_of(self, message_type: str | type[AdcomMessage]) -> frozenset[frozenset[str]]:
        return frozenset(frozenset(members) for members in self.message(message_type).oneofs.values())

    def default_of(self, field: FieldDescriptor) -> Any | None:
        return field.default

    def message_types(self) -> tuple[str, ...]:
        return tuple(sorted(self._messages))

    def enum_usages(self) -> dict[str, list[str]]:
        """Map each referenced enum name to the ``Message.field`` paths using it."""
        usages: dict[str, list[str]] = {}
        for name in sorted(self._messages):
            for field in self._messages[name].fields:
                if field.enum_type is not None:
                    usages.setdefault(field.enum_type, []).append(f"{name}.{field.name}")
        return usages


def _build_aliases(
    messages: Mapping[str, MessageDescriptor],
) -> tuple[dict[str, str], dict[str, list[str]]]:
    candidates: dict[str, list[str]] = {}
    for full_name in messages:
        parts = full_name.split(".")
        for start in range(len(parts)):
            candidates.setdefault(".".join(parts[start:]), []).append(full_name)
    aliases: dict[str, str] = {}
    ambiguous: dict[str, list[str]] = {}
    for alias, names in candidates.items():
        if alias in messages:
            aliases[alias] = alias
        elif len(names) == 1:
            aliases[alias] = names[0]
        else:
            ambiguous[alias] = sorted(names)
    return aliases, ambiguous


def _describe_model(model: type[AdcomMessage], enums: EnumRegistry) -> MessageDescriptor:
    name = getattr(model, "adcom_name", "")
    if not name:
        raise ConfigError(f"model {model.__name__} does not declare adcom_name")

    extension_range = model.extension_range
    if extension_range is not None:
        low, high = extension_range
        if low < 1 or low > high:
            raise ConfigError(f"message '{name}' declares invalid extension range {extension_range}")

    fields: list[FieldDescriptor] = []
    for field_name, info in model.model_fields.items():
        if field_name == EXTENSION_FIELD:
            continue
        extra = info.json_schema_extra
        meta = extra.get(ADCOM_KEY) if isinstance(extra, dict) else None
        if not isinstance(meta, dict):
            raise ConfigError(f"{name}.{field_name} has no field declaration")
        fields.append(_describe_field(name, field_name, meta, enums))

    numbers: set[int] = set()
    oneofs: dict[str, list[str]] = {}
    for field in fields:
        where = f"{name}.{field.name}"
        if field.number < 1:
            raise ConfigError(f"{where} has non-positive field number {field.number}")
        if field.number in numbers:
            raise ConfigError(f"{where} reuses field number {field.number}")
        numbers.add(field.number)
        if extension_range is not None and extension_range[0] <= field.number <= extension_range[1]:
            raise ConfigError(f"{where} field number {field.number} falls inside the extension range")
        if field.oneof is not None:
            oneofs.setdefault(field.oneof, []).append(field.name)

    fields.sort(key=lambda f: f.number)
    return MessageDescriptor(
        name=name,
        model=model,
        fields=tuple(fields),
        oneofs=MappingProxyType({group: tuple(members) for group, members in oneofs.items()}),
        extension_range=extension_range,
    )


def _describe_field(
    message_name: str,
    field_name: str,
    meta: dict[str, Any],
    enums: EnumRegistry,
) -> FieldDescriptor:
    where = f"{message_name}.{field_name}"
    try:
        kind = FieldKind(meta.get("kind"))
    except ValueError:
        raise ConfigError(f"{where} declares unknown kind {meta.get('kind')!r}") from None

    number = meta.get("number")
    if not isinstance(number, int) or isinstance(number, bool):
        raise ConfigError(f"{where} declares no integer field number")

    repeated = bool(meta.get("repeated", False))
    enum_type = meta.get("enum")
    message_type = meta.get("message")
    oneof = meta.get("oneof")
    default = meta.get("default")
    allowed = meta.get("allowed")

    if kind is FieldKind.ENUM:
        if not enum_type:
            raise ConfigError(f"{where} is an enum field without an enum name")
        if not enums.has_enum(enum_type):
            raise ConfigError(f"{where} references unknown enum '{enum_type}'")
    elif enum_type is not None:
        raise ConfigError(f"{where} names an enum but is declared {kind.value}")

    if kind is FieldKind.MESSAGE and not message_type:
        raise ConfigError(f"{where} is a message field without a message name")
    if kind is not FieldKind.MESSAGE and message_type is not None:
        raise ConfigError(f"{where} names a message but is declared {kind.value}")

    if oneof is not None and repeated:
        raise ConfigError(f"{where} is repeated and cannot belong to oneof '{oneof}'")

    if default is not None:
        if repeated or kind is FieldKind.MESSAGE:
            raise ConfigError(f"{where} cannot declare a default")
        default = _coerce_default(where, kind, default)
        if kind is FieldKind.ENUM and enums.is_unknown(enum_type, default):
            raise ConfigError(f"{where} default {default} is not a registered {enum_type} code")

    if allowed is not None:
        if kind is not FieldKind.INT32:
            raise ConfigError(f"{where} declares a value set but is {kind.value}")
        allowed = frozenset(int(v) for v in allowed)

    return FieldDescriptor(
        name=field_name,
        number=number,
        kind=kind,
        repeated=repeated,
        enum_type=enum_type,
        message_type=message_type,
        oneof=oneof,
        default=default,
        required=bool(meta.get("required", False)),
        allowed=allowed,
    )


def _coerce_default(where: str, kind: FieldKind, default: Any) -> Any:
    if kind is FieldKind.BOOL:
        if not isinstance(default, bool):
            raise ConfigError(f"{where} default {default!r} is not a bool")
        return default
    if kind in (FieldKind.INT32, FieldKind.ENUM):
        if isinstance(default, bool) or not isinstance(default, int):
            raise ConfigError(f"{where} default {default!r} is not an integer")
        if not INT32_MIN <= default <= INT32_MAX:
            raise ConfigError(f"{where} default {default} is outside the int32 range")
        return int(default)
    if kind is FieldKind.FLOAT:
        if isinstance(default, bool) or not isinstance(default, (int, float)):
            raise ConfigError(f"{where} default {default!r} is not a number")
        return float(default)
    if not isinstance(default, str):
        raise ConfigError(f"{where} default {default!r} is not a string")
    return default
