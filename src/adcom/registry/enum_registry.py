"""Enum registry: valid integer codes per AdCOM enumerated list."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Iterable, Mapping

from ..errors import ConfigError

UNKNOWN_CODE = 0


@dataclass(frozen=True)
class EnumType:
    """A named set of (symbol, code) pairs."""

    name: str
    codes: Mapping[int, str]
    vendor_from: int | None = None

    def is_registered(self, code: int) -> bool:
        if code in self.codes:
            return True
        return self.vendor_from is not None and code >= self.vendor_from


class EnumRegistry:
    """Read-only lookup of enum codes, shared across validation calls.

    Code 0 is reserved for unknown/unset in every list: it is always accepted
    by ``is_valid_code`` and always reported by ``is_unknown``.
    """

    def __init__(self, enums: Mapping[str, EnumType]) -> None:
        self._enums: Mapping[str, EnumType] = MappingProxyType(dict(enums))

    @classmethod
    def from_enum_types(
        cls,
        enum_types: Iterable[type[IntEnum]],
        vendor_ranges: Mapping[str, int] | None = None,
    ) -> EnumRegistry:
        """Build a registry from IntEnum classes; fails fast on malformed lists."""
        vendor_ranges = dict(vendor_ranges or {})
        enums: dict[str, EnumType] = {}
        for enum_type in enum_types:
            name = enum_type.__name__
            if name in enums:
                raise ConfigError(f"enum '{name}' registered twice")
            codes: dict[int, str] = {}
            for member in enum_type:
                if member.value < 0:
                    raise ConfigError(f"enum '{name}' declares negative code {member.value}")
                codes[int(member.value)] = member.name
            vendor_from = vendor_ranges.pop(name, None)
            if vendor_from is not None and vendor_from <= max(codes, default=0):
                raise ConfigError(
                    f"enum '{name}' vendor range starts at {vendor_from}, overlapping declared codes"
                )
            enums[name] = EnumType(name=name, codes=MappingProxyType(codes), vendor_from=vendor_from)
        if vendor_ranges:
            raise ConfigError(f"vendor ranges declared for unknown enums: {sorted(vendor_ranges)}")
        return cls(enums)

    def get(self, enum_name: str) -> EnumType:
        try:
            return self._enums[enum_name]
        except KeyError:
            raise ConfigError(f"enum '{enum_name}' is not registered") from None

    def has_enum(self, enum_name: str) -> bool:
        return enum_name in self._enums

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._enums))

    def is_valid_code(self, enum_name: str, code: int) -> bool:
        """True for code 0 and for every registered code of the list."""
        enum_type = self.get(enum_name)
        if not _is_code(code):
            return False
        return code == UNKNOWN_CODE or enum_type.is_registered(code)

    def is_unknown(self, enum_name: str, code: int) -> bool:
        """True iff code is 0 or not registered for the list."""
        enum_type = self.get(enum_name)
        if not _is_code(code):
            return True
        return code == UNKNOWN_CODE or not enum_type.is_registered(code)

    def symbol(self, enum_name: str, code: int) -> str | None:
        enum_type = self.get(enum_name)
        if not _is_code(code):
            return None
        return enum_type.codes.get(code)


def _is_code(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
