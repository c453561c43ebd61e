"""Typed error taxonomy.

Data-shape problems in decoded objects are never raised; the validator returns
them as issues. Only wiring mistakes and codec failures are exceptions.
"""

from __future__ import annotations

__all__ = [
    "AdcomError",
    "ConfigError",
    "DecodeError",
]


class AdcomError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(AdcomError):
    """Schema or enum registry misuse: malformed declarations, unknown names."""


class DecodeError(AdcomError):
    """Payload could not be decoded into the requested message type."""
