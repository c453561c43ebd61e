"""Application services."""

from .object_service import ObjectService

__all__ = ["ObjectService"]
