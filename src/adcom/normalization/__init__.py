"""Default filling for validated AdCOM objects."""

from .normalizer import Normalizer

__all__ = ["Normalizer"]
