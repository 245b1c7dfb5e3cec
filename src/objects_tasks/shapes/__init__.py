"""Geometric value types."""

from .rectangle import Rectangle, rectangle

__all__ = ["Rectangle", "rectangle"]
