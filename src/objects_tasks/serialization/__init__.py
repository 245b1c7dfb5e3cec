"""JSON serialization helpers."""

from .json_codec import get_json, from_json

__all__ = ["get_json", "from_json"]
