"""JSON helpers: encode objects to compact JSON and rebuild typed objects from it."""

import json
from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..utils.errors import SerializationError
from ..utils.logging_config import get_logger

T = TypeVar("T")

logger = get_logger("serialization")


def _default(value: Any) -> Any:
    """Encode values the json module does not know about."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, (set, frozenset)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def get_json(obj: Any, *, indent: Optional[int] = None, sort_keys: bool = False) -> str:
    """
    Return the JSON representation of an object.

    Output is compact unless ``indent`` is given, so ``[1, 2, 3]`` becomes
    ``'[1,2,3]'`` and ``{"width": 10, "height": 20}`` becomes
    ``'{"width":10,"height":20}'``. Pydantic models and dataclasses are encoded
    as objects. NaN and infinities have no JSON form and are rejected.

    Raises:
        SerializationError: If the object cannot be encoded
    """
    separators = (",", ": ") if indent is not None else (",", ":")
    try:
        return json.dumps(
            obj,
            default=_default,
            indent=indent,
            sort_keys=sort_keys,
            separators=separators,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        logger.debug("JSON encoding failed", extra={"type": type(obj).__name__})
        raise SerializationError("encode", f"Failed to encode {type(obj).__name__}: {e}") from e


def from_json(cls: Type[T], text: str) -> T:
    """
    Build an object of type ``cls`` from its JSON representation.

    Pydantic models are validated and mapping types such as ``dict`` are built
    from the decoded object. Any other class gets an instance created without
    calling ``__init__``, with every key of the JSON object set as an attribute.

    Example:
        >>> r = from_json(Rectangle, '{"width":10,"height":20}')
        >>> r.get_area()
        200

    Raises:
        SerializationError: If the text is not valid JSON, is not a JSON object,
            or does not fit ``cls``
    """
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        try:
            return cls.model_validate_json(text)  # type: ignore[return-value]
        except ValidationError as e:
            raise SerializationError(
                "decode", f"Invalid {cls.__name__} JSON: {e}", details={"errors": e.errors()}
            ) from e

    try:
        properties = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError("decode", f"Invalid JSON: {e}") from e

    if not isinstance(properties, dict):
        raise SerializationError(
            "decode", f"Expected a JSON object, got {type(properties).__name__}"
        )

    if isinstance(cls, type) and issubclass(cls, Mapping):
        return cls(properties)  # type: ignore[call-arg]

    obj = cls.__new__(cls)  # type: ignore[call-overload]
    for key, value in properties.items():
        try:
            # bypasses frozen dataclasses and custom __setattr__
            object.__setattr__(obj, key, value)
        except (AttributeError, TypeError) as e:
            raise SerializationError(
                "decode", f"Cannot set {key!r} on {cls.__name__}: {e}"
            ) from e

    return obj
