"""Toolkit bundling configuration, logging and the objects-tasks utilities."""

from typing import Any, Optional, Type, TypeVar

from .config import load_config, ObjectsTasksConfig
from .selectors.builder import SelectorBuilder
from .serialization.json_codec import from_json, get_json
from .shapes.rectangle import Rectangle, rectangle
from .utils.logging_config import LoggerMixin, setup_logging

T = TypeVar("T")


class ObjectsToolkit(LoggerMixin):
    """Configured access to the selector builder, rectangles and JSON helpers."""

    def __init__(self, config: Optional[ObjectsTasksConfig] = None):
        self.config = config or ObjectsTasksConfig()

        self.selectors = SelectorBuilder(self.config.selectors)

        self.logger.info(
            "Toolkit initialized",
            extra={"strict_combinators": self.config.selectors.strict_combinators},
        )

    def rectangle(self, width: float, height: float) -> Rectangle:
        return rectangle(width, height)

    def to_json(self, obj: Any) -> str:
        """Encode an object using the configured indent and key ordering."""
        return get_json(
            obj,
            indent=self.config.serialization.indent,
            sort_keys=self.config.serialization.sort_keys,
        )

    def from_json(self, cls: Type[T], text: str) -> T:
        return from_json(cls, text)


def create_toolkit(config_path: Optional[str] = None) -> ObjectsToolkit:
    """
    Create and configure a toolkit.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Configured ObjectsToolkit instance

    Raises:
        ConfigurationError: If the configuration cannot be loaded
    """
    config = load_config(config_path)

    setup_logging(config.logging)

    return ObjectsToolkit(config)
