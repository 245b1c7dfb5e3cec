"""objects-tasks - rectangle values, JSON helpers and a CSS selector builder."""

__version__ = "0.1.0"

from .selectors import Selector, SelectorBuilder, css_selector_builder
from .serialization import from_json, get_json
from .shapes import Rectangle, rectangle
from .toolkit import ObjectsToolkit, create_toolkit

__all__ = [
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    "get_json",
    "from_json",
    "Rectangle",
    "rectangle",
    "ObjectsToolkit",
    "create_toolkit",
    "__version__",
]
