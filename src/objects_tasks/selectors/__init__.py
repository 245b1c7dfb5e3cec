"""CSS selector building for objects-tasks."""

from .builder import (
    COMBINATORS,
    Selector,
    SelectorBuilder,
    SelectorPart,
    css_selector_builder,
)

__all__ = [
    "COMBINATORS",
    "Selector",
    "SelectorBuilder",
    "SelectorPart",
    "css_selector_builder",
]
