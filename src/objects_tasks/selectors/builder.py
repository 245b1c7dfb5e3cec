"""CSS selector builder.

A selector is assembled from parts that must follow the order CSS mandates::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              can occur several times

Element, id and pseudo-element may occur at most once. Two selectors can be
joined with one of the combinators ``' '``, ``'+'``, ``'~'`` or ``'>'``.

Every operation returns a new :class:`Selector`; instances are never mutated,
so a partially built selector can be reused as the base of several chains.
"""

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional, Tuple

from ..config import SelectorConfig
from ..utils.errors import DuplicatePartError, InvalidCombinatorError, OrderError
from ..utils.logging_config import log_combined, log_rejected_part

COMBINATORS: Tuple[str, ...] = (" ", "+", "~", ">")

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
REPEAT_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time inside the selector"
)


class SelectorPart(IntEnum):
    """Selector part categories, valued by their rank in a simple selector."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


# (id, class, type) specificity added by one part of each category
_SPECIFICITY = {
    SelectorPart.ELEMENT: (0, 0, 1),
    SelectorPart.ID: (1, 0, 0),
    SelectorPart.CLASS: (0, 1, 0),
    SelectorPart.ATTRIBUTE: (0, 1, 0),
    SelectorPart.PSEUDO_CLASS: (0, 1, 0),
    SelectorPart.PSEUDO_ELEMENT: (0, 0, 1),
}


def _add_specificity(a: Tuple[int, int, int], b: Tuple[int, int, int]) -> Tuple[int, int, int]:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


@dataclass(frozen=True)
class Selector:
    """An immutable, validated CSS selector under construction."""

    text: str = ""
    has_element: bool = False
    has_id: bool = False
    has_pseudo_element: bool = False
    last_rank: Optional[SelectorPart] = None
    combined: bool = False
    specificity: Tuple[int, int, int] = (0, 0, 0)

    @classmethod
    def empty(cls) -> "Selector":
        """Return a selector with no parts."""
        return cls()

    def element(self, tag: str) -> "Selector":
        """Append a type selector, e.g. ``div``."""
        self._check_terminal(SelectorPart.ELEMENT)
        self._check_unique(SelectorPart.ELEMENT, self.has_element)
        self._check_order(SelectorPart.ELEMENT)
        return self._append(SelectorPart.ELEMENT, tag, has_element=True)

    def id(self, name: str) -> "Selector":
        """Append an id selector, e.g. ``#main``."""
        self._check_terminal(SelectorPart.ID)
        self._check_order(SelectorPart.ID)
        self._check_unique(SelectorPart.ID, self.has_id)
        return self._append(SelectorPart.ID, f"#{name}", has_id=True)

    def class_(self, name: str) -> "Selector":
        """Append a class selector, e.g. ``.container``."""
        self._check_terminal(SelectorPart.CLASS)
        self._check_order(SelectorPart.CLASS)
        return self._append(SelectorPart.CLASS, f".{name}")

    def attr(self, spec: str) -> "Selector":
        """Append an attribute selector; ``spec`` is inserted verbatim between brackets."""
        self._check_terminal(SelectorPart.ATTRIBUTE)
        self._check_order(SelectorPart.ATTRIBUTE)
        return self._append(SelectorPart.ATTRIBUTE, f"[{spec}]")

    def pseudo_class(self, name: str) -> "Selector":
        """Append a pseudo-class, e.g. ``:focus``."""
        self._check_terminal(SelectorPart.PSEUDO_CLASS)
        self._check_order(SelectorPart.PSEUDO_CLASS)
        return self._append(SelectorPart.PSEUDO_CLASS, f":{name}")

    def pseudo_element(self, name: str) -> "Selector":
        """Append a pseudo-element, e.g. ``::before``."""
        self._check_terminal(SelectorPart.PSEUDO_ELEMENT)
        self._check_unique(SelectorPart.PSEUDO_ELEMENT, self.has_pseudo_element)
        return self._append(SelectorPart.PSEUDO_ELEMENT, f"::{name}", has_pseudo_element=True)

    @classmethod
    def combine(
        cls, left: "Selector", combinator: str, right: "Selector", strict: bool = True
    ) -> "Selector":
        """
        Join two selectors with a combinator.

        Args:
            left: Selector on the left-hand side
            combinator: One of ``' '``, ``'+'``, ``'~'``, ``'>'``
            right: Selector on the right-hand side
            strict: Reject combinators outside the four above

        Returns:
            A new, terminal Selector
        """
        if strict and combinator not in COMBINATORS:
            log_rejected_part(left.text, "combinator", f"unknown combinator {combinator!r}")
            raise InvalidCombinatorError(combinator)

        return cls(
            text=f"{left.stringify()} {combinator} {right.stringify()}",
            combined=True,
            specificity=_add_specificity(left.specificity, right.specificity),
        )

    def stringify(self) -> str:
        """Return the selector text."""
        return self.text

    def __str__(self) -> str:
        return self.text

    def _check_terminal(self, part: SelectorPart) -> None:
        if self.combined:
            self._reject(OrderError, "Combined selectors cannot be extended", part)

    def _check_order(self, part: SelectorPart) -> None:
        if self.last_rank is not None and part < self.last_rank:
            self._reject(OrderError, ORDER_MESSAGE, part)

    def _check_unique(self, part: SelectorPart, present: bool) -> None:
        if present:
            self._reject(DuplicatePartError, REPEAT_MESSAGE, part)

    def _reject(self, error_cls: type, message: str, part: SelectorPart) -> None:
        log_rejected_part(self.text, part.label, message)
        raise error_cls(message, selector=self.text, part=part.label)

    def _append(self, part: SelectorPart, fragment: str, **flags: bool) -> "Selector":
        return replace(
            self,
            text=self.text + fragment,
            last_rank=part,
            specificity=_add_specificity(self.specificity, _SPECIFICITY[part]),
            **flags,
        )


class SelectorBuilder:
    """Entry point for building selectors: each call starts a fresh selector."""

    def __init__(self, config: Optional[SelectorConfig] = None):
        self.config = config or SelectorConfig()

    def element(self, tag: str) -> Selector:
        return Selector.empty().element(tag)

    def id(self, name: str) -> Selector:
        return Selector.empty().id(name)

    def class_(self, name: str) -> Selector:
        return Selector.empty().class_(name)

    def attr(self, spec: str) -> Selector:
        return Selector.empty().attr(spec)

    def pseudo_class(self, name: str) -> Selector:
        return Selector.empty().pseudo_class(name)

    def pseudo_element(self, name: str) -> Selector:
        return Selector.empty().pseudo_element(name)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Join two selectors, honouring ``strict_combinators`` from the config."""
        result = Selector.combine(
            left, combinator, right, strict=self.config.strict_combinators
        )
        log_combined(result.text, combinator)
        return result


css_selector_builder = SelectorBuilder()
