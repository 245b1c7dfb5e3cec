"""Rectangle value type."""

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with a width and a height."""

    width: Number
    height: Number

    def get_area(self) -> Number:
        return self.width * self.height


def rectangle(width: Number, height: Number) -> Rectangle:
    """
    Create a rectangle.

    Example:
        >>> r = rectangle(10, 20)
        >>> r.width, r.height, r.get_area()
        (10, 20, 200)
    """
    return Rectangle(width, height)
