"""Shape records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle with a derived area.

    >>> r = Rectangle(10, 20)
    >>> r.get_area()
    200
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height

    @property
    def area(self) -> float:
        return self.get_area()
