"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Rectangle:
    """A width/height pair with an area accessor.

    Values are not validated; ``area`` returns whatever ``width * height``
    evaluates to.

    Example::

        r = Rectangle(10, 20)
        r.width    # => 10
        r.height   # => 20
        r.area()   # => 200
    """

    width: Any
    height: Any

    def area(self) -> Any:
        return self.width * self.height
