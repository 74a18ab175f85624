"""
Shape Model Objects

Plain value objects used by the object-construction and JSON exercises:
    - Rectangle (width x height)
    - Circle (radius)

ARCHITECTURAL RULE:
    Shapes hold data only. Area is computed on demand from the fields,
    never stored, so serialization sees exactly the constructor arguments.
"""

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass
class Rectangle:
    """
    Axis-aligned rectangle.

    Example:
        r = Rectangle(10, 20)
        r.width       # => 10
        r.height      # => 20
        r.get_area()  # => 200

    Properties:
        width: Horizontal size
        height: Vertical size
    """

    width: Number
    height: Number

    def get_area(self) -> Number:
        return self.width * self.height


@dataclass
class Circle:
    """
    Circle given by its radius.

    Properties:
        radius: Distance from centre to edge
    """

    radius: Number

    def get_area(self) -> float:
        return math.pi * self.radius ** 2
