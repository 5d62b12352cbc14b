"""Transform data structures for coordinate and size representation."""
import math
from dataclasses import dataclass
from typing import Optional


@dataclass
class Vec2:
    """2D vector for coordinate pairs.

    Used for node centers, rotation pivots and translation deltas,
    all in canvas coordinates.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))


@dataclass(frozen=True)
class Dimensions:
    """Width/height pair of a node.

    Resize events carry the dimensions a node had before the resize was
    applied. Either value may be missing when the event source could not
    provide it.
    """
    width: Optional[float]
    height: Optional[float]

    def is_usable(self) -> bool:
        """True when both values can serve as a scale divisor"""
        for value in (self.width, self.height):
            if value is None or not math.isfinite(value) or value == 0:
                return False
        return True

    def __iter__(self):
        return iter((self.width, self.height))
