"""
Planar position value type and the small amount of vector math shared by
the orbit engine.
"""
import math
from dataclasses import dataclass

ONE_DEGREE = math.pi / 180.0


@dataclass(frozen=True)
class Position:
    """Immutable point in the 2D Cartesian plane."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Position") -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def rotate(self, radians: float) -> "Position":
        """Rotate the point about the origin."""
        cr, sr = math.cos(radians), math.sin(radians)
        return Position(self.x * cr - self.y * sr,
                        self.x * sr + self.y * cr)


ORIGIN = Position()


def degrees_to_radians(degrees: float) -> float:
    """Convert a value in degrees to radians."""
    return degrees * ONE_DEGREE
