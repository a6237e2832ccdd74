"""Planar point type used for vertices, normals and support points.

A single immutable type serves as both a position and a direction vector,
the same way the mapping code treats coordinates and normals alike.
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in 2D space.

    Immutable and hashable so cells can be shared read-only between callers.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Point":
        return Point(self.x / divisor, self.y / divisor)

    def dot(self, other: "Point") -> float:
        """Scalar product with another vector."""
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def normalized(self) -> "Point":
        """Return the unit vector pointing the same way.

        Raises:
            ValueError: If the vector has zero length
        """
        length = self.norm()
        if length == 0.0:
            raise ValueError("Cannot normalize a zero-length vector")
        return Point(self.x / length, self.y / length)

    def rotated(self, angle: float) -> "Point":
        """Rotate counter-clockwise about the origin by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Point(cos_a * self.x - sin_a * self.y, sin_a * self.x + cos_a * self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_list(self) -> list[float]:
        """Convert to a JSON-friendly [x, y] list."""
        return [self.x, self.y]

    @classmethod
    def from_sequence(cls, data: Any) -> "Point":
        """Build a point from an ``[x, y]`` pair.

        Args:
            data: Sequence with exactly two numeric entries

        Returns:
            Point instance

        Raises:
            ValueError: If ``data`` does not hold two numbers
        """
        if len(data) != 2:
            raise ValueError(f"Expected [x, y], got {data!r}")
        return cls(float(data[0]), float(data[1]))
