"""Cubic boundary curve model in edge-local coordinates.

Along an edge the boundary is described by the deviation ``s(t)`` from the
chord, with ``t`` running from 0 at the first vertex to 1 at the second:

    s(t) = a*t**3 + b*t**2 + c*t + d

Both vertices lie on the chord, which forces ``d = 0`` and ``a = -b - c``.
A point ``(t, s)`` in local coordinates is mapped to physical space by
rotating it by the chord angle, scaling it by the chord length and shifting
it to the first vertex.
"""

import math
from dataclasses import dataclass
from typing import NamedTuple

from c1mapping.domain.geometry import Point


class VertexNormals(NamedTuple):
    """Unit outward normals at the two vertices of an edge."""

    n0: Point
    n1: Point


@dataclass(frozen=True, slots=True)
class LocalFrame:
    """Edge-aligned coordinate frame.

    Attributes:
        origin: First vertex of the edge
        axis: Unit vector along the chord
        alpha: Angle of the chord against the global x-axis
        length: Chord length h (always positive)
    """

    origin: Point
    axis: Point
    alpha: float
    length: float

    def to_global(self, local: Point) -> Point:
        """Rotate by alpha, scale by the chord length, translate to the origin."""
        cos_a = math.cos(self.alpha)
        sin_a = math.sin(self.alpha)
        real = Point(
            cos_a * local.x - sin_a * local.y,
            sin_a * local.x + cos_a * local.y,
        )
        return real * self.length + self.origin


@dataclass(frozen=True, slots=True)
class CubicCurve:
    """Cubic deviation curve over an edge.

    Attributes:
        a: Cubic coefficient (always ``-b - c``)
        b: Quadratic coefficient
        c: Linear coefficient, the local slope at the first vertex
        d: Constant coefficient (always 0)
        frame: Local frame of the edge the curve was fitted on
    """

    a: float
    b: float
    c: float
    d: float
    frame: LocalFrame

    @classmethod
    def through_chord_ends(cls, b: float, c: float, frame: LocalFrame) -> "CubicCurve":
        """Build the cubic that passes through both edge vertices."""
        return cls(a=-b - c, b=b, c=c, d=0.0, frame=frame)

    def deviation(self, t: float) -> float:
        """Evaluate s(t) in Horner form."""
        return ((self.a * t + self.b) * t + self.c) * t

    def slope(self, t: float) -> float:
        """Evaluate ds/dt."""
        return (3.0 * self.a * t + 2.0 * self.b) * t + self.c

    def local_point(self, t: float) -> Point:
        """Point (t, s(t)) in edge-local coordinates."""
        return Point(t, self.deviation(t))

    def point(self, t: float) -> Point:
        """Point on the curve in physical coordinates."""
        return self.frame.to_global(self.local_point(t))
