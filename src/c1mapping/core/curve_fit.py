"""Cubic curve fit from vertex positions and boundary normals.

The boundary over an edge is modelled as a cubic deviation from the chord,
``s(t) = a*t**3 + b*t**2 + c*t`` with ``a = -b - c`` so both vertices lie on
the chord. In the rotated frame the curve tangents at the vertices are
``(1, c)`` and ``(1, -b - 2c)``. Requiring each to be orthogonal to the
boundary normal at that vertex (expressed in the same frame) fixes ``c`` and
then ``b``.

Normals parallel to the chord make the denominators vanish. This is a
precondition on the boundary descriptor and is not checked here.

All functions are pure and stateless.
"""

import logging
import math

from c1mapping.domain import CubicCurve, LocalFrame, Point
from c1mapping.exceptions import DegenerateEdgeError

logger = logging.getLogger(__name__)


def local_frame(v0: Point, v1: Point, min_length: float = 0.0) -> LocalFrame:
    """Build the edge-aligned frame for the chord v0 -> v1.

    Args:
        v0: First vertex
        v1: Second vertex
        min_length: Chords not longer than this are rejected

    Returns:
        LocalFrame with unit axis, chord angle and chord length

    Raises:
        DegenerateEdgeError: If the chord length is not above ``min_length``

    Examples:
        >>> frame = local_frame(Point(0.0, 0.0), Point(0.0, 2.0))
        >>> frame.length
        2.0
        >>> round(frame.alpha, 6)
        1.570796
    """
    coordinate_vector = v1 - v0
    h = math.sqrt(coordinate_vector.dot(coordinate_vector))
    if h <= min_length:
        raise DegenerateEdgeError(v0, v1, h)

    axis = coordinate_vector / h
    alpha = math.atan2(axis.y, axis.x)
    return LocalFrame(origin=v0, axis=axis, alpha=alpha, length=h)


def normal_slope(normal: Point, alpha: float) -> float:
    """Slope of the tangent line orthogonal to ``normal`` in the rotated frame.

    The normal is rotated by ``-alpha`` into the edge frame, giving components
    ``(n_t, n_s)``; the orthogonal direction ``(1, m)`` has ``m = -n_t / n_s``.
    """
    cos_a = math.cos(alpha)
    sin_a = math.sin(alpha)
    tangential = normal.y * sin_a + normal.x * cos_a
    perpendicular = normal.y * cos_a - normal.x * sin_a
    return -tangential / perpendicular


def fit_cubic(
    v0: Point,
    v1: Point,
    n0: Point,
    n1: Point,
    min_length: float = 0.0,
) -> CubicCurve:
    """Fit the chord-anchored cubic whose end tangents are normal to n0, n1.

    Args:
        v0: First vertex
        v1: Second vertex
        n0: Unit normal at v0
        n1: Unit normal at v1
        min_length: Chords not longer than this are rejected

    Returns:
        CubicCurve with ``d = 0`` and ``a = -b - c``

    Raises:
        DegenerateEdgeError: If v0 and v1 (nearly) coincide
        ZeroDivisionError: If a normal is exactly parallel to the chord

    Examples:
        >>> curve = fit_cubic(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0), Point(0.0, 1.0))
        >>> curve.b == 0.0 and curve.c == 0.0
        True
    """
    frame = local_frame(v0, v1, min_length)

    # slope at t=0 is c, slope at t=1 is -b - 2c
    c = normal_slope(n0, frame.alpha)
    b = -normal_slope(n1, frame.alpha) - 2 * c

    curve = CubicCurve.through_chord_ends(b=b, c=c, frame=frame)
    logger.debug(
        "Fitted cubic a=%g b=%g c=%g on chord length %g at angle %g",
        curve.a,
        curve.b,
        curve.c,
        frame.length,
        frame.alpha,
    )
    return curve
