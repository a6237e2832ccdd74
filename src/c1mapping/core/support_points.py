"""Support point placement along cell edges.

Each edge contributes two points, placed at the interior abscissae of the
four-point Gauss-Lobatto rule on [0, 1]. Curved boundary edges evaluate the
fitted cubic there; all other edges use the straight chord. Both paths use
the same parameter values so the mapping degree is uniform across a cell.
"""

import math

from c1mapping.core.curve_fit import fit_cubic
from c1mapping.domain import CubicCurve, Edge, Point
from c1mapping.exceptions import DegenerateEdgeError

GAUSS_LOBATTO_INTERIOR: tuple[float, float] = (
    0.5 - 0.5 * math.sqrt(1.0 / 5.0),
    0.5 + 0.5 * math.sqrt(1.0 / 5.0),
)

POINTS_PER_EDGE = len(GAUSS_LOBATTO_INTERIOR)


def curved_edge_points(curve: CubicCurve) -> list[Point]:
    """Evaluate a fitted cubic at the interior Gauss-Lobatto points.

    Args:
        curve: Cubic fitted over the edge

    Returns:
        Points for t1 then t2 in physical coordinates
    """
    return [curve.point(t) for t in GAUSS_LOBATTO_INTERIOR]


def straight_edge_points(v0: Point, v1: Point) -> list[Point]:
    """Interpolate the chord v0 -> v1 at the interior Gauss-Lobatto points.

    Examples:
        >>> p1, p2 = straight_edge_points(Point(0.0, 0.0), Point(1.0, 0.0))
        >>> round(p1.x, 5), round(p2.x, 5)
        (0.27639, 0.72361)
    """
    return [v0 * (1.0 - t) + v1 * t for t in GAUSS_LOBATTO_INTERIOR]


def edge_support_points(edge: Edge, min_edge_length: float = 0.0) -> list[Point]:
    """Support points for one edge.

    Boundary edges ask their descriptor for vertex normals and fit a cubic;
    interior edges are subdivided along the chord.

    Args:
        edge: Edge to process
        min_edge_length: Edges not longer than this are rejected

    Returns:
        Two points ordered from v0 towards v1

    Raises:
        DegenerateEdgeError: If the edge is not longer than ``min_edge_length``
    """
    if edge.boundary is None:
        length = edge.length()
        if length <= min_edge_length:
            raise DegenerateEdgeError(edge.v0, edge.v1, length)
        return straight_edge_points(edge.v0, edge.v1)

    normals = edge.boundary.get_normals_at_vertices(edge)
    curve = fit_cubic(edge.v0, edge.v1, normals.n0, normals.n1, min_length=min_edge_length)
    return curved_edge_points(curve)
