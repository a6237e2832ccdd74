"""Cell and edge representation.

This module defines the minimal mesh view the support point computation
needs: a cell with its vertices, its edges in a fixed order and a dimension
tag. Edges on a curved boundary carry the boundary descriptor that supplies
their vertex normals.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from c1mapping.domain.geometry import Point

if TYPE_CHECKING:
    from c1mapping.domain.boundary import BoundaryDescriptor


@dataclass(frozen=True)
class Edge:
    """A straight-chord edge between two vertices.

    Attributes:
        v0: First vertex
        v1: Second vertex
        boundary: Boundary descriptor if the edge lies on the boundary
    """

    v0: Point
    v1: Point
    boundary: "BoundaryDescriptor | None" = field(default=None, compare=False)

    @property
    def at_boundary(self) -> bool:
        """Whether the edge lies on a described boundary."""
        return self.boundary is not None

    @property
    def vertices(self) -> tuple[Point, Point]:
        """Both vertices as a tuple."""
        return (self.v0, self.v1)

    def length(self) -> float:
        """Chord length."""
        return self.v0.distance_to(self.v1)

    def reversed(self) -> "Edge":
        """The same edge traversed from v1 to v0."""
        return Edge(v0=self.v1, v1=self.v0, boundary=self.boundary)


@dataclass
class Cell:
    """A mesh cell with its edges in a fixed enumeration order.

    Attributes:
        vertices: Cell vertices in lexicographic order
        edges: Cell edges in the order support points are generated
        dim: Topological dimension of the cell
    """

    # Quadrilateral lines as (vertex, vertex) pairs; vertices are ordered
    # lexicographically: 0=(0,0), 1=(1,0), 2=(0,1), 3=(1,1) on the unit square.
    QUAD_LINES: ClassVar[tuple[tuple[int, int], ...]] = ((0, 2), (1, 3), (0, 1), (2, 3))

    vertices: list[Point]
    edges: list[Edge]
    dim: int = 2

    @property
    def n_edges(self) -> int:
        """Number of edges in the cell."""
        return len(self.edges)

    def boundary_edge_indices(self) -> list[int]:
        """Indices of edges that lie on a boundary."""
        return [i for i, edge in enumerate(self.edges) if edge.at_boundary]

    @classmethod
    def quadrilateral(
        cls,
        vertices: list[Point],
        boundaries: "Mapping[int, BoundaryDescriptor] | None" = None,
    ) -> "Cell":
        """Build a quadrilateral from four lexicographically ordered vertices.

        Args:
            vertices: The four cell vertices
            boundaries: Boundary descriptor per edge index (0-3)

        Returns:
            Cell with four edges in standard line order

        Raises:
            ValueError: If the vertex count or an edge index is wrong
        """
        if len(vertices) != 4:
            raise ValueError(f"A quadrilateral needs 4 vertices, got {len(vertices)}")

        boundaries = dict(boundaries or {})
        unknown = [i for i in boundaries if not 0 <= i < len(cls.QUAD_LINES)]
        if unknown:
            raise ValueError(f"Invalid edge indices for a quadrilateral: {unknown}")

        edges = [
            Edge(v0=vertices[i], v1=vertices[j], boundary=boundaries.get(line_no))
            for line_no, (i, j) in enumerate(cls.QUAD_LINES)
        ]
        return cls(vertices=list(vertices), edges=edges, dim=2)

    @classmethod
    def segment(
        cls,
        v0: Point,
        v1: Point,
        boundary: "BoundaryDescriptor | None" = None,
    ) -> "Cell":
        """Build a one-dimensional cell consisting of a single edge."""
        return cls(vertices=[v0, v1], edges=[Edge(v0=v0, v1=v1, boundary=boundary)], dim=1)
