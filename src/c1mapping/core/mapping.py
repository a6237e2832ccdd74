"""C1 cubic mapping support points for whole cells.

``MappingC1`` walks the edges of a cell in their fixed order and appends two
support points per edge to the caller's list. Edges on a curved boundary get
points on the cubic fitted to the boundary normals; all other edges get
points on the straight chord.

Only two-dimensional cells are supported. One-dimensional edge generation and
any face-interior point generation always raise
``UnsupportedConfigurationError``.
"""

import logging
from collections.abc import Callable
from typing import ClassVar

from c1mapping.config import C1MappingSettings
from c1mapping.core.support_points import edge_support_points
from c1mapping.domain import Cell, Point
from c1mapping.exceptions import UnsupportedConfigurationError

logger = logging.getLogger(__name__)


class MappingC1:
    """Support point generator for a degree-3, tangent-continuous mapping.

    Example:
        mapping = MappingC1()
        cell = Cell.quadrilateral(vertices, boundaries={1: CircularBoundary()})
        points = mapping.compute_support_points(cell)
    """

    degree: ClassVar[int] = 3

    def __init__(
        self,
        dim: int = 2,
        spacedim: int | None = None,
        min_edge_length: float = 0.0,
    ) -> None:
        """Initialize the mapping.

        Args:
            dim: Dimension of the cells to map
            spacedim: Dimension of the embedding space (defaults to ``dim``)
            min_edge_length: Edges not longer than this are rejected

        Raises:
            UnsupportedConfigurationError: If ``dim < 2`` or ``spacedim != dim``
        """
        if spacedim is None:
            spacedim = dim
        if dim < 2:
            raise UnsupportedConfigurationError(dim, "C1 mapping")
        if spacedim != dim:
            raise UnsupportedConfigurationError(dim, "C1 mapping", spacedim=spacedim)

        self.dim = dim
        self.spacedim = spacedim
        self.min_edge_length = min_edge_length
        self._line_handlers: dict[int, Callable[[Cell, list[Point]], None]] = {
            1: self._add_line_support_points_1d,
            2: self._add_line_support_points_2d,
        }

    @classmethod
    def from_settings(cls, settings: C1MappingSettings) -> "MappingC1":
        """Create a mapping from application settings."""
        return cls(
            dim=settings.mapping.dimension,
            spacedim=settings.mapping.get_space_dimension(),
            min_edge_length=settings.geometry.min_edge_length,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dim={self.dim}, spacedim={self.spacedim})"

    def add_line_support_points(self, cell: Cell, support_points: list[Point]) -> None:
        """Append two support points per edge of ``cell`` to ``support_points``.

        Dispatches on the cell's dimension tag. Two-dimensional cells need a
        two-dimensional mapping. ``support_points`` is left unchanged when
        any edge fails.

        Args:
            cell: Cell whose edges are processed in order
            support_points: Output list, appended to in edge order

        Raises:
            UnsupportedConfigurationError: For anything but two-dimensional
                cells on a two-dimensional mapping
            DegenerateEdgeError: If an edge has (near) zero length
        """
        handler = self._line_handlers.get(cell.dim)
        if handler is None:
            raise UnsupportedConfigurationError(cell.dim, "line support points")
        handler(cell, support_points)

    def add_quad_support_points(self, cell: Cell, support_points: list[Point]) -> None:  # noqa: ARG002
        """Face-interior support points are not available for C1 mappings.

        Raises:
            UnsupportedConfigurationError: Always
        """
        raise UnsupportedConfigurationError(cell.dim, "quad support points")

    def compute_support_points(self, cell: Cell) -> list[Point]:
        """Cell vertices followed by the edge support points.

        This is the sequence handed to the polynomial mapping.
        """
        support_points = list(cell.vertices)
        self.add_line_support_points(cell, support_points)
        return support_points

    def _add_line_support_points_1d(self, cell: Cell, support_points: list[Point]) -> None:  # noqa: ARG002
        raise UnsupportedConfigurationError(1, "line support points")

    def _add_line_support_points_2d(self, cell: Cell, support_points: list[Point]) -> None:
        # Planar edge curves only exist on a two-dimensional mapping
        if self.dim != 2:
            raise UnsupportedConfigurationError(self.dim, "line support points")

        line_points: list[Point] = []
        for line_no, edge in enumerate(cell.edges):
            points = edge_support_points(edge, self.min_edge_length)
            logger.debug(
                "Edge %d (%s): %s",
                line_no,
                "curved" if edge.at_boundary else "straight",
                [p.to_tuple() for p in points],
            )
            line_points.extend(points)
        support_points.extend(line_points)
