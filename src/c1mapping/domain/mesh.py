"""Mesh container: cells plus the named boundaries they refer to."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from c1mapping.domain.cell import Cell

if TYPE_CHECKING:
    from c1mapping.domain.boundary import BoundaryDescriptor


@dataclass
class Mesh:
    """A collection of cells sharing a set of named boundaries.

    Attributes:
        cells: Cells in file order
        boundaries: Boundary descriptors by name
    """

    cells: list[Cell]
    boundaries: "dict[str, BoundaryDescriptor]" = field(default_factory=dict)

    @property
    def cell_count(self) -> int:
        """Number of cells."""
        return len(self.cells)

    @property
    def boundary_edge_count(self) -> int:
        """Number of edges (over all cells) that lie on a boundary."""
        return sum(len(cell.boundary_edge_indices()) for cell in self.cells)

    def is_empty(self) -> bool:
        """Check if the mesh has no cells."""
        return not self.cells
