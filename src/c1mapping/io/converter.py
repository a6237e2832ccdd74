"""Converters between JSON-style dictionaries and domain models.

Two shapes are handled:

- The mesh file format, where cells list their vertices and refer to named
  boundaries by edge index.
- The self-contained cell format used to ship cells to worker processes,
  where every edge carries its own serialized boundary descriptor.
"""

from typing import Any

from c1mapping.domain import (
    BoundaryDescriptor,
    Cell,
    Edge,
    Mesh,
    Point,
    boundary_from_dict,
    boundary_to_dict,
)
from c1mapping.exceptions import BoundaryLookupError


def cell_to_dict(cell: Cell) -> dict[str, Any]:
    """Serialize a cell, inlining each edge's boundary descriptor.

    Args:
        cell: Cell to serialize

    Returns:
        Dictionary representation of the cell
    """
    return {
        "dim": cell.dim,
        "vertices": [v.to_list() for v in cell.vertices],
        "edges": [
            {
                "v0": edge.v0.to_list(),
                "v1": edge.v1.to_list(),
                "boundary": boundary_to_dict(edge.boundary) if edge.boundary else None,
            }
            for edge in cell.edges
        ],
    }


def cell_from_dict(data: dict[str, Any]) -> Cell:
    """Deserialize a cell produced by ``cell_to_dict``.

    Args:
        data: Dictionary representation of a cell

    Returns:
        Cell instance
    """
    edges = [
        Edge(
            v0=Point.from_sequence(e["v0"]),
            v1=Point.from_sequence(e["v1"]),
            boundary=boundary_from_dict(e["boundary"]) if e.get("boundary") else None,
        )
        for e in data["edges"]
    ]
    return Cell(
        vertices=[Point.from_sequence(v) for v in data["vertices"]],
        edges=edges,
        dim=int(data["dim"]),
    )


def mesh_cell_from_dict(
    data: dict[str, Any],
    boundaries: dict[str, BoundaryDescriptor],
) -> Cell:
    """Build a cell from its mesh file entry.

    Four vertices make a quadrilateral, two vertices a one-dimensional
    segment. ``boundary_edges`` maps edge indices (as strings or ints) to
    boundary names.

    Args:
        data: Cell entry from the mesh file
        boundaries: Declared boundaries by name

    Returns:
        Cell instance

    Raises:
        BoundaryLookupError: If an edge refers to an undeclared boundary
        ValueError: If the entry is malformed
    """
    if not isinstance(data, dict):
        raise ValueError(f"Cell entries must be objects, got {type(data).__name__}")

    vertices = [Point.from_sequence(v) for v in data["vertices"]]

    boundary_edges = data.get("boundary_edges", {})
    if not isinstance(boundary_edges, dict):
        raise ValueError("'boundary_edges' must map edge indices to boundary names")

    edge_boundaries: dict[int, BoundaryDescriptor] = {}
    for index, name in boundary_edges.items():
        if name not in boundaries:
            raise BoundaryLookupError(name)
        edge_boundaries[int(index)] = boundaries[name]

    if len(vertices) == 4:
        return Cell.quadrilateral(vertices, edge_boundaries)

    if len(vertices) == 2:
        unknown = [i for i in edge_boundaries if i != 0]
        if unknown:
            raise ValueError(f"Invalid edge indices for a segment: {unknown}")
        return Cell.segment(vertices[0], vertices[1], edge_boundaries.get(0))

    raise ValueError(f"Cells need 2 or 4 vertices, got {len(vertices)}")


def mesh_from_dict(data: dict[str, Any]) -> Mesh:
    """Deserialize a whole mesh file.

    Args:
        data: Parsed mesh file with ``boundaries`` and ``cells``

    Returns:
        Mesh instance

    Raises:
        BoundaryLookupError: If a cell refers to an undeclared boundary
        ValueError: If the structure is malformed
    """
    if not isinstance(data, dict):
        raise ValueError("Top level must be an object")
    if "cells" not in data:
        raise ValueError("Missing 'cells'")

    declared = data.get("boundaries", {})
    if not isinstance(declared, dict):
        raise ValueError("'boundaries' must map names to boundary descriptions")

    boundaries = {
        str(name): boundary_from_dict(entry)
        for name, entry in declared.items()
    }
    cells = [mesh_cell_from_dict(entry, boundaries) for entry in data["cells"]]
    return Mesh(cells=cells, boundaries=boundaries)


def support_points_to_dict(index: int, support_points: list[Point]) -> dict[str, Any]:
    """Serialize the support points of one cell."""
    return {
        "index": index,
        "support_points": [p.to_list() for p in support_points],
    }
