"""Domain models for c1mapping.

This module contains the geometric models the support point computation
works on. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of any particular mesh library

Key classes:
- Point: A 2D point or vector
- Edge: A chord between two vertices, optionally on a boundary
- Cell: Vertices and edges in a fixed order with a dimension tag
- Mesh: Cells together with their named boundaries
- LocalFrame: Edge-aligned coordinate frame
- CubicCurve: Cubic deviation curve fitted over an edge
- VertexNormals: Boundary normals at the two vertices of an edge
- BoundaryDescriptor: Protocol for anything that supplies vertex normals
- CircularBoundary, FlatBoundary, PrescribedNormals: Concrete boundaries
"""

from c1mapping.domain.boundary import (
    BoundaryDescriptor,
    CircularBoundary,
    FlatBoundary,
    PrescribedNormals,
    boundary_from_dict,
    boundary_to_dict,
)
from c1mapping.domain.cell import Cell, Edge
from c1mapping.domain.curve import CubicCurve, LocalFrame, VertexNormals
from c1mapping.domain.geometry import Point
from c1mapping.domain.mesh import Mesh

__all__: list[str] = [
    # Boundaries
    "BoundaryDescriptor",
    "CircularBoundary",
    "FlatBoundary",
    "PrescribedNormals",
    "boundary_from_dict",
    "boundary_to_dict",
    # Core types
    "Cell",
    "CubicCurve",
    "Edge",
    "LocalFrame",
    "Mesh",
    "Point",
    "VertexNormals",
]
