"""Core algorithms for c1mapping.

This module contains the core algorithms for:

- Curve fitting (cubic deviation from the chord matching vertex normals)
- Support point placement (curved and straight edges)
- Per-cell orchestration with dimension dispatch
- Mesh-wide processing in worker processes

All services are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects)

Key functions:
- local_frame: Edge-aligned frame of a chord
- fit_cubic: Fit the cubic to vertex positions and normals
- curved_edge_points: Evaluate a fitted cubic at the support abscissae
- straight_edge_points: Interpolate a chord at the support abscissae
- edge_support_points: Dispatch a single edge to either path
- process_cell: Picklable per-cell worker

Key classes:
- MappingC1: Per-cell support point generator
- MeshProcessor: Mesh-wide orchestration
"""

from c1mapping.core.curve_fit import fit_cubic, local_frame
from c1mapping.core.mapping import MappingC1
from c1mapping.core.processor import MeshProcessor, ProcessingResult, process_cell
from c1mapping.core.support_points import (
    GAUSS_LOBATTO_INTERIOR,
    POINTS_PER_EDGE,
    curved_edge_points,
    edge_support_points,
    straight_edge_points,
)

__all__ = [
    # Support point constants
    "GAUSS_LOBATTO_INTERIOR",
    "POINTS_PER_EDGE",
    # Orchestration classes
    "MappingC1",
    "MeshProcessor",
    "ProcessingResult",
    # Functions
    "curved_edge_points",
    "edge_support_points",
    "fit_cubic",
    "local_frame",
    "process_cell",
    "straight_edge_points",
]
