"""Boundary descriptors that supply vertex normals for curved edges.

The curve fit only needs one thing from a boundary: the outward unit normals
at the two vertices of an edge. ``BoundaryDescriptor`` captures exactly that
operation so that any boundary representation can be plugged in.

The orientation of the normals does not affect the fitted curve; flipping
either normal leaves the coefficients unchanged.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, runtime_checkable

from c1mapping.domain.cell import Edge
from c1mapping.domain.curve import VertexNormals
from c1mapping.domain.geometry import Point


@runtime_checkable
class BoundaryDescriptor(Protocol):
    """Anything that can report unit normals at the vertices of an edge."""

    def get_normals_at_vertices(self, edge: Edge) -> VertexNormals:
        """Return the outward unit normals at ``edge.v0`` and ``edge.v1``."""
        ...


@dataclass(frozen=True)
class CircularBoundary:
    """Circle (or circular arc) around a fixed center.

    Normals point radially away from the center. The radius is implied by
    the vertices themselves.

    Attributes:
        center: Center of the circle
    """

    kind: ClassVar[str] = "circle"

    center: Point = Point(0.0, 0.0)

    def get_normals_at_vertices(self, edge: Edge) -> VertexNormals:
        return VertexNormals(
            n0=(edge.v0 - self.center).normalized(),
            n1=(edge.v1 - self.center).normalized(),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "center": self.center.to_list()}


@dataclass(frozen=True)
class FlatBoundary:
    """Straight boundary: both normals are perpendicular to the chord."""

    kind: ClassVar[str] = "flat"

    def get_normals_at_vertices(self, edge: Edge) -> VertexNormals:
        chord = edge.v1 - edge.v0
        normal = Point(chord.y, -chord.x).normalized()
        return VertexNormals(n0=normal, n1=normal)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind}


@dataclass(frozen=True)
class PrescribedNormals:
    """Fixed normals at the first and second vertex of an edge.

    The given vectors are normalized on construction. The normals are bound
    to the edge orientation, not to vertex positions: ``n0`` always applies
    at ``edge.v0``. A reversed edge needs ``PrescribedNormals(n1, n0)``.

    Attributes:
        n0: Normal at the first vertex
        n1: Normal at the second vertex
    """

    kind: ClassVar[str] = "normals"

    n0: Point
    n1: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "n0", self.n0.normalized())
        object.__setattr__(self, "n1", self.n1.normalized())

    def get_normals_at_vertices(self, edge: Edge) -> VertexNormals:  # noqa: ARG002
        return VertexNormals(n0=self.n0, n1=self.n1)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "n0": self.n0.to_list(), "n1": self.n1.to_list()}


def boundary_from_dict(data: dict[str, Any]) -> BoundaryDescriptor:
    """Deserialize a boundary descriptor.

    Args:
        data: Dictionary with a ``type`` field and type-specific fields

    Returns:
        Boundary descriptor instance

    Raises:
        ValueError: If the type is unknown or fields are malformed
    """
    if not isinstance(data, dict):
        raise ValueError(f"Boundary description must be an object, got {type(data).__name__}")

    kind = data.get("type")
    if kind == CircularBoundary.kind:
        center = data.get("center", [0.0, 0.0])
        return CircularBoundary(center=Point.from_sequence(center))
    if kind == FlatBoundary.kind:
        return FlatBoundary()
    if kind == PrescribedNormals.kind:
        if "n0" not in data or "n1" not in data:
            raise ValueError("Prescribed normals need both 'n0' and 'n1'")
        return PrescribedNormals(
            n0=Point.from_sequence(data["n0"]),
            n1=Point.from_sequence(data["n1"]),
        )
    raise ValueError(f"Unknown boundary type: {kind!r}")


def boundary_to_dict(boundary: BoundaryDescriptor) -> dict[str, Any]:
    """Serialize a boundary descriptor.

    Raises:
        TypeError: If the descriptor does not know how to serialize itself
    """
    to_dict = getattr(boundary, "to_dict", None)
    if to_dict is None:
        raise TypeError(f"{type(boundary).__name__} cannot be serialized")
    return to_dict()
