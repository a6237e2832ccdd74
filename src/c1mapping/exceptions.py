"""Exception hierarchy for c1mapping."""

from typing import Any


class C1MappingError(Exception):
    """Base exception for all c1mapping errors."""

    pass


class ConfigurationError(C1MappingError):
    """Errors related to mapping configuration."""

    pass


class UnsupportedConfigurationError(ConfigurationError):
    """Operation is not implemented for the requested dimension.

    Raised unconditionally for one-dimensional edge generation, for any
    face-interior support point request and for space dimensions that differ
    from the cell dimension. It signals a programming error, never a
    transient condition, and is not caught anywhere inside the library.
    """

    def __init__(self, dim: int, operation: str, spacedim: int | None = None) -> None:
        self.dim = dim
        self.operation = operation
        self.spacedim = spacedim
        where = f"dim={dim}" if spacedim is None else f"dim={dim}, spacedim={spacedim}"
        super().__init__(f"Unsupported configuration for {operation} ({where})")

    def __reduce__(self) -> tuple[type, tuple[int, str, int | None]]:
        # Re-raised from worker processes, so it must survive pickling
        return (self.__class__, (self.dim, self.operation, self.spacedim))


class GeometryError(C1MappingError):
    """Errors in geometric calculations."""

    pass


class DegenerateEdgeError(GeometryError):
    """Edge is too short to define a local frame."""

    def __init__(self, v0: Any, v1: Any, length: float) -> None:
        self.v0 = v0
        self.v1 = v1
        self.length = length
        super().__init__(f"Degenerate edge {v0} -> {v1}: length {length!r}")


class MeshError(C1MappingError):
    """Errors related to mesh loading or saving."""

    pass


class MeshLoadError(MeshError):
    """Error loading a mesh file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load mesh '{path}': {reason}")


class MeshFormatError(MeshError):
    """Invalid mesh file structure."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid mesh format '{path}': {details}")


class MeshSaveError(MeshError):
    """Error writing support points."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save support points '{path}': {reason}")


class BoundaryLookupError(MeshError):
    """A cell refers to a boundary that was never declared."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Boundary '{name}' is not defined")
