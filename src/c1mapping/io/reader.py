"""Mesh reader for JSON mesh files.

This module provides the MeshReader class for loading mesh files and
converting them into domain models.
"""

import json
from pathlib import Path

from c1mapping.domain import Mesh
from c1mapping.exceptions import MeshFormatError, MeshLoadError
from c1mapping.io.converter import mesh_from_dict


class MeshReader:
    """Loads JSON mesh files.

    Example:
        reader = MeshReader(Path("annulus.json"))
        mesh = reader.load()
        for cell in mesh.cells:
            print(cell.vertices)
    """

    def __init__(self, mesh_path: Path) -> None:
        """Initialize the mesh reader.

        Args:
            mesh_path: Path to the JSON mesh file
        """
        self._mesh_path = mesh_path
        self._mesh: Mesh | None = None

    def load(self) -> Mesh:
        """Load and convert the mesh file.

        Returns:
            Loaded mesh

        Raises:
            MeshLoadError: If the file does not exist or cannot be read
            MeshFormatError: If the file is not valid JSON or has a bad structure
            BoundaryLookupError: If a cell refers to an undeclared boundary
        """
        if not self._mesh_path.exists():
            raise MeshLoadError(str(self._mesh_path), "file not found")

        try:
            text = self._mesh_path.read_text(encoding="utf-8")
        except OSError as e:
            raise MeshLoadError(str(self._mesh_path), str(e)) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MeshFormatError(str(self._mesh_path), f"invalid JSON: {e}") from e

        try:
            self._mesh = mesh_from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise MeshFormatError(str(self._mesh_path), str(e)) from e

        return self._mesh

    @property
    def mesh(self) -> Mesh:
        """Return the loaded mesh.

        Raises:
            RuntimeError: If the mesh has not been loaded yet
        """
        if self._mesh is None:
            raise RuntimeError("Mesh not loaded. Call load() first.")
        return self._mesh

    @property
    def cell_count(self) -> int:
        """Return the number of cells in the loaded mesh."""
        return self.mesh.cell_count
