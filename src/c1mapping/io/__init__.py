"""Mesh I/O layer for c1mapping.

This module handles reading JSON mesh files and writing computed support
points. It provides a clean abstraction layer between the file format and
the domain models.

Key responsibilities:
- Load meshes with their named boundaries
- Convert dictionaries to domain models and back
- Write support points with a default naming convention

Key classes:
- MeshReader: Load meshes
- SupportPointWriter: Save support points
"""

from c1mapping.io.reader import MeshReader
from c1mapping.io.writer import SupportPointWriter

__all__ = [
    "MeshReader",
    "SupportPointWriter",
]
