"""Writer for computed support points.

This module provides the SupportPointWriter class for saving the support
points of every cell as JSON.
"""

import json
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path

from c1mapping import __version__
from c1mapping.domain import Point
from c1mapping.exceptions import MeshSaveError
from c1mapping.io.converter import support_points_to_dict


class SupportPointWriter:
    """Saves per-cell support points to a JSON file.

    Example:
        writer = SupportPointWriter(Path("annulus-support-points.json"))
        writer.write({0: points}, degree=3)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Path where the JSON file is written
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        """Destination path."""
        return self._output_path

    def write(self, support_points: Mapping[int, list[Point]], degree: int) -> None:
        """Write support points ordered by cell index.

        Args:
            support_points: Support points per cell index
            degree: Polynomial degree of the mapping the points belong to

        Raises:
            MeshSaveError: If the file cannot be written
        """
        payload = {
            "generator": f"c1mapping {__version__}",
            "created": datetime.now().isoformat(timespec="seconds"),
            "degree": degree,
            "cells": [
                support_points_to_dict(index, support_points[index])
                for index in sorted(support_points)
            ],
        }

        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            with self._output_path.open("w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
                f.write("\n")
        except OSError as e:
            raise MeshSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate the default output path for a mesh file.

        Args:
            input_path: Path to the input mesh

        Returns:
            ``{stem}-support-points.json`` next to the input

        Examples:
            >>> SupportPointWriter.get_output_path(Path("meshes/annulus.json"))
            PosixPath('meshes/annulus-support-points.json')
        """
        return input_path.with_name(f"{input_path.stem}-support-points.json")
