"""Tests for mesh I/O operations."""

import json
from pathlib import Path

import pytest

from c1mapping.domain import Cell, CircularBoundary, FlatBoundary, Point
from c1mapping.exceptions import BoundaryLookupError, MeshFormatError, MeshLoadError
from c1mapping.io import MeshReader, SupportPointWriter
from c1mapping.io.converter import (
    cell_from_dict,
    cell_to_dict,
    mesh_cell_from_dict,
    mesh_from_dict,
    support_points_to_dict,
)


@pytest.fixture
def mesh_data() -> dict:
    """Two-cell quarter annulus in mesh file form."""
    return {
        "boundaries": {
            "inner": {"type": "circle", "center": [0.0, 0.0]},
            "wall": {"type": "flat"},
        },
        "cells": [
            {
                "vertices": [[1.0, 0.0], [2.0, 0.0], [0.7071, 0.7071], [1.4142, 1.4142]],
                "boundary_edges": {"0": "inner", "2": "wall"},
            },
            {
                "vertices": [[0.7071, 0.7071], [1.4142, 1.4142], [0.0, 1.0], [0.0, 2.0]],
                "boundary_edges": {"0": "inner"},
            },
        ],
    }


@pytest.fixture
def mesh_file(tmp_path: Path, mesh_data: dict) -> Path:
    """Mesh file on disk."""
    path = tmp_path / "annulus.json"
    path.write_text(json.dumps(mesh_data), encoding="utf-8")
    return path


class TestMeshReader:
    """Tests for MeshReader class."""

    def test_load(self, mesh_file: Path):
        """Test loading a valid mesh file."""
        reader = MeshReader(mesh_file)
        mesh = reader.load()

        assert mesh.cell_count == 2
        assert reader.cell_count == 2
        assert sorted(mesh.boundaries) == ["inner", "wall"]
        assert mesh.boundary_edge_count == 3

    def test_boundaries_are_shared(self, mesh_file: Path):
        """Test that cells refer to the same named descriptor."""
        mesh = MeshReader(mesh_file).load()

        inner = mesh.boundaries["inner"]
        assert isinstance(inner, CircularBoundary)
        assert mesh.cells[0].edges[0].boundary is inner
        assert mesh.cells[1].edges[0].boundary is inner
        assert isinstance(mesh.cells[0].edges[2].boundary, FlatBoundary)
        assert mesh.cells[0].edges[1].boundary is None

    def test_missing_file(self, tmp_path: Path):
        """Test loading a file that does not exist."""
        with pytest.raises(MeshLoadError) as exc_info:
            MeshReader(tmp_path / "missing.json").load()

        assert exc_info.value.reason == "file not found"

    def test_invalid_json(self, tmp_path: Path):
        """Test loading a file that is not JSON."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(MeshFormatError, match="invalid JSON"):
            MeshReader(path).load()

    def test_missing_cells(self, tmp_path: Path):
        """Test a file without cell list."""
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"boundaries": {}}), encoding="utf-8")

        with pytest.raises(MeshFormatError, match="cells"):
            MeshReader(path).load()

    def test_bad_vertex_count(self, tmp_path: Path):
        """Test a cell with three vertices."""
        path = tmp_path / "triangle.json"
        path.write_text(
            json.dumps({"cells": [{"vertices": [[0, 0], [1, 0], [0, 1]]}]}),
            encoding="utf-8",
        )

        with pytest.raises(MeshFormatError, match="2 or 4 vertices"):
            MeshReader(path).load()

    def test_unknown_boundary(self, tmp_path: Path, mesh_data: dict):
        """Test a cell that refers to an undeclared boundary."""
        mesh_data["cells"][0]["boundary_edges"] = {"1": "outer"}
        path = tmp_path / "unknown.json"
        path.write_text(json.dumps(mesh_data), encoding="utf-8")

        with pytest.raises(BoundaryLookupError) as exc_info:
            MeshReader(path).load()

        assert exc_info.value.name == "outer"

    @pytest.mark.parametrize(
        ("payload", "message"),
        [
            (
                {"cells": [{"vertices": [[0, 0], [1, 0], [0, 1], [1, 1]], "boundary_edges": ["inner"]}]},
                "boundary_edges",
            ),
            ({"boundaries": ["inner"], "cells": []}, "boundaries"),
            ({"boundaries": {"inner": "circle"}, "cells": []}, "must be an object"),
            ({"cells": ["not a cell"]}, "Cell entries"),
        ],
    )
    def test_malformed_structure(self, tmp_path: Path, payload: dict, message: str):
        """Test that wrongly shaped sections are reported as format errors."""
        path = tmp_path / "malformed.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        with pytest.raises(MeshFormatError, match=message):
            MeshReader(path).load()

    def test_mesh_before_load(self, mesh_file: Path):
        """Test accessing the mesh before loading."""
        reader = MeshReader(mesh_file)

        with pytest.raises(RuntimeError, match="not loaded"):
            _ = reader.mesh


class TestSupportPointWriter:
    """Tests for SupportPointWriter class."""

    def test_write(self, tmp_path: Path):
        """Test writing support points ordered by cell index."""
        path = tmp_path / "out" / "points.json"
        writer = SupportPointWriter(path)

        writer.write(
            {
                2: [Point(0.0, 0.0), Point(1.0, 0.5)],
                0: [Point(-1.0, 0.25)],
            },
            degree=3,
        )

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["degree"] == 3
        assert data["generator"].startswith("c1mapping ")
        assert "created" in data
        assert data["cells"] == [
            {"index": 0, "support_points": [[-1.0, 0.25]]},
            {"index": 2, "support_points": [[0.0, 0.0], [1.0, 0.5]]},
        ]

    def test_output_path_property(self, tmp_path: Path):
        """Test the destination path accessor."""
        path = tmp_path / "points.json"
        assert SupportPointWriter(path).output_path == path

    def test_get_output_path(self):
        """Test default output path generation."""
        result = SupportPointWriter.get_output_path(Path("/meshes/annulus.json"))
        assert result == Path("/meshes/annulus-support-points.json")


class TestConverter:
    """Tests for dictionary conversion helpers."""

    def test_cell_roundtrip_keeps_boundaries(self):
        """Test that worker payloads carry their own descriptors."""
        cell = Cell.quadrilateral(
            [Point(1.0, 0.0), Point(2.0, 0.0), Point(0.0, 1.0), Point(0.0, 2.0)],
            boundaries={0: CircularBoundary(center=Point(0.0, 0.0))},
        )

        data = cell_to_dict(cell)
        restored = cell_from_dict(data)

        assert data["edges"][0]["boundary"] == {"type": "circle", "center": [0.0, 0.0]}
        assert data["edges"][1]["boundary"] is None
        assert restored.dim == 2
        assert restored.vertices == cell.vertices
        assert [e.vertices for e in restored.edges] == [e.vertices for e in cell.edges]
        assert restored.boundary_edge_indices() == [0]

    def test_cell_dict_is_json_serializable(self):
        """Test that the worker payload survives JSON."""
        cell = Cell.quadrilateral(
            [Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0), Point(1.0, 1.0)],
            boundaries={3: FlatBoundary()},
        )

        data = json.loads(json.dumps(cell_to_dict(cell)))

        assert cell_from_dict(data).boundary_edge_indices() == [3]

    def test_mesh_segment_entry(self):
        """Test that two vertices make a one-dimensional cell."""
        circle = CircularBoundary()
        cell = mesh_cell_from_dict(
            {"vertices": [[1.0, 0.0], [0.0, 1.0]], "boundary_edges": {"0": "arc"}},
            {"arc": circle},
        )

        assert cell.dim == 1
        assert cell.edges[0].boundary is circle

    def test_mesh_segment_invalid_edge(self):
        """Test that segments only have edge 0."""
        with pytest.raises(ValueError, match="segment"):
            mesh_cell_from_dict(
                {"vertices": [[1.0, 0.0], [0.0, 1.0]], "boundary_edges": {"1": "arc"}},
                {"arc": CircularBoundary()},
            )

    def test_mesh_top_level_must_be_object(self):
        """Test rejection of non-object mesh files."""
        with pytest.raises(ValueError, match="Top level"):
            mesh_from_dict([])  # type: ignore[arg-type]

    def test_support_points_to_dict(self):
        """Test per-cell output entries."""
        assert support_points_to_dict(4, [Point(0.5, 1.5)]) == {
            "index": 4,
            "support_points": [[0.5, 1.5]],
        }
