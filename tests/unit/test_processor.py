"""Tests for mesh processing orchestration."""

from unittest.mock import MagicMock, Mock, patch

import pytest

from c1mapping.config import C1MappingSettings, MappingConfig
from c1mapping.core.processor import MeshProcessor, ProcessingResult, process_cell
from c1mapping.domain import Cell, CircularBoundary, Mesh, Point
from c1mapping.exceptions import UnsupportedConfigurationError
from c1mapping.io.converter import cell_to_dict


@pytest.fixture
def annulus_sector() -> Cell:
    """Quarter annulus cell with both arcs on a circle."""
    circle = CircularBoundary()
    return Cell.quadrilateral(
        [Point(1.0, 0.0), Point(2.0, 0.0), Point(0.0, 1.0), Point(0.0, 2.0)],
        boundaries={0: circle, 1: circle},
    )


@pytest.fixture
def unit_square() -> Cell:
    """Interior cell without curved edges."""
    return Cell.quadrilateral(
        [Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0), Point(1.0, 1.0)]
    )


@pytest.fixture
def collapsed_cell() -> Cell:
    """Cell whose bottom edge has zero length."""
    return Cell.quadrilateral(
        [Point(0.0, 0.0), Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 1.0)]
    )


@pytest.fixture
def settings() -> C1MappingSettings:
    """Create test settings."""
    return C1MappingSettings()


@pytest.fixture
def settings_dict(settings: C1MappingSettings) -> dict:
    """Settings in the form shipped to workers."""
    return settings.model_dump(include={"mapping", "geometry"})


def fake_submit(fn, *args):
    """Run the task immediately and wrap its result in a mock future."""
    future = MagicMock()
    future.result.return_value = fn(*args)
    return future


def mock_executor_with(submit) -> MagicMock:
    """Build a context-managed executor mock."""
    executor = MagicMock()
    executor.submit.side_effect = submit
    executor.__enter__.return_value = executor
    executor.__exit__.return_value = None
    return executor


class TestProcessCell:
    """Tests for process_cell function."""

    def test_curved_cell(self, annulus_sector: Cell, settings_dict: dict):
        """Test processing a cell with two curved edges."""
        result = process_cell(cell_to_dict(annulus_sector), settings_dict, 7)

        assert "error" not in result
        assert result["index"] == 7
        assert result["curved_edges"] == 2
        assert result["straight_edges"] == 2
        assert len(result["support_points"]) == 12
        assert result["support_points"][0] == [1.0, 0.0]
        assert result["duration_ms"] >= 0

    def test_straight_cell(self, unit_square: Cell, settings_dict: dict):
        """Test processing an interior cell."""
        result = process_cell(cell_to_dict(unit_square), settings_dict, 0)

        assert result["curved_edges"] == 0
        assert result["straight_edges"] == 4

    def test_degenerate_cell_returns_error(self, collapsed_cell: Cell, settings_dict: dict):
        """Test that geometric failures are reported per cell."""
        result = process_cell(cell_to_dict(collapsed_cell), settings_dict, 3)

        assert result["index"] == 3
        assert result["error_type"] == "DegenerateEdgeError"
        assert "traceback" in result
        assert "support_points" not in result

    def test_malformed_cell_returns_error(self, settings_dict: dict):
        """Test that process_cell handles broken input gracefully."""
        result = process_cell({"dim": 2}, settings_dict, 1)

        assert "error" in result
        assert result["error_type"] == "KeyError"

    def test_min_edge_length_is_applied(self, unit_square: Cell):
        """Test that geometry settings reach the mapping."""
        settings_dict = {"geometry": {"min_edge_length": 5.0}}

        result = process_cell(cell_to_dict(unit_square), settings_dict, 0)

        assert result["error_type"] == "DegenerateEdgeError"

    def test_segment_cell_raises(self, settings_dict: dict):
        """Test that unsupported configurations are not turned into error dicts."""
        cell = Cell.segment(Point(0.0, 0.0), Point(1.0, 0.0))

        with pytest.raises(UnsupportedConfigurationError):
            process_cell(cell_to_dict(cell), settings_dict, 0)


class TestMeshProcessor:
    """Tests for MeshProcessor class."""

    def test_init(self, settings: C1MappingSettings):
        """Test MeshProcessor initialization."""
        with patch('c1mapping.core.processor.configure_logging') as mock_logging:
            mock_logging.return_value = Mock()
            processor = MeshProcessor(settings)

            assert processor.config == settings
            mock_logging.assert_called_once()

    @patch('c1mapping.core.processor.configure_logging')
    def test_process_serial(
        self,
        mock_logging,
        settings: C1MappingSettings,
        annulus_sector: Cell,
        unit_square: Cell,
    ):
        """Test in-process computation of a small mesh."""
        mock_logging.return_value = Mock()
        mesh = Mesh(cells=[annulus_sector, unit_square])

        processor = MeshProcessor(settings)
        result = processor.process(mesh, max_workers=1)

        assert isinstance(result, ProcessingResult)
        assert sorted(result.support_points) == [0, 1]
        assert len(result.support_points[0]) == 12
        assert result.support_points[1][:4] == unit_square.vertices
        assert result.stats.processed_count == 2
        assert result.stats.curved_edges == 2
        assert result.stats.straight_edges == 6
        assert result.stats.support_points == 24
        assert result.stats.error_count == 0
        assert result.stats.duration_seconds >= 0

    @patch('c1mapping.core.processor.configure_logging')
    def test_process_records_cell_errors(
        self,
        mock_logging,
        settings: C1MappingSettings,
        unit_square: Cell,
        collapsed_cell: Cell,
    ):
        """Test that a failing cell does not stop the others."""
        mock_logging.return_value = Mock()
        mesh = Mesh(cells=[unit_square, collapsed_cell])

        processor = MeshProcessor(settings)
        result = processor.process(mesh, max_workers=1)

        assert list(result.support_points) == [0]
        assert result.stats.processed_count == 1
        assert result.stats.error_count == 1
        assert result.stats.errors[0][0] == 1

    @patch('c1mapping.core.processor.configure_logging')
    def test_progress_callback(
        self,
        mock_logging,
        settings: C1MappingSettings,
        unit_square: Cell,
    ):
        """Test that progress is reported after every cell."""
        mock_logging.return_value = Mock()
        mesh = Mesh(cells=[unit_square, unit_square, unit_square])
        calls: list[tuple[int, int]] = []

        processor = MeshProcessor(settings)
        processor.process(mesh, max_workers=1, progress_callback=lambda c, t: calls.append((c, t)))

        assert calls == [(1, 3), (2, 3), (3, 3)]

    @patch('c1mapping.core.processor.configure_logging')
    def test_empty_mesh(self, mock_logging, settings: C1MappingSettings):
        """Test that an empty mesh yields an empty result."""
        mock_logging.return_value = Mock()

        result = MeshProcessor(settings).process(Mesh(cells=[]))

        assert result.support_points == {}
        assert result.stats.processed_count == 0

    @patch('c1mapping.core.processor.configure_logging')
    def test_unsupported_configuration_fails_early(self, mock_logging, unit_square: Cell):
        """Test that a 1D configuration is rejected before any cell runs."""
        mock_logging.return_value = Mock()
        settings = C1MappingSettings(mapping=MappingConfig(dimension=1))
        calls: list[tuple[int, int]] = []

        processor = MeshProcessor(settings)
        with pytest.raises(UnsupportedConfigurationError):
            processor.process(
                Mesh(cells=[unit_square]),
                max_workers=1,
                progress_callback=lambda c, t: calls.append((c, t)),
            )

        assert calls == []

    @patch('c1mapping.core.processor.configure_logging')
    def test_three_dimensional_configuration_propagates(self, mock_logging, unit_square: Cell):
        """Test that a 3D mapping refuses planar cells instead of computing them."""
        mock_logging.return_value = Mock()
        settings = C1MappingSettings(mapping=MappingConfig(dimension=3))

        with pytest.raises(UnsupportedConfigurationError):
            MeshProcessor(settings).process(Mesh(cells=[unit_square]), max_workers=1)

    @patch('c1mapping.core.processor.configure_logging')
    def test_unsupported_cell_propagates(
        self,
        mock_logging,
        settings: C1MappingSettings,
        unit_square: Cell,
    ):
        """Test that a segment cell aborts the whole run."""
        mock_logging.return_value = Mock()
        mesh = Mesh(cells=[unit_square, Cell.segment(Point(0.0, 0.0), Point(1.0, 0.0))])

        with pytest.raises(UnsupportedConfigurationError):
            MeshProcessor(settings).process(mesh, max_workers=1)

    @patch('c1mapping.core.processor.configure_logging')
    @patch('c1mapping.core.processor.ProcessPoolExecutor')
    def test_process_parallel(
        self,
        mock_executor_class,
        mock_logging,
        settings: C1MappingSettings,
        annulus_sector: Cell,
        unit_square: Cell,
    ):
        """Test the worker pool path."""
        mock_logging.return_value = Mock()
        mock_executor_class.return_value = mock_executor_with(fake_submit)
        mesh = Mesh(cells=[annulus_sector, unit_square])
        calls: list[tuple[int, int]] = []

        # Mock as_completed to return futures immediately
        with patch('c1mapping.core.processor.as_completed') as mock_as_completed:
            mock_as_completed.side_effect = lambda futures: list(futures)

            processor = MeshProcessor(settings)
            result = processor.process(
                mesh, max_workers=2, progress_callback=lambda c, t: calls.append((c, t))
            )

        mock_executor_class.assert_called_once_with(max_workers=2)
        assert sorted(result.support_points) == [0, 1]
        assert result.stats.processed_count == 2
        assert result.stats.curved_edges == 2
        assert calls == [(1, 2), (2, 2)]

    @patch('c1mapping.core.processor.configure_logging')
    @patch('c1mapping.core.processor.ProcessPoolExecutor')
    def test_process_parallel_executor_error(
        self,
        mock_executor_class,
        mock_logging,
        settings: C1MappingSettings,
        unit_square: Cell,
    ):
        """Test that a crashed worker is recorded as a cell error."""
        mock_logging.return_value = Mock()

        def crashing_submit(fn, cell_dict, settings_dict, index):
            if index == 1:
                future = MagicMock()
                future.result.side_effect = RuntimeError("worker died")
                return future
            return fake_submit(fn, cell_dict, settings_dict, index)

        mock_executor_class.return_value = mock_executor_with(crashing_submit)

        with patch('c1mapping.core.processor.as_completed') as mock_as_completed:
            mock_as_completed.side_effect = lambda futures: list(futures)

            result = MeshProcessor(settings).process(
                Mesh(cells=[unit_square, unit_square]), max_workers=2
            )

        assert result.stats.processed_count == 1
        assert result.stats.error_count == 1
        assert result.stats.errors == [(1, "worker died")]

    @patch('c1mapping.core.processor.configure_logging')
    @patch('c1mapping.core.processor.ProcessPoolExecutor')
    def test_process_parallel_cancels_on_unsupported(
        self,
        mock_executor_class,
        mock_logging,
        settings: C1MappingSettings,
        unit_square: Cell,
    ):
        """Test that pending cells are cancelled when a worker reports a fault."""
        mock_logging.return_value = Mock()

        def failing_submit(fn, *args):
            future = MagicMock()
            future.result.side_effect = UnsupportedConfigurationError(1, "line support points")
            return future

        executor = mock_executor_with(failing_submit)
        mock_executor_class.return_value = executor

        with patch('c1mapping.core.processor.as_completed') as mock_as_completed:
            mock_as_completed.side_effect = lambda futures: list(futures)

            with pytest.raises(UnsupportedConfigurationError):
                MeshProcessor(settings).process(
                    Mesh(cells=[unit_square, unit_square]), max_workers=2
                )

        executor.shutdown.assert_called_once_with(wait=True, cancel_futures=True)
