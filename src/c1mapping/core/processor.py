"""Parallel processing orchestration for whole meshes.

Cells are independent of each other, so support points can be computed in
worker processes. Each worker receives a self-contained serialized cell and
returns its own list of points.

Key components:
- process_cell: Top-level picklable function for parallel execution
- MeshProcessor: Main orchestrator class for mesh processing
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

from c1mapping.config import C1MappingSettings
from c1mapping.core.mapping import MappingC1
from c1mapping.domain import Mesh, Point
from c1mapping.exceptions import UnsupportedConfigurationError
from c1mapping.io.converter import cell_from_dict, cell_to_dict
from c1mapping.utils import ProcessingLogger, ProcessingStats, configure_logging


def process_cell(
    cell_dict: dict[str, Any],
    settings_dict: dict[str, Any],
    index: int,
) -> dict[str, Any]:
    """Compute the support points of a single cell.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        cell_dict: Serialized cell (from ``cell_to_dict``)
        settings_dict: Serialized mapping and geometry settings
        index: Position of the cell in the mesh

    Returns:
        Dictionary containing either:
        - Success: {"index", "support_points", "curved_edges", "straight_edges", "duration_ms"}
        - Error: {"index", "error", "error_type", "traceback", "duration_ms"}

    Raises:
        UnsupportedConfigurationError: Propagated unchanged, it is never a
            per-cell failure
    """
    start_time = time.time()

    try:
        settings = C1MappingSettings.model_validate(settings_dict)
        cell = cell_from_dict(cell_dict)
        mapping = MappingC1.from_settings(settings)

        support_points = mapping.compute_support_points(cell)
        curved_edges = len(cell.boundary_edge_indices())

        duration_ms = (time.time() - start_time) * 1000
        return {
            "index": index,
            "support_points": [p.to_list() for p in support_points],
            "curved_edges": curved_edges,
            "straight_edges": cell.n_edges - curved_edges,
            "duration_ms": duration_ms,
        }

    except UnsupportedConfigurationError:
        raise

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "index": index,
            "error": str(e),
            "error_type": type(e).__name__,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


@dataclass
class ProcessingResult:
    """Support points per cell index plus run statistics."""

    support_points: dict[int, list[Point]] = field(default_factory=dict)
    stats: ProcessingStats = field(default_factory=ProcessingStats)


class MeshProcessor:
    """Orchestrates support point computation for a mesh.

    Manages the complete workflow:
    1. Validate the mapping configuration
    2. Serialize cells for the workers
    3. Compute support points serially or in worker processes
    4. Collect results and update statistics

    Example:
        settings = C1MappingSettings()
        processor = MeshProcessor(settings)
        result = processor.process(mesh, max_workers=4)
    """

    def __init__(self, config: C1MappingSettings) -> None:
        """Initialize mesh processor with configuration.

        Args:
            config: Settings containing mapping, geometry and processing config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )

    def process(
        self,
        mesh: Mesh,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> ProcessingResult:
        """Compute support points for every cell of a mesh.

        Args:
            mesh: Mesh to process
            max_workers: Maximum worker processes (None = config value, 1 = in-process)
            progress_callback: Optional callback(completed, total) for progress updates

        Returns:
            ProcessingResult with points per cell and statistics

        Raises:
            UnsupportedConfigurationError: If the mapping or any cell has an
                unsupported dimension
        """
        # Fails before any work is scheduled when the configuration is unusable
        MappingC1.from_settings(self.config)

        processing_logger = ProcessingLogger(self.logger)
        result = ProcessingResult(stats=processing_logger.stats)
        result.stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        settings_dict = self.config.model_dump(include={"mapping", "geometry"})
        tasks = {index: cell_to_dict(cell) for index, cell in enumerate(mesh.cells)}

        self.logger.info(
            "Starting mesh processing",
            cells=len(tasks),
            boundary_edges=mesh.boundary_edge_count,
            max_workers=max_workers,
        )

        if max_workers == 1 or len(tasks) <= 1:
            self._process_serial(tasks, settings_dict, processing_logger, result, progress_callback)
        else:
            self._process_parallel(
                tasks, settings_dict, max_workers, processing_logger, result, progress_callback
            )

        result.stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            processed=result.stats.processed_count,
            errors=result.stats.error_count,
            curved_edges=result.stats.curved_edges,
            straight_edges=result.stats.straight_edges,
            duration_seconds=round(result.stats.duration_seconds, 3),
        )

        return result

    def _process_serial(
        self,
        tasks: dict[int, dict[str, Any]],
        settings_dict: dict[str, Any],
        processing_logger: ProcessingLogger,
        result: ProcessingResult,
        progress_callback: Callable[[int, int], None] | None,
    ) -> None:
        total = len(tasks)
        for completed, (index, cell_dict) in enumerate(tasks.items(), start=1):
            processing_logger.log_cell_start(index, len(cell_dict["edges"]))
            cell_result = process_cell(cell_dict, settings_dict, index)
            self._record(cell_result, processing_logger, result)
            if progress_callback is not None:
                progress_callback(completed, total)

    def _process_parallel(
        self,
        tasks: dict[int, dict[str, Any]],
        settings_dict: dict[str, Any],
        max_workers: int | None,
        processing_logger: ProcessingLogger,
        result: ProcessingResult,
        progress_callback: Callable[[int, int], None] | None,
    ) -> None:
        total = len(tasks)
        completed = 0
        pending_futures: dict[Future[dict[str, Any]], int] = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for index, cell_dict in tasks.items():
                processing_logger.log_cell_start(index, len(cell_dict["edges"]))
                future = executor.submit(process_cell, cell_dict, settings_dict, index)
                pending_futures[future] = index

            try:
                for future in as_completed(pending_futures):
                    index = pending_futures.pop(future)

                    try:
                        cell_result = future.result()
                    except UnsupportedConfigurationError:
                        raise
                    except Exception as e:
                        # Executor-level error
                        processing_logger.log_cell_error(
                            cell_index=index,
                            error=str(e),
                            error_type=type(e).__name__,
                            traceback=traceback.format_exc(),
                        )
                    else:
                        self._record(cell_result, processing_logger, result)

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total)

            except (KeyboardInterrupt, UnsupportedConfigurationError):
                self.logger.info("Cancelling pending cells", pending=len(pending_futures))
                executor.shutdown(wait=True, cancel_futures=True)
                raise

    @staticmethod
    def _record(
        cell_result: dict[str, Any],
        processing_logger: ProcessingLogger,
        result: ProcessingResult,
    ) -> None:
        index = cell_result["index"]

        if "error" in cell_result:
            processing_logger.log_cell_error(
                cell_index=index,
                error=cell_result["error"],
                error_type=cell_result["error_type"],
                traceback=cell_result.get("traceback"),
            )
            return

        points = [Point.from_sequence(p) for p in cell_result["support_points"]]
        result.support_points[index] = points
        processing_logger.log_cell_complete(
            cell_index=index,
            curved_edges=cell_result["curved_edges"],
            straight_edges=cell_result["straight_edges"],
            support_points=len(points),
            duration_ms=cell_result.get("duration_ms", 0.0),
        )
