"""Logging utilities for c1mapping."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ProcessingStats:
    """Statistics from processing run."""

    processed_count: int = 0
    error_count: int = 0
    curved_edges: int = 0
    straight_edges: int = 0
    support_points: int = 0
    errors: list[tuple[int, str]] = field(default_factory=list)
    cell_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_cell_time_ms(self) -> float | None:
        """Average processing time per cell."""
        if not self.cell_timings_ms:
            return None
        return sum(self.cell_timings_ms) / len(self.cell_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("c1mapping")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_cell_start(self, cell_index: int, n_edges: int) -> None:
        """Log start of cell processing."""
        self._logger.debug("Processing cell", cell=cell_index, edges=n_edges)

    def log_cell_complete(
        self,
        cell_index: int,
        curved_edges: int,
        straight_edges: int,
        support_points: int,
        duration_ms: float,
    ) -> None:
        """Log successful cell processing."""
        self._logger.info(
            "Cell processed",
            cell=cell_index,
            curved=curved_edges,
            straight=straight_edges,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.processed_count += 1
        self._stats.curved_edges += curved_edges
        self._stats.straight_edges += straight_edges
        self._stats.support_points += support_points
        self._stats.cell_timings_ms.append(duration_ms)

    def log_cell_error(
        self,
        cell_index: int,
        error: str,
        error_type: str,
        traceback: str | None = None,
    ) -> None:
        """Log cell processing error."""
        self._logger.error(
            "Cell processing failed",
            cell=cell_index,
            error=error,
            error_type=error_type,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((cell_index, error))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
