"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from c1mapping.domain import Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for cell processing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]c1mapping[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_mesh_info(mesh_path: str, cell_count: int, boundary_names: list[str], boundary_edges: int) -> None:
    """Print mesh information.

    Args:
        mesh_path: Path to the mesh file
        cell_count: Number of cells in the mesh
        boundary_names: Names of the declared boundaries
        boundary_edges: Number of edges lying on a boundary
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(mesh_path)
    console.print(line1)
    console.print(
        f"  {cell_count:,} cells {SYM_DOT} {boundary_edges:,} boundary edges "
        f"{SYM_DOT} {len(boundary_names)} boundaries"
    )
    if boundary_names:
        console.print(f"  {', '.join(boundary_names)}")


def print_processing_info(workers: int, is_auto: bool = False) -> None:
    """Print processing configuration.

    Args:
        workers: Number of parallel workers
        is_auto: Whether the count was auto-detected
    """
    auto_suffix = " (auto)" if is_auto else ""
    console.print(f"  {workers} workers{auto_suffix}")


def print_support_points(support_points: dict[int, list[Point]], precision: int) -> None:
    """Print a table with the support points of every cell.

    Args:
        support_points: Support points per cell index
        precision: Decimal digits for coordinates
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("cell", justify="right")
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")

    for index in sorted(support_points):
        for point_no, point in enumerate(support_points[index]):
            table.add_row(
                str(index) if point_no == 0 else "",
                str(point_no),
                f"{point.x:.{precision}f}",
                f"{point.y:.{precision}f}",
            )

    console.print()
    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    processed: int,
    curved_edges: int,
    straight_edges: int,
    errors: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        processed: Number of cells processed
        curved_edges: Number of edges fitted with a cubic
        straight_edges: Number of edges subdivided along the chord
        errors: Number of cells that failed
        avg_time_ms: Average processing time per cell in milliseconds
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} cells {SYM_DOT} {curved_edges} curved {SYM_DOT} "
        f"{straight_edges} straight {SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.3f}ms avg per cell")


def print_cell_errors(errors: list[tuple[int, str]]) -> None:
    """Print the cells that could not be processed.

    Args:
        errors: (cell index, message) pairs
    """
    for index, message in errors[:20]:
        console.print(f"  [red]{SYM_ERR}[/red] cell {index}: {escape(message)}")
    if len(errors) > 20:
        console.print(f"  ... +{len(errors) - 20} more")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
