"""CLI application entry point for c1mapping.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from c1mapping import __version__
from c1mapping.cli.output import (
    console,
    create_progress,
    print_cell_errors,
    print_error,
    print_header,
    print_mesh_info,
    print_processing_info,
    print_step,
    print_success,
    print_support_points,
)
from c1mapping.config import (
    C1MappingSettings,
    GeometryConfig,
    LoggingConfig,
    OutputConfig,
    ProcessingConfig,
)
from c1mapping.core import MappingC1, MeshProcessor
from c1mapping.exceptions import (
    C1MappingError,
    MeshLoadError,
    MeshSaveError,
    UnsupportedConfigurationError,
)
from c1mapping.io import MeshReader, SupportPointWriter

# Create the Typer app
app = typer.Typer(
    name="c1mapping",
    help="Compute C1 cubic mapping support points for the edges of a 2D mesh.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]c1mapping[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def compute(
    mesh_file: Annotated[
        Path,
        typer.Argument(
            help="Path to input JSON mesh file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-support-points.json)",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto, 1 = no worker processes)",
            min=1,
        ),
    ] = None,
    min_edge_length: Annotated[
        float,
        typer.Option(
            "--min-edge-length",
            help="Reject edges not longer than this",
            min=0.0,
        ),
    ] = 0.0,
    show: Annotated[
        bool,
        typer.Option(
            "--show",
            help="Print the computed support points",
        ),
    ] = False,
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            help="Decimal digits shown with --show",
            min=1,
            max=17,
        ),
    ] = 6,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compute the support points of every cell in a mesh.

    Edges on a declared boundary get two points on a cubic that matches the
    boundary normals at both vertices; all other edges get two points on the
    straight chord.

    Example:
        c1mapping annulus.json --show

    This will create annulus-support-points.json next to the mesh.
    """
    if show and quiet:
        print_error("Cannot use --show and --quiet together")
        raise typer.Exit(code=1)

    if not mesh_file.exists():
        print_error(
            f"Input file not found: {mesh_file}",
            details=f"The file '{mesh_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not mesh_file.is_file():
        print_error(
            f"Input path is not a file: {mesh_file}",
            details="Please provide a path to a JSON mesh file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = C1MappingSettings(
        geometry=GeometryConfig(min_edge_length=min_edge_length),
        processing=ProcessingConfig(max_workers=workers),
        output=OutputConfig(precision=precision),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    output_path = output if output is not None else SupportPointWriter.get_output_path(mesh_file)

    try:
        if not quiet:
            print_step("Loading mesh")

        mesh = MeshReader(mesh_file).load()

        if not quiet:
            print_mesh_info(
                mesh_path=str(mesh_file),
                cell_count=mesh.cell_count,
                boundary_names=sorted(mesh.boundaries),
                boundary_edges=mesh.boundary_edge_count,
            )

        if mesh.is_empty():
            if not quiet:
                console.print("\nNo cells found. Nothing to compute.")
            raise typer.Exit(code=0)

        if not quiet:
            actual_workers = workers if workers else os.cpu_count() or 1
            print_step("Computing support points")
            print_processing_info(actual_workers, is_auto=(workers is None))

        processor = MeshProcessor(settings)

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task(
                    f"Computing {mesh.cell_count} cells",
                    total=mesh.cell_count,
                )

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                result = processor.process(
                    mesh,
                    max_workers=workers,
                    progress_callback=update_progress,
                )
        else:
            result = processor.process(mesh, max_workers=workers)

        SupportPointWriter(output_path).write(result.support_points, degree=MappingC1.degree)

        if show:
            print_support_points(result.support_points, settings.output.precision)

        if not quiet:
            stats = result.stats
            print_success(
                output_path=str(output_path),
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                curved_edges=stats.curved_edges,
                straight_edges=stats.straight_edges,
                errors=stats.error_count,
                avg_time_ms=stats.avg_cell_time_ms,
            )
            if stats.errors:
                print_cell_errors(stats.errors)

    except MeshLoadError as e:
        print_error(f"Could not load mesh: {e.reason}")
        raise typer.Exit(code=1)
    except MeshSaveError as e:
        print_error(f"Could not save support points: {e.reason}")
        raise typer.Exit(code=1)
    except UnsupportedConfigurationError as e:
        print_error(str(e), details="C1 mappings are only available for two-dimensional cells.")
        raise typer.Exit(code=1)
    except C1MappingError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
