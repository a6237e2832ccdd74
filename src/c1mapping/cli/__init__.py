"""Command-line interface for c1mapping.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for cell processing
- Optional table of computed support points
- Detailed error reporting
"""

from c1mapping.cli.app import cli, main

__all__ = ["cli", "main"]
