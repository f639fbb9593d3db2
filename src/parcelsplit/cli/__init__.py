"""Command-line interface for parcelsplit.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Extent from an image file or explicit width/height
- Table, quiet and JSON output modes
- Detailed error reporting for unreadable files
"""

from parcelsplit.cli.app import cli, main

__all__ = ["cli", "main"]
