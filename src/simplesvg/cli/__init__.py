"""Command-line interface for simplesvg.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Render JSON scene files to SVG
- Print to stdout or write a file
- Verbose/quiet output modes
- Palette listing
"""

from simplesvg.cli.app import cli, main

__all__ = ["cli", "main"]
